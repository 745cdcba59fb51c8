from lox.ast import Binary, Grouping, Literal, Unary
from lox.printer import AstPrinter
from lox.session import Session
from lox.tokens import Token, TokenType


def test_print_expression_tree():
    expr = Binary(
        Unary(Token(TokenType.MINUS, '-', None, 1), Literal(123.0)),
        Token(TokenType.STAR, '*', None, 1),
        Grouping(Literal(45.67)),
    )
    assert AstPrinter().print(expr) == '(* (- 123) (group 45.67))'


def test_print_literals():
    printer = AstPrinter()
    assert printer.print(Literal(None)) == 'nil'
    assert printer.print(Literal(True)) == 'true'
    assert printer.print(Literal('hi')) == '"hi"'


def test_print_statements(capsys):
    statements = Session().parse('var a = 1; { a = a or nil; } var b;')
    printer = AstPrinter()
    assert [printer.print(s) for s in statements] == [
        '(var a 1)',
        '(block (; (= a (or a nil))))',
        '(var b)',
    ]


def test_print_failed_declaration(capsys):
    statements = Session().parse('print ;')
    assert AstPrinter().print(statements[0]) == '<error>'
