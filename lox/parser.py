"""Recursive-descent parser for Lox.

Grammar, from lowest to highest precedence::

    program     -> declaration* EOF
    declaration -> "var" IDENTIFIER ( "=" expression )? ";" | statement
    statement   -> exprStmt | printStmt | block | ifStmt | whileStmt | forStmt
    block       -> "{" declaration* "}"
    ifStmt      -> "if" "(" expression ")" statement ( "else" statement )?
    whileStmt   -> "while" "(" expression ")" statement
    forStmt     -> "for" "(" ( varDecl | exprStmt | ";" )
                   expression? ";" expression? ")" statement
    expression  -> assignment
    assignment  -> logic_or ( "=" assignment )?
    logic_or    -> logic_and ( "or" logic_and )*
    logic_and   -> equality ( "and" equality )*
    equality    -> comparison ( ( "!=" | "==" ) comparison )*
    comparison  -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        -> factor ( ( "-" | "+" ) factor )*
    factor      -> unary ( ( "/" | "*" ) unary )*
    unary       -> ( "!" | "-" ) unary | primary
    primary     -> NUMBER | STRING | "false" | "true" | "nil"
                 | IDENTIFIER | "(" expression ")"

Every rule method returns its node, or None once a syntax error has been
reported. None travels back up to `declaration`, which skips ahead to the
next statement boundary and carries on, so a single parse can report several
independent errors. `for` loops are rewritten into `while` loops here and
have no node of their own.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from .ast import (
    Expr, Stmt, Binary, Grouping, Literal, Unary, Variable, Assign, Logical,
    Expression, Print, Var, Block, If, While,
)
from .errors import Reporter
from .tokens import Token, TokenType


# tokens that can begin a new declaration; synchronization stops before them
STATEMENT_STARTS = {
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
}


class Parser:
    def __init__(self, tokens: List[Token], reporter: Optional[Reporter] = None):
        self.tokens = tokens
        self.reporter = reporter if reporter is not None else Reporter()
        self.current = 0

    def parse(self) -> List[Optional[Stmt]]:
        """Parse the whole token list.

        The result holds one entry per top-level declaration. Declarations
        that failed to parse appear as None.
        """
        statements: List[Optional[Stmt]] = []
        while not self.is_at_end():
            statements.append(self.declaration())
        return statements

    # Token cursor helpers

    def match(self, *types: TokenType) -> bool:
        for type in types:
            if self.check(type):
                self.advance()
                return True
        return False

    def check(self, type: TokenType) -> bool:
        if self.is_at_end():
            return False
        return self.peek().type == type

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    def consume(self, type: TokenType, message: str) -> Optional[Token]:
        if self.check(type):
            return self.advance()
        self.error(self.peek(), message)
        return None

    def error(self, token: Token, message: str):
        self.reporter.token_error(token, message)

    def synchronize(self):
        self.advance()
        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_STARTS:
                return
            self.advance()

    # Statements

    def declaration(self) -> Optional[Stmt]:
        if self.match(TokenType.VAR):
            stmt = self.var_declaration()
        else:
            stmt = self.statement()
        if stmt is None:
            self.synchronize()
        return stmt

    def var_declaration(self) -> Optional[Stmt]:
        name = self.consume(TokenType.IDENTIFIER, 'Expect variable name.')
        if name is None:
            return None
        initializer: Optional[Expr] = None
        if self.match(TokenType.EQUAL):
            initializer = self.expression()
            if initializer is None:
                return None
        if self.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.") is None:
            return None
        return Var(name, initializer)

    def statement(self) -> Optional[Stmt]:
        if self.match(TokenType.FOR):
            return self.for_statement()
        if self.match(TokenType.IF):
            return self.if_statement()
        if self.match(TokenType.PRINT):
            return self.print_statement()
        if self.match(TokenType.WHILE):
            return self.while_statement()
        if self.match(TokenType.LEFT_BRACE):
            statements = self.block()
            return Block(statements) if statements is not None else None
        return self.expression_statement()

    def block(self) -> Optional[List[Stmt]]:
        statements: List[Stmt] = []
        while not self.check(TokenType.RIGHT_BRACE) and not self.is_at_end():
            stmt = self.declaration()
            # a failed inner declaration has already resynchronized
            if stmt is not None:
                statements.append(stmt)
        if self.consume(TokenType.RIGHT_BRACE, "Expect '}' after block.") is None:
            return None
        return statements

    def if_statement(self) -> Optional[Stmt]:
        if self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'if'.") is None:
            return None
        condition = self.expression()
        if condition is None:
            return None
        if self.consume(TokenType.RIGHT_PAREN, "Expect ')' after if condition.") is None:
            return None
        then_branch = self.statement()
        if then_branch is None:
            return None
        else_branch: Optional[Stmt] = None
        if self.match(TokenType.ELSE):
            else_branch = self.statement()
            if else_branch is None:
                return None
        return If(condition, then_branch, else_branch)

    def print_statement(self) -> Optional[Stmt]:
        value = self.expression()
        if value is None:
            return None
        if self.consume(TokenType.SEMICOLON, "Expect ';' after value.") is None:
            return None
        return Print(value)

    def while_statement(self) -> Optional[Stmt]:
        if self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'while'.") is None:
            return None
        condition = self.expression()
        if condition is None:
            return None
        if self.consume(TokenType.RIGHT_PAREN, "Expect ')' after condition.") is None:
            return None
        body = self.statement()
        if body is None:
            return None
        return While(condition, body)

    def for_statement(self) -> Optional[Stmt]:
        if self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'for'.") is None:
            return None

        initializer: Optional[Stmt] = None
        if self.match(TokenType.SEMICOLON):
            pass
        elif self.match(TokenType.VAR):
            initializer = self.var_declaration()
            if initializer is None:
                return None
        else:
            initializer = self.expression_statement()
            if initializer is None:
                return None

        condition: Optional[Expr] = None
        if not self.check(TokenType.SEMICOLON):
            condition = self.expression()
            if condition is None:
                return None
        if self.consume(TokenType.SEMICOLON, "Expect ';' after loop condition.") is None:
            return None

        increment: Optional[Expr] = None
        if not self.check(TokenType.RIGHT_PAREN):
            increment = self.expression()
            if increment is None:
                return None
        if self.consume(TokenType.RIGHT_PAREN, "Expect ')' after for clauses.") is None:
            return None

        body = self.statement()
        if body is None:
            return None

        # desugar: { initializer; while (condition) { body; increment; } }
        if increment is not None:
            body = Block([body, Expression(increment)])
        if condition is None:
            condition = Literal(True)
        body = While(condition, body)
        if initializer is not None:
            body = Block([initializer, body])
        return body

    def expression_statement(self) -> Optional[Stmt]:
        expr = self.expression()
        if expr is None:
            return None
        if self.consume(TokenType.SEMICOLON, "Expect ';' after expression.") is None:
            return None
        return Expression(expr)

    # Expressions

    def expression(self) -> Optional[Expr]:
        return self.assignment()

    def assignment(self) -> Optional[Expr]:
        expr = self.logic_or()
        if expr is None:
            return None
        if self.match(TokenType.EQUAL):
            equals = self.previous()
            value = self.assignment()
            if value is None:
                return None
            if isinstance(expr, Variable):
                return Assign(expr.name, value)
            # reported, but parsing goes on with the left-hand side
            self.error(equals, 'Invalid assignment target.')
        return expr

    def logic_or(self) -> Optional[Expr]:
        return self.left_associative(Logical, self.logic_and, TokenType.OR)

    def logic_and(self) -> Optional[Expr]:
        return self.left_associative(Logical, self.equality, TokenType.AND)

    def equality(self) -> Optional[Expr]:
        return self.left_associative(
            Binary, self.comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)

    def comparison(self) -> Optional[Expr]:
        return self.left_associative(
            Binary, self.term,
            TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL)

    def term(self) -> Optional[Expr]:
        return self.left_associative(Binary, self.factor, TokenType.MINUS, TokenType.PLUS)

    def factor(self) -> Optional[Expr]:
        return self.left_associative(Binary, self.unary, TokenType.SLASH, TokenType.STAR)

    def left_associative(self, node_type: Callable[[Expr, Token, Expr], Expr],
                         operand: Callable[[], Optional[Expr]],
                         *operators: TokenType) -> Optional[Expr]:
        expr = operand()
        if expr is None:
            return None
        while self.match(*operators):
            operator = self.previous()
            right = operand()
            if right is None:
                return None
            expr = node_type(expr, operator, right)
        return expr

    def unary(self) -> Optional[Expr]:
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator = self.previous()
            right = self.unary()
            if right is None:
                return None
            return Unary(operator, right)
        return self.primary()

    def primary(self) -> Optional[Expr]:
        if self.match(TokenType.FALSE):
            return Literal(False)
        if self.match(TokenType.TRUE):
            return Literal(True)
        if self.match(TokenType.NIL):
            return Literal(None)
        if self.match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self.previous().literal)
        if self.match(TokenType.IDENTIFIER):
            return Variable(self.previous())
        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            if expr is None:
                return None
            if self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.") is None:
                return None
            return Grouping(expr)
        self.error(self.peek(), 'Expect expression.')
        return None


def parse(tokens: List[Token], reporter: Optional[Reporter] = None) -> List[Optional[Stmt]]:
    """Parse a token list into statements; failed declarations are None."""
    return Parser(tokens, reporter).parse()
