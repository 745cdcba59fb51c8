from lox.errors import Reporter
from lox.scanner import scan
from lox.tokens import Token, TokenType as T


def types(tokens):
    return [t.type for t in tokens]


def test_simple_expression():
    tokens = scan('1+2;')
    assert types(tokens) == [T.NUMBER, T.PLUS, T.NUMBER, T.SEMICOLON, T.EOF]
    assert tokens[0].literal == 1.0
    assert tokens[2].literal == 2.0
    assert tokens[-1].lexeme == ''


def test_two_char_operators_use_maximal_munch():
    tokens = scan('!= == <= >= ! = < > / *')
    assert types(tokens) == [
        T.BANG_EQUAL, T.EQUAL_EQUAL, T.LESS_EQUAL, T.GREATER_EQUAL,
        T.BANG, T.EQUAL, T.LESS, T.GREATER, T.SLASH, T.STAR, T.EOF,
    ]


def test_keywords_and_identifiers():
    tokens = scan('var orchid = nil or _x1;')
    assert types(tokens) == [
        T.VAR, T.IDENTIFIER, T.EQUAL, T.NIL, T.OR, T.IDENTIFIER, T.SEMICOLON, T.EOF,
    ]
    assert tokens[1].lexeme == 'orchid'
    assert tokens[5].lexeme == '_x1'


def test_comments_and_whitespace_produce_no_tokens():
    tokens = scan('// a comment\n\tprint 1; // trailing\r\n')
    assert types(tokens) == [T.PRINT, T.NUMBER, T.SEMICOLON, T.EOF]
    assert tokens[0].line == 2
    assert tokens[-1].line == 3


def test_numbers():
    tokens = scan('3.14 123. 7')
    assert types(tokens) == [T.NUMBER, T.NUMBER, T.DOT, T.NUMBER, T.EOF]
    assert tokens[0].literal == 3.14
    assert tokens[1].lexeme == '123'
    assert tokens[1].literal == 123.0
    assert isinstance(tokens[3].literal, float)


def test_leading_dot_is_not_part_of_number():
    tokens = scan('.5')
    assert types(tokens) == [T.DOT, T.NUMBER, T.EOF]


def test_multiline_string_advances_line():
    tokens = scan('"a\nb" x')
    assert tokens[0].type == T.STRING
    assert tokens[0].literal == 'a\nb'
    assert tokens[0].lexeme == '"a\nb"'
    assert tokens[1].line == 2


def test_no_escape_sequences_in_strings():
    tokens = scan(r'"a\n"')
    assert tokens[0].literal == 'a\\n'


def test_unexpected_characters_are_all_reported(capsys):
    reporter = Reporter()
    tokens = scan('@ 1 #\n$', reporter)
    assert types(tokens) == [T.NUMBER, T.EOF]
    assert reporter.had_error
    assert reporter.messages == [
        '[line 1] Error: Unexpected character.',
        '[line 1] Error: Unexpected character.',
        '[line 2] Error: Unexpected character.',
    ]
    assert capsys.readouterr().err.count('Unexpected character.') == 3


def test_unterminated_string(capsys):
    reporter = Reporter()
    tokens = scan('print "abc\ndef', reporter)
    assert types(tokens) == [T.PRINT, T.EOF]
    assert reporter.messages == ['[line 2] Error: Unterminated string.']


def test_lines_are_non_decreasing():
    tokens = scan('var a = 1;\n\n{\n  print a;\n}\n')
    lines = [t.line for t in tokens]
    assert lines == sorted(lines)
    assert lines[-1] == 6


def test_token_str():
    assert str(Token(T.NUMBER, '1', 1.0, 1)) == 'NUMBER 1 1.0'
    assert str(Token(T.SEMICOLON, ';', None, 1)) == 'SEMICOLON ; None'
