"""Lexical scanner for Lox.

The scanner walks the source once with a single cursor and produces the
token list consumed by the parser. Lexical errors are reported to the
session `Reporter` and scanning carries on, so one run can surface every
bad character in the file. The returned list always ends with an EOF token.
"""

from __future__ import annotations

from typing import List, Optional, Any

from .errors import Reporter
from .tokens import KEYWORDS, Token, TokenType


SINGLE_CHAR_TOKENS = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    '-': TokenType.MINUS,
    '+': TokenType.PLUS,
    ';': TokenType.SEMICOLON,
    '*': TokenType.STAR,
}

# first char -> (type when followed by '=', type otherwise)
ONE_OR_TWO_CHAR_TOKENS = {
    '!': (TokenType.BANG_EQUAL, TokenType.BANG),
    '=': (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    '<': (TokenType.LESS_EQUAL, TokenType.LESS),
    '>': (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_alpha(c: str) -> bool:
    return ('a' <= c <= 'z') or ('A' <= c <= 'Z') or c == '_'


def is_alphanumeric(c: str) -> bool:
    return is_alpha(c) or is_digit(c)


class Scanner:
    def __init__(self, source: str, reporter: Optional[Reporter] = None):
        self.source = source
        self.reporter = reporter if reporter is not None else Reporter()
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> List[Token]:
        while not self.is_at_end():
            # beginning of the next lexeme
            self.start = self.current
            self.scan_token()
        self.tokens.append(Token(TokenType.EOF, '', None, self.line))
        return self.tokens

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def scan_token(self):
        c = self.advance()
        if c in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[c])
            return
        if c in ONE_OR_TWO_CHAR_TOKENS:
            two, one = ONE_OR_TWO_CHAR_TOKENS[c]
            self.add_token(two if self.match('=') else one)
            return
        if c == '/':
            if self.match('/'):
                # a comment runs to the end of the line
                while self.peek() != '\n' and not self.is_at_end():
                    self.advance()
            else:
                self.add_token(TokenType.SLASH)
            return
        if c in (' ', '\r', '\t'):
            return
        if c == '\n':
            self.line += 1
            return
        if c == '"':
            self.string()
            return
        if is_digit(c):
            self.number()
        elif is_alpha(c):
            self.identifier()
        else:
            self.reporter.error(self.line, 'Unexpected character.')

    def advance(self) -> str:
        self.current += 1
        return self.source[self.current - 1]

    def match(self, expected: str) -> bool:
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        if self.is_at_end():
            return '\0'
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def add_token(self, type: TokenType, literal: Any = None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(type, text, literal, self.line))

    def string(self):
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == '\n':
                self.line += 1
            self.advance()
        if self.is_at_end():
            self.reporter.error(self.line, 'Unterminated string.')
            return
        # the closing quote
        self.advance()
        self.add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def number(self):
        while is_digit(self.peek()):
            self.advance()
        # a fractional part needs at least one digit after the '.'
        if self.peek() == '.' and is_digit(self.peek_next()):
            self.advance()
            while is_digit(self.peek()):
                self.advance()
        self.add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def identifier(self):
        while is_alphanumeric(self.peek()):
            self.advance()
        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def scan(source: str, reporter: Optional[Reporter] = None) -> List[Token]:
    """Convert source code into a list of tokens ending with EOF."""
    return Scanner(source, reporter).scan_tokens()
