import sys
from typing import List, Optional, TextIO

from lox.tokens import Token, TokenType


class LoxRuntimeError(Exception):
    """Exception type used to propagate Lox runtime errors."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


class Reporter:
    """Error state of one session.

    Static (lexical and syntax) errors and runtime errors are tracked with
    separate flags. Each diagnostic is written to the error stream and kept
    in `messages` so callers can inspect a run without capturing stderr.
    """
    def __init__(self, err: Optional[TextIO] = None):
        self.err = err
        self.had_error = False
        self.had_runtime_error = False
        self.messages: List[str] = []

    def reset(self):
        self.had_error = False
        self.had_runtime_error = False
        self.messages = []

    def error(self, line: int, message: str):
        self.report(line, '', message)

    def token_error(self, token: Token, message: str):
        if token.type == TokenType.EOF:
            self.report(token.line, ' at end', message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def runtime_error(self, error: LoxRuntimeError):
        self.write(f"{error.message}\n[line {error.token.line}]")
        self.had_runtime_error = True

    def report(self, line: int, where: str, message: str):
        self.write(f"[line {line}] Error{where}: {message}")
        self.had_error = True

    def write(self, text: str):
        self.messages.append(text)
        # resolve stderr at call time so pytest's capsys sees the output
        print(text, file=self.err if self.err is not None else sys.stderr)
