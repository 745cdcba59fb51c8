"""Session control for Lox: runs source text through scan, parse and interpret.

A `Session` owns the `Reporter` holding the run's error state and one
`Interpreter` whose global frame persists for the life of the session, which
is what lets interactive lines build on each other.
"""

from __future__ import annotations

import builtins
from pathlib import Path
from typing import Callable, List, Optional, TextIO

from .ast import Stmt
from .errors import Reporter
from .interpreter import Interpreter
from .parser import Parser
from .scanner import Scanner

# exit statuses, following sysexits.h
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70

PROMPT = '> '
EXIT_COMMAND = 'exit'


class Session:
    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None,
                 debug_level: int = 0, debug_file: Optional[TextIO] = None):
        self.reporter = Reporter(err)
        self.interpreter = Interpreter(self.reporter, out=out, debug_level=debug_level,
                                       debug_file=debug_file)

    @property
    def debug_level(self) -> int:
        return self.interpreter.debug_level

    def parse(self, source: str) -> List[Optional[Stmt]]:
        """Scan and parse source, recording static errors on the reporter."""
        tokens = Scanner(source, self.reporter).scan_tokens()
        if self.debug_level >= 4:
            self.interpreter.debug(f"scanned {len(tokens)} token(s)")
        statements = Parser(tokens, self.reporter).parse()
        if self.debug_level >= 4:
            failed = sum(1 for stmt in statements if stmt is None)
            self.interpreter.debug(f"parsed {len(statements)} declaration(s), {failed} failed")
        return statements

    def run(self, source: str):
        statements = self.parse(source)
        # stop if there was a syntax error
        if self.reporter.had_error:
            return
        self.interpreter.interpret(statements)

    def exit_status(self) -> int:
        if self.reporter.had_error:
            return EX_DATAERR
        if self.reporter.had_runtime_error:
            return EX_SOFTWARE
        return EX_OK

    def run_file(self, path: str) -> int:
        """Run a script file once and return the process exit status."""
        source = Path(path).read_text(encoding='utf-8')
        self.run(source)
        return self.exit_status()

    def run_prompt(self, read_line: Optional[Callable[[str], str]] = None) -> int:
        """Read-execute loop; each line is an independent run.

        Lines come from `read_line` (default: `input`). Ends on the `exit`
        command or end of input.
        """
        if read_line is None:
            read_line = builtins.input
        while True:
            try:
                line = read_line(PROMPT)
            except EOFError:
                break
            if line == EXIT_COMMAND:
                break
            self.reporter.reset()
            self.run(line)
        return EX_OK


def run_program(source: str, debug_level: int = 0) -> Reporter:
    """Convenience function to run a Lox program from a source string.

    Returns the session reporter so callers can check `had_error` and
    `had_runtime_error`.
    """
    session = Session(debug_level=debug_level)
    session.run(source)
    return session.reporter
