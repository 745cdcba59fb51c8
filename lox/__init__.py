# Lox language package
# This package provides a scanner, parser and tree-walking interpreter for Lox.
from .errors import LoxRuntimeError, Reporter
from .interpreter import Interpreter
from .parser import Parser, parse
from .scanner import Scanner, scan
from .session import Session, run_program

__all__ = [
    'run_program',
    'scan',
    'parse',
    'Scanner',
    'Parser',
    'Interpreter',
    'Session',
    'Reporter',
    'LoxRuntimeError',
]
