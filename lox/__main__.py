"""CLI entry point for the Lox interpreter.

Usage:
    python -m lox [-v|-vv|-vvv|-vvvv]               (interactive prompt)
    python -m lox [-v...] <script>
    python -m lox [-v...] --emit-ast <script>
    python -m lox [-v...] --ast <ast_json_file>
    python -m lox --print-ast <script>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given script and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file
  --print-ast   Print the parsed statements in parenthesized form

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero. Exit statuses: 64 usage error, 65 lexical or
syntax error, 66 missing input file, 70 runtime error.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .ast_json import program_from_obj, program_to_obj
from .printer import AstPrinter
from .session import EX_DATAERR, EX_NOINPUT, EX_OK, EX_USAGE, Session


def require_file(path: Path):
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(EX_NOINPUT)


def read_source(path: Path) -> str:
    require_file(path)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def emit_ast(session: Session, program_file: Path) -> int:
    statements = session.parse(read_source(program_file))
    if session.reporter.had_error:
        return EX_DATAERR
    obj = program_to_obj(statements)
    out_path = program_file.with_name(program_file.name + '.ast.json')
    with open(out_path, 'w', encoding='utf-8') as out:
        json.dump(obj, out, ensure_ascii=False, indent=2)
    print(str(out_path))
    return EX_OK


def run_ast(session: Session, ast_path: Path) -> int:
    data = json.loads(read_source(ast_path))
    session.interpreter.interpret(program_from_obj(data))
    return session.exit_status()


def print_ast(session: Session, program_file: Path) -> int:
    statements = session.parse(read_source(program_file))
    printer = AstPrinter()
    for stmt in statements:
        print(printer.print(stmt))
    return session.exit_status()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='lox', description="Lox language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='LOX_FILE', help='emit AST JSON for the given script')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    group.add_argument('--print-ast', metavar='LOX_FILE', help='print the parsed statements')
    parser.add_argument('script', nargs='*', help='Lox script to execute; omit for a prompt')
    args = parser.parse_args(argv)

    if len(args.script) > 1:
        print("Usage: lox [script]")
        return EX_USAGE

    debug_fp: Optional[TextIO] = open('debug.txt', 'w', encoding='utf-8') if args.v > 0 else None
    try:
        session = Session(debug_level=args.v, debug_file=debug_fp)
        if args.emit_ast:
            return emit_ast(session, Path(args.emit_ast))
        if args.ast:
            return run_ast(session, Path(args.ast))
        if args.print_ast:
            return print_ast(session, Path(args.print_ast))
        if args.script:
            script = Path(args.script[0])
            require_file(script)
            return session.run_file(str(script))
        return session.run_prompt()
    finally:
        if debug_fp:
            debug_fp.close()


if __name__ == '__main__':
    sys.exit(main())
