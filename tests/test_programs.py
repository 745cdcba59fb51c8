from pathlib import Path

from lox.session import Session, EX_DATAERR, EX_OK, EX_SOFTWARE

PROGRAMS = Path(__file__).parent / 'programs'


def run_file(name):
    session = Session()
    status = session.run_file(str(PROGRAMS / name))
    return session, status


def test_program_fibonacci(capsys):
    _, status = run_file('fibonacci.lox')
    out = capsys.readouterr().out.split()
    assert status == EX_OK
    assert out == ['0', '1', '1', '2', '3', '5', '8', '13', '21', '34']


def test_program_scopes(capsys):
    _, status = run_file('scopes.lox')
    out = capsys.readouterr().out.strip().split('\n')
    assert status == EX_OK
    assert out == [
        'inner a', 'outer b', 'global c',
        'outer a', 'outer b', 'global c',
        'global a', 'global b', 'global c',
    ]


def test_program_factorial(capsys):
    run_file('factorial.lox')
    out = capsys.readouterr().out.strip()
    assert out == '3628800'


def test_program_strings(capsys):
    run_file('strings.lox')
    out = capsys.readouterr().out.strip().split('\n')
    assert out == ['Hello, Lox!', 'match', 'default']


def test_program_runtime_error(capsys):
    session, status = run_file('runtime_error.lox')
    captured = capsys.readouterr()
    assert status == EX_SOFTWARE
    # statements after the failing one never run
    assert captured.out.strip() == 'before'
    assert captured.err.strip() == 'Operands must be two numbers or two strings.\n[line 3]'


def test_program_syntax_errors(capsys):
    session, status = run_file('syntax_errors.lox')
    captured = capsys.readouterr()
    assert status == EX_DATAERR
    assert captured.out == ''
    assert captured.err.strip().split('\n') == [
        "[line 2] Error at 'print': Expect ';' after value.",
        "[line 3] Error at ';': Expect expression.",
    ]
