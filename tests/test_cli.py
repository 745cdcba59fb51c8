import json

import pytest

from lox.__main__ import main


@pytest.fixture
def script(tmp_path):
    def write(source, name='program.lox'):
        path = tmp_path / name
        path.write_text(source, encoding='utf-8')
        return path
    return write


def test_runs_script(script, capsys):
    assert main([str(script('print 1 + 2;'))]) == 0
    assert capsys.readouterr().out == '3\n'


def test_exit_codes(script, capsys):
    assert main([str(script('print ;'))]) == 65
    assert main([str(script('print nil + 1;'))]) == 70


def test_too_many_arguments(capsys):
    assert main(['a.lox', 'b.lox']) == 64
    assert capsys.readouterr().out.strip() == 'Usage: lox [script]'


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / 'nope.lox')])
    assert excinfo.value.code == 66
    assert 'not found' in capsys.readouterr().err


def test_interactive_mode(monkeypatch, capsys):
    lines = iter(['var a = "hi";', 'print a;'])

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr('builtins.input', fake_input)
    assert main([]) == 0
    assert capsys.readouterr().out == 'hi\n'


def test_emit_and_run_ast(script, capsys):
    source = script('var a = 2; while (a > 0) { print a; a = a - 1; }')
    assert main(['--emit-ast', str(source)]) == 0
    ast_path = source.with_name(source.name + '.ast.json')
    assert capsys.readouterr().out.strip() == str(ast_path)
    data = json.loads(ast_path.read_text(encoding='utf-8'))
    assert data[0]['type'] == 'Var'

    assert main(['--ast', str(ast_path)]) == 0
    assert capsys.readouterr().out.splitlines() == ['2', '1']


def test_emit_ast_refuses_invalid_source(script, capsys):
    source = script('var = 1;')
    assert main(['--emit-ast', str(source)]) == 65
    assert not source.with_name(source.name + '.ast.json').exists()


def test_print_ast(script, capsys):
    assert main(['--print-ast', str(script('print 1 + 2 * 3;'))]) == 0
    assert capsys.readouterr().out.strip() == '(print (+ 1 (* 2 3)))'


def test_verbose_writes_debug_file(script, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(['-vv', str(script('var a = 1; print a;'))]) == 0
    trace = (tmp_path / 'debug.txt').read_text(encoding='utf-8')
    assert 'interpret 2 statement(s)' in trace
    assert 'define a: number = 1 (depth 0)' in trace
    assert capsys.readouterr().out == '1\n'
