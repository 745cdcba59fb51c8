from lox.session import EX_DATAERR, EX_OK, EX_SOFTWARE, Session


def feeder(lines):
    it = iter(lines)

    def read_line(prompt):
        assert prompt == '> '
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read_line


def write_script(tmp_path, source):
    path = tmp_path / 'script.lox'
    path.write_text(source, encoding='utf-8')
    return str(path)


def test_run_file_ok(tmp_path, capsys):
    status = Session().run_file(write_script(tmp_path, 'print "ok";'))
    assert status == EX_OK
    assert capsys.readouterr().out == 'ok\n'


def test_run_file_static_error(tmp_path, capsys):
    status = Session().run_file(write_script(tmp_path, 'print "ok"'))
    assert status == EX_DATAERR
    assert capsys.readouterr().err == "[line 1] Error at end: Expect ';' after value.\n"


def test_run_file_runtime_error(tmp_path, capsys):
    status = Session().run_file(write_script(tmp_path, 'print -"ok";'))
    assert status == EX_SOFTWARE


def test_run_file_reads_utf8(tmp_path, capsys):
    Session().run_file(write_script(tmp_path, 'print "héllo ✓";'))
    assert capsys.readouterr().out == 'héllo ✓\n'


def test_prompt_lines_share_globals(capsys):
    status = Session().run_prompt(feeder(['var a = 1;', 'print a;', 'a = a + 1;', 'print a;']))
    assert status == EX_OK
    assert capsys.readouterr().out.splitlines() == ['1', '2']


def test_prompt_error_state_is_reset_each_line(capsys):
    session = Session()
    session.run_prompt(feeder(['print ;', 'print 2;', 'print -nil;', 'print 3;']))
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ['2', '3']
    assert captured.err.splitlines() == [
        "[line 1] Error at ';': Expect expression.",
        'Operand must be a number.',
        '[line 1]',
    ]


def test_prompt_stops_on_exit_command(capsys):
    status = Session().run_prompt(feeder(['print 1;', 'exit', 'print 2;']))
    assert status == EX_OK
    assert capsys.readouterr().out.splitlines() == ['1']
