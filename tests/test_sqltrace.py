from hdbdriver import sqltrace


def test_set_on_and_off():
    sqltrace.set_on(True)
    assert sqltrace.is_on() is True
    sqltrace.set_on(False)
    assert sqltrace.is_on() is False


def test_traceln_writes_to_stdout(capsys):
    sqltrace.traceln("select 1 from dummy")
    out = capsys.readouterr().out
    assert out.startswith("hdb ")
    assert "select 1 from dummy" in out


def test_traceln_separates_with_spaces(capsys):
    sqltrace.traceln("a", 1, "b")
    assert "a 1 b" in capsys.readouterr().out


def test_tracef_formats(capsys):
    sqltrace.tracef("%s %d", "query", 3)
    assert "query 3" in capsys.readouterr().out


def test_tracef_without_args_keeps_percent(capsys):
    sqltrace.tracef("100%")
    assert "100%" in capsys.readouterr().out