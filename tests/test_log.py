from gcommon.log import echo, log


def test_log_uses_default_kind(capsys):
    log("hello")
    assert capsys.readouterr().out == "type=default,msg=hello\n"


def test_log_with_kind(capsys):
    log("setsockopt failed!", "CSocket")
    assert capsys.readouterr().out == "type=CSocket,msg=setsockopt failed!\n"


def test_echo_matches_log(capsys):
    log("same text", "k")
    logged = capsys.readouterr().out
    echo("same text", "k")
    echoed = capsys.readouterr().out
    assert logged == echoed
    assert echoed.startswith("type=k,msg=")


def test_each_call_is_one_line(capsys):
    echo("a")
    echo("b")
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["type=default,msg=a", "type=default,msg=b"]