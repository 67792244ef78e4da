import io
import json
import pytest
from backend import config as CFG
from lineedit.__main__ import main

def test_scripted_commands_print_state(capsys):
    rc = main(["-c", "i h", "-c", "i i", "-c", "l", "-c", "d"])
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-2:] == ["Text: i", "Cursor Position: 0"]

def test_scripted_json_and_quit_stops(capsys):
    main(["--json", "-c", "i a", "-c", "q", "-c", "i b"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["text"] == "a"

def test_interactive_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("i x\n\nz\ns x yz\nq\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert CFG.WELCOME in out
    assert CFG.INVALID_COMMAND in out
    assert "Text: yz" in out
    assert out.rstrip().endswith(CFG.GOODBYE)

def test_interactive_eof_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("i a\n"))
    assert main(["--no-banner"]) == 0
    out = capsys.readouterr().out
    assert CFG.WELCOME not in out
    assert "Text: a" in out
    assert CFG.GOODBYE in out

def test_module_api():
    import frontend
    try:
        frontend.initialize()
        frontend.execute("i o")
        frontend.execute("i k")
        assert frontend.snapshot().text == "ok"
        frontend.initialize()
        assert frontend.snapshot().text == ""
    finally:
        frontend.shutdown()
    assert frontend._engine is None

def test_module_api_shutdown_releases_engine():
    import frontend
    frontend.initialize()
    eng = frontend._engine
    frontend.shutdown()
    assert not eng.started
    with pytest.raises(RuntimeError):
        frontend.snapshot()
    frontend.shutdown()  # idempotent

def test_module_api_requires_initialize(monkeypatch):
    import frontend
    monkeypatch.setattr(frontend, "_engine", None)
    with pytest.raises(RuntimeError):
        frontend.execute("d")

def test_scripted_quit_says_goodbye(capsys):
    assert main(["-c", "i a", "-c", "q", "-c", "i b"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Text: a", "Cursor Position: 1", CFG.GOODBYE]

def test_scripted_without_quit_has_no_goodbye(capsys):
    main(["-c", "i a"])
    assert CFG.GOODBYE not in capsys.readouterr().out
