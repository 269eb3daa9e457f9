import io

from sexpr.__main__ import DEMO, main


def test_demo_string(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == DEMO + "\n"


def test_reads_file(tmp_path, capsys):
    src = tmp_path / "forms.scm"
    src.write_text("(a . b)\n'x\n")
    assert main([str(src)]) == 0
    assert capsys.readouterr().out.splitlines() == ["(a . b)", "(quote x)"]


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(1 2.5)"))
    assert main(["-"]) == 0
    assert capsys.readouterr().out == "(1 2.5)\n"


def test_errors_go_to_stderr_and_reading_continues(tmp_path, capsys):
    src = tmp_path / "bad.scm"
    src.write_text("(ok) ) (still ok) (open")
    assert main([str(src)]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["(ok)", "(still ok)"]
    errors = captured.err.splitlines()
    assert errors == [
        "error: unexpected ) at line 0, column 5",
        "error: unterminated list at line 0, column 18",
    ]


def test_verbose_flag(tmp_path, capsys):
    src = tmp_path / "one.scm"
    src.write_text("x")
    assert main(["-v", str(src)]) == 0
    assert capsys.readouterr().out == "x\n"


def test_usage(capsys):
    assert main(["a", "b"]) == 2
    assert "Usage" in capsys.readouterr().err
