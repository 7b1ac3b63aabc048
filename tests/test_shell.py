import io
import sys
from pathlib import Path

import pytest

from myshell.builtins import ExitShell
from myshell.shell import HISTORY_FILE, RC_FILE, Shell, main

PY = sys.executable


def _reader(lines, prompts=None):
    items = iter(lines)

    def read(prompt):
        if prompts is not None:
            prompts.append(prompt)
        try:
            return next(items)
        except StopIteration:
            raise EOFError from None

    return read


def test_execute_builtin_returns_none(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "sub").mkdir()
    assert Shell().execute("cd sub") is None
    assert Path.cwd() == (tmp_path / "sub").resolve()


def test_execute_pipeline_runs_commands(tmp_path):
    out = tmp_path / "out.txt"
    processes = Shell().execute(f"{PY} -c print(7) > {out}")
    assert [p.returncode for p in processes] == [0]
    assert out.read_text() == "7\n"


def test_execute_exit_raises():
    with pytest.raises(ExitShell):
        Shell().execute("exit")


def test_run_rc_missing_file(tmp_path):
    assert Shell().run_rc(tmp_path / "absent") is False


def test_run_rc_executes_lines(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "sub").mkdir()
    rc = tmp_path / "rc"
    rc.write_text(f"cd sub\n{PY} -c print(1) > out.txt\n")
    assert Shell().run_rc(rc) is True
    assert (tmp_path / "sub" / "out.txt").read_text() == "1\n"


def test_repl_records_history_and_saves(tmp_path, capsys):
    prompts = []
    path = tmp_path / "hist"
    seen = []
    shell = Shell(history_path=path, reader=_reader(["jobs", "jobs", ""], prompts), on_history=seen.append)
    shell.repl()
    assert list(shell.history) == ["jobs"]
    assert seen == ["jobs"]
    assert path.read_text() == "jobs\n"
    assert prompts == [Shell.PROMPT] * 4
    assert capsys.readouterr().out == "\n"


def test_repl_exit_skips_saving(tmp_path):
    path = tmp_path / "hist"
    shell = Shell(history_path=path, reader=_reader(["exit"]))
    with pytest.raises(ExitShell):
        shell.repl()
    assert not path.exists()


def test_main_runs_rc_and_input(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    (tmp_path / RC_FILE).write_text(f"{PY} -c print(2) > rc.txt\n")
    command = f"{PY} -c print(5) > five.txt"
    monkeypatch.setattr(sys, "stdin", io.StringIO(command + "\n"))
    assert main([]) == 0
    assert (tmp_path / "rc.txt").read_text() == "2\n"
    assert (tmp_path / "five.txt").read_text() == "5\n"
    assert (tmp_path / HISTORY_FILE).read_text() == command + "\n"


def test_main_exit_builtin(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("exit\n"))
    assert main() == 0
    assert not (tmp_path / HISTORY_FILE).exists()