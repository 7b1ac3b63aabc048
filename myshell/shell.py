"""The interactive shell: startup file, prompt loop and command dispatch."""

from __future__ import annotations

import os
import signal
import subprocess
from pathlib import Path
from typing import Callable

from .builtins import ExitShell, is_builtin, run_builtin
from .executor import run_pipeline
from .history import History
from .jobs import JobTable
from .parser import parse_line

HISTORY_FILE = ".myshell_history"
RC_FILE = ".myshellrc"


class Shell:
    """A shell session with its job table and history."""

    PROMPT = "myshell> "

    def __init__(
        self,
        history_path: str | os.PathLike[str] | None = None,
        reader: Callable[[str], str] = input,
        on_history: Callable[[str], None] | None = None,
    ) -> None:
        self.history = History()
        self.jobs = JobTable()
        self.history_path = history_path
        self._reader = reader
        self._on_history = on_history

    def execute(self, line: str) -> list[subprocess.Popen] | None:
        """Run one line; returns the started processes, or None for a builtin."""
        self.jobs.reap()
        pipeline = parse_line(line)
        if len(pipeline.commands) == 1 and is_builtin(pipeline.commands[0]):
            run_builtin(pipeline.commands[0], self.jobs)
            return None
        return run_pipeline(pipeline, self.jobs)

    def run_rc(self, path: str | os.PathLike[str]) -> bool:
        """Execute each line of a startup file; False if it cannot be opened."""
        try:
            rc = open(path)
        except OSError:
            return False
        with rc:
            for line in rc:
                self.execute(line)
        return True

    def repl(self) -> None:
        """Read and run lines until end of input, then save the history."""
        while True:
            self.jobs.reap()
            try:
                line = self._reader(self.PROMPT)
            except EOFError:
                break
            if not line:
                continue
            if self.history.add(line) and self._on_history is not None:
                self._on_history(line)
            self.execute(line)
        if self.history_path is not None:
            self.history.save(self.history_path)
        print(flush=True)


def _on_interrupt(signum, frame) -> None:
    print(flush=True)


def _line_editor():
    try:
        import readline
    except ImportError:
        return None
    readline.set_auto_history(False)
    return readline


def main(argv: list[str] | None = None) -> int:
    home = Path.home()
    history_path = home / HISTORY_FILE
    editor = _line_editor()
    shell = Shell(
        history_path=history_path,
        on_history=editor.add_history if editor is not None else None,
    )
    shell.history.load(history_path)
    if editor is not None:
        editor.clear_history()
        for entry in shell.history:
            editor.add_history(entry)

    previous = signal.signal(signal.SIGINT, _on_interrupt)
    try:
        shell.run_rc(home / RC_FILE)
        shell.repl()
    except ExitShell as exc:
        return exc.status
    finally:
        signal.signal(signal.SIGINT, previous)
    return 0