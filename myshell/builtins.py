"""Commands the shell runs itself."""

from __future__ import annotations

import os
import re
import signal
import sys
from typing import Callable

from .jobs import Job, JobTable

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ExitShell(Exception):
    """Raised by the ``exit`` builtin to leave the shell."""

    def __init__(self, status: int = 0) -> None:
        super().__init__(status)
        self.status = status


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _error(message: str) -> None:
    print(f"myshell: {message}", file=sys.stderr)


def _cd(args: list[str], jobs: JobTable) -> None:
    if len(args) < 2:
        _error('expected argument to "cd"')
        return
    try:
        os.chdir(args[1])
    except OSError as exc:
        _error(exc.strerror or str(exc))


def _jobs(args: list[str], jobs: JobTable) -> None:
    for job in jobs:
        print(f"[{job.job_id}] {job.pid} {job.command}")


def _lookup(args: list[str], jobs: JobTable) -> Job | None:
    if len(args) < 2:
        _error(f"{args[0]} <job_id>")
        return None
    job = jobs.find(_to_int(args[1]))
    if job is None:
        _error("no such job")
    return job


def _fg(args: list[str], jobs: JobTable) -> None:
    job = _lookup(args, jobs)
    if job is None:
        return
    job.process.send_signal(signal.SIGCONT)
    job.process.wait()
    jobs.remove(job.pid)


def _bg(args: list[str], jobs: JobTable) -> None:
    job = _lookup(args, jobs)
    if job is not None:
        job.process.send_signal(signal.SIGCONT)


_HANDLERS: dict[str, Callable[[list[str], JobTable], None]] = {
    "cd": _cd,
    "jobs": _jobs,
    "fg": _fg,
    "bg": _bg,
}

_BUILTINS = frozenset(_HANDLERS) | {"exit"}


def is_builtin(args: list[str]) -> bool:
    return bool(args) and args[0] in _BUILTINS


def run_builtin(args: list[str], jobs: JobTable) -> bool:
    """Run ``args`` if it names a builtin; return whether it did.

    ``exit`` raises :class:`ExitShell` with status 0.
    """
    if not is_builtin(args):
        return False
    if args[0] == "exit":
        raise ExitShell(0)
    _HANDLERS[args[0]](args, jobs)
    return True