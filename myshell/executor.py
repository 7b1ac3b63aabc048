"""Starting pipelines of external commands."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import IO, Any

from .jobs import JobTable
from .parser import Pipeline, split_redirection


def format_command_line(commands: list[list[str]]) -> str:
    """Render commands the way the job list shows them."""
    parts: list[str] = []
    for index, args in enumerate(commands):
        parts.extend(f"{arg} " for arg in args)
        if index < len(commands) - 1:
            parts.append("| ")
    return "".join(parts)


def _spawn(args: list[str], stdin: Any, stdout: Any) -> subprocess.Popen | None:
    """Start one command, applying its redirection; report failures on stderr."""
    sys.stdout.flush()
    try:
        argv, redirection = split_redirection(args)
    except ValueError as exc:
        print(f"open: {exc}", file=sys.stderr)
        return None

    opened: int | None = None
    try:
        if redirection is not None:
            try:
                if redirection.is_output:
                    opened = os.open(
                        redirection.target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644
                    )
                    stdout = opened
                else:
                    opened = os.open(redirection.target, os.O_RDONLY)
                    stdin = opened
            except OSError as exc:
                print(f"open: {exc.strerror}", file=sys.stderr)
                return None
        if not argv:
            print("myshell: empty command", file=sys.stderr)
            return None
        try:
            return subprocess.Popen(argv, stdin=stdin, stdout=stdout)
        except OSError as exc:
            print(f"myshell: {exc.strerror}", file=sys.stderr)
            return None
    finally:
        if opened is not None:
            os.close(opened)


def run_pipeline(pipeline: Pipeline, jobs: JobTable) -> list[subprocess.Popen]:
    """Run the pipeline's commands connected by pipes.

    In the foreground every started process is waited for; in the background
    the last one is registered as a job.  Returns the started processes.
    """
    commands = pipeline.commands
    if not commands:
        return []

    processes: list[subprocess.Popen] = []
    upstream: IO[bytes] | None = None
    process: subprocess.Popen | None = None
    for index, args in enumerate(commands):
        if upstream is not None:
            stdin: Any = upstream
        else:
            stdin = subprocess.DEVNULL if index else None
        stdout = subprocess.PIPE if index < len(commands) - 1 else None
        try:
            process = _spawn(args, stdin, stdout)
        finally:
            if upstream is not None:
                upstream.close()
        upstream = process.stdout if process is not None else None
        if process is not None:
            processes.append(process)

    if pipeline.background:
        if process is not None:
            jobs.add(process, format_command_line(commands))
        print("[Running in background]", flush=True)
    else:
        for started in processes:
            started.wait()
    return processes