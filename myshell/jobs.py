"""Tracking of background jobs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Any, Iterator

MAX_COMMAND_LENGTH = 1023


@dataclass
class Job:
    """A background job: its number, its leading process and its command text."""

    job_id: int
    process: Any
    command: str

    @property
    def pid(self) -> int:
        return self.process.pid


class JobTable:
    """Background jobs, newest first, numbered from 1."""

    def __init__(self, out: IO[str] | None = None) -> None:
        self._jobs: list[Job] = []
        self._next_id = 1
        self._out = out

    def add(self, process: Any, command: str) -> Job:
        """Register ``process`` as a new job and announce it."""
        job = Job(self._next_id, process, command[:MAX_COMMAND_LENGTH])
        self._next_id += 1
        self._jobs.insert(0, job)
        print(f"[{job.job_id}] {job.pid} running in background", file=self._out, flush=True)
        return job

    def remove(self, pid: int) -> Job | None:
        """Drop the job whose process has ``pid``; return it, or ``None``."""
        for job in self._jobs:
            if job.pid == pid:
                self._jobs.remove(job)
                return job
        return None

    def find(self, job_id: int) -> Job | None:
        return next((job for job in self._jobs if job.job_id == job_id), None)

    def reap(self) -> list[Job]:
        """Remove and return the jobs whose process has finished."""
        finished = [job for job in self._jobs if job.process.poll() is not None]
        for job in finished:
            self._jobs.remove(job)
        return finished

    def __iter__(self) -> Iterator[Job]:
        return iter(list(self._jobs))

    def __len__(self) -> int:
        return len(self._jobs)