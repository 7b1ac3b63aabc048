"""Command history with a size limit and a plain-text file format."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

MAX_HISTORY_SIZE = 1000


class History:
    """Entered lines, oldest first, keeping at most ``max_size`` of them."""

    def __init__(self, max_size: int = MAX_HISTORY_SIZE) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._entries: list[str] = []

    def _trim(self) -> None:
        excess = len(self._entries) - self.max_size
        if excess > 0:
            del self._entries[:excess]

    def add(self, line: str) -> bool:
        """Record ``line`` unless it is empty or repeats the last entry."""
        if not line or (self._entries and self._entries[-1] == line):
            return False
        self._entries.append(line)
        self._trim()
        return True

    def load(self, path: str | os.PathLike[str]) -> bool:
        """Append the lines stored in ``path``; return False if it cannot be read."""
        try:
            text = Path(path).read_text()
        except OSError:
            return False
        self._entries.extend(text.splitlines())
        self._trim()
        return True

    def save(self, path: str | os.PathLike[str]) -> None:
        Path(path).write_text("".join(f"{entry}\n" for entry in self._entries))

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)