"""Turning a command line into a pipeline of argument lists."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

MAX_TOKENS = 64
MAX_COMMANDS = 10

_DELIMITERS = re.compile(r"[ \t\r\n]+")
_OPERATORS = (">", "<")


@dataclass(frozen=True)
class Redirection:
    """A single redirection: ``>`` sends stdout to a file, ``<`` reads stdin from one."""

    operator: str
    target: str

    @property
    def is_output(self) -> bool:
        return self.operator == ">"


@dataclass
class Pipeline:
    """Commands joined by pipes, optionally run in the background."""

    commands: list[list[str]] = field(default_factory=list)
    background: bool = False


def _tokenize(segment: str) -> list[str]:
    tokens = [token for token in _DELIMITERS.split(segment) if token]
    return tokens[: MAX_TOKENS - 1]


def parse_line(line: str) -> Pipeline:
    """Parse a line into a pipeline.

    A trailing ``&`` (as the very last character) marks a background job.
    Empty pipe segments are skipped; at most ``MAX_COMMANDS`` commands and
    ``MAX_TOKENS - 1`` arguments per command are kept.
    """
    background = line.endswith("&")
    if background:
        line = line[:-1]
    segments = [segment for segment in line.split("|") if segment][:MAX_COMMANDS]
    return Pipeline([_tokenize(segment) for segment in segments], background)


def split_redirection(args: list[str]) -> tuple[list[str], Redirection | None]:
    """Split off the first redirection in ``args``.

    Returns the arguments before the operator and the redirection, or the
    arguments unchanged and ``None``.  Anything after the target is dropped.
    """
    for index, token in enumerate(args):
        if token in _OPERATORS:
            if index + 1 >= len(args):
                raise ValueError(f"missing file name after {token!r}")
            return list(args[:index]), Redirection(token, args[index + 1])
    return list(args), None