"""Line and token splitting for UCI text."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

_TOKEN_RE = re.compile(r"\S+")


@dataclass(frozen=True, slots=True)
class Token:
    """A whitespace-delimited word and its 0-based span in the line."""

    text: str
    start: int
    end: int

    @property
    def column(self) -> int:
        """1-based column of the first character."""
        return self.start + 1


def iter_command_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every non-blank line of *text*.

    Lines are separated by ``\\n``; a trailing ``\\r`` is dropped. The last
    line does not need a terminator.
    """
    for number, line in enumerate(text.split("\n"), start=1):
        if line.endswith("\r"):
            line = line[:-1]
        if line.strip():
            yield number, line


def tokenize(line: str) -> list[Token]:
    """Split one command line into tokens."""
    return [Token(m.group(), m.start(), m.end()) for m in _TOKEN_RE.finditer(line)]
