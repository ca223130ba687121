"""Exceptions raised by the UCI grammar and parser."""

from __future__ import annotations


class UciError(ValueError):
    """Base class for every error raised by :mod:`ucikit`."""


class UciSyntaxError(UciError):
    """A command line does not match the UCI grammar.

    Args:
        reason: Human-readable description of the mismatch.
        line: 1-based line number inside the parsed text.
        column: 1-based column of the offending token.
        text: The offending line, without its terminator.
    """

    def __init__(self, reason: str, *, line: int = 1, column: int = 1, text: str = "") -> None:
        super().__init__(f"line {line}, column {column}: {reason}")
        self.reason = reason
        self.line = line
        self.column = column
        self.text = text


class UnknownCommandError(UciSyntaxError):
    """The leading keyword of a line is not a UCI command."""

    def __init__(self, keyword: str, *, line: int = 1, column: int = 1, text: str = "") -> None:
        super().__init__(f"unknown command {keyword!r}", line=line, column=column, text=text)
        self.keyword = keyword
