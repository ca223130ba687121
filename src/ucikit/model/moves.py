"""Minimal square, piece and move value objects used in UCI move text.

Squares use Little-Endian Rank-File indexing when converted to integers:
    a1=0, b1=1, ..., h1=7
    a2=8, ...
    a8=56, ..., h8=63
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeAlias

FILES = "abcdefgh"
RANKS = range(1, 9)

_UCI_MOVE_RE = re.compile(r"^([a-h][1-8])([a-h][1-8])([pnbrqk])?$")


class Piece(StrEnum):
    """Piece kinds, valued by their lowercase UCI promotion letter."""

    PAWN = "p"
    KNIGHT = "n"
    BISHOP = "b"
    ROOK = "r"
    QUEEN = "q"
    KING = "k"

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create a piece from its UCI letter, e.g. ``'q'`` → queen."""
        try:
            return cls(char)
        except ValueError:
            raise ValueError(f"Invalid piece character: {char!r}") from None


@dataclass(frozen=True, slots=True)
class Square:
    """A board square given by file letter and rank number."""

    file: str
    rank: int

    def __post_init__(self) -> None:
        if not isinstance(self.file, str) or len(self.file) != 1 or self.file not in FILES:
            raise ValueError(f"Invalid square file: {self.file!r}")
        if isinstance(self.rank, bool) or not isinstance(self.rank, int) or self.rank not in RANKS:
            raise ValueError(f"Invalid square rank: {self.rank!r}")

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"

    # ── Conversions ──────────────────────────────────────────────────────

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse a square name, e.g. ``'e4'``."""
        if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(name[0], int(name[1]))

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Create a square from its 0–63 index."""
        if not 0 <= index < 64:
            raise ValueError(f"Invalid square index: {index!r}")
        return cls(FILES[index & 7], (index >> 3) + 1)

    @property
    def index(self) -> int:
        """0–63 index, a1=0 … h8=63."""
        return (self.rank - 1) * 8 + FILES.index(self.file)


@dataclass(frozen=True, slots=True)
class Move:
    """Syntactic UCI move: origin, destination and optional promotion.

    No legality checks are made; ``e1e8k`` is a perfectly good :class:`Move`.
    """

    from_sq: Square
    to_sq: Square
    promotion: Piece | None = None

    def __str__(self) -> str:
        base = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            base += self.promotion.value
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse long-algebraic text such as ``'e2e4'`` or ``'a7a8q'``."""
        match = _UCI_MOVE_RE.match(text)
        if match is None:
            raise ValueError(f"Invalid UCI move: {text!r}")
        from_name, to_name, promo = match.groups()
        return cls(
            Square.parse(from_name),
            Square.parse(to_name),
            Piece.from_char(promo) if promo else None,
        )


# Moves produced by a codec: a :class:`Move` for the built-in codec, or the
# codec's own move type (e.g. ``chess.Move``).
AnyMove: TypeAlias = Any
