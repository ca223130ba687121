"""Attributes of the ``info`` command."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, TypeAlias

from ucikit.lexicon import SCORE_KEYWORDS, check_int, check_text, is_integer, is_move
from ucikit.model.moves import AnyMove


class ScoreBound(StrEnum):
    """Marks a score as only a bound of the true value."""

    LOWER = "lowerbound"
    UPPER = "upperbound"


# ── Single integer attributes ────────────────────────────────────────────────


class _IntegerAttribute:
    __slots__ = ()

    key: ClassVar[str]
    value: int

    def __post_init__(self) -> None:
        check_int(self.value, f"info {self.key}")


@dataclass(frozen=True, slots=True)
class Depth(_IntegerAttribute):
    key: ClassVar[str] = "depth"

    value: int


@dataclass(frozen=True, slots=True)
class SelDepth(_IntegerAttribute):
    """Selective search depth in plies."""

    key: ClassVar[str] = "seldepth"

    value: int


@dataclass(frozen=True, slots=True)
class Time(_IntegerAttribute):
    """Search time in milliseconds."""

    key: ClassVar[str] = "time"

    value: int


@dataclass(frozen=True, slots=True)
class Nodes(_IntegerAttribute):
    key: ClassVar[str] = "nodes"

    value: int


@dataclass(frozen=True, slots=True)
class MultiPv(_IntegerAttribute):
    """Index of the line in multi-PV mode."""

    key: ClassVar[str] = "multipv"

    value: int


@dataclass(frozen=True, slots=True)
class CurrMoveNumber(_IntegerAttribute):
    key: ClassVar[str] = "currmovenumber"

    value: int


@dataclass(frozen=True, slots=True)
class HashFull(_IntegerAttribute):
    """Hash table occupancy in permill."""

    key: ClassVar[str] = "hashfull"

    value: int


@dataclass(frozen=True, slots=True)
class Nps(_IntegerAttribute):
    key: ClassVar[str] = "nps"

    value: int


@dataclass(frozen=True, slots=True)
class TbHits(_IntegerAttribute):
    key: ClassVar[str] = "tbhits"

    value: int


@dataclass(frozen=True, slots=True)
class SbHits(_IntegerAttribute):
    key: ClassVar[str] = "sbhits"

    value: int


@dataclass(frozen=True, slots=True)
class CpuLoad(_IntegerAttribute):
    """CPU usage in permill."""

    key: ClassVar[str] = "cpuload"

    value: int


# ── Move attributes ──────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Pv:
    """Principal variation."""

    key: ClassVar[str] = "pv"

    moves: tuple[AnyMove, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "moves", tuple(self.moves))


@dataclass(frozen=True, slots=True)
class Refutation:
    """A move followed by the line refuting it."""

    key: ClassVar[str] = "refutation"

    moves: tuple[AnyMove, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "moves", tuple(self.moves))


@dataclass(frozen=True, slots=True)
class CurrMove:
    key: ClassVar[str] = "currmove"

    move: AnyMove


@dataclass(frozen=True, slots=True)
class CurrLine:
    """Line currently searched, optionally tagged with the CPU number."""

    key: ClassVar[str] = "currline"

    cpu_nr: int | None = None
    line: tuple[AnyMove, ...] = ()

    def __post_init__(self) -> None:
        check_int(self.cpu_nr, "currline CPU number", optional=True)
        object.__setattr__(self, "line", tuple(self.line))


# ── Score ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Score:
    """Evaluation in centipawns and/or moves to mate.

    A negative ``mate`` means the engine is getting mated.
    """

    key: ClassVar[str] = "score"

    cp: int | None = None
    mate: int | None = None
    bound: ScoreBound | None = None

    def __post_init__(self) -> None:
        if self.cp is None and self.mate is None:
            raise ValueError("Score needs a centipawn or a mate value")
        check_int(self.cp, "score cp", optional=True)
        check_int(self.mate, "score mate", optional=True)

    @classmethod
    def from_centipawns(cls, cp: int, bound: ScoreBound | None = None) -> Score:
        return cls(cp=cp, bound=bound)

    @classmethod
    def from_mate(cls, mate: int) -> Score:
        return cls(mate=mate)


# ── Rest-of-line attributes ──────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class InfoString:
    """Free text for the GUI to display; always the last attribute."""

    key: ClassVar[str] = "string"

    text: str

    def __post_init__(self) -> None:
        check_text(self.text, "Info string", allow_empty=True)


@dataclass(frozen=True, slots=True)
class AnyInfo:
    """An attribute the protocol does not define, kept as raw text."""

    key: str
    value: str = ""

    def __post_init__(self) -> None:
        # Keys shaped like values would be swallowed by a preceding attribute.
        if (
            not self.key
            or any(ch.isspace() for ch in self.key)
            or is_integer(self.key)
            or is_move(self.key)
        ):
            raise ValueError(f"Invalid info attribute name: {self.key!r}")
        if self.key in INFO_KEYS or self.key in SCORE_KEYWORDS:
            raise ValueError(f"{self.key!r} is a known info keyword")
        check_text(self.value, "Info value", allow_empty=True)


InfoAttribute: TypeAlias = (
    Depth
    | SelDepth
    | Time
    | Nodes
    | Pv
    | MultiPv
    | Score
    | CurrMove
    | CurrMoveNumber
    | HashFull
    | Nps
    | TbHits
    | SbHits
    | CpuLoad
    | InfoString
    | Refutation
    | CurrLine
    | AnyInfo
)

# Integer-valued attributes by key. ``currmovenum`` is a common spelling of
# ``currmovenumber`` in engines in the wild.
INT_ATTRIBUTES: dict[str, type[InfoAttribute]] = {
    cls.key: cls
    for cls in (
        Depth,
        SelDepth,
        Time,
        Nodes,
        MultiPv,
        CurrMoveNumber,
        HashFull,
        Nps,
        TbHits,
        SbHits,
        CpuLoad,
    )
}
INT_ATTRIBUTES["currmovenum"] = CurrMoveNumber

INFO_KEYS = frozenset(INT_ATTRIBUTES) | {
    Pv.key,
    Refutation.key,
    CurrMove.key,
    CurrLine.key,
    Score.key,
    InfoString.key,
}
