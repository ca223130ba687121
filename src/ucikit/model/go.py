"""Time and search controls carried by the ``go`` command."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar, TypeAlias

from ucikit.lexicon import check_int
from ucikit.model.moves import AnyMove


@dataclass(frozen=True, slots=True)
class Ponder:
    """``go ponder``: search in ponder mode."""

    keyword: ClassVar[str] = "ponder"


@dataclass(frozen=True, slots=True)
class Infinite:
    """``go infinite``: search until ``stop``."""

    keyword: ClassVar[str] = "infinite"


@dataclass(frozen=True, slots=True)
class MoveTime:
    """``go movetime``: search exactly this many milliseconds."""

    keyword: ClassVar[str] = "movetime"

    milliseconds: int

    def __post_init__(self) -> None:
        check_int(self.milliseconds, "movetime")


@dataclass(frozen=True, slots=True)
class TimeLeft:
    """Clock state sent with ``wtime``/``btime``/``winc``/``binc``/``movestogo``.

    All durations are signed milliseconds; GUIs may send negative values
    when a clock has run over.
    """

    white_time: int | None = None
    black_time: int | None = None
    white_increment: int | None = None
    black_increment: int | None = None
    moves_to_go: int | None = None

    def __post_init__(self) -> None:
        for item in fields(self):
            check_int(getattr(self, item.name), item.name, optional=True)

    @property
    def is_empty(self) -> bool:
        return (
            self.white_time is None
            and self.black_time is None
            and self.white_increment is None
            and self.black_increment is None
            and self.moves_to_go is None
        )


TimeControl: TypeAlias = Ponder | Infinite | MoveTime | TimeLeft


@dataclass(frozen=True, slots=True)
class SearchControl:
    """Non-time search limits of ``go``."""

    search_moves: tuple[AnyMove, ...] = ()
    depth: int | None = None
    nodes: int | None = None
    mate: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "search_moves", tuple(self.search_moves))
        check_int(self.depth, "depth", optional=True)
        check_int(self.nodes, "nodes", optional=True)
        check_int(self.mate, "mate", optional=True)

    @classmethod
    def with_depth(cls, depth: int) -> SearchControl:
        return cls(depth=depth)

    @classmethod
    def with_nodes(cls, nodes: int) -> SearchControl:
        return cls(nodes=nodes)

    @classmethod
    def with_mate(cls, mate: int) -> SearchControl:
        """Search for a mate in *mate* moves."""
        return cls(mate=mate)

    @property
    def is_empty(self) -> bool:
        """``True`` when no limit is set."""
        return (
            not self.search_moves
            and self.depth is None
            and self.nodes is None
            and self.mate is None
        )
