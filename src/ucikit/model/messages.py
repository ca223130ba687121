"""UCI message variants.

Every message is an immutable value object. Engine-bound messages are sent by
the GUI to the engine; GUI-bound messages travel the other way. ``Message`` is
the closed union of all variants, and :class:`Unknown` stands for a line that
could not be parsed.

Quick start::

    from ucikit import Go, TimeLeft

    msg = Go(time_control=TimeLeft(white_time=60_000, black_time=58_500))
    print(msg)  # go wtime 60000 btime 58500
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, StrEnum
from typing import TYPE_CHECKING, ClassVar, TypeAlias

from ucikit.lexicon import check_text, check_value, fen_problem
from ucikit.model.go import Infinite, MoveTime, Ponder, SearchControl, TimeControl, TimeLeft
from ucikit.model.info import AnyInfo, InfoAttribute, InfoString
from ucikit.model.moves import AnyMove
from ucikit.model.options import OptionConfig

if TYPE_CHECKING:
    from ucikit.codecs.base import MoveCodec
    from ucikit.errors import UciSyntaxError


class CommunicationDirection(Enum):
    """Which side of the connection a message is addressed to."""

    GUI_TO_ENGINE = "engine-bound"
    ENGINE_TO_GUI = "gui-bound"


class ProtectionState(StrEnum):
    """Copy protection or registration check status."""

    CHECKING = "checking"
    OK = "ok"
    ERROR = "error"


class UciMessage:
    """Shared behaviour of all message variants."""

    __slots__ = ()

    keyword: ClassVar[str]
    direction: ClassVar[CommunicationDirection | None] = None

    def serialize(self, codec: MoveCodec | None = None) -> str:
        """Canonical protocol line for this message, without terminator."""
        from ucikit.serializer import serialize

        return serialize(self, codec)  # type: ignore[arg-type]

    def encode(self, codec: MoveCodec | None = None) -> bytes:
        """UTF-8 bytes of the canonical line including the ``\\n`` terminator."""
        return (self.serialize(codec) + "\n").encode("utf-8")

    def __str__(self) -> str:
        return self.serialize()

    @property
    def is_unknown(self) -> bool:
        return False


class EngineBoundMessage(UciMessage):
    __slots__ = ()

    direction: ClassVar[CommunicationDirection | None] = CommunicationDirection.GUI_TO_ENGINE


class GuiBoundMessage(UciMessage):
    __slots__ = ()

    direction: ClassVar[CommunicationDirection | None] = CommunicationDirection.ENGINE_TO_GUI


# ── Engine-bound ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Uci(EngineBoundMessage):
    keyword: ClassVar[str] = "uci"


@dataclass(frozen=True, slots=True)
class Debug(EngineBoundMessage):
    """Switch the engine's debug mode on or off."""

    keyword: ClassVar[str] = "debug"

    on: bool


@dataclass(frozen=True, slots=True)
class IsReady(EngineBoundMessage):
    keyword: ClassVar[str] = "isready"


@dataclass(frozen=True, slots=True)
class Register(EngineBoundMessage):
    """Register the engine now (``name`` + ``code``) or ``later``."""

    keyword: ClassVar[str] = "register"

    later: bool = False
    name: str | None = None
    code: str | None = None

    def __post_init__(self) -> None:
        if self.later:
            if self.name is not None or self.code is not None:
                raise ValueError("register later takes no name or code")
            return
        if self.name is None or self.code is None:
            raise ValueError("register needs both a name and a code, or later")
        check_text(self.name, "Registration name", reserved=("code",))
        check_text(self.code, "Registration code")

    @classmethod
    def for_later(cls) -> Register:
        return cls(later=True)

    @classmethod
    def with_code(cls, name: str, code: str) -> Register:
        return cls(name=name, code=code)


@dataclass(frozen=True, slots=True)
class Position(EngineBoundMessage):
    """Set up a position from the start or a FEN, then play ``moves``."""

    keyword: ClassVar[str] = "position"

    startpos: bool = False
    fen: str | None = None
    moves: tuple[AnyMove, ...] = ()

    def __post_init__(self) -> None:
        if self.startpos == (self.fen is not None):
            raise ValueError("position needs exactly one of startpos or fen")
        if self.fen is not None:
            fields = self.fen.split()
            problem = fen_problem(fields)
            if problem is not None:
                raise ValueError(problem[1])
            object.__setattr__(self, "fen", " ".join(fields))
        object.__setattr__(self, "moves", tuple(self.moves))

    @classmethod
    def start(cls, moves: tuple[AnyMove, ...] = ()) -> Position:
        return cls(startpos=True, moves=moves)

    @classmethod
    def from_fen(cls, fen: str, moves: tuple[AnyMove, ...] = ()) -> Position:
        return cls(fen=fen, moves=moves)


@dataclass(frozen=True, slots=True)
class SetOption(EngineBoundMessage):
    """Change an engine option; ``value=None`` presses a button option."""

    keyword: ClassVar[str] = "setoption"

    name: str
    value: str | None = None

    def __post_init__(self) -> None:
        check_text(self.name, "Option name", reserved=("value",))
        if self.value is not None:
            check_value(self.value, "Option value")

    def as_bool(self) -> bool | None:
        """The value as a ``check`` option boolean, if it is one."""
        if self.value == "true":
            return True
        if self.value == "false":
            return False
        return None

    def as_int(self) -> int | None:
        """The value as a ``spin`` option integer, if it is one."""
        if self.value is None:
            return None
        try:
            return int(self.value)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class UciNewGame(EngineBoundMessage):
    keyword: ClassVar[str] = "ucinewgame"


@dataclass(frozen=True, slots=True)
class Stop(EngineBoundMessage):
    keyword: ClassVar[str] = "stop"


@dataclass(frozen=True, slots=True)
class PonderHit(EngineBoundMessage):
    keyword: ClassVar[str] = "ponderhit"


@dataclass(frozen=True, slots=True)
class Quit(EngineBoundMessage):
    keyword: ClassVar[str] = "quit"


@dataclass(frozen=True, slots=True)
class Go(EngineBoundMessage):
    """Start searching under the given time and search controls.

    Empty controls are normalised to ``None``: ``go`` alone carries neither.
    """

    keyword: ClassVar[str] = "go"

    time_control: TimeControl | None = None
    search_control: SearchControl | None = None

    def __post_init__(self) -> None:
        if isinstance(self.time_control, TimeLeft) and self.time_control.is_empty:
            object.__setattr__(self, "time_control", None)
        if self.search_control is not None and self.search_control.is_empty:
            object.__setattr__(self, "search_control", None)

    @classmethod
    def ponder(cls) -> Go:
        return cls(time_control=Ponder())

    @classmethod
    def infinite(cls) -> Go:
        return cls(time_control=Infinite())

    @classmethod
    def movetime(cls, milliseconds: int) -> Go:
        return cls(time_control=MoveTime(milliseconds))

    @classmethod
    def time_left(
        cls,
        white_time: int | None = None,
        black_time: int | None = None,
        white_increment: int | None = None,
        black_increment: int | None = None,
        moves_to_go: int | None = None,
    ) -> Go:
        """Search with the given clock state."""
        return cls(
            time_control=TimeLeft(
                white_time, black_time, white_increment, black_increment, moves_to_go
            )
        )


# ── GUI-bound ────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Id(GuiBoundMessage):
    """Engine identification: exactly one of ``name`` or ``author``."""

    keyword: ClassVar[str] = "id"

    name: str | None = None
    author: str | None = None

    def __post_init__(self) -> None:
        if (self.name is None) == (self.author is None):
            raise ValueError("id needs exactly one of name or author")
        check_text(self.name or self.author or "", "Id text")

    @classmethod
    def engine_name(cls, name: str) -> Id:
        return cls(name=name)

    @classmethod
    def engine_author(cls, author: str) -> Id:
        return cls(author=author)


@dataclass(frozen=True, slots=True)
class UciOk(GuiBoundMessage):
    keyword: ClassVar[str] = "uciok"


@dataclass(frozen=True, slots=True)
class ReadyOk(GuiBoundMessage):
    keyword: ClassVar[str] = "readyok"


@dataclass(frozen=True, slots=True)
class BestMove(GuiBoundMessage):
    keyword: ClassVar[str] = "bestmove"

    best_move: AnyMove
    ponder: AnyMove | None = None

    @classmethod
    def with_ponder(cls, best_move: AnyMove, ponder: AnyMove) -> BestMove:
        return cls(best_move, ponder)


@dataclass(frozen=True, slots=True)
class CopyProtection(GuiBoundMessage):
    keyword: ClassVar[str] = "copyprotection"

    state: ProtectionState


@dataclass(frozen=True, slots=True)
class Registration(GuiBoundMessage):
    keyword: ClassVar[str] = "registration"

    state: ProtectionState


@dataclass(frozen=True, slots=True)
class Option(GuiBoundMessage):
    """Announce one engine option."""

    keyword: ClassVar[str] = "option"

    config: OptionConfig

    @property
    def name(self) -> str:
        return self.config.name


@dataclass(frozen=True, slots=True)
class Info(GuiBoundMessage):
    """Search information; attributes keep their order and repetitions."""

    keyword: ClassVar[str] = "info"

    attributes: tuple[InfoAttribute, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", tuple(self.attributes))
        # string and unknown attributes run to the end of the line.
        for attribute in self.attributes[:-1]:
            if isinstance(attribute, (InfoString, AnyInfo)):
                raise ValueError(f"info {attribute.key!r} must be the last attribute")


# ── Unparsed ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Unknown(UciMessage):
    """A line that matched no command, with the error explaining why."""

    keyword: ClassVar[str] = ""

    text: str
    error: UciSyntaxError | None = field(default=None, compare=False)

    @property
    def is_unknown(self) -> bool:
        return True


Message: TypeAlias = (
    Uci
    | Debug
    | IsReady
    | Register
    | Position
    | SetOption
    | UciNewGame
    | Stop
    | PonderHit
    | Quit
    | Go
    | Id
    | UciOk
    | ReadyOk
    | BestMove
    | CopyProtection
    | Registration
    | Option
    | Info
    | Unknown
)
