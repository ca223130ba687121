"""Render messages as canonical UCI lines.

Every renderer returns the line without its terminator. Parsing the output
of :func:`serialize` yields a message equal to the input, so canonical text
is stable under a parse/serialize round-trip.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ucikit.codecs.base import DEFAULT_CODEC, MoveCodec
from ucikit.lexicon import encode_text
from ucikit.model.go import Infinite, MoveTime, Ponder, SearchControl, TimeControl, TimeLeft
from ucikit.model.info import (
    AnyInfo,
    CurrLine,
    CurrMove,
    InfoAttribute,
    InfoString,
    Pv,
    Refutation,
    Score,
)
from ucikit.model.messages import (
    BestMove,
    CopyProtection,
    Debug,
    Go,
    Id,
    Info,
    IsReady,
    Message,
    Option,
    PonderHit,
    Position,
    Quit,
    ReadyOk,
    Register,
    Registration,
    SetOption,
    Stop,
    Uci,
    UciNewGame,
    UciOk,
    Unknown,
)
from ucikit.model.options import ButtonOption, CheckOption, ComboOption, SpinOption, StringOption


def _join(parts: Iterable[str]) -> str:
    return " ".join(part for part in parts if part)


def _moves(codec: MoveCodec, moves: Iterable[object]) -> list[str]:
    return [codec.format_move(move) for move in moves]


# ── Engine-bound ─────────────────────────────────────────────────────────────


def _bare(message: Message, codec: MoveCodec) -> str:
    return message.keyword


def _debug(message: Debug, codec: MoveCodec) -> str:
    return f"debug {'on' if message.on else 'off'}"


def _register(message: Register, codec: MoveCodec) -> str:
    if message.later:
        return "register later"
    return f"register name {message.name} code {message.code}"


def _position(message: Position, codec: MoveCodec) -> str:
    parts = ["position", "startpos" if message.startpos else f"fen {message.fen}"]
    if message.moves:
        parts.append("moves")
        parts.extend(_moves(codec, message.moves))
    return _join(parts)


def _setoption(message: SetOption, codec: MoveCodec) -> str:
    if message.value is None:
        return f"setoption name {message.name}"
    return f"setoption name {message.name} value {encode_text(message.value)}"


def _time_control(control: TimeControl) -> list[str]:
    if isinstance(control, (Ponder, Infinite)):
        return [control.keyword]
    if isinstance(control, MoveTime):
        return [f"movetime {control.milliseconds}"]
    parts: list[str] = []
    for keyword, value in (
        ("wtime", control.white_time),
        ("btime", control.black_time),
        ("winc", control.white_increment),
        ("binc", control.black_increment),
        ("movestogo", control.moves_to_go),
    ):
        if value is not None:
            parts.append(f"{keyword} {value}")
    return parts


def _search_control(control: SearchControl, codec: MoveCodec) -> list[str]:
    parts: list[str] = []
    for keyword, value in (
        ("depth", control.depth),
        ("nodes", control.nodes),
        ("mate", control.mate),
    ):
        if value is not None:
            parts.append(f"{keyword} {value}")
    if control.search_moves:
        parts.append("searchmoves")
        parts.extend(_moves(codec, control.search_moves))
    return parts


def _go(message: Go, codec: MoveCodec) -> str:
    parts = ["go"]
    if message.time_control is not None:
        parts.extend(_time_control(message.time_control))
    if message.search_control is not None:
        parts.extend(_search_control(message.search_control, codec))
    return _join(parts)


# ── GUI-bound ────────────────────────────────────────────────────────────────


def _id(message: Id, codec: MoveCodec) -> str:
    if message.name is not None:
        return f"id name {message.name}"
    return f"id author {message.author}"


def _bestmove(message: BestMove, codec: MoveCodec) -> str:
    line = f"bestmove {codec.format_move(message.best_move)}"
    if message.ponder is not None:
        line += f" ponder {codec.format_move(message.ponder)}"
    return line


def _copyprotection(message: CopyProtection, codec: MoveCodec) -> str:
    return f"copyprotection {message.state}"


def _registration(message: Registration, codec: MoveCodec) -> str:
    return f"registration {message.state}"


def _option(message: Option, codec: MoveCodec) -> str:
    config = message.config
    parts = [f"option name {config.name} type {config.type_name}"]
    if isinstance(config, CheckOption):
        if config.default is not None:
            parts.append(f"default {'true' if config.default else 'false'}")
    elif isinstance(config, SpinOption):
        for keyword, value in (("default", config.default), ("min", config.min), ("max", config.max)):
            if value is not None:
                parts.append(f"{keyword} {value}")
    elif isinstance(config, ComboOption):
        if config.default is not None:
            parts.append(f"default {encode_text(config.default)}")
        parts.extend(f"var {encode_text(variant)}" for variant in config.variants)
    elif isinstance(config, StringOption):
        if config.default is not None:
            parts.append(f"default {encode_text(config.default)}")
    elif not isinstance(config, ButtonOption):
        raise TypeError(f"Unsupported option type: {type(config).__name__}")
    return _join(parts)


def _score(score: Score) -> str:
    parts = ["score"]
    if score.cp is not None:
        parts.append(f"cp {score.cp}")
    if score.mate is not None:
        parts.append(f"mate {score.mate}")
    if score.bound is not None:
        parts.append(str(score.bound))
    return _join(parts)


def _info_attribute(attribute: InfoAttribute, codec: MoveCodec) -> str:
    if isinstance(attribute, (Pv, Refutation)):
        return _join([attribute.key, *_moves(codec, attribute.moves)])
    if isinstance(attribute, CurrMove):
        return f"currmove {codec.format_move(attribute.move)}"
    if isinstance(attribute, CurrLine):
        cpu = str(attribute.cpu_nr) if attribute.cpu_nr is not None else ""
        return _join(["currline", cpu, *_moves(codec, attribute.line)])
    if isinstance(attribute, Score):
        return _score(attribute)
    if isinstance(attribute, InfoString):
        return _join(["string", attribute.text])
    if isinstance(attribute, AnyInfo):
        return _join([attribute.key, attribute.value])
    return f"{attribute.key} {attribute.value}"


def _info(message: Info, codec: MoveCodec) -> str:
    return _join(["info", *(_info_attribute(a, codec) for a in message.attributes)])


def _unknown(message: Unknown, codec: MoveCodec) -> str:
    return message.text


_Renderer = Callable[[Message, MoveCodec], str]

_RENDERERS: dict[type, _Renderer] = {
    Uci: _bare,
    Debug: _debug,  # type: ignore[dict-item]
    IsReady: _bare,
    Register: _register,  # type: ignore[dict-item]
    Position: _position,  # type: ignore[dict-item]
    SetOption: _setoption,  # type: ignore[dict-item]
    UciNewGame: _bare,
    Stop: _bare,
    PonderHit: _bare,
    Quit: _bare,
    Go: _go,  # type: ignore[dict-item]
    Id: _id,  # type: ignore[dict-item]
    UciOk: _bare,
    ReadyOk: _bare,
    BestMove: _bestmove,  # type: ignore[dict-item]
    CopyProtection: _copyprotection,  # type: ignore[dict-item]
    Registration: _registration,  # type: ignore[dict-item]
    Option: _option,  # type: ignore[dict-item]
    Info: _info,  # type: ignore[dict-item]
    Unknown: _unknown,  # type: ignore[dict-item]
}


def serialize(message: Message, codec: MoveCodec | None = None) -> str:
    """Return the canonical protocol line for *message*, without terminator.

    Example::

        >>> serialize(Go(time_control=MoveTime(500)))
        'go movetime 500'
    """
    renderer = _RENDERERS.get(type(message))
    if renderer is None:
        raise TypeError(f"Not a UCI message: {message!r}")
    return renderer(message, codec if codec is not None else DEFAULT_CODEC)


def serialize_many(messages: Iterable[Message], codec: MoveCodec | None = None) -> str:
    """Serialize *messages* one per line, each followed by ``\\n``."""
    return "".join(serialize(message, codec) + "\n" for message in messages)
