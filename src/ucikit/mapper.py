"""Turn grammar-matched command nodes into typed messages."""

from __future__ import annotations

from collections.abc import Callable

from ucikit.codecs.base import DEFAULT_CODEC, MoveCodec
from ucikit.errors import UciSyntaxError
from ucikit.grammar.rules import CommandNode, Field
from ucikit.lexicon import decode_text
from ucikit.model.go import Infinite, MoveTime, Ponder, SearchControl, TimeControl, TimeLeft
from ucikit.model.info import (
    INT_ATTRIBUTES,
    AnyInfo,
    CurrLine,
    CurrMove,
    InfoAttribute,
    InfoString,
    Pv,
    Refutation,
    Score,
    ScoreBound,
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
    ProtectionState,
    Quit,
    ReadyOk,
    Register,
    Registration,
    SetOption,
    Stop,
    Uci,
    UciNewGame,
    UciOk,
)
from ucikit.model.moves import AnyMove
from ucikit.model.options import (
    ButtonOption,
    CheckOption,
    ComboOption,
    OptionConfig,
    SpinOption,
    StringOption,
)

_TIME_LEFT_FIELDS = {
    "wtime": "white_time",
    "btime": "black_time",
    "winc": "white_increment",
    "binc": "black_increment",
    "movestogo": "moves_to_go",
}


def _field_error(node: CommandNode, field: Field, reason: str) -> UciSyntaxError:
    return UciSyntaxError(reason, line=node.line_number, column=field.column, text=node.text)


def _moves(codec: MoveCodec, texts: tuple[str, ...]) -> tuple[AnyMove, ...]:
    return tuple(codec.parse_move(text) for text in texts)


# ── Engine-bound ─────────────────────────────────────────────────────────────


def _map_debug(node: CommandNode, codec: MoveCodec) -> Message:
    return Debug(node.fields[0].args[0] == "on")


def _map_register(node: CommandNode, codec: MoveCodec) -> Message:
    values = {field.name: field.args for field in node.fields}
    if "later" in values:
        return Register.for_later()
    return Register.with_code(values["name"][0], values["code"][0])


def _map_position(node: CommandNode, codec: MoveCodec) -> Message:
    startpos = False
    fen: str | None = None
    moves: list[AnyMove] = []
    for field in node.fields:
        if field.name == "startpos":
            startpos = True
        elif field.name == "fen":
            fen = field.args[0]
        elif field.name == "moves":
            moves.extend(_moves(codec, field.args))
    return Position(startpos=startpos, fen=fen, moves=tuple(moves))


def _map_setoption(node: CommandNode, codec: MoveCodec) -> Message:
    name = ""
    value: str | None = None
    for field in node.fields:
        if field.name == "name":
            name = field.args[0]
        elif field.name == "value":
            value = decode_text(field.args[0])
    return SetOption(name, value)


def _map_go(node: CommandNode, codec: MoveCodec) -> Message:
    time_control: TimeControl | None = None
    time_left: dict[str, int] = {}
    search_moves: list[AnyMove] = []
    limits: dict[str, int] = {}

    for field in node.fields:
        if field.name == "ponder":
            time_control = Ponder()
        elif field.name == "infinite":
            time_control = Infinite()
        elif field.name == "movetime":
            time_control = MoveTime(int(field.args[0]))
        elif field.name in _TIME_LEFT_FIELDS:
            time_left[_TIME_LEFT_FIELDS[field.name]] = int(field.args[0])
        elif field.name in ("depth", "nodes", "mate"):
            limits[field.name] = int(field.args[0])
        elif field.name == "searchmoves":
            search_moves.extend(_moves(codec, field.args))

    # Clock information outranks ponder/infinite/movetime.
    if time_left:
        time_control = TimeLeft(**time_left)
    return Go(time_control, SearchControl(tuple(search_moves), **limits))


# ── GUI-bound ────────────────────────────────────────────────────────────────


def _map_id(node: CommandNode, codec: MoveCodec) -> Message:
    field = node.fields[0]
    if field.name == "name":
        return Id.engine_name(field.args[0])
    return Id.engine_author(field.args[0])


def _map_bestmove(node: CommandNode, codec: MoveCodec) -> Message:
    best_move: AnyMove = None
    ponder: AnyMove | None = None
    for field in node.fields:
        if field.name == "move":
            best_move = codec.parse_move(field.args[0])
        elif field.name == "ponder":
            ponder = codec.parse_move(field.args[0])
    return BestMove(best_move, ponder)


def _map_copyprotection(node: CommandNode, codec: MoveCodec) -> Message:
    return CopyProtection(ProtectionState(node.fields[0].args[0]))


def _map_registration(node: CommandNode, codec: MoveCodec) -> Message:
    return Registration(ProtectionState(node.fields[0].args[0]))


def _map_option(node: CommandNode, codec: MoveCodec) -> Message:
    name = ""
    type_name = ""
    default: Field | None = None
    minimum: int | None = None
    maximum: int | None = None
    variants: list[str] = []

    for field in node.fields:
        if field.name == "name":
            name = field.args[0]
        elif field.name == "type":
            type_name = field.args[0]
        elif field.name == "default":
            default = field
        elif field.name == "min":
            minimum = int(field.args[0])
        elif field.name == "max":
            maximum = int(field.args[0])
        elif field.name == "var":
            variants.append(decode_text(field.args[0]))

    raw_default = default.args[0] if default is not None else None
    config: OptionConfig
    if type_name == "check":
        check_default: bool | None = None
        if default is not None:
            if raw_default not in ("true", "false"):
                raise _field_error(
                    node, default, f"check default must be true or false, not {raw_default!r}"
                )
            check_default = raw_default == "true"
        config = CheckOption(name, check_default)
    elif type_name == "spin":
        spin_default: int | None = None
        if default is not None:
            try:
                spin_default = int(raw_default or "")
            except ValueError:
                raise _field_error(
                    node, default, f"spin default must be an integer, not {raw_default!r}"
                ) from None
        config = SpinOption(name, spin_default, minimum, maximum)
    elif type_name == "combo":
        combo_default = decode_text(raw_default) if raw_default is not None else None
        config = ComboOption(name, combo_default, tuple(variants))
    elif type_name == "string":
        string_default = decode_text(raw_default) if raw_default is not None else None
        config = StringOption(name, string_default)
    else:
        config = ButtonOption(name)
    return Option(config)


def _map_score(field: Field) -> Score:
    cp: int | None = None
    mate: int | None = None
    bound: ScoreBound | None = None
    for child in field.children:
        if child.name == "cp":
            cp = int(child.args[0])
        elif child.name == "mate":
            mate = int(child.args[0])
        elif child.name == "bound":
            bound = ScoreBound(child.args[0])
    return Score(cp, mate, bound)


def _map_info(node: CommandNode, codec: MoveCodec) -> Message:
    attributes: list[InfoAttribute] = []
    for field in node.fields:
        if field.name in INT_ATTRIBUTES:
            attributes.append(INT_ATTRIBUTES[field.name](int(field.args[0])))
        elif field.name == "pv":
            attributes.append(Pv(_moves(codec, field.args)))
        elif field.name == "refutation":
            attributes.append(Refutation(_moves(codec, field.args)))
        elif field.name == "currmove":
            attributes.append(CurrMove(codec.parse_move(field.args[0])))
        elif field.name == "currline":
            cpu_nr = int(field.children[0].args[0]) if field.children else None
            attributes.append(CurrLine(cpu_nr, _moves(codec, field.args)))
        elif field.name == "score":
            attributes.append(_map_score(field))
        elif field.name == "string":
            attributes.append(InfoString(field.args[0]))
        elif field.name == "any":
            key, value = field.args
            attributes.append(AnyInfo(key, value))
    return Info(tuple(attributes))


_Mapper = Callable[[CommandNode, MoveCodec], Message]

_MAPPERS: dict[str, _Mapper] = {
    "uci": lambda node, codec: Uci(),
    "debug": _map_debug,
    "isready": lambda node, codec: IsReady(),
    "register": _map_register,
    "position": _map_position,
    "setoption": _map_setoption,
    "ucinewgame": lambda node, codec: UciNewGame(),
    "stop": lambda node, codec: Stop(),
    "ponderhit": lambda node, codec: PonderHit(),
    "quit": lambda node, codec: Quit(),
    "go": _map_go,
    "id": _map_id,
    "uciok": lambda node, codec: UciOk(),
    "readyok": lambda node, codec: ReadyOk(),
    "bestmove": _map_bestmove,
    "copyprotection": _map_copyprotection,
    "registration": _map_registration,
    "option": _map_option,
    "info": _map_info,
}


def map_command(node: CommandNode, codec: MoveCodec | None = None) -> Message:
    """Build the message for one matched command line.

    Raises:
        UciSyntaxError: If the fields are well-formed tokens but do not make
            a valid message (e.g. a ``check`` option defaulting to ``maybe``).
    """
    if codec is None:
        codec = DEFAULT_CODEC
    try:
        return _MAPPERS[node.keyword](node, codec)
    except UciSyntaxError:
        raise
    except ValueError as exc:
        raise UciSyntaxError(
            str(exc), line=node.line_number, column=node.column, text=node.text
        ) from exc
