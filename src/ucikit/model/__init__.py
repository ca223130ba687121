"""Message model: immutable value objects for every UCI message."""

from ucikit.model.go import (
    Infinite,
    MoveTime,
    Ponder,
    SearchControl,
    TimeControl,
    TimeLeft,
)
from ucikit.model.info import (
    AnyInfo,
    CpuLoad,
    CurrLine,
    CurrMove,
    CurrMoveNumber,
    Depth,
    HashFull,
    InfoAttribute,
    InfoString,
    MultiPv,
    Nodes,
    Nps,
    Pv,
    Refutation,
    SbHits,
    Score,
    ScoreBound,
    SelDepth,
    TbHits,
    Time,
)
from ucikit.model.messages import (
    BestMove,
    CommunicationDirection,
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
    UciMessage,
    UciNewGame,
    UciOk,
    Unknown,
)
from ucikit.model.moves import AnyMove, Move, Piece, Square
from ucikit.model.options import (
    ButtonOption,
    CheckOption,
    ComboOption,
    OptionConfig,
    SpinOption,
    StringOption,
)

__all__ = [
    # Board values
    "AnyMove",
    "Move",
    "Piece",
    "Square",
    # go
    "Infinite",
    "MoveTime",
    "Ponder",
    "SearchControl",
    "TimeControl",
    "TimeLeft",
    # option
    "ButtonOption",
    "CheckOption",
    "ComboOption",
    "OptionConfig",
    "SpinOption",
    "StringOption",
    # info
    "AnyInfo",
    "CpuLoad",
    "CurrLine",
    "CurrMove",
    "CurrMoveNumber",
    "Depth",
    "HashFull",
    "InfoAttribute",
    "InfoString",
    "MultiPv",
    "Nodes",
    "Nps",
    "Pv",
    "Refutation",
    "SbHits",
    "Score",
    "ScoreBound",
    "SelDepth",
    "TbHits",
    "Time",
    # Messages
    "BestMove",
    "CommunicationDirection",
    "CopyProtection",
    "Debug",
    "Go",
    "Id",
    "Info",
    "IsReady",
    "Message",
    "Option",
    "PonderHit",
    "Position",
    "ProtectionState",
    "Quit",
    "ReadyOk",
    "Register",
    "Registration",
    "SetOption",
    "Stop",
    "Uci",
    "UciMessage",
    "UciNewGame",
    "UciOk",
    "Unknown",
]
