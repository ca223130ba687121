"""ucikit: parse and serialize Universal Chess Interface messages.

Quick start::

    from ucikit import Go, MoveTime, parse, parse_one

    for message in parse("uci\\nisready\\n"):
        print(message)

    go = parse_one("go wtime 60000 btime 58500 movestogo 20")
    assert go.serialize() == "go wtime 60000 btime 58500 movestogo 20"
    assert str(Go(time_control=MoveTime(500))) == "go movetime 500"

Moves parse to :class:`ucikit.Move` by default. Pass
``codec=PythonChessCodec()`` to any entry point to get ``chess.Move`` values.
"""

from ucikit.codecs import DEFAULT_CODEC, BuiltinMoveCodec, MoveCodec, PythonChessCodec
from ucikit.errors import UciError, UciSyntaxError, UnknownCommandError
from ucikit.model import *  # noqa: F403
from ucikit.model import __all__ as _model_all
from ucikit.parser import parse, parse_one, parse_strict, parse_with_unknown
from ucikit.serializer import serialize, serialize_many

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "parse",
    "parse_one",
    "parse_strict",
    "parse_with_unknown",
    # Serializing
    "serialize",
    "serialize_many",
    # Codecs
    "DEFAULT_CODEC",
    "BuiltinMoveCodec",
    "MoveCodec",
    "PythonChessCodec",
    # Errors
    "UciError",
    "UciSyntaxError",
    "UnknownCommandError",
    *_model_all,
]
