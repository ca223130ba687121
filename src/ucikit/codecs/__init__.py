"""Move codecs: pluggable board representations for parsed UCI moves."""

from ucikit.codecs.base import DEFAULT_CODEC, BuiltinMoveCodec, MoveCodec
from ucikit.codecs.python_chess import PythonChessCodec, is_available

__all__ = [
    "DEFAULT_CODEC",
    "BuiltinMoveCodec",
    "MoveCodec",
    "PythonChessCodec",
    "is_available",
]
