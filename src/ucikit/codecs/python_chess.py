"""Codec backed by the optional ``python-chess`` package.

Install with ``pip install ucikit[chess]``. Parsed messages then carry
:class:`chess.Move` values instead of the built-in :class:`ucikit.Move`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

try:
    import chess
except ImportError:
    chess = None

if TYPE_CHECKING:
    import chess as chess_types

_LOGGER = logging.getLogger(__name__)


def is_available() -> bool:
    """Return ``True`` if python-chess can be imported."""
    return chess is not None


class PythonChessCodec:
    """Codec producing :class:`chess.Move` values."""

    __slots__ = ()

    def __init__(self) -> None:
        if chess is None:
            raise ImportError(
                "PythonChessCodec requires python-chess; install ucikit[chess]"
            )
        _LOGGER.debug("Using python-chess %s for UCI moves", chess.__version__)

    def parse_move(self, text: str) -> chess_types.Move:
        return chess.Move.from_uci(text)

    def format_move(self, move: chess_types.Move) -> str:
        return move.uci()

    def __repr__(self) -> str:
        return "PythonChessCodec()"
