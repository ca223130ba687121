"""Move codec protocol and the built-in implementation.

A codec is the only place where UCI move text meets a concrete move type.
The grammar, mapper and serializer are shared by every codec, so swapping the
board representation never duplicates protocol logic.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

from ucikit.model.moves import Move

MoveT = TypeVar("MoveT")


class MoveCodec(Protocol[MoveT]):
    """Protocol for converting UCI long-algebraic text to and from moves."""

    def parse_move(self, text: str) -> MoveT:
        """Build a move from grammar-validated text such as ``'e7e8q'``."""
        ...

    def format_move(self, move: MoveT) -> str:
        """Render *move* as UCI long-algebraic text."""
        ...


class BuiltinMoveCodec:
    """Codec producing :class:`ucikit.model.moves.Move` values."""

    __slots__ = ()

    def parse_move(self, text: str) -> Move:
        return Move.from_uci(text)

    def format_move(self, move: Move) -> str:
        # Any move type whose ``str()`` is UCI text (python-chess included)
        # renders correctly through the default codec.
        return str(move)

    def __repr__(self) -> str:
        return "BuiltinMoveCodec()"


DEFAULT_CODEC: MoveCodec[Move] = BuiltinMoveCodec()
