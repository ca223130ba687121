"""Lexical building blocks of the UCI language shared by model and grammar."""

from __future__ import annotations

import re
from collections.abc import Collection, Sequence

# Literal token standing for an explicitly empty string value.
EMPTY_SENTINEL = "<empty>"

INTEGER_RE = re.compile(r"^-?[0-9]+$")
MOVE_RE = re.compile(r"^[a-h][1-8][a-h][1-8][pnbrqk]?$")

FEN_PLACEMENT_RE = re.compile(r"^[pnbrqkPNBRQK1-8]+(?:/[pnbrqkPNBRQK1-8]+){7}$")
FEN_SIDE_RE = re.compile(r"^[wb]$")
FEN_CASTLING_RE = re.compile(r"^(?:-|[KQkqA-Ha-h]{1,4})$")
FEN_EN_PASSANT_RE = re.compile(r"^(?:-|[a-h][36])$")
FEN_CLOCK_RE = re.compile(r"^[0-9]+$")

# Words that end a free-text field when a line is read back.
OPTION_KEYWORDS = frozenset({"default", "min", "max", "var"})
SCORE_KEYWORDS = frozenset({"cp", "mate", "lowerbound", "upperbound"})

_FEN_FIELDS = (
    ("piece placement", FEN_PLACEMENT_RE),
    ("side to move", FEN_SIDE_RE),
    ("castling", FEN_CASTLING_RE),
    ("en passant", FEN_EN_PASSANT_RE),
    ("halfmove clock", FEN_CLOCK_RE),
    ("fullmove number", FEN_CLOCK_RE),
)


def is_integer(token: str) -> bool:
    return INTEGER_RE.match(token) is not None


def is_move(token: str) -> bool:
    return MOVE_RE.match(token) is not None


def encode_text(value: str) -> str:
    """Render a string value, using ``<empty>`` for the empty string."""
    return value if value else EMPTY_SENTINEL


def decode_text(raw: str) -> str:
    """Inverse of :func:`encode_text`."""
    return "" if raw == EMPTY_SENTINEL else raw


def check_text(
    value: str,
    what: str,
    *,
    allow_empty: bool = False,
    reserved: Collection[str] = (),
) -> None:
    """Reject strings that cannot be written back as a single UCI field.

    *reserved* lists words that would end the field early when the line is
    read back (``type`` inside an option name, for instance).
    """
    if not value:
        if allow_empty:
            return
        raise ValueError(f"{what} must not be empty")
    if "\n" in value or "\r" in value:
        raise ValueError(f"{what} must fit on one line: {value!r}")
    if value != value.strip():
        raise ValueError(f"{what} must not start or end with whitespace: {value!r}")
    clashes = [word for word in value.split() if word in reserved]
    if clashes:
        raise ValueError(f"{what} must not contain the keyword {clashes[0]!r}: {value!r}")


def check_value(value: str, what: str, *, reserved: Collection[str] = ()) -> None:
    """Like :func:`check_text` for values where ``""`` is sent as ``<empty>``."""
    if value == EMPTY_SENTINEL:
        raise ValueError(f"{what} cannot be the literal {EMPTY_SENTINEL}")
    check_text(value, what, allow_empty=True, reserved=reserved)


def fen_problem(fields: Sequence[str]) -> tuple[int, str] | None:
    """Return ``(field_index, reason)`` for the first malformed FEN field.

    Only the shape of each field is checked, not whether the position is
    legal. ``None`` means the fields look like a FEN.
    """
    if not 4 <= len(fields) <= 6:
        return 0, "FEN needs 4 to 6 fields"
    for index, (text, (what, pattern)) in enumerate(zip(fields, _FEN_FIELDS)):
        if pattern.match(text) is None:
            return index, f"invalid FEN {what} {text!r}"
    return None


def check_int(value: object, what: str, *, optional: bool = False) -> None:
    """Reject anything but a plain ``int`` (``bool`` included)."""
    if value is None and optional:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, not {value!r}")
