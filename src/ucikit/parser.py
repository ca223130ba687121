"""Public parsing entry points.

Each entry point splits the text into lines and reads them independently;
they differ only in what happens to a line that is not a valid command:

* :func:`parse` drops it.
* :func:`parse_strict` raises.
* :func:`parse_with_unknown` keeps it as an :class:`~ucikit.model.Unknown`.

Quick start::

    from ucikit import parse

    for message in parse("id name Stockfish\\nuciok\\n"):
        print(type(message).__name__, message)
"""

from __future__ import annotations

import logging

from ucikit.codecs.base import MoveCodec
from ucikit.errors import UciSyntaxError
from ucikit.grammar.rules import match_command
from ucikit.grammar.tokens import iter_command_lines
from ucikit.mapper import map_command
from ucikit.model.messages import Message, Unknown

_LOGGER = logging.getLogger(__name__)


def _parse_line(line: str, line_number: int, codec: MoveCodec | None) -> Message:
    return map_command(match_command(line, line_number), codec)


def parse(text: str, *, codec: MoveCodec | None = None) -> list[Message]:
    """Parse every valid command line in *text*, skipping the rest."""
    messages: list[Message] = []
    for number, line in iter_command_lines(text):
        try:
            messages.append(_parse_line(line, number, codec))
        except UciSyntaxError as exc:
            _LOGGER.debug("Dropping line %d: %s", number, exc.reason)
    return messages


def parse_strict(text: str, *, codec: MoveCodec | None = None) -> list[Message]:
    """Parse *text*, raising on the first line that is not a valid command.

    Raises:
        UnknownCommandError: If a line starts with an unknown keyword.
        UciSyntaxError: If a line does not match its command's grammar.
    """
    return [_parse_line(line, number, codec) for number, line in iter_command_lines(text)]


def parse_with_unknown(text: str, *, codec: MoveCodec | None = None) -> list[Message]:
    """Parse *text*, turning each invalid line into an ``Unknown`` message."""
    messages: list[Message] = []
    for number, line in iter_command_lines(text):
        try:
            messages.append(_parse_line(line, number, codec))
        except UciSyntaxError as exc:
            _LOGGER.debug("Keeping line %d as unknown: %s", number, exc.reason)
            messages.append(Unknown(line.rstrip(), exc))
    return messages


def parse_one(line: str, *, codec: MoveCodec | None = None) -> Message:
    """Parse a single command line.

    Never raises on malformed input: invalid lines come back as ``Unknown``.
    Blank input gives ``Unknown("")``; for multi-line input only the first
    non-blank line is read.
    """
    for number, text in iter_command_lines(line):
        try:
            return _parse_line(text, number, codec)
        except UciSyntaxError as exc:
            _LOGGER.debug("Keeping line %d as unknown: %s", number, exc.reason)
            return Unknown(text.rstrip(), exc)
    return Unknown("")
