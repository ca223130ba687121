"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from ucikit.codecs.base import BuiltinMoveCodec
from ucikit.model.moves import Move


@pytest.fixture()
def chess_codec() -> object:
    """A python-chess backed codec; skips the test when python-chess is missing."""
    pytest.importorskip("chess")
    from ucikit.codecs.python_chess import PythonChessCodec

    return PythonChessCodec()


@pytest.fixture()
def builtin_codec() -> BuiltinMoveCodec:
    return BuiltinMoveCodec()


@pytest.fixture()
def e2e4() -> Move:
    return Move.from_uci("e2e4")


@pytest.fixture()
def debug_log(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Capture ``ucikit`` debug records."""
    with caplog.at_level(logging.DEBUG, logger="ucikit"):
        yield caplog
