"""Tests for message construction, validation and shared behaviour."""

import pytest

from ucikit.errors import UciSyntaxError
from ucikit.model.messages import (
    BestMove,
    CommunicationDirection,
    Go,
    Id,
    Info,
    IsReady,
    Position,
    ProtectionState,
    Register,
    Registration,
    SetOption,
    Uci,
    UciOk,
    Unknown,
)
from ucikit.model.moves import Move

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


class TestDirection:
    def test_engine_bound(self) -> None:
        assert Uci().direction is CommunicationDirection.GUI_TO_ENGINE
        assert Go().direction is CommunicationDirection.GUI_TO_ENGINE

    def test_gui_bound(self) -> None:
        assert UciOk().direction is CommunicationDirection.ENGINE_TO_GUI
        assert Info().direction is CommunicationDirection.ENGINE_TO_GUI

    def test_unknown_has_no_direction(self) -> None:
        assert Unknown("foo").direction is None


class TestSharedBehaviour:
    def test_str_is_serialize(self) -> None:
        assert str(IsReady()) == "isready"

    def test_encode_adds_terminator(self) -> None:
        assert IsReady().encode() == b"isready\n"

    def test_is_unknown(self) -> None:
        assert Unknown("foo").is_unknown
        assert not Uci().is_unknown

    def test_unknown_error_ignored_in_equality(self) -> None:
        error = UciSyntaxError("bad")
        assert Unknown("foo", error) == Unknown("foo")

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Go().time_control = None  # type: ignore[misc]


class TestPosition:
    def test_start(self) -> None:
        pos = Position.start((Move.from_uci("e2e4"),))
        assert pos.startpos
        assert pos.fen is None

    def test_fen_whitespace_normalised(self) -> None:
        pos = Position.from_fen(START_FEN.replace(" ", "   "))
        assert pos.fen == START_FEN

    def test_needs_exactly_one_source(self) -> None:
        with pytest.raises(ValueError, match="exactly one"):
            Position()
        with pytest.raises(ValueError, match="exactly one"):
            Position(startpos=True, fen=START_FEN)

    def test_malformed_fen(self) -> None:
        with pytest.raises(ValueError, match="piece placement"):
            Position.from_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP w KQkq - 0 1")

    def test_fen_with_four_fields(self) -> None:
        assert Position.from_fen("8/8/8/8/8/8/8/K6k b - -").fen == "8/8/8/8/8/8/8/K6k b - -"


class TestSetOption:
    def test_name_cannot_contain_value(self) -> None:
        with pytest.raises(ValueError, match="keyword 'value'"):
            SetOption("My value")

    def test_as_bool(self) -> None:
        assert SetOption("Ponder", "true").as_bool() is True
        assert SetOption("Ponder", "false").as_bool() is False
        assert SetOption("Ponder", "yes").as_bool() is None

    def test_as_int(self) -> None:
        assert SetOption("Hash", "128").as_int() == 128
        assert SetOption("Hash", "-3").as_int() == -3
        assert SetOption("Hash", "lots").as_int() is None
        assert SetOption("Clear Hash").as_int() is None

    def test_empty_value_allowed(self) -> None:
        assert SetOption("Path", "").value == ""


class TestRegister:
    def test_later(self) -> None:
        assert Register.for_later() == Register(later=True)

    def test_with_code(self) -> None:
        reg = Register.with_code("Stefan MK", "4359874324")
        assert reg.name == "Stefan MK"
        assert reg.code == "4359874324"

    def test_later_with_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            Register(later=True, name="x")

    def test_needs_name_and_code(self) -> None:
        with pytest.raises(ValueError):
            Register(name="x")


class TestId:
    def test_factories(self) -> None:
        assert Id.engine_name("Stockfish 16").name == "Stockfish 16"
        assert Id.engine_author("the Stockfish developers").author == "the Stockfish developers"

    def test_exactly_one(self) -> None:
        with pytest.raises(ValueError):
            Id()
        with pytest.raises(ValueError):
            Id(name="a", author="b")


class TestGuiBound:
    def test_bestmove_ponder_optional(self) -> None:
        assert BestMove(Move.from_uci("e2e4")).ponder is None

    def test_protection_state(self) -> None:
        assert Registration(ProtectionState.OK).state == "ok"

    def test_bestmove_with_ponder(self) -> None:
        message = BestMove.with_ponder(Move.from_uci("e2e4"), Move.from_uci("e7e5"))
        assert message == BestMove(Move.from_uci("e2e4"), Move.from_uci("e7e5"))
        assert message.serialize() == "bestmove e2e4 ponder e7e5"
