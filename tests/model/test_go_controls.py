"""Tests for go time and search controls."""

import pytest

from ucikit.model.go import Infinite, MoveTime, Ponder, SearchControl, TimeLeft
from ucikit.model.messages import Go
from ucikit.model.moves import Move


class TestTimeLeft:
    def test_empty(self) -> None:
        assert TimeLeft().is_empty

    def test_not_empty(self) -> None:
        assert not TimeLeft(moves_to_go=10).is_empty

    def test_negative_values_allowed(self) -> None:
        assert TimeLeft(white_time=-50).white_time == -50


class TestSearchControl:
    def test_empty(self) -> None:
        assert SearchControl().is_empty

    def test_search_moves_become_tuple(self) -> None:
        control = SearchControl([Move.from_uci("e2e4")])  # type: ignore[arg-type]
        assert control.search_moves == (Move.from_uci("e2e4"),)
        assert not control.is_empty

    def test_depth_only(self) -> None:
        assert not SearchControl(depth=5).is_empty


class TestGoMessage:
    def test_empty_controls_normalised(self) -> None:
        assert Go(TimeLeft(), SearchControl()) == Go()

    def test_factories(self) -> None:
        assert Go.ponder().time_control == Ponder()
        assert Go.infinite().time_control == Infinite()
        assert Go.movetime(500).time_control == MoveTime(500)

    def test_keywords(self) -> None:
        assert Ponder.keyword == "ponder"
        assert Infinite.keyword == "infinite"
        assert MoveTime.keyword == "movetime"


class TestIntegerValidation:
    def test_movetime_rejects_bool(self) -> None:
        with pytest.raises(ValueError, match="movetime must be an integer"):
            MoveTime(True)

    def test_time_left_rejects_bool(self) -> None:
        with pytest.raises(ValueError, match="black_increment"):
            TimeLeft(black_increment=False)

    def test_search_control_rejects_bool(self) -> None:
        with pytest.raises(ValueError, match="nodes"):
            SearchControl(nodes=True)

    def test_search_control_rejects_string(self) -> None:
        with pytest.raises(ValueError, match="depth"):
            SearchControl(depth="5")  # type: ignore[arg-type]


class TestFactories:
    def test_search_control_factories(self) -> None:
        assert SearchControl.with_depth(6) == SearchControl(depth=6)
        assert SearchControl.with_nodes(10_000) == SearchControl(nodes=10_000)
        assert SearchControl.with_mate(3) == SearchControl(mate=3)

    def test_go_time_left(self) -> None:
        go = Go.time_left(white_time=1000, black_time=900, moves_to_go=5)
        assert go.time_control == TimeLeft(white_time=1000, black_time=900, moves_to_go=5)
        assert go.serialize() == "go wtime 1000 btime 900 movestogo 5"

    def test_go_time_left_empty_is_bare_go(self) -> None:
        assert Go.time_left() == Go()
