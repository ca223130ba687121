"""Tests for the built-in square, piece and move value objects."""

import pytest

from ucikit.model.moves import Move, Piece, Square


class TestSquare:
    def test_parse(self) -> None:
        assert Square.parse("e4") == Square("e", 4)

    def test_str(self) -> None:
        assert str(Square("h", 8)) == "h8"

    def test_index_lerf(self) -> None:
        assert Square("a", 1).index == 0
        assert Square("h", 1).index == 7
        assert Square("a", 2).index == 8
        assert Square("h", 8).index == 63

    def test_from_index_inverse(self) -> None:
        for index in (0, 7, 8, 28, 63):
            assert Square.from_index(index).index == index

    @pytest.mark.parametrize("name", ["i1", "a9", "a0", "e", "e44", ""])
    def test_parse_rejects_bad_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            Square.parse(name)

    def test_constructor_validates(self) -> None:
        with pytest.raises(ValueError):
            Square("z", 1)
        with pytest.raises(ValueError):
            Square("a", 9)
        with pytest.raises(ValueError):
            Square("a", True)
        with pytest.raises(ValueError):
            Square("a", 1.0)  # type: ignore[arg-type]

    def test_from_index_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Square.from_index(64)


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("q") is Piece.QUEEN
        assert Piece.from_char("n") is Piece.KNIGHT

    def test_uppercase_rejected(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece"):
            Piece.from_char("Q")


class TestMove:
    def test_from_uci(self) -> None:
        move = Move.from_uci("e2e4")
        assert move.from_sq == Square("e", 2)
        assert move.to_sq == Square("e", 4)
        assert move.promotion is None

    def test_promotion(self) -> None:
        move = Move.from_uci("a7a8q")
        assert move.promotion is Piece.QUEEN
        assert str(move) == "a7a8q"

    def test_uci_property(self) -> None:
        assert Move.from_uci("g1f3").uci == "g1f3"

    def test_no_legality_check(self) -> None:
        assert str(Move.from_uci("e1e8k")) == "e1e8k"

    @pytest.mark.parametrize("text", ["e2e9", "e2", "e2e4x", "E2E4", "0000"])
    def test_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ValueError, match="Invalid UCI move"):
            Move.from_uci(text)

    def test_equality_and_hash(self) -> None:
        assert Move.from_uci("e2e4") == Move(Square("e", 2), Square("e", 4))
        assert len({Move.from_uci("e2e4"), Move.from_uci("e2e4")}) == 1
