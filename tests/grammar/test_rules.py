"""Tests for the per-command grammar rules."""

import pytest

from ucikit.errors import UciSyntaxError, UnknownCommandError
from ucikit.grammar.rules import Field, match_command


def fields(line: str) -> tuple[Field, ...]:
    return match_command(line).fields


class TestDispatch:
    def test_bare_command(self) -> None:
        node = match_command("uci")
        assert node.keyword == "uci"
        assert node.fields == ()

    def test_leading_whitespace(self) -> None:
        node = match_command("   isready")
        assert node.keyword == "isready"
        assert node.column == 4

    def test_unknown_command(self) -> None:
        with pytest.raises(UnknownCommandError) as info:
            match_command("frobnicate now", 7)
        assert info.value.keyword == "frobnicate"
        assert info.value.line == 7
        assert info.value.column == 1

    def test_keywords_are_case_sensitive(self) -> None:
        with pytest.raises(UnknownCommandError):
            match_command("UCI")

    def test_trailing_tokens_rejected(self) -> None:
        with pytest.raises(UciSyntaxError) as info:
            match_command("uci now")
        assert info.value.column == 5
        assert "unexpected token" in info.value.reason


class TestEngineBoundRules:
    def test_debug(self) -> None:
        assert fields("debug off") == (Field("switch", ("off",), 7),)

    def test_debug_needs_switch(self) -> None:
        with pytest.raises(UciSyntaxError) as info:
            match_command("debug")
        assert info.value.column == 6

    def test_register_name_and_code(self) -> None:
        assert fields("register name Stefan  MK code 4359874324") == (
            Field("name", ("Stefan  MK",), 15),
            Field("code", ("4359874324",), 31),
        )

    def test_register_missing_code(self) -> None:
        with pytest.raises(UciSyntaxError):
            match_command("register name Stefan")

    def test_position_fen_and_moves(self) -> None:
        result = fields("position fen 8/8/8/8/8/8/8/K6k  w - - 0 1 moves a1a2 h1h2")
        assert result[0] == Field("fen", ("8/8/8/8/8/8/8/K6k w - - 0 1",), 14)
        assert result[1].name == "moves"
        assert result[1].args == ("a1a2", "h1h2")

    def test_position_bad_fen_points_at_field(self) -> None:
        with pytest.raises(UciSyntaxError) as info:
            match_command("position fen 8/8/8/8/8/8/8/K6k x - - 0 1")
        assert info.value.column == 32
        assert "side to move" in info.value.reason

    def test_position_fen_needs_four_fields(self) -> None:
        with pytest.raises(UciSyntaxError, match="4 to 6 fields"):
            match_command("position fen 8/8/8/8/8/8/8/K6k w")

    def test_position_bad_move(self) -> None:
        with pytest.raises(UciSyntaxError, match="unexpected token 'e2e9'"):
            match_command("position startpos moves e2e4 e2e9")

    def test_setoption_value_keeps_spacing(self) -> None:
        assert fields("setoption name NalimovPath value c:\\chess\\tb  d:\\tb")[1] == Field(
            "value", ("c:\\chess\\tb  d:\\tb",), 28
        )

    def test_setoption_value_may_be_missing(self) -> None:
        assert fields("setoption name Clear Hash") == (Field("name", ("Clear Hash",), 16),)

    def test_setoption_bare_value(self) -> None:
        assert fields("setoption name Path value")[1].args == ("",)

    def test_go_collects_params(self) -> None:
        result = fields("go wtime -50 infinite searchmoves e2e4 d2d4 depth 3")
        assert [f.name for f in result] == ["wtime", "infinite", "searchmoves", "depth"]
        assert result[0].args == ("-50",)
        assert result[2].args == ("e2e4", "d2d4")

    def test_go_needs_integer(self) -> None:
        with pytest.raises(UciSyntaxError, match="integer"):
            match_command("go depth deep")

    def test_go_unknown_param(self) -> None:
        with pytest.raises(UciSyntaxError) as info:
            match_command("go fast")
        assert info.value.column == 4


class TestGuiBoundRules:
    def test_id(self) -> None:
        assert fields("id author The  Author") == (Field("author", ("The  Author",), 4),)

    def test_bestmove_with_ponder(self) -> None:
        assert fields("bestmove e2e4 ponder e7e5") == (
            Field("move", ("e2e4",), 10),
            Field("ponder", ("e7e5",), 22),
        )

    def test_bestmove_needs_move(self) -> None:
        with pytest.raises(UciSyntaxError, match="move"):
            match_command("bestmove (none)")

    def test_protection_state(self) -> None:
        assert fields("copyprotection checking") == (Field("state", ("checking",), 16),)

    def test_option_parts(self) -> None:
        result = fields("option name Style type combo default Solid var Solid var Risky Play")
        assert [(f.name, f.args) for f in result] == [
            ("name", ("Style",)),
            ("type", ("combo",)),
            ("default", ("Solid",)),
            ("var", ("Solid",)),
            ("var", ("Risky Play",)),
        ]

    def test_option_unknown_type(self) -> None:
        with pytest.raises(UciSyntaxError):
            match_command("option name Foo type slider")

    def test_option_default_needs_value(self) -> None:
        with pytest.raises(UciSyntaxError, match="default value"):
            match_command("option name Hash type spin default min 1")

    def test_info_score_children(self) -> None:
        (score,) = fields("info score mate -3 upperbound")
        assert score.name == "score"
        assert score.children == (
            Field("mate", ("-3",), 12),
            Field("bound", ("upperbound",), 20),
        )

    def test_info_score_needs_value(self) -> None:
        with pytest.raises(UciSyntaxError, match="'cp' or 'mate'"):
            match_command("info score lowerbound")

    def test_info_currline_cpu(self) -> None:
        (line,) = fields("info currline 1 e2e4 e7e5")
        assert line.children == (Field("cpunr", ("1",), 15),)
        assert line.args == ("e2e4", "e7e5")

    def test_info_string_runs_to_end(self) -> None:
        (text,) = fields("info string depth 3 is  great")
        assert text.args == ("depth 3 is  great",)

    def test_info_unknown_key(self) -> None:
        result = fields("info depth 2 wdl 500 400 100")
        assert result[1] == Field("any", ("wdl", "500 400 100"), 14)

    def test_info_stray_value(self) -> None:
        with pytest.raises(UciSyntaxError, match="unexpected value"):
            match_command("info depth 2 3")

    def test_info_stray_score_keyword(self) -> None:
        with pytest.raises(UciSyntaxError, match="outside of a score"):
            match_command("info score cp 5 cp 3")
