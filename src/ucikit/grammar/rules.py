"""Recursive-descent grammar for single UCI command lines.

:func:`match_command` recognises one line and returns a :class:`CommandNode`:
the command keyword followed by its sub-fields in input order. Token shapes
(integers, moves, FEN fields, keyword choices) are checked here; turning the
fields into typed messages is the mapper's job.
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from dataclasses import dataclass

from ucikit.errors import UciSyntaxError, UnknownCommandError
from ucikit.grammar.tokens import Token, tokenize
from ucikit.lexicon import OPTION_KEYWORDS, SCORE_KEYWORDS, fen_problem, is_integer, is_move
from ucikit.model.info import INT_ATTRIBUTES
from ucikit.model.options import OPTION_TYPES

GO_INTEGER_PARAMS = frozenset(
    {"movetime", "wtime", "btime", "winc", "binc", "movestogo", "depth", "nodes", "mate"}
)


@dataclass(frozen=True, slots=True)
class Field:
    """One matched sub-field of a command.

    ``args`` holds the raw value tokens (or one verbatim text span for
    free-text fields); ``children`` holds nested sub-fields such as the
    ``cp``/``mate`` parts of an ``info score``.
    """

    name: str
    args: tuple[str, ...] = ()
    column: int = 1
    children: tuple[Field, ...] = ()


@dataclass(frozen=True, slots=True)
class CommandNode:
    """A grammar-matched command line."""

    keyword: str
    fields: tuple[Field, ...]
    line_number: int
    text: str
    column: int = 1


class _Cursor:
    """Token reader over one line, raising positioned syntax errors."""

    __slots__ = ("_line", "_line_number", "_tokens", "_pos")

    def __init__(self, line: str, line_number: int) -> None:
        self._line = line
        self._line_number = line_number
        self._tokens = tokenize(line)
        self._pos = 0

    # ── Inspection ───────────────────────────────────────────────────────

    def peek(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def peek_text(self) -> str | None:
        token = self.peek()
        return None if token is None else token.text

    def at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def error(self, reason: str, token: Token | None = None) -> UciSyntaxError:
        if token is None:
            token = self.peek()
        column = token.column if token is not None else len(self._line.rstrip()) + 1
        return UciSyntaxError(reason, line=self._line_number, column=column, text=self._line)

    # ── Consumption ──────────────────────────────────────────────────────

    def advance(self) -> Token:
        token = self.peek()
        if token is None:
            raise self.error("unexpected end of line")
        self._pos += 1
        return token

    def expect(self, *words: str) -> Token:
        token = self.peek()
        if token is None or token.text not in words:
            expected = ", ".join(repr(w) for w in words)
            raise self.error(f"expected one of {expected}")
        self._pos += 1
        return token

    def expect_integer(self, what: str) -> Token:
        token = self.peek()
        if token is None or not is_integer(token.text):
            raise self.error(f"expected an integer {what}")
        self._pos += 1
        return token

    def expect_move(self, what: str) -> Token:
        token = self.peek()
        if token is None or not is_move(token.text):
            raise self.error(f"expected a move for {what}")
        self._pos += 1
        return token

    def take_moves(self) -> tuple[str, ...]:
        moves: list[str] = []
        while (text := self.peek_text()) is not None and is_move(text):
            moves.append(text)
            self._pos += 1
        return tuple(moves)

    def take_until(self, stop_words: Collection[str]) -> list[Token]:
        taken: list[Token] = []
        while (token := self.peek()) is not None and token.text not in stop_words:
            taken.append(token)
            self._pos += 1
        return taken

    def take_text(
        self,
        what: str,
        stop_words: Collection[str] = (),
        *,
        allow_empty: bool = False,
    ) -> str:
        """Verbatim text up to the next stop word, with inner spacing kept."""
        taken = self.take_until(stop_words)
        if not taken:
            if allow_empty:
                return ""
            raise self.error(f"expected {what}")
        return self._line[taken[0].start : taken[-1].end]

    def expect_end(self) -> None:
        if not self.at_end():
            raise self.error(f"unexpected token {self.peek_text()!r}")


# ── Command rules ────────────────────────────────────────────────────────────

_Rule = Callable[[_Cursor], list[Field]]


def _bare(cursor: _Cursor) -> list[Field]:
    return []


def _debug(cursor: _Cursor) -> list[Field]:
    switch = cursor.expect("on", "off")
    return [Field("switch", (switch.text,), switch.column)]


def _register(cursor: _Cursor) -> list[Field]:
    head = cursor.expect("later", "name")
    if head.text == "later":
        return [Field("later", column=head.column)]
    name_token = cursor.peek()
    name = cursor.take_text("a registration name", ("code",))
    code_head = cursor.expect("code")
    code_token = cursor.peek()
    code = cursor.take_text("a registration code")
    return [
        Field("name", (name,), name_token.column if name_token else head.column),
        Field("code", (code,), code_token.column if code_token else code_head.column),
    ]


def _check_fen(cursor: _Cursor, tokens: list[Token]) -> None:
    problem = fen_problem([token.text for token in tokens])
    if problem is not None:
        index, reason = problem
        raise cursor.error(reason, tokens[index] if tokens else None)


def _position(cursor: _Cursor) -> list[Field]:
    head = cursor.expect("startpos", "fen")
    fields: list[Field] = []
    if head.text == "startpos":
        fields.append(Field("startpos", column=head.column))
    else:
        fen_tokens = cursor.take_until(("moves",))
        _check_fen(cursor, fen_tokens)
        fen = " ".join(token.text for token in fen_tokens)
        fields.append(Field("fen", (fen,), fen_tokens[0].column))
    if cursor.peek_text() == "moves":
        moves_head = cursor.advance()
        fields.append(Field("moves", cursor.take_moves(), moves_head.column))
    return fields


def _setoption(cursor: _Cursor) -> list[Field]:
    cursor.expect("name")
    name_token = cursor.peek()
    name = cursor.take_text("an option name", ("value",))
    fields = [Field("name", (name,), name_token.column if name_token else 1)]
    if cursor.peek_text() == "value":
        value_head = cursor.advance()
        value = cursor.take_text("an option value", allow_empty=True)
        fields.append(Field("value", (value,), value_head.column))
    return fields


def _go(cursor: _Cursor) -> list[Field]:
    fields: list[Field] = []
    while not cursor.at_end():
        token = cursor.advance()
        if token.text in ("ponder", "infinite"):
            fields.append(Field(token.text, column=token.column))
        elif token.text in GO_INTEGER_PARAMS:
            value = cursor.expect_integer(f"after {token.text!r}")
            fields.append(Field(token.text, (value.text,), token.column))
        elif token.text == "searchmoves":
            fields.append(Field("searchmoves", cursor.take_moves(), token.column))
        else:
            raise cursor.error(f"unexpected go parameter {token.text!r}", token)
    return fields


def _id(cursor: _Cursor) -> list[Field]:
    head = cursor.expect("name", "author")
    text = cursor.take_text(f"the engine {head.text}")
    return [Field(head.text, (text,), head.column)]


def _bestmove(cursor: _Cursor) -> list[Field]:
    best = cursor.expect_move("bestmove")
    fields = [Field("move", (best.text,), best.column)]
    if cursor.peek_text() == "ponder":
        cursor.advance()
        ponder = cursor.expect_move("ponder")
        fields.append(Field("ponder", (ponder.text,), ponder.column))
    return fields


def _protection(cursor: _Cursor) -> list[Field]:
    state = cursor.expect("checking", "ok", "error")
    return [Field("state", (state.text,), state.column)]


def _option(cursor: _Cursor) -> list[Field]:
    cursor.expect("name")
    name_token = cursor.peek()
    name = cursor.take_text("an option name", ("type",))
    cursor.expect("type")
    type_token = cursor.expect(*OPTION_TYPES)
    fields = [
        Field("name", (name,), name_token.column if name_token else 1),
        Field("type", (type_token.text,), type_token.column),
    ]
    while not cursor.at_end():
        token = cursor.advance()
        if token.text in ("default", "var"):
            text = cursor.take_text(f"a {token.text} value", OPTION_KEYWORDS)
            fields.append(Field(token.text, (text,), token.column))
        elif token.text in ("min", "max"):
            value = cursor.expect_integer(f"after {token.text!r}")
            fields.append(Field(token.text, (value.text,), token.column))
        else:
            raise cursor.error(f"unexpected option parameter {token.text!r}", token)
    return fields


def _score(cursor: _Cursor, head: Token) -> Field:
    children: list[Field] = []
    seen: set[str] = set()
    while (text := cursor.peek_text()) in SCORE_KEYWORDS:
        kind = "bound" if text in ("lowerbound", "upperbound") else text
        if kind in seen:
            break
        seen.add(kind)
        token = cursor.advance()
        if kind == "bound":
            children.append(Field("bound", (token.text,), token.column))
        else:
            value = cursor.expect_integer(f"after {token.text!r}")
            children.append(Field(kind, (value.text,), token.column))
    if "cp" not in seen and "mate" not in seen:
        raise cursor.error("score needs 'cp' or 'mate'")
    return Field("score", column=head.column, children=tuple(children))


def _info(cursor: _Cursor) -> list[Field]:
    fields: list[Field] = []
    while not cursor.at_end():
        token = cursor.advance()
        key = token.text
        if key in INT_ATTRIBUTES:
            value = cursor.expect_integer(f"after {key!r}")
            fields.append(Field(key, (value.text,), token.column))
        elif key in ("pv", "refutation"):
            fields.append(Field(key, cursor.take_moves(), token.column))
        elif key == "currmove":
            move = cursor.expect_move("currmove")
            fields.append(Field(key, (move.text,), token.column))
        elif key == "currline":
            children: tuple[Field, ...] = ()
            if (text := cursor.peek_text()) is not None and is_integer(text):
                cpu = cursor.advance()
                children = (Field("cpunr", (cpu.text,), cpu.column),)
            fields.append(Field(key, cursor.take_moves(), token.column, children))
        elif key == "score":
            fields.append(_score(cursor, token))
        elif key == "string":
            fields.append(Field(key, (cursor.take_text("text", allow_empty=True),), token.column))
        elif is_integer(key) or is_move(key):
            raise cursor.error(f"unexpected value {key!r}", token)
        elif key in SCORE_KEYWORDS:
            raise cursor.error(f"{key!r} outside of a score", token)
        else:
            rest = cursor.take_text("text", allow_empty=True)
            fields.append(Field("any", (key, rest), token.column))
    return fields


_RULES: dict[str, _Rule] = {
    "uci": _bare,
    "debug": _debug,
    "isready": _bare,
    "setoption": _setoption,
    "register": _register,
    "ucinewgame": _bare,
    "stop": _bare,
    "quit": _bare,
    "ponderhit": _bare,
    "position": _position,
    "go": _go,
    "id": _id,
    "uciok": _bare,
    "readyok": _bare,
    "bestmove": _bestmove,
    "copyprotection": _protection,
    "registration": _protection,
    "option": _option,
    "info": _info,
}


def match_command(line: str, line_number: int = 1) -> CommandNode:
    """Match one command line against the grammar.

    Raises:
        UnknownCommandError: If the leading keyword is not a UCI command.
        UciSyntaxError: If the line does not fit its command's grammar.
    """
    cursor = _Cursor(line, line_number)
    head = cursor.peek()
    if head is None:
        raise cursor.error("empty command line")
    rule = _RULES.get(head.text)
    if rule is None:
        raise UnknownCommandError(head.text, line=line_number, column=head.column, text=line)
    cursor.advance()
    fields = rule(cursor)
    cursor.expect_end()
    return CommandNode(head.text, tuple(fields), line_number, line, head.column)
