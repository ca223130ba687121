"""Grammar layer: line splitting, tokens and per-command rules."""

from ucikit.grammar.rules import CommandNode, Field, match_command
from ucikit.grammar.tokens import Token, iter_command_lines, tokenize

__all__ = [
    "CommandNode",
    "Field",
    "Token",
    "iter_command_lines",
    "match_command",
    "tokenize",
]
