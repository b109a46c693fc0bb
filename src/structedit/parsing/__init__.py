"""Parsing module for field literals."""

from structedit.parsing.literal_lexer import LiteralLexer
from structedit.parsing.literal_parser import Literal, LiteralParser

__all__ = [
    "Literal",
    "LiteralLexer",
    "LiteralParser",
]
