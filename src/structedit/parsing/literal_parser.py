"""Parser for numeric and boolean field literals.

Grammar:

    literal : scalar
            | LPAREN scalar RPAREN
            | WORD
    scalar  : NUMBER
            | NUMBER IMAG
            | NUMBER NUMBER IMAG

The two-number form is ``a+bi``; the second number must carry its sign.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import ply.yacc as yacc

from structedit.parsing.literal_lexer import LiteralLexer


@dataclass
class Literal:
    """A parsed literal, keeping the token text of each part."""

    text: str
    real: str | None = None
    imag: str | None = None
    word: str | None = None
    parenthesized: bool = False
    error: str | None = None

    @property
    def is_number(self) -> bool:
        """True for a bare real number such as ``12`` or ``-1.5e3``."""
        return self.real is not None and self.imag is None and not self.parenthesized

    @property
    def is_complex(self) -> bool:
        """True for anything written with an imaginary part or parentheses."""
        return self.word is None and (self.imag is not None or self.parenthesized)


class LiteralParser:
    """Parser for single field literals."""

    tokens = LiteralLexer.tokens

    def __init__(self) -> None:
        self.lexer = LiteralLexer()
        self.lexer.build()
        self.parser: yacc.LRParser = None  # type: ignore

    def p_literal_scalar(self, p: yacc.YaccProduction) -> None:
        """literal : scalar"""
        p[0] = p[1]

    def p_literal_parenthesized(self, p: yacc.YaccProduction) -> None:
        """literal : LPAREN scalar RPAREN"""
        p[2].parenthesized = True
        p[0] = p[2]

    def p_literal_word(self, p: yacc.YaccProduction) -> None:
        """literal : WORD"""
        p[0] = Literal(text=p[1], word=p[1])

    def p_scalar_real(self, p: yacc.YaccProduction) -> None:
        """scalar : NUMBER"""
        p[0] = Literal(text=p[1], real=p[1])

    def p_scalar_imaginary(self, p: yacc.YaccProduction) -> None:
        """scalar : NUMBER IMAG"""
        p[0] = Literal(text=p[1] + p[2], imag=p[1])

    def p_scalar_complex(self, p: yacc.YaccProduction) -> None:
        """scalar : NUMBER NUMBER IMAG"""
        p[0] = Literal(text=p[1] + p[2] + p[3], real=p[1], imag=p[2])
        # ply swallows exceptions raised from actions, so flag it for parse()
        if p[2][0] not in "+-":
            p[0].error = f"Expected sign before imaginary part '{p[2]}'"

    def p_error(self, p: yacc.YaccProduction) -> None:
        if p:
            raise SyntaxError(f"Syntax error at '{p.value}' (position {p.lexpos})")
        else:
            raise SyntaxError("Syntax error at end of input")

    def build(self, **kwargs: Any) -> None:
        """Build the parser."""
        self.parser = yacc.yacc(module=self, start="literal", **kwargs)

    def parse(self, data: str) -> Literal:
        """Parse a literal string."""
        if self.parser is None:
            self.build(debug=False, write_tables=False)

        result = self.parser.parse(data, lexer=self.lexer.lexer)
        if result is None:
            raise SyntaxError(f"Syntax error in '{data}'")
        if result.error:
            raise SyntaxError(result.error)
        result.text = data
        return result
