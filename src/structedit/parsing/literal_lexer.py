"""Lexer for numeric and boolean field literals."""

import re

import ply.lex as lex


class LiteralLexer:
    """Lexer for tokenizing a single field literal such as ``-12``, ``1e3`` or ``(1+2i)``."""

    tokens = [
        "NUMBER",
        "IMAG",
        "WORD",
        "LPAREN",
        "RPAREN",
    ]

    t_LPAREN = r"\("
    t_RPAREN = r"\)"

    # Literals are matched as typed; whitespace is illegal
    t_ignore = ""

    def __init__(self) -> None:
        self.lexer: lex.LexToken = None  # type: ignore

    # Function rules match in definition order: NUMBER must precede IMAG so
    # that "inf" is not read as the imaginary unit followed by "nf".
    def t_NUMBER(self, t: lex.LexToken) -> lex.LexToken:
        r"[+-]?(infinity|inf|nan|(\d+\.\d*|\.\d+|\d+)(e[+-]?\d+)?)"
        return t

    def t_IMAG(self, t: lex.LexToken) -> lex.LexToken:
        r"i"
        return t

    def t_WORD(self, t: lex.LexToken) -> lex.LexToken:
        r"[a-z_]+"
        return t

    def t_error(self, t: lex.LexToken) -> None:
        raise SyntaxError(f"Illegal character {t.value[0]!r} at position {t.lexpos}")

    def build(self, **kwargs) -> None:  # type: ignore
        """Build the lexer."""
        kwargs.setdefault("reflags", int(re.VERBOSE | re.IGNORECASE | re.ASCII))
        self.lexer = lex.lex(module=self, **kwargs)

    def input(self, data: str) -> None:
        """Set the input string to tokenize."""
        self.lexer.input(data)

    def token(self) -> lex.LexToken | None:
        """Return the next token."""
        return self.lexer.token()

    def tokenize(self, data: str) -> list[lex.LexToken]:
        """Tokenize the input and return all tokens."""
        self.input(data)
        tokens = []
        while True:
            tok = self.token()
            if tok is None:
                break
            tokens.append(tok)
        return tokens
