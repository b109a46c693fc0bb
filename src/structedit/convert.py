"""Conversion between primitive field values and their text form.

``parse_value`` is the only parser: validation and commit both go through it,
so a value accepted by the validator is exactly the value that gets stored.
"""

from __future__ import annotations

import math
import struct
from functools import lru_cache
from typing import Any

from structedit.parsing import Literal, LiteralParser
from structedit.types import PrimitiveKind, type_range

BOOL_WORDS: dict[str, bool] = {
    "1": True,
    "t": True,
    "T": True,
    "true": True,
    "True": True,
    "TRUE": True,
    "0": False,
    "f": False,
    "F": False,
    "false": False,
    "False": False,
    "FALSE": False,
}


@lru_cache(maxsize=None)
def _parser() -> LiteralParser:
    return LiteralParser()


def parse_literal(text: str) -> Literal:
    """Parse text into a literal, raising ValueError on bad syntax."""
    try:
        return _parser().parse(text)
    except SyntaxError as e:
        raise ValueError(f"invalid syntax {text!r}: {e}") from e


def _to_float32(value: float) -> float:
    """Round a float to single precision."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError as e:
        raise ValueError(f"value {value!r} out of range for float32") from e


def _parse_int(kind: PrimitiveKind, text: str) -> int:
    lit = parse_literal(text)
    digits = lit.real if lit.is_number else None
    if digits is None or not digits.lstrip("+-").isdigit():
        raise ValueError(f"invalid syntax for {kind.value}: {text!r}")
    if kind.is_unsigned and digits[0] in "+-":
        raise ValueError(f"invalid syntax for {kind.value}: {text!r}")
    value = int(digits)
    min_val, max_val = type_range(kind)
    if value < min_val or value > max_val:
        raise ValueError(f"value {text} out of range for {kind.value} ({min_val}..{max_val})")
    return value


def _number(kind: PrimitiveKind, token: str, text: str) -> float:
    """Convert a NUMBER token, rounding to single precision for 32-bit parts."""
    value = float(token)
    # float() saturates to inf; only an explicit "inf" may produce one
    if math.isinf(value) and "inf" not in token.lower():
        raise ValueError(f"value {text} out of range for {kind.value}")
    if kind in (PrimitiveKind.FLOAT32, PrimitiveKind.COMPLEX64):
        return _to_float32(value)
    return value


def _parse_float(kind: PrimitiveKind, text: str) -> float:
    lit = parse_literal(text)
    if not lit.is_number:
        raise ValueError(f"invalid syntax for {kind.value}: {text!r}")
    return _number(kind, lit.real, text)  # type: ignore[arg-type]


def _parse_complex(kind: PrimitiveKind, text: str) -> complex:
    lit = parse_literal(text)
    if lit.word is not None:
        raise ValueError(f"invalid syntax for {kind.value}: {text!r}")
    real = _number(kind, lit.real, text) if lit.real else 0.0
    imag = _number(kind, lit.imag, text) if lit.imag else 0.0
    return complex(real, imag)


def _parse_bool(kind: PrimitiveKind, text: str) -> bool:
    try:
        return BOOL_WORDS[text]
    except KeyError:
        raise ValueError(f"invalid syntax for {kind.value}: {text!r}") from None


def parse_value(kind: PrimitiveKind | None, text: str, type_name: str = "") -> Any:
    """Parse text into a value of the given primitive kind.

    Raises:
        TypeError: If kind is None (the field's type is not supported).
        ValueError: If text does not match the kind's grammar or range.
    """
    if kind is None:
        raise TypeError(f"unsupported type: {type_name or 'unknown'}")
    if kind == PrimitiveKind.STRING:
        return text
    if kind == PrimitiveKind.BOOL:
        return _parse_bool(kind, text)
    if kind.is_integer:
        return _parse_int(kind, text)
    if kind.is_float:
        return _parse_float(kind, text)
    if kind.is_complex:
        return _parse_complex(kind, text)
    raise TypeError(f"unsupported type: {kind.value}")


def validate_value(kind: PrimitiveKind | None, text: str, type_name: str = "") -> None:
    """Check that text parses as the given kind without returning the value."""
    parse_value(kind, text, type_name)


def _format_float(value: float, bits: int) -> str:
    """Format value with the fewest digits that read back to it at this width.

    Exponents from -4 up to 5 are written positionally, the rest in
    scientific notation (``1e+06``).
    """
    if math.isnan(value) or math.isinf(value):
        return repr(value)
    if value == 0:
        return f"{value:g}"
    max_digits = 9 if bits == 32 else 17
    for digits in range(1, max_digits + 1):
        sci = f"{value:.{digits - 1}e}"
        try:
            parsed = _to_float32(float(sci)) if bits == 32 else float(sci)
        except ValueError:
            continue
        if parsed == value:
            break
    exponent = int(sci.split("e")[1])
    if -4 <= exponent < 6:
        return f"{value:.{max(digits, exponent + 1)}g}"
    return sci


def render_value(kind: PrimitiveKind | None, value: Any) -> str:
    """Render a field value as text."""
    if kind is None:
        return str(value)
    if kind == PrimitiveKind.BOOL:
        return "true" if value else "false"
    if kind == PrimitiveKind.STRING:
        return str(value)
    if kind.is_integer:
        return str(int(value))
    if kind.is_float:
        return _format_float(float(value), kind.bits)
    if kind.is_complex:
        value = complex(value)
        part_bits = kind.bits // 2
        real = _format_float(value.real, part_bits)
        imag = _format_float(value.imag, part_bits)
        if imag[0] not in "+-":
            imag = "+" + imag
        return f"({real}{imag}i)"
    return str(value)
