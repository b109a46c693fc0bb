"""Primitive kinds and field type classification."""

from __future__ import annotations

import abc
import dataclasses
import types
import typing
import weakref
from enum import Enum
from typing import Annotated, Any


class PrimitiveKind(Enum):
    """Primitive kinds a binding can convert to and from text."""

    BOOL = "bool"
    COMPLEX64 = "complex64"
    COMPLEX128 = "complex128"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    STRING = "string"

    @property
    def bits(self) -> int:
        """Return the storage width in bits (0 for strings)."""
        widths = {
            PrimitiveKind.BOOL: 1,
            PrimitiveKind.COMPLEX64: 64,
            PrimitiveKind.COMPLEX128: 128,
            PrimitiveKind.FLOAT32: 32,
            PrimitiveKind.FLOAT64: 64,
            PrimitiveKind.INT: 64,
            PrimitiveKind.INT8: 8,
            PrimitiveKind.INT16: 16,
            PrimitiveKind.INT32: 32,
            PrimitiveKind.INT64: 64,
            PrimitiveKind.UINT: 64,
            PrimitiveKind.UINT8: 8,
            PrimitiveKind.UINT16: 16,
            PrimitiveKind.UINT32: 32,
            PrimitiveKind.UINT64: 64,
            PrimitiveKind.STRING: 0,
        }
        return widths[self]

    @property
    def is_signed(self) -> bool:
        return self in SIGNED_KINDS

    @property
    def is_unsigned(self) -> bool:
        return self in UNSIGNED_KINDS

    @property
    def is_integer(self) -> bool:
        return self in SIGNED_KINDS or self in UNSIGNED_KINDS

    @property
    def is_float(self) -> bool:
        return self in (PrimitiveKind.FLOAT32, PrimitiveKind.FLOAT64)

    @property
    def is_complex(self) -> bool:
        return self in (PrimitiveKind.COMPLEX64, PrimitiveKind.COMPLEX128)


SIGNED_KINDS = frozenset(
    {
        PrimitiveKind.INT,
        PrimitiveKind.INT8,
        PrimitiveKind.INT16,
        PrimitiveKind.INT32,
        PrimitiveKind.INT64,
    }
)

UNSIGNED_KINDS = frozenset(
    {
        PrimitiveKind.UINT,
        PrimitiveKind.UINT8,
        PrimitiveKind.UINT16,
        PrimitiveKind.UINT32,
        PrimitiveKind.UINT64,
    }
)


def type_range(kind: PrimitiveKind) -> tuple[int, int]:
    """Return the inclusive (min, max) range of an integer kind."""
    if kind.is_signed:
        half = 1 << (kind.bits - 1)
        return -half, half - 1
    if kind.is_unsigned:
        return 0, (1 << kind.bits) - 1
    raise ValueError(f"{kind.value} is not an integer kind")


# Width-carrying aliases for record annotations, e.g. ``Port: uint16 = 0``
int8 = Annotated[int, PrimitiveKind.INT8]
int16 = Annotated[int, PrimitiveKind.INT16]
int32 = Annotated[int, PrimitiveKind.INT32]
int64 = Annotated[int, PrimitiveKind.INT64]
uint = Annotated[int, PrimitiveKind.UINT]
uint8 = Annotated[int, PrimitiveKind.UINT8]
uint16 = Annotated[int, PrimitiveKind.UINT16]
uint32 = Annotated[int, PrimitiveKind.UINT32]
uint64 = Annotated[int, PrimitiveKind.UINT64]
float32 = Annotated[float, PrimitiveKind.FLOAT32]
float64 = Annotated[float, PrimitiveKind.FLOAT64]
complex64 = Annotated[complex, PrimitiveKind.COMPLEX64]
complex128 = Annotated[complex, PrimitiveKind.COMPLEX128]

# Plain builtins map to the widest kind of their family.
# Subclasses resolve through their MRO, where bool precedes int.
BUILTIN_KINDS: dict[type, PrimitiveKind] = {
    bool: PrimitiveKind.BOOL,
    int: PrimitiveKind.INT,
    float: PrimitiveKind.FLOAT64,
    complex: PrimitiveKind.COMPLEX128,
    str: PrimitiveKind.STRING,
}


class FieldCategory(Enum):
    """How the resolver treats a field based on its declared type."""

    PRIMITIVE = "primitive"
    RECORD = "record"
    INDIRECT = "indirect"
    DYNAMIC = "dynamic"
    OTHER = "other"


def primitive_kind(annotation: Any) -> PrimitiveKind | None:
    """Return the primitive kind of an annotation, or None if unsupported."""
    if typing.get_origin(annotation) is Annotated:
        for extra in annotation.__metadata__:
            if isinstance(extra, PrimitiveKind):
                return extra
        annotation = typing.get_args(annotation)[0]
    supertype = getattr(annotation, "__supertype__", None)
    if supertype is not None:
        return primitive_kind(supertype)
    if isinstance(annotation, type) and typing.get_origin(annotation) is None and not issubclass(annotation, Enum):
        for base in annotation.__mro__:
            if base in BUILTIN_KINDS:
                return BUILTIN_KINDS[base]
    return None


def value_type(annotation: Any) -> type | None:
    """Return the builtin subclass parsed values are wrapped in, if any.

    NewType aliases need no wrapping: at runtime they are their supertype.
    """
    base = strip_annotated(annotation)
    if isinstance(base, type) and base not in BUILTIN_KINDS and primitive_kind(base) is not None:
        return base
    return None


def strip_annotated(annotation: Any) -> Any:
    """Return the base type of an Annotated[...] annotation."""
    while typing.get_origin(annotation) is Annotated:
        annotation = typing.get_args(annotation)[0]
    return annotation


def is_indirect(annotation: Any) -> bool:
    """Return whether the annotation is reference-like (nullable or weak)."""
    base = strip_annotated(annotation)
    origin = typing.get_origin(base)
    if origin is typing.Union or origin is types.UnionType:
        return True
    if base is weakref.ref or origin is weakref.ref:
        return True
    return False


def is_dynamic(annotation: Any) -> bool:
    """Return whether the annotation is open-ended (any value may appear)."""
    base = strip_annotated(annotation)
    if base is Any or base is object:
        return True
    if isinstance(base, typing.TypeVar):
        return True
    if isinstance(base, type):
        if getattr(base, "_is_protocol", False):
            return True
        if isinstance(base, abc.ABCMeta) and getattr(base, "__abstractmethods__", None):
            return True
    return False


def classify(annotation: Any) -> FieldCategory:
    """Classify a field annotation for the resolver."""
    if is_indirect(annotation):
        return FieldCategory.INDIRECT
    if is_dynamic(annotation):
        return FieldCategory.DYNAMIC
    if primitive_kind(annotation) is not None:
        return FieldCategory.PRIMITIVE
    base = strip_annotated(annotation)
    if isinstance(base, type) and dataclasses.is_dataclass(base):
        return FieldCategory.RECORD
    return FieldCategory.OTHER


def type_name(annotation: Any) -> str:
    """Return a short display name for an annotation."""
    kind = primitive_kind(annotation)
    if kind is not None:
        return kind.value
    base = strip_annotated(annotation)
    if isinstance(base, type):
        return base.__name__
    return str(base)


def is_zero(value: Any) -> bool:
    """Return whether value equals the zero value of its own type."""
    if value is None:
        return True
    try:
        return bool(value == type(value)())
    except TypeError:
        return False
