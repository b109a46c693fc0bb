"""Tests for primitive kinds and field type classification."""

import abc
import weakref
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, NewType, Optional, Protocol, TypeVar, Union

import pytest

from structedit.types import (
    FieldCategory,
    PrimitiveKind,
    classify,
    complex64,
    float32,
    int8,
    is_zero,
    primitive_kind,
    type_name,
    type_range,
    uint,
    uint16,
    value_type,
)


class Greeter(Protocol):
    def greet(self) -> str: ...


class Shape(abc.ABC):
    @abc.abstractmethod
    def area(self) -> float: ...


class Square(Shape):
    def area(self) -> float:
        return 1.0


@dataclass
class Point:
    X: int = 0
    Y: int = 0


class Pair:
    def __init__(self, a, b):
        self.a, self.b = a, b


T = TypeVar("T")

Port = NewType("Port", int)
Ratio = NewType("Ratio", float)


class Level(int):
    pass


class Label(str):
    pass


class Flag(IntEnum):
    ON = 1


class Color(str, Enum):
    RED = "red"


class TestPrimitiveKind:
    """Tests for PrimitiveKind."""

    def test_bits(self):
        """Test bit widths of the integer kinds."""
        assert PrimitiveKind.INT8.bits == 8
        assert PrimitiveKind.UINT16.bits == 16
        assert PrimitiveKind.INT32.bits == 32
        assert PrimitiveKind.UINT64.bits == 64
        assert PrimitiveKind.INT.bits == 64
        assert PrimitiveKind.UINT.bits == 64
        assert PrimitiveKind.COMPLEX64.bits == 64
        assert PrimitiveKind.FLOAT32.bits == 32

    def test_families(self):
        """Test family predicates."""
        assert PrimitiveKind.INT16.is_signed
        assert not PrimitiveKind.INT16.is_unsigned
        assert PrimitiveKind.UINT8.is_unsigned
        assert PrimitiveKind.UINT8.is_integer
        assert PrimitiveKind.FLOAT64.is_float
        assert PrimitiveKind.COMPLEX128.is_complex
        assert not PrimitiveKind.STRING.is_integer
        assert not PrimitiveKind.BOOL.is_integer

    def test_type_range(self):
        """Test integer ranges."""
        assert type_range(PrimitiveKind.INT8) == (-128, 127)
        assert type_range(PrimitiveKind.UINT8) == (0, 255)
        assert type_range(PrimitiveKind.INT64) == (-(2**63), 2**63 - 1)
        assert type_range(PrimitiveKind.UINT) == (0, 2**64 - 1)

    def test_type_range_not_integer(self):
        """Test error for non-integer kinds."""
        with pytest.raises(ValueError):
            type_range(PrimitiveKind.FLOAT32)


class TestPrimitiveKindOf:
    """Tests for mapping annotations to kinds."""

    @pytest.mark.parametrize(
        "annotation,kind",
        [
            (bool, PrimitiveKind.BOOL),
            (int, PrimitiveKind.INT),
            (float, PrimitiveKind.FLOAT64),
            (complex, PrimitiveKind.COMPLEX128),
            (str, PrimitiveKind.STRING),
            (int8, PrimitiveKind.INT8),
            (uint, PrimitiveKind.UINT),
            (uint16, PrimitiveKind.UINT16),
            (float32, PrimitiveKind.FLOAT32),
            (complex64, PrimitiveKind.COMPLEX64),
        ],
    )
    def test_supported(self, annotation, kind):
        assert primitive_kind(annotation) is kind

    @pytest.mark.parametrize("annotation", [list, dict[str, int], bytes, Point])
    def test_unsupported(self, annotation):
        assert primitive_kind(annotation) is None

    def test_type_name(self):
        """Test display names of annotations."""
        assert type_name(uint16) == "uint16"
        assert type_name(str) == "string"
        assert type_name(list) == "list"
        assert type_name(Point) == "Point"

    @pytest.mark.parametrize(
        "annotation,kind",
        [
            (Port, PrimitiveKind.INT),
            (Ratio, PrimitiveKind.FLOAT64),
            (Level, PrimitiveKind.INT),
            (Label, PrimitiveKind.STRING),
        ],
    )
    def test_named_types(self, annotation, kind):
        """NewType aliases and builtin subclasses use their underlying kind."""
        assert primitive_kind(annotation) is kind
        assert classify(annotation) is FieldCategory.PRIMITIVE

    @pytest.mark.parametrize("annotation", [Flag, Color])
    def test_enums_unsupported(self, annotation):
        assert primitive_kind(annotation) is None

    def test_value_type(self):
        """Only builtin subclasses need their parsed values wrapped."""
        assert value_type(Level) is Level
        assert value_type(Label) is Label
        assert value_type(Port) is None
        assert value_type(int) is None
        assert value_type(int8) is None
        assert value_type(list) is None


class TestClassify:
    """Tests for field classification."""

    @pytest.mark.parametrize(
        "annotation", [Optional[int], Union[int, str], int | None, weakref.ref]
    )
    def test_indirect(self, annotation):
        assert classify(annotation) is FieldCategory.INDIRECT

    @pytest.mark.parametrize("annotation", [Any, object, T, Greeter, Shape])
    def test_dynamic(self, annotation):
        assert classify(annotation) is FieldCategory.DYNAMIC

    def test_concrete_subclass_is_not_dynamic(self):
        """A concrete implementation of an abstract class is an ordinary type."""
        assert classify(Square) is FieldCategory.OTHER

    def test_primitive(self):
        assert classify(int8) is FieldCategory.PRIMITIVE
        assert classify(bool) is FieldCategory.PRIMITIVE

    def test_record(self):
        assert classify(Point) is FieldCategory.RECORD

    def test_other(self):
        assert classify(list[int]) is FieldCategory.OTHER


class TestIsZero:
    """Tests for zero value detection."""

    @pytest.mark.parametrize("value", [0, 0.0, 0j, "", False, None, [], Point()])
    def test_zero(self, value):
        assert is_zero(value) is True

    @pytest.mark.parametrize("value", [4, -1.5, 1j, "x", True, [0], Point(X=1)])
    def test_non_zero(self, value):
        assert is_zero(value) is False

    def test_type_without_default_constructor(self):
        """Values whose type cannot be built without arguments are never zero."""
        assert is_zero(Pair(0, 0)) is False
