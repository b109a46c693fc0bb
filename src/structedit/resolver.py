"""Field resolver: maps a record's fields to editable bindings."""

from __future__ import annotations

import dataclasses
import logging
import typing
import unicodedata
from dataclasses import dataclass, field
from typing import Any, Callable

from structedit.convert import parse_value, render_value
from structedit.tags import DEFAULT_SEPARATOR, DEFAULT_TAG, EMBED, parse_tag
from structedit.types import FieldCategory, PrimitiveKind, classify, is_zero, primitive_kind, type_name, value_type

logger = logging.getLogger(__name__)


def is_exported(field_name: str) -> bool:
    """Return True if the field name starts with an uppercase letter (Unicode Lu)."""
    if not field_name:
        raise ValueError(f"is that even a field: {field_name!r}")
    return unicodedata.category(field_name[0]) == "Lu"


def is_public(field_name: str) -> bool:
    """Return True if the field name has no leading underscore."""
    if not field_name:
        raise ValueError(f"is that even a field: {field_name!r}")
    return not field_name.startswith("_")


@dataclass(frozen=True)
class FieldDescriptor:
    """Static description of one field of a record type.

    ``exported`` is the field's visibility under the predicate the table
    was built with.
    """

    name: str
    annotation: Any
    index: int
    category: FieldCategory
    exported: bool = False
    embedded: bool = False
    metadata: typing.Mapping[str, Any] = field(default_factory=dict, repr=False)

    def tag(self, key: str) -> str:
        """Return the annotation string stored under key, or an empty string."""
        value = self.metadata.get(key, "")
        return value if isinstance(value, str) else ""


def describe(record_type: type, visible: Callable[[str], bool] = is_exported) -> tuple[FieldDescriptor, ...]:
    """Return the field descriptor table for a dataclass type."""
    if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
        raise TypeError(f"must be a dataclass type: {record_type!r}")
    hints = typing.get_type_hints(record_type, include_extras=True)
    descriptors = []
    for i, f in enumerate(dataclasses.fields(record_type)):
        annotation = hints.get(f.name, f.type)
        category = classify(annotation)
        descriptors.append(
            FieldDescriptor(
                name=f.name,
                annotation=annotation,
                index=i,
                category=category,
                exported=visible(f.name),
                embedded=category == FieldCategory.RECORD and bool(f.metadata.get(EMBED)),
                metadata=f.metadata,
            )
        )
    return tuple(descriptors)


@dataclass
class Binding:
    """Editable handle to one field of a record.

    The binding refers to the record that owns the field; it is only valid
    while that record is alive and not replaced.
    """

    name: str
    field_name: str
    index: int
    description: str
    owner: Any = field(repr=False)
    kind: PrimitiveKind | None = None
    type_name: str = ""
    settable: bool = True
    value_type: type | None = None

    @property
    def value(self) -> Any:
        return getattr(self.owner, self.field_name)

    @property
    def supported(self) -> bool:
        return self.kind is not None

    def render(self) -> str:
        """Return the current value as text."""
        return render_value(self.kind, self.value)

    def validate(self, text: str) -> None:
        """Raise ValueError or TypeError if text cannot be stored in this field."""
        parse_value(self.kind, text, self.type_name)

    def set(self, text: str) -> None:
        """Parse text and store it in the record."""
        value = parse_value(self.kind, text, self.type_name)
        if self.value_type is not None:
            try:
                value = self.value_type(value)
            except (TypeError, ValueError) as e:
                raise RuntimeError(f"can't convert {text!r} to {self.value_type.__name__}: {e}") from e
        if not self.settable:
            raise RuntimeError(f"can't set the value of field {self.name!r} to {text!r}")
        try:
            setattr(self.owner, self.field_name, value)
        except AttributeError as e:
            raise RuntimeError(f"can't set the value of field {self.name!r} to {text!r}: {e}") from e


def _is_frozen(record: Any) -> bool:
    params = getattr(type(record), "__dataclass_params__", None)
    return bool(params is not None and params.frozen)


def resolve(
    record: Any,
    tag: str = DEFAULT_TAG,
    separator: str = DEFAULT_SEPARATOR,
    visible: Callable[[str], bool] = is_exported,
) -> dict[str, Binding]:
    """Resolve a record into bindings keyed by field name.

    The mapping carries no display order; sort by ``Binding.index``.

    Empty tag or separator values fall back to the defaults.

    Raises:
        TypeError: If record is not a mutable dataclass instance.
    """
    if isinstance(record, type) or not dataclasses.is_dataclass(record):
        raise TypeError(f"must be a dataclass instance: {type(record).__name__}")
    if _is_frozen(record):
        raise TypeError(f"must be mutable: {type(record).__name__} is frozen")
    return _resolve(record, tag or DEFAULT_TAG, separator or DEFAULT_SEPARATOR, visible)


def _resolve(
    record: Any,
    tag: str,
    separator: str,
    visible: Callable[[str], bool],
) -> dict[str, Binding]:
    choices: dict[str, Binding] = {}
    settable = not _is_frozen(record)

    for desc in describe(type(record), visible):
        if desc.category in (FieldCategory.INDIRECT, FieldCategory.DYNAMIC):
            logger.debug("%s: skipping %s field", desc.name, desc.category.value)
            continue

        value = getattr(record, desc.name)

        if desc.embedded:
            nested = _resolve(value, tag, separator, visible)
            for key in nested.keys() & choices.keys():
                logger.debug("%s: embedded field %s overrides an earlier binding", desc.name, key)
            choices.update(nested)
            continue

        if not desc.exported:
            continue

        info = parse_tag(desc.tag(tag), separator)
        if info.skip:
            continue
        name = info.name or desc.name
        if info.omitempty and is_zero(value):
            logger.debug("%s: skipping zero value", desc.name)
            continue

        choices[desc.name] = Binding(
            name=name,
            field_name=desc.name,
            index=desc.index,
            description=info.description,
            owner=record,
            kind=primitive_kind(desc.annotation),
            type_name=type_name(desc.annotation),
            settable=settable,
            value_type=value_type(desc.annotation),
        )
    return choices


def ordered(bindings: dict[str, Binding]) -> list[Binding]:
    """Return bindings in display order (by field index)."""
    return sorted(bindings.values(), key=lambda b: b.index)
