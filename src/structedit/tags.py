"""Field annotations: tag parsing and dataclass field helpers."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

DEFAULT_TAG = "ed"
DEFAULT_SEPARATOR = ":"

# Tag name that removes a field from the edit session
SKIP = "-"

# Flag segment that skips a field while it holds its zero value
OMITEMPTY = "omitempty"

# Metadata key marking a nested dataclass field as an embedded record
EMBED = "structedit.embed"


@dataclass(frozen=True)
class TagInfo:
    """Parsed form of a field annotation ``name[,omitempty]:description``."""

    name: str = ""
    description: str = ""
    skip: bool = False
    omitempty: bool = False


def parse_tag(annotation: str, sep: str = DEFAULT_SEPARATOR) -> TagInfo:
    """Parse a field annotation.

    Everything after the first separator is the description, so the
    description may contain the separator itself.
    """
    head, _, description = annotation.partition(sep)
    name, _, flag = head.partition(",")
    return TagInfo(
        name=name,
        description=description,
        skip=name == SKIP,
        omitempty=flag == OMITEMPTY,
    )


def tagged(annotation: str, *, key: str = DEFAULT_TAG, **kwargs: Any) -> Any:
    """Return a dataclass field carrying an edit annotation.

    Example:
        host: str = tagged("Host:server host name", default="localhost")
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[key] = annotation
    return dataclasses.field(metadata=metadata, **kwargs)


def embed(factory: Any, **kwargs: Any) -> Any:
    """Return a dataclass field whose record's fields are flattened into the parent."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[EMBED] = True
    return dataclasses.field(default_factory=factory, metadata=metadata, **kwargs)
