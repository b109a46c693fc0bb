"""structedit - interactively edit the fields of dataclass records."""

from structedit.convert import parse_value, render_value, validate_value
from structedit.editor import DEFAULT_CONFIG, Editor, EditorConfig, ask
from structedit.prompt import Prompter, TerminalPrompter, compose, required
from structedit.resolver import Binding, FieldDescriptor, describe, is_exported, is_public, resolve
from structedit.tags import TagInfo, embed, parse_tag, tagged
from structedit.types import (
    PrimitiveKind,
    complex64,
    complex128,
    float32,
    float64,
    int8,
    int16,
    int32,
    int64,
    uint,
    uint8,
    uint16,
    uint32,
    uint64,
)

__all__ = [
    # Main API
    "Editor",
    "EditorConfig",
    "DEFAULT_CONFIG",
    "ask",
    # Resolution
    "Binding",
    "FieldDescriptor",
    "describe",
    "resolve",
    "is_exported",
    "is_public",
    # Annotations
    "TagInfo",
    "parse_tag",
    "tagged",
    "embed",
    # Conversion
    "PrimitiveKind",
    "parse_value",
    "render_value",
    "validate_value",
    # Prompt service
    "Prompter",
    "TerminalPrompter",
    "compose",
    "required",
    # Field types
    "int8",
    "int16",
    "int32",
    "int64",
    "uint",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "float32",
    "float64",
    "complex64",
    "complex128",
]

__version__ = "0.1.0"
