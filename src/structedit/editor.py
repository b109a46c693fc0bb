"""Interactive editor for dataclass records."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Callable

from structedit.prompt import Prompter, TerminalPrompter, compose, required
from structedit.resolver import Binding, is_exported, ordered, resolve
from structedit.tags import DEFAULT_SEPARATOR, DEFAULT_TAG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditorConfig:
    """Settings of an Editor.

    Attributes:
        tag: Metadata key holding each field's annotation.
        separator: Separator between the name segment and the description.
        ok_label: Label of the menu entry that finishes the session.
        ok_description: Description shown next to ``ok_label``.
        visible: Predicate deciding which field names are editable.
    """

    tag: str = DEFAULT_TAG
    separator: str = DEFAULT_SEPARATOR
    ok_label: str = "[ OK ]"
    ok_description: str = "Finish the setup"
    visible: Callable[[str], bool] = is_exported

    def replace(self, **options: Any) -> EditorConfig:
        """Return a copy with the given options applied.

        Empty strings and None leave the current value in place.
        """
        unknown = options.keys() - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise TypeError(f"unknown editor options: {', '.join(sorted(unknown))}")
        changes = {k: v for k, v in options.items() if v is not None and v != ""}
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG = EditorConfig()


class Editor:
    """Runs edit sessions over dataclass records.

    Example:
        editor = Editor(tag="cfg", ok_label="[ Save ]")
        editor.ask("Server settings", settings)
    """

    def __init__(
        self,
        config: EditorConfig | None = None,
        prompter: Prompter | None = None,
        **options: Any,
    ) -> None:
        self.config = (config or DEFAULT_CONFIG).replace(**options)
        self.prompter: Prompter = prompter or TerminalPrompter()

    def with_options(self, **options: Any) -> Editor:
        """Return a new editor sharing this one's prompter with options applied."""
        return Editor(self.config, self.prompter, **options)

    def resolve(self, record: Any) -> dict[str, Binding]:
        """Resolve record into bindings using this editor's settings."""
        return resolve(
            record,
            tag=self.config.tag,
            separator=self.config.separator,
            visible=self.config.visible,
        )

    def describe(self, bindings: dict[str, Binding], option: str) -> str:
        """Return the menu description of an option."""
        if option == self.config.ok_label:
            return self.config.ok_description
        binding = bindings[option]
        if binding.description:
            return f"[{binding.render()}]: {binding.description}"
        return f"[{binding.render()}]"

    def ask(self, message: str, record: Any) -> None:
        """Run an edit session over record, changing its fields in place.

        Returns when the user picks the finish entry. Errors raised by the
        prompter propagate unchanged and end the session.

        Raises:
            TypeError: If record is not a mutable dataclass instance.
            RuntimeError: If a field cannot be written.
        """
        bindings = self.resolve(record)
        options = [b.field_name for b in ordered(bindings)]
        options.append(self.config.ok_label)

        while True:
            choice = self.prompter.select(
                message,
                options,
                description=lambda option, index: self.describe(bindings, option),
            )
            if choice == self.config.ok_label:
                return
            self.edit(bindings[choice])

    def edit(self, binding: Binding) -> None:
        """Prompt for a new value of one field and store it."""
        if not binding.supported:
            logger.warning("can't edit field %r: unsupported type: %s", binding.name, binding.type_name)
            return
        answer = self.prompter.input(
            f"Input value for {binding.name!r}:",
            default=binding.render(),
            help=binding.description,
            validate=compose(required, binding.validate),
        )
        binding.set(answer)
        logger.debug("%s set to %r", binding.field_name, binding.value)


def ask(message: str, record: Any) -> None:
    """Run an edit session over record with the default settings."""
    Editor(DEFAULT_CONFIG).ask(message, record)
