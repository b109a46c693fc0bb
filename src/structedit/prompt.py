"""Prompt service used by the edit session.

The session only talks to a ``Prompter``: a single-choice menu and a free-text
input with validation. ``TerminalPrompter`` implements it on top of
``input()`` with readline line editing.
"""

from __future__ import annotations

import readline
import sys
from typing import Callable, Protocol, Sequence, TextIO

Validator = Callable[[str], None]
DescriptionFunc = Callable[[str, int], str]


class Prompter(Protocol):
    """Interface of the prompt service."""

    def select(
        self,
        message: str,
        options: Sequence[str],
        description: DescriptionFunc | None = None,
    ) -> str:
        """Ask the user to pick one option and return its label."""
        ...

    def input(
        self,
        message: str,
        default: str = "",
        help: str = "",
        validate: Validator | None = None,
    ) -> str:
        """Ask for free text until ``validate`` accepts it and return it."""
        ...


def required(answer: str) -> None:
    """Reject an empty answer."""
    if not answer:
        raise ValueError("Value is required")


def compose(*validators: Validator) -> Validator:
    """Chain validators; the first one to raise rejects the answer."""

    def validate(answer: str) -> None:
        for v in validators:
            v(answer)

    return validate


class TerminalPrompter:
    """Prompter reading from stdin and writing to a text stream.

    ``EOFError`` and ``KeyboardInterrupt`` from ``input()`` are not handled
    here; they reach the caller of the session.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out or sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def select(
        self,
        message: str,
        options: Sequence[str],
        description: DescriptionFunc | None = None,
    ) -> str:
        if not options:
            raise ValueError("select needs at least one option")
        width = max(len(opt) for opt in options)
        while True:
            self._print(message)
            for i, opt in enumerate(options):
                line = f"  {i + 1:>2}. {opt.ljust(width)}"
                if description is not None:
                    descr = description(opt, i)
                    if descr:
                        line += f"  {descr}"
                self._print(line.rstrip())

            answer = input(f"Select [1-{len(options)}]: ").strip()
            if answer in options:
                return answer
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return options[int(answer) - 1]
            self._print(f"Invalid selection: {answer!r}")
            self._print()

    def input(
        self,
        message: str,
        default: str = "",
        help: str = "",
        validate: Validator | None = None,
    ) -> str:
        hint = " (? for help)" if help else ""
        while True:
            answer = self._read_line(f"{message}{hint} ", default) or default
            if help and answer == "?":
                self._print(help)
                continue
            if validate is not None:
                try:
                    validate(answer)
                except (ValueError, TypeError) as e:
                    self._print(f"Error: {e}")
                    continue
            return answer

    def _read_line(self, prompt: str, default: str) -> str:
        """Read a line with ``default`` pre-filled in the edit buffer."""
        if default:
            readline.set_startup_hook(lambda: readline.insert_text(default))
        try:
            return input(prompt)
        finally:
            readline.set_startup_hook()
