"""Interactive line sources and the confirmation prompt.

Resolution code only talks to a ``LineSource``: something that can show a
line of text and read one line back after printing a prompt. The terminal
gets an InquirerPy-backed source; pipes and tests get a plain stream reader.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Protocol, TextIO

from InquirerPy import inquirer

from .exceptions import PromptReadError


class LineSource(Protocol):
    def read_line(self, prompt: str) -> str:
        """Print ``prompt`` and return one line of input without its line ending."""

    def show(self, text: str) -> None:
        """Print ``text`` on its own line."""


class StreamLineSource:
    """Read answers line by line from a text stream."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin or sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    def read_line(self, prompt: str) -> str:
        try:
            self.stdout.write(prompt)
            # stdout may be buffered; the prompt must be visible before we block.
            self.stdout.flush()
            line = self.stdin.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise PromptReadError(f"Failed to read from the terminal: {exc}") from exc
        if not line:
            raise PromptReadError("Unexpected end of input while waiting for an answer.")
        return line.rstrip("\r\n")

    def show(self, text: str) -> None:
        self.stdout.write(f"{text}\n")
        self.stdout.flush()


class InquirerLineSource:
    """Line source for interactive terminals."""

    def read_line(self, prompt: str) -> str:
        try:
            answer = inquirer.text(message=prompt.rstrip(), qmark="", amark="").execute()
        except (EOFError, KeyboardInterrupt) as exc:
            raise PromptReadError("Prompt cancelled.") from exc
        return (answer or "").rstrip("\r\n")

    def show(self, text: str) -> None:
        sys.stdout.write(f"{text}\n")
        sys.stdout.flush()


def default_line_source() -> LineSource:
    if sys.stdin.isatty():
        return InquirerLineSource()
    return StreamLineSource()


@dataclass(frozen=True, slots=True)
class ConfirmPolicy:
    """Which answers count as "yes" at the confirmation prompt."""

    accepted: frozenset[str] = frozenset({"y"})
    accept_empty: bool = True
    hint: str = "[Y/n]"

    def accepts(self, answer: str) -> bool:
        normalized = answer.strip().casefold()
        if not normalized:
            return self.accept_empty
        return normalized in self.accepted


DEFAULT_CONFIRM_POLICY = ConfirmPolicy()
CONFIRM_GLYPH = "☑️"


def confirm(
    source: LineSource,
    question: str = "Continue?",
    policy: ConfirmPolicy = DEFAULT_CONFIRM_POLICY,
) -> bool:
    answer = source.read_line(f"{CONFIRM_GLYPH} {question} {policy.hint}: ")
    return policy.accepts(answer)


__all__ = [
    "LineSource",
    "StreamLineSource",
    "InquirerLineSource",
    "default_line_source",
    "ConfirmPolicy",
    "DEFAULT_CONFIRM_POLICY",
    "confirm",
]
