"""Rich console helpers for status messages."""

from __future__ import annotations

from rich.console import Console

INFO_GLYPH = "ℹ️"
SUCCESS_GLYPH = "✔️"
ERROR_GLYPH = "💥"

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def info(message: str) -> None:
    console.print(f"{INFO_GLYPH} {message}", markup=False, emoji=False, soft_wrap=True)


def success(message: str) -> None:
    console.print(f"{SUCCESS_GLYPH} {message}", markup=False, emoji=False, soft_wrap=True)


def error(message: str) -> None:
    err_console.print(f"{ERROR_GLYPH} {message}", markup=False, emoji=False, soft_wrap=True, style="red")


__all__ = ["info", "success", "error", "INFO_GLYPH", "SUCCESS_GLYPH", "ERROR_GLYPH"]
