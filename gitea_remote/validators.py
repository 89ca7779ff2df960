"""Validators that turn raw prompt text into typed values.

Each validator takes the field label (used in error messages) and the raw
text, and either returns the typed value or raises ``ValidationError``.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlsplit

from .exceptions import ValidationError

TRUE_LITERAL = "true"
FALSE_LITERAL = "false"


def parse_url(label: str, raw: str) -> str:
    """Accept only absolute URLs (scheme and host)."""
    text = raw.strip()
    try:
        parts = urlsplit(text)
    except ValueError:
        parts = None
    if not text or parts is None or not parts.scheme or not parts.netloc:
        raise ValidationError(label, "missing or invalid", message=f"Missing or invalid {label}")
    return text


def parse_bool(label: str, raw: str) -> bool:
    text = raw.strip().lower()
    if text == TRUE_LITERAL:
        return True
    if text == FALSE_LITERAL:
        return False
    raise ValidationError(label, f"expected '{TRUE_LITERAL}' or '{FALSE_LITERAL}', got '{raw.strip()}'")


def parse_text(label: str, raw: str) -> str:
    """Free text; may be empty."""
    return raw


def parse_name(label: str, raw: str) -> str:
    return require_non_empty(label, raw.strip())


def parse_path(label: str, raw: str) -> Path:
    # Existence is decided by git, not here.
    text = raw.strip()
    if not text:
        raise ValidationError(label, "a path is required")
    return Path(text).expanduser()


def require_non_empty(label: str, value: str) -> str:
    if not value.strip():
        raise ValidationError(label, "cannot be empty")
    return value


def format_bool(value: bool) -> str:
    return TRUE_LITERAL if value else FALSE_LITERAL


__all__ = [
    "parse_url",
    "parse_bool",
    "parse_text",
    "parse_name",
    "parse_path",
    "require_non_empty",
    "format_bool",
]
