"""Environment lookups, defaults, and logging setup."""

from __future__ import annotations

import logging
import os

GITEA_URL_ENV = "GITEA_URL"
TIMEOUT_ENV = "GITEA_REMOTE_TIMEOUT"

DEFAULT_REMOTE_NAME = "origin"
DEFAULT_BRANCH = "main"
DEFAULT_TIMEOUT = 30.0


def default_gitea_url() -> str:
    """Return the forge URL from the environment, or an empty string."""
    return os.environ.get(GITEA_URL_ENV, "")


def request_timeout() -> float:
    raw = os.environ.get(TIMEOUT_ENV)
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Ignoring %s=%r; expected a number of seconds", TIMEOUT_ENV, raw
        )
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


__all__ = [
    "GITEA_URL_ENV",
    "TIMEOUT_ENV",
    "DEFAULT_REMOTE_NAME",
    "DEFAULT_BRANCH",
    "DEFAULT_TIMEOUT",
    "default_gitea_url",
    "request_timeout",
    "configure_logging",
]
