"""Custom error hierarchy for gitea-remote."""

from __future__ import annotations


class GiteaRemoteError(RuntimeError):
    """Base error for the CLI."""


class ValidationError(GiteaRemoteError):
    """Raised when a supplied or prompted value fails validation."""

    def __init__(self, field: str, reason: str, *, message: str | None = None):
        self.field = field
        self.reason = reason
        super().__init__(message or f"{field}: {reason}")


class ConflictingFlagsError(ValidationError):
    """Raised when both flags of a mutually exclusive pair are given."""

    def __init__(self, field: str, positive: str, negative: str):
        super().__init__(field, f"{positive} and {negative} cannot be used together")
        self.positive = positive
        self.negative = negative


class GitCommandError(GiteaRemoteError):
    """Raised when an underlying git command fails."""

    def __init__(self, command: list[str], returncode: int, stderr: str | None = None):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr or ""
        message = f"git command failed (exit {returncode}): {' '.join(command)}"
        if self.stderr.strip():
            message = f"{message}\n{self.stderr.strip()}"
        super().__init__(message)


class ForgeError(GiteaRemoteError):
    """Raised when the Gitea API rejects a request or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
        super().__init__(message)


class CommandError(GiteaRemoteError):
    """Raised when a command step fails; the message names the step."""


class UserAbort(GiteaRemoteError):
    """Raised when the user declines to continue."""


class PromptReadError(GiteaRemoteError):
    """Raised when a line cannot be read from the terminal."""


__all__ = [
    "GiteaRemoteError",
    "ValidationError",
    "ConflictingFlagsError",
    "GitCommandError",
    "ForgeError",
    "CommandError",
    "UserAbort",
    "PromptReadError",
]
