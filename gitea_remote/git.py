"""Thin wrappers around git CLI commands."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Iterable

from .exceptions import GitCommandError
from .models import Credentials

log = logging.getLogger(__name__)


def run_git(
    args: Iterable[str],
    *,
    cwd: Path | None = None,
    input_text: str | None = None,
    raise_on_error: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Execute a git command and optionally raise on failure."""

    cmd = ["git", *args]
    log.debug("Running %s (cwd=%s)", " ".join(cmd), cwd or ".")
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            input=input_text,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        # Missing git binary or a cwd that does not exist.
        raise GitCommandError(cmd, -1, str(exc)) from exc
    if raise_on_error and proc.returncode != 0:
        raise GitCommandError(cmd, proc.returncode, proc.stderr)
    return proc


def top_level_directory(path: Path | None = None) -> Path:
    proc = run_git(["rev-parse", "--show-toplevel"], cwd=path)
    return Path(proc.stdout.strip())


def remote_url(remote_name: str, path: Path | None = None) -> str:
    proc = run_git(["remote", "get-url", remote_name], cwd=path)
    return proc.stdout.strip()


def remote_add(remote_name: str, url: str, path: Path | None = None) -> None:
    run_git(["remote", "add", remote_name, url], cwd=path)


def fill_credentials(url: str) -> Credentials:
    """Ask git's credential helpers for the username and password of ``url``."""

    proc = run_git(["credential", "fill"], input_text=f"url={url}\n\n")
    return parse_credential_output(proc.stdout)


def parse_credential_output(output: str) -> Credentials:
    fields: dict[str, str] = {}
    for raw_line in output.splitlines():
        key, sep, value = raw_line.partition("=")
        if sep:
            fields[key.strip()] = value
    return Credentials(username=fields.get("username"), password=fields.get("password"))


__all__ = [
    "run_git",
    "top_level_directory",
    "remote_url",
    "remote_add",
    "fill_credentials",
    "parse_credential_output",
]
