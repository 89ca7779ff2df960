"""Fixed-width text table for repository listings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .models import RepositorySummary

NAME_HEADER = "Name"
URL_HEADER = "Clone URL"
DESCRIPTION_HEADER = "Description"
NO_MATCHES = "No matches"


@dataclass(frozen=True, slots=True)
class ColumnWidths:
    name: int
    clone_url: int
    description: int


def _longest_line(text: str) -> int:
    return max(len(line) for line in text.split("\n"))


def column_widths(repositories: Sequence[RepositorySummary]) -> ColumnWidths:
    """Widths for the name, URL and description columns.

    Name and URL get one extra character of spacing; only the name column is
    held to its header width. The description width follows its longest
    line; empty descriptions count as the header width.
    """

    name = len(NAME_HEADER)
    clone_url = 0
    description = 0
    for repository in repositories:
        name = max(name, len(repository.full_name) + 1)
        clone_url = max(clone_url, len(repository.clone_url) + 1)
        if repository.description:
            description = max(description, _longest_line(repository.description))
        else:
            description = max(description, len(DESCRIPTION_HEADER))
    return ColumnWidths(name=name, clone_url=clone_url, description=description)


def format_repositories(repositories: Sequence[RepositorySummary]) -> str:
    if not repositories:
        return NO_MATCHES
    widths = column_widths(repositories)
    lines = [
        f"{NAME_HEADER:<{widths.name}} {URL_HEADER:<{widths.clone_url}} {DESCRIPTION_HEADER}",
        f"{'=' * widths.name} {'=' * widths.clone_url} {'=' * widths.description}",
    ]
    for repository in repositories:
        lines.append(
            f"{repository.full_name:<{widths.name}} {repository.clone_url:<{widths.clone_url}} {repository.description}"
        )
    return "\n".join(lines)


__all__ = [
    "NAME_HEADER",
    "URL_HEADER",
    "DESCRIPTION_HEADER",
    "NO_MATCHES",
    "ColumnWidths",
    "column_widths",
    "format_repositories",
]
