"""Shared dataclasses used throughout the CLI."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class ListParams:
    forge_url: str
    filter: str | None = None


@dataclass(frozen=True, slots=True)
class BrowseParams:
    repository_root: Path
    remote_name: str


@dataclass(frozen=True, slots=True)
class CreateParams:
    """Everything needed to create a remote repository and track it locally."""

    forge_url: str
    repository_root: Path
    remote_name: str
    repo_name: str
    description: str
    default_branch: str
    private: bool
    is_template: bool


@dataclass(frozen=True, slots=True)
class RepositorySummary:
    """One row of a repository search."""

    full_name: str
    clone_url: str
    description: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "RepositorySummary":
        return cls(
            full_name=data.get("full_name") or "",
            clone_url=data.get("clone_url") or "",
            description=data.get("description") or "",
        )


@dataclass(frozen=True, slots=True)
class Repository:
    """A repository as returned by the create endpoint."""

    full_name: str
    clone_url: str
    default_branch: str
    description: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Repository":
        return cls(
            full_name=data.get("full_name") or "",
            clone_url=data.get("clone_url") or "",
            default_branch=data.get("default_branch") or "",
            description=data.get("description") or "",
        )


@dataclass(frozen=True, slots=True)
class SearchResult:
    ok: bool
    repositories: tuple[RepositorySummary, ...] = ()


class TrustModel(str, Enum):
    DEFAULT = "default"
    COLLABORATOR = "collaborator"
    COMMITTER = "committer"
    COLLABORATOR_COMMITTER = "collaboratorcommitter"


@dataclass(frozen=True, slots=True)
class CreateRepoOptions:
    """Body of ``POST /user/repos``."""

    name: str
    default_branch: str
    trust_model: TrustModel = TrustModel.DEFAULT
    auto_init: bool = False
    private: bool = False
    template: bool = False
    description: str | None = None
    gitignores: str | None = None
    issue_labels: str | None = None
    license: str | None = None
    readme: str | None = None

    @classmethod
    def from_params(cls, params: CreateParams) -> "CreateRepoOptions":
        return cls(
            name=params.repo_name,
            default_branch=params.default_branch,
            private=params.private,
            template=params.is_template,
            description=params.description or None,
        )

    def to_payload(self) -> dict[str, Any]:
        payload = {key: value for key, value in asdict(self).items() if value is not None}
        payload["trust_model"] = self.trust_model.value
        return payload


@dataclass(frozen=True, slots=True)
class Credentials:
    username: str | None = None
    password: str | None = None


__all__ = [
    "ListParams",
    "BrowseParams",
    "CreateParams",
    "RepositorySummary",
    "Repository",
    "SearchResult",
    "TrustModel",
    "CreateRepoOptions",
    "Credentials",
]
