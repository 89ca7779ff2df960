"""High-level orchestration for the list, browse, and create commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import typer

from . import git, output
from .exceptions import CommandError, ForgeError, GitCommandError, UserAbort
from .gitea import GiteaClient
from .interactive import ConfirmPolicy, DEFAULT_CONFIRM_POLICY, LineSource, confirm
from .models import BrowseParams, CreateParams, CreateRepoOptions, ListParams, Repository, RepositorySummary
from .report import NO_MATCHES, format_repositories
from .resolver import resolve_browse_params, resolve_create_params, resolve_list_params

log = logging.getLogger(__name__)


@dataclass
class RemoteService:
    """The collaborators a command talks to once its parameters are known."""

    vcs: Any = git
    forge_factory: Callable[..., GiteaClient] = GiteaClient
    launch: Callable[[str], int] = typer.launch

    def search(self, params: ListParams) -> tuple[RepositorySummary, ...]:
        forge = self.forge_factory(params.forge_url)
        try:
            result = forge.search_repositories(params.filter)
        except ForgeError as exc:
            raise CommandError(f"Error listing repositories on {params.forge_url}: {exc}") from exc
        if not result.ok:
            raise CommandError("Failed to get repositories")
        return result.repositories

    def browse(self, params: BrowseParams) -> str:
        try:
            url = self.vcs.remote_url(params.remote_name, params.repository_root)
        except GitCommandError as exc:
            raise CommandError(f"Error getting remote URL for '{params.remote_name}': {exc}") from exc
        try:
            status = self.launch(url)
        except OSError as exc:
            raise CommandError(f"Error opening '{params.remote_name}': {exc}") from exc
        if status:
            raise CommandError(f"Error opening '{params.remote_name}': browser exited with status {status}")
        return url

    def create_remote(self, params: CreateParams) -> Repository:
        try:
            credentials = self.vcs.fill_credentials(params.forge_url)
        except GitCommandError as exc:
            raise CommandError(f"Error getting credentials for {params.forge_url}: {exc}") from exc
        forge = self.forge_factory(params.forge_url, credentials.username, credentials.password)
        try:
            return forge.create_repository(CreateRepoOptions.from_params(params))
        except ForgeError as exc:
            raise CommandError(f"Error creating remote repository '{params.repo_name}': {exc}") from exc

    def track_remote(self, params: CreateParams, repository: Repository) -> None:
        try:
            self.vcs.remote_add(params.remote_name, repository.clone_url, params.repository_root)
        except GitCommandError as exc:
            # The forge side is not rolled back.
            raise CommandError(
                f"Error adding remote '{params.remote_name}' in {params.repository_root}: {exc}\n"
                f"The remote repository {repository.clone_url} was created; "
                f"track it with: git remote add {params.remote_name} {repository.clone_url}"
            ) from exc


def run_list(
    forge_url: str | None,
    filter: str | None,
    *,
    source: LineSource,
    service: RemoteService,
) -> None:
    params = resolve_list_params(forge_url, filter, source)
    log.debug("Listing repositories on %s (filter=%r)", params.forge_url, params.filter)
    repositories = service.search(params)
    if not repositories:
        output.info(NO_MATCHES)
        return
    typer.echo(format_repositories(repositories))


def run_browse(
    path: Path | None,
    remote_name: str | None,
    *,
    source: LineSource,
    service: RemoteService,
) -> None:
    params = resolve_browse_params(path, remote_name, source, service.vcs)
    url = service.browse(params)
    output.success(f"Opened '{url}'")


def run_create(
    *,
    path: Path | None,
    forge_url: str | None,
    remote_name: str | None,
    repo_name: str | None,
    description: str | None,
    default_branch: str | None,
    private: bool | None,
    is_template: bool | None,
    assume_yes: bool = False,
    source: LineSource,
    service: RemoteService,
    policy: ConfirmPolicy = DEFAULT_CONFIRM_POLICY,
) -> Repository:
    params = resolve_create_params(
        path=path,
        forge_url=forge_url,
        remote_name=remote_name,
        repo_name=repo_name,
        description=description,
        default_branch=default_branch,
        private=private,
        is_template=is_template,
        source=source,
        vcs=service.vcs,
    )
    if not assume_yes and not confirm(source, policy=policy):
        raise UserAbort("Canceled")

    repository = service.create_remote(params)
    output.success(f"Created remote repository: {repository.clone_url}")

    service.track_remote(params, repository)
    output.success(f"Tracking remote repository locally as: {params.remote_name}")
    output.info(f"Push: git push -u {params.remote_name} {repository.default_branch or params.default_branch}")
    return repository


__all__ = ["RemoteService", "run_list", "run_browse", "run_create"]
