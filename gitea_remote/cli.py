"""Typer CLI entrypoint for gitea-remote."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import typer

from . import __version__, output
from .commands import RemoteService, run_browse, run_create, run_list
from .config import configure_logging
from .exceptions import GiteaRemoteError, ValidationError
from .interactive import default_line_source
from .resolver import flag_pair
from .validators import parse_url

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Manage remote repositories on a Gitea server.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gitea-remote {__version__}")
        raise typer.Exit()


def _url_option(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        return parse_url("Gitea URL", value)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the gitea-remote version and exit.",
    ),
) -> None:
    _ = version  # handled via callback
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(1)


@app.command("list", help="List repositories on the Gitea server.")
def list_command(
    filter: Optional[str] = typer.Argument(None, help="Only list repositories whose name contains this value."),
    gitea_url: Optional[str] = typer.Option(
        None, "--gitea-url", "-g", callback=_url_option, help="Gitea URL (default: $GITEA_URL)."
    ),
) -> None:
    _run(lambda: run_list(gitea_url, filter, source=default_line_source(), service=RemoteService()))


@app.command(help="Open a remote repository's URL in the default browser.")
def browse(
    path: Optional[Path] = typer.Option(None, "--path", help="Repository path (default: current directory)."),
    remote_name: Optional[str] = typer.Option(None, "--remote-name", "-r", help="Remote name (default: 'origin')."),
) -> None:
    _run(lambda: run_browse(path, remote_name, source=default_line_source(), service=RemoteService()))


@app.command(help="Create a remote repository and track it locally.")
def create(
    gitea_url: Optional[str] = typer.Option(
        None, "--gitea-url", "-u", callback=_url_option, help="Gitea URL (default: $GITEA_URL)."
    ),
    path: Optional[Path] = typer.Option(None, "--path", help="Repository path (default: current directory)."),
    remote_name: Optional[str] = typer.Option(None, "--remote-name", "-r", help="Remote name (default: 'origin')."),
    gitea_name: Optional[str] = typer.Option(
        None, "--gitea-name", "-g", help="Repository name (default: name of the repository folder)."
    ),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="Repository description."),
    default_branch: Optional[str] = typer.Option(
        None, "--default-branch", "-b", help="Default branch (default: 'main')."
    ),
    private: bool = typer.Option(False, "--private", help="Make the repository private."),
    not_private: bool = typer.Option(False, "--not-private", help="Make the repository public."),
    template: bool = typer.Option(False, "--template", help="Mark the repository as a template."),
    not_template: bool = typer.Option(False, "--not-template", help="Do not mark the repository as a template."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    def invoke() -> None:
        private_value = flag_pair(
            private, not_private, label="Private", positive_flag="--private", negative_flag="--not-private"
        )
        template_value = flag_pair(
            template, not_template, label="Template", positive_flag="--template", negative_flag="--not-template"
        )
        run_create(
            path=path,
            forge_url=gitea_url,
            remote_name=remote_name,
            repo_name=gitea_name,
            description=description,
            default_branch=default_branch,
            private=private_value,
            is_template=template_value,
            assume_yes=yes,
            source=default_line_source(),
            service=RemoteService(),
        )

    _run(invoke)


def _run(action: Callable[[], None]) -> None:
    try:
        action()
    except GiteaRemoteError as exc:
        _fail(str(exc))


def _fail(message: str, code: int = 1) -> None:
    output.error(message)
    raise typer.Exit(code)


__all__ = ["app"]
