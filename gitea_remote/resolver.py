"""Resolve command parameters from flags, environment defaults, and prompts.

Every field of every command goes through ``resolve_field``:

* a value supplied on the command line is trusted, echoed as
  ``"label: value"`` and used without reading input;
* otherwise the field's default is computed (a literal, an environment
  lookup, or something derived from fields resolved earlier), the user is
  prompted with ``"label [default: X]: "`` and a blank answer selects the
  default.

Fields resolve in declaration order and the first ``ValidationError`` stops
the whole command, so callers never see a partially filled record.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Generic, Mapping, Protocol, Sequence, TypeVar, Union

from . import config
from . import git
from .exceptions import ConflictingFlagsError, GitCommandError, ValidationError
from .interactive import LineSource
from .models import BrowseParams, CreateParams, ListParams
from .validators import format_bool, parse_bool, parse_name, parse_path, parse_text, parse_url, require_non_empty

T = TypeVar("T")

DefaultSupplier = Union[str, Callable[[Mapping[str, Any]], str]]


class VcsClient(Protocol):
    def top_level_directory(self, path: Path | None = None) -> Path: ...


@dataclass(frozen=True)
class Supplied(Generic[T]):
    """Value given explicitly by the caller."""

    value: T


@dataclass(frozen=True)
class Prompted(Generic[T]):
    """Value read (and validated) from interactive input."""

    value: T


ResolvedValue = Union[Supplied[T], Prompted[T]]


@dataclass(frozen=True)
class FieldSpec(Generic[T]):
    name: str
    label: str
    parse: Callable[[str, str], T]
    default: DefaultSupplier = ""
    check: Callable[[str, T], T] | None = None
    display: Callable[[T], str] = str

    def default_text(self, resolved: Mapping[str, Any]) -> str:
        if callable(self.default):
            return self.default(resolved) or ""
        return self.default


def prompt_text(label: str, default: str) -> str:
    if default:
        return f"{label} [default: {default}]: "
    return f"{label}: "


def resolve_field(
    spec: FieldSpec[T],
    explicit: T | None,
    resolved: Mapping[str, Any],
    source: LineSource,
) -> ResolvedValue[T]:
    if explicit is not None:
        source.show(f"{spec.label}: {spec.display(explicit)}")
        value = spec.check(spec.label, explicit) if spec.check else explicit
        return Supplied(value)

    default = spec.default_text(resolved)
    line = source.read_line(prompt_text(spec.label, default))
    text = line if line else default
    value = spec.parse(spec.label, text)
    if spec.check:
        value = spec.check(spec.label, value)
    return Prompted(value)


def resolve_fields(
    specs: Sequence[FieldSpec[Any]],
    explicit: Mapping[str, Any],
    source: LineSource,
) -> dict[str, ResolvedValue[Any]]:
    """Resolve ``specs`` in order; later defaults may read earlier values."""

    outcomes: dict[str, ResolvedValue[Any]] = {}
    values: dict[str, Any] = {}
    for spec in specs:
        outcome = resolve_field(spec, explicit.get(spec.name), values, source)
        outcomes[spec.name] = outcome
        values[spec.name] = outcome.value
    return outcomes


def resolved_values(outcomes: Mapping[str, ResolvedValue[Any]]) -> dict[str, Any]:
    return {name: outcome.value for name, outcome in outcomes.items()}


def flag_pair(positive: bool, negative: bool, *, label: str, positive_flag: str, negative_flag: str) -> bool | None:
    """Collapse a ``--x/--not-x`` pair into True, False, or unspecified."""

    if positive and negative:
        raise ConflictingFlagsError(label, positive_flag, negative_flag)
    if positive:
        return True
    if negative:
        return False
    return None


# Field definitions


def _cwd_default(_: Mapping[str, Any]) -> str:
    return str(Path.cwd())


def _env_gitea_url(_: Mapping[str, Any]) -> str:
    return config.default_gitea_url()


def _last_path_segment(resolved: Mapping[str, Any]) -> str:
    root = resolved.get("repository_root")
    return Path(root).name if root else ""


def _top_level_check(vcs: VcsClient) -> Callable[[str, Path], Path]:
    def check(label: str, path: Path) -> Path:
        try:
            return vcs.top_level_directory(Path(path))
        except GitCommandError as exc:
            raise ValidationError(label, f"{path} is not inside a git working copy: {exc}") from exc

    return check


def gitea_url_field() -> FieldSpec[str]:
    return FieldSpec(name="forge_url", label="Gitea URL", parse=parse_url, default=_env_gitea_url)


def repository_path_field(vcs: VcsClient) -> FieldSpec[Path]:
    return FieldSpec(
        name="repository_root",
        label="Repository path",
        parse=parse_path,
        default=_cwd_default,
        check=_top_level_check(vcs),
    )


def remote_name_field() -> FieldSpec[str]:
    return FieldSpec(
        name="remote_name",
        label="Remote name",
        parse=parse_name,
        default=config.DEFAULT_REMOTE_NAME,
        check=require_non_empty,
    )


def create_fields(vcs: VcsClient) -> list[FieldSpec[Any]]:
    return [
        repository_path_field(vcs),
        gitea_url_field(),
        remote_name_field(),
        FieldSpec(
            name="repo_name",
            label="Repository name",
            parse=parse_name,
            default=_last_path_segment,
            check=require_non_empty,
        ),
        FieldSpec(name="description", label="Repository description", parse=parse_text),
        FieldSpec(
            name="default_branch",
            label="Default branch",
            parse=parse_name,
            default=config.DEFAULT_BRANCH,
            check=require_non_empty,
        ),
        FieldSpec(
            name="private",
            label="Private? (true or false)",
            parse=parse_bool,
            default=format_bool(False),
            display=format_bool,
        ),
        FieldSpec(
            name="is_template",
            label="Template? (true or false)",
            parse=parse_bool,
            default=format_bool(False),
            display=format_bool,
        ),
    ]


# Per-command entry points


def resolve_list_params(forge_url: str | None, filter: str | None, source: LineSource) -> ListParams:
    values = resolved_values(resolve_fields([gitea_url_field()], {"forge_url": forge_url}, source))
    return ListParams(forge_url=values["forge_url"], filter=filter or None)


def resolve_browse_params(
    path: Path | None,
    remote_name: str | None,
    source: LineSource,
    vcs: VcsClient = git,
) -> BrowseParams:
    specs = [repository_path_field(vcs), remote_name_field()]
    values = resolved_values(
        resolve_fields(specs, {"repository_root": path, "remote_name": remote_name}, source)
    )
    return BrowseParams(**values)


def resolve_create_params(
    *,
    path: Path | None = None,
    forge_url: str | None = None,
    remote_name: str | None = None,
    repo_name: str | None = None,
    description: str | None = None,
    default_branch: str | None = None,
    private: bool | None = None,
    is_template: bool | None = None,
    source: LineSource,
    vcs: VcsClient = git,
) -> CreateParams:
    explicit = {
        "repository_root": path,
        "forge_url": forge_url,
        "remote_name": remote_name,
        "repo_name": repo_name,
        "description": description,
        "default_branch": default_branch,
        "private": private,
        "is_template": is_template,
    }
    values = resolved_values(resolve_fields(create_fields(vcs), explicit, source))
    return CreateParams(**values)


__all__ = [
    "Supplied",
    "Prompted",
    "ResolvedValue",
    "FieldSpec",
    "VcsClient",
    "prompt_text",
    "resolve_field",
    "resolve_fields",
    "resolved_values",
    "flag_pair",
    "gitea_url_field",
    "repository_path_field",
    "remote_name_field",
    "create_fields",
    "resolve_list_params",
    "resolve_browse_params",
    "resolve_create_params",
]
