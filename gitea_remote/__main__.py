"""Entry point shim for `python -m gitea_remote`."""

from __future__ import annotations

from .cli import app


def main() -> None:
    app(prog_name="gitea-remote")


if __name__ == "__main__":
    main()
