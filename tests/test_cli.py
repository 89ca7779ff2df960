"""Tests for the Typer command-line surface."""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner

from gitea_remote.cli import app
from gitea_remote.commands import RemoteService
from gitea_remote.exceptions import GitCommandError
from gitea_remote.models import Credentials, Repository, RepositorySummary, SearchResult


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        self.vcs = mock.Mock()
        self.vcs.top_level_directory.side_effect = lambda path: Path(path)
        self.vcs.fill_credentials.return_value = Credentials(username="me", password="secret")
        self.forge = mock.Mock()
        self.service = RemoteService(vcs=self.vcs, forge_factory=mock.Mock(return_value=self.forge), launch=mock.Mock(return_value=0))

    def test_no_subcommand_exits_with_failure(self) -> None:
        result = self.runner.invoke(app, [])

        self.assertEqual(result.exit_code, 1)

    def test_version(self) -> None:
        result = self.runner.invoke(app, ["--version"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("gitea-remote", result.output)

    def test_list_uses_environment_default(self) -> None:
        self.forge.search_repositories.return_value = SearchResult(
            ok=True,
            repositories=(RepositorySummary("me/proj", "https://git.example.com/me/proj.git", "Project"),),
        )
        with mock.patch("gitea_remote.cli.RemoteService", return_value=self.service):
            result = self.runner.invoke(app, ["list", "proj"], input="\n", env={"GITEA_URL": "https://git.example.com"})

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Gitea URL [default: https://git.example.com]: ", result.output)
        self.assertIn("me/proj", result.output)
        self.forge.search_repositories.assert_called_once_with("proj")

    def test_list_reports_no_matches(self) -> None:
        self.forge.search_repositories.return_value = SearchResult(ok=True)
        with mock.patch("gitea_remote.cli.RemoteService", return_value=self.service):
            result = self.runner.invoke(app, ["list", "--gitea-url", "https://git.example.com"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("No matches", result.output)

    def test_conflicting_flags_fail_before_prompting(self) -> None:
        with mock.patch("gitea_remote.cli.RemoteService", return_value=self.service):
            result = self.runner.invoke(app, ["create", "--private", "--not-private"], input="")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("--private and --not-private cannot be used together", result.output)
        self.assertNotIn("Repository path", result.output)
        self.vcs.top_level_directory.assert_not_called()

    def test_create_declined_exits_with_failure(self) -> None:
        args = [
            "create",
            "-u", "https://git.example.com",
            "--path", "/home/u/proj",
            "-r", "origin",
            "-g", "proj",
            "-d", "Project",
            "-b", "main",
            "--not-private",
            "--not-template",
        ]
        with mock.patch("gitea_remote.cli.RemoteService", return_value=self.service):
            result = self.runner.invoke(app, args, input="n\n")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Canceled", result.output)
        self.forge.create_repository.assert_not_called()

    def test_create_accepted(self) -> None:
        self.forge.create_repository.return_value = Repository(
            full_name="me/proj",
            clone_url="https://git.example.com/me/proj.git",
            default_branch="main",
        )
        args = ["create", "-u", "https://git.example.com", "--path", "/home/u/proj", "--private"]
        with mock.patch("gitea_remote.cli.RemoteService", return_value=self.service):
            result = self.runner.invoke(app, args, input="\n\n\n\n\n\n")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Private? (true or false): true", result.output)
        self.assertIn("Push: git push -u origin main", result.output)
        self.vcs.remote_add.assert_called_once_with("origin", "https://git.example.com/me/proj.git", Path("/home/u/proj"))

    def test_browse_error_exits_with_failure(self) -> None:
        self.vcs.remote_url.side_effect = GitCommandError(["git", "remote", "get-url", "origin"], 2, "No such remote")
        with mock.patch("gitea_remote.cli.RemoteService", return_value=self.service):
            result = self.runner.invoke(app, ["browse", "--path", "/home/u/proj", "-r", "origin"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error getting remote URL for 'origin'", result.output)


if __name__ == "__main__":
    unittest.main()
