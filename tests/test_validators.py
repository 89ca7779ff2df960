"""Tests for the prompt value validators."""

from __future__ import annotations

import unittest
from pathlib import Path

from gitea_remote.exceptions import ValidationError
from gitea_remote.validators import format_bool, parse_bool, parse_name, parse_path, parse_text, parse_url


class ParseUrlTests(unittest.TestCase):
    def test_accepts_absolute_url(self) -> None:
        self.assertEqual(parse_url("Gitea URL", " https://git.example.com/ "), "https://git.example.com/")

    def test_rejects_missing_or_relative_values(self) -> None:
        for raw in ("", "git.example.com", "/api/v1", "https://"):
            with self.subTest(raw=raw):
                with self.assertRaises(ValidationError) as ctx:
                    parse_url("Gitea URL", raw)
                self.assertEqual(str(ctx.exception), "Missing or invalid Gitea URL")
                self.assertEqual(ctx.exception.field, "Gitea URL")


class ParseBoolTests(unittest.TestCase):
    def test_literals_are_case_insensitive(self) -> None:
        self.assertTrue(parse_bool("Private?", "TRUE"))
        self.assertTrue(parse_bool("Private?", "True"))
        self.assertFalse(parse_bool("Private?", "false"))

    def test_other_words_fail_instead_of_meaning_false(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            parse_bool("Private?", "yes")
        self.assertIn("Private?", str(ctx.exception))

    def test_message_is_prefixed_with_the_label(self) -> None:
        # "true" appears in the reason text; the label prefix must not depend on that.
        with self.assertRaises(ValidationError) as ctx:
            parse_bool("true", "maybe")
        self.assertEqual(str(ctx.exception), "true: expected 'true' or 'false', got 'maybe'")

    def test_format_bool(self) -> None:
        self.assertEqual(format_bool(True), "true")
        self.assertEqual(format_bool(False), "false")


class TextAndPathTests(unittest.TestCase):
    def test_text_may_be_empty(self) -> None:
        self.assertEqual(parse_text("Repository description", ""), "")

    def test_name_is_stripped_and_required(self) -> None:
        self.assertEqual(parse_name("Repository name", "  myproj "), "myproj")
        with self.assertRaises(ValidationError):
            parse_name("Repository name", "   ")

    def test_path_is_not_checked_for_existence(self) -> None:
        self.assertEqual(parse_path("Repository path", "/does/not/exist"), Path("/does/not/exist"))


if __name__ == "__main__":
    unittest.main()
