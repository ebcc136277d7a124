"""Tests for the numbered selection menu."""

from __future__ import annotations

import io
import unittest
from pathlib import Path

from rich.console import Console

from repo_hop.exceptions import SelectionError, UserAbort
from repo_hop.interactive import build_choices, parse_index, select_entry
from repo_hop.models import DirectoryEntry
from repo_hop.render import candidates_table


def _never_called(prompt: str) -> str:
    raise AssertionError("prompt should not be shown")


class SelectEntryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.entries = [
            DirectoryEntry.from_path(Path("/srv/src/api")),
            DirectoryEntry.from_path(Path("/srv/src/api-client")),
            DirectoryEntry.from_path(Path("/srv/src/api-docs")),
        ]
        self.out = io.StringIO()
        self.console = Console(file=self.out, width=200)

    def test_no_entries_returns_none_without_prompt(self) -> None:
        self.assertIsNone(select_entry([], console=self.console, read_line=_never_called))
        self.assertEqual(self.out.getvalue(), "")

    def test_single_entry_is_returned_without_prompt(self) -> None:
        result = select_entry(self.entries[:1], console=self.console, read_line=_never_called)
        self.assertIs(result, self.entries[0])

    def test_many_entries_prints_table_and_returns_chosen_row(self) -> None:
        prompts: list[str] = []

        def read_line(prompt: str) -> str:
            prompts.append(prompt)
            return " 2\n"

        result = select_entry(self.entries, console=self.console, read_line=read_line)

        self.assertIs(result, self.entries[1])
        self.assertEqual(prompts, ["Select [1-3]: "])
        printed = self.out.getvalue()
        for entry in self.entries:
            self.assertIn(str(entry.path), printed)

    def test_each_index_maps_to_the_same_row_as_printed(self) -> None:
        for k, expected in enumerate(self.entries, start=1):
            with self.subTest(k=k):
                result = select_entry(self.entries, console=self.console, read_line=lambda _: str(k))
                self.assertIs(result, expected)

    def test_invalid_input_raises_selection_error(self) -> None:
        for raw in ("0", "4", "-1", "two", ""):
            with self.subTest(raw=raw):
                with self.assertRaises(SelectionError):
                    select_entry(self.entries, console=self.console, read_line=lambda _: raw)

    def test_eof_raises_user_abort(self) -> None:
        def read_line(prompt: str) -> str:
            raise EOFError

        with self.assertRaises(UserAbort):
            select_entry(self.entries, console=self.console, read_line=read_line)

    def test_table_has_one_numbered_row_per_entry(self) -> None:
        table = candidates_table(self.entries)

        self.assertEqual(table.row_count, len(self.entries))
        self.assertEqual(list(table.columns[0].cells), ["1", "2", "3"])
        self.assertEqual([cell.plain for cell in table.columns[1].cells], [str(entry.path) for entry in self.entries])

    def test_bracketed_directory_names_are_printed_literally(self) -> None:
        entries = [
            DirectoryEntry.from_path(Path("/srv/src/[red]api")),
            DirectoryEntry.from_path(Path("/srv/src/api")),
        ]

        result = select_entry(entries, console=self.console, read_line=lambda _: "1")

        self.assertIs(result, entries[0])
        self.assertIn("/srv/src/[red]api", self.out.getvalue())


class ParseIndexTests(unittest.TestCase):
    def test_accepts_bounds(self) -> None:
        self.assertEqual(parse_index("1", 5), 1)
        self.assertEqual(parse_index("5", 5), 5)


class BuildChoicesTests(unittest.TestCase):
    def test_returns_lookup_and_choices_without_duplicates(self) -> None:
        entry = DirectoryEntry.from_path(Path("/srv/src/api"))
        other = DirectoryEntry.from_path(Path("/srv/src/web"))

        choices, lookup = build_choices([entry, other, entry])

        self.assertEqual([choice.value for choice in choices], [str(entry.path), str(other.path)])
        self.assertIs(lookup[choices[0].value], entry)


if __name__ == "__main__":
    unittest.main()
