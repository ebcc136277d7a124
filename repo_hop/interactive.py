"""Interactive prompt helpers: a numbered menu plus an InquirerPy fuzzy picker."""

from __future__ import annotations

import sys
from typing import Callable, Sequence

from InquirerPy import inquirer
from InquirerPy.base.control import Choice
from rich.console import Console

from . import render
from .exceptions import SelectionError, UserAbort
from .models import DirectoryEntry


def _ensure_tty() -> None:
    if not sys.stdin.isatty():
        raise SelectionError("Interactive mode requires a TTY. Narrow the search term instead.")


def select_entry(
    entries: Sequence[DirectoryEntry],
    *,
    console: Console | None = None,
    read_line: Callable[[str], str] | None = None,
) -> DirectoryEntry | None:
    """Pick one entry, prompting only when there is more than one.

    Returns ``None`` for an empty sequence. With several candidates a numbered
    table is printed and a 1-based index is read from ``read_line``.
    """

    if not entries:
        return None
    if len(entries) == 1:
        return entries[0]
    console = console or render.err_console
    read_line = read_line or console.input
    console.print(render.candidates_table(entries))
    try:
        raw = read_line(f"Select [1-{len(entries)}]: ")
    except (EOFError, KeyboardInterrupt) as exc:
        raise UserAbort("Selection aborted.") from exc
    return entries[parse_index(raw, len(entries)) - 1]


def parse_index(raw: str, count: int) -> int:
    value = raw.strip()
    try:
        index = int(value)
    except ValueError as exc:
        raise SelectionError(f"Not a number: {value!r}") from exc
    if not 1 <= index <= count:
        raise SelectionError(f"Selection {index} is out of range (1-{count}).")
    return index


def fuzzy_select_entry(entries: Sequence[DirectoryEntry], message: str = "Select directory") -> DirectoryEntry | None:
    if not entries:
        return None
    if len(entries) == 1:
        return entries[0]
    _ensure_tty()
    choices, lookup = build_choices(entries)
    selection = inquirer.fuzzy(message=message, choices=choices).execute()
    if selection is None:
        raise UserAbort("Selection aborted.")
    try:
        return lookup[str(selection)]
    except KeyError as exc:
        raise SelectionError("Selected directory could not be resolved.") from exc


def build_choices(entries: Sequence[DirectoryEntry]) -> tuple[list[Choice], dict[str, DirectoryEntry]]:
    """Return the choice list used for prompts plus a lookup keyed by path."""

    lookup: dict[str, DirectoryEntry] = {}
    choices: list[Choice] = []
    for entry in entries:
        key = str(entry.path)
        if key in lookup:
            continue
        lookup[key] = entry
        choices.append(Choice(value=key, name=f"{entry.name} · {entry.path}"))
    return choices, lookup
