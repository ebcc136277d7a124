"""Rich UI helpers for terminal output.

Diagnostics go to stderr so that stdout stays clean for values a calling
shell consumes (``repo-hop cd``).
"""

from __future__ import annotations

import json
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .models import DirectoryEntry, StatusReport

console = Console()
err_console = Console(stderr=True)

_verbose = False


def set_verbose(value: bool) -> None:
    global _verbose
    _verbose = value


def literal(value: object) -> str:
    """Escape filesystem-derived text before it goes into a markup message."""

    return escape(str(value))


def info(message: str) -> None:
    err_console.print(f"[blue]ℹ[/blue] {message}")


def success(message: str) -> None:
    err_console.print(f"[green]✓[/green] {message}")


def warning(message: str) -> None:
    err_console.print(f"[yellow]⚠[/yellow] {message}")


def debug(message: str) -> None:
    if _verbose:
        err_console.print(message, style="dim", markup=False, highlight=False)


def candidates_table(entries: Sequence[DirectoryEntry]) -> Table:
    """Numbered table used by the interactive selector."""

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Path")
    for index, entry in enumerate(entries, start=1):
        table.add_row(str(index), Text(str(entry.path)))
    return table


def show_reports(reports: Sequence[StatusReport], title: str = "Stale repositories") -> None:
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Status")
    table.add_column("Path")
    styles = {"stale": "yellow", "up-to-date": "green", "unknown": "dim"}
    for report in reports:
        style = styles[report.freshness.value]
        table.add_row(
            Text(report.entry.name),
            Text(report.label, style=style),
            Text(str(report.entry.path)),
        )
    console.print(table)


def reports_json(reports: Sequence[StatusReport]) -> str:
    data = [
        {
            "name": report.entry.name,
            "path": str(report.entry.path),
            "freshness": report.freshness.value,
            "fetch_failed": report.fetch_failed,
        }
        for report in reports
    ]
    return json.dumps(data, indent=2)
