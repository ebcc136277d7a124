"""High-level orchestration for locating and inspecting repositories."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from . import render
from .exceptions import NotFoundError
from .fs import filter_repositories, locate_directories
from .interactive import select_entry
from .models import DirectoryEntry, Settings, StatusReport
from .status import check_status

Selector = Callable[[Sequence[DirectoryEntry]], DirectoryEntry | None]


@dataclass
class RepoFinder:
    settings: Settings

    def locate(self, term: str = "") -> list[DirectoryEntry]:
        return locate_directories(self.settings.root, term)

    def repositories(self, term: str = "") -> list[DirectoryEntry]:
        return filter_repositories(self.locate(term))

    def resolve_directory(self, term: str, selector: Selector = select_entry) -> Path:
        """Resolve a term to one directory; an empty term means the current directory."""

        if not term.strip():
            return Path.cwd()
        return self._select(self.locate(term), term, selector).path

    def resolve_repository(self, term: str, selector: Selector = select_entry) -> Path:
        return self._select(self.repositories(term), term, selector).path

    def status_reports(self, term: str = "") -> list[StatusReport]:
        matches = self.locate(term)
        if not matches:
            raise NotFoundError("No repos found")
        repos = filter_repositories(matches)
        render.debug(f"{len(repos)} of {len(matches)} matching directories are git repositories")
        return [check_status(entry) for entry in repos]

    def _select(self, entries: list[DirectoryEntry], term: str, selector: Selector) -> DirectoryEntry:
        selected = selector(entries)
        if selected is None:
            raise NotFoundError(f"No match found for '{term}' under {self.settings.root}")
        return selected
