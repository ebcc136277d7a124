"""Filesystem helpers for locating repositories under the root."""

from __future__ import annotations

import fnmatch
from pathlib import Path
from typing import Iterable

from .exceptions import ConfigurationError, NotARepositoryError
from .models import DirectoryEntry

GIT_MARKER = ".git"


def match_pattern(term: str) -> str:
    """Wrap a search term so it matches anywhere in a directory name."""

    return f"*{term.strip().lower()}*"


def locate_directories(root: Path | None, term: str = "") -> list[DirectoryEntry]:
    """Return immediate subdirectories of ``root`` whose name contains ``term``.

    Matching is case-insensitive and glob-style, so ``*`` and ``?`` inside the
    term act as wildcards. An empty term matches every directory.
    """

    if root is None:
        raise ConfigurationError("Repository root is not configured.")
    if not root.is_dir():
        raise ConfigurationError(f"Repository root does not exist: {root}")
    pattern = match_pattern(term)
    found = [
        DirectoryEntry.from_path(child)
        for child in root.iterdir()
        if child.is_dir() and fnmatch.fnmatchcase(child.name.lower(), pattern)
    ]
    return sorted(found, key=lambda entry: entry.name.lower())


def is_repository(path: Path) -> bool:
    # worktrees and submodules use a .git file instead of a directory
    return (path / GIT_MARKER).exists()


def ensure_repository(path: Path) -> None:
    if not is_repository(path):
        raise NotARepositoryError(path)


def filter_repositories(entries: Iterable[DirectoryEntry]) -> list[DirectoryEntry]:
    return [entry for entry in entries if is_repository(entry.path)]
