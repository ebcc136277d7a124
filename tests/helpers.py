"""Shared fixtures for building throwaway repository roots."""

from __future__ import annotations

from pathlib import Path


def make_root(base: Path, repos: list[str] = (), plain: list[str] = ()) -> Path:
    root = base / "src"
    root.mkdir()
    for name in repos:
        (root / name / ".git").mkdir(parents=True)
    for name in plain:
        (root / name).mkdir()
    return root
