"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    """Runtime configuration resolved from env vars."""

    root: Path
    editor: str = "code"
    explorer: str | None = None


@dataclass(frozen=True)
class DirectoryEntry:
    """A directory found under the repository root."""

    path: Path
    name: str

    @classmethod
    def from_path(cls, path: Path) -> "DirectoryEntry":
        return cls(path=path, name=path.name)


class Freshness(str, Enum):
    STALE = "stale"
    UP_TO_DATE = "up-to-date"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class StatusReport:
    """Outcome of refreshing and classifying a single repository."""

    entry: DirectoryEntry
    freshness: Freshness
    fetch_failed: bool = False
    status_text: str | None = None

    @property
    def is_stale(self) -> bool:
        return self.freshness is Freshness.STALE

    @property
    def label(self) -> str:
        if self.fetch_failed:
            return f"{self.freshness.value} (network-unconfirmed)"
        return self.freshness.value
