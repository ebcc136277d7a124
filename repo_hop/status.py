"""Refresh a repository and classify how fresh it is."""

from __future__ import annotations

import re

from . import git, render
from .exceptions import NotARepositoryError
from .fs import ensure_repository
from .models import DirectoryEntry, Freshness, StatusReport

BEHIND_MARKER = "Your branch is behind"
_UP_TO_DATE = re.compile(r"up[\s-]+to[\s-]+date", re.IGNORECASE)


def classify(text: str | None) -> Freshness:
    """Map ``git status`` output to a freshness category.

    The behind check runs first; the first match wins.
    """

    if not text:
        return Freshness.UNKNOWN
    if BEHIND_MARKER in text:
        return Freshness.STALE
    if _UP_TO_DATE.search(text):
        return Freshness.UP_TO_DATE
    return Freshness.UNKNOWN


def check_status(entry: DirectoryEntry) -> StatusReport:
    try:
        ensure_repository(entry.path)
    except NotARepositoryError as exc:
        render.warning(f"{render.literal(exc)}; skipping status check.")
        return StatusReport(entry=entry, freshness=Freshness.UNKNOWN)
    fetched = git.fetch(entry.path)
    text = git.status_text(entry.path)
    freshness = classify(text)
    render.debug(f"{entry.name}: {freshness.value}")
    return StatusReport(entry=entry, freshness=freshness, fetch_failed=not fetched, status_text=text)
