"""Thin wrappers around git CLI commands."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Iterable, Mapping

from . import render
from .exceptions import GitCommandError

# status text is classified by substring, so keep git's messages untranslated
_STABLE_ENV = {"LC_ALL": "C", "LANG": "C"}


def run_git(
    args: Iterable[str],
    *,
    cwd: Path,
    raise_on_error: bool = True,
    env: Mapping[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Execute a git command and optionally raise on failure."""

    cmd = ["git", *args]
    render.debug(f"$ {' '.join(cmd)}  (in {cwd})")
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=False,
            env={**os.environ, **_STABLE_ENV, **(env or {})},
        )
    except FileNotFoundError as exc:
        raise GitCommandError(cmd, 127, "git executable not found") from exc
    if raise_on_error and proc.returncode != 0:
        raise GitCommandError(cmd, proc.returncode, proc.stderr)
    return proc


def fetch(path: Path) -> bool:
    """Refresh remote-tracking refs. Returns False instead of raising on failure."""

    try:
        proc = run_git(
            ["fetch", "--quiet"],
            cwd=path,
            raise_on_error=False,
            env={"GIT_TERMINAL_PROMPT": "0"},
        )
    except GitCommandError as exc:
        render.debug(f"fetch failed in {path}: {exc.stderr}")
        return False
    if proc.returncode != 0:
        render.debug(f"fetch failed in {path}: {proc.stderr.strip()}")
        return False
    return True


def status_text(path: Path) -> str | None:
    try:
        proc = run_git(["status"], cwd=path, raise_on_error=False)
    except GitCommandError as exc:
        render.debug(f"status failed in {path}: {exc.stderr}")
        return None
    if proc.returncode != 0:
        render.debug(f"status failed in {path}: {proc.stderr.strip()}")
        return None
    return proc.stdout
