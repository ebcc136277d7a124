"""Hand a directory to the platform file browser or an editor."""

from __future__ import annotations

import shlex
import shutil
import subprocess
import sys
from pathlib import Path

from . import render
from .exceptions import LauncherError
from .models import Settings


def explorer_command(settings: Settings, platform: str | None = None) -> list[str]:
    if settings.explorer:
        return shlex.split(settings.explorer)
    platform = platform or sys.platform
    if platform.startswith("win"):
        return ["explorer"]
    if platform == "darwin":
        return ["open"]
    return ["xdg-open"]


def editor_command(settings: Settings) -> list[str]:
    command = shlex.split(settings.editor)
    if not command:
        raise LauncherError("Editor command is empty.")
    return command


def open_in_explorer(path: Path, settings: Settings) -> None:
    launch([*explorer_command(settings), str(path)])


def open_in_editor(path: Path, settings: Settings) -> None:
    launch([*editor_command(settings), str(path)])


def launch(command: list[str]) -> None:
    executable = shutil.which(command[0])
    if executable is None:
        raise LauncherError(f"Required binary not found in PATH: {command[0]}")
    render.debug(f"$ {' '.join(command)}")
    try:
        subprocess.Popen(
            [executable, *command[1:]],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=not sys.platform.startswith("win"),
        )
    except OSError as exc:
        raise LauncherError(f"Could not start {command[0]}: {exc}") from exc
