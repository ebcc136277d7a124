"""Load environment variables for runtime."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from .exceptions import ConfigurationError
from .models import Settings

ROOT_VAR = "REPO_HOP_ROOT"
EDITOR_VAR = "REPO_HOP_EDITOR"
EXPLORER_VAR = "REPO_HOP_EXPLORER"
DEFAULT_EDITOR = "code"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    root = _require_env(env, ROOT_VAR)
    if not root.is_dir():
        raise ConfigurationError(f"{ROOT_VAR} does not point to a directory: {root}")
    editor = (env.get(EDITOR_VAR) or "").strip() or DEFAULT_EDITOR
    explorer = (env.get(EXPLORER_VAR) or "").strip() or None
    return Settings(root=root, editor=editor, explorer=explorer)


def _require_env(env: Mapping[str, str], var: str) -> Path:
    raw = env.get(var)
    if not raw:
        raise ConfigurationError(
            f"Environment variable {var} is required. Example: export {var}=$HOME/src"
        )
    return Path(raw).expanduser()
