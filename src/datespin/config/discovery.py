"""Config file discovery and loading.

Walk-up finder locates the nearest ``datespin.toml``, or a
``pyproject.toml`` carrying a ``[tool.datespin]`` table, similar to how
git finds .git/. The DATESPIN_CONFIG env var and the --config CLI flag
override discovery.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "datespin.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "DATESPIN_CONFIG"


def _pyproject_has_table(path: Path) -> bool:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return False
    return isinstance(data.get("tool", {}).get("datespin"), dict)


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for a config file.

    In each directory ``datespin.toml`` wins over ``pyproject.toml``.
    Returns the path to the config file, or None if not found.
    Checks DATESPIN_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = current / PYPROJECT_FILENAME
        if pyproject.is_file() and _pyproject_has_table(pyproject):
            return pyproject
        if current.parent == current:
            return None
        current = current.parent


def read_config_table(path: Path) -> dict[str, Any]:
    """Return the datespin settings table stored in *path*.

    For ``pyproject.toml`` this is ``[tool.datespin]``; any other file is
    read whole.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        table = data.get("tool", {}).get("datespin", {})
        return table if isinstance(table, dict) else {}
    return data
