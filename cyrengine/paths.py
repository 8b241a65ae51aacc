"""Locating the project's asset and shader directories."""

from __future__ import annotations

import os
import sys
from pathlib import Path

_PROJECT_MARKER = "CMakeLists.txt"
_MAX_LEVELS = 8


def current_executable_path() -> str:
    """Absolute path of the running program.

    This is the script named on the command line when it exists, otherwise
    the interpreter itself.
    """
    script = sys.argv[0] if sys.argv else ""
    if script and os.path.isfile(script):
        return os.path.realpath(script)
    return os.path.realpath(sys.executable)


def _project_root() -> Path:
    root = Path(current_executable_path()).resolve().parent
    for _ in range(_MAX_LEVELS):
        if (root / _PROJECT_MARKER).exists():
            break
        root = root.parent
    if not (root / _PROJECT_MARKER).exists():
        raise FileNotFoundError("Could not find project root directory.")
    return root


def _locate(relative: str, label: str) -> str:
    path = _project_root() / relative
    if not path.exists():
        raise FileNotFoundError(f"{label} directory not found: {path}")
    return str(path)


def asset_path() -> str:
    """The project's ``Assets`` directory."""
    return _locate("Assets", "Asset")


def asset_full_path(relative_path: str) -> str:
    """A path inside the assets directory."""
    return asset_path() + "/" + relative_path


def shader_path() -> str:
    """The project's compiled shader directory."""
    return _locate("Engine/Shaders/spv", "Shaders/spv")


def shader_full_path(relative_path: str) -> str:
    """A path inside the compiled shader directory."""
    return shader_path() + "/" + relative_path