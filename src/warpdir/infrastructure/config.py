"""Configuration constants read from the environment."""

from __future__ import annotations

import os
from pathlib import Path

from warpdir import __version__

VERSION: str = __version__

HOME_DIR: Path = Path.home()

DEFAULT_CONFIG_PATH: Path = HOME_DIR / ".warprc"

# Backing file for warp points; -c/--config overrides it per invocation.
CONFIG_PATH: Path = Path(os.environ["WD_CONFIG"]).expanduser() if os.environ.get("WD_CONFIG") else DEFAULT_CONFIG_PATH

LOCK_ENABLED: bool = os.environ.get("WD_LOCK", "1").strip().lower() not in ("0", "false", "no", "off")

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "WARNING").upper()

LOCK_SUFFIX = ".lock"
TMP_SUFFIX = ".tmp"


def current_directory() -> str | None:
    """Return the directory the user is standing in.

    Prefers the shell's logical ``$PWD`` (symlinks kept, as the user typed it)
    when it still names the process working directory. When that directory
    has been removed, the absolute ``$PWD`` is all there is; None if unset.
    """
    logical = os.environ.get("PWD", "")
    if not os.path.isabs(logical):
        logical = ""
    try:
        physical = os.getcwd()
    except OSError:
        return logical or None
    if logical:
        try:
            if os.path.samefile(logical, physical):
                return logical
        except OSError:
            pass
    return physical


def lock_path_for(config_path: Path) -> Path:
    """Advisory lock file that sits next to a backing file."""
    return config_path.with_name(config_path.name + LOCK_SUFFIX)


def tmp_path_for(config_path: Path) -> Path:
    """Scratch file used for the write-then-rename update of a backing file."""
    return config_path.with_name(config_path.name + TMP_SUFFIX)
