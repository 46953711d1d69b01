"""Platform-specific paths and shell selection.

Every other module asks this one where the config lives and which shell
runs an alias, instead of doing its own detection.
"""

from __future__ import annotations

import platform
from pathlib import Path

from .errors import ConfigError
from .log import logger

# ---------------------------------------------------------------------------
# Platform detection (runs once at import time)
# ---------------------------------------------------------------------------

IS_WINDOWS = platform.system() == "Windows"

APP_NAME = "quick-aliases"
ALIASES_FILENAME = "aliases.json"
PREFERENCES_FILENAME = "preferences.yaml"
DEBUG_LOG_FILENAME = "debug.log"

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


def config_dir() -> Path:
    """Return ``~/.config/quick-aliases`` (same layout on every platform)."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise ConfigError(f"Cannot determine the home directory: {exc}") from exc
    return home / ".config" / APP_NAME


def preferences_path() -> Path:
    """Return the optional YAML preferences file path."""
    return config_dir() / PREFERENCES_FILENAME


def debug_log_path() -> Path:
    """Return the file debug logging writes to when enabled."""
    return config_dir() / DEBUG_LOG_FILENAME


def resolve_config_path() -> Path:
    """Return the aliases file path, creating the directory and file if missing.

    A freshly created file is empty; the store heals it to ``{}`` on first
    load.
    """
    directory = config_dir()
    try:
        if not directory.exists():
            logger.debug("creating config directory %s", directory)
            directory.mkdir(parents=True, exist_ok=True)
        path = directory / ALIASES_FILENAME
        if not path.exists():
            logger.debug("creating empty aliases file %s", path)
            path.touch()
    except OSError as exc:
        raise ConfigError(f"Failed to create config file in {directory}: {exc}") from exc
    return path


# ---------------------------------------------------------------------------
# Shell
# ---------------------------------------------------------------------------


def default_shell() -> list[str]:
    """Return the argv prefix that hands a command string to the system shell."""
    if IS_WINDOWS:
        return ["cmd.exe", "/c"]
    return ["/bin/sh", "-c"]
