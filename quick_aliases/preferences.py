"""User preferences for quick-aliases.

Loads optional settings from ~/.config/quick-aliases/preferences.yaml.
Falls back to defaults if the file doesn't exist or is invalid.  Unlike the
aliases file it is never created automatically; ``DEFAULT_YAML`` documents
the recognised keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .errors import ConfigError
from .log import logger
from .platform import default_shell, preferences_path

DEFAULT_YAML = """\
# quick-aliases preferences
# Delete this file to reset to defaults.

display:
  color: true          # styled help text and list header

shell:
  program: ""          # shell used to run aliases (empty = /bin/sh, cmd.exe on Windows)
  args: ["-c"]         # flags placed before the command string

debug_log: false       # append debug output to ~/.config/quick-aliases/debug.log
"""


@dataclass
class DisplayPreferences:
    """Terminal output settings."""

    color: bool = True


@dataclass
class ShellPreferences:
    """Which shell runs alias commands."""

    program: str = ""  # Empty means platform default
    args: list[str] = field(default_factory=lambda: ["-c"])

    def argv(self) -> list[str]:
        """Return the argv prefix the command string is appended to."""
        if not self.program:
            return default_shell()
        return [self.program, *self.args]


@dataclass
class Preferences:
    """Top-level preferences."""

    display: DisplayPreferences = field(default_factory=DisplayPreferences)
    shell: ShellPreferences = field(default_factory=ShellPreferences)
    debug_log: bool = False


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file, falling back to defaults."""
    prefs = Preferences()
    if path is None:
        try:
            path = preferences_path()
        except ConfigError:
            return prefs  # Aliases file resolution reports this properly

    if not path.exists():
        return prefs

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        logger.debug("failed to load preferences from %s", path, exc_info=True)
        return prefs
    if not isinstance(data, dict):
        logger.debug("ignoring preferences in %s: not a mapping", path)
        return prefs

    if isinstance(data.get("display"), dict):
        ddata = data["display"]
        if "color" in ddata:
            prefs.display.color = bool(ddata["color"])
    if isinstance(data.get("shell"), dict):
        sdata = data["shell"]
        if "program" in sdata:
            prefs.shell.program = str(sdata["program"] or "")
        if isinstance(sdata.get("args"), list):
            prefs.shell.args = [str(arg) for arg in sdata["args"]]
    if "debug_log" in data:
        prefs.debug_log = bool(data["debug_log"])

    return prefs
