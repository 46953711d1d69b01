"""Alias persistence store."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ._base import CorruptStoreError, JsonStore


class AliasStore(JsonStore):
    """Shell command aliases (``{name: command}``), saved sorted by name."""

    def __init__(self, path: Path) -> None:
        super().__init__(path)

    def load(self) -> dict[str, str]:
        """Load aliases from disk."""
        return self.load_raw()

    def save(self, aliases: dict[str, str]) -> None:
        """Persist aliases to disk."""
        self.save_raw(aliases, sort_keys=True)

    def _validate(self, data: Any) -> dict[str, str]:
        if not isinstance(data, dict):
            raise CorruptStoreError(f"expected a JSON object, got {type(data).__name__}")
        for name, command in data.items():
            if not isinstance(command, str):
                raise CorruptStoreError(f"alias {name!r} has a non-string command")
        return data


# ---------------------------------------------------------------------------
# Mapping operations
# ---------------------------------------------------------------------------


def add(aliases: dict[str, str], name: str, command: str) -> bool:
    """Insert *name* -> *command*.  Existing aliases are never overwritten."""
    if name in aliases:
        return False
    aliases[name] = command
    return True


def remove(aliases: dict[str, str], name: str) -> bool:
    """Delete *name*.  Returns whether it existed."""
    return aliases.pop(name, None) is not None


def remove_all(aliases: dict[str, str]) -> None:
    """Delete every alias."""
    aliases.clear()
