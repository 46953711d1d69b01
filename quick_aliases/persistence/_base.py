"""Base JSON persistence store."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import StoreError
from ..log import logger


class CorruptStoreError(ValueError):
    """The file was readable but its content is not what the store expects."""


class JsonStore:
    """JSON file store that rewrites the whole document on every save.

    Subclasses override ``_default()`` for the empty-state value and
    ``_validate()`` to check the parsed document.  Content that fails to
    parse or validate is replaced by ``_default()`` on disk.

    Writes are not atomic.  A crash mid-write leaves a corrupt file, which
    the next ``load_raw()`` heals.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    # -- core I/O -------------------------------------------------------------

    def load_raw(self) -> Any:
        """Read and parse the JSON file, healing invalid content to ``_default()``."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreError(f"Failed to read {self.path}: {exc}") from exc

        try:
            data = self._validate(json.loads(text))
        except (json.JSONDecodeError, RecursionError, CorruptStoreError) as exc:
            logger.warning("resetting invalid store %s: %s", self.path, exc)
            data = self._default()
            self.save_raw(data)
        return data

    def save_raw(self, data: Any, *, sort_keys: bool = False) -> None:
        """Write *data* as pretty-printed JSON, replacing the file's content."""
        try:
            text = json.dumps(data, indent=2, ensure_ascii=False, sort_keys=sort_keys)
        except (TypeError, ValueError) as exc:
            raise StoreError(f"Failed to serialize data for {self.path}: {exc}") from exc
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"Failed to write {self.path}: {exc}") from exc
        logger.debug("saved %s", self.path)

    # -- override points ------------------------------------------------------

    def _default(self) -> Any:  # noqa: PLR6301
        """Return the empty-state value for this store (dict by default)."""
        return {}

    def _validate(self, data: Any) -> Any:  # noqa: PLR6301
        """Return *data* if it is acceptable, else raise ``CorruptStoreError``."""
        return data
