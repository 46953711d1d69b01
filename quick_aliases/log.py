"""Package logger.

Silent by default.  ``enable_file_logging`` is called from ``main()`` when
the user turns on ``debug_log`` in their preferences.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger("quick_aliases")
logger.addHandler(logging.NullHandler())

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def enable_file_logging(path: Path) -> logging.Handler | None:
    """Append debug records to *path*.  Returns the handler, or None on failure."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        return None
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler
