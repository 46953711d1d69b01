"""Entry point for the quick-aliases CLI."""

from __future__ import annotations

import sys

from .commands import dispatch
from .display import PROG
from .errors import ConfigError, QuickAliasesError
from .log import enable_file_logging, logger
from .platform import debug_log_path
from .preferences import load_preferences


def _start_debug_log() -> None:
    """Attach the debug log file; warn on stderr if it can't be opened."""
    try:
        path = debug_log_path()
    except ConfigError:
        return  # Reported by config path resolution during dispatch
    if enable_file_logging(path) is None:
        print(f"{PROG}: cannot open debug log {path}", file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    """Run quick-aliases with *argv* (defaults to ``sys.argv``) and exit."""
    argv = sys.argv if argv is None else argv
    prefs = load_preferences()

    if prefs.debug_log:
        _start_debug_log()
    logger.debug("invoked with %r", argv[1:])

    try:
        code = dispatch(argv, prefs=prefs)
    except KeyboardInterrupt:
        code = 130
    except QuickAliasesError as exc:
        logger.debug("Fatal error in %s", PROG, exc_info=True)
        print(f"{PROG}: {exc}", file=sys.stderr)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
