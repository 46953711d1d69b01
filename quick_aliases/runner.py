"""Alias execution.

The command string goes to the shell verbatim.  The child inherits stdin,
stdout and stderr, so its output reaches the terminal directly and nothing
is captured or re-echoed here.
"""

from __future__ import annotations

import subprocess

from rich.console import Console

from .display import say
from .errors import RunnerError
from .log import logger
from .platform import default_shell


def execute(
    name: str,
    aliases: dict[str, str],
    console: Console,
    *,
    shell: list[str] | None = None,
) -> bool:
    """Run alias *name* and wait for it.

    Returns False if *name* is not a stored alias.  Otherwise returns True
    once the child exits, whatever its exit code.
    """
    command = aliases.get(name)
    if command is None:
        return False

    say(console, f"Execute command: {command}")
    argv = [*(shell or default_shell()), command]
    logger.debug("running alias %r: %r", name, argv)
    try:
        proc = subprocess.Popen(argv)  # noqa: S603
    except OSError as exc:
        raise RunnerError(f"Failed to start shell {argv[0]!r}: {exc}") from exc

    try:
        returncode = proc.wait()
    except KeyboardInterrupt:
        # The child got the same SIGINT; let it finish before re-raising.
        proc.wait()
        raise
    logger.debug("alias %r exited with status %s", name, returncode)
    return True
