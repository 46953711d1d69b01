"""Command routing.

The first argument selects a management command; anything that isn't one
is taken as the name of an alias to run.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from rich.console import Console

from . import persistence
from .display import PROG, make_console, print_aliases, print_help, say
from .log import logger
from .persistence import AliasStore
from .platform import resolve_config_path
from .preferences import Preferences, load_preferences
from .runner import execute

USAGE_ADD_NAME = (
    "You didn't specify the alias name and command. "
    f"For example: {PROG} add dcompose docker-compose"
)
USAGE_ADD_COMMAND = (
    f"You didn't specify the alias command. For example: {PROG} add dcompose docker-compose"
)
USAGE_RM = f"Specify the name of the alias to be removed. Example: {PROG} rm name"
UNRECOGNIZED = f"Unrecognized command. {PROG} help - list of commands"


class AliasCommands:
    """Handlers for one invocation against a loaded alias mapping.

    Each ``_cmd_*`` handler receives the arguments after the command word.
    Mutating handlers save the whole mapping before returning.
    """

    def __init__(
        self,
        store: AliasStore,
        aliases: dict[str, str],
        console: Console,
        *,
        shell: list[str] | None = None,
    ) -> None:
        self.store = store
        self.aliases = aliases
        self.console = console
        self.shell = shell
        self._handlers: dict[str, Callable[[list[str]], None]] = {
            "help": self._cmd_help,
            "ls": self._cmd_ls,
            "add": self._cmd_add,
            "rm": self._cmd_rm,
            "rma": self._cmd_rma,
        }

    def run(self, command: str, args: list[str]) -> None:
        handler = self._handlers.get(command)
        if handler is not None:
            handler(args)
            return
        if not execute(command, self.aliases, self.console, shell=self.shell):
            say(self.console, UNRECOGNIZED)

    # -- handlers -------------------------------------------------------------

    def _cmd_help(self, args: list[str]) -> None:
        print_help(self.console)

    def _cmd_ls(self, args: list[str]) -> None:
        print_aliases(self.console, self.aliases)

    def _cmd_add(self, args: list[str]) -> None:
        if not args:
            say(self.console, USAGE_ADD_NAME)
            return
        if len(args) < 2:
            say(self.console, USAGE_ADD_COMMAND)
            return
        name, command = args[0], " ".join(args[1:])
        if persistence.add(self.aliases, name, command):
            say(
                self.console,
                f"The new alias has been added. Name: {name} Command: {command}",
            )
        else:
            say(self.console, "This alias already exists")
        self.store.save(self.aliases)

    def _cmd_rm(self, args: list[str]) -> None:
        if not args:
            say(self.console, USAGE_RM)
            return
        name = args[0]
        if persistence.remove(self.aliases, name):
            say(self.console, f"The alias “{name}” has been removed")
        else:
            say(self.console, "This alias does not exist")
        self.store.save(self.aliases)

    def _cmd_rma(self, args: list[str]) -> None:
        persistence.remove_all(self.aliases)
        self.store.save(self.aliases)
        say(self.console, "All aliases have been removed")


def dispatch(
    argv: Sequence[str],
    *,
    config_path: Path | None = None,
    prefs: Preferences | None = None,
    console: Console | None = None,
) -> int:
    """Handle one invocation.  ``argv[0]`` is the program path and is ignored.

    Returns the exit status; fatal errors propagate as ``QuickAliasesError``.
    """
    prefs = prefs or load_preferences()
    console = console or make_console(color=prefs.display.color)

    if len(argv) < 2:
        print_help(console)
        return 0

    path = config_path or resolve_config_path()
    store = AliasStore(path)
    aliases = store.load()
    logger.debug("loaded %d alias(es) from %s", len(aliases), path)

    commands = AliasCommands(store, aliases, console, shell=prefs.shell.argv())
    commands.run(argv[1], list(argv[2:]))
    return 0
