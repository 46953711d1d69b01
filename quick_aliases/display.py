"""Terminal output.

Styled text (help screen, list header) goes through a Rich console.  Alias
names and commands are user data and are written to the console's file
unchanged, so they never pass through markup or Rich's text rendering.
"""

from __future__ import annotations

from rich.console import Console

from . import __version__

PROG = "quick-aliases"


def make_console(color: bool = True) -> Console:
    """Build the stdout console.

    ``soft_wrap`` keeps long lines unwrapped and ``emoji=False`` leaves
    ``:name:`` sequences alone.
    """
    return Console(
        soft_wrap=True,
        highlight=False,
        emoji=False,
        color_system="auto" if color else None,
    )


def help_text() -> str:
    """Return the help screen as Rich markup."""
    return (
        "\n"
        f"[bold white on blue] Quick aliases v{__version__} [/]\n"
        "\n"
        "The aliases are stored in the json file by path:\n"
        f"$HOME/.config/{PROG}/aliases.json\n"
        "\n"
        "[bold italic underline]Usage:[/]\n"
        "    [bold]add[/bold] \\[name] \\[command] - add new alias\n"
        "    [bold]rm[/bold] \\[name] - remove alias\n"
        "    [bold]rma[/bold] - remove all aliases\n"
        "    [bold]ls[/bold] - aliases list\n"
        "    [bold]help[/bold] - print this message\n"
    )


def print_help(console: Console) -> None:
    console.print(help_text())


def print_aliases(console: Console, aliases: dict[str, str]) -> None:
    """Print the list header and one line per alias, sorted by name."""
    console.print("[bold italic underline]Aliases list:[/]")
    for name, command in sorted(aliases.items()):
        say(console, f"Name: {name}, Command: {command}")


def say(console: Console, text: str) -> None:
    """Print *text* exactly as given, bypassing Rich's text rendering.

    Rich expands tabs and drops control characters even with markup off, so
    user-supplied names and commands are written straight to the console's
    file.
    """
    file = console.file
    file.write(text + "\n")
    file.flush()
