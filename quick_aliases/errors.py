"""Fatal errors.

Anything raised from here aborts the invocation: ``main()`` prints the
message to stderr and exits with status 1.  Expected conditions (unknown
alias, duplicate name, missing arguments) are never exceptions.
"""

from __future__ import annotations


class QuickAliasesError(Exception):
    """Base class for all fatal quick-aliases errors."""


class ConfigError(QuickAliasesError):
    """The config directory or aliases file could not be located or created."""


class StoreError(QuickAliasesError):
    """The aliases file could not be read or written."""


class RunnerError(QuickAliasesError):
    """The shell for an alias could not be started."""
