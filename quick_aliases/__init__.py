"""Quick aliases -- run saved shell commands by short name."""

__version__ = "0.1.0"
