"""Tests for the __main__ entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from quick_aliases.__main__ import main
from quick_aliases.errors import ConfigError, StoreError
from quick_aliases.log import logger


def run_main(*args: str) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(["quick-aliases", *args])
    return exc_info.value.code


class TestExitCodes:
    def test_help_exits_zero(self, home: Path, capsys):
        assert run_main() == 0
        assert "Quick aliases" in capsys.readouterr().out

    def test_unrecognized_exits_zero(self, home: Path, capsys):
        assert run_main("frobnicate") == 0
        assert "Unrecognized command" in capsys.readouterr().out

    def test_config_error_exits_one(self, home: Path, capsys):
        with patch(
            "quick_aliases.commands.resolve_config_path",
            side_effect=ConfigError("Cannot determine the home directory"),
        ):
            assert run_main("ls") == 1
        err = capsys.readouterr().err
        assert err.startswith("quick-aliases: Cannot determine the home directory")

    def test_store_error_exits_one(self, home: Path, capsys):
        with patch(
            "quick_aliases.persistence.AliasStore.save",
            side_effect=StoreError("Failed to write aliases.json"),
        ):
            assert run_main("add", "a", "b") == 1
        assert "Failed to write aliases.json" in capsys.readouterr().err

    def test_keyboard_interrupt_exits_130(self, home: Path):
        with patch("quick_aliases.__main__.dispatch", side_effect=KeyboardInterrupt):
            assert run_main("anything") == 130

    def test_uses_sys_argv_by_default(self, home: Path, capsys, monkeypatch):
        monkeypatch.setattr("sys.argv", ["quick-aliases", "help"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 0
        assert "Usage:" in capsys.readouterr().out


class TestDebugLog:
    @pytest.fixture(autouse=True)
    def _restore_logger(self):
        handlers, level = list(logger.handlers), logger.level
        yield
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers[:] = handlers
        logger.setLevel(level)

    def test_disabled_by_default(self, home: Path):
        run_main("ls")
        assert not (home / ".config" / "quick-aliases" / "debug.log").exists()

    def test_enabled_from_preferences(self, home: Path):
        config = home / ".config" / "quick-aliases"
        config.mkdir(parents=True)
        (config / "preferences.yaml").write_text("debug_log: true\n")
        run_main("ls")
        assert logger.level == logging.DEBUG
        log_text = (config / "debug.log").read_text()
        assert "invoked with ['ls']" in log_text

    def test_unwritable_log_warns_and_continues(self, home: Path, capsys):
        config = home / ".config" / "quick-aliases"
        config.mkdir(parents=True)
        (config / "preferences.yaml").write_text("debug_log: true\n")
        # A directory where the log file should be
        (config / "debug.log").mkdir()
        assert run_main("ls") == 0
        captured = capsys.readouterr()
        assert "cannot open debug log" in captured.err
        assert "Aliases list:" in captured.out
