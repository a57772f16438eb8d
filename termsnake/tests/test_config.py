"""
Tests for config.py - environment settings and logging setup.
"""

import logging
import os
import sys
from unittest.mock import patch

import pytest

# Add repo root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from termsnake.config import (  # noqa: E402
    ConfigError,
    Settings,
    _sanitize_env_value,
    configure_logging,
    load_settings,
)


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_defaults_from_empty_environment(self):
        """An empty environment gives the standard game."""
        assert load_settings({}) == Settings()

    def test_reads_overrides(self):
        """TERMSNAKE_* variables override the defaults."""
        settings = load_settings({
            "TERMSNAKE_MAX_DELAY_MS": "200",
            "TERMSNAKE_MIN_DELAY_MS": "80",
            "TERMSNAKE_POLL_TIMEOUT_MS": "30",
            "TERMSNAKE_SPAWN_ATTEMPTS": "10",
            "TERMSNAKE_LOG_FILE": "/tmp/termsnake.log",
            "TERMSNAKE_LOG_LEVEL": "debug",
        })
        assert settings.max_delay_ms == 200
        assert settings.min_delay_ms == 80
        assert settings.poll_timeout_ms == 30
        assert settings.spawn_attempts == 10
        assert settings.log_file == "/tmp/termsnake.log"
        assert settings.log_level == "DEBUG"

    def test_strips_quotes(self):
        """Quoted values from shells and .env files are accepted."""
        settings = load_settings({"TERMSNAKE_MAX_DELAY_MS": ' "150" '})
        assert settings.max_delay_ms == 150

    def test_blank_value_means_default(self):
        """An empty variable falls back to the default."""
        assert load_settings({"TERMSNAKE_POLL_TIMEOUT_MS": "  "}).poll_timeout_ms == Settings().poll_timeout_ms

    def test_rejects_non_integer(self):
        """Non-numeric delays are a configuration error."""
        with pytest.raises(ConfigError, match="TERMSNAKE_MAX_DELAY_MS"):
            load_settings({"TERMSNAKE_MAX_DELAY_MS": "fast"})

    def test_rejects_negative(self):
        """Negative delays are a configuration error."""
        with pytest.raises(ConfigError):
            load_settings({"TERMSNAKE_MIN_DELAY_MS": "-5"})

    def test_rejects_zero_spawn_attempts(self):
        """At least one random draw is required."""
        with pytest.raises(ConfigError):
            load_settings({"TERMSNAKE_SPAWN_ATTEMPTS": "0"})

    def test_rejects_min_above_max(self):
        """The delay floor cannot sit above the starting delay."""
        with pytest.raises(ConfigError, match="larger than"):
            load_settings({"TERMSNAKE_MIN_DELAY_MS": "300", "TERMSNAKE_MAX_DELAY_MS": "100"})

    def test_rejects_unknown_log_level(self):
        """Log level names are validated."""
        with pytest.raises(ConfigError):
            load_settings({"TERMSNAKE_LOG_LEVEL": "LOUD"})

    def test_real_environment_loads_dotenv(self):
        """Reading os.environ loads the .env file first."""
        with patch("termsnake.config.load_dotenv") as mock_load, \
                patch.dict(os.environ, {"TERMSNAKE_MAX_DELAY_MS": "99"}):
            settings = load_settings()
        mock_load.assert_called_once()
        assert settings.max_delay_ms == 99


class TestSanitizeEnvValue:
    """Tests for _sanitize_env_value()."""

    def test_none_passes_through(self):
        assert _sanitize_env_value(None) is None

    def test_strips_whitespace_and_quotes(self):
        assert _sanitize_env_value("  'abc' ") == "abc"
        assert _sanitize_env_value('"x"') == "x"
        assert _sanitize_env_value('"x') == '"x'


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def teardown_method(self):
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

    def test_logs_to_file(self, tmp_path):
        """With a log file configured, records end up in it."""
        log_file = tmp_path / "termsnake.log"
        configure_logging(Settings(log_file=str(log_file), log_level="DEBUG"))

        logging.getLogger("termsnake.test").debug("tick %d", 3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "tick 3" in log_file.read_text(encoding="utf-8")

    def test_without_file_nothing_reaches_terminal(self, capsys):
        """Without a log file records are discarded."""
        configure_logging(Settings())

        logging.getLogger("termsnake.test").warning("should not be seen")

        captured = capsys.readouterr()
        assert "should not be seen" not in captured.err
        assert "should not be seen" not in captured.out
        assert all(isinstance(h, logging.NullHandler) for h in logging.getLogger().handlers)
