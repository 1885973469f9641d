"""Tests for settings and logging setup."""

from loguru import logger

from kitchen_patterns import logging as kp_logging
from kitchen_patterns.config import Settings, get_settings
from kitchen_patterns.logging import setup_logging


class TestSettings:
    """Settings defaults and environment overrides."""

    def test_defaults(self, fresh_settings, monkeypatch):
        """Without env overrides logging is INFO and stderr-only."""
        monkeypatch.delenv("KITCHEN_LOG_LEVEL", raising=False)
        monkeypatch.delenv("KITCHEN_LOG_TO_FILE", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.log_to_file is False

    def test_env_prefix_override(self, fresh_settings, monkeypatch):
        """KITCHEN_-prefixed variables override the defaults."""
        monkeypatch.setenv("KITCHEN_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("KITCHEN_LOG_TO_FILE", "true")
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.log_to_file is True

    def test_get_settings_is_cached(self, fresh_settings):
        """get_settings() returns the same instance on every call."""
        assert get_settings() is get_settings()


class TestSetupLogging:
    """setup_logging() routes logs away from stdout."""

    def test_logs_go_to_stderr(self, capsys):
        """Log records land on stderr and leave stdout clean."""
        setup_logging(level="DEBUG")
        logger.info("kitchen open")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "kitchen open" in captured.err

    def test_file_sink_writes_log(self, tmp_path, monkeypatch):
        """With log_to_file the rotating file sink is created."""
        monkeypatch.setattr(kp_logging, "LOG_DIR", tmp_path / "logs")
        setup_logging(level="INFO", log_to_file=True)
        logger.info("order up")
        logger.remove()
        log_file = tmp_path / "logs" / "kitchen_patterns.log"
        assert "order up" in log_file.read_text()
