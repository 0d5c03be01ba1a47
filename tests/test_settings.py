"""
Tests for settings and logging configuration.
"""

import pytest
import structlog
from pydantic import ValidationError

from barcode_generator.config import Settings, configure_logging, get_settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Test default values."""
        for name in ("PARTITION_SIZE", "MAX_WORKERS", "WORKER_BACKEND", "MAX_BARCODE"):
            monkeypatch.delenv(f"BARCODE_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.partition_size == 1000
        assert settings.max_workers is None
        assert settings.worker_backend == "thread"
        assert settings.max_barcode is None

    def test_fields(self):
        """Test settings only carry values the library reads."""
        assert set(Settings.model_fields) == {
            "partition_size",
            "max_workers",
            "worker_backend",
            "max_barcode",
            "log_level",
            "log_format",
        }

    def test_env_override(self, monkeypatch):
        """Test values are read from prefixed environment variables."""
        monkeypatch.setenv("BARCODE_PARTITION_SIZE", "50")
        monkeypatch.setenv("BARCODE_MAX_WORKERS", "8")
        settings = get_settings()
        assert settings.partition_size == 50
        assert settings.max_workers == 8

    def test_cached(self):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()

    def test_invalid_partition_size(self, monkeypatch):
        """Test a zero partition size is rejected."""
        monkeypatch.setenv("BARCODE_PARTITION_SIZE", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestConfigureLogging:
    """Tests for structlog configuration."""

    @pytest.mark.parametrize("log_format", ["json", "text"])
    def test_configure(self, log_format, capsys):
        """Test both renderers emit events."""
        configure_logging(level="INFO", log_format=log_format)
        structlog.get_logger("test").info("Hello", count=3)
        assert "Hello" in capsys.readouterr().out
        structlog.reset_defaults()

    def test_level_filtering(self, capsys):
        """Test events below the configured level are dropped."""
        configure_logging(level="WARNING", log_format="json")
        structlog.get_logger("test").info("Hidden")
        assert "Hidden" not in capsys.readouterr().out
        structlog.reset_defaults()

    def test_unknown_level(self):
        """Test an unknown level name is rejected up front."""
        with pytest.raises(ValueError, match="Unknown log level: VERBOSE"):
            configure_logging(level="verbose", log_format="json")

    def test_unknown_level_from_settings(self, monkeypatch):
        """Test a bad BARCODE_LOG_LEVEL is reported clearly."""
        monkeypatch.setenv("BARCODE_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="LOUD"):
            configure_logging()
