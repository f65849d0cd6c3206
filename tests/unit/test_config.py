"""
Tests for settings loading and logging setup.
"""

import logging

import pytest
from pydantic import ValidationError

from swimperf.config import Settings, configure_logging, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        for name in ("EXTRAPOLATION_EXPONENT", "DEFAULT_RESULT_FILTER", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.extrapolation_exponent == 1.06
        assert settings.default_result_filter == "all"
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("EXTRAPOLATION_EXPONENT", "1.07")
        monkeypatch.setenv("DEFAULT_RESULT_FILTER", "Competition")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.extrapolation_exponent == 1.07
        assert settings.default_result_filter == "competition"
        assert settings.log_level == "DEBUG"

    def test_rejects_non_positive_exponent(self):
        with pytest.raises(ValidationError):
            Settings(extrapolation_exponent=0)

    def test_rejects_unknown_result_filter(self):
        with pytest.raises(ValidationError, match="must be one of"):
            Settings(default_result_filter="meets")

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Tests for the logging helper."""

    def test_explicit_level(self):
        configure_logging("DEBUG")

        assert logging.getLogger("swimperf").level == logging.DEBUG

    def test_level_from_settings(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        configure_logging()

        assert logging.getLogger("swimperf").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        configure_logging("chatty")

        assert logging.getLogger("swimperf").level == logging.INFO
