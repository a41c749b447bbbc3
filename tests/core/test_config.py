"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from content_scoring.core.config import Settings, get_settings


class TestSettings:
    """Tests for Settings and get_settings()."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("LOG_LEVEL", "LOG_FORMAT", "SLOW_OPERATION_THRESHOLD_MS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.app_name == "Content Scoring Engine"
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.slow_operation_threshold_ms == 1000

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read overrides from environment variables."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SLOW_OPERATION_THRESHOLD_MS", "250")

        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.slow_operation_threshold_ms == 250

    def test_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("log_format", "text")
        assert get_settings().log_format == "text"

    def test_negative_threshold_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SLOW_OPERATION_THRESHOLD_MS", "-1")
        with pytest.raises(ValidationError):
            Settings()

    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_explicit_values(self, test_settings: Settings) -> None:
        assert test_settings.environment == "test"
        assert test_settings.log_format == "text"
