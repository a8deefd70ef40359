"""Tests for centralized settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from afinn_sentiment.core.config import LogFormat, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AFINN_LOG_LEVEL", raising=False)
    monkeypatch.delenv("AFINN_LOG_FORMAT", raising=False)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.log_format == LogFormat.CONSOLE

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AFINN_LOG_LEVEL", "debug")
        monkeypatch.setenv("AFINN_LOG_FORMAT", "json")
        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.log_format == LogFormat.JSON

    def test_invalid_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_invalid_format_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_format="xml")
