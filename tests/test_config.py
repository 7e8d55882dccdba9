from __future__ import annotations

import pytest
from pydantic import ValidationError

from jarvisx.config import AppSettings
from jarvisx.persona import DEFAULT_PROMPT


def test_defaults() -> None:
    settings = AppSettings(_env_file=None)
    assert settings.voice.language == "en-IN"
    assert settings.voice.output_enabled is True
    assert settings.console.log_capacity == 12
    assert settings.console.max_response_words == 45
    assert settings.console.system_prompt == DEFAULT_PROMPT
    assert settings.telemetry.otlp_endpoint is None


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("JARVISX_LANGUAGE", "en-GB")
    monkeypatch.setenv("JARVISX_VOICE_OUTPUT_ENABLED", "false")
    monkeypatch.setenv("JARVISX_LOG_LEVEL", "DEBUG")
    settings = AppSettings(_env_file=None)
    assert settings.voice.language == "en-GB"
    assert settings.voice.output_enabled is False
    assert settings.telemetry.log_level == "DEBUG"


def test_rejects_unknown_language(monkeypatch) -> None:
    monkeypatch.setenv("JARVISX_LANGUAGE", "fr-FR")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_log_capacity_must_be_positive(monkeypatch) -> None:
    monkeypatch.setenv("JARVISX_LOG_CAPACITY", "0")
    settings = AppSettings(_env_file=None)
    with pytest.raises(ValidationError):
        settings.console
