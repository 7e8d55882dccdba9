from __future__ import annotations

import functools
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from jarvisx.persona import DEFAULT_PROMPT

LanguageCode = Literal["en-US", "en-GB", "en-IN"]


class VoiceSettings(BaseModel):
    language: LanguageCode = "en-IN"
    input_enabled: bool = True
    output_enabled: bool = True


class ConsoleSettings(BaseModel):
    system_prompt: str = DEFAULT_PROMPT
    log_capacity: int = Field(default=12, gt=0)
    max_response_words: int = Field(default=45, gt=0)


class TelemetrySettings(BaseModel):
    log_level: str = "INFO"
    log_json: bool = True
    otlp_endpoint: str | None = None
    console_spans: bool = False


class UISettings(BaseModel):
    origin: str = "http://localhost:3000"


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="JARVISX_", env_file=(".env", ".env.local"), env_file_encoding="utf-8", extra="ignore"
    )

    LANGUAGE: LanguageCode = "en-IN"
    VOICE_INPUT_ENABLED: bool = True
    VOICE_OUTPUT_ENABLED: bool = True
    SYSTEM_PROMPT: str = DEFAULT_PROMPT
    LOG_CAPACITY: int = 12
    MAX_RESPONSE_WORDS: int = 45
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True
    OTEL_EXPORTER_OTLP_ENDPOINT: str | None = None
    OTEL_CONSOLE_SPANS: bool = False
    UI_ORIGIN: str = "http://localhost:3000"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    @property
    def voice(self) -> VoiceSettings:
        return VoiceSettings(
            language=self.LANGUAGE,
            input_enabled=self.VOICE_INPUT_ENABLED,
            output_enabled=self.VOICE_OUTPUT_ENABLED,
        )

    @property
    def console(self) -> ConsoleSettings:
        return ConsoleSettings(
            system_prompt=self.SYSTEM_PROMPT,
            log_capacity=self.LOG_CAPACITY,
            max_response_words=self.MAX_RESPONSE_WORDS,
        )

    @property
    def telemetry(self) -> TelemetrySettings:
        return TelemetrySettings(
            log_level=self.LOG_LEVEL,
            log_json=self.LOG_JSON,
            otlp_endpoint=self.OTEL_EXPORTER_OTLP_ENDPOINT,
            console_spans=self.OTEL_CONSOLE_SPANS,
        )

    @property
    def ui(self) -> UISettings:
        return UISettings(origin=self.UI_ORIGIN)


@functools.lru_cache(maxsize=1)
def load_settings() -> AppSettings:
    return AppSettings()


def package_root() -> Path:
    return Path(__file__).resolve().parent


__all__ = ["AppSettings", "LanguageCode", "load_settings", "package_root"]
