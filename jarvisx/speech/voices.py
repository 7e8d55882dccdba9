from __future__ import annotations

import functools
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

import yaml

from jarvisx.config import package_root


@dataclass(frozen=True, slots=True)
class Voice:
    name: str
    lang: str


@dataclass(frozen=True, slots=True)
class LanguageOption:
    value: str
    label: str
    voice_match: str


class VoiceCatalog:
    def __init__(self, raw_config: dict[str, Any]) -> None:
        languages = raw_config.get("languages", {})
        if not languages:
            raise ValueError("voice catalogue defines no languages")
        self._languages: dict[str, LanguageOption] = {}
        for code, cfg in languages.items():
            cfg = cfg or {}
            self._languages[code] = LanguageOption(
                value=code,
                label=str(cfg.get("label", code)),
                voice_match=str(cfg.get("voice_match", code)),
            )
        self._fallback = str(raw_config.get("fallback_voice_match", "en-US"))
        default = raw_config.get("default_language") or next(iter(self._languages))
        if default not in self._languages:
            raise ValueError(f"default language '{default}' is not in the catalogue")
        self.default_language: str = default
        playback = raw_config.get("playback", {}) or {}
        self.rate = float(playback.get("rate", 1.0))
        self.pitch = float(playback.get("pitch", 1.0))

    def languages(self) -> list[LanguageOption]:
        return list(self._languages.values())

    def supports(self, language: str) -> bool:
        return language in self._languages

    def validate(self, language: str) -> str:
        if not self.supports(language):
            raise ValueError(f"Unsupported language '{language}'")
        return language

    def voice_match(self, language: str) -> str:
        option = self._languages.get(language)
        return option.voice_match if option else self._fallback

    def preferred_voice(self, language: str, voices: Iterable[Voice]) -> Voice | None:
        """First platform voice whose language tag contains the locale for *language*."""
        needle = self.voice_match(language)
        for voice in voices:
            if needle in voice.lang:
                return voice
        return None


def load_catalog_from(path: Path) -> VoiceCatalog:
    if not path.exists():
        raise FileNotFoundError(path)
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name} must define a mapping")
    return VoiceCatalog(raw)


@functools.lru_cache(maxsize=1)
def load_catalog() -> VoiceCatalog:
    return load_catalog_from(package_root() / "speech" / "voices.yml")


__all__ = ["Voice", "LanguageOption", "VoiceCatalog", "load_catalog", "load_catalog_from"]
