from __future__ import annotations

import pytest

from jarvisx.speech.voices import Voice, load_catalog, load_catalog_from


def fresh_catalog():
    load_catalog.cache_clear()
    return load_catalog()


def test_supported_languages() -> None:
    catalog = fresh_catalog()
    labels = {option.value: option.label for option in catalog.languages()}
    assert labels == {"en-US": "English (US)", "en-GB": "English (UK)", "en-IN": "Hinglish"}
    assert catalog.default_language == "en-IN"
    assert catalog.rate == pytest.approx(1.0)


def test_preferred_voice_matches_locale() -> None:
    catalog = fresh_catalog()
    voices = [Voice("Samantha", "en-US"), Voice("Daniel", "en-GB"), Voice("Rishi", "en-IN")]
    assert catalog.preferred_voice("en-IN", voices) == Voice("Rishi", "en-IN")
    assert catalog.preferred_voice("en-GB", voices) == Voice("Daniel", "en-GB")
    assert catalog.preferred_voice("de-DE", voices) == Voice("Samantha", "en-US")
    assert catalog.preferred_voice("en-IN", [Voice("Anna", "de-DE")]) is None


def test_validate_rejects_unknown_language() -> None:
    catalog = fresh_catalog()
    assert catalog.validate("en-GB") == "en-GB"
    with pytest.raises(ValueError):
        catalog.validate("fr-FR")


def test_catalog_file_must_be_mapping(tmp_path) -> None:
    path = tmp_path / "voices.yml"
    path.write_text("- en-US\n- en-GB\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_catalog_from(path)


def test_catalog_requires_languages(tmp_path) -> None:
    path = tmp_path / "voices.yml"
    path.write_text("languages: {}\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_catalog_from(path)
