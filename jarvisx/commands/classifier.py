from __future__ import annotations

import regex as re

from jarvisx.commands.intents import COMBO_MARKERS, VERB_PRIORITY, WAKE_WORD, Intent, VerbRule

WAKE_PATTERN = re.compile(rf"^{WAKE_WORD}\b", re.IGNORECASE)
WAKE_PREFIX = re.compile(rf"^{WAKE_WORD}[, ]*", re.IGNORECASE)


def match_verb(lowered: str) -> VerbRule | None:
    """Return the highest-priority verb rule whose prefix opens *lowered*."""
    for rule in VERB_PRIORITY:
        if rule.matches(lowered):
            return rule
    return None


def has_combo(lowered: str) -> bool:
    return any(marker in lowered for marker in COMBO_MARKERS)


def classify(utterance: str) -> tuple[Intent, str]:
    """Map a raw utterance to ``(intent, payload)``.

    The wake word must open the utterance as a whole word. Keyword matching is
    case-insensitive while the payload keeps the caller's casing. Combination
    markers take priority over the single-verb rules.
    """
    command = utterance.strip()
    if not WAKE_PATTERN.search(command):
        return Intent.MISSING_WAKE, command

    payload = WAKE_PREFIX.sub("", command, count=1).strip()
    if not payload:
        return Intent.UNKNOWN, ""

    lowered = payload.lower()
    rule = match_verb(lowered)

    if has_combo(lowered):
        if rule is not None and rule.intent is not Intent.STOP:
            return Intent.COMBO, rule.remainder(payload)
        return Intent.COMBO, payload

    if rule is not None:
        return rule.intent, rule.remainder(payload)

    return Intent.UNKNOWN, payload


__all__ = ["classify", "match_verb", "has_combo"]
