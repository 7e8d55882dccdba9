from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import regex as re


class Intent(str, Enum):
    EXPLAIN = "explain"
    ANALYZE = "analyze"
    PLAN = "plan"
    HELP = "help"
    STOP = "stop"
    COMBO = "combo"
    UNKNOWN = "unknown"
    MISSING_WAKE = "missing-wake"
    UNSUPPORTED = "unsupported"

    def __str__(self) -> str:
        return self.value


WAKE_WORD = "jarvis"

# Plain substrings on the lower-cased payload; "&" has no boundary requirement.
COMBO_MARKERS: tuple[str, ...] = (" and ", "&", " also ", " then ")


@dataclass(frozen=True, slots=True)
class VerbRule:
    intent: Intent
    prefix: str
    strip: re.Pattern

    def matches(self, lowered: str) -> bool:
        return lowered.startswith(self.prefix)

    def remainder(self, payload: str) -> str:
        if self.intent is Intent.STOP:
            return ""
        return self.strip.sub("", payload, count=1).strip()


def _rule(intent: Intent, prefix: str, pattern: str) -> VerbRule:
    return VerbRule(intent=intent, prefix=prefix, strip=re.compile(pattern, re.IGNORECASE))


# First match wins.
VERB_PRIORITY: tuple[VerbRule, ...] = (
    _rule(Intent.EXPLAIN, "explain", r"^explain[, ]*"),
    _rule(Intent.ANALYZE, "analyze", r"^analyze[, ]*"),
    _rule(Intent.PLAN, "plan", r"^plan[, ]*"),
    _rule(Intent.HELP, "help", r"^help(?: me)?[, ]*"),
    _rule(Intent.STOP, "stop", r"^stop.*$"),
)


@dataclass(frozen=True, slots=True)
class CommandSpec:
    phrase: str
    description: str
    intent: Intent

    @property
    def label(self) -> str:
        return f'"Jarvis, {self.phrase}" → {self.description}'


COMMAND_LIBRARY: tuple[CommandSpec, ...] = (
    CommandSpec("explain", "Explain simply", Intent.EXPLAIN),
    CommandSpec("analyze", "Give detailed breakdown", Intent.ANALYZE),
    CommandSpec("plan", "Create a step-by-step plan", Intent.PLAN),
    CommandSpec("help me", "Ask what help is needed", Intent.HELP),
    CommandSpec("stop", 'Reply: "Standing by."', Intent.STOP),
)


__all__ = ["Intent", "WAKE_WORD", "COMBO_MARKERS", "VerbRule", "VERB_PRIORITY", "CommandSpec", "COMMAND_LIBRARY"]
