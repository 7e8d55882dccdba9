from __future__ import annotations

from collections.abc import Callable

from jarvisx.commands.intents import Intent

MAX_RESPONSE_WORDS = 45
CONTINUATION = "… Shall I continue?"
DEFAULT_SUBJECT = "the requested subject"
STANDING_BY = "Understood. Standing by."


def truncate_response(text: str, limit: int = MAX_RESPONSE_WORDS) -> str:
    """Cap *text* at *limit* words, appending the continuation marker when cut."""
    words = text.split()
    if len(words) <= limit:
        return text
    return " ".join(words[:limit]) + " " + CONTINUATION


def _capitalise(subject: str) -> str:
    return subject[:1].upper() + subject[1:]


def _explain(subject: str) -> str:
    return (
        f"Analyzing… {_capitalise(subject)} refers to a concept or process that can be distilled into its "
        "essentials. At its core, it represents information that should be understood simply. Shall I continue?"
    )


def _analyze(subject: str) -> str:
    return (
        f"Analyzing… Breaking {subject} into key components: purpose, structure, and next action. "
        "Assess each part for impact, risk, and opportunity. Shall I continue?"
    )


def _plan(subject: str) -> str:
    return (
        f"Understood. Step 1: clarify the objective for {subject}. Step 2: map resources and constraints. "
        "Step 3: schedule actions with quick wins first. Step 4: review progress after execution. Shall I continue?"
    )


def _help(subject: str) -> str:
    return f"Understood. What specific challenge within {subject} should I focus on first?"


def _stop(_: str) -> str:
    return STANDING_BY


def _combo(_: str) -> str:
    return (
        "Analyzing… I'll split that into focused tasks: respond to each requested action individually "
        "while keeping context shared. Shall I continue?"
    )


def _missing_wake(_: str) -> str:
    return 'Understood. Awaiting the wake word "Jarvis" before executing commands. Shall I continue?'


def _unsupported(_: str) -> str:
    return (
        "Understood. Voice features are not available in this browser; falling back to manual commands. "
        "Shall I continue?"
    )


def _unknown(_: str) -> str:
    return "Understood. I need one precise action or question after the wake word. What should I do first?"


TEMPLATES: dict[Intent, Callable[[str], str]] = {
    Intent.EXPLAIN: _explain,
    Intent.ANALYZE: _analyze,
    Intent.PLAN: _plan,
    Intent.HELP: _help,
    Intent.STOP: _stop,
    Intent.COMBO: _combo,
    Intent.MISSING_WAKE: _missing_wake,
    Intent.UNSUPPORTED: _unsupported,
    Intent.UNKNOWN: _unknown,
}


def build_response(intent: Intent, payload: str, limit: int = MAX_RESPONSE_WORDS) -> str:
    subject = payload.strip() or DEFAULT_SUBJECT
    template = TEMPLATES.get(intent, _unknown)
    text = template(subject)
    if intent is Intent.STOP:
        return text
    return truncate_response(text, limit)


__all__ = [
    "MAX_RESPONSE_WORDS",
    "CONTINUATION",
    "DEFAULT_SUBJECT",
    "STANDING_BY",
    "TEMPLATES",
    "truncate_response",
    "build_response",
]
