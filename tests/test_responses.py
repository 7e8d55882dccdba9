from __future__ import annotations

from jarvisx.commands.intents import Intent
from jarvisx.commands.responses import (
    CONTINUATION,
    STANDING_BY,
    TEMPLATES,
    build_response,
    truncate_response,
)


def test_stop_is_literal() -> None:
    assert build_response(Intent.STOP, "") == "Understood. Standing by."
    assert build_response(Intent.STOP, "everything " * 80) == STANDING_BY


def test_explain_capitalises_payload() -> None:
    text = build_response(Intent.EXPLAIN, "artificial intelligence")
    assert text.startswith("Analyzing… Artificial intelligence refers to a concept")
    assert text.endswith("Shall I continue?")


def test_analyze_keeps_payload_verbatim() -> None:
    text = build_response(Intent.ANALYZE, "the churn report")
    assert text.startswith("Analyzing… Breaking the churn report into key components")


def test_plan_has_four_steps() -> None:
    text = build_response(Intent.PLAN, "launch")
    for step in ("Step 1:", "Step 2:", "Step 3:", "Step 4:"):
        assert step in text
    assert text.startswith("Understood. Step 1: clarify the objective for launch.")


def test_help_asks_one_question() -> None:
    text = build_response(Intent.HELP, "my thesis")
    assert text == "Understood. What specific challenge within my thesis should I focus on first?"


def test_empty_payload_uses_default_subject() -> None:
    assert "the requested subject" in build_response(Intent.ANALYZE, "   ")


def test_fixed_frames_ignore_payload() -> None:
    assert build_response(Intent.COMBO, "a and b") == build_response(Intent.COMBO, "")
    assert '"Jarvis"' in build_response(Intent.MISSING_WAKE, "hello")
    assert "falling back to manual commands" in build_response(Intent.UNSUPPORTED, "")
    assert build_response(Intent.UNKNOWN, "what").endswith("What should I do first?")


def test_every_intent_has_template() -> None:
    assert set(TEMPLATES) == set(Intent)


def test_responses_stay_within_bound() -> None:
    for intent in Intent:
        if intent is Intent.STOP:
            continue
        assert len(build_response(intent, "short topic").split()) <= 45


def test_truncation_keeps_exactly_45_words() -> None:
    payload = " ".join(f"w{i}" for i in range(30))
    template = TEMPLATES[Intent.EXPLAIN](payload)
    assert len(template.split()) > 45

    text = build_response(Intent.EXPLAIN, payload)
    assert text.endswith(CONTINUATION)
    kept = text[: -len(CONTINUATION)].split()
    assert len(kept) == 45
    assert kept == template.split()[:45]


def test_truncate_boundary() -> None:
    exact = " ".join(["word"] * 45)
    assert truncate_response(exact) == exact
    over = " ".join(["word"] * 46)
    assert truncate_response(over) == " ".join(["word"] * 45) + " … Shall I continue?"


def test_truncate_collapses_whitespace_only_when_cutting() -> None:
    spaced = "a  b\tc"
    assert truncate_response(spaced) == spaced
    assert truncate_response("a  b\tc d", limit=3) == "a b c … Shall I continue?"
