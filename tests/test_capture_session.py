from __future__ import annotations

from conftest import FakeCapture

from jarvisx.commands.intents import Intent
from jarvisx.orchestrator.processor import CommandProcessor
from jarvisx.speech.base import RecordingPlayback
from jarvisx.speech.capture import CAPTURE_ACTIVE, CaptureSession


def make_session(capture: FakeCapture) -> tuple[CaptureSession, CommandProcessor]:
    processor = CommandProcessor(RecordingPlayback(), language="en-US")
    return CaptureSession(capture, processor), processor


def test_activate_starts_capture(capture: FakeCapture) -> None:
    session, processor = make_session(capture)
    assert capture.listener is session
    assert session.activate("en-US") is True
    capture.listener.on_start()
    assert capture.started == ["en-US"]
    assert session.listening is True
    assert processor.diagnostics == [CAPTURE_ACTIVE]


def test_restarts_on_end_while_active(capture: FakeCapture) -> None:
    session, _ = make_session(capture)
    session.activate("en-US")
    session.on_end()
    assert capture.started == ["en-US", "en-US"]

    session.deactivate()
    session.on_end()
    assert capture.stops == 1
    assert len(capture.started) == 2
    assert session.listening is False


def test_final_results_are_processed(capture: FakeCapture) -> None:
    session, processor = make_session(capture)
    session.on_result("  Jarvis, analyze sales  ", is_final=True)
    assert processor.log[0].text == "Jarvis, analyze sales"
    assert processor.log[1].intent is Intent.ANALYZE


def test_interim_results_update_transcript(capture: FakeCapture) -> None:
    session, processor = make_session(capture)
    session.on_result("Jarvis, ana", is_final=False)
    assert processor.transcript == "Jarvis, ana"
    assert processor.log == []


def test_errors_become_diagnostics(capture: FakeCapture) -> None:
    session, processor = make_session(capture)
    session.on_error("no-speech")
    session.on_error(None)
    assert processor.diagnostics == ["Recognition error: unknown", "Recognition error: no-speech"]


def test_start_failure_is_reported() -> None:
    capture = FakeCapture(fail_start=True)
    session, processor = make_session(capture)
    assert session.activate("en-US") is False
    assert session.active is False
    assert processor.diagnostics == ["Recognition error: microphone busy"]


def test_restart_switches_locale(capture: FakeCapture) -> None:
    session, _ = make_session(capture)
    session.activate("en-US")
    session.restart("en-GB")
    assert capture.started == ["en-US", "en-GB"]
    assert capture.stops == 1
