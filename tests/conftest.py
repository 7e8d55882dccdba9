from __future__ import annotations

import pytest

from jarvisx.config import AppSettings
from jarvisx.orchestrator.events import SpeakRequest
from jarvisx.speech.base import RecordingPlayback, SpeechCapture, SpeechPlayback


class FakeCapture(SpeechCapture):
    def __init__(self, supported: bool = True, fail_start: bool = False) -> None:
        super().__init__()
        self.supported = supported
        self.fail_start = fail_start
        self.started: list[str] = []
        self.stops = 0

    def available(self) -> bool:
        return self.supported

    def start(self, language: str) -> None:
        if self.fail_start:
            raise RuntimeError("microphone busy")
        self.started.append(language)

    def stop(self) -> None:
        self.stops += 1


class FailingPlayback(SpeechPlayback):
    def available(self) -> bool:
        return True

    def speak(self, request: SpeakRequest) -> None:
        raise RuntimeError("engine crashed")

    def cancel(self) -> None:
        return None


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def playback() -> RecordingPlayback:
    return RecordingPlayback()


@pytest.fixture
def capture() -> FakeCapture:
    return FakeCapture()
