from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from jarvisx.orchestrator.events import SpeakRequest


class CaptureListener(Protocol):
    def on_start(self) -> None: ...

    def on_error(self, detail: str | None) -> None: ...

    def on_end(self) -> None: ...

    def on_result(self, text: str, is_final: bool) -> None: ...


class SpeechPlayback(ABC):
    @abstractmethod
    def available(self) -> bool:
        """Report whether the platform can synthesise speech."""

    @abstractmethod
    def speak(self, request: SpeakRequest) -> None:
        """Start speaking, superseding any in-flight request. Must not block on playback."""

    @abstractmethod
    def cancel(self) -> None:
        """Silence the current request, if any."""


class SpeechCapture(ABC):
    def __init__(self) -> None:
        self.listener: CaptureListener | None = None

    def attach(self, listener: CaptureListener) -> None:
        self.listener = listener

    @abstractmethod
    def available(self) -> bool:
        """Report whether the platform supports continuous recognition."""

    @abstractmethod
    def start(self, language: str) -> None:
        """Begin continuous recognition in *language*."""

    @abstractmethod
    def stop(self) -> None:
        """Stop recognition; the listener receives ``on_end``."""


class NullPlayback(SpeechPlayback):
    def available(self) -> bool:
        return False

    def speak(self, request: SpeakRequest) -> None:
        return None

    def cancel(self) -> None:
        return None


class NullCapture(SpeechCapture):
    def available(self) -> bool:
        return False

    def start(self, language: str) -> None:
        raise RuntimeError("speech capture is not available")

    def stop(self) -> None:
        return None


class RecordingPlayback(SpeechPlayback):
    """In-memory playback: keeps every request and tracks which one is current."""

    def __init__(self) -> None:
        self.requests: list[SpeakRequest] = []
        self.cancelled: list[SpeakRequest] = []
        self.current: SpeakRequest | None = None

    def available(self) -> bool:
        return True

    def speak(self, request: SpeakRequest) -> None:
        self.cancel()
        self.requests.append(request)
        self.current = request

    def cancel(self) -> None:
        if self.current is not None:
            self.cancelled.append(self.current)
            self.current = None


__all__ = [
    "CaptureListener",
    "SpeechPlayback",
    "SpeechCapture",
    "NullPlayback",
    "NullCapture",
    "RecordingPlayback",
]
