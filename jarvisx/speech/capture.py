from __future__ import annotations

from jarvisx.orchestrator.processor import CommandProcessor
from jarvisx.speech.base import SpeechCapture
from jarvisx.telemetry.logging import get_logger

CAPTURE_ACTIVE = "Voice capture active."


class CaptureSession:
    """Keeps continuous recognition running and feeds finalized text to the processor.

    Recognition engines end a session on silence; while the session is active
    it is restarted on every ``on_end``. Interim results only update the
    displayed transcript.
    """

    def __init__(self, capture: SpeechCapture, processor: CommandProcessor) -> None:
        self._capture = capture
        self._processor = processor
        self._language = processor.language
        self._active = False
        self.listening = False
        self._logger = get_logger(__name__)
        capture.attach(self)

    @property
    def active(self) -> bool:
        return self._active

    def activate(self, language: str) -> bool:
        self._language = language
        if self._active:
            return True
        self._active = True
        return self._start()

    def deactivate(self) -> None:
        if not self._active:
            return
        self._active = False
        try:
            self._capture.stop()
        except Exception as exc:
            self._logger.warning("speech.capture.stop_failed", error=str(exc))
            self._processor.note(f"Recognition error: {exc}")
        self.listening = False

    def restart(self, language: str) -> None:
        """Switch the recognition locale, restarting capture if it is running."""
        was_active = self._active
        self.deactivate()
        self._language = language
        if was_active:
            self.activate(language)

    def on_start(self) -> None:
        self.listening = True
        self._processor.note(CAPTURE_ACTIVE)

    def on_error(self, detail: str | None) -> None:
        self._logger.warning("speech.capture.error", detail=detail)
        self._processor.note(f"Recognition error: {detail or 'unknown'}")

    def on_end(self) -> None:
        self.listening = False
        if self._active:
            self._start()

    def on_result(self, text: str, is_final: bool) -> None:
        cleaned = text.strip()
        if is_final:
            self._processor.process(cleaned)
        else:
            self._processor.show_interim(cleaned)

    def _start(self) -> bool:
        try:
            self._capture.start(self._language)
        except Exception as exc:
            self._active = False
            self._logger.warning("speech.capture.start_failed", error=str(exc), language=self._language)
            self._processor.note(f"Recognition error: {exc}")
            return False
        return True


__all__ = ["CaptureSession", "CAPTURE_ACTIVE"]
