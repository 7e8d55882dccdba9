from __future__ import annotations

import threading

from jarvisx.commands.classifier import classify
from jarvisx.commands.intents import Intent
from jarvisx.commands.responses import MAX_RESPONSE_WORDS, build_response
from jarvisx.orchestrator.bounded_log import BoundedLog
from jarvisx.orchestrator.events import Diagnostic, Exchange, ExchangeEntry, SpeakRequest
from jarvisx.speech.base import SpeechPlayback
from jarvisx.telemetry.logging import bind_context, get_logger
from jarvisx.telemetry.tracing import annotate_command, get_tracer

COMBO_DIAGNOSTIC = "Detected combo request; break tasks manually."
UNSUPPORTED_DIAGNOSTIC = "Falling back from voice due to lack of browser support."
PLAYBACK_UNAVAILABLE = "Speech synthesis unavailable in this browser."

INTENT_DIAGNOSTICS: dict[Intent, str] = {
    Intent.COMBO: COMBO_DIAGNOSTIC,
    Intent.UNSUPPORTED: UNSUPPORTED_DIAGNOSTIC,
}


class CommandProcessor:
    """Runs one utterance at a time through classify, build and log.

    The processor never raises for string input. Playback problems are turned
    into diagnostics so the caller always gets a well-formed exchange back.
    """

    def __init__(
        self,
        playback: SpeechPlayback,
        language: str = "en-IN",
        voice_output_enabled: bool = True,
        capacity: int = 12,
        max_words: int = MAX_RESPONSE_WORDS,
    ) -> None:
        self._playback = playback
        self.language = language
        self.voice_output_enabled = voice_output_enabled
        self._max_words = max_words
        self._log: BoundedLog[ExchangeEntry] = BoundedLog(capacity)
        self._diagnostics: BoundedLog[Diagnostic] = BoundedLog(capacity)
        self._transcript = ""
        self._status = ""
        self._playback_unavailable_reported = False
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)
        self._tracer = get_tracer(__name__)

    @property
    def log(self) -> list[ExchangeEntry]:
        return self._log.snapshot()

    @property
    def diagnostics(self) -> list[str]:
        return [item.message for item in self._diagnostics.snapshot()]

    @property
    def transcript(self) -> str:
        return self._transcript

    @property
    def status(self) -> str:
        return self._status

    @status.setter
    def status(self, value: str) -> None:
        self._status = value

    def process(self, raw: str) -> Exchange:
        intent, payload = classify(raw)
        return self.respond(raw, intent, payload)

    def respond(self, user_text: str, intent: Intent, payload: str = "") -> Exchange:
        """Build, log and speak the reply for an already-resolved intent."""
        with self._lock, self._tracer.start_as_current_span("command.process") as span:
            response = build_response(intent, payload, self._max_words)
            exchange = Exchange.create(user_text, response, intent)
            annotate_command(span, intent, payload, response)

            self._log.prepend(exchange.entries())
            self._transcript = user_text
            self._status = response
            self._logger.info("command.processed", intent=intent.value, payload=payload, words=len(response.split()))

            with bind_context(intent=intent.value):
                self._speak(response)
                message = INTENT_DIAGNOSTICS.get(intent)
                if message:
                    self.note(message)
            return exchange

    def show_interim(self, text: str) -> None:
        self._transcript = text

    def note(self, message: str) -> None:
        self._diagnostics.push(Diagnostic(message))
        self._logger.info("diagnostic", message=message)

    def seed_unsupported(self) -> ExchangeEntry:
        entry = ExchangeEntry(
            role="assistant",
            text=build_response(Intent.UNSUPPORTED, "", self._max_words),
            intent=Intent.UNSUPPORTED,
        )
        self._log.push(entry)
        return entry

    def _speak(self, text: str) -> None:
        if not self.voice_output_enabled:
            return
        try:
            if not self._playback.available():
                if not self._playback_unavailable_reported:
                    self._playback_unavailable_reported = True
                    self.note(PLAYBACK_UNAVAILABLE)
                return
            self._playback.speak(SpeakRequest(text=text, language=self.language))
        except Exception as exc:
            self._logger.warning("speech.playback.failed", error=str(exc))
            self.note(f"Speech synthesis error: {exc}")


__all__ = ["CommandProcessor", "COMBO_DIAGNOSTIC", "UNSUPPORTED_DIAGNOSTIC", "PLAYBACK_UNAVAILABLE"]
