from __future__ import annotations

from typing import Any

from jarvisx.commands.intents import COMMAND_LIBRARY
from jarvisx.config import AppSettings
from jarvisx.orchestrator.events import Exchange, State
from jarvisx.orchestrator.processor import CommandProcessor
from jarvisx.persona import ENHANCEMENTS
from jarvisx.speech.base import NullCapture, NullPlayback, SpeechCapture, SpeechPlayback
from jarvisx.speech.capture import CaptureSession
from jarvisx.speech.voices import VoiceCatalog, load_catalog
from jarvisx.telemetry.logging import get_logger

AWAITING_WAKE = "Awaiting wake word."
INPUT_UNAVAILABLE = "Voice input unavailable in this browser."
CAPTURE_UNSUPPORTED = "Speech recognition not supported; toggle disabled."


class VoiceConsole:
    """Operator-facing runtime: toggles, language, prompt and the command pipeline."""

    def __init__(
        self,
        settings: AppSettings,
        capture: SpeechCapture | None = None,
        playback: SpeechPlayback | None = None,
        catalog: VoiceCatalog | None = None,
    ) -> None:
        self._logger = get_logger(__name__)
        self._catalog = catalog or load_catalog()
        voice = settings.voice
        console = settings.console
        self._capture = capture or NullCapture()
        self.speech_supported = self._capture.available()
        self._playback = playback or NullPlayback()
        self.processor = CommandProcessor(
            self._playback,
            language=self._catalog.validate(voice.language),
            voice_output_enabled=voice.output_enabled,
            capacity=console.log_capacity,
            max_words=console.max_response_words,
        )
        self.system_prompt = console.system_prompt
        self._session = CaptureSession(self._capture, self.processor)
        self._voice_input_requested = self.speech_supported and voice.input_enabled

        if self.speech_supported:
            self.processor.status = AWAITING_WAKE
        else:
            self.processor.status = INPUT_UNAVAILABLE
            self.processor.note(CAPTURE_UNSUPPORTED)
            self.processor.seed_unsupported()
        self._logger.info("console.ready", speech_supported=self.speech_supported, language=self.language)

    @property
    def catalog(self) -> VoiceCatalog:
        return self._catalog

    @property
    def capture(self) -> SpeechCapture:
        return self._capture

    @property
    def playback(self) -> SpeechPlayback:
        return self._playback

    @property
    def language(self) -> str:
        return self.processor.language

    @property
    def voice_input_active(self) -> bool:
        return self.speech_supported and self._voice_input_requested

    @property
    def listening(self) -> bool:
        return self._session.listening

    @property
    def state(self) -> State:
        if not self.speech_supported:
            return "UNSUPPORTED"
        return "LISTENING" if self.listening else "IDLE"

    def start(self) -> None:
        if self.voice_input_active:
            self._session.activate(self.language)

    def shutdown(self) -> None:
        self._session.deactivate()

    def run_command(self, text: str) -> Exchange:
        return self.processor.process(text)

    def set_language(self, language: str) -> None:
        self._catalog.validate(language)
        if language == self.processor.language:
            return
        self.processor.language = language
        self._session.restart(language)
        self._logger.info("console.language.set", language=language)

    def set_voice_output(self, enabled: bool) -> None:
        self.processor.voice_output_enabled = enabled
        self._logger.info("console.voice_output.set", enabled=enabled)

    def set_voice_input(self, requested: bool) -> bool:
        if not self.speech_supported:
            return False
        self._voice_input_requested = requested
        if requested:
            self._session.activate(self.language)
        else:
            self._session.deactivate()
        self._logger.info("console.voice_input.set", requested=requested)
        return self.voice_input_active

    def command_library(self) -> list[dict[str, str]]:
        return [{"label": spec.label, "intent": spec.intent.value} for spec in COMMAND_LIBRARY]

    def snapshot(self) -> dict[str, Any]:
        return {
            "state": self.state,
            "speech_supported": self.speech_supported,
            "voice_input": self.voice_input_active,
            "voice_output": self.processor.voice_output_enabled,
            "listening": self.listening,
            "language": self.language,
            "status": self.processor.status,
            "transcript": self.processor.transcript,
            "system_prompt": self.system_prompt,
            "enhancements": list(ENHANCEMENTS),
        }


__all__ = ["VoiceConsole", "AWAITING_WAKE", "INPUT_UNAVAILABLE", "CAPTURE_UNSUPPORTED"]
