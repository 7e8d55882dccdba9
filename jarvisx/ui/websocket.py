from __future__ import annotations

import asyncio
from typing import Any, Iterable

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from jarvisx.orchestrator.events import SpeakRequest, State
from jarvisx.speech.base import SpeechCapture, SpeechPlayback
from jarvisx.speech.voices import Voice, VoiceCatalog
from jarvisx.telemetry.logging import get_logger


class ConsoleBridge:
    def __init__(self) -> None:
        self._clients: set[WebSocket] = set()
        self._router = APIRouter()
        self._router.add_api_websocket_route("/ws/state", self._websocket_handler)
        self._lock = asyncio.Lock()
        self._tasks: set[asyncio.Task[None]] = set()
        self._logger = get_logger(__name__)

    @property
    def router(self) -> APIRouter:
        return self._router

    @property
    def client_count(self) -> int:
        return len(self._clients)

    async def _websocket_handler(self, websocket: WebSocket) -> None:
        await websocket.accept()
        async with self._lock:
            self._clients.add(websocket)
        self._logger.info("ui.client.connected", count=len(self._clients))
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            async with self._lock:
                self._clients.discard(websocket)
            self._logger.info("ui.client.disconnected", count=len(self._clients))

    async def publish(self, message: dict[str, Any]) -> None:
        async with self._lock:
            send_tasks = [client.send_json(message) for client in self._clients]
        if send_tasks:
            await asyncio.gather(*send_tasks, return_exceptions=True)

    def schedule(self, message: dict[str, Any]) -> None:
        """Send *message* in the background; a no-op outside a running loop."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._logger.debug("ui.publish.no_loop", message_type=message.get("type"))
            return
        task = loop.create_task(self.publish(message), name=f"ui-publish:{message.get('type')}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def publish_state(self, state: State, payload: dict[str, Any] | None = None) -> None:
        await self.publish({"type": "state", "state": state, "payload": payload or {}})


class BrowserSpeechRelay(SpeechPlayback):
    """Forwards speak requests to connected browsers, which own the synthesiser.

    Sending is scheduled on the running loop and never awaited, so the command
    pipeline does not wait for playback.
    """

    def __init__(self, bridge: ConsoleBridge, catalog: VoiceCatalog) -> None:
        self._bridge = bridge
        self._catalog = catalog
        self._voices: list[Voice] = []

    def available(self) -> bool:
        return True

    def update_voices(self, voices: Iterable[Voice]) -> None:
        """Replace the voices the browser reported through ``speechSynthesis.getVoices()``."""
        self._voices = list(voices)

    @property
    def voices(self) -> list[Voice]:
        return list(self._voices)

    def speak(self, request: SpeakRequest) -> None:
        preferred = self._catalog.preferred_voice(request.language, self._voices)
        self._send(
            {
                "type": "speak",
                "text": request.text,
                "lang": request.language,
                "voice_match": self._catalog.voice_match(request.language),
                "voice": preferred.name if preferred else None,
                "rate": self._catalog.rate,
                "pitch": self._catalog.pitch,
            }
        )

    def cancel(self) -> None:
        self._send({"type": "cancel"})

    def _send(self, message: dict[str, Any]) -> None:
        self._bridge.schedule(message)


class BrowserCaptureRelay(SpeechCapture):
    """Asks connected browsers to run recognition; their events come back over HTTP."""

    def __init__(self, bridge: ConsoleBridge) -> None:
        super().__init__()
        self._bridge = bridge

    def available(self) -> bool:
        return True

    def start(self, language: str) -> None:
        self._bridge.schedule({"type": "capture.start", "lang": language, "continuous": True, "interim": True})

    def stop(self) -> None:
        self._bridge.schedule({"type": "capture.stop"})


__all__ = ["ConsoleBridge", "BrowserSpeechRelay", "BrowserCaptureRelay"]
