from __future__ import annotations

from typing import Any, Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from jarvisx.console import VoiceConsole
from jarvisx.telemetry.logging import get_logger
from jarvisx.speech.voices import Voice
from jarvisx.ui.websocket import BrowserSpeechRelay, ConsoleBridge

logger = get_logger(__name__)


class CommandRequest(BaseModel):
    text: str = ""


class CaptureEvent(BaseModel):
    event: Literal["start", "error", "end", "result"]
    text: str = ""
    is_final: bool = False
    detail: str | None = None


class VoiceInfo(BaseModel):
    name: str
    lang: str


class VoiceList(BaseModel):
    voices: list[VoiceInfo] = Field(default_factory=list)


class SettingsUpdate(BaseModel):
    language: str | None = None
    voice_output: bool | None = None
    voice_input: bool | None = None
    system_prompt: str | None = Field(default=None, max_length=8000)


def create_app(console: VoiceConsole, bridge: ConsoleBridge | None = None, origins: list[str] | None = None) -> FastAPI:
    bridge = bridge or ConsoleBridge()
    app = FastAPI(title="JARVIS-X Voice Console")
    app.state.console = console
    app.state.bridge = bridge
    app.include_router(bridge.router)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["*"],
            allow_headers=["*"],
            allow_credentials=True,
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        console.start()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        console.shutdown()

    @app.post("/command")
    async def run_command(request: CommandRequest) -> dict[str, Any]:
        exchange = console.run_command(request.text)
        await bridge.publish_state(console.state, {"exchange": exchange.to_dict(), **console.snapshot()})
        return exchange.to_dict()

    @app.post("/capture/event")
    async def capture_event(event: CaptureEvent) -> dict[str, Any]:
        listener = console.capture.listener
        if listener is None:
            raise HTTPException(status_code=409, detail="capture is not attached")
        if event.event == "start":
            listener.on_start()
        elif event.event == "error":
            listener.on_error(event.detail)
        elif event.event == "end":
            listener.on_end()
        else:
            listener.on_result(event.text, event.is_final)
        snapshot = console.snapshot()
        await bridge.publish_state(console.state, snapshot)
        return snapshot

    @app.get("/log")
    async def conversation_log() -> dict[str, Any]:
        return {"entries": [entry.to_dict() for entry in console.processor.log]}

    @app.get("/diagnostics")
    async def diagnostics() -> dict[str, Any]:
        return {"items": console.processor.diagnostics}

    @app.get("/status")
    async def status() -> dict[str, Any]:
        return {**console.snapshot(), "clients": bridge.client_count}

    @app.get("/commands")
    async def commands() -> dict[str, Any]:
        return {"commands": console.command_library()}

    @app.get("/languages")
    async def languages() -> dict[str, Any]:
        options = [{"value": item.value, "label": item.label} for item in console.catalog.languages()]
        return {"languages": options, "current": console.language}

    @app.post("/voices")
    async def report_voices(report: VoiceList) -> dict[str, Any]:
        relay = console.playback
        if not isinstance(relay, BrowserSpeechRelay):
            raise HTTPException(status_code=409, detail="playback is not relayed to a browser")
        relay.update_voices(Voice(name=item.name, lang=item.lang) for item in report.voices)
        preferred = console.catalog.preferred_voice(console.language, relay.voices)
        return {"count": len(report.voices), "preferred": preferred.name if preferred else None}

    @app.put("/settings")
    async def update_settings(update: SettingsUpdate) -> dict[str, Any]:
        if update.language is not None:
            try:
                console.set_language(update.language)
            except ValueError as exc:
                raise HTTPException(status_code=422, detail=str(exc)) from exc
        if update.voice_output is not None:
            console.set_voice_output(update.voice_output)
        if update.voice_input is not None:
            console.set_voice_input(update.voice_input)
        if update.system_prompt is not None:
            console.system_prompt = update.system_prompt
        logger.info("settings.updated", fields=sorted(update.model_dump(exclude_none=True)))
        snapshot = console.snapshot()
        await bridge.publish_state(console.state, snapshot)
        return snapshot

    return app


__all__ = ["create_app", "CommandRequest", "SettingsUpdate", "VoiceList"]
