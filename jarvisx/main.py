from __future__ import annotations

from fastapi import FastAPI

from jarvisx.config import AppSettings, load_settings
from jarvisx.console import VoiceConsole
from jarvisx.speech.voices import load_catalog
from jarvisx.telemetry.logging import configure_logging, get_logger
from jarvisx.telemetry.tracing import configure_tracing
from jarvisx.ui.api import create_app
from jarvisx.ui.websocket import BrowserCaptureRelay, BrowserSpeechRelay, ConsoleBridge

SERVICE_NAME = "jarvisx-voice-console"


def build_app(settings: AppSettings) -> FastAPI:
    telemetry = settings.telemetry
    configure_logging(
        telemetry.log_level,
        json=telemetry.log_json,
        service=SERVICE_NAME,
        environment=settings.ENVIRONMENT,
    )
    configure_tracing(
        SERVICE_NAME,
        telemetry.otlp_endpoint,
        environment=settings.ENVIRONMENT,
        console=telemetry.console_spans,
    )

    catalog = load_catalog()
    bridge = ConsoleBridge()
    console = VoiceConsole(
        settings,
        capture=BrowserCaptureRelay(bridge),
        playback=BrowserSpeechRelay(bridge, catalog),
        catalog=catalog,
    )

    origins = {settings.ui.origin}
    if "localhost" in settings.ui.origin:
        origins.add(settings.ui.origin.replace("localhost", "127.0.0.1"))
    app = create_app(console, bridge, origins=sorted(origins))
    get_logger(__name__).info("app.built", environment=settings.ENVIRONMENT, language=console.language)
    return app


app = build_app(load_settings())
