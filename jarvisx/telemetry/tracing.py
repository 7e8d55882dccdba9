from __future__ import annotations

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter, SpanExporter

from jarvisx.commands.intents import Intent
from jarvisx.telemetry.logging import get_logger

_configured = False


def build_exporter(endpoint: str | None, console: bool = False) -> SpanExporter | None:
    """OTLP when an endpoint is set, stdout spans when asked for, otherwise nothing."""
    if endpoint:
        return OTLPSpanExporter(endpoint=endpoint)
    if console:
        return ConsoleSpanExporter()
    return None


def configure_tracing(
    service_name: str,
    endpoint: str | None,
    environment: str = "local",
    console: bool = False,
) -> bool:
    """Install a tracer provider once. Returns whether spans are being exported."""
    global _configured
    if _configured:
        return True
    exporter = build_exporter(endpoint, console)
    if exporter is None:
        return False

    resource = Resource.create({SERVICE_NAME: service_name, "deployment.environment": environment})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    get_logger(__name__).info(
        "tracing.enabled",
        exporter=type(exporter).__name__,
        endpoint=endpoint,
        service_name=service_name,
    )
    _configured = True
    return True


def annotate_command(span: trace.Span, intent: Intent, payload: str, response: str) -> None:
    span.set_attribute("jarvisx.intent", intent.value)
    span.set_attribute("jarvisx.payload_chars", len(payload))
    span.set_attribute("jarvisx.response_words", len(response.split()))
    if intent is Intent.MISSING_WAKE:
        span.add_event("wake_word.missing")


def get_tracer(name: str) -> trace.Tracer:
    return trace.get_tracer(name)


__all__ = ["configure_tracing", "build_exporter", "annotate_command", "get_tracer"]
