from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from typing import Any, Callable, MutableMapping

import structlog

_configured = False

EventDict = MutableMapping[str, Any]


def service_context(service: str, environment: str) -> Callable[[Any, str, EventDict], EventDict]:
    """Processor stamping every event with the service and deployment it came from."""

    def _add(_: Any, __: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service)
        event_dict.setdefault("environment", environment)
        return event_dict

    return _add


def configure_logging(
    level: str = "INFO",
    json: bool = True,
    service: str = "jarvisx",
    environment: str = "local",
) -> None:
    global _configured
    if _configured:
        return

    logging.basicConfig(format="%(message)s", level=level)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        service_context(service, environment),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(),
    ]
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)


def bind_context(**fields: Any) -> AbstractContextManager[Any]:
    """Attach *fields* to every log line emitted inside the ``with`` block."""
    return structlog.contextvars.bound_contextvars(**fields)


__all__ = ["configure_logging", "get_logger", "bind_context", "service_context"]
