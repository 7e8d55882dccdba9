from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Literal

from jarvisx.commands.intents import Intent

Role = Literal["user", "assistant"]


@dataclass(frozen=True, slots=True)
class ExchangeEntry:
    role: Role
    text: str
    intent: Intent

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role, "text": self.text, "intent": self.intent.value}


@dataclass(frozen=True, slots=True)
class Exchange:
    user: ExchangeEntry
    assistant: ExchangeEntry

    @classmethod
    def create(cls, user_text: str, assistant_text: str, intent: Intent) -> "Exchange":
        return cls(
            user=ExchangeEntry(role="user", text=user_text, intent=intent),
            assistant=ExchangeEntry(role="assistant", text=assistant_text, intent=intent),
        )

    @property
    def intent(self) -> Intent:
        return self.assistant.intent

    def entries(self) -> tuple[ExchangeEntry, ExchangeEntry]:
        return self.user, self.assistant

    def to_dict(self) -> dict[str, Any]:
        return {"intent": self.intent.value, "user": self.user.text, "assistant": self.assistant.text}


@dataclass(frozen=True, slots=True)
class SpeakRequest:
    text: str
    language: str


@dataclass(frozen=True, slots=True)
class Diagnostic:
    message: str
    ts: float = field(default_factory=time.time)


State = Literal["IDLE", "LISTENING", "UNSUPPORTED"]


__all__ = ["Role", "ExchangeEntry", "Exchange", "SpeakRequest", "Diagnostic", "State"]
