"""Request payloads sent to the Bot API."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class GetUpdatesRequest:
    """Payload of a getUpdates long poll."""

    offset: int
    timeout: int  # seconds

    def to_payload(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SendMessageRequest:
    """Payload of a sendMessage call."""

    chat_id: int
    text: str

    def to_payload(self) -> dict[str, Any]:
        return asdict(self)
