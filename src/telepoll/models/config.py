"""Configuration models for the bot client."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HandlerKind(str, Enum):
    """Which handler the runner dispatches updates to."""

    ECHO = "echo"  # Reply to text messages with the same text
    LOG = "log"  # Only log incoming updates


@dataclass
class BotConfig:
    """Complete client configuration."""

    # Bot
    token: str = ""  # loaded from env var TELEPOLL_TOKEN or BOT_TOKEN
    api_url: str = "https://api.telegram.org"

    # Polling
    poll_timeout: int = 120  # seconds the server may hold getUpdates open
    request_timeout: int = 10  # seconds, added on top of poll_timeout for getUpdates
    initial_offset: int = 0

    # Runner
    handler: HandlerKind = HandlerKind.ECHO
    error_backoff: int = 5  # seconds
    log_level: str = "info"
