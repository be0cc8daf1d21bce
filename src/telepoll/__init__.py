"""telepoll - long-polling client for the Telegram Bot API."""

from telepoll.api.stream import UpdateStream
from telepoll.bot import Bot, BotFactory
from telepoll.errors import (
    ApiResponseError,
    BotError,
    CodecError,
    MalformedUpdateError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "Bot", "BotFactory", "UpdateStream",
    "BotError", "TransportError", "CodecError",
    "ApiResponseError", "MalformedUpdateError",
]
