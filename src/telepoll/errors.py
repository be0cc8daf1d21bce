"""Failure kinds raised by the transport, decoder and update stream."""

from __future__ import annotations


class BotError(Exception):
    """Base class for every failure surfaced by telepoll."""


class TransportError(BotError):
    """The remote host could not be reached or the connection failed."""


class CodecError(BotError):
    """A request or response body could not be encoded or decoded."""


class ApiResponseError(BotError):
    """The Bot API answered with its own error wrapper."""

    def __init__(self, description: str, error_code: int | None = None) -> None:
        self.description = description
        self.error_code = error_code
        super().__init__(f"Api error response: '{description}'")


class MalformedUpdateError(BotError):
    """An update record carried none of the known payload slots."""

    def __init__(self, update_id: int) -> None:
        self.update_id = update_id
        super().__init__(f"Unknown update response (update_id={update_id})")
