"""Bot API components - transport, decoder, offset tracker and update stream."""

from telepoll.api.decoder import decode_update
from telepoll.api.offsets import OffsetTracker
from telepoll.api.stream import UpdateStream
from telepoll.api.transport import HttpBotTransport

__all__ = ["HttpBotTransport", "decode_update", "OffsetTracker", "UpdateStream"]
