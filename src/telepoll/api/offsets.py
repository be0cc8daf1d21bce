"""Acknowledgment offset for getUpdates."""

from __future__ import annotations


class OffsetTracker:
    """Tracks the next update_id to request.

    Everything below ``offset`` is acknowledged; the server re-sends
    anything at or above it. The offset only moves forward.
    """

    def __init__(self, offset: int = 0) -> None:
        self._offset = offset

    @property
    def offset(self) -> int:
        return self._offset

    def accept(self, update_id: int) -> bool:
        """Acknowledge ``update_id``. Returns False for an already-seen id."""
        if update_id < self._offset:
            return False
        self._offset = max(self._offset, update_id + 1)
        return True
