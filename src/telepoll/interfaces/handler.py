"""UpdateHandler protocol - consumes decoded updates from the runner."""

from __future__ import annotations

from typing import Protocol

from telepoll.models.updates import Update


class UpdateHandler(Protocol):
    """Reacts to one update at a time."""

    async def handle(self, update: Update) -> None:
        ...
