"""Mock implementations of external-facing components."""

from __future__ import annotations

import asyncio
from collections import defaultdict
from typing import Any, Awaitable, Callable

from telepoll.models.updates import Update


class ScriptedTransport:
    """Implements RpcTransport. Answers calls from per-endpoint queues.

    Queued items are returned in order; exception instances are raised.
    A call with nothing queued blocks until something is enqueued, like a
    long poll with no new updates.
    """

    def __init__(self) -> None:
        self.responses: dict[str, list[Any]] = defaultdict(list)
        self.calls: list[tuple[str, dict[str, Any], float | None]] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.gate: asyncio.Event | None = None
        self._arrived = asyncio.Event()

    def enqueue(self, endpoint: str, *results: Any) -> None:
        """Test helper: stage results (or exceptions) for ``endpoint``."""
        self.responses[endpoint].extend(results)
        self._arrived.set()

    def enqueue_batch(self, *updates: dict[str, Any]) -> None:
        """Test helper: stage one getUpdates batch."""
        self.responses["getUpdates"].append(list(updates))
        self._arrived.set()

    def offsets(self) -> list[int]:
        """Offsets requested by every getUpdates call so far."""
        return [body["offset"] for endpoint, body, _ in self.calls if endpoint == "getUpdates"]

    async def call(
        self,
        endpoint: str,
        payload: Any = None,
        timeout: float | None = None,
    ) -> Any:
        if payload is None:
            body = {}
        elif hasattr(payload, "to_payload"):
            body = payload.to_payload()
        else:
            body = payload
        self.calls.append((endpoint, body, timeout))

        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.gate is not None:
                await self.gate.wait()
            queue = self.responses[endpoint]
            while not queue:
                self._arrived.clear()
                await self._arrived.wait()
            result = queue.pop(0)
        finally:
            self.in_flight -= 1

        if isinstance(result, BaseException):
            raise result
        return result


class RecordingHandler:
    """Implements UpdateHandler. Records updates, optionally reacting."""

    def __init__(
        self,
        on_update: Callable[[Update], Awaitable[None]] | None = None,
    ) -> None:
        self.updates: list[Update] = []
        self._on_update = on_update

    async def handle(self, update: Update) -> None:
        self.updates.append(update)
        if self._on_update is not None:
            await self._on_update(update)

    @property
    def ids(self) -> list[int]:
        return [u.update_id for u in self.updates]
