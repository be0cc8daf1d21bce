"""Long-polling update stream - turns getUpdates into an async iterator."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections import deque

from telepoll.api.decoder import decode_update
from telepoll.api.offsets import OffsetTracker
from telepoll.errors import BotError, CodecError
from telepoll.interfaces.transport import RpcTransport
from telepoll.models.requests import GetUpdatesRequest
from telepoll.models.updates import RawUpdate, Update

log = logging.getLogger(__name__)


class UpdateStream:
    """Async iterator of decoded updates, fed by getUpdates long polls.

    At most one getUpdates call is in flight. A fetched batch is drained
    oldest first; every record goes through the offset tracker (already
    acknowledged ids are dropped silently) and then the decoder. The next
    poll is only issued once the batch is exhausted.

    Failures are raised from the pull that hit them and leave the stream
    usable: iterate it again to retry. There is no retry or backoff here,
    that is the caller's policy (see telepoll.runner).

    A pull that gets cancelled while waiting does not cancel the poll; the
    next pull picks up the same outstanding request.
    """

    def __init__(
        self,
        transport: RpcTransport,
        poll_timeout: int = 120,
        offset: int = 0,
        request_timeout: float = 10,
    ) -> None:
        self._transport = transport
        self._poll_timeout = poll_timeout
        self._request_timeout = request_timeout
        self._tracker = OffsetTracker(offset)
        self._buffer: deque[RawUpdate] = deque()
        self._pending: asyncio.Task[None] | None = None
        self._closed = False

    @property
    def offset(self) -> int:
        """Offset the next getUpdates call will request."""
        return self._tracker.offset

    @property
    def pending(self) -> bool:
        return self._pending is not None

    @property
    def buffered(self) -> int:
        return len(self._buffer)

    @property
    def closed(self) -> bool:
        return self._closed

    def __aiter__(self) -> UpdateStream:
        return self

    async def __anext__(self) -> Update:
        while True:
            if self._closed:
                raise StopAsyncIteration

            while self._buffer:
                raw = self._buffer.popleft()
                if not self._tracker.accept(raw.update_id):
                    log.debug(
                        "Dropping already acknowledged update %d (offset %d)",
                        raw.update_id, self._tracker.offset,
                    )
                    continue
                return decode_update(raw)

            await self._await_poll()

    async def _await_poll(self) -> None:
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._fetch(self._tracker.offset))
        task = self._pending

        try:
            await asyncio.shield(task)
        except asyncio.CancelledError:
            if self._closed and task.cancelled():
                raise StopAsyncIteration from None
            raise
        finally:
            if task.done() and self._pending is task:
                self._pending = None

    async def _fetch(self, offset: int) -> None:
        request = GetUpdatesRequest(offset=offset, timeout=self._poll_timeout)
        try:
            result = await self._transport.call(
                "getUpdates",
                request,
                timeout=self._poll_timeout + self._request_timeout,
            )
            if not isinstance(result, list):
                raise CodecError(
                    f"getUpdates returned {type(result).__name__}, expected list"
                )
            batch = [RawUpdate.from_dict(item) for item in result]
        except BotError as exc:
            log.warning("getUpdates(offset=%d) failed: %s", offset, exc)
            raise

        batch.sort(key=lambda raw: raw.update_id)
        if batch:
            log.debug(
                "Fetched %d updates at offset %d (ids %d..%d)",
                len(batch), offset, batch[0].update_id, batch[-1].update_id,
            )
        self._buffer.extend(batch)

    async def aclose(self) -> None:
        """Stop the stream, cancelling any outstanding poll."""
        self._closed = True
        self._buffer.clear()
        task, self._pending = self._pending, None
        if task is None:
            return
        if not task.done():
            task.cancel()
        with contextlib.suppress(asyncio.CancelledError, BotError):
            await task

    async def __aenter__(self) -> UpdateStream:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
