"""Main polling loop - drives an UpdateStream and dispatches to a handler."""

from __future__ import annotations

import asyncio
import logging
import signal

from telepoll.api.stream import UpdateStream
from telepoll.bot import Bot, BotFactory
from telepoll.errors import BotError, MalformedUpdateError
from telepoll.handlers import EchoHandler, LoggingHandler
from telepoll.interfaces.handler import UpdateHandler
from telepoll.models.config import BotConfig, HandlerKind

log = logging.getLogger(__name__)


def build_handler(kind: HandlerKind, bot: Bot) -> UpdateHandler:
    if kind is HandlerKind.ECHO:
        return EchoHandler(bot)
    return LoggingHandler()


class BotRunner:
    """Pulls updates one at a time and hands them to the handler.

    Owns the retry policy the stream leaves to its caller: malformed
    updates are skipped, other polling failures wait ``error_backoff``
    seconds and then re-drive the same stream.
    """

    def __init__(
        self,
        stream: UpdateStream,
        handler: UpdateHandler,
        error_backoff: float = 5,
    ) -> None:
        self._stream = stream
        self._handler = handler
        self._error_backoff = error_backoff
        self._running = False
        self._task: asyncio.Task | None = None

        self.handled = 0
        self.poll_errors = 0
        self.handler_errors = 0

    @classmethod
    def from_config(cls, bot: Bot, cfg: BotConfig) -> BotRunner:
        stream = bot.updates(
            poll_timeout=cfg.poll_timeout,
            offset=cfg.initial_offset,
            request_timeout=cfg.request_timeout,
        )
        return cls(stream, build_handler(cfg.handler, bot), cfg.error_backoff)

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Run the loop until stopped, then close the stream."""
        log.info("Starting update loop at offset %d", self._stream.offset)
        self._running = True
        self._task = asyncio.current_task()
        try:
            await self._main_loop()
        finally:
            self._running = False
            self._task = None
            await self._stream.aclose()
            log.info(
                "Update loop stopped (handled=%d, poll_errors=%d, handler_errors=%d, offset=%d)",
                self.handled, self.poll_errors, self.handler_errors, self._stream.offset,
            )

    async def stop(self) -> None:
        """Signal the loop to stop, interrupting an outstanding long poll."""
        log.info("Stop requested")
        self._running = False
        if self._task is not None and self._task is not asyncio.current_task():
            self._task.cancel()

    async def _main_loop(self) -> None:
        while self._running:
            try:
                update = await anext(self._stream)
            except StopAsyncIteration:
                break
            except asyncio.CancelledError:
                log.info("Update loop cancelled")
                break
            except MalformedUpdateError as exc:
                self.poll_errors += 1
                log.warning("Skipping malformed update: %s", exc)
                continue
            except BotError as exc:
                self.poll_errors += 1
                log.error(
                    "Polling error: %s (retrying in %ss)", exc, self._error_backoff,
                )
                try:
                    await asyncio.sleep(self._error_backoff)
                except asyncio.CancelledError:
                    break
                continue

            try:
                await self._handler.handle(update)
                self.handled += 1
            except asyncio.CancelledError:
                log.info("Update loop cancelled")
                break
            except Exception as exc:
                self.handler_errors += 1
                log.error(
                    "Handler failed on %s update %d: %s",
                    update.kind, update.update_id, exc, exc_info=True,
                )


async def run_bot(cfg: BotConfig) -> None:
    """Entry point for running a bot until SIGINT/SIGTERM."""
    async with BotFactory.from_config(cfg) as factory:
        bot = await factory.create_bot(cfg.token)
        runner = BotRunner.from_config(bot, cfg)

        loop = asyncio.get_running_loop()

        def _signal_handler():
            asyncio.ensure_future(runner.stop())

        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, _signal_handler)
            except NotImplementedError:
                # Windows doesn't support add_signal_handler
                pass

        await runner.start()
