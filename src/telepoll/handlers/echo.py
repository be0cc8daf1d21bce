"""Echo handler - answers every text message with the same text."""

from __future__ import annotations

import logging

from telepoll.bot import Bot
from telepoll.models.updates import MessageUpdate, Update

log = logging.getLogger(__name__)


class EchoHandler:
    def __init__(self, bot: Bot) -> None:
        self._bot = bot

    async def handle(self, update: Update) -> None:
        if not isinstance(update, MessageUpdate):
            log.debug("Ignoring %s update %d", update.kind, update.update_id)
            return

        message = update.parse()
        if message.text is None:
            log.debug("Message %d has no text, not echoing", message.message_id)
            return

        reply = await self._bot.send_message(message.chat.id, message.text)
        log.info(
            "Echoed message %d in chat %d (reply %d)",
            message.message_id, message.chat.id, reply.message_id,
        )
