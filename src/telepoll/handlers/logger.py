"""Handler that only logs incoming updates."""

from __future__ import annotations

import json
import logging

from telepoll.models.updates import Update

log = logging.getLogger(__name__)


class LoggingHandler:
    async def handle(self, update: Update) -> None:
        log.info(
            "%s update %d: %s",
            update.kind, update.update_id, json.dumps(update.payload, ensure_ascii=False),
        )
