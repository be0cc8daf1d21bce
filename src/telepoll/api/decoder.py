"""Classifies a raw getUpdates record into a single typed update."""

from __future__ import annotations

import logging

from telepoll.errors import MalformedUpdateError
from telepoll.models.updates import UPDATE_SLOTS, UPDATE_TYPES, RawUpdate, Update

log = logging.getLogger(__name__)


def decode_update(raw: RawUpdate) -> Update:
    """Return the update for the first populated slot in priority order.

    A well-formed record has exactly one slot. Records with several slots
    are still decoded (first slot wins); records with none raise
    MalformedUpdateError.
    """
    present = [name for name in UPDATE_SLOTS if name in raw.slots]
    if not present:
        raise MalformedUpdateError(raw.update_id)
    if len(present) > 1:
        log.debug(
            "Update %d has %d payload slots (%s), using %s",
            raw.update_id, len(present), ", ".join(present), present[0],
        )

    kind = present[0]
    return UPDATE_TYPES[kind](update_id=raw.update_id, payload=raw.slots[kind])
