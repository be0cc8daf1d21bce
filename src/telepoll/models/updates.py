"""Update models: raw getUpdates records and the decoded event types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

from telepoll.errors import CodecError
from telepoll.models.types import (
    CallbackQuery,
    ChosenInlineResult,
    InlineQuery,
    Message,
    PreCheckoutQuery,
    ShippingQuery,
)

# Payload slots of an update record, in the order the decoder inspects them.
UPDATE_SLOTS = (
    "message",
    "edited_message",
    "channel_post",
    "edited_channel_post",
    "inline_query",
    "chosen_inline_result",
    "callback_query",
    "shipping_query",
    "pre_checkout_query",
)


@dataclass(frozen=True)
class RawUpdate:
    """One record of a getUpdates batch, before classification.

    ``slots`` holds only the payload slots that were present and non-null.
    """

    update_id: int
    slots: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> RawUpdate:
        if not isinstance(data, dict):
            raise CodecError(f"update record: expected object, got {type(data).__name__}")
        update_id = data.get("update_id")
        if not isinstance(update_id, int) or isinstance(update_id, bool):
            raise CodecError(f"update record: invalid update_id {update_id!r}")
        slots = {
            name: data[name]
            for name in UPDATE_SLOTS
            if data.get(name) is not None
        }
        return cls(update_id=update_id, slots=slots)


@dataclass(frozen=True)
class _UpdateBase:
    """Shared shape of every decoded update: its id and the raw payload."""

    kind: ClassVar[str]
    payload_type: ClassVar[type]

    update_id: int
    payload: dict[str, Any]

    def parse(self) -> Any:
        """Decode the raw payload into its typed view (see models.types)."""
        return self.payload_type.from_dict(self.payload)


@dataclass(frozen=True)
class MessageUpdate(_UpdateBase):
    kind: ClassVar[str] = "message"
    payload_type: ClassVar[type] = Message


@dataclass(frozen=True)
class EditedMessageUpdate(_UpdateBase):
    kind: ClassVar[str] = "edited_message"
    payload_type: ClassVar[type] = Message


@dataclass(frozen=True)
class ChannelPostUpdate(_UpdateBase):
    kind: ClassVar[str] = "channel_post"
    payload_type: ClassVar[type] = Message


@dataclass(frozen=True)
class EditedChannelPostUpdate(_UpdateBase):
    kind: ClassVar[str] = "edited_channel_post"
    payload_type: ClassVar[type] = Message


@dataclass(frozen=True)
class InlineQueryUpdate(_UpdateBase):
    kind: ClassVar[str] = "inline_query"
    payload_type: ClassVar[type] = InlineQuery


@dataclass(frozen=True)
class ChosenInlineResultUpdate(_UpdateBase):
    kind: ClassVar[str] = "chosen_inline_result"
    payload_type: ClassVar[type] = ChosenInlineResult


@dataclass(frozen=True)
class CallbackQueryUpdate(_UpdateBase):
    kind: ClassVar[str] = "callback_query"
    payload_type: ClassVar[type] = CallbackQuery


@dataclass(frozen=True)
class ShippingQueryUpdate(_UpdateBase):
    kind: ClassVar[str] = "shipping_query"
    payload_type: ClassVar[type] = ShippingQuery


@dataclass(frozen=True)
class PreCheckoutQueryUpdate(_UpdateBase):
    kind: ClassVar[str] = "pre_checkout_query"
    payload_type: ClassVar[type] = PreCheckoutQuery


Update = Union[
    MessageUpdate,
    EditedMessageUpdate,
    ChannelPostUpdate,
    EditedChannelPostUpdate,
    InlineQueryUpdate,
    ChosenInlineResultUpdate,
    CallbackQueryUpdate,
    ShippingQueryUpdate,
    PreCheckoutQueryUpdate,
]

UPDATE_TYPES: dict[str, type[_UpdateBase]] = {
    cls.kind: cls
    for cls in (
        MessageUpdate,
        EditedMessageUpdate,
        ChannelPostUpdate,
        EditedChannelPostUpdate,
        InlineQueryUpdate,
        ChosenInlineResultUpdate,
        CallbackQueryUpdate,
        ShippingQueryUpdate,
        PreCheckoutQueryUpdate,
    )
}
