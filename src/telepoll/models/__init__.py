"""Data models for the telepoll client."""

from telepoll.models.config import BotConfig, HandlerKind
from telepoll.models.requests import GetUpdatesRequest, SendMessageRequest
from telepoll.models.types import (
    CallbackQuery,
    Chat,
    ChosenInlineResult,
    InlineQuery,
    Message,
    PreCheckoutQuery,
    ShippingQuery,
    User,
)
from telepoll.models.updates import (
    UPDATE_SLOTS,
    UPDATE_TYPES,
    CallbackQueryUpdate,
    ChannelPostUpdate,
    ChosenInlineResultUpdate,
    EditedChannelPostUpdate,
    EditedMessageUpdate,
    InlineQueryUpdate,
    MessageUpdate,
    PreCheckoutQueryUpdate,
    RawUpdate,
    ShippingQueryUpdate,
    Update,
)

__all__ = [
    "BotConfig", "HandlerKind",
    "GetUpdatesRequest", "SendMessageRequest",
    "User", "Chat", "Message", "InlineQuery", "ChosenInlineResult",
    "CallbackQuery", "ShippingQuery", "PreCheckoutQuery",
    "RawUpdate", "Update", "UPDATE_SLOTS", "UPDATE_TYPES",
    "MessageUpdate", "EditedMessageUpdate", "ChannelPostUpdate",
    "EditedChannelPostUpdate", "InlineQueryUpdate", "ChosenInlineResultUpdate",
    "CallbackQueryUpdate", "ShippingQueryUpdate", "PreCheckoutQueryUpdate",
]
