"""Typed views over update payloads, decoded on demand.

Only the fields the client itself relies on are modelled; everything else
stays available through the raw ``payload`` dict on the update.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from telepoll.errors import CodecError


def _field(data: dict[str, Any], key: str, kind: type, owner: str) -> Any:
    """Fetch a required field, raising CodecError on absence or wrong type."""
    if not isinstance(data, dict):
        raise CodecError(f"{owner}: expected object, got {type(data).__name__}")
    if key not in data:
        raise CodecError(f"{owner}: missing field '{key}'")
    value = data[key]
    # bool is an int subclass
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise CodecError(f"{owner}.{key}: unexpected {type(value).__name__}")
    return value


@dataclass(frozen=True)
class User:
    id: int
    is_bot: bool
    first_name: str
    username: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        return cls(
            id=_field(data, "id", int, "User"),
            is_bot=bool(data.get("is_bot", False)),
            first_name=_field(data, "first_name", str, "User"),
            username=data.get("username"),
        )


@dataclass(frozen=True)
class Chat:
    id: int
    type: str  # "private", "group", "supergroup" or "channel"
    title: str | None = None
    username: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Chat:
        return cls(
            id=_field(data, "id", int, "Chat"),
            type=_field(data, "type", str, "Chat"),
            title=data.get("title"),
            username=data.get("username"),
        )


@dataclass(frozen=True)
class Message:
    """A message, edited message, channel post or edited channel post."""

    message_id: int
    date: int  # unix time
    chat: Chat
    from_user: User | None = None  # absent for channel posts
    text: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Message:
        sender = data.get("from") if isinstance(data, dict) else None
        return cls(
            message_id=_field(data, "message_id", int, "Message"),
            date=_field(data, "date", int, "Message"),
            chat=Chat.from_dict(_field(data, "chat", dict, "Message")),
            from_user=User.from_dict(sender) if sender is not None else None,
            text=data.get("text"),
        )


@dataclass(frozen=True)
class InlineQuery:
    id: str
    from_user: User
    query: str
    offset: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InlineQuery:
        return cls(
            id=_field(data, "id", str, "InlineQuery"),
            from_user=User.from_dict(_field(data, "from", dict, "InlineQuery")),
            query=_field(data, "query", str, "InlineQuery"),
            offset=data.get("offset", ""),
        )


@dataclass(frozen=True)
class ChosenInlineResult:
    result_id: str
    from_user: User
    query: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChosenInlineResult:
        return cls(
            result_id=_field(data, "result_id", str, "ChosenInlineResult"),
            from_user=User.from_dict(_field(data, "from", dict, "ChosenInlineResult")),
            query=_field(data, "query", str, "ChosenInlineResult"),
        )


@dataclass(frozen=True)
class CallbackQuery:
    id: str
    from_user: User
    data: str | None = None
    message: Message | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CallbackQuery:
        msg = data.get("message") if isinstance(data, dict) else None
        return cls(
            id=_field(data, "id", str, "CallbackQuery"),
            from_user=User.from_dict(_field(data, "from", dict, "CallbackQuery")),
            data=data.get("data"),
            message=Message.from_dict(msg) if msg is not None else None,
        )


@dataclass(frozen=True)
class ShippingQuery:
    id: str
    from_user: User
    invoice_payload: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ShippingQuery:
        return cls(
            id=_field(data, "id", str, "ShippingQuery"),
            from_user=User.from_dict(_field(data, "from", dict, "ShippingQuery")),
            invoice_payload=_field(data, "invoice_payload", str, "ShippingQuery"),
        )


@dataclass(frozen=True)
class PreCheckoutQuery:
    id: str
    from_user: User
    currency: str
    total_amount: int  # smallest units of the currency
    invoice_payload: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PreCheckoutQuery:
        return cls(
            id=_field(data, "id", str, "PreCheckoutQuery"),
            from_user=User.from_dict(_field(data, "from", dict, "PreCheckoutQuery")),
            currency=_field(data, "currency", str, "PreCheckoutQuery"),
            total_amount=_field(data, "total_amount", int, "PreCheckoutQuery"),
            invoice_payload=_field(data, "invoice_payload", str, "PreCheckoutQuery"),
        )
