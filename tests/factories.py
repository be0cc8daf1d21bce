"""Synthetic Bot API payload factories for testing."""

from __future__ import annotations

from typing import Any


def make_user(
    user_id: int = 42,
    first_name: str = "Ada",
    username: str | None = "ada",
    is_bot: bool = False,
) -> dict[str, Any]:
    user: dict[str, Any] = {"id": user_id, "is_bot": is_bot, "first_name": first_name}
    if username is not None:
        user["username"] = username
    return user


def make_message(
    message_id: int = 1,
    chat_id: int = 1000,
    text: str | None = "hello",
    chat_type: str = "private",
    sender: dict[str, Any] | None = None,
    date: int = 1_700_000_000,
) -> dict[str, Any]:
    message: dict[str, Any] = {
        "message_id": message_id,
        "date": date,
        "chat": {"id": chat_id, "type": chat_type},
        "from": sender if sender is not None else make_user(),
    }
    if text is not None:
        message["text"] = text
    return message


def make_callback_query(
    query_id: str = "cb-1",
    data: str | None = "press",
    message: dict[str, Any] | None = None,
) -> dict[str, Any]:
    query: dict[str, Any] = {"id": query_id, "from": make_user(), "chat_instance": "ci"}
    if data is not None:
        query["data"] = data
    if message is not None:
        query["message"] = message
    return query


def make_update(update_id: int, kind: str = "message", payload: Any = None) -> dict[str, Any]:
    """Build one getUpdates record with a single populated slot."""
    if payload is None:
        if kind == "callback_query":
            payload = make_callback_query()
        else:
            payload = make_message(message_id=update_id, text=f"update {update_id}")
    return {"update_id": update_id, kind: payload}


def make_empty_update(update_id: int) -> dict[str, Any]:
    """A record with no payload slot at all (malformed)."""
    return {"update_id": update_id}
