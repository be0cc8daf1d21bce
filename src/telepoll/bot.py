"""Bot handles and the factory that shares one HTTP connection pool."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from telepoll.api.stream import UpdateStream
from telepoll.api.transport import DEFAULT_API_URL, HttpBotTransport
from telepoll.errors import CodecError
from telepoll.interfaces.transport import RpcTransport
from telepoll.models.config import BotConfig
from telepoll.models.requests import SendMessageRequest
from telepoll.models.types import Message, User

log = logging.getLogger(__name__)


class Bot:
    """An authenticated bot: identity from getMe plus a transport.

    Use ``Bot.connect()`` or ``BotFactory.create_bot()``; both validate the
    token with getMe before returning.
    """

    def __init__(self, transport: RpcTransport, me: User) -> None:
        self._transport = transport
        self.me = me

    @classmethod
    async def connect(cls, transport: RpcTransport) -> Bot:
        """Call getMe and return a Bot, or raise if the token is rejected."""
        result = await transport.call("getMe")
        try:
            me = User.from_dict(result)
        except CodecError:
            log.error("getMe returned an unexpected payload")
            raise
        log.info("Authenticated as @%s (id %d)", me.username or me.first_name, me.id)
        return cls(transport, me)

    async def request(self, endpoint: str, payload: Any = None) -> Any:
        """Call any Bot API method and return its raw result."""
        return await self._transport.call(endpoint, payload)

    async def send_message(self, chat_id: int, text: str) -> Message:
        result = await self._transport.call(
            "sendMessage", SendMessageRequest(chat_id=chat_id, text=text),
        )
        return Message.from_dict(result)

    def updates(
        self,
        poll_timeout: int = 120,
        offset: int = 0,
        request_timeout: float = 10,
    ) -> UpdateStream:
        """Build a new long-polling stream over this bot's transport."""
        return UpdateStream(
            self._transport,
            poll_timeout=poll_timeout,
            offset=offset,
            request_timeout=request_timeout,
        )


class BotFactory:
    """Creates bots that share a single ``httpx.AsyncClient``.

    The factory owns the client; bots only borrow it. Close the factory
    (or use it as an async context manager) once its bots are done.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        request_timeout: float = 10,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_url = api_url
        self._request_timeout = request_timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(request_timeout),
        )

    @classmethod
    def from_config(cls, cfg: BotConfig) -> BotFactory:
        return cls(api_url=cfg.api_url, request_timeout=cfg.request_timeout)

    def transport(self, token: str) -> HttpBotTransport:
        return HttpBotTransport(
            self._client, token, self._api_url, timeout=self._request_timeout,
        )

    async def create_bot(self, token: str) -> Bot:
        """Validate ``token`` with getMe and return the bot."""
        return await Bot.connect(self.transport(token))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> BotFactory:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
