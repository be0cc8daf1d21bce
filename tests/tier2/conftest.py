"""Tier 2 fixtures: a fake Bot API served by a local aiohttp server."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
from aiohttp import web

from telepoll.bot import BotFactory

from tests.conftest import TEST_TOKEN
from tests.factories import make_message, make_user


class FakeBotApi:
    """Just enough of the Bot API for getMe, getUpdates and sendMessage.

    Updates stay queued until a getUpdates call with a higher offset
    acknowledges them. With ``redeliver`` set, acknowledged updates are
    sent again, as an at-least-once server might.
    """

    def __init__(self, token: str = TEST_TOKEN) -> None:
        self.token = token
        self.updates: list[dict[str, Any]] = []
        self.requests: list[tuple[str, dict[str, Any]]] = []
        self.sent: list[dict[str, Any]] = []
        self.redeliver = False
        self.max_hold = 0.2  # seconds, caps the client's long-poll timeout
        self._changed = asyncio.Event()
        self._next_message_id = 1000

    def push(self, *updates: dict[str, Any]) -> None:
        self.updates.extend(updates)
        self._changed.set()

    def offsets(self) -> list[int]:
        return [body.get("offset", 0) for method, body in self.requests if method == "getUpdates"]

    async def handle(self, request: web.Request) -> web.Response:
        method = request.match_info["method"]
        body = await request.json() if request.can_read_body else {}
        self.requests.append((method, body))

        if request.match_info["token"] != self.token:
            return web.json_response(
                {"ok": False, "error_code": 401, "description": "Unauthorized"}, status=401,
            )
        if method == "getMe":
            return self._ok(make_user(user_id=123456, first_name="Fake", username="fake_bot", is_bot=True))
        if method == "getUpdates":
            return self._ok(await self._get_updates(body))
        if method == "sendMessage":
            self.sent.append(body)
            self._next_message_id += 1
            return self._ok(make_message(
                message_id=self._next_message_id,
                chat_id=body["chat_id"],
                text=body["text"],
                sender=make_user(user_id=123456, first_name="Fake", is_bot=True),
            ))
        return web.json_response(
            {"ok": False, "error_code": 404, "description": "Not Found"}, status=404,
        )

    async def _get_updates(self, body: dict[str, Any]) -> list[dict[str, Any]]:
        offset = body.get("offset", 0)
        if not self.redeliver:
            self.updates = [u for u in self.updates if u["update_id"] >= offset]
        if not self.updates:
            self._changed.clear()
            hold = min(body.get("timeout", 0), self.max_hold)
            try:
                await asyncio.wait_for(self._changed.wait(), hold)
            except asyncio.TimeoutError:
                return []
        return list(self.updates)

    @staticmethod
    def _ok(result: Any) -> web.Response:
        return web.json_response({"ok": True, "result": result})


@pytest.fixture
async def fake_api():
    """Running FakeBotApi. Returns (base_url, api)."""
    api = FakeBotApi()
    app = web.Application()
    app.router.add_post("/bot{token}/{method}", api.handle)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    host, port = runner.addresses[0][:2]
    yield f"http://{host}:{port}", api
    await runner.cleanup()


@pytest.fixture
async def factory(fake_api):
    base_url, _ = fake_api
    async with BotFactory(api_url=base_url, request_timeout=2) as f:
        yield f
