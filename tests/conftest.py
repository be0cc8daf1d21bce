"""Shared fixtures for telepoll tests."""

from __future__ import annotations

import pytest

from telepoll.api.stream import UpdateStream
from telepoll.bot import Bot
from telepoll.models.config import BotConfig, HandlerKind
from telepoll.models.types import User

from tests.factories import make_user
from tests.mocks import RecordingHandler, ScriptedTransport

TEST_TOKEN = "123456:TEST-TOKEN"


def make_test_config(**overrides) -> BotConfig:
    """Build a BotConfig suitable for testing."""
    defaults = dict(
        token=TEST_TOKEN,
        api_url="http://127.0.0.1:9",
        poll_timeout=1,
        request_timeout=1,
        initial_offset=0,
        handler=HandlerKind.LOG,
        error_backoff=0,
    )
    defaults.update(overrides)
    return BotConfig(**defaults)


@pytest.fixture
def test_config():
    return make_test_config()


@pytest.fixture
def transport():
    return ScriptedTransport()


@pytest.fixture
async def stream(transport):
    """UpdateStream over the scripted transport, closed after the test."""
    s = UpdateStream(transport, poll_timeout=120)
    yield s
    await s.aclose()


@pytest.fixture
def bot(transport):
    """Bot wired to the scripted transport, skipping getMe."""
    me = User.from_dict(make_user(user_id=123456, first_name="Test", username="test_bot", is_bot=True))
    return Bot(transport, me)


@pytest.fixture
def handler():
    return RecordingHandler()
