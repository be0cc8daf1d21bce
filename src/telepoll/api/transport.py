"""HTTP transport for the Bot API - one JSON POST per call, no retries."""

from __future__ import annotations

import json
import logging
import time
from typing import Any

import httpx

from telepoll.errors import ApiResponseError, CodecError, TransportError

log = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.telegram.org"


def encode_payload(payload: Any) -> bytes:
    """Serialize a request payload to a JSON body.

    Accepts None (sent as an empty object), a plain JSON-compatible value,
    or any object exposing ``to_payload()``.
    """
    if payload is None:
        payload = {}
    elif hasattr(payload, "to_payload"):
        payload = payload.to_payload()
    try:
        return json.dumps(payload).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise CodecError(f"request payload is not JSON serializable: {exc}") from exc


def unwrap_response(body: bytes) -> Any:
    """Parse a response body and unwrap ``{result}`` / ``{description}``."""
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise CodecError(f"response body is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise CodecError(f"unexpected response shape: {type(data).__name__}")
    if "result" in data:
        return data["result"]
    description = data.get("description")
    if isinstance(description, str):
        error_code = data.get("error_code")
        raise ApiResponseError(
            description, error_code if isinstance(error_code, int) else None,
        )
    raise CodecError("response carries neither 'result' nor 'description'")


class HttpBotTransport:
    """Calls Bot API methods at ``{api_url}/bot{token}/{endpoint}``.

    The ``httpx.AsyncClient`` is borrowed, not owned: several transports
    (one per bot) can share one connection pool, and whoever created the
    client closes it.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 10,
    ) -> None:
        self._client = client
        self._base_url = f"{api_url.rstrip('/')}/bot{token}/"
        self._timeout = timeout

    def _url(self, endpoint: str) -> str:
        return f"{self._base_url}{endpoint}"

    async def call(
        self,
        endpoint: str,
        payload: Any = None,
        timeout: float | None = None,
    ) -> Any:
        """Invoke ``endpoint`` once and return its decoded result."""
        body = encode_payload(payload)
        start = time.monotonic()

        try:
            resp = await self._client.post(
                self._url(endpoint),
                content=body,
                headers={"Content-Type": "application/json"},
                timeout=httpx.Timeout(timeout if timeout is not None else self._timeout),
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            # The URL embeds the token, so only the endpoint name is logged
            log.debug("%s failed: %s", endpoint, type(exc).__name__)
            raise TransportError(f"{endpoint}: {type(exc).__name__}: {exc}") from exc

        duration = int((time.monotonic() - start) * 1000)
        log.debug(
            "%s -> HTTP %d (%d bytes) in %dms",
            endpoint, resp.status_code, len(resp.content), duration,
        )
        return unwrap_response(resp.content)
