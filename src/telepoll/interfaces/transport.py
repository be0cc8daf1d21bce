"""RpcTransport protocol - one named call against the Bot API."""

from __future__ import annotations

from typing import Any, Protocol


class RpcTransport(Protocol):
    """Issues a single remote call and returns the decoded ``result``."""

    async def call(
        self,
        endpoint: str,
        payload: Any = None,
        timeout: float | None = None,
    ) -> Any:
        """POST ``payload`` as JSON to ``endpoint``.

        Raises TransportError, CodecError or ApiResponseError.
        """
        ...
