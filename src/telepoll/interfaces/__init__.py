"""Protocol interfaces for telepoll components."""

from telepoll.interfaces.handler import UpdateHandler
from telepoll.interfaces.transport import RpcTransport

__all__ = ["RpcTransport", "UpdateHandler"]
