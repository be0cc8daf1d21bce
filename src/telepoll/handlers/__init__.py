"""Update handlers the runner can dispatch to."""

from telepoll.handlers.echo import EchoHandler
from telepoll.handlers.logger import LoggingHandler

__all__ = ["EchoHandler", "LoggingHandler"]
