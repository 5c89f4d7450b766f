"""
Error Types

Errors raised while configuring strategies or performing a single RPC call.
Per-call errors are captured by the strategies and never escape ``execute``;
configuration errors are raised immediately.
"""

from typing import Any, Optional


class ChainRpcError(Exception):
    """Base class for chainrpc errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(ChainRpcError):
    """
    Invalid strategy or client configuration.

    Raised for:
    - Empty RPC client or URL lists
    - Unknown strategy types
    - Unsupported chain IDs
    """


class RpcClientError(ChainRpcError):
    """A single JSON-RPC call against one endpoint failed."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class RpcTransportError(RpcClientError):
    """Connection failure, timeout, bad HTTP status or unparseable body."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, url=url)
        self.status_code = status_code


class RpcResponseError(RpcClientError):
    """
    The node answered with a JSON-RPC error object.

    ``str(error)`` is the node's ``error.message`` verbatim.
    """

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Any = None,
        url: Optional[str] = None,
    ):
        super().__init__(message, url=url)
        self.code = code
        self.data = data

    @classmethod
    def from_payload(cls, error: Any, url: Optional[str] = None) -> "RpcResponseError":
        if isinstance(error, dict):
            message = error.get("message")
            return cls(
                str(message) if message is not None else "Unknown RPC error",
                code=error.get("code"),
                data=error.get("data"),
                url=url,
            )
        return cls(str(error), url=url)


def error_message(error: BaseException) -> str:
    """Human-readable message for an attempt failure."""
    message = str(error)
    return message if message else type(error).__name__
