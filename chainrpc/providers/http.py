"""
JSON-RPC 2.0 over HTTP.
"""

from __future__ import annotations

import itertools
from typing import Any, Dict, Optional, Sequence

import httpx

from .base import RpcClient
from ..config import settings
from ..errors import RpcResponseError, RpcTransportError, error_message


class HttpRpcClient(RpcClient):
    """Single-endpoint JSON-RPC client backed by ``httpx.AsyncClient``."""

    def __init__(
        self,
        url: str,
        timeout_s: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(url)
        self.timeout_s = timeout_s if timeout_s is not None else settings.rpc_timeout_seconds
        self._headers = {"Content-Type": "application/json", **(headers or {})}
        self._transport = transport
        self._ids = itertools.count(1)
        self._request_id = 0
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def request_id(self) -> int:
        """Id of the most recent request (0 before the first call)."""
        return self._request_id

    def _next_id(self) -> int:
        self._request_id = next(self._ids)
        return self._request_id

    def _get_client(self) -> httpx.AsyncClient:
        if not self._client or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout_s,
                headers=self._headers,
                transport=self._transport,
            )
        return self._client

    async def call(self, method: str, params: Optional[Sequence[Any]] = None) -> Any:
        request = {
            "jsonrpc": "2.0",
            "id": self._next_id(),
            "method": method,
            "params": list(params) if params is not None else [],
        }

        try:
            response = await self._get_client().post(self.url, json=request)
        except httpx.HTTPError as exc:
            raise RpcTransportError(error_message(exc), url=self.url) from exc

        if not response.is_success:
            raise RpcTransportError(
                f"HTTP error: status {response.status_code}",
                url=self.url,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise RpcTransportError("Invalid JSON-RPC response", url=self.url) from exc

        if not isinstance(payload, dict):
            raise RpcTransportError("Invalid JSON-RPC response", url=self.url)

        if payload.get("error") is not None:
            raise RpcResponseError.from_payload(payload["error"], url=self.url)

        return payload.get("result")

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpRpcClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
