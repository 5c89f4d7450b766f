"""
Fallback Strategy

Tries each configured RPC client in order and stops at the first success.
Every attempt, successful or not, is recorded in the result metadata.
"""

import asyncio
import logging
import time
from typing import Any, Optional, Sequence, Tuple

from ...errors import ConfigurationError, RpcTransportError, error_message
from ...providers.base import RpcClient
from .base import RequestStrategy
from .models import AttemptRecord, ExecutionMetadata, ExecutionResult


class FallbackStrategy(RequestStrategy):
    """
    Sequential first-success-wins strategy.

    Client N+1 is only contacted once client N has settled. Failed attempts
    are captured as records and never raised; exhausting every client returns
    a failed ``ExecutionResult`` rather than raising.
    """

    name = "fallback"

    def __init__(
        self,
        rpc_clients: Sequence[RpcClient],
        attempt_timeout_seconds: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ):
        if not rpc_clients:
            raise ConfigurationError("At least one RPC client must be provided")
        self._rpc_clients: Tuple[RpcClient, ...] = tuple(rpc_clients)
        self.attempt_timeout_seconds = attempt_timeout_seconds
        self.logger = logger or logging.getLogger(__name__)

    @property
    def rpc_clients(self) -> Tuple[RpcClient, ...]:
        return self._rpc_clients

    async def aclose(self) -> None:
        """Close every client, even if an earlier close raised."""
        errors = []
        for rpc_client in self._rpc_clients:
            try:
                await rpc_client.aclose()
            except Exception as e:
                self.logger.warning(f"Failed to close {rpc_client!r}: {error_message(e)}")
                errors.append(e)
        if errors:
            raise errors[0]

    async def execute(
        self,
        method: str,
        params: Optional[Sequence[Any]] = None,
    ) -> ExecutionResult[Any]:
        params = list(params) if params is not None else []
        metadata = ExecutionMetadata(strategy=self.name, timestamp=int(time.time() * 1000))

        for rpc_client in self._rpc_clients:
            record = await self._attempt(rpc_client, method, params)
            metadata.responses.append(record)

            if record.ok:
                if len(metadata.responses) > 1:
                    self.logger.info(
                        f"{method} succeeded on {record.url} after "
                        f"{len(metadata.responses) - 1} failed attempt(s)"
                    )
                return ExecutionResult.succeeded(record.data, metadata)

            self.logger.warning(
                f"{method} failed on {record.url} after {record.response_time:.1f}ms: {record.error}"
            )

        self.logger.error(f"All {len(self._rpc_clients)} RPC clients failed for {method}")
        return ExecutionResult.failed(metadata)

    async def _attempt(self, rpc_client: RpcClient, method: str, params: list) -> AttemptRecord:
        """Run one call and turn its outcome into a record.

        Cancellation is not caught: it propagates to the caller.
        """
        started = time.perf_counter()
        try:
            data = await self._call(rpc_client, method, params)
        except Exception as e:
            return AttemptRecord.failed(rpc_client.url, error_message(e), self._elapsed_ms(started))

        return AttemptRecord.succeeded(rpc_client.url, data, self._elapsed_ms(started))

    async def _call(self, rpc_client: RpcClient, method: str, params: list) -> Any:
        if self.attempt_timeout_seconds is None:
            return await rpc_client.call(method, params)

        try:
            return await asyncio.wait_for(
                rpc_client.call(method, params),
                timeout=self.attempt_timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise RpcTransportError(
                f"Attempt timed out after {self.attempt_timeout_seconds}s",
                url=rpc_client.url,
            ) from exc

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        return max((time.perf_counter() - started) * 1000.0, 0.0)
