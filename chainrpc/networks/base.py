"""Base network client built on a request strategy."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from ..core.strategies import ExecutionResult, RequestStrategy, StrategyConfig, StrategyFactory


class NetworkClient:
    """Executes arbitrary RPC methods through the configured strategy.

    Network-specific clients subclass this and add typed helpers. The client
    owns its strategy's connections: close it with ``aclose()`` or use it as
    an async context manager.
    """

    def __init__(self, config: StrategyConfig) -> None:
        self._config = config
        self._strategy = StrategyFactory.create(config)
        self._rpc_urls = list(config.rpc_urls)

    async def execute(self, method: str, params: Optional[Sequence[Any]] = None) -> ExecutionResult[Any]:
        return await self._strategy.execute(method, params or [])

    @property
    def strategy(self) -> RequestStrategy:
        return self._strategy

    @property
    def strategy_name(self) -> str:
        return self._strategy.get_name()

    @property
    def rpc_urls(self) -> List[str]:
        return list(self._rpc_urls)

    async def update_strategy(self, strategy_type: str) -> None:
        """Rebuild the strategy over the same RPC URLs and close the old one.

        An unknown type raises ``ConfigurationError`` and leaves the current
        strategy in place.
        """

        config = self._config.model_copy(update={"type": strategy_type})
        replaced, self._strategy = self._strategy, StrategyFactory.create(config)
        self._config = config
        await replaced.aclose()

    async def aclose(self) -> None:
        await self._strategy.aclose()

    async def __aenter__(self) -> "NetworkClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
