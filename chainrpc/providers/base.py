from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence


class RpcClient(ABC):
    """Base JSON-RPC client interface.

    Strategies depend only on ``url`` and ``call``; any transport (HTTP,
    WebSocket, in-memory double) can be substituted.
    """

    def __init__(self, url: str) -> None:
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    @abstractmethod
    async def call(self, method: str, params: Optional[Sequence[Any]] = None) -> Any:
        """Perform one JSON-RPC call and return its result, raising on failure"""
        pass

    async def ready(self) -> bool:
        """Check if the client is ready to serve requests"""
        return bool(self._url)

    async def health_check(self) -> Dict[str, Any]:
        """Return endpoint health status"""
        if not await self.ready():
            return {"status": "unavailable", "reason": "RPC URL not configured"}

        try:
            result = await self.call("eth_chainId", [])
            return {"status": "healthy", "chainId": result}
        except Exception as exc:
            return {"status": "error", "reason": str(exc)}

    async def aclose(self) -> None:
        """Release any transport resources held by the client"""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._url!r})"
