from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from .models import ExecutionResult


class RequestStrategy(ABC):
    """Base class for RPC request strategies."""

    name: str

    @abstractmethod
    async def execute(
        self,
        method: str,
        params: Optional[Sequence[Any]] = None,
    ) -> ExecutionResult[Any]:
        """Execute an RPC request with this strategy."""
        pass

    async def aclose(self) -> None:
        """Release resources held by the strategy's RPC clients."""
        pass

    def get_name(self) -> str:
        """Strategy tag used in result metadata and logs."""
        return self.name
