"""Arbitrum One client with the ``arbtrace_`` namespace for pre-Nitro history."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..core.strategies import ExecutionResult
from .ethereum import BlockNumberOrTag, EthereumClient, to_block_param


class ArbitrumClient(EthereumClient):

    async def arbtrace_block(self, block: BlockNumberOrTag) -> ExecutionResult[List[Dict[str, Any]]]:
        return await self.execute("arbtrace_block", [to_block_param(block)])

    async def arbtrace_transaction(self, tx_hash: str) -> ExecutionResult[List[Dict[str, Any]]]:
        return await self.execute("arbtrace_transaction", [tx_hash])

    async def arbtrace_call(
        self,
        call_object: Dict[str, Any],
        trace_types: Sequence[str] = ("trace",),
        block: Optional[BlockNumberOrTag] = None,
    ) -> ExecutionResult[Dict[str, Any]]:
        params: List[Any] = [call_object, list(trace_types)]
        if block is not None:
            params.append(to_block_param(block))
        return await self.execute("arbtrace_call", params)

    async def arbtrace_call_many(
        self,
        calls: Sequence[Sequence[Any]],
        block: Optional[BlockNumberOrTag] = None,
    ) -> ExecutionResult[List[Dict[str, Any]]]:
        """Trace several ``[call_object, trace_types]`` pairs on top of each other."""
        params: List[Any] = [[list(call) for call in calls]]
        if block is not None:
            params.append(to_block_param(block))
        return await self.execute("arbtrace_callMany", params)
