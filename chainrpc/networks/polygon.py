"""Polygon PoS client with the Bor consensus namespace."""

from __future__ import annotations

from typing import Any, Dict, List

from ..core.strategies import ExecutionResult
from .ethereum import BlockNumberOrTag, EthereumClient, to_block_param


class PolygonClient(EthereumClient):

    async def bor_get_author(self, block: BlockNumberOrTag = "latest") -> ExecutionResult[str]:
        """Address of the validator that produced ``block``."""
        return await self.execute("bor_getAuthor", [to_block_param(block)])

    async def bor_get_current_proposer(self) -> ExecutionResult[str]:
        return await self.execute("bor_getCurrentProposer")

    async def bor_get_current_validators(self) -> ExecutionResult[List[Dict[str, Any]]]:
        return await self.execute("bor_getCurrentValidators")

    async def bor_get_root_hash(self, start_block: int, end_block: int) -> ExecutionResult[str]:
        """Checkpoint root hash over ``[start_block, end_block]``; plain integers on the wire."""
        return await self.execute("bor_getRootHash", [start_block, end_block])

    async def bor_get_signers(self, block: BlockNumberOrTag = "latest") -> ExecutionResult[List[str]]:
        return await self.execute("bor_getSigners", [to_block_param(block)])

    async def bor_get_signers_at_hash(self, block_hash: str) -> ExecutionResult[List[str]]:
        return await self.execute("bor_getSignersAtHash", [block_hash])

    async def bor_get_snapshot(self, block: BlockNumberOrTag = "latest") -> ExecutionResult[Dict[str, Any]]:
        return await self.execute("bor_getSnapshot", [to_block_param(block)])
