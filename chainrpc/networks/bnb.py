"""BNB Smart Chain client (mainnet and testnet) with fast-finality and blob extensions."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..core.strategies import ExecutionResult
from .ethereum import BlockNumberOrTag, EthereumClient, to_block_param

# Validator quorum for fast finality: -1 = 1/2, -2 = 2/3, -3 = 3/4 of the set.
FINALITY_QUORUMS = (-1, -2, -3)


def _check_quorum(verified_validator_num: int) -> int:
    if verified_validator_num not in FINALITY_QUORUMS:
        raise ValueError(f"verified_validator_num must be one of {FINALITY_QUORUMS}")
    return verified_validator_num


class BNBClient(EthereumClient):

    async def get_header_by_number(self, block: BlockNumberOrTag = "latest") -> ExecutionResult[Optional[Dict[str, Any]]]:
        return await self.execute("eth_getHeaderByNumber", [to_block_param(block)])

    async def get_finalized_header(self, verified_validator_num: int = -2) -> ExecutionResult[Optional[Dict[str, Any]]]:
        return await self.execute("eth_getFinalizedHeader", [_check_quorum(verified_validator_num)])

    async def get_finalized_block(
        self, verified_validator_num: int = -2, full_transactions: bool = False
    ) -> ExecutionResult[Optional[Dict[str, Any]]]:
        return await self.execute(
            "eth_getFinalizedBlock", [_check_quorum(verified_validator_num), full_transactions]
        )

    async def new_finalized_header_filter(self) -> ExecutionResult[str]:
        return await self.execute("eth_newFinalizedHeaderFilter")

    async def get_block_receipts(self, block: BlockNumberOrTag = "latest") -> ExecutionResult[List[Dict[str, Any]]]:
        return await self.execute("eth_getBlockReceipts", [to_block_param(block)])

    async def get_blob_sidecars(
        self, block: BlockNumberOrTag = "latest", full_blob: bool = True
    ) -> ExecutionResult[Optional[List[Dict[str, Any]]]]:
        return await self.execute("eth_getBlobSidecars", [to_block_param(block), full_blob])

    async def get_blob_sidecar_by_tx_hash(
        self, tx_hash: str, full_blob: bool = True
    ) -> ExecutionResult[Optional[Dict[str, Any]]]:
        return await self.execute("eth_getBlobSidecarByTxHash", [tx_hash, full_blob])

    async def health(self) -> ExecutionResult[Dict[str, Any]]:
        return await self.execute("eth_health")

    async def get_transactions_by_block_number(
        self, block: BlockNumberOrTag = "latest"
    ) -> ExecutionResult[List[Dict[str, Any]]]:
        return await self.execute("eth_getTransactionsByBlockNumber", [to_block_param(block)])

    async def get_transaction_data_and_receipt(self, tx_hash: str) -> ExecutionResult[Optional[Dict[str, Any]]]:
        return await self.execute("eth_getTransactionDataAndReceipt", [tx_hash])
