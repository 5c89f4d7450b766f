"""Ethereum JSON-RPC client with typed helpers for the standard methods."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

from ..core.strategies import ExecutionResult
from .base import NetworkClient

BlockNumberOrTag = Union[int, str]


def to_block_param(block: BlockNumberOrTag) -> str:
    """Encode a block number as hex, passing tags ("latest", "safe", ...) through."""

    if isinstance(block, bool):
        raise TypeError("block must be an int or a block tag")
    if isinstance(block, int):
        if block < 0:
            raise ValueError("block number must be non-negative")
        return hex(block)
    return block


def to_quantity(value: Union[int, str]) -> str:
    """Hex-encode an integer quantity (index, count); strings pass through."""

    if isinstance(value, bool):
        raise TypeError("quantity must be an int or a hex string")
    if isinstance(value, int):
        if value < 0:
            raise ValueError("quantity must be non-negative")
        return hex(value)
    return value


def _with_block(params: List[Any], block: Optional[BlockNumberOrTag]) -> List[Any]:
    if block is not None:
        params.append(to_block_param(block))
    return params


class EthereumClient(NetworkClient):
    """Ethereum-compatible client; chain-specific clients extend it.

    Block arguments accept an ``int`` (hex-encoded on the wire) or a tag such
    as ``"latest"``, ``"safe"`` or ``"finalized"``. Optional block arguments
    are left off the request when not given so the node applies its default.
    """

    # web3

    async def client_version(self) -> ExecutionResult[str]:
        return await self.execute("web3_clientVersion")

    async def sha3(self, data: str) -> ExecutionResult[str]:
        """Keccak-256 of ``data`` (hex) as computed by the node."""
        return await self.execute("web3_sha3", [data])

    # net

    async def net_version(self) -> ExecutionResult[str]:
        return await self.execute("net_version")

    async def listening(self) -> ExecutionResult[bool]:
        return await self.execute("net_listening")

    async def peer_count(self) -> ExecutionResult[str]:
        return await self.execute("net_peerCount")

    # eth: chain state

    async def protocol_version(self) -> ExecutionResult[str]:
        return await self.execute("eth_protocolVersion")

    async def chain_id(self) -> ExecutionResult[str]:
        return await self.execute("eth_chainId")

    async def syncing(self) -> ExecutionResult[Union[bool, Dict[str, Any]]]:
        """``False`` when not syncing, otherwise the node's progress object."""
        return await self.execute("eth_syncing")

    async def accounts(self) -> ExecutionResult[List[str]]:
        return await self.execute("eth_accounts")

    async def coinbase(self) -> ExecutionResult[str]:
        return await self.execute("eth_coinbase")

    async def block_number(self) -> ExecutionResult[str]:
        return await self.execute("eth_blockNumber")

    # eth: blocks

    async def get_block_by_number(
        self, block: BlockNumberOrTag = "latest", full_transactions: bool = False
    ) -> ExecutionResult[Optional[Dict[str, Any]]]:
        return await self.execute("eth_getBlockByNumber", [to_block_param(block), full_transactions])

    async def get_block_by_hash(
        self, block_hash: str, full_transactions: bool = False
    ) -> ExecutionResult[Optional[Dict[str, Any]]]:
        return await self.execute("eth_getBlockByHash", [block_hash, full_transactions])

    async def get_block_transaction_count_by_number(
        self, block: BlockNumberOrTag = "latest"
    ) -> ExecutionResult[str]:
        return await self.execute("eth_getBlockTransactionCountByNumber", [to_block_param(block)])

    async def get_block_transaction_count_by_hash(self, block_hash: str) -> ExecutionResult[str]:
        return await self.execute("eth_getBlockTransactionCountByHash", [block_hash])

    async def get_uncle_count_by_block_number(self, block: BlockNumberOrTag = "latest") -> ExecutionResult[str]:
        return await self.execute("eth_getUncleCountByBlockNumber", [to_block_param(block)])

    async def get_uncle_count_by_block_hash(self, block_hash: str) -> ExecutionResult[str]:
        return await self.execute("eth_getUncleCountByBlockHash", [block_hash])

    async def get_uncle_by_block_number_and_index(
        self, block: BlockNumberOrTag, index: Union[int, str]
    ) -> ExecutionResult[Optional[Dict[str, Any]]]:
        return await self.execute(
            "eth_getUncleByBlockNumberAndIndex", [to_block_param(block), to_quantity(index)]
        )

    async def get_uncle_by_block_hash_and_index(
        self, block_hash: str, index: Union[int, str]
    ) -> ExecutionResult[Optional[Dict[str, Any]]]:
        return await self.execute("eth_getUncleByBlockHashAndIndex", [block_hash, to_quantity(index)])

    # eth: accounts and state

    async def get_balance(self, address: str, block: BlockNumberOrTag = "latest") -> ExecutionResult[str]:
        return await self.execute("eth_getBalance", [address, to_block_param(block)])

    async def get_code(self, address: str, block: BlockNumberOrTag = "latest") -> ExecutionResult[str]:
        return await self.execute("eth_getCode", [address, to_block_param(block)])

    async def get_storage_at(
        self, address: str, position: str, block: BlockNumberOrTag = "latest"
    ) -> ExecutionResult[str]:
        return await self.execute("eth_getStorageAt", [address, position, to_block_param(block)])

    async def get_transaction_count(
        self, address: str, block: BlockNumberOrTag = "latest"
    ) -> ExecutionResult[str]:
        return await self.execute("eth_getTransactionCount", [address, to_block_param(block)])

    async def get_proof(
        self, address: str, storage_keys: Sequence[str], block: BlockNumberOrTag = "latest"
    ) -> ExecutionResult[Dict[str, Any]]:
        """EIP-1186 account and storage proof."""
        return await self.execute("eth_getProof", [address, list(storage_keys), to_block_param(block)])

    # eth: transactions

    async def send_raw_transaction(self, signed_tx: str) -> ExecutionResult[str]:
        return await self.execute("eth_sendRawTransaction", [signed_tx])

    async def send_transaction(self, tx: Dict[str, Any]) -> ExecutionResult[str]:
        """Node-signed transaction; only works against nodes holding unlocked accounts."""
        return await self.execute("eth_sendTransaction", [tx])

    async def call(
        self, call_object: Dict[str, Any], block: BlockNumberOrTag = "latest"
    ) -> ExecutionResult[str]:
        return await self.execute("eth_call", [call_object, to_block_param(block)])

    async def estimate_gas(
        self, call_object: Dict[str, Any], block: Optional[BlockNumberOrTag] = None
    ) -> ExecutionResult[str]:
        return await self.execute("eth_estimateGas", _with_block([call_object], block))

    async def create_access_list(
        self, call_object: Dict[str, Any], block: Optional[BlockNumberOrTag] = None
    ) -> ExecutionResult[Dict[str, Any]]:
        return await self.execute("eth_createAccessList", _with_block([call_object], block))

    async def get_transaction_by_hash(self, tx_hash: str) -> ExecutionResult[Optional[Dict[str, Any]]]:
        return await self.execute("eth_getTransactionByHash", [tx_hash])

    async def get_transaction_by_block_hash_and_index(
        self, block_hash: str, index: Union[int, str]
    ) -> ExecutionResult[Optional[Dict[str, Any]]]:
        return await self.execute("eth_getTransactionByBlockHashAndIndex", [block_hash, to_quantity(index)])

    async def get_transaction_by_block_number_and_index(
        self, block: BlockNumberOrTag, index: Union[int, str]
    ) -> ExecutionResult[Optional[Dict[str, Any]]]:
        return await self.execute(
            "eth_getTransactionByBlockNumberAndIndex", [to_block_param(block), to_quantity(index)]
        )

    async def get_transaction_receipt(self, tx_hash: str) -> ExecutionResult[Optional[Dict[str, Any]]]:
        return await self.execute("eth_getTransactionReceipt", [tx_hash])

    # eth: logs and filters

    async def get_logs(self, log_filter: Dict[str, Any]) -> ExecutionResult[List[Dict[str, Any]]]:
        return await self.execute("eth_getLogs", [log_filter])

    async def new_filter(self, log_filter: Dict[str, Any]) -> ExecutionResult[str]:
        return await self.execute("eth_newFilter", [log_filter])

    async def new_block_filter(self) -> ExecutionResult[str]:
        return await self.execute("eth_newBlockFilter")

    async def new_pending_transaction_filter(self) -> ExecutionResult[str]:
        return await self.execute("eth_newPendingTransactionFilter")

    async def uninstall_filter(self, filter_id: str) -> ExecutionResult[bool]:
        return await self.execute("eth_uninstallFilter", [filter_id])

    async def get_filter_changes(self, filter_id: str) -> ExecutionResult[List[Any]]:
        return await self.execute("eth_getFilterChanges", [filter_id])

    async def get_filter_logs(self, filter_id: str) -> ExecutionResult[List[Dict[str, Any]]]:
        return await self.execute("eth_getFilterLogs", [filter_id])

    # eth: fees

    async def gas_price(self) -> ExecutionResult[str]:
        return await self.execute("eth_gasPrice")

    async def max_priority_fee_per_gas(self) -> ExecutionResult[str]:
        return await self.execute("eth_maxPriorityFeePerGas")

    async def fee_history(
        self,
        block_count: Union[int, str],
        newest_block: BlockNumberOrTag = "latest",
        reward_percentiles: Optional[Sequence[float]] = None,
    ) -> ExecutionResult[Dict[str, Any]]:
        params: List[Any] = [to_quantity(block_count), to_block_param(newest_block)]
        if reward_percentiles is not None:
            params.append(list(reward_percentiles))
        return await self.execute("eth_feeHistory", params)

    # eth: mining (proof-of-work era, still served by dev nodes)

    async def mining(self) -> ExecutionResult[bool]:
        return await self.execute("eth_mining")

    async def hashrate(self) -> ExecutionResult[str]:
        return await self.execute("eth_hashrate")

    async def get_work(self) -> ExecutionResult[List[str]]:
        return await self.execute("eth_getWork")

    async def submit_work(self, nonce: str, pow_hash: str, mix_digest: str) -> ExecutionResult[bool]:
        return await self.execute("eth_submitWork", [nonce, pow_hash, mix_digest])

    async def submit_hashrate(self, hashrate: str, client_id: str) -> ExecutionResult[bool]:
        return await self.execute("eth_submitHashrate", [hashrate, client_id])

    # txpool

    async def txpool_status(self) -> ExecutionResult[Dict[str, str]]:
        return await self.execute("txpool_status")

    async def txpool_content(self) -> ExecutionResult[Dict[str, Any]]:
        return await self.execute("txpool_content")

    async def txpool_inspect(self) -> ExecutionResult[Dict[str, Any]]:
        return await self.execute("txpool_inspect")

    # debug

    async def debug_trace_transaction(
        self, tx_hash: str, options: Optional[Dict[str, Any]] = None
    ) -> ExecutionResult[Any]:
        return await self.execute("debug_traceTransaction", [tx_hash, options or {}])

    async def debug_trace_call(
        self,
        call_object: Dict[str, Any],
        block: BlockNumberOrTag = "latest",
        options: Optional[Dict[str, Any]] = None,
    ) -> ExecutionResult[Any]:
        return await self.execute("debug_traceCall", [call_object, to_block_param(block), options or {}])

    async def debug_trace_block_by_number(
        self, block: BlockNumberOrTag, options: Optional[Dict[str, Any]] = None
    ) -> ExecutionResult[List[Any]]:
        return await self.execute("debug_traceBlockByNumber", [to_block_param(block), options or {}])

    async def debug_trace_block_by_hash(
        self, block_hash: str, options: Optional[Dict[str, Any]] = None
    ) -> ExecutionResult[List[Any]]:
        return await self.execute("debug_traceBlockByHash", [block_hash, options or {}])

    async def debug_storage_range_at(
        self, block_hash: str, tx_index: int, address: str, start_key: str, max_results: int
    ) -> ExecutionResult[Dict[str, Any]]:
        return await self.execute(
            "debug_storageRangeAt", [block_hash, tx_index, address, start_key, max_results]
        )

    async def debug_account_range(
        self, block: BlockNumberOrTag, start: str, max_results: int
    ) -> ExecutionResult[Dict[str, Any]]:
        return await self.execute("debug_accountRange", [to_block_param(block), start, max_results])

    async def debug_get_modified_accounts_by_number(
        self, start_block: BlockNumberOrTag, end_block: Optional[BlockNumberOrTag] = None
    ) -> ExecutionResult[List[str]]:
        return await self.execute(
            "debug_getModifiedAccountsByNumber", _with_block([to_block_param(start_block)], end_block)
        )

    async def debug_get_modified_accounts_by_hash(
        self, start_hash: str, end_hash: Optional[str] = None
    ) -> ExecutionResult[List[str]]:
        params: List[Any] = [start_hash]
        if end_hash is not None:
            params.append(end_hash)
        return await self.execute("debug_getModifiedAccountsByHash", params)

    # trace (Parity/OpenEthereum style, served by Erigon, Nethermind, Reth)

    async def trace_block(self, block: BlockNumberOrTag) -> ExecutionResult[List[Dict[str, Any]]]:
        return await self.execute("trace_block", [to_block_param(block)])

    async def trace_transaction(self, tx_hash: str) -> ExecutionResult[List[Dict[str, Any]]]:
        return await self.execute("trace_transaction", [tx_hash])

    async def trace_call(
        self,
        call_object: Dict[str, Any],
        trace_types: Sequence[str] = ("trace",),
        block: Optional[BlockNumberOrTag] = None,
    ) -> ExecutionResult[Dict[str, Any]]:
        return await self.execute("trace_call", _with_block([call_object, list(trace_types)], block))

    async def trace_raw_transaction(
        self, signed_tx: str, trace_types: Sequence[str] = ("trace",)
    ) -> ExecutionResult[Dict[str, Any]]:
        return await self.execute("trace_rawTransaction", [signed_tx, list(trace_types)])

    async def trace_replay_transaction(
        self, tx_hash: str, trace_types: Sequence[str] = ("trace",)
    ) -> ExecutionResult[Dict[str, Any]]:
        return await self.execute("trace_replayTransaction", [tx_hash, list(trace_types)])

    async def trace_replay_block_transactions(
        self, block: BlockNumberOrTag, trace_types: Sequence[str] = ("trace",)
    ) -> ExecutionResult[List[Dict[str, Any]]]:
        return await self.execute("trace_replayBlockTransactions", [to_block_param(block), list(trace_types)])

    async def trace_filter(self, trace_filter: Dict[str, Any]) -> ExecutionResult[List[Dict[str, Any]]]:
        return await self.execute("trace_filter", [trace_filter])
