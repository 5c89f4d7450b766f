"""
Tests for NetworkClient, EthereumClient and the chain registry.
"""

from unittest.mock import AsyncMock, patch

import pytest

from chainrpc.config import Settings
from chainrpc.core.strategies import ExecutionMetadata, ExecutionResult, FallbackStrategy, StrategyConfig
from chainrpc.errors import ConfigurationError
from chainrpc.networks import (
    ArbitrumClient,
    BaseClient,
    BNBClient,
    ClientFactory,
    EthereumClient,
    NetworkClient,
    OptimismClient,
    PolygonClient,
    client_from_settings,
    to_block_param,
    to_quantity,
)

URLS = ["https://rpc-1.example", "https://rpc-2.example"]


def ok_result(data):
    return ExecutionResult.succeeded(data, ExecutionMetadata(strategy="fallback"))


@pytest.fixture
def eth_client() -> EthereumClient:
    return EthereumClient(StrategyConfig(rpc_urls=URLS))


class TestNetworkClient:
    """Tests for the strategy-backed base client."""

    def test_exposes_strategy_and_urls(self):
        """Test accessors reflect the configuration."""
        client = NetworkClient(StrategyConfig(rpc_urls=URLS))

        assert isinstance(client.strategy, FallbackStrategy)
        assert client.strategy_name == "fallback"
        assert client.rpc_urls == URLS

    def test_requires_urls(self):
        """Test an empty URL list is rejected at construction."""
        with pytest.raises(ConfigurationError):
            NetworkClient(StrategyConfig(rpc_urls=[]))

    @pytest.mark.asyncio
    async def test_execute_delegates_to_strategy(self):
        """Test execute forwards method and params."""
        client = NetworkClient(StrategyConfig(rpc_urls=URLS))

        with patch.object(client.strategy, "execute", AsyncMock(return_value=ok_result("0x1"))) as execute:
            result = await client.execute("eth_chainId")

        assert result.data == "0x1"
        execute.assert_awaited_once_with("eth_chainId", [])

    @pytest.mark.asyncio
    async def test_update_strategy_rebuilds(self):
        """Test update_strategy replaces the strategy over the same URLs."""
        client = NetworkClient(StrategyConfig(rpc_urls=URLS))
        original = client.strategy

        await client.update_strategy("fallback")

        assert client.strategy is not original
        assert [c.url for c in client.strategy.rpc_clients] == URLS

    @pytest.mark.asyncio
    async def test_update_strategy_closes_replaced_clients(self):
        """Test the replaced strategy's HTTP connections are released."""
        client = NetworkClient(StrategyConfig(rpc_urls=URLS))
        old_http_clients = [c._get_client() for c in client.strategy.rpc_clients]

        await client.update_strategy("fallback")

        assert all(http_client.is_closed for http_client in old_http_clients)
        assert all(c._client is None for c in client.strategy.rpc_clients)

    @pytest.mark.asyncio
    async def test_update_strategy_unknown_keeps_current(self):
        """Test an unknown strategy type leaves the client unchanged and open."""
        client = NetworkClient(StrategyConfig(rpc_urls=URLS))
        original = client.strategy
        http_clients = [c._get_client() for c in original.rpc_clients]

        with pytest.raises(ConfigurationError):
            await client.update_strategy("quorum")

        assert client.strategy is original
        assert client.strategy_name == "fallback"
        assert not any(http_client.is_closed for http_client in http_clients)
        await client.aclose()

    @pytest.mark.asyncio
    async def test_aclose_closes_strategy_clients(self):
        """Test aclose releases every RPC client's connection pool."""
        client = NetworkClient(StrategyConfig(rpc_urls=URLS))
        http_clients = [c._get_client() for c in client.strategy.rpc_clients]

        await client.aclose()

        assert all(http_client.is_closed for http_client in http_clients)

    @pytest.mark.asyncio
    async def test_async_context_manager(self):
        """Test leaving the context closes the strategy."""
        client = EthereumClient(StrategyConfig(rpc_urls=URLS))

        with patch.object(client.strategy, "aclose", AsyncMock()) as aclose:
            async with client as entered:
                assert entered is client

        aclose.assert_awaited_once_with()


class TestEthereumClient:
    """Tests for typed Ethereum helpers."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "call, method, params",
        [
            (lambda c: c.chain_id(), "eth_chainId", []),
            (lambda c: c.block_number(), "eth_blockNumber", []),
            (lambda c: c.gas_price(), "eth_gasPrice", []),
            (lambda c: c.client_version(), "web3_clientVersion", []),
            (lambda c: c.net_version(), "net_version", []),
            (lambda c: c.get_balance("0xabc"), "eth_getBalance", ["0xabc", "latest"]),
            (lambda c: c.get_balance("0xabc", 16), "eth_getBalance", ["0xabc", "0x10"]),
            (lambda c: c.get_code("0xabc", "safe"), "eth_getCode", ["0xabc", "safe"]),
            (lambda c: c.get_block_by_number(1, True), "eth_getBlockByNumber", ["0x1", True]),
            (lambda c: c.get_block_by_hash("0xh"), "eth_getBlockByHash", ["0xh", False]),
            (lambda c: c.get_transaction_receipt("0xt"), "eth_getTransactionReceipt", ["0xt"]),
            (lambda c: c.estimate_gas({"to": "0x1"}), "eth_estimateGas", [{"to": "0x1"}]),
            (lambda c: c.get_logs({"address": "0x1"}), "eth_getLogs", [{"address": "0x1"}]),
            (lambda c: c.send_raw_transaction("0xsigned"), "eth_sendRawTransaction", ["0xsigned"]),
            (lambda c: c.get_storage_at("0xabc", "0x0", 7), "eth_getStorageAt", ["0xabc", "0x0", "0x7"]),
            (lambda c: c.get_proof("0xabc", ("0x0",)), "eth_getProof", ["0xabc", ["0x0"], "latest"]),
            (lambda c: c.create_access_list({"to": "0x1"}, "pending"),
             "eth_createAccessList", [{"to": "0x1"}, "pending"]),
            (lambda c: c.get_transaction_by_block_number_and_index(16, 2),
             "eth_getTransactionByBlockNumberAndIndex", ["0x10", "0x2"]),
            (lambda c: c.get_uncle_count_by_block_hash("0xh"), "eth_getUncleCountByBlockHash", ["0xh"]),
            (lambda c: c.new_block_filter(), "eth_newBlockFilter", []),
            (lambda c: c.get_filter_changes("0xf"), "eth_getFilterChanges", ["0xf"]),
            (lambda c: c.fee_history(4), "eth_feeHistory", ["0x4", "latest"]),
            (lambda c: c.fee_history(4, 100, [25, 75]), "eth_feeHistory", ["0x4", "0x64", [25, 75]]),
            (lambda c: c.max_priority_fee_per_gas(), "eth_maxPriorityFeePerGas", []),
            (lambda c: c.submit_work("0x1", "0x2", "0x3"), "eth_submitWork", ["0x1", "0x2", "0x3"]),
            (lambda c: c.txpool_status(), "txpool_status", []),
            (lambda c: c.debug_trace_transaction("0xt"), "debug_traceTransaction", ["0xt", {}]),
            (lambda c: c.debug_trace_call({"to": "0x1"}, 5, {"tracer": "callTracer"}),
             "debug_traceCall", [{"to": "0x1"}, "0x5", {"tracer": "callTracer"}]),
            (lambda c: c.debug_get_modified_accounts_by_number(1, 2),
             "debug_getModifiedAccountsByNumber", ["0x1", "0x2"]),
            (lambda c: c.trace_block(10), "trace_block", ["0xa"]),
            (lambda c: c.trace_call({"to": "0x1"}, ["vmTrace"], "latest"),
             "trace_call", [{"to": "0x1"}, ["vmTrace"], "latest"]),
            (lambda c: c.trace_replay_transaction("0xt"), "trace_replayTransaction", ["0xt", ["trace"]]),
            (lambda c: c.trace_filter({"fromBlock": "0x1"}), "trace_filter", [{"fromBlock": "0x1"}]),
            (lambda c: c.get_storage_at("0xabc", "0x0", 7), "eth_getStorageAt", ["0xabc", "0x0", "0x7"]),
            (lambda c: c.get_proof("0xabc", ("0x0",)), "eth_getProof", ["0xabc", ["0x0"], "latest"]),
            (lambda c: c.create_access_list({"to": "0x1"}, "pending"), "eth_createAccessList", [{"to": "0x1"}, "pending"]),
            (lambda c: c.get_transaction_by_block_number_and_index(16, 2),
             "eth_getTransactionByBlockNumberAndIndex", ["0x10", "0x2"]),
            (lambda c: c.get_uncle_count_by_block_hash("0xh"), "eth_getUncleCountByBlockHash", ["0xh"]),
            (lambda c: c.new_block_filter(), "eth_newBlockFilter", []),
            (lambda c: c.get_filter_changes("0xf"), "eth_getFilterChanges", ["0xf"]),
            (lambda c: c.fee_history(4), "eth_feeHistory", ["0x4", "latest"]),
            (lambda c: c.fee_history(4, 100, [25, 75]), "eth_feeHistory", ["0x4", "0x64", [25, 75]]),
            (lambda c: c.max_priority_fee_per_gas(), "eth_maxPriorityFeePerGas", []),
            (lambda c: c.submit_work("0x1", "0x2", "0x3"), "eth_submitWork", ["0x1", "0x2", "0x3"]),
            (lambda c: c.txpool_status(), "txpool_status", []),
            (lambda c: c.debug_trace_transaction("0xt"), "debug_traceTransaction", ["0xt", {}]),
            (lambda c: c.debug_trace_call({"to": "0x1"}, 5, {"tracer": "callTracer"}),
             "debug_traceCall", [{"to": "0x1"}, "0x5", {"tracer": "callTracer"}]),
            (lambda c: c.debug_get_modified_accounts_by_number(1, 2),
             "debug_getModifiedAccountsByNumber", ["0x1", "0x2"]),
            (lambda c: c.trace_block(10), "trace_block", ["0xa"]),
            (lambda c: c.trace_call({"to": "0x1"}, ["vmTrace"], "latest"), "trace_call", [{"to": "0x1"}, ["vmTrace"], "latest"]),
            (lambda c: c.trace_replay_transaction("0xt"), "trace_replayTransaction", ["0xt", ["trace"]]),
            (lambda c: c.trace_filter({"fromBlock": "0x1"}), "trace_filter", [{"fromBlock": "0x1"}]),
        ],
    )
    async def test_method_mapping(self, eth_client, call, method, params):
        """Test each helper issues the expected JSON-RPC method and params."""
        with patch.object(eth_client.strategy, "execute", AsyncMock(return_value=ok_result("0x0"))) as execute:
            result = await call(eth_client)

        assert result.success is True
        execute.assert_awaited_once_with(method, params)

    def test_block_param_encoding(self):
        """Test block numbers are hex-encoded and tags pass through."""
        assert to_block_param(0) == "0x0"
        assert to_block_param(255) == "0xff"
        assert to_block_param("finalized") == "finalized"

        with pytest.raises(ValueError):
            to_block_param(-1)
        with pytest.raises(TypeError):
            to_block_param(True)

    def test_quantity_encoding(self):
        """Test indexes and counts are hex-encoded and hex strings pass through."""
        assert to_quantity(2) == "0x2"
        assert to_quantity("0x2") == "0x2"

        with pytest.raises(ValueError):
            to_quantity(-1)


class TestChainClients:
    """Tests for chain-specific namespaces."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "client_cls, call, method, params",
        [
            (OptimismClient, lambda c: c.output_at_block(100), "optimism_outputAtBlock", ["0x64"]),
            (OptimismClient, lambda c: c.sync_status(), "optimism_syncStatus", []),
            (OptimismClient, lambda c: c.p2p_peers(), "opp2p_peers", []),
            (OptimismClient, lambda c: c.p2p_peers(True), "opp2p_peers", [True]),
            (OptimismClient, lambda c: c.p2p_block_peer("16Uiu2"), "opp2p_blockPeer", ["16Uiu2"]),
            (OptimismClient, lambda c: c.admin_sequencer_active(), "admin_sequencerActive", []),
            (BaseClient, lambda c: c.rollup_config(), "optimism_rollupConfig", []),
            (BaseClient, lambda c: c.get_balance("0xabc"), "eth_getBalance", ["0xabc", "latest"]),
            (PolygonClient, lambda c: c.bor_get_author(1), "bor_getAuthor", ["0x1"]),
            (PolygonClient, lambda c: c.bor_get_root_hash(1, 32), "bor_getRootHash", [1, 32]),
            (PolygonClient, lambda c: c.bor_get_signers_at_hash("0xh"), "bor_getSignersAtHash", ["0xh"]),
            (ArbitrumClient, lambda c: c.arbtrace_block(5), "arbtrace_block", ["0x5"]),
            (ArbitrumClient, lambda c: c.arbtrace_call({"to": "0x1"}),
             "arbtrace_call", [{"to": "0x1"}, ["trace"]]),
            (ArbitrumClient, lambda c: c.arbtrace_call_many([({"to": "0x1"}, ["trace"])], "latest"),
             "arbtrace_callMany", [[[{"to": "0x1"}, ["trace"]]], "latest"]),
            (BNBClient, lambda c: c.get_finalized_header(), "eth_getFinalizedHeader", [-2]),
            (BNBClient, lambda c: c.get_finalized_block(-3, True), "eth_getFinalizedBlock", [-3, True]),
            (BNBClient, lambda c: c.get_blob_sidecars(9), "eth_getBlobSidecars", ["0x9", True]),
            (BNBClient, lambda c: c.get_block_receipts("finalized"), "eth_getBlockReceipts", ["finalized"]),
            (BNBClient, lambda c: c.health(), "eth_health", []),
        ],
    )
    async def test_method_mapping(self, client_cls, call, method, params):
        """Test chain helpers issue their namespaced JSON-RPC methods."""
        client = client_cls(StrategyConfig(rpc_urls=URLS))

        with patch.object(client.strategy, "execute", AsyncMock(return_value=ok_result(None))) as execute:
            result = await call(client)

        assert result.success is True
        execute.assert_awaited_once_with(method, params)

    @pytest.mark.asyncio
    async def test_bnb_rejects_unknown_finality_quorum(self):
        """Test the validator quorum is checked before any request is sent."""
        client = BNBClient(StrategyConfig(rpc_urls=URLS))

        with patch.object(client.strategy, "execute", AsyncMock()) as execute:
            with pytest.raises(ValueError):
                await client.get_finalized_header(-4)

        execute.assert_not_awaited()

    def test_chain_clients_extend_ethereum_client(self):
        """Test every chain client keeps the standard Ethereum helpers."""
        for client_cls in (OptimismClient, BaseClient, PolygonClient, ArbitrumClient, BNBClient):
            assert issubclass(client_cls, EthereumClient)
        assert issubclass(BaseClient, OptimismClient)


class TestClientFactory:
    """Tests for the chain ID registry."""

    @pytest.mark.parametrize(
        "chain_id, client_cls",
        [
            (1, EthereumClient),
            (31337, EthereumClient),
            (11155111, EthereumClient),
            (10, OptimismClient),
            (8453, BaseClient),
            (56, BNBClient),
            (97, BNBClient),
            (137, PolygonClient),
            (42161, ArbitrumClient),
        ],
    )
    def test_supported_chains(self, chain_id, client_cls):
        """Test each chain ID builds its registered client."""
        client = ClientFactory.create_client(chain_id, StrategyConfig(rpc_urls=URLS))

        assert type(client) is client_cls
        assert client.rpc_urls == URLS

    def test_unsupported_chain(self):
        """Test unknown chain IDs are rejected."""
        with pytest.raises(ConfigurationError, match="Unsupported chain ID: 999999"):
            ClientFactory.create_client(999999, StrategyConfig(rpc_urls=URLS))

    def test_supported_chain_ids_sorted(self):
        """Test the registry listing."""
        chain_ids = ClientFactory.supported_chain_ids()

        assert chain_ids == sorted(chain_ids)
        assert 1 in chain_ids

    def test_client_from_settings(self):
        """Test a client can be built straight from settings."""
        settings = Settings(_env_file=None, rpc_urls=",".join(URLS), chain_id=8453)

        client = client_from_settings(settings)

        assert isinstance(client, BaseClient)
        assert client.rpc_urls == URLS
        assert client.strategy_name == "fallback"
