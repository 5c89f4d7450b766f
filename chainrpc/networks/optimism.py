"""OP Stack clients: rollup node (``optimism_``), p2p (``opp2p_``) and sequencer admin."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..core.strategies import ExecutionResult
from .ethereum import BlockNumberOrTag, EthereumClient, to_block_param


class OptimismClient(EthereumClient):
    """OP Mainnet. The rollup-node namespaces are served by op-node, not op-geth,
    so point these clients at a rollup node URL when using them."""

    # optimism

    async def output_at_block(self, block: BlockNumberOrTag) -> ExecutionResult[Dict[str, Any]]:
        return await self.execute("optimism_outputAtBlock", [to_block_param(block)])

    async def sync_status(self) -> ExecutionResult[Dict[str, Any]]:
        return await self.execute("optimism_syncStatus")

    async def rollup_config(self) -> ExecutionResult[Dict[str, Any]]:
        return await self.execute("optimism_rollupConfig")

    async def optimism_version(self) -> ExecutionResult[str]:
        return await self.execute("optimism_version")

    # opp2p

    async def p2p_self(self) -> ExecutionResult[Dict[str, Any]]:
        return await self.execute("opp2p_self")

    async def p2p_peers(self, verbose: Optional[bool] = None) -> ExecutionResult[Dict[str, Any]]:
        return await self.execute("opp2p_peers", [] if verbose is None else [verbose])

    async def p2p_peer_stats(self) -> ExecutionResult[Dict[str, Any]]:
        return await self.execute("opp2p_peerStats")

    async def p2p_discovery_table(self) -> ExecutionResult[List[str]]:
        return await self.execute("opp2p_discoveryTable")

    async def p2p_block_peer(self, peer_id: str) -> ExecutionResult[None]:
        return await self.execute("opp2p_blockPeer", [peer_id])

    async def p2p_unblock_peer(self, peer_id: str) -> ExecutionResult[None]:
        return await self.execute("opp2p_unblockPeer", [peer_id])

    async def p2p_list_blocked_peers(self) -> ExecutionResult[List[str]]:
        return await self.execute("opp2p_listBlockedPeers")

    async def p2p_block_addr(self, address: str) -> ExecutionResult[None]:
        return await self.execute("opp2p_blockAddr", [address])

    async def p2p_unblock_addr(self, address: str) -> ExecutionResult[None]:
        return await self.execute("opp2p_unblockAddr", [address])

    async def p2p_list_blocked_addrs(self) -> ExecutionResult[List[str]]:
        return await self.execute("opp2p_listBlockedAddrs")

    async def p2p_block_subnet(self, subnet: str) -> ExecutionResult[None]:
        return await self.execute("opp2p_blockSubnet", [subnet])

    async def p2p_unblock_subnet(self, subnet: str) -> ExecutionResult[None]:
        return await self.execute("opp2p_unblockSubnet", [subnet])

    async def p2p_list_blocked_subnets(self) -> ExecutionResult[List[str]]:
        return await self.execute("opp2p_listBlockedSubnets")

    async def p2p_protect_peer(self, peer_id: str) -> ExecutionResult[None]:
        return await self.execute("opp2p_protectPeer", [peer_id])

    async def p2p_unprotect_peer(self, peer_id: str) -> ExecutionResult[None]:
        return await self.execute("opp2p_unprotectPeer", [peer_id])

    async def p2p_connect_peer(self, multiaddr: str) -> ExecutionResult[None]:
        return await self.execute("opp2p_connectPeer", [multiaddr])

    async def p2p_disconnect_peer(self, peer_id: str) -> ExecutionResult[None]:
        return await self.execute("opp2p_disconnectPeer", [peer_id])

    # admin (sequencer)

    async def admin_reset_derivation_pipeline(self) -> ExecutionResult[None]:
        return await self.execute("admin_resetDerivationPipeline")

    async def admin_start_sequencer(self, unsafe_head_hash: Optional[str] = None) -> ExecutionResult[None]:
        return await self.execute("admin_startSequencer", [] if unsafe_head_hash is None else [unsafe_head_hash])

    async def admin_stop_sequencer(self) -> ExecutionResult[str]:
        return await self.execute("admin_stopSequencer")

    async def admin_sequencer_active(self) -> ExecutionResult[bool]:
        return await self.execute("admin_sequencerActive")


class BaseClient(OptimismClient):
    """Base mainnet, an OP Stack chain with the same rollup node API."""
