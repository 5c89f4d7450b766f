"""Chain ID → network client registry."""

from __future__ import annotations

from typing import Dict, List, Optional, Type

from ..config import Settings, settings as default_settings
from ..core.strategies import StrategyConfig
from ..errors import ConfigurationError
from .base import NetworkClient
from .arbitrum import ArbitrumClient
from .bnb import BNBClient
from .ethereum import EthereumClient
from .optimism import BaseClient, OptimismClient
from .polygon import PolygonClient

CHAIN_REGISTRY: Dict[int, Type[NetworkClient]] = {
    1: EthereumClient,         # Ethereum
    10: OptimismClient,        # OP Mainnet
    56: BNBClient,             # BNB Smart Chain
    97: BNBClient,             # BNB Smart Chain testnet
    137: PolygonClient,        # Polygon PoS
    8453: BaseClient,          # Base
    31337: EthereumClient,     # Hardhat / Anvil
    42161: ArbitrumClient,     # Arbitrum One
    11155111: EthereumClient,  # Sepolia
}


class ClientFactory:
    """Instantiates the network client registered for a chain ID."""

    @staticmethod
    def create_client(chain_id: int, config: StrategyConfig) -> NetworkClient:
        client_cls = CHAIN_REGISTRY.get(chain_id)
        if client_cls is None:
            raise ConfigurationError(f"Unsupported chain ID: {chain_id}")
        return client_cls(config)

    @staticmethod
    def supported_chain_ids() -> List[int]:
        return sorted(CHAIN_REGISTRY)


def client_from_settings(config: Optional[Settings] = None) -> NetworkClient:
    """Build the network client for ``settings.chain_id`` over ``settings.rpc_urls``."""

    config = config or default_settings
    return ClientFactory.create_client(config.chain_id, StrategyConfig.from_settings(config))


__all__ = [
    "CHAIN_REGISTRY",
    "ClientFactory",
    "client_from_settings",
]
