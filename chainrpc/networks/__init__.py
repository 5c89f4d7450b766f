from .base import NetworkClient
from .ethereum import EthereumClient, to_block_param, to_quantity
from .optimism import BaseClient, OptimismClient
from .polygon import PolygonClient
from .arbitrum import ArbitrumClient
from .bnb import BNBClient
from .registry import CHAIN_REGISTRY, ClientFactory, client_from_settings

__all__ = [
    "NetworkClient",
    "EthereumClient",
    "OptimismClient",
    "BaseClient",
    "PolygonClient",
    "ArbitrumClient",
    "BNBClient",
    "to_block_param",
    "to_quantity",
    "CHAIN_REGISTRY",
    "ClientFactory",
    "client_from_settings",
]
