"""
chainrpc

Resilient JSON-RPC access to blockchain nodes: try an ordered list of
endpoints until one succeeds and keep a full audit trail of every attempt.
"""

from .core.strategies import (
    AttemptError,
    AttemptRecord,
    AttemptStatus,
    ExecutionMetadata,
    ExecutionResult,
    FallbackStrategy,
    RequestStrategy,
    StrategyConfig,
    StrategyFactory,
)
from .errors import (
    ChainRpcError,
    ConfigurationError,
    RpcClientError,
    RpcResponseError,
    RpcTransportError,
)
from .networks import (
    ArbitrumClient,
    BaseClient,
    BNBClient,
    ClientFactory,
    EthereumClient,
    NetworkClient,
    OptimismClient,
    PolygonClient,
    client_from_settings,
)
from .logging_config import setup_logging
from .providers import HttpRpcClient, RpcClient

__all__ = [
    # Clients
    "RpcClient",
    "HttpRpcClient",
    "NetworkClient",
    "EthereumClient",
    "OptimismClient",
    "BaseClient",
    "PolygonClient",
    "ArbitrumClient",
    "BNBClient",
    "ClientFactory",
    "client_from_settings",
    # Strategies
    "RequestStrategy",
    "FallbackStrategy",
    "StrategyConfig",
    "StrategyFactory",
    # Results
    "AttemptError",
    "AttemptRecord",
    "AttemptStatus",
    "ExecutionMetadata",
    "ExecutionResult",
    # Errors
    "ChainRpcError",
    "ConfigurationError",
    "RpcClientError",
    "RpcResponseError",
    "RpcTransportError",
    # Logging
    "setup_logging",
]
