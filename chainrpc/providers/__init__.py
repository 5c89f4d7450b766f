from .base import RpcClient
from .http import HttpRpcClient

__all__ = [
    "RpcClient",
    "HttpRpcClient",
]
