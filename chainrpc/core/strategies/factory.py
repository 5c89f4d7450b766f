"""
Strategy Factory

Builds a request strategy, with one HTTP client per configured RPC URL.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ...config import Settings, settings as default_settings
from ...errors import ConfigurationError
from ...providers.http import HttpRpcClient
from .base import RequestStrategy
from .fallback import FallbackStrategy


class StrategyConfig(BaseModel):
    """Strategy type plus the ordered RPC URLs to build clients for."""

    type: str = Field(default="fallback", description="Request strategy type")
    rpc_urls: List[str] = Field(default_factory=list, description="Ordered RPC endpoint URLs")
    timeout_s: Optional[float] = Field(default=None, gt=0, description="Per-request transport timeout")
    attempt_timeout_s: Optional[float] = Field(default=None, gt=0, description="Per-attempt strategy timeout")

    @field_validator("rpc_urls")
    @classmethod
    def _strip_urls(cls, value: List[str]) -> List[str]:
        return [url.strip() for url in value if url and url.strip()]

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "StrategyConfig":
        config = config or default_settings
        return cls(
            type=config.rpc_strategy,
            rpc_urls=list(config.rpc_urls),
            timeout_s=config.rpc_timeout_seconds,
            attempt_timeout_s=config.rpc_attempt_timeout_seconds,
        )


class StrategyFactory:
    """Creates request strategies from a ``StrategyConfig``."""

    @staticmethod
    def create(config: StrategyConfig) -> RequestStrategy:
        if not config.rpc_urls:
            raise ConfigurationError("At least one RPC URL must be provided")

        rpc_clients = [HttpRpcClient(url, timeout_s=config.timeout_s) for url in config.rpc_urls]

        if config.type == "fallback":
            return FallbackStrategy(rpc_clients, attempt_timeout_seconds=config.attempt_timeout_s)

        raise ConfigurationError(f"Unknown strategy type: {config.type}")
