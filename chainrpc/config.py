from pathlib import Path
from typing import Annotated, Any, List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # RPC Endpoints
    rpc_urls: Annotated[List[str], NoDecode] = Field(
        default_factory=list,
        description="Ordered RPC endpoint URLs (comma separated in the environment)",
        validation_alias=AliasChoices("rpc_urls", "eth_rpc_urls"),
    )
    rpc_strategy: str = Field(default="fallback", description="Request strategy used for RPC calls")
    chain_id: int = Field(default=1, description="Chain ID used when building a network client")

    # Timeouts
    rpc_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Transport timeout applied to each JSON-RPC HTTP request",
    )
    rpc_attempt_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Upper bound for a single strategy attempt (unset means no bound)",
    )

    @field_validator("rpc_urls", mode="before")
    @classmethod
    def _split_rpc_urls(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [url.strip() for url in value.split(",") if url.strip()]
        return value


settings = Settings()
