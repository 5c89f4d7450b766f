"""
Request Strategies

Sequential fallback execution over an ordered set of RPC clients, with a
structured result and a full per-attempt audit trail.
"""

from .base import RequestStrategy
from .factory import StrategyConfig, StrategyFactory
from .fallback import FallbackStrategy
from .models import (
    AttemptError,
    AttemptRecord,
    AttemptStatus,
    ExecutionMetadata,
    ExecutionResult,
)

__all__ = [
    # Strategies
    "RequestStrategy",
    "FallbackStrategy",
    # Factory
    "StrategyConfig",
    "StrategyFactory",
    # Models
    "AttemptError",
    "AttemptRecord",
    "AttemptStatus",
    "ExecutionMetadata",
    "ExecutionResult",
]
