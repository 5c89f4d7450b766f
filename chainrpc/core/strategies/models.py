"""
Strategy Result Models

Outcome of one ``execute`` call: overall success, the returned data, the
per-endpoint errors and the ordered audit trail of every attempt.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class AttemptStatus(str, Enum):
    """Outcome of a single attempt."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class AttemptRecord:
    """One attempt against one endpoint."""

    url: str
    status: AttemptStatus
    response_time: float  # milliseconds
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == AttemptStatus.SUCCESS

    @classmethod
    def succeeded(cls, url: str, data: Any, response_time: float) -> "AttemptRecord":
        return cls(url=url, status=AttemptStatus.SUCCESS, response_time=response_time, data=data)

    @classmethod
    def failed(cls, url: str, error: str, response_time: float) -> "AttemptRecord":
        return cls(url=url, status=AttemptStatus.ERROR, response_time=response_time, error=error)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "url": self.url,
            "status": self.status.value,
            "responseTime": self.response_time,
        }
        if self.ok:
            result["data"] = self.data
        else:
            result["error"] = self.error
        return result


@dataclass(frozen=True)
class AttemptError:
    """Failure view of an attempt, as carried in ``ExecutionResult.errors``."""

    url: str
    error: str
    response_time: float
    status: AttemptStatus = AttemptStatus.ERROR

    @classmethod
    def from_record(cls, record: AttemptRecord) -> "AttemptError":
        if record.ok:
            raise ValueError(f"Attempt against {record.url} did not fail")
        return cls(url=record.url, error=record.error or "", response_time=record.response_time)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "status": self.status.value,
            "error": self.error,
            "responseTime": self.response_time,
        }


@dataclass
class ExecutionMetadata:
    """Audit trail of every attempt made during one execute call."""

    strategy: str
    responses: List[AttemptRecord] = field(default_factory=list)
    timestamp: Optional[int] = None  # epoch milliseconds at execute start

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "strategy": self.strategy,
            "responses": [r.to_dict() for r in self.responses],
        }
        if self.timestamp is not None:
            result["timestamp"] = self.timestamp
        return result


@dataclass
class ExecutionResult(Generic[T]):
    """
    Result of a strategy execution.

    ``data`` is set only when ``success`` is true; ``errors`` only when it is
    false. ``metadata`` is always present.
    """

    success: bool
    metadata: ExecutionMetadata
    data: Optional[T] = None
    errors: Optional[List[AttemptError]] = None

    @classmethod
    def succeeded(cls, data: T, metadata: ExecutionMetadata) -> "ExecutionResult[T]":
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def failed(cls, metadata: ExecutionMetadata) -> "ExecutionResult[T]":
        errors = [AttemptError.from_record(r) for r in metadata.responses]
        return cls(success=False, errors=errors, metadata=metadata)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"success": self.success}
        if self.success:
            result["data"] = self.data
        else:
            result["errors"] = [e.to_dict() for e in self.errors or []]
        result["metadata"] = self.metadata.to_dict()
        return result
