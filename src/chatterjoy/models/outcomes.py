"""
Explicit success/failure outcomes.

Provider calls and pipeline stages never signal transport failures by raising.
They return one of these values and the caller branches on it, which keeps
the fail-fast contract of the pipeline visible at every step:

    outcome = await stage.classify(text)
    if not outcome.ok:
        return StageOutcome.failure(outcome.error)
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar, Union

from chatterjoy.models.enums import FailureKind, PipelineStage

T = TypeVar("T")


@dataclass(frozen=True)
class ProviderSuccess:
    """Parsed JSON body of a 2xx provider response."""
    status_code: int
    data: Any
    latency_ms: int = 0


@dataclass(frozen=True)
class ProviderFailure:
    """
    A failed provider call.
    
    For HTTP_STATUS failures `status_code` and `message` are the upstream
    status and body text, unmodified.
    """
    status_code: int
    message: str
    kind: FailureKind = FailureKind.HTTP_STATUS
    latency_ms: int = 0


ProviderResult = Union[ProviderSuccess, ProviderFailure]


@dataclass(frozen=True)
class ProviderError:
    """
    A provider failure attributed to the pipeline stage that issued the call.
    
    Never persisted; surfaced to the caller as-is.
    """
    stage: PipelineStage
    http_status: int
    message: str
    kind: FailureKind = FailureKind.HTTP_STATUS
    
    @classmethod
    def from_failure(cls, stage: PipelineStage, failure: ProviderFailure) -> "ProviderError":
        return cls(
            stage=stage,
            http_status=failure.status_code,
            message=failure.message,
            kind=failure.kind,
        )


@dataclass(frozen=True)
class StageOutcome(Generic[T]):
    """Result of a stage (or of the whole pipeline): exactly one of value/error is set."""
    value: Optional[T] = None
    error: Optional[ProviderError] = None
    timings_ms: dict[str, int] = field(default_factory=dict)
    
    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("StageOutcome requires exactly one of value or error")
    
    @property
    def ok(self) -> bool:
        return self.error is None
    
    @classmethod
    def success(cls, value: T, timings_ms: dict[str, int] | None = None) -> "StageOutcome[T]":
        return cls(value=value, timings_ms=timings_ms or {})
    
    @classmethod
    def failure(cls, error: ProviderError, timings_ms: dict[str, int] | None = None) -> "StageOutcome[T]":
        return cls(error=error, timings_ms=timings_ms or {})
