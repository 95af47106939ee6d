"""
Data models for the ChatterJoy service.

Includes:
- Enums (PipelineStage, FailureKind)
- Pipeline models (InferenceRequest, EmotionResult, ReplyResult, PushNotification)
- Outcomes (ProviderSuccess, ProviderFailure, ProviderError, StageOutcome)
- Provider wire shapes (classification and generation request/response)
"""

from chatterjoy.models.enums import FailureKind, PipelineStage
from chatterjoy.models.pipeline_models import (
    EmotionResult,
    InferenceRequest,
    PushNotification,
    ReplyResult,
)
from chatterjoy.models.outcomes import (
    ProviderError,
    ProviderFailure,
    ProviderResult,
    ProviderSuccess,
    StageOutcome,
)
from chatterjoy.models.provider_models import (
    ClassificationRequest,
    ClassificationResponse,
    EmotionScore,
    GenerationCandidate,
    GenerationContent,
    GenerationPart,
    GenerationRequest,
    GenerationResponse,
)

__all__ = [
    # Enums
    "FailureKind",
    "PipelineStage",
    # Pipeline models
    "EmotionResult",
    "InferenceRequest",
    "PushNotification",
    "ReplyResult",
    # Outcomes
    "ProviderError",
    "ProviderFailure",
    "ProviderResult",
    "ProviderSuccess",
    "StageOutcome",
    # Provider shapes
    "ClassificationRequest",
    "ClassificationResponse",
    "EmotionScore",
    "GenerationCandidate",
    "GenerationContent",
    "GenerationPart",
    "GenerationRequest",
    "GenerationResponse",
]
