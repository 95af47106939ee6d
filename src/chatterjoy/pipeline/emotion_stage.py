"""
Emotion stage: classify free text into a single emotion label.

Transport failures abort the pipeline (no label is synthesized for them).
A successful response without a usable label degrades to the fallback label.
"""

import structlog

from chatterjoy.exceptions import ConfigurationError
from chatterjoy.models.enums import PipelineStage
from chatterjoy.models.outcomes import ProviderError, ProviderFailure, StageOutcome
from chatterjoy.models.pipeline_models import EmotionResult
from chatterjoy.models.provider_models import ClassificationRequest, ClassificationResponse
from chatterjoy.monitoring.metrics import fallback_substitutions_total
from chatterjoy.providers.client import ProviderClient

logger = structlog.get_logger(__name__)


class EmotionStage:
    """
    Stage 1 of the reply pipeline.
    
    POSTs `{"inputs": text}` to the classification endpoint with a bearer
    token and keeps the top-ranked label.
    """
    
    stage = PipelineStage.EMOTION
    
    def __init__(
        self,
        client: ProviderClient,
        endpoint_url: str,
        api_token: str | None,
        fallback_label: str = "neutral",
    ):
        self.client = client
        self.endpoint_url = endpoint_url
        self.api_token = api_token
        self.fallback_label = fallback_label
    
    def ensure_configured(self) -> None:
        """Raise ConfigurationError when the bearer token is missing."""
        if not self.api_token:
            raise ConfigurationError(
                "Emotion classification is not configured: HF_API_TOKEN is not set",
                details={"stage": self.stage.value, "setting": "HF_API_TOKEN"},
            )
    
    async def classify(self, text: str) -> StageOutcome[EmotionResult]:
        """
        Classify `text`.
        
        Args:
            text: Non-empty user message
        
        Returns:
            StageOutcome with an EmotionResult, or with a ProviderError when
            the provider call failed
        """
        self.ensure_configured()
        
        payload = ClassificationRequest(inputs=text).model_dump()
        result = await self.client.call(
            self.endpoint_url,
            headers={"Authorization": f"Bearer {self.api_token}"},
            payload=payload,
            provider=self.stage.value,
        )
        
        if isinstance(result, ProviderFailure):
            return StageOutcome.failure(ProviderError.from_failure(self.stage, result))
        
        top = ClassificationResponse.from_payload(result.data).top_score()
        if top is None:
            logger.warning(
                "Classification response has no usable label, using fallback",
                fallback_label=self.fallback_label,
                payload_type=type(result.data).__name__,
            )
            fallback_substitutions_total.labels(
                stage=self.stage.value, missing_field="label"
            ).inc()
            return StageOutcome.success(
                EmotionResult(label=self.fallback_label, fallback_applied=True)
            )
        
        logger.debug("Emotion classified", label=top.label, score=top.score)
        return StageOutcome.success(EmotionResult(label=top.label, score=top.score))
