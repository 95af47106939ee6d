"""
Reply stage: generate a short empathetic reply for (text, emotion).
"""

import structlog

from chatterjoy.exceptions import ConfigurationError
from chatterjoy.models.enums import PipelineStage
from chatterjoy.models.outcomes import ProviderError, ProviderFailure, StageOutcome
from chatterjoy.models.provider_models import GenerationRequest, GenerationResponse
from chatterjoy.monitoring.metrics import fallback_substitutions_total
from chatterjoy.pipeline.prompt_builder import ReplyPromptBuilder
from chatterjoy.providers.client import ProviderClient

logger = structlog.get_logger(__name__)


class ReplyStage:
    """
    Stage 2 of the reply pipeline.
    
    Wraps the rendered prompt as a single user turn and POSTs it to the
    generation endpoint. The API key goes in the `key` query parameter, not
    in a header.
    
    Response handling:
    - Provider failure: returned as a ProviderError (pipeline aborts)
    - 2xx without candidates/content/parts/text: fallback reply, warning logged
    """
    
    stage = PipelineStage.REPLY
    
    def __init__(
        self,
        client: ProviderClient,
        endpoint_url: str,
        api_key: str | None,
        prompt_builder: ReplyPromptBuilder,
        fallback_reply: str = "Thanks for sharing that.",
    ):
        self.client = client
        self.endpoint_url = endpoint_url
        self.api_key = api_key
        self.prompt_builder = prompt_builder
        self.fallback_reply = fallback_reply
    
    def ensure_configured(self) -> None:
        """Raise ConfigurationError when the API key is missing."""
        if not self.api_key:
            raise ConfigurationError(
                "Reply generation is not configured: GEMINI_API_KEY is not set",
                details={"stage": self.stage.value, "setting": "GEMINI_API_KEY"},
            )
    
    async def generate(self, text: str, emotion: str) -> StageOutcome[str]:
        """
        Generate a reply conditioned on `text` and `emotion`.
        
        Args:
            text: Original user message
            emotion: Label produced by the emotion stage
        
        Returns:
            StageOutcome with the reply text, or with a ProviderError
        """
        self.ensure_configured()
        
        prompt = self.prompt_builder.build(text, emotion)
        payload = GenerationRequest.single_turn(prompt).model_dump(exclude_none=True)
        
        result = await self.client.call(
            self.endpoint_url,
            headers={"Content-Type": "application/json"},
            payload=payload,
            params={"key": self.api_key},
            provider=self.stage.value,
        )
        
        if isinstance(result, ProviderFailure):
            return StageOutcome.failure(ProviderError.from_failure(self.stage, result))
        
        response = GenerationResponse.from_payload(result.data)
        missing = response.missing_field()
        if missing is not None:
            logger.warning(
                "Unexpected generation response shape, using fallback reply",
                missing_field=missing,
                top_level_keys=sorted(result.data) if isinstance(result.data, dict) else None,
            )
            fallback_substitutions_total.labels(
                stage=self.stage.value, missing_field=missing
            ).inc()
            return StageOutcome.success(self.fallback_reply)
        
        return StageOutcome.success(response.first_text())
