"""
Reply pipeline orchestrator.

Sequences the two stages:
    text -> EmotionStage -> label -> ReplyStage(text, label) -> reply

The stages always run in strict sequence because the second call is built
from the first call's output. The first failing stage ends the run and its
ProviderError is returned unchanged; a run never yields a partial result.

Usage:
    pipeline = ReplyPipeline(emotion_stage, reply_stage)
    outcome = await pipeline.run("I lost my keys again")
    if outcome.ok:
        outcome.value.reply, outcome.value.emotion
"""

import time

import structlog

from chatterjoy.exceptions import InputValidationError
from chatterjoy.models.outcomes import StageOutcome
from chatterjoy.models.pipeline_models import InferenceRequest, ReplyResult
from chatterjoy.monitoring.metrics import pipeline_runs_total
from chatterjoy.pipeline.emotion_stage import EmotionStage
from chatterjoy.pipeline.reply_stage import ReplyStage

logger = structlog.get_logger(__name__)


class ReplyPipeline:
    """
    Two-stage inference pipeline with fail-fast semantics.
    
    Holds no per-request state, so one instance can serve concurrent requests.
    
    Attributes:
        emotion_stage: Classification stage
        reply_stage: Generation stage
    """
    
    def __init__(self, emotion_stage: EmotionStage, reply_stage: ReplyStage):
        self.emotion_stage = emotion_stage
        self.reply_stage = reply_stage
    
    async def run(self, text: str | None) -> StageOutcome[ReplyResult]:
        """
        Run both stages for `text`.
        
        Args:
            text: User message
        
        Returns:
            StageOutcome with a ReplyResult, or with the ProviderError of the
            stage that failed
        
        Raises:
            InputValidationError: `text` is missing or blank (no provider call is made)
            ConfigurationError: a provider credential is missing (no provider call is made)
        """
        if text is None or not text.strip():
            raise InputValidationError("Message is required")
        request = InferenceRequest(text=text)
        
        self.emotion_stage.ensure_configured()
        self.reply_stage.ensure_configured()
        
        logger.info("Reply pipeline started", text_length=len(request.text))
        timings_ms: dict[str, int] = {}
        
        start = time.perf_counter()
        emotion_outcome = await self.emotion_stage.classify(request.text)
        timings_ms["emotion"] = int((time.perf_counter() - start) * 1000)
        
        if not emotion_outcome.ok:
            logger.warning(
                "Reply pipeline aborted",
                stage=emotion_outcome.error.stage.value,
                http_status=emotion_outcome.error.http_status,
                failure_kind=emotion_outcome.error.kind.value,
            )
            pipeline_runs_total.labels(outcome="emotion_failed").inc()
            return StageOutcome.failure(emotion_outcome.error, timings_ms)
        
        emotion = emotion_outcome.value
        
        start = time.perf_counter()
        reply_outcome = await self.reply_stage.generate(request.text, emotion.label)
        timings_ms["reply"] = int((time.perf_counter() - start) * 1000)
        
        if not reply_outcome.ok:
            logger.warning(
                "Reply pipeline aborted",
                stage=reply_outcome.error.stage.value,
                http_status=reply_outcome.error.http_status,
                failure_kind=reply_outcome.error.kind.value,
                emotion=emotion.label,
            )
            pipeline_runs_total.labels(outcome="reply_failed").inc()
            return StageOutcome.failure(reply_outcome.error, timings_ms)
        
        result = ReplyResult(reply=reply_outcome.value, emotion=emotion.label)
        
        logger.info(
            "Reply pipeline completed",
            emotion=emotion.label,
            emotion_fallback=emotion.fallback_applied,
            reply_length=len(result.reply),
            timings_ms=timings_ms,
        )
        pipeline_runs_total.labels(outcome="success").inc()
        
        return StageOutcome.success(result, timings_ms)
