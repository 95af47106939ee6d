"""Unit test fixtures (stages wired to the fake providers).

Provides pipeline components for testing without network access.
"""

import pytest

from chatterjoy.pipeline.emotion_stage import EmotionStage
from chatterjoy.pipeline.orchestrator import ReplyPipeline
from chatterjoy.pipeline.prompt_builder import ReplyPromptBuilder
from chatterjoy.pipeline.reply_stage import ReplyStage
from chatterjoy.providers.client import ProviderClient


@pytest.fixture
def provider_client(fake_providers) -> ProviderClient:
    """ProviderClient whose transport is the provider fake."""
    return ProviderClient(timeout=5.0, transport=fake_providers.transport)


@pytest.fixture
def prompt_builder() -> ReplyPromptBuilder:
    """Prompt builder with the bundled template."""
    return ReplyPromptBuilder()


@pytest.fixture
def emotion_stage(provider_client, test_settings) -> EmotionStage:
    return EmotionStage(
        client=provider_client,
        endpoint_url=test_settings.EMOTION_ENDPOINT_URL,
        api_token=test_settings.HF_API_TOKEN,
        fallback_label=test_settings.FALLBACK_EMOTION_LABEL,
    )


@pytest.fixture
def reply_stage(provider_client, prompt_builder, test_settings) -> ReplyStage:
    return ReplyStage(
        client=provider_client,
        endpoint_url=test_settings.REPLY_ENDPOINT_URL,
        api_key=test_settings.GEMINI_API_KEY,
        prompt_builder=prompt_builder,
        fallback_reply=test_settings.FALLBACK_REPLY,
    )


@pytest.fixture
def reply_pipeline(emotion_stage, reply_stage) -> ReplyPipeline:
    return ReplyPipeline(emotion_stage=emotion_stage, reply_stage=reply_stage)

