"""
Unit tests for API dependency injection.
"""

from chatterjoy.api.dependencies import (
    get_emotion_stage,
    get_prompt_builder,
    get_provider_client,
    get_push_relay,
    get_reply_pipeline,
    get_reply_stage,
    get_settings,
)
from chatterjoy.config import Settings
from chatterjoy.notifications.push_relay import PushRelay
from chatterjoy.pipeline.emotion_stage import EmotionStage
from chatterjoy.pipeline.orchestrator import ReplyPipeline
from chatterjoy.pipeline.prompt_builder import ReplyPromptBuilder
from chatterjoy.pipeline.reply_stage import ReplyStage
from chatterjoy.providers.client import ProviderClient


def test_get_settings():
    """Test settings singleton."""
    settings1 = get_settings()
    settings2 = get_settings()

    # Should be same instance (cached)
    assert settings1 is settings2
    assert isinstance(settings1, Settings)


def test_get_provider_client():
    """Test provider client singleton."""
    client1 = get_provider_client()
    client2 = get_provider_client()

    assert client1 is client2
    assert isinstance(client1, ProviderClient)
    assert client1.timeout == get_settings().PROVIDER_TIMEOUT


def test_get_prompt_builder():
    """Test prompt builder singleton."""
    builder1 = get_prompt_builder()
    builder2 = get_prompt_builder()

    assert builder1 is builder2
    assert isinstance(builder1, ReplyPromptBuilder)


def test_get_push_relay():
    """Test push relay singleton."""
    relay1 = get_push_relay()
    relay2 = get_push_relay()

    assert relay1 is relay2
    assert isinstance(relay1, PushRelay)


def test_get_emotion_stage(test_settings, provider_client):
    """Test emotion stage picks up classification settings."""
    stage = get_emotion_stage(settings=test_settings, client=provider_client)

    assert isinstance(stage, EmotionStage)
    assert stage.endpoint_url == test_settings.EMOTION_ENDPOINT_URL
    assert stage.api_token == "hf_test_token"
    assert stage.fallback_label == "neutral"


def test_get_reply_stage(test_settings, provider_client, prompt_builder):
    """Test reply stage picks up generation settings."""
    stage = get_reply_stage(
        settings=test_settings,
        client=provider_client,
        prompt_builder=prompt_builder,
    )

    assert isinstance(stage, ReplyStage)
    assert stage.endpoint_url == test_settings.REPLY_ENDPOINT_URL
    assert stage.api_key == "gemini-test-key"
    assert stage.fallback_reply == test_settings.FALLBACK_REPLY


def test_get_reply_pipeline(emotion_stage, reply_stage):
    """Test pipeline factory (not cached)."""
    pipeline1 = get_reply_pipeline(emotion_stage=emotion_stage, reply_stage=reply_stage)
    pipeline2 = get_reply_pipeline(emotion_stage=emotion_stage, reply_stage=reply_stage)

    assert isinstance(pipeline1, ReplyPipeline)
    assert pipeline1 is not pipeline2
    assert pipeline1.emotion_stage is emotion_stage
    assert pipeline1.reply_stage is reply_stage
