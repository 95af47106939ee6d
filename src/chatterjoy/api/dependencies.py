"""
FastAPI dependency injection for the ChatterJoy service.

The settings object is built once at startup and handed to every component
explicitly; nothing below reads the environment on its own. Expensive
resources (HTTP connection pool, prompt template, Firebase app) are
singletons. Stages and the pipeline are cheap and stateless.
"""

from functools import lru_cache
from pathlib import Path

import httpx
from fastapi import Depends

from chatterjoy.config import Settings, settings
from chatterjoy.notifications.push_relay import PushRelay
from chatterjoy.pipeline.emotion_stage import EmotionStage
from chatterjoy.pipeline.orchestrator import ReplyPipeline
from chatterjoy.pipeline.prompt_builder import ReplyPromptBuilder
from chatterjoy.pipeline.reply_stage import ReplyStage
from chatterjoy.providers.client import ProviderClient


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.
    
    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_provider_client() -> ProviderClient:
    """
    Get singleton provider client with connection pooling.
    
    Returns:
        ProviderClient shared by both stages
    """
    app_settings = get_settings()
    return ProviderClient(
        timeout=app_settings.PROVIDER_TIMEOUT,
        connection_limits=httpx.Limits(
            max_keepalive_connections=app_settings.PROVIDER_MAX_CONNECTIONS,
            max_connections=app_settings.PROVIDER_MAX_CONNECTIONS,
            keepalive_expiry=30.0,
        ),
    )


@lru_cache()
def get_prompt_builder() -> ReplyPromptBuilder:
    """
    Get singleton prompt builder.
    
    Loads the Jinja2 template once and reuses it across requests.
    """
    template_path = get_settings().REPLY_PROMPT_TEMPLATE_PATH
    return ReplyPromptBuilder(Path(template_path) if template_path else None)


@lru_cache()
def get_push_relay() -> PushRelay:
    """
    Get singleton push relay.
    
    The Firebase app itself is initialised on the first send.
    """
    app_settings = get_settings()
    return PushRelay(
        service_account_key=app_settings.FIREBASE_SERVICE_ACCOUNT_KEY,
        service_account_path=app_settings.FIREBASE_SERVICE_ACCOUNT_PATH,
        app_name=app_settings.FIREBASE_APP_NAME,
    )


def get_emotion_stage(
    settings: Settings = Depends(get_settings),
    client: ProviderClient = Depends(get_provider_client),
) -> EmotionStage:
    """
    Create emotion stage bound to the classification provider credentials.
    
    Args:
        settings: Application settings (injected)
        client: Provider client singleton (injected)
    """
    return EmotionStage(
        client=client,
        endpoint_url=settings.EMOTION_ENDPOINT_URL,
        api_token=settings.HF_API_TOKEN,
        fallback_label=settings.FALLBACK_EMOTION_LABEL,
    )


def get_reply_stage(
    settings: Settings = Depends(get_settings),
    client: ProviderClient = Depends(get_provider_client),
    prompt_builder: ReplyPromptBuilder = Depends(get_prompt_builder),
) -> ReplyStage:
    """
    Create reply stage bound to the generation provider credentials.
    
    Args:
        settings: Application settings (injected)
        client: Provider client singleton (injected)
        prompt_builder: Prompt builder singleton (injected)
    """
    return ReplyStage(
        client=client,
        endpoint_url=settings.REPLY_ENDPOINT_URL,
        api_key=settings.GEMINI_API_KEY,
        prompt_builder=prompt_builder,
        fallback_reply=settings.FALLBACK_REPLY,
    )


def get_reply_pipeline(
    emotion_stage: EmotionStage = Depends(get_emotion_stage),
    reply_stage: ReplyStage = Depends(get_reply_stage),
) -> ReplyPipeline:
    """
    Create the reply pipeline with injected stages.
    
    Note: not cached; a fresh pipeline per request keeps runs independent.
    """
    return ReplyPipeline(emotion_stage=emotion_stage, reply_stage=reply_stage)
