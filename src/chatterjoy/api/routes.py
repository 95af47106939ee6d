"""
API routes: reply pipeline, push relay, liveness and health.
"""

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from chatterjoy.api.dependencies import get_push_relay, get_reply_pipeline, get_settings
from chatterjoy.api.models import (
    ErrorResponse,
    GenerateReplyRequest,
    GenerateReplyResponse,
    HealthResponse,
    SendPushRequest,
    SendPushResponse,
)
from chatterjoy.config import Settings
from chatterjoy.exceptions import ChatterJoyError, ConfigurationError, PushDeliveryError
from chatterjoy.models.pipeline_models import PushNotification
from chatterjoy.notifications.push_relay import PushRelay
from chatterjoy.pipeline.orchestrator import ReplyPipeline

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Liveness check",
)
async def root(settings: Settings = Depends(get_settings)) -> PlainTextResponse:
    return PlainTextResponse(settings.LIVENESS_MESSAGE, status_code=status.HTTP_200_OK)


@router.post(
    "/generate-reply",
    response_model=GenerateReplyResponse,
    status_code=status.HTTP_200_OK,
    summary="Classify a message and generate an empathetic reply",
    description="""
    Runs emotion classification, then reply generation conditioned on the
    detected emotion. Provider failures are returned with the provider's own
    status code and error text.
    """,
    responses={
        200: {"description": "Reply generated"},
        400: {"model": ErrorResponse, "description": "Message missing or blank"},
        500: {"model": ErrorResponse, "description": "Provider credentials missing or unexpected error"},
    },
)
async def generate_reply(
    request: GenerateReplyRequest,
    pipeline: ReplyPipeline = Depends(get_reply_pipeline),
):
    """
    Generate a reply for `request.message`.
    
    Args:
        request: Body with the user message
        pipeline: Reply pipeline (injected)
    
    Returns:
        GenerateReplyResponse, or a JSON error with the failing provider's status
    """
    try:
        outcome = await pipeline.run(request.message)
    except ChatterJoyError:
        # Validation/configuration errors go to the registered handlers
        raise
    except Exception as exc:
        logger.exception("Reply generation failed unexpectedly", error_type=type(exc).__name__)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to generate reply", "details": str(exc)},
        )
    
    if not outcome.ok:
        return JSONResponse(
            status_code=outcome.error.http_status,
            content={"error": outcome.error.message},
        )
    
    return GenerateReplyResponse(reply=outcome.value.reply, emotion=outcome.value.emotion)


@router.post(
    "/send-push",
    response_model=SendPushResponse,
    response_model_exclude_none=True,
    summary="Relay a push notification to FCM",
    responses={
        200: {"description": "Message accepted by FCM"},
        500: {"model": SendPushResponse, "description": "Delivery failed or Firebase not configured"},
    },
)
async def send_push(
    request: SendPushRequest,
    relay: PushRelay = Depends(get_push_relay),
):
    """
    Forward token/title/body to Firebase Cloud Messaging.
    
    Args:
        request: Notification target and content
        relay: Push relay singleton (injected)
    """
    notification = PushNotification(
        token=request.token,
        title=request.title,
        body=request.body,
    )
    
    try:
        message_id = await relay.send(notification)
    except (ConfigurationError, PushDeliveryError) as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": exc.message},
        )
    
    return SendPushResponse(success=True, response=message_id)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="""
    Reports which providers have credentials configured. Does not call
    the providers.
    """,
)
async def health_check(
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    services = {
        "emotion_provider": "configured" if settings.emotion_provider_configured else "missing_credentials",
        "reply_provider": "configured" if settings.reply_provider_configured else "missing_credentials",
        "push_provider": "configured" if settings.push_provider_configured else "missing_credentials",
    }
    health_status = "healthy" if all(v == "configured" for v in services.values()) else "degraded"
    
    logger.info("Health check", status=health_status, services=services)
    
    return HealthResponse(
        status=health_status,
        version=settings.APP_VERSION,
        services=services,
    )
