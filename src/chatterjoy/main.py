"""
FastAPI application entry point for the ChatterJoy service.
"""

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from chatterjoy.api.dependencies import get_provider_client
from chatterjoy.api.error_handlers import EXCEPTION_HANDLERS
from chatterjoy.api.middleware import RequestTracingMiddleware
from chatterjoy.api.routes import router
from chatterjoy.config import settings
from chatterjoy.logging_config import configure_logging

# Configure structured logging before the app starts emitting
configure_logging(settings)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Push notification relay and emotion-aware reply generation",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Request tracing middleware (request_id in all logs)
app.add_middleware(RequestTracingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router)


@app.on_event("startup")
async def startup():
    """Report which provider credentials are available.

    Missing credentials only disable the routes that need them.
    """
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    if not settings.emotion_provider_configured:
        logger.warning("HF_API_TOKEN is not set; /generate-reply will return 500")
    if not settings.reply_provider_configured:
        logger.warning("GEMINI_API_KEY is not set; /generate-reply will return 500")
    if not settings.push_provider_configured:
        logger.warning(
            "Firebase service account is not set; /send-push will return 500"
        )

    logger.info("Application startup complete")


@app.on_event("shutdown")
async def shutdown():
    """Close the provider connection pool."""
    logger.info("Application shutdown")
    await get_provider_client().close()
    logger.info("Application shutdown complete")


if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "chatterjoy.main:app",
        host="0.0.0.0",
        port=4000,
    )
