"""Structured logging configuration using structlog.

Every log line carries the service name and environment from Settings.
Provider URLs can carry credentials in the query string (the Gemini key is
sent as `?key=...`), so a scrubbing processor masks them in every event
before rendering, whether the event came from our code or from a stdlib
logger such as httpx or uvicorn.
"""

import logging
import re
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from chatterjoy.config import Settings

REDACTED = "***"

# key=..., api_key=..., access_token=... inside any URL or query string
_SECRET_QUERY_PARAM = re.compile(
    r"(?P<prefix>[?&](?:key|api_key|apikey|access_token|token)=)[^&\s\"']+",
    re.IGNORECASE,
)

# Chatty third-party loggers and the level they are capped at
NOISY_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "asyncio": logging.WARNING,
    "google": logging.WARNING,
    "urllib3": logging.WARNING,
}


def scrub_query_secrets(value: str) -> str:
    """Mask credential query parameters in `value`."""
    return _SECRET_QUERY_PARAM.sub(lambda m: m.group("prefix") + REDACTED, value)


def _scrub(value: Any) -> Any:
    if isinstance(value, str):
        return scrub_query_secrets(value)
    if isinstance(value, dict):
        return {k: _scrub(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return type(value)(_scrub(v) for v in value)
    return value


def redact_secrets(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor: mask credential query parameters in every event field."""
    return {key: _scrub(value) for key, value in event_dict.items()}


def app_context_processor(settings: Settings) -> Processor:
    """Build a processor that stamps service name and environment on each event."""
    def add_app_context(
        logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("app", settings.APP_NAME)
        event_dict.setdefault("environment", settings.ENVIRONMENT)
        return event_dict
    return add_app_context


def configure_logging(settings: Settings) -> None:
    """Configure structlog and the stdlib root logger from settings.

    Production renders JSON (exceptions formatted inline); any other
    environment uses the console renderer.
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    is_production = settings.ENVIRONMENT.lower() == "production"

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        app_context_processor(settings),
    ]
    if is_production:
        shared_processors.append(structlog.processors.format_exc_info)
    # Last, so it also sees formatted tracebacks
    shared_processors.append(redact_secrets)

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer: Processor
    if is_production:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    # stdlib records (uvicorn, httpx, firebase_admin, error handlers) go through
    # the same chain, including redaction
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    for name, level in NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(max(level, log_level))

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=settings.LOG_LEVEL,
        renderer="json" if is_production else "console",
    )
