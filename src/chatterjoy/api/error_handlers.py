"""
FastAPI exception handlers for structured error responses.

Maps service exceptions to HTTP status codes. Provider failures are not
exceptions and never reach these handlers: routes render them directly
with the upstream status code.
"""

import logging

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from chatterjoy.exceptions import ConfigurationError, InputValidationError

logger = logging.getLogger(__name__)


async def input_validation_error_handler(
    request: Request, exc: InputValidationError
) -> JSONResponse:
    """
    Handle missing or blank required fields.
    
    Maps to 400 Bad Request.
    """
    logger.warning(
        "Invalid input",
        extra={"error": exc.message, "path": request.url.path},
    )
    
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": exc.message},
    )


async def configuration_error_handler(
    request: Request, exc: ConfigurationError
) -> JSONResponse:
    """
    Handle missing provider credentials.
    
    Maps to 500 Internal Server Error with a descriptive message.
    """
    logger.error(
        "Service misconfigured",
        extra={"error": exc.message, "details": exc.details, "path": request.url.path},
    )
    
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.message},
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed request bodies (missing body, wrong field types).
    
    Maps to 400 Bad Request.
    """
    logger.warning(
        "Invalid request format",
        extra={"errors": exc.errors()},
    )
    
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request body",
            "details": jsonable_encoder(exc.errors()),
        },
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.
    
    Maps to 500 Internal Server Error.
    """
    logger.exception(
        "Unexpected error",
        extra={"error_type": type(exc).__name__},
    )
    
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "details": str(exc),
        },
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    InputValidationError: input_validation_error_handler,
    ConfigurationError: configuration_error_handler,
    RequestValidationError: request_validation_error_handler,
    Exception: generic_error_handler,
}
