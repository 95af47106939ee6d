"""
FastAPI API routes and endpoints.

- routes.py: POST /generate-reply, POST /send-push, GET /, GET /health
- dependencies.py: Dependency injection for settings, provider client, stages, relay
- models.py: API-specific request/response models
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request id tracing
"""

from chatterjoy.api import dependencies, error_handlers, models
from chatterjoy.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
