"""
API-specific request and response models for FastAPI endpoints.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateReplyRequest(BaseModel):
    """Request for the reply pipeline endpoint."""
    model_config = ConfigDict(extra="ignore")
    
    # Optional so a missing message reaches the pipeline's own 400 check
    message: Optional[str] = Field(
        default=None,
        description="User message to classify and reply to",
        examples=["I lost my keys again"]
    )


class GenerateReplyResponse(BaseModel):
    """Successful reply pipeline response."""
    
    reply: str = Field(
        description="Generated reply (or the fallback reply)",
        examples=["That sounds frustrating, I'm sorry."]
    )
    emotion: str = Field(
        description="Detected emotion label (or the fallback label)",
        examples=["sadness", "neutral"]
    )


class SendPushRequest(BaseModel):
    """Request for the push relay endpoint."""
    model_config = ConfigDict(extra="ignore")
    
    token: Optional[str] = Field(default=None, description="FCM device registration token")
    title: Optional[str] = Field(default=None, description="Notification title")
    body: Optional[str] = Field(default=None, description="Notification body")


class SendPushResponse(BaseModel):
    """Response for the push relay endpoint."""
    
    success: bool = Field(description="Whether FCM accepted the message")
    response: Optional[str] = Field(
        default=None,
        description="FCM message id (present on success)",
        examples=["projects/chatterjoy/messages/0:1700000000000000%abc"]
    )
    error: Optional[str] = Field(
        default=None,
        description="Error message (present on failure)"
    )


class HealthResponse(BaseModel):
    """Response for health check endpoint."""
    
    status: str = Field(
        description="Overall health status",
        examples=["healthy", "degraded"]
    )
    version: str = Field(
        description="Service version",
        examples=["0.1.0"]
    )
    services: dict[str, str] = Field(
        description="Provider configuration status",
        examples=[{"emotion_provider": "configured", "reply_provider": "configured", "push_provider": "missing_credentials"}]
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="Health check timestamp (UTC)"
    )


class ErrorResponse(BaseModel):
    """Standard error response format."""
    
    error: str = Field(
        description="Human-readable error message (upstream text for provider failures)"
    )
    details: Optional[str | list | dict] = Field(
        default=None,
        description="Diagnostic detail (unexpected errors, malformed bodies)"
    )
