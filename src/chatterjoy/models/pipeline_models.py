"""
Business models flowing through the reply pipeline.

These are the values a caller sees: the request text, the detected emotion
and the final reply. Provider wire shapes live in provider_models.py.
"""

from pydantic import BaseModel, ConfigDict, Field


class InferenceRequest(BaseModel):
    """A single pipeline invocation."""
    model_config = ConfigDict(frozen=True)
    
    text: str = Field(..., min_length=1, description="User message to respond to")


class EmotionResult(BaseModel):
    """
    Output of the emotion stage.
    
    `label` is either a provider label or the configured fallback ("neutral").
    """
    model_config = ConfigDict(frozen=True)
    
    label: str = Field(..., min_length=1, description="Detected emotion label")
    score: float | None = Field(default=None, description="Provider score, absent on fallback")
    fallback_applied: bool = Field(default=False, description="Whether the label was substituted")


class ReplyResult(BaseModel):
    """
    Final pipeline output.
    
    `reply` is never empty; `emotion` always carries the EmotionResult label.
    """
    model_config = ConfigDict(frozen=True)
    
    reply: str = Field(..., min_length=1, description="Generated (or fallback) reply")
    emotion: str = Field(..., min_length=1, description="Emotion the reply was conditioned on")


class PushNotification(BaseModel):
    """Token/title/body triple forwarded to the push provider."""
    model_config = ConfigDict(frozen=True)
    
    token: str | None = Field(default=None, description="FCM device registration token")
    title: str | None = Field(default=None, description="Notification title")
    body: str | None = Field(default=None, description="Notification body")
