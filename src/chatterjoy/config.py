"""
Configuration settings for the ChatterJoy service.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development. Provider credentials have no defaults:
a missing credential disables the routes that need it without stopping the
process.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Application ===
    APP_NAME: str = "ChatterJoy Service"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LIVENESS_MESSAGE: str = " ChatterJoy's Push Notification Server is running!"
    
    # === Emotion Classification Provider (Hugging Face) ===
    HF_API_TOKEN: Optional[str] = None
    EMOTION_ENDPOINT_URL: str = (
        "https://api-inference.huggingface.co/models/"
        "j-hartmann/emotion-english-distilroberta-base"
    )
    FALLBACK_EMOTION_LABEL: str = "neutral"
    
    # === Reply Generation Provider (Gemini) ===
    GEMINI_API_KEY: Optional[str] = None
    REPLY_ENDPOINT_URL: str = (
        "https://generativelanguage.googleapis.com/v1beta/models/"
        "gemini-1.5-flash:generateContent"
    )
    FALLBACK_REPLY: str = "Thanks for sharing that."
    REPLY_PROMPT_TEMPLATE_PATH: Optional[str] = None  # Overrides the bundled template
    
    # === Provider HTTP Client ===
    PROVIDER_TIMEOUT: float = 30.0  # seconds, applies to connect/read/write/pool
    PROVIDER_MAX_CONNECTIONS: int = 10
    
    # === Push Notifications (Firebase) ===
    FIREBASE_SERVICE_ACCOUNT_KEY: Optional[str] = None  # Service account JSON as a string
    FIREBASE_SERVICE_ACCOUNT_PATH: Optional[str] = None  # Or a path to the JSON file
    FIREBASE_APP_NAME: str = "chatterjoy-push"
    
    # === HTTP ===
    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    
    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True
    
    @property
    def emotion_provider_configured(self) -> bool:
        return bool(self.HF_API_TOKEN)
    
    @property
    def reply_provider_configured(self) -> bool:
        return bool(self.GEMINI_API_KEY)
    
    @property
    def push_provider_configured(self) -> bool:
        return bool(self.FIREBASE_SERVICE_ACCOUNT_KEY or self.FIREBASE_SERVICE_ACCOUNT_PATH)


# Global settings instance
settings = Settings()
