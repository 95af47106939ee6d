"""
ChatterJoy service.

Relays push notifications to Firebase Cloud Messaging and turns a user's
message into an empathetic reply through a two-stage inference pipeline:
- Emotion classification (Hugging Face Inference API)
- Reply generation (Gemini generateContent)

Architecture: FastAPI orchestrator + httpx provider client + explicit stage outcomes
"""

__version__ = "0.1.0"
