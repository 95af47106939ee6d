"""
Reply pipeline: emotion classification followed by reply generation.

Components:
- EmotionStage: classifies text into an emotion label
- ReplyStage: generates a reply from text and label
- ReplyPromptBuilder: renders the generation prompt
- ReplyPipeline: sequences the stages with fail-fast semantics
"""

from chatterjoy.pipeline.emotion_stage import EmotionStage
from chatterjoy.pipeline.orchestrator import ReplyPipeline
from chatterjoy.pipeline.prompt_builder import ReplyPromptBuilder
from chatterjoy.pipeline.reply_stage import ReplyStage

__all__ = [
    "EmotionStage",
    "ReplyStage",
    "ReplyPromptBuilder",
    "ReplyPipeline",
]
