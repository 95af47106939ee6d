"""
Wire shapes of the two inference providers.

Every level of a provider response is modelled as optional, and the
`from_payload` constructors never raise: a body that does not match the
expected shape yields an empty model. Stages then apply their defaulting
rules explicitly (fallback label, fallback reply) instead of relying on
permissive chained lookups.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


# === Emotion classification (Hugging Face text-classification) ===

class ClassificationRequest(BaseModel):
    """POST body for the classification endpoint."""
    inputs: str = Field(..., min_length=1)


class EmotionScore(BaseModel):
    """One `{label, score}` entry of a classification response."""
    model_config = ConfigDict(frozen=True, extra="ignore")
    
    label: Optional[str] = None
    score: Optional[float] = None


class ClassificationResponse(BaseModel):
    """
    Parsed classification response.
    
    The Inference API answers a single input with a nested list
    (`[[{label, score}, ...]]`); a flat list is accepted as well.
    """
    model_config = ConfigDict(frozen=True)
    
    scores: list[EmotionScore] = Field(default_factory=list)
    
    @classmethod
    def from_payload(cls, payload: Any) -> "ClassificationResponse":
        if not isinstance(payload, list):
            return cls()
        
        items = payload
        if items and isinstance(items[0], list):
            items = items[0]
        
        scores = []
        for item in items:
            if not isinstance(item, dict):
                continue
            try:
                scores.append(EmotionScore.model_validate(item))
            except ValidationError:
                continue
        return cls(scores=scores)
    
    def top_score(self) -> Optional[EmotionScore]:
        """
        Highest-scored entry that carries a label.
        
        Entries without a score rank last; ties keep provider order.
        """
        labelled = [s for s in self.scores if s.label]
        if not labelled:
            return None
        return max(
            labelled,
            key=lambda s: s.score if s.score is not None else float("-inf"),
        )


# === Reply generation (Gemini generateContent) ===

class GenerationPart(BaseModel):
    model_config = ConfigDict(extra="ignore")
    
    text: Optional[str] = None


class GenerationContent(BaseModel):
    model_config = ConfigDict(extra="ignore")
    
    role: Optional[str] = None
    parts: Optional[list[GenerationPart]] = None


class GenerationCandidate(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    
    content: Optional[GenerationContent] = None
    finish_reason: Optional[str] = Field(default=None, alias="finishReason")


class GenerationRequest(BaseModel):
    """POST body for the generation endpoint: a list of conversational turns."""
    contents: list[GenerationContent]
    
    @classmethod
    def single_turn(cls, prompt: str, role: str = "user") -> "GenerationRequest":
        return cls(contents=[GenerationContent(role=role, parts=[GenerationPart(text=prompt)])])


class GenerationResponse(BaseModel):
    """Parsed generation response: candidates -> content -> parts -> text."""
    model_config = ConfigDict(extra="ignore")
    
    candidates: Optional[list[GenerationCandidate]] = None
    
    @classmethod
    def from_payload(cls, payload: Any) -> "GenerationResponse":
        if not isinstance(payload, dict):
            return cls()
        try:
            return cls.model_validate(payload)
        except ValidationError:
            return cls()
    
    def missing_field(self) -> Optional[str]:
        """Path of the first absent level, or None when the reply text is present."""
        if not self.candidates:
            return "candidates"
        content = self.candidates[0].content
        if content is None:
            return "candidates[0].content"
        if not content.parts:
            return "candidates[0].content.parts"
        text = content.parts[0].text
        if text is None or not text.strip():
            return "candidates[0].content.parts[0].text"
        return None
    
    def first_text(self) -> Optional[str]:
        if self.missing_field() is not None:
            return None
        return self.candidates[0].content.parts[0].text.strip()
