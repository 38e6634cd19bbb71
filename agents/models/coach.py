# =============================================================================
# agents/models/coach.py - Coach Input/Output Schemas
# =============================================================================
# Contracts between the service layer and the relationship coach:
# - QuestionGenerationParams: what the coach knows about the couple
# - CrisisDetectionResult: structured verdict from the crisis detector
# - CompatibilityInsights: AI (or fallback) couple compatibility analysis
#
# The model answers crisis/compatibility calls in camelCase JSON; aliases
# accept that shape while Python code uses snake_case.
# =============================================================================

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class QuestionGenerationParams(BaseModel):
    """
    Characteristics of a couple used to personalize a daily question.

    Example:
        QuestionGenerationParams(
            couple_id="5b1c...",
            attachment_styles=["secure", "anxious"],
            previous_questions=["What are you grateful for?"],
        )
    """

    couple_id: str
    relationship_stage: str | None = None
    attachment_styles: list[str] | None = None
    previous_questions: list[str] | None = None
    mood: str | None = None
    topics_of_interest: list[str] | None = None
    category: str | None = None


def _as_float(value) -> float:
    """None counts as 0; anything float() can't take is a validation error."""
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Expected a number, got {type(value).__name__}")


class CrisisDetectionResult(BaseModel):
    """Crisis verdict for one piece of user content."""

    model_config = ConfigDict(populate_by_name=True)

    is_crisis_detected: bool = Field(default=False, alias="isCrisisDetected")
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    keywords: list[str] = Field(default_factory=list)
    sentiment: float = Field(default=0.0, ge=-1.0, le=1.0)
    recommendations: list[str] = Field(default_factory=list)

    @field_validator("confidence", mode="before")
    @classmethod
    def clamp_confidence(cls, value):
        return min(max(_as_float(value), 0.0), 1.0)

    @field_validator("sentiment", mode="before")
    @classmethod
    def clamp_sentiment(cls, value):
        return min(max(_as_float(value), -1.0), 1.0)

    @field_validator("keywords", "recommendations", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return value or []


class CompatibilityInsights(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    overall_compatibility: int = Field(default=75, ge=0, le=100, alias="overallCompatibility")
    strengths: list[str] = Field(default_factory=list)
    challenges: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    modality_focus: list[str] = Field(default_factory=list, alias="modalityFocus")
