# =============================================================================
# core/models/psychology.py - Psychology Profile & Assessment Schemas
# =============================================================================
# A user has at most one psychology profile (upserted on user_id) and any
# number of stored assessments. Profiles feed question personalization and
# couple compatibility.
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .enums import AssessmentType, AttachmentStyle, LoveLanguage, TherapyModality
from .question import MAX_RESPONSE_LENGTH

LIKERT_MIN = 1
LIKERT_MAX = 7


class PsychologyProfileFields(BaseModel):
    """Columns of user_psychology_profiles a user may set."""

    attachment_style: AttachmentStyle | None = None
    anxiety_score: int | None = Field(default=None, ge=0, le=100)
    avoidance_score: int | None = Field(default=None, ge=0, le=100)
    primary_love_language: LoveLanguage | None = None
    secondary_love_language: LoveLanguage | None = None
    love_language_scores: dict[LoveLanguage, int] | None = None
    cbt_progress_score: int | None = Field(default=None, ge=0, le=100)
    emotional_regulation_score: int | None = Field(default=None, ge=0, le=100)
    mindfulness_score: int | None = Field(default=None, ge=0, le=100)
    values_living_score: int | None = Field(default=None, ge=0, le=100)
    preferred_modalities: list[TherapyModality] | None = None

    model_config = {"extra": "forbid"}


class PsychologyProfileCreate(PsychologyProfileFields):
    """
    Create (or replace) the current user's profile.

    attachment_style and primary_love_language are required, but checked
    in the route so a missing value is reported as a 400.
    """


class PsychologyProfileUpdate(PsychologyProfileFields):
    """Partial update; only explicitly set fields are written."""


class AssessmentCreate(BaseModel):
    """
    Store a completed assessment.

    Example:
        {
            "assessment_type": "attachment",
            "questions_responses": {"anx_01": 5, "avo_01": 2},
            "raw_scores": {"anxiety": 4.5, "avoidance": 2.1},
            "interpreted_results": {"attachment_style": "anxious"}
        }
    """

    assessment_type: AssessmentType | None = None
    questions_responses: dict[str, Any] | list[Any] | None = None
    raw_scores: dict[str, Any] | None = None
    interpreted_results: dict[str, Any] | None = None


class LikertScoreRequest(BaseModel):
    """Likert answers (1-7) keyed by question ID, for every 1-7 questionnaire."""

    responses: dict[str, int] = Field(..., min_length=1)

    @field_validator("responses")
    @classmethod
    def check_likert_range(cls, value: dict[str, int]) -> dict[str, int]:
        out_of_range = [k for k, v in value.items() if not LIKERT_MIN <= v <= LIKERT_MAX]
        if out_of_range:
            raise ValueError(
                f"Answers must be between {LIKERT_MIN} and {LIKERT_MAX}: {', '.join(out_of_range)}"
            )
        return value


class LoveLanguageScoreRequest(BaseModel):
    """Chosen option ID keyed by love language question ID."""

    responses: dict[str, str] = Field(..., min_length=1)


class ACTScoreRequest(LikertScoreRequest):
    """
    ACT answers plus optional value rankings (1 = most important).

    Example:
        {"responses": {"act_01": 6}, "value_rankings": {"trust": 1, "fun": 2}}
    """

    value_rankings: dict[str, int] | None = None

    @field_validator("value_rankings")
    @classmethod
    def check_ranks(cls, value: dict[str, int] | None) -> dict[str, int] | None:
        if value and any(rank < 1 for rank in value.values()):
            raise ValueError("Value ranks start at 1")
        return value


class FourHorsemenRequest(BaseModel):
    """Free text to check for criticism, contempt, defensiveness and stonewalling."""

    text: str = Field(..., min_length=1, max_length=MAX_RESPONSE_LENGTH)
