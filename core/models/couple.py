# =============================================================================
# core/models/couple.py - Couple Schemas
# =============================================================================
# These models define the API contract for couple operations:
# - CoupleCreate: Pair the current user (partner1) with partner2
# - CoupleUpdate: Editable relationship details
# - HealthScoreRequest: The four sub-scores behind the health score
# - CoupleSummary: Dashboard numbers derived from a couple row
#
# A couple is exactly two users. Uniqueness (one couple per user pair) is
# enforced by database constraints, not here.
# =============================================================================

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from .enums import RelationshipStatus

DEFAULT_HEALTH_SCORE = 50


class CoupleCreate(BaseModel):
    """
    Schema for creating a couple directly (without an invitation).

    partner2_id is optional at the schema level so a missing partner
    can be reported as a 400 with a clear message.

    Example:
        {
            "partner2_id": "660e8400-e29b-41d4-a716-446655440001",
            "relationship_start_date": "2021-06-12",
            "relationship_status": "dating"
        }
    """

    partner2_id: UUID | None = Field(
        default=None,
        description="User ID of the other partner"
    )

    relationship_start_date: date | None = Field(
        default=None,
        description="When the relationship started"
    )

    relationship_status: RelationshipStatus | None = Field(
        default=None,
        description="dating, engaged, married or partnership"
    )


class CoupleUpdate(BaseModel):
    """
    Fields a partner may change on their couple.

    Only fields that are explicitly set are written.
    """

    relationship_start_date: date | None = None
    relationship_status: RelationshipStatus | None = None
    goals: list[str] | None = Field(default=None, max_length=20)
    health_score: int | None = Field(default=None, ge=0, le=100)
    current_streak: int | None = Field(default=None, ge=0)
    longest_streak: int | None = Field(default=None, ge=0)


class HealthScoreRequest(BaseModel):
    """
    Sub-scores used to compute the couple's health score.

    Each score is on a 0-100 scale.
    """

    communication_score: float = Field(..., ge=0, le=100)
    trust_score: float = Field(..., ge=0, le=100)
    satisfaction_score: float = Field(..., ge=0, le=100)
    engagement_score: float = Field(..., ge=0, le=100)


class RelationshipDurationResponse(BaseModel):
    years: int
    months: int
    days: int
    total_days: int


class CoupleSummary(BaseModel):
    """
    Dashboard summary for one couple.

    Example:
        {
            "couple_id": "550e8400-...",
            "health_score": 68,
            "current_streak": 4,
            "longest_streak": 12,
            "streak_message": "4 days strong! You're building a habit.",
            "relationship_duration": {"years": 2, "months": 3, "days": 5, "total_days": 830}
        }
    """

    couple_id: str
    health_score: int = Field(default=DEFAULT_HEALTH_SCORE, ge=0, le=100)
    current_streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)
    streak_message: str
    relationship_status: RelationshipStatus | None = None
    relationship_duration: RelationshipDurationResponse | None = None
