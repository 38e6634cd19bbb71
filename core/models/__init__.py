# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - enums.py: String enums mirroring the Postgres enum types
# - couple.py: Couple create/update/summary schemas
# - invitation.py: Partner invitation schemas
# - question.py: Daily question and response schemas
# - crisis.py: Crisis severity ladder
# - psychology.py: Psychology profile and assessment schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .enums import (
    AssessmentType,
    AttachmentStyle,
    InvitationStatus,
    LoveLanguage,
    MoodType,
    QuestionCategory,
    RelationshipStatus,
    TherapyModality,
)

from .couple import (
    DEFAULT_HEALTH_SCORE,
    CoupleCreate,
    CoupleSummary,
    CoupleUpdate,
    HealthScoreRequest,
    RelationshipDurationResponse,
)

from .invitation import (
    InvitationAccept,
    InvitationCreate,
    InvitationPreview,
)

from .question import (
    DEFAULT_CATEGORY,
    DEFAULT_DIFFICULTY,
    QuestionCreate,
    ResponseCreate,
)

from .crisis import CrisisSeverity

from .psychology import (
    AssessmentCreate,
    ACTScoreRequest,
    FourHorsemenRequest,
    LikertScoreRequest,
    LoveLanguageScoreRequest,
    PsychologyProfileCreate,
    PsychologyProfileUpdate,
)

__all__ = [
    # Enums
    "AssessmentType",
    "AttachmentStyle",
    "InvitationStatus",
    "LoveLanguage",
    "MoodType",
    "QuestionCategory",
    "RelationshipStatus",
    "TherapyModality",
    # Couple
    "DEFAULT_HEALTH_SCORE",
    "CoupleCreate",
    "CoupleSummary",
    "CoupleUpdate",
    "HealthScoreRequest",
    "RelationshipDurationResponse",
    # Invitation
    "InvitationAccept",
    "InvitationCreate",
    "InvitationPreview",
    # Question / Response
    "DEFAULT_CATEGORY",
    "DEFAULT_DIFFICULTY",
    "QuestionCreate",
    "ResponseCreate",
    # Crisis
    "CrisisSeverity",
    # Psychology
    "AssessmentCreate",
    "ACTScoreRequest",
    "FourHorsemenRequest",
    "LikertScoreRequest",
    "LoveLanguageScoreRequest",
    "PsychologyProfileCreate",
    "PsychologyProfileUpdate",
]
