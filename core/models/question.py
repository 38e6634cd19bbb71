# =============================================================================
# core/models/question.py - Daily Question & Response Schemas
# =============================================================================
# Flow:
# 1. GET /questions/daily -> today's question (generated on first request)
# 2. Each partner POSTs a response to /responses
# 3. Responses are moderated and screened for crisis signals before insert
# =============================================================================

from uuid import UUID

from pydantic import BaseModel, Field

from .enums import QuestionCategory

DEFAULT_CATEGORY = QuestionCategory.GRATITUDE
DEFAULT_DIFFICULTY = 1
MAX_RESPONSE_LENGTH = 1000


class QuestionCreate(BaseModel):
    """
    Request a new AI-generated question for a couple.

    Example:
        {
            "couple_id": "550e8400-...",
            "category": "memories",
            "difficulty_level": 2
        }
    """

    couple_id: UUID | None = Field(
        default=None,
        description="Couple to generate the question for"
    )

    category: QuestionCategory | None = Field(
        default=None,
        description="Theme of the question (defaults to gratitude)"
    )

    difficulty_level: int | None = Field(
        default=None,
        ge=1,
        le=5,
        description="1 (light) to 5 (deep)"
    )


class ResponseCreate(BaseModel):
    """
    A partner's answer to a daily question.

    Example:
        {
            "question_id": "770e8400-...",
            "content": "When you made coffee for me this morning.",
            "is_private": false
        }
    """

    question_id: UUID | None = Field(
        default=None,
        description="Question being answered"
    )

    content: str | None = Field(
        default=None,
        max_length=MAX_RESPONSE_LENGTH,
        description="Answer text (1-1000 characters)"
    )

    is_private: bool = Field(
        default=False,
        description="Hide this answer from the partner"
    )
