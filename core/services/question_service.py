# =============================================================================
# core/services/question_service.py - Daily Question Business Logic
# =============================================================================
# Questions belong to a couple and a UTC date. Generation flow:
#   1. Check the user is a partner in the couple
#   2. Load both partners' psychology profiles and recent questions
#   3. Ask the coach for question text (never fails, see agents/)
#   4. Insert the daily_questions row
# =============================================================================

import logging
from datetime import date
from typing import Any
from uuid import UUID

from agents.models.coach import QuestionGenerationParams
from agents.relationship_coach import generate_daily_question
from app.config import settings
from app.exceptions import CoupleNotFoundError, MissingFieldError
from core.models.enums import QuestionCategory
from core.models.question import DEFAULT_CATEGORY, DEFAULT_DIFFICULTY, QuestionCreate
from core.services.response_service import visible_responses
from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import normalize_uuid, utc_now_iso, utc_today

logger = logging.getLogger(__name__)


def _require_couple(couple_id: UUID | str | None, user_id: UUID | str) -> dict[str, Any]:
    if not couple_id:
        raise MissingFieldError("Couple ID is required", ["couple_id"])

    couple = SupabaseClient.fetch_couple_for_member(couple_id, user_id)
    if not couple:
        raise CoupleNotFoundError(str(couple_id))
    return couple


def build_generation_params(couple: dict[str, Any], category: QuestionCategory | None = None) -> QuestionGenerationParams:
    """
    Gather what the coach should know about a couple.

    Profiles and recent questions are best-effort: lookups that fail
    leave the corresponding field empty.
    """
    profiles = SupabaseClient.fetch_psychology_profiles(
        [couple.get("partner1_id"), couple.get("partner2_id")]
    )
    previous = SupabaseClient.fetch_recent_question_texts(
        couple["id"], limit=settings.RECENT_QUESTIONS_LIMIT
    )

    topics = [
        p["primary_love_language"] for p in profiles if p.get("primary_love_language")
    ]

    return QuestionGenerationParams(
        couple_id=str(couple["id"]),
        relationship_stage=couple.get("relationship_status"),
        attachment_styles=[p["attachment_style"] for p in profiles if p.get("attachment_style")],
        # newest first from the database, prompt wants oldest first
        previous_questions=list(reversed(previous)),
        topics_of_interest=topics or None,
        category=category.value if category else None,
    )


def generate_and_insert_question(
    couple: dict[str, Any],
    category: QuestionCategory = DEFAULT_CATEGORY,
    difficulty_level: int = DEFAULT_DIFFICULTY,
) -> dict[str, Any]:
    """
    Generate question text for a couple and store it as today's question.

    Returns:
        Created daily_questions row
    """
    params = build_generation_params(couple, category)
    content = generate_daily_question(params)

    client = SupabaseClient.get_client()
    data = {
        "couple_id": str(couple["id"]),
        "content": content,
        "category": category.value,
        "difficulty_level": difficulty_level,
        "ai_generated": True,
        "date": utc_today().isoformat(),
        "created_at": utc_now_iso(),
    }

    try:
        response = client.table("daily_questions").insert(data).execute()
    except Exception as e:
        logger.error(f"Question creation error: {e}")
        raise SupabaseClientError(
            message=f"Failed to create question: {e}",
            code="CREATE_QUESTION_FAILED",
            details={"couple_id": str(couple["id"])},
        )

    if not response.data:
        raise SupabaseClientError(message="Insert returned no data", code="CREATE_QUESTION_FAILED")

    question = response.data[0]
    logger.info(f"Created question {question.get('id')} for couple {couple['id']}")
    return question


class QuestionService:
    """Service for daily question operations."""

    @staticmethod
    def list_questions(
        couple_id: UUID | str | None,
        user_id: UUID | str,
        on_date: date | None = None,
    ) -> list[dict[str, Any]]:
        """
        Questions for a couple on a date (UTC today by default), newest first.

        Raises:
            MissingFieldError: couple_id not given
            CoupleNotFoundError: user isn't a partner in the couple
        """
        couple = _require_couple(couple_id, user_id)
        client = SupabaseClient.get_client()
        day = (on_date or utc_today()).isoformat()

        try:
            response = (
                client.table("daily_questions")
                .select("*")
                .eq("couple_id", str(couple["id"]))
                .eq("date", day)
                .order("created_at", desc=True)
                .execute()
            )
            return response.data or []
        except Exception as e:
            logger.error(f"Questions fetch error: {e}")
            raise SupabaseClientError(
                message=f"Failed to fetch questions: {e}",
                code="FETCH_QUESTIONS_FAILED",
            )

    @staticmethod
    def create_question(user_id: UUID | str, data: QuestionCreate) -> dict[str, Any]:
        """Generate and store a new question with the requested category."""
        couple = _require_couple(data.couple_id, user_id)
        return generate_and_insert_question(
            couple,
            category=data.category or DEFAULT_CATEGORY,
            difficulty_level=data.difficulty_level or DEFAULT_DIFFICULTY,
        )

    @staticmethod
    def get_daily_question(
        couple_id: UUID | str | None,
        user_id: UUID | str,
    ) -> tuple[dict[str, Any], list[dict[str, Any]]]:
        """
        Today's question for the couple, generating it on first request.

        Returns:
            (question, responses to it the user may see)
        """
        couple = _require_couple(couple_id, user_id)
        client = SupabaseClient.get_client()
        couple_id_str = normalize_uuid(couple["id"])

        try:
            response = (
                client.table("daily_questions")
                .select("*")
                .eq("couple_id", couple_id_str)
                .eq("date", utc_today().isoformat())
                .order("created_at", desc=True)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Question fetch error: {e}")
            raise SupabaseClientError(
                message=f"Failed to fetch daily question: {e}",
                code="FETCH_QUESTION_FAILED",
            )

        if response.data:
            question = response.data[0]
        else:
            logger.info(f"No question yet today for couple {couple_id_str}, generating")
            question = generate_and_insert_question(couple)

        return question, _fetch_responses(question["id"], normalize_uuid(user_id))


def _fetch_responses(question_id: str, user_id: str) -> list[dict[str, Any]]:
    client = SupabaseClient.get_client()

    try:
        response = (
            client.table("responses")
            .select("*")
            .eq("question_id", question_id)
            .execute()
        )
        return visible_responses(response.data or [], user_id)
    except Exception as e:
        logger.error(f"Responses fetch error for question {question_id}: {e}")
        return []
