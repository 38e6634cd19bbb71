# =============================================================================
# core/services/response_service.py - Question Responses & Crisis Logging
# =============================================================================
# Order of checks when a partner answers a question:
#   1. question exists (404) and user is a partner in its couple (403)
#   2. moderation: flagged content is rejected (400)
#   3. crisis detection: a detected crisis is logged to crisis_events as an
#      anonymous hash plus severity (logging failures don't block the answer)
#   4. the response row is inserted
# =============================================================================

import hashlib
import logging
import time
from typing import Any
from uuid import UUID

from agents.models.coach import CrisisDetectionResult
from agents.relationship_coach import detect_crisis, moderate_content
from app.exceptions import (
    AccessDeniedError,
    ContentFlaggedError,
    MissingFieldError,
    QuestionNotFoundError,
)
from core.models.crisis import CrisisSeverity
from core.models.question import ResponseCreate
from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import normalize_uuid, utc_now_iso
from lib.validation import sanitize_input

logger = logging.getLogger(__name__)


def crisis_event_hash(content: str, epoch_ms: int | None = None) -> str:
    """sha256 of the content plus a millisecond timestamp, hex encoded."""
    if epoch_ms is None:
        epoch_ms = int(time.time() * 1000)
    return hashlib.sha256(f"{content}{epoch_ms}".encode("utf-8")).hexdigest()


def _is_partner(couple: dict[str, Any] | None, user_id: str) -> bool:
    if not couple:
        return False
    return user_id in (str(couple.get("partner1_id")), str(couple.get("partner2_id")))


def visible_responses(rows: list[dict[str, Any]], user_id: str) -> list[dict[str, Any]]:
    """Drop the other partner's private responses."""
    return [r for r in rows if not r.get("is_private") or str(r.get("user_id")) == user_id]


def _question_for_partner(question_id: UUID | str, user_id: str) -> dict[str, Any]:
    question = SupabaseClient.fetch_question_with_couple(question_id)
    if not question:
        raise QuestionNotFoundError(str(question_id))

    if not _is_partner(question.get("couples"), user_id):
        raise AccessDeniedError("question", str(question_id))

    return question


def log_crisis_event(couple_id: str, content: str, result: CrisisDetectionResult) -> CrisisSeverity:
    """
    Record a detected crisis without storing the content itself.

    Returns:
        Severity derived from the detector confidence
    """
    severity = CrisisSeverity.from_confidence(result.confidence)
    now = utc_now_iso()
    client = SupabaseClient.get_client()

    try:
        client.table("crisis_events").insert({
            "couple_id": couple_id,
            "event_hash": crisis_event_hash(content),
            "severity": severity.value,
            "timestamp": now,
            "created_at": now,
        }).execute()
        logger.warning(f"Crisis event logged for couple {couple_id} (severity={severity.value})")
    except Exception as e:
        logger.error(f"Crisis event logging error for couple {couple_id}: {e}")

    return severity


class ResponseService:
    """Service for reading and writing answers to daily questions."""

    @staticmethod
    def list_responses(question_id: UUID | str | None, user_id: UUID | str) -> list[dict[str, Any]]:
        """
        Responses to a question, oldest first, with the author embedded.

        The partner's private responses are left out.

        Raises:
            MissingFieldError: question_id not given
            QuestionNotFoundError: unknown question
            AccessDeniedError: user isn't a partner in the question's couple
        """
        if not question_id:
            raise MissingFieldError("Question ID is required", ["question_id"])

        user_id_str = normalize_uuid(user_id)
        _question_for_partner(question_id, user_id_str)
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table("responses")
                .select("*, users(*)")
                .eq("question_id", normalize_uuid(question_id))
                .order("created_at", desc=False)
                .execute()
            )
        except Exception as e:
            logger.error(f"Responses fetch error: {e}")
            raise SupabaseClientError(
                message=f"Failed to fetch responses: {e}",
                code="FETCH_RESPONSES_FAILED",
            )

        return visible_responses(response.data or [], user_id_str)

    @staticmethod
    def create_response(user_id: UUID | str, data: ResponseCreate) -> tuple[dict[str, Any], CrisisDetectionResult]:
        """
        Store a partner's answer after moderation and crisis screening.

        Returns:
            (created response row, crisis detection result)

        Raises:
            MissingFieldError: question_id or content missing/blank
            QuestionNotFoundError / AccessDeniedError: see list_responses
            ContentFlaggedError: moderation flagged the content
        """
        content = sanitize_input(data.content or "")
        if not data.question_id or not content:
            raise MissingFieldError(
                "Question ID and content are required",
                [name for name, value in (("question_id", data.question_id), ("content", content)) if not value],
            )

        user_id_str = normalize_uuid(user_id)
        question = _question_for_partner(data.question_id, user_id_str)
        couple = question["couples"]

        if moderate_content(content):
            logger.info(f"Flagged response rejected for question {data.question_id}")
            raise ContentFlaggedError()

        crisis = detect_crisis(content, context=question.get("content"))
        if crisis.is_crisis_detected:
            log_crisis_event(str(couple["id"]), content, crisis)

        now = utc_now_iso()
        client = SupabaseClient.get_client()
        row = {
            "question_id": str(data.question_id),
            "user_id": user_id_str,
            "content": content,
            "is_private": data.is_private,
            "timestamp": now,
            "created_at": now,
        }

        try:
            response = client.table("responses").insert(row).execute()
        except Exception as e:
            logger.error(f"Response creation error: {e}")
            raise SupabaseClientError(
                message=f"Failed to create response: {e}",
                code="CREATE_RESPONSE_FAILED",
            )

        if not response.data:
            raise SupabaseClientError(message="Insert returned no data", code="CREATE_RESPONSE_FAILED")

        return response.data[0], crisis
