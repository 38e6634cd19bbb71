# =============================================================================
# core/services/psychology_service.py - Psychology Profiles & Assessments
# =============================================================================
# - Profiles: one row per user in user_psychology_profiles (upsert on user_id)
# - Assessments: stored questionnaire results in psychology_assessments
# - Scoring: deterministic scorers from core/assessments
# - Compatibility: fixed matrices, optionally narrated by the AI coach
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from agents.psychology_insights import generate_compatibility_insights
from app.exceptions import (
    CoupleNotFoundError,
    IncompleteProfilesError,
    MissingFieldError,
    PsychologyProfileNotFoundError,
    UnknownAssessmentError,
)
from core.assessments import (
    SCORERS,
    SUPPORTED_ASSESSMENTS,
    analyze_text,
    get_attachment_compatibility,
    get_love_language_compatibility,
)
from core.models.psychology import (
    ACTScoreRequest,
    AssessmentCreate,
    LikertScoreRequest,
    LoveLanguageScoreRequest,
    PsychologyProfileCreate,
    PsychologyProfileUpdate,
)
from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import normalize_uuid, utc_now_iso

logger = logging.getLogger(__name__)

ASSESSMENT_VERSION = "1.0"

# Every other kind takes 1-7 answers only
SCORE_REQUESTS = {
    "love_languages": LoveLanguageScoreRequest,
    "act": ACTScoreRequest,
}


def _scorer(kind: str):
    if kind not in SCORERS:
        raise UnknownAssessmentError(kind, SUPPORTED_ASSESSMENTS)
    return SCORERS[kind]


def serialize_questions(kind: str) -> list[dict[str, Any]]:
    """Question bank for an assessment kind as plain dicts."""
    questions, _ = _scorer(kind)
    return [q.to_dict() for q in questions]


class PsychologyService:
    """Service for psychology profiles, assessments and compatibility."""

    # -------------------------------------------------------------------------
    # Profiles
    # -------------------------------------------------------------------------

    @staticmethod
    def get_profile(user_id: UUID | str) -> dict[str, Any] | None:
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table("user_psychology_profiles")
                .select("*")
                .eq("user_id", normalize_uuid(user_id))
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Profile fetch error: {e}")
            raise SupabaseClientError(
                message=f"Failed to fetch profile: {e}",
                code="FETCH_PROFILE_FAILED",
            )

        return response.data[0] if response.data else None

    @staticmethod
    def upsert_profile(user_id: UUID | str, data: PsychologyProfileCreate) -> dict[str, Any]:
        """
        Create or replace the user's profile.

        Raises:
            MissingFieldError: attachment_style or primary_love_language missing
        """
        missing = [
            name for name in ("attachment_style", "primary_love_language")
            if getattr(data, name) is None
        ]
        if missing:
            raise MissingFieldError(
                "Attachment style and primary love language are required", missing
            )

        now = utc_now_iso()
        row = data.model_dump(mode="json", exclude_none=True)
        row.update({"user_id": normalize_uuid(user_id), "created_at": now, "updated_at": now})

        client = SupabaseClient.get_client()
        try:
            response = (
                client.table("user_psychology_profiles")
                .upsert(row, on_conflict="user_id")
                .execute()
            )
        except Exception as e:
            logger.error(f"Profile creation error: {e}")
            raise SupabaseClientError(
                message=f"Failed to create profile: {e}",
                code="CREATE_PROFILE_FAILED",
            )

        if not response.data:
            raise SupabaseClientError(message="Upsert returned no data", code="CREATE_PROFILE_FAILED")

        logger.info(f"Psychology profile saved for user {user_id}")
        return response.data[0]

    @staticmethod
    def update_profile(user_id: UUID | str, data: PsychologyProfileUpdate) -> dict[str, Any]:
        """
        Partially update the user's profile.

        Raises:
            PsychologyProfileNotFoundError: user has no profile yet
        """
        updates = data.model_dump(mode="json", exclude_unset=True)
        updates["updated_at"] = utc_now_iso()
        user_id_str = normalize_uuid(user_id)

        client = SupabaseClient.get_client()
        try:
            response = (
                client.table("user_psychology_profiles")
                .update(updates)
                .eq("user_id", user_id_str)
                .execute()
            )
        except Exception as e:
            logger.error(f"Profile update error: {e}")
            raise SupabaseClientError(
                message=f"Failed to update profile: {e}",
                code="UPDATE_PROFILE_FAILED",
            )

        if not response.data:
            raise PsychologyProfileNotFoundError(user_id_str)
        return response.data[0]

    # -------------------------------------------------------------------------
    # Assessments
    # -------------------------------------------------------------------------

    @staticmethod
    def list_assessments(user_id: UUID | str) -> list[dict[str, Any]]:
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table("psychology_assessments")
                .select("*")
                .eq("user_id", normalize_uuid(user_id))
                .order("created_at", desc=True)
                .execute()
            )
            return response.data or []
        except Exception as e:
            logger.error(f"Assessments fetch error: {e}")
            raise SupabaseClientError(
                message=f"Failed to fetch assessments: {e}",
                code="FETCH_ASSESSMENTS_FAILED",
            )

    @staticmethod
    def create_assessment(user_id: UUID | str, data: AssessmentCreate) -> dict[str, Any]:
        """
        Store a completed assessment as version 1.0, marked complete.

        Raises:
            MissingFieldError: assessment_type or questions_responses missing
        """
        if data.assessment_type is None or not data.questions_responses:
            missing = [
                name for name, value in (
                    ("assessment_type", data.assessment_type),
                    ("questions_responses", data.questions_responses),
                )
                if not value
            ]
            raise MissingFieldError("Assessment type and responses are required", missing)

        now = utc_now_iso()
        row = {
            "user_id": normalize_uuid(user_id),
            "assessment_type": data.assessment_type.value,
            "questions_responses": data.questions_responses,
            "raw_scores": data.raw_scores,
            "interpreted_results": data.interpreted_results,
            "assessment_version": ASSESSMENT_VERSION,
            "is_complete": True,
            "created_at": now,
            "updated_at": now,
        }

        client = SupabaseClient.get_client()
        try:
            response = client.table("psychology_assessments").insert(row).execute()
        except Exception as e:
            logger.error(f"Assessment creation error: {e}")
            raise SupabaseClientError(
                message=f"Failed to create assessment: {e}",
                code="CREATE_ASSESSMENT_FAILED",
            )

        if not response.data:
            raise SupabaseClientError(message="Insert returned no data", code="CREATE_ASSESSMENT_FAILED")

        return response.data[0]

    @staticmethod
    def get_questions(kind: str) -> list[dict[str, Any]]:
        """
        Raises:
            UnknownAssessmentError: kind has no built-in question bank
        """
        return serialize_questions(kind)

    @staticmethod
    def score_assessment(
        user_id: UUID | str,
        kind: str,
        body: dict[str, Any],
    ) -> tuple[dict[str, Any], dict[str, Any]]:
        """
        Score a questionnaire and store it as an assessment.

        Args:
            user_id: The user who answered
            kind: One of SUPPORTED_ASSESSMENTS
            body: Request body, {"responses": {...}} (ACT also takes
                "value_rankings")

        Returns:
            (results dict, stored assessment row)

        Raises:
            UnknownAssessmentError: unsupported kind
            pydantic.ValidationError: responses have the wrong shape
        """
        _, score = _scorer(kind)
        request = SCORE_REQUESTS.get(kind, LikertScoreRequest).model_validate(body)
        result = score(**request.model_dump(exclude_none=True))
        results = result.to_dict()

        assessment = PsychologyService.create_assessment(
            user_id,
            AssessmentCreate(
                assessment_type=kind,
                questions_responses=request.responses,
                raw_scores=result.raw_scores,
                interpreted_results=results,
            ),
        )
        logger.info(f"Scored {kind} assessment for user {user_id}")
        return results, assessment

    @staticmethod
    def analyze_four_horsemen(text: str) -> dict[str, Any]:
        """
        Check conflict text for Gottman's Four Horsemen.

        Nothing is stored; the text only passes through the pattern check.
        """
        result = analyze_text(text)
        if result["horsemen"]:
            logger.debug(f"Four Horsemen found: {', '.join(result['horsemen'])}")
        return result

    # -------------------------------------------------------------------------
    # Compatibility
    # -------------------------------------------------------------------------

    @staticmethod
    def get_compatibility(
        couple_id: UUID | str | None,
        user_id: UUID | str,
        include_insights: bool = False,
    ) -> dict[str, Any]:
        """
        Attachment and love-language compatibility for a couple.

        Raises:
            MissingFieldError: couple_id not given
            CoupleNotFoundError: user isn't a partner in the couple
            IncompleteProfilesError: a partner has no usable profile
        """
        if not couple_id:
            raise MissingFieldError("Couple ID is required", ["couple_id"])

        couple = SupabaseClient.fetch_couple_for_member(couple_id, user_id)
        if not couple:
            raise CoupleNotFoundError(str(couple_id))

        partner_ids = [str(couple.get("partner1_id")), str(couple.get("partner2_id"))]
        by_user = {
            str(p["user_id"]): p
            for p in SupabaseClient.fetch_psychology_profiles(partner_ids)
        }
        profiles = [by_user.get(pid) for pid in partner_ids]

        if not all(
            p and p.get("attachment_style") and p.get("primary_love_language")
            for p in profiles
        ):
            raise IncompleteProfilesError(str(couple_id))

        first, second = profiles
        result = {
            "couple_id": str(couple["id"]),
            "attachment": get_attachment_compatibility(
                first["attachment_style"], second["attachment_style"]
            ),
            "love_languages": get_love_language_compatibility(
                first["primary_love_language"], second["primary_love_language"]
            ),
        }

        if include_insights:
            insights = generate_compatibility_insights(first, second)
            result["insights"] = insights.model_dump()

        return result
