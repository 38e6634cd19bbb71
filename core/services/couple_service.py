# =============================================================================
# core/services/couple_service.py - Couple Business Logic
# =============================================================================
# Handles couple CRUD, the dashboard summary and health score updates.
# Every read/write is scoped to couples the requesting user belongs to;
# a couple the user is not part of is reported as "not found".
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from app.exceptions import CoupleNotFoundError, InvalidPartnerError, MissingFieldError
from core.models.couple import (
    DEFAULT_HEALTH_SCORE,
    CoupleCreate,
    CoupleSummary,
    CoupleUpdate,
    HealthScoreRequest,
    RelationshipDurationResponse,
)
from lib.relationship import (
    calculate_health_score,
    calculate_relationship_duration,
    get_streak_message,
)
from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import normalize_uuid, utc_now_iso

logger = logging.getLogger(__name__)


def new_couple_row(partner1_id: str | UUID, partner2_id: str | UUID, **extra: Any) -> dict[str, Any]:
    """
    Row for a freshly formed couple with default score and streaks.

    Shared by direct creation and invitation acceptance.
    """
    now = utc_now_iso()
    row = {
        "partner1_id": normalize_uuid(partner1_id),
        "partner2_id": normalize_uuid(partner2_id),
        "health_score": DEFAULT_HEALTH_SCORE,
        "current_streak": 0,
        "longest_streak": 0,
        "created_at": now,
        "updated_at": now,
    }
    row.update({k: v for k, v in extra.items() if v is not None})
    return row


def insert_couple(row: dict[str, Any]) -> dict[str, Any]:
    client = SupabaseClient.get_client()

    try:
        response = client.table("couples").insert(row).execute()
    except Exception as e:
        logger.error(f"Couple creation error: {e}")
        raise SupabaseClientError(
            message=f"Failed to create couple: {e}",
            code="CREATE_COUPLE_FAILED",
        )

    if not response.data:
        raise SupabaseClientError(message="Insert returned no data", code="CREATE_COUPLE_FAILED")

    couple = response.data[0]
    logger.info(f"Created couple: {couple.get('id')} ({row['partner1_id']} + {row['partner2_id']})")
    return couple


class CoupleService:
    """Service for couple operations."""

    @staticmethod
    def list_couples(user_id: UUID | str) -> list[dict[str, Any]]:
        """All couples the user is part of, with both partners embedded."""
        return SupabaseClient.fetch_couples_for_user(user_id)

    @staticmethod
    def create_couple(user_id: UUID | str, data: CoupleCreate) -> dict[str, Any]:
        """
        Create a couple with the current user as partner1.

        Raises:
            MissingFieldError: partner2_id not given
            InvalidPartnerError: user tried to pair with themselves
        """
        if data.partner2_id is None:
            raise MissingFieldError("Partner ID is required", ["partner2_id"])

        if str(data.partner2_id) == str(user_id):
            raise InvalidPartnerError()

        row = new_couple_row(
            user_id,
            data.partner2_id,
            relationship_start_date=(
                data.relationship_start_date.isoformat() if data.relationship_start_date else None
            ),
            relationship_status=(
                data.relationship_status.value if data.relationship_status else None
            ),
        )
        return insert_couple(row)

    @staticmethod
    def get_couple(couple_id: UUID | str, user_id: UUID | str) -> dict[str, Any]:
        """
        Get a couple (partners embedded) the user belongs to.

        Raises:
            CoupleNotFoundError: missing or user isn't a member
        """
        couple = SupabaseClient.fetch_couple_for_member(couple_id, user_id, with_partners=True)
        if not couple:
            raise CoupleNotFoundError(str(couple_id))
        return couple

    @staticmethod
    def update_couple(
        couple_id: UUID | str,
        user_id: UUID | str,
        data: CoupleUpdate,
    ) -> dict[str, Any]:
        """
        Apply a partial update and stamp updated_at.

        Raises:
            CoupleNotFoundError: missing or user isn't a member
        """
        if not SupabaseClient.fetch_couple_for_member(couple_id, user_id):
            raise CoupleNotFoundError(str(couple_id))

        updates = data.model_dump(mode="json", exclude_unset=True)
        updates["updated_at"] = utc_now_iso()
        return _write_couple(couple_id, updates)

    @staticmethod
    def get_summary(couple_id: UUID | str, user_id: UUID | str) -> CoupleSummary:
        """Health score, streaks and relationship duration for the dashboard."""
        couple = SupabaseClient.fetch_couple_for_member(couple_id, user_id)
        if not couple:
            raise CoupleNotFoundError(str(couple_id))

        current_streak = couple.get("current_streak") or 0
        duration = None
        if couple.get("relationship_start_date"):
            d = calculate_relationship_duration(couple["relationship_start_date"])
            duration = RelationshipDurationResponse(
                years=d.years, months=d.months, days=d.days, total_days=d.total_days
            )

        return CoupleSummary(
            couple_id=str(couple["id"]),
            health_score=couple.get("health_score", DEFAULT_HEALTH_SCORE),
            current_streak=current_streak,
            longest_streak=couple.get("longest_streak") or 0,
            streak_message=get_streak_message(current_streak),
            relationship_status=couple.get("relationship_status"),
            relationship_duration=duration,
        )

    @staticmethod
    def update_health_score(
        couple_id: UUID | str,
        user_id: UUID | str,
        scores: HealthScoreRequest,
    ) -> tuple[int, dict[str, Any]]:
        """
        Compute the weighted health score and persist it on the couple.

        Returns:
            (health_score, updated couple row)
        """
        if not SupabaseClient.fetch_couple_for_member(couple_id, user_id):
            raise CoupleNotFoundError(str(couple_id))

        score = calculate_health_score(
            scores.communication_score,
            scores.trust_score,
            scores.satisfaction_score,
            scores.engagement_score,
        )
        couple = _write_couple(couple_id, {"health_score": score, "updated_at": utc_now_iso()})
        logger.info(f"Health score for couple {couple_id} set to {score}")
        return score, couple


def _write_couple(couple_id: UUID | str, updates: dict[str, Any]) -> dict[str, Any]:
    client = SupabaseClient.get_client()
    couple_id_str = normalize_uuid(couple_id)

    try:
        response = (
            client.table("couples")
            .update(updates)
            .eq("id", couple_id_str)
            .execute()
        )
    except Exception as e:
        logger.error(f"Couple update error: {e}")
        raise SupabaseClientError(
            message=f"Failed to update couple: {e}",
            code="UPDATE_COUPLE_FAILED",
            details={"couple_id": couple_id_str},
        )

    if not response.data:
        raise CoupleNotFoundError(couple_id_str)
    return response.data[0]
