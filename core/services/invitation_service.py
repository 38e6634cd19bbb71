# =============================================================================
# core/services/invitation_service.py - Partner Invitation Lifecycle
# =============================================================================
# An invitation is created by one partner and accepted by the other using
# its 8-character code. Status only ever moves forward:
#
#   pending -> accepted   (a couple is formed)
#   pending -> expired    (someone tried to use it after expires_at)
#
# Accepting creates the couple first and then marks the invitation; if the
# second write fails the couple still stands and the error is only logged.
# =============================================================================

import logging
from datetime import timedelta
from typing import Any
from uuid import UUID

from app.config import settings
from app.exceptions import (
    AlreadyCoupledError,
    InvalidInviteCodeError,
    InvitationExpiredError,
    InvitationNotFoundError,
    MissingFieldError,
    OwnInvitationError,
)
from core.models.enums import InvitationStatus
from core.models.invitation import InvitationPreview
from core.services.couple_service import insert_couple, new_couple_row
from lib.supabase_client import SupabaseClient, SupabaseClientError, member_filter
from lib.utils import normalize_uuid, parse_timestamp, utc_now, utc_now_iso
from lib.validation import generate_invite_code, validate_invite_code

logger = logging.getLogger(__name__)

INVITATION_WITH_INVITER = "*, inviter:users!invitations_inviter_id_fkey(*)"


class InvitationService:
    """Service for creating, previewing and accepting partner invitations."""

    @staticmethod
    def list_invitations(user_id: UUID | str) -> list[dict[str, Any]]:
        """Invitations sent by the user, newest first."""
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table("invitations")
                .select(INVITATION_WITH_INVITER)
                .eq("inviter_id", normalize_uuid(user_id))
                .order("created_at", desc=True)
                .execute()
            )
            return response.data or []
        except Exception as e:
            logger.error(f"Invitations fetch error: {e}")
            raise SupabaseClientError(
                message=f"Failed to fetch invitations: {e}",
                code="FETCH_INVITATIONS_FAILED",
            )

    @staticmethod
    def create_invitation(user_id: UUID | str, email: str | None = None) -> dict[str, Any]:
        """
        Create a pending invitation with a fresh invite code.

        Args:
            user_id: The inviting user
            email: Optional address of the partner being invited

        Returns:
            Created invitation dict
        """
        client = SupabaseClient.get_client()
        expires_at = utc_now() + timedelta(days=settings.INVITATION_EXPIRY_DAYS)

        data = {
            "inviter_id": normalize_uuid(user_id),
            "invite_code": generate_invite_code(),
            "email": email.strip() if email else None,
            "status": InvitationStatus.PENDING.value,
            "expires_at": expires_at.isoformat(),
            "created_at": utc_now_iso(),
        }

        try:
            response = client.table("invitations").insert(data).execute()
        except Exception as e:
            logger.error(f"Invitation creation error: {e}")
            raise SupabaseClientError(
                message=f"Failed to create invitation: {e}",
                code="CREATE_INVITATION_FAILED",
            )

        if not response.data:
            raise SupabaseClientError(message="Insert returned no data", code="CREATE_INVITATION_FAILED")

        invitation = response.data[0]
        logger.info(f"Created invitation {invitation.get('id')} for inviter {user_id}")
        return invitation

    @staticmethod
    def get_preview(invite_code: str) -> InvitationPreview:
        """
        Public details of a pending invitation for the invite landing page.

        Raises:
            InvalidInviteCodeError: code is not 8 characters of A-Z/0-9
            InvitationNotFoundError: no pending invitation with that code
            InvitationExpiredError: pending but past expires_at
        """
        code = invite_code.strip().upper()
        if not validate_invite_code(code):
            raise InvalidInviteCodeError(invite_code)

        invitation = _fetch_pending(code)
        _ensure_not_expired(invitation)

        inviter = invitation.get("inviter") or {}
        return InvitationPreview(
            invite_code=invitation["invite_code"],
            status=invitation["status"],
            expires_at=invitation["expires_at"],
            inviter_display_name=inviter.get("display_name"),
        )

    @staticmethod
    def accept_invitation(user_id: UUID | str, invite_code: str | None) -> dict[str, Any]:
        """
        Accept an invitation and form a couple.

        The inviter becomes partner1 and the accepting user partner2.

        Args:
            user_id: The accepting user
            invite_code: Code shared by the inviter

        Returns:
            The newly created couple

        Raises:
            MissingFieldError: no code given
            InvitationNotFoundError: no pending invitation with that code
            InvitationExpiredError: invitation is past expires_at (it is
                marked expired as a side effect)
            OwnInvitationError: the inviter tried to accept their own code
            AlreadyCoupledError: accepting user is already in a couple
        """
        if not invite_code or not invite_code.strip():
            raise MissingFieldError("Invite code is required", ["invite_code"])

        user_id_str = normalize_uuid(user_id)
        invitation = _fetch_pending(invite_code.strip().upper())
        _ensure_not_expired(invitation)

        if str(invitation["inviter_id"]) == user_id_str:
            raise OwnInvitationError()

        if _user_has_couple(user_id_str):
            raise AlreadyCoupledError(user_id_str)

        couple = insert_couple(new_couple_row(invitation["inviter_id"], user_id_str))

        try:
            _set_status(
                invitation["id"],
                InvitationStatus.ACCEPTED,
                couple_id=couple.get("id"),
            )
        except Exception as e:
            logger.error(f"Invitation update error for {invitation['id']}: {e}")

        logger.info(f"Invitation {invitation['id']} accepted by {user_id_str}")
        return couple


# =============================================================================
# Helpers
# =============================================================================

def _fetch_pending(invite_code: str) -> dict[str, Any]:
    client = SupabaseClient.get_client()

    try:
        response = (
            client.table("invitations")
            .select(INVITATION_WITH_INVITER)
            .eq("invite_code", invite_code)
            .eq("status", InvitationStatus.PENDING.value)
            .limit(1)
            .execute()
        )
    except Exception as e:
        logger.warning(f"Invitation lookup failed for {invite_code}: {e}")
        raise InvitationNotFoundError(invite_code)

    if not response.data:
        raise InvitationNotFoundError(invite_code)
    return response.data[0]


def _ensure_not_expired(invitation: dict[str, Any]) -> None:
    if parse_timestamp(invitation["expires_at"]) >= utc_now():
        return

    try:
        _set_status(invitation["id"], InvitationStatus.EXPIRED)
    except Exception as e:
        logger.error(f"Failed to mark invitation {invitation['id']} expired: {e}")
    raise InvitationExpiredError(invitation["invite_code"])


def _set_status(invitation_id: str, status: InvitationStatus, **extra: Any) -> None:
    client = SupabaseClient.get_client()
    (
        client.table("invitations")
        .update({"status": status.value, **extra})
        .eq("id", invitation_id)
        .eq("status", InvitationStatus.PENDING.value)
        .execute()
    )


def _user_has_couple(user_id: str) -> bool:
    client = SupabaseClient.get_client()

    try:
        response = (
            client.table("couples")
            .select("id")
            .or_(member_filter(user_id))
            .limit(1)
            .execute()
        )
    except Exception as e:
        raise SupabaseClientError(
            message=f"Failed to check existing couple: {e}",
            code="FETCH_COUPLES_FAILED",
            details={"user_id": user_id},
        )
    return bool(response.data)
