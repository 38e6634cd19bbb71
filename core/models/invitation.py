# =============================================================================
# core/models/invitation.py - Invitation Schemas
# =============================================================================
# Partner invitations carry a short invite code that the partner enters
# (or opens via /invite/{code}) to form the couple.
# =============================================================================

from pydantic import BaseModel, Field

from .enums import InvitationStatus


class InvitationCreate(BaseModel):
    """Optional email of the partner being invited (for display/reminders)."""
    email: str | None = Field(
        default=None,
        max_length=320,
        description="Partner's email address"
    )


class InvitationAccept(BaseModel):
    """
    Accept an invitation by code.

    invite_code is optional at the schema level so a missing code
    is reported as a 400 rather than a validation error.
    """
    invite_code: str | None = Field(
        default=None,
        description="8-character invite code shared by the inviter"
    )


class InvitationPreview(BaseModel):
    """
    Public view of a pending invitation for the invite landing page.

    Deliberately omits the invitee email and the inviter's user ID.
    """
    invite_code: str
    status: InvitationStatus
    expires_at: str
    inviter_display_name: str | None = None
