# =============================================================================
# app/routers/invitations.py - Partner Invitation Endpoints
# =============================================================================

from fastapi import APIRouter, Depends, status

from app.auth import AuthUser, get_current_user
from core.models.invitation import InvitationAccept, InvitationCreate, InvitationPreview
from core.services.invitation_service import InvitationService

router = APIRouter()


@router.get("")
async def list_invitations(user: AuthUser = Depends(get_current_user)):
    """Invitations the user has sent, newest first."""
    return {"invitations": InvitationService.list_invitations(user.id)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_invitation(
    request: InvitationCreate | None = None,
    user: AuthUser = Depends(get_current_user),
):
    """
    Create an invitation code for a partner.

    The code expires after INVITATION_EXPIRY_DAYS (7 by default).
    """
    email = request.email if request else None
    return {"invitation": InvitationService.create_invitation(user.id, email)}


@router.post("/accept", status_code=status.HTTP_201_CREATED)
async def accept_invitation(
    request: InvitationAccept,
    user: AuthUser = Depends(get_current_user),
):
    """
    Accept an invitation and form a couple with the inviter.

    Raises:
        400: Missing code, expired, own invitation, or already in a couple
        404: No pending invitation with this code
    """
    couple = InvitationService.accept_invitation(user.id, request.invite_code)
    return {"message": "Invitation accepted successfully", "couple": couple}


@router.get("/{invite_code}", response_model=InvitationPreview)
async def preview_invitation(
    invite_code: str,
    user: AuthUser = Depends(get_current_user),
):
    """Who sent the invitation and when it expires."""
    return InvitationService.get_preview(invite_code)
