# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Registration goes through this API (so the users row is created with it).
# Sign-in happens client-side against Supabase Auth; the resulting access
# token is then sent as a Bearer token to every other endpoint.
# =============================================================================

import logging

from fastapi import APIRouter, Depends, status

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser, RegisterRequest, RegisterResponse, UserResponse
from core.services.user_service import UserService
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest) -> RegisterResponse:
    """
    Create an account and its public user profile.

    Raises:
        400: Missing field, weak password, or sign-up rejected
        500: Profile row could not be created
    """
    result = UserService.register(request.email, request.password, request.display_name)
    return RegisterResponse(user=result["user"], session=result["session"])


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    user: AuthUser = Depends(get_current_user)
) -> UserResponse:
    """
    Get the current user's profile.

    Falls back to the token claims when the users row doesn't exist yet.
    """
    try:
        profile = SupabaseClient.fetch_user(user.id)
    except Exception as e:
        logger.warning(f"Could not fetch user profile: {e}")
        profile = None

    if profile:
        return UserResponse(**profile)

    return UserResponse(id=user.id, email=user.email, display_name=user.display_name)


@router.get("/verify")
async def verify_token(
    user: AuthUser = Depends(get_current_user)
) -> dict:
    """Confirm that the Bearer token is valid."""
    return {
        "valid": True,
        "user_id": str(user.id),
        "email": user.email,
    }
