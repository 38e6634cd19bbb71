# =============================================================================
# core/services/user_service.py - Registration & User Profiles
# =============================================================================
# Sign-up goes through Supabase Auth; the public.users row is written here
# right after so the rest of the app can join on it.
# =============================================================================

import logging
from typing import Any

from app.exceptions import (
    MissingFieldError,
    ProfileCreationError,
    RegistrationError,
    WeakPasswordError,
)
from lib.supabase_client import SupabaseClient
from lib.utils import utc_now_iso
from lib.validation import password_problem, sanitize_input

logger = logging.getLogger(__name__)


def _dump(obj: Any) -> Any:
    """Serialize a gotrue model (or None) for a JSON response."""
    if obj is None:
        return None
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json")
    return obj


class UserService:
    """Service for user registration."""

    @staticmethod
    def register(email: str | None, password: str | None, display_name: str | None) -> dict[str, Any]:
        """
        Register a user with Supabase Auth and create their users row.

        Returns:
            {"user": ..., "session": ...} as returned by Supabase Auth

        Raises:
            MissingFieldError: email, password or display name missing
            WeakPasswordError: password fails the strength rules
            RegistrationError: Supabase Auth rejected the sign-up
            ProfileCreationError: the users row couldn't be written
        """
        email = (email or "").strip()
        display_name = sanitize_input(display_name or "")
        if not email or not password or not display_name:
            raise MissingFieldError(
                "Email, password, and display name are required",
                [
                    name for name, value in (
                        ("email", email),
                        ("password", password),
                        ("display_name", display_name),
                    )
                    if not value
                ],
            )

        problem = password_problem(password)
        if problem:
            raise WeakPasswordError(problem)

        client = SupabaseClient.get_client()

        try:
            auth_response = client.auth.sign_up({
                "email": email,
                "password": password,
                "options": {"data": {"display_name": display_name}},
            })
        except Exception as e:
            logger.warning(f"Sign-up rejected for {email}: {e}")
            raise RegistrationError(getattr(e, "message", None) or str(e))

        user = auth_response.user
        if user is not None:
            now = utc_now_iso()
            try:
                client.table("users").insert({
                    "id": str(user.id),
                    "email": user.email or email,
                    "display_name": display_name,
                    "created_at": now,
                    "updated_at": now,
                }).execute()
            except Exception as e:
                logger.error(f"Profile creation error for {user.id}: {e}")
                raise ProfileCreationError(str(user.id))

            logger.info(f"Registered user {user.id}")

        return {
            "user": _dump(user),
            "session": _dump(auth_response.session),
        }
