# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for registration and the authenticated user.
# =============================================================================

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a Supabase JWT.

    Only what the token itself carries; no database lookup.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID
    email: str | None = None
    display_name: str | None = None


class RegisterRequest(BaseModel):
    """
    Sign-up body.

    Fields are optional at the schema level so a missing one is reported
    as a single 400 with a clear message. Accepts "displayName" too.

    Example:
        {
            "email": "alex@example.com",
            "password": "Sunrise2024",
            "display_name": "Alex"
        }
    """
    model_config = ConfigDict(populate_by_name=True)

    email: str | None = Field(default=None, max_length=320)
    password: str | None = Field(default=None, max_length=128)
    display_name: str | None = Field(default=None, max_length=100, alias="displayName")


class RegisterResponse(BaseModel):
    message: str = "Registration successful"
    user: dict[str, Any] | None = None
    session: dict[str, Any] | None = None


class UserResponse(BaseModel):
    """Row from public.users (or token claims if the row is missing)."""
    id: UUID
    email: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
