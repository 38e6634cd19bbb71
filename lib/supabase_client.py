# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and provides specialized read methods for:
# - Couples (with both partners embedded) and couple membership
# - Daily questions (with their couple embedded)
# - Psychology profiles for question personalization
#
# Writes stay in core/services where the business rules live.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   couple = SupabaseClient.fetch_couple_for_member(couple_id, user_id)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)

# PostgREST error code returned by .single() when no row matches
NO_ROWS_CODE = "PGRST116"

COUPLE_WITH_PARTNERS = (
    "*, "
    "partner1:users!couples_partner1_id_fkey(*), "
    "partner2:users!couples_partner2_id_fkey(*)"
)


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Carries a code and an optional suggestion so callers can log
    something more useful than the raw PostgREST message.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


def is_no_rows_error(error: Exception) -> bool:
    """True if a PostgREST error means '.single() matched zero rows'."""
    return NO_ROWS_CODE in str(error)


def member_filter(user_id: str | UUID) -> str:
    """PostgREST `or` filter matching couples where the user is either partner."""
    return f"partner1_id.eq.{user_id},partner2_id.eq.{user_id}"


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        couple = SupabaseClient.fetch_couple_for_member(couple_id, user.id)
        if couple is None:
            raise CoupleNotFoundError(couple_id)
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses the service_role key, so row-level security is bypassed and
        membership checks are done explicitly in the service layer.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_user(cls, user_id: str | UUID) -> dict[str, Any] | None:
        """
        Fetch a row from public.users.

        Returns:
            User dict, or None if the row doesn't exist yet
        """
        client = cls.get_client()
        user_id_str = normalize_uuid(user_id)

        try:
            response = (
                client.table("users")
                .select("*")
                .eq("id", user_id_str)
                .single()
                .execute()
            )
            return response.data

        except Exception as e:
            if is_no_rows_error(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch user: {e}",
                code="FETCH_USER_FAILED",
                details={"user_id": user_id_str}
            )

    # -------------------------------------------------------------------------
    # Couples
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_couple_for_member(
        cls,
        couple_id: str | UUID,
        user_id: str | UUID,
        with_partners: bool = False,
    ) -> dict[str, Any] | None:
        """
        Fetch a couple only if the user is one of its partners.

        Args:
            couple_id: The couple UUID
            user_id: The requesting user's UUID
            with_partners: Embed partner1/partner2 user rows

        Returns:
            Couple dict, or None if it doesn't exist or the user isn't a member
        """
        client = cls.get_client()
        couple_id_str = normalize_uuid(couple_id)
        user_id_str = normalize_uuid(user_id)

        try:
            response = (
                client.table("couples")
                .select(COUPLE_WITH_PARTNERS if with_partners else "*")
                .eq("id", couple_id_str)
                .or_(member_filter(user_id_str))
                .single()
                .execute()
            )
            return response.data

        except Exception as e:
            if is_no_rows_error(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch couple: {e}",
                code="FETCH_COUPLE_FAILED",
                suggestion="Check that the couple_id is a valid UUID",
                details={"couple_id": couple_id_str}
            )

    @classmethod
    def fetch_couples_for_user(cls, user_id: str | UUID) -> list[dict[str, Any]]:
        """
        Fetch every couple the user belongs to, partners embedded.
        """
        client = cls.get_client()
        user_id_str = normalize_uuid(user_id)

        try:
            response = (
                client.table("couples")
                .select(COUPLE_WITH_PARTNERS)
                .or_(member_filter(user_id_str))
                .execute()
            )
            return response.data or []

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch couples: {e}",
                code="FETCH_COUPLES_FAILED",
                details={"user_id": user_id_str}
            )

    # -------------------------------------------------------------------------
    # Questions
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_question_with_couple(cls, question_id: str | UUID) -> dict[str, Any] | None:
        """
        Fetch a daily question with its couple embedded under "couples".

        Returns:
            Question dict, or None if not found
        """
        client = cls.get_client()
        question_id_str = normalize_uuid(question_id)

        try:
            response = (
                client.table("daily_questions")
                .select("*, couples(*)")
                .eq("id", question_id_str)
                .single()
                .execute()
            )
            return response.data

        except Exception as e:
            if is_no_rows_error(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch question: {e}",
                code="FETCH_QUESTION_FAILED",
                details={"question_id": question_id_str}
            )

    @classmethod
    def fetch_recent_question_texts(
        cls,
        couple_id: str | UUID,
        limit: int = 10,
    ) -> list[str]:
        """
        Fetch the text of the couple's most recent questions, newest first.

        Used only as "avoid similar" context for generation, so failures
        are logged and an empty list is returned.
        """
        client = cls.get_client()
        couple_id_str = normalize_uuid(couple_id)

        try:
            response = (
                client.table("daily_questions")
                .select("content")
                .eq("couple_id", couple_id_str)
                .order("created_at", desc=True)
                .limit(limit)
                .execute()
            )
            return [row["content"] for row in (response.data or []) if row.get("content")]

        except Exception as e:
            logger.error(f"Recent questions fetch error for couple {couple_id_str}: {e}")
            return []

    # -------------------------------------------------------------------------
    # Psychology Profiles
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_psychology_profiles(cls, user_ids: list[str | UUID]) -> list[dict[str, Any]]:
        """
        Fetch psychology profiles for a set of users.

        Like recent questions this is personalization context only:
        failures are logged and yield an empty list.
        """
        client = cls.get_client()
        ids = [normalize_uuid(u) for u in user_ids if u]

        try:
            response = (
                client.table("user_psychology_profiles")
                .select("*")
                .in_("user_id", ids)
                .execute()
            )
            return response.data or []

        except Exception as e:
            logger.error(f"Psychology profiles fetch error: {e}")
            return []
