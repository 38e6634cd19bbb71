# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every known failure mode gets its own exception with an HTTP status,
# a machine-readable code and, where useful, a suggestion for the client.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class SparqException(Exception):
    """
    Base exception for the Sparq API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "SPARQ_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


class MissingFieldError(SparqException):
    """Raised when a required request field is absent or blank."""

    def __init__(self, message: str, fields: list[str]):
        super().__init__(
            message=message,
            code="MISSING_FIELD",
            status_code=400,
            details={"fields": fields},
        )


# =============================================================================
# Auth Exceptions
# =============================================================================

class RegistrationError(SparqException):
    """Raised when Supabase Auth rejects a sign-up."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="REGISTRATION_FAILED",
            status_code=400,
        )


class WeakPasswordError(SparqException):
    """Raised when a password does not meet the strength rules."""

    def __init__(self, reason: str):
        super().__init__(
            message=reason,
            code="WEAK_PASSWORD",
            status_code=400,
            suggestion="Use at least 8 characters with uppercase, lowercase, and a number",
        )


class ProfileCreationError(SparqException):
    """Raised when the public.users row cannot be written after sign-up."""

    def __init__(self, user_id: str):
        super().__init__(
            message="Failed to create user profile",
            code="PROFILE_CREATION_FAILED",
            status_code=500,
            details={"user_id": user_id},
        )


# =============================================================================
# Couple Exceptions
# =============================================================================

class CoupleNotFoundError(SparqException):
    """Raised when a couple doesn't exist or the user isn't one of the partners."""

    def __init__(self, couple_id: str):
        super().__init__(
            message="Couple not found or access denied",
            code="COUPLE_NOT_FOUND",
            status_code=404,
            suggestion="Check that the couple_id is correct and that you are one of the partners",
            details={"couple_id": couple_id},
        )


class AlreadyCoupledError(SparqException):
    """Raised when a user who already belongs to a couple tries to join another."""

    def __init__(self, user_id: str):
        super().__init__(
            message="You are already part of a couple",
            code="ALREADY_COUPLED",
            status_code=400,
            details={"user_id": user_id},
        )


class InvalidPartnerError(SparqException):
    """Raised when a couple would pair a user with themselves."""

    def __init__(self):
        super().__init__(
            message="You cannot form a couple with yourself",
            code="INVALID_PARTNER",
            status_code=400,
            suggestion="Send an invitation to your partner instead",
        )


# =============================================================================
# Invitation Exceptions
# =============================================================================

class InvalidInviteCodeError(SparqException):
    """Raised when an invite code is malformed."""

    def __init__(self, invite_code: str):
        super().__init__(
            message="Invite code must be 8 uppercase letters or digits",
            code="INVALID_INVITE_CODE",
            status_code=400,
            details={"invite_code": invite_code},
        )


class InvitationNotFoundError(SparqException):
    """Raised when no pending invitation matches a code."""

    def __init__(self, invite_code: str):
        super().__init__(
            message="Invalid or expired invitation",
            code="INVITATION_NOT_FOUND",
            status_code=404,
            suggestion="Ask your partner to send a new invitation",
            details={"invite_code": invite_code},
        )


class InvitationExpiredError(SparqException):
    """Raised when a pending invitation is past its expiry."""

    def __init__(self, invite_code: str):
        super().__init__(
            message="Invitation has expired",
            code="INVITATION_EXPIRED",
            status_code=400,
            suggestion="Ask your partner to send a new invitation",
            details={"invite_code": invite_code},
        )


class OwnInvitationError(SparqException):
    """Raised when the inviter tries to accept their own invitation."""

    def __init__(self):
        super().__init__(
            message="Cannot accept your own invitation",
            code="OWN_INVITATION",
            status_code=400,
            suggestion="Share the invite code with your partner",
        )


# =============================================================================
# Question / Response Exceptions
# =============================================================================

class QuestionNotFoundError(SparqException):
    """Raised when a daily question ID doesn't exist."""

    def __init__(self, question_id: str):
        super().__init__(
            message="Question not found",
            code="QUESTION_NOT_FOUND",
            status_code=404,
            details={"question_id": question_id},
        )


class AccessDeniedError(SparqException):
    """Raised when the user exists but isn't allowed to touch the resource."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            message="Access denied",
            code="ACCESS_DENIED",
            status_code=403,
            details={"resource": resource, "id": resource_id},
        )


class ContentFlaggedError(SparqException):
    """Raised when the moderation API flags submitted text."""

    def __init__(self):
        super().__init__(
            message="Content violates community guidelines",
            code="CONTENT_FLAGGED",
            status_code=400,
            suggestion="Rephrase your response and try again",
        )


# =============================================================================
# Psychology Exceptions
# =============================================================================

class PsychologyProfileNotFoundError(SparqException):
    """Raised when updating a psychology profile that was never created."""

    def __init__(self, user_id: str):
        super().__init__(
            message="Psychology profile not found",
            code="PROFILE_NOT_FOUND",
            status_code=404,
            suggestion="Create a profile with POST /api/psychology/profiles first",
            details={"user_id": user_id},
        )


class UnknownAssessmentError(SparqException):
    """Raised for an assessment kind that has no scorer."""

    def __init__(self, kind: str, supported: list[str]):
        super().__init__(
            message=f"Unknown assessment: {kind}",
            code="UNKNOWN_ASSESSMENT",
            status_code=404,
            suggestion=f"Supported assessments: {', '.join(supported)}",
            details={"kind": kind},
        )


class IncompleteProfilesError(SparqException):
    """Raised when compatibility is requested before both partners have profiles."""

    def __init__(self, couple_id: str):
        super().__init__(
            message="Both partners need a psychology profile for compatibility",
            code="PROFILES_INCOMPLETE",
            status_code=400,
            suggestion="Ask both partners to complete the attachment and love language assessments",
            details={"couple_id": couple_id},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def sparq_exception_handler(
    request: Request,
    exc: SparqException
) -> JSONResponse:
    """
    Convert SparqException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Converts validation errors to user-friendly messages.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )


async def supabase_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle data-layer failures (SupabaseClientError).

    The PostgREST message is logged but not returned to the client.
    """
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Database operation failed",
            "code": getattr(exc, "code", "SUPABASE_ERROR"),
        }
    )
