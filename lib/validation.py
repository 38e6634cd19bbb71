# =============================================================================
# lib/validation.py - Input Validation Helpers
# =============================================================================
# Small, dependency-free checks shared by the request models and services:
# - Invite code generation and format validation
# - Password strength rules for registration
# - Free-text sanitising before it is stored
# - Local crisis keyword scan (fallback when the AI detector is unavailable)
# =============================================================================

import re
import secrets
import string

INVITE_CODE_LENGTH = 8
INVITE_CODE_ALPHABET = string.ascii_uppercase + string.digits
INVITE_CODE_PATTERN = re.compile(r"^[A-Z0-9]{8}$")

PASSWORD_MIN_LENGTH = 8
PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")

CRISIS_KEYWORDS = [
    "suicide", "kill myself", "end it all", "not worth living", "better off dead",
    "self harm", "cut myself", "hurt myself", "overdose", "pills",
    "abuse", "hit me", "hurt me", "scared", "threatened",
    "addicted", "drunk", "high", "drugs", "alcohol problem",
]


# =============================================================================
# Invite Codes
# =============================================================================

def generate_invite_code() -> str:
    """
    Generate an 8-character invite code from A-Z and 0-9.

    Uses the secrets module since codes grant access to a couple.
    """
    return "".join(secrets.choice(INVITE_CODE_ALPHABET) for _ in range(INVITE_CODE_LENGTH))


def validate_invite_code(code: str) -> bool:
    """True if the code is exactly 8 uppercase letters or digits."""
    return bool(INVITE_CODE_PATTERN.match(code or ""))


# =============================================================================
# Passwords
# =============================================================================

def password_problem(password: str) -> str | None:
    """
    Check a password against the registration rules.

    Returns:
        A human-readable reason if the password is too weak, else None
    """
    if len(password) < PASSWORD_MIN_LENGTH:
        return f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
    if not PASSWORD_PATTERN.match(password):
        return "Password must contain uppercase, lowercase, and number"
    return None


# =============================================================================
# Free Text
# =============================================================================

def sanitize_input(text: str) -> str:
    """Trim whitespace and strip angle brackets from user-supplied text."""
    return re.sub(r"[<>]", "", text.strip())


def find_crisis_keywords(content: str) -> list[str]:
    """
    Return the crisis keywords that appear in the content (case-insensitive).

    Plain substring matching, so it over-triggers ("high" matches "highlight").
    Only used when the AI detector can't give an answer.
    """
    lowered = content.lower()
    return [kw for kw in CRISIS_KEYWORDS if kw in lowered]
