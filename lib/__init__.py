# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Typed Supabase wrapper for database reads
# - validation.py: Invite codes, password rules, sanitising, crisis keywords
# - relationship.py: Health score, streak messages, relationship duration
# - utils.py: Shared utilities (UUID normalization, UTC time helpers)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.relationship import (
    calculate_health_score,
    calculate_relationship_duration,
    get_streak_message,
)
from lib.validation import (
    find_crisis_keywords,
    generate_invite_code,
    sanitize_input,
    validate_invite_code,
)
from lib.utils import normalize_uuid, utc_now_iso, utc_today

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Relationship metrics
    "calculate_health_score",
    "calculate_relationship_duration",
    "get_streak_message",
    # Validation
    "find_crisis_keywords",
    "generate_invite_code",
    "sanitize_input",
    "validate_invite_code",
    # Utils
    "normalize_uuid",
    "utc_now_iso",
    "utc_today",
]
