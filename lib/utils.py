# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import math
from datetime import date, datetime, timezone
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Example:
        couple_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        couple_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


# =============================================================================
# Number Utilities
# =============================================================================

def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves going up.

    Python's round() sends 62.5 to 62; scores shown to users go to 63.
    Float noise like 67.49999999 is trimmed first.
    """
    return math.floor(round(value, 6) + 0.5)


# =============================================================================
# Time Utilities
# =============================================================================
# All timestamps are stored in UTC ISO-8601 and "today" is the UTC date,
# so a couple's daily question rolls over at midnight UTC.

def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string for Supabase timestamp columns."""
    return utc_now().isoformat()


def utc_today() -> date:
    """Today's date in UTC."""
    return utc_now().date()


def parse_timestamp(value: str | datetime) -> datetime:
    """
    Parse a Supabase timestamp into an aware datetime.

    PostgREST returns "+00:00" offsets, but rows written by other clients
    may carry a trailing "Z" or no offset at all (treated as UTC).
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def without_none(data: dict) -> dict:
    """Drop keys whose value is None before an insert/update."""
    return {k: v for k, v in data.items() if v is not None}
