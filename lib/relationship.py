# =============================================================================
# lib/relationship.py - Relationship Metrics
# =============================================================================
# Pure functions behind the couple dashboard:
# - calculate_health_score: weighted blend of four 0-100 sub-scores
# - get_streak_message: encouragement text for the current daily streak
# - calculate_relationship_duration: years/months/days since the start date
# =============================================================================

from dataclasses import dataclass
from datetime import date, datetime

from lib.utils import round_half_up, utc_today

HEALTH_SCORE_WEIGHTS = {
    "communication": 0.30,
    "trust": 0.30,
    "satisfaction": 0.25,
    "engagement": 0.15,
}


def calculate_health_score(
    communication_score: float,
    trust_score: float,
    satisfaction_score: float,
    engagement_score: float,
) -> int:
    """
    Combine four 0-100 sub-scores into a single relationship health score.

    Weights: communication 30%, trust 30%, satisfaction 25%, engagement 15%.
    Rounds half up (so 72.5 -> 73), not to even.

    Example:
        >>> calculate_health_score(80, 70, 60, 50)
        68
    """
    weighted = (
        communication_score * HEALTH_SCORE_WEIGHTS["communication"]
        + trust_score * HEALTH_SCORE_WEIGHTS["trust"]
        + satisfaction_score * HEALTH_SCORE_WEIGHTS["satisfaction"]
        + engagement_score * HEALTH_SCORE_WEIGHTS["engagement"]
    )
    return round_half_up(weighted)


def get_streak_message(streak: int) -> str:
    """Encouragement text for a couple's current streak of answered days."""
    if streak <= 0:
        return "Start your connection journey today!"
    if streak == 1:
        return "Great start! Keep the momentum going."
    if streak < 7:
        return f"{streak} days strong! You're building a habit."
    if streak < 30:
        return f"{streak} days of connection! You're on fire!"
    if streak < 100:
        return f"{streak} days together! This is becoming natural."
    return f"{streak} days of daily connection! You're relationship heroes!"


@dataclass(frozen=True)
class RelationshipDuration:
    """Approximate time together (365-day years, 30-day months)."""
    years: int
    months: int
    days: int
    total_days: int


def calculate_relationship_duration(
    start_date: date | datetime | str,
    today: date | None = None,
) -> RelationshipDuration:
    """
    Break the time since start_date into years, months and days.

    Uses fixed 365-day years and 30-day months, which is good enough
    for "together for 2 years, 3 months" copy.
    """
    if isinstance(start_date, str):
        start = date.fromisoformat(start_date[:10])
    elif isinstance(start_date, datetime):
        start = start_date.date()
    else:
        start = start_date

    today = today or utc_today()
    total_days = max((today - start).days, 0)

    return RelationshipDuration(
        years=total_days // 365,
        months=(total_days % 365) // 30,
        days=(total_days % 365) % 30,
        total_days=total_days,
    )
