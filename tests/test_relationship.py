# =============================================================================
# tests/test_relationship.py - Relationship Metric Tests
# =============================================================================

from datetime import date, datetime

import pytest

from lib.relationship import (
    calculate_health_score,
    calculate_relationship_duration,
    get_streak_message,
)
from lib.utils import round_half_up


class TestHealthScore:
    """Weighted health score: 30/30/25/15, rounded half up."""

    def test_weighted_average(self):
        # 24 + 21 + 15 + 7.5 = 67.5
        assert calculate_health_score(80, 70, 60, 50) == 68

    def test_extremes(self):
        assert calculate_health_score(0, 0, 0, 0) == 0
        assert calculate_health_score(100, 100, 100, 100) == 100

    def test_rounds_half_up_not_to_even(self):
        # 0.25 * 90 = 22.5; round() would give 22
        assert calculate_health_score(0, 0, 90, 0) == 23

    def test_returns_int(self):
        assert isinstance(calculate_health_score(33.3, 44.4, 55.5, 66.6), int)


class TestStreakMessage:

    @pytest.mark.parametrize("streak, expected", [
        (0, "Start your connection journey today!"),
        (1, "Great start! Keep the momentum going."),
        (5, "5 days strong! You're building a habit."),
        (7, "7 days of connection! You're on fire!"),
        (30, "30 days together! This is becoming natural."),
        (100, "100 days of daily connection! You're relationship heroes!"),
    ])
    def test_thresholds(self, streak, expected):
        assert get_streak_message(streak) == expected


class TestRelationshipDuration:

    def test_breakdown(self):
        # 365 + 2*30 + 5 = 430 days
        start = date(2024, 1, 1)
        today = date.fromordinal(start.toordinal() + 430)

        duration = calculate_relationship_duration(start, today=today)

        assert (duration.years, duration.months, duration.days) == (1, 2, 5)
        assert duration.total_days == 430

    def test_accepts_iso_strings_and_datetimes(self):
        today = date(2024, 1, 11)
        assert calculate_relationship_duration("2024-01-01", today=today).total_days == 10
        assert calculate_relationship_duration("2024-01-01T08:00:00+00:00", today=today).total_days == 10
        assert calculate_relationship_duration(datetime(2024, 1, 1, 8), today=today).total_days == 10

    def test_future_start_is_zero(self):
        duration = calculate_relationship_duration(date(2030, 1, 1), today=date(2024, 1, 1))
        assert duration.total_days == 0


class TestRoundHalfUp:

    @pytest.mark.parametrize("value, expected", [
        (62.5, 63),
        (22.5, 23),
        (62.49, 62),
        (67.49999999, 68),  # float noise around 67.5
        (0, 0),
        (100, 100),
    ])
    def test_rounds(self, value, expected):
        assert round_half_up(value) == expected
