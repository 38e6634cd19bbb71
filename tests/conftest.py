# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - FakeSupabase: a chainable stand-in for the supabase-py query builder
# - TestClient with the auth dependency overridden
# =============================================================================

import os
from collections import defaultdict
from unittest.mock import MagicMock, patch

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-that-is-long-enough-for-hs256")
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest

USER_ID = "11111111-1111-4111-8111-111111111111"
PARTNER_ID = "22222222-2222-4222-8222-222222222222"
STRANGER_ID = "33333333-3333-4333-8333-333333333333"
COUPLE_ID = "44444444-4444-4444-8444-444444444444"
QUESTION_ID = "55555555-5555-4555-8555-555555555555"


# =============================================================================
# Fake Supabase
# =============================================================================

class FakeQuery:
    """
    Chainable stand-in for a PostgREST query builder.

    Every builder method (select, eq, or_, insert, update, order, ...) is
    recorded and returns self; execute() returns the queued data or raises
    the queued error.
    """

    def __init__(self, data=None, error=None):
        self.data = data
        self.error = error
        self.calls = []

    def __getattr__(self, name):
        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self
        return method

    def execute(self):
        if self.error is not None:
            raise self.error
        return MagicMock(data=self.data)

    def called(self, name):
        """Arguments of every call to a builder method, e.g. q.called("eq")."""
        return [args for call, args, _ in self.calls if call == name]

    def payload(self, name):
        """First positional argument of the first call to insert/update/upsert."""
        return self.called(name)[0][0]


class FakeSupabase:
    """
    Minimal supabase Client: table() hands out queued FakeQuery objects
    in order, or an empty result when nothing is queued for that table.
    """

    def __init__(self):
        self._queued = defaultdict(list)
        self.queries = defaultdict(list)
        self.auth = MagicMock()

    def queue(self, table, data=None, error=None):
        query = FakeQuery(data=data, error=error)
        self._queued[table].append(query)
        return query

    def table(self, name):
        queued = self._queued[name]
        query = queued.pop(0) if queued else FakeQuery(data=[])
        self.queries[name].append(query)
        return query


def no_rows_error():
    """What supabase-py raises when .single() matches nothing."""
    return Exception("{'code': 'PGRST116', 'message': 'JSON object requested, multiple (or no) rows returned'}")


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_db():
    """Patch the Supabase singleton with a FakeSupabase for the test."""
    from lib.supabase_client import SupabaseClient

    fake = FakeSupabase()
    with patch.object(SupabaseClient, "get_client", return_value=fake):
        yield fake


@pytest.fixture
def couple_row():
    return {
        "id": COUPLE_ID,
        "partner1_id": USER_ID,
        "partner2_id": PARTNER_ID,
        "relationship_status": "dating",
        "relationship_start_date": "2022-03-01",
        "health_score": 50,
        "current_streak": 3,
        "longest_streak": 10,
    }


@pytest.fixture
def question_row(couple_row):
    return {
        "id": QUESTION_ID,
        "couple_id": COUPLE_ID,
        "content": "What made you smile today?",
        "category": "gratitude",
        "difficulty_level": 1,
        "date": "2026-10-17",
        "couples": couple_row,
    }


@pytest.fixture
def auth_user():
    from app.auth.models import AuthUser

    return AuthUser(id=USER_ID, email="alex@example.com", display_name="Alex")


@pytest.fixture
def client(auth_user):
    """TestClient authenticated as USER_ID."""
    from fastapi.testclient import TestClient

    from app.auth import get_current_user
    from app.main import app

    app.dependency_overrides[get_current_user] = lambda: auth_user
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def quiet_coach():
    """Coach calls that never touch OpenAI: nothing flagged, no crisis."""
    from agents.models.coach import CrisisDetectionResult

    with patch("core.services.response_service.moderate_content", return_value=False) as moderate, \
            patch("core.services.response_service.detect_crisis", return_value=CrisisDetectionResult()) as crisis, \
            patch("core.services.question_service.generate_daily_question", return_value="What are you grateful for?") as generate:
        yield {"moderate": moderate, "crisis": crisis, "generate": generate}
