# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Sparq API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_validation.py / test_relationship.py: lib helpers
# - test_assessments.py: Attachment and love language scoring
# - test_coach.py: AI coach with a mocked OpenAI client
# - test_services.py: Business rules against a fake Supabase client
# - test_routes.py / test_auth.py: API endpoints and JWT verification
#
# Run tests with: pytest
# =============================================================================
