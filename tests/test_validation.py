# =============================================================================
# tests/test_validation.py - Validation Helper Tests
# =============================================================================
# Invite codes, password rules, sanitising and the crisis keyword scan.
# =============================================================================

import pytest

from lib.validation import (
    INVITE_CODE_ALPHABET,
    find_crisis_keywords,
    generate_invite_code,
    password_problem,
    sanitize_input,
    validate_invite_code,
)


class TestInviteCodes:
    """Test invite code generation and format validation."""

    def test_generated_code_is_valid(self):
        for _ in range(50):
            code = generate_invite_code()
            assert len(code) == 8
            assert all(ch in INVITE_CODE_ALPHABET for ch in code)
            assert validate_invite_code(code)

    def test_codes_are_not_repeated(self):
        codes = {generate_invite_code() for _ in range(200)}
        assert len(codes) == 200

    @pytest.mark.parametrize("code", ["ABCD1234", "ZZZZZZZZ", "00000000"])
    def test_valid_codes(self, code):
        assert validate_invite_code(code)

    @pytest.mark.parametrize("code", ["abcd1234", "ABC123", "ABCD12345", "ABCD-123", "", None])
    def test_invalid_codes(self, code):
        assert not validate_invite_code(code)


class TestPasswordRules:
    """Test password strength checks used at registration."""

    def test_strong_password(self):
        assert password_problem("Sunrise2024") is None

    def test_too_short(self):
        assert "at least 8" in password_problem("Ab1")

    @pytest.mark.parametrize("password", ["sunrise2024", "SUNRISE2024", "Sunrisesun"])
    def test_missing_character_class(self, password):
        assert password_problem(password) == "Password must contain uppercase, lowercase, and number"


class TestSanitizeInput:

    def test_trims_and_strips_angle_brackets(self):
        assert sanitize_input("  <b>hello</b>  ") == "bhello/b"

    def test_plain_text_unchanged(self):
        assert sanitize_input("I love our walks") == "I love our walks"


class TestCrisisKeywords:

    def test_detects_keywords_case_insensitive(self):
        found = find_crisis_keywords("Sometimes I want to END IT ALL")
        assert found == ["end it all"]

    def test_no_keywords(self):
        assert find_crisis_keywords("We cooked dinner together") == []
