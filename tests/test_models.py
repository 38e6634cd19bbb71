# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the request models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Default values work as expected
# =============================================================================

from datetime import date
from uuid import UUID

import pytest
from pydantic import ValidationError

from core.models import (
    ACTScoreRequest,
    AssessmentCreate,
    AttachmentStyle,
    CoupleCreate,
    CoupleUpdate,
    CrisisSeverity,
    FourHorsemenRequest,
    HealthScoreRequest,
    InvitationAccept,
    LikertScoreRequest,
    LoveLanguage,
    PsychologyProfileCreate,
    PsychologyProfileUpdate,
    QuestionCategory,
    QuestionCreate,
    RelationshipStatus,
    ResponseCreate,
)
from agents.models.coach import CrisisDetectionResult
from app.auth.models import RegisterRequest

from tests.conftest import COUPLE_ID, PARTNER_ID


# =============================================================================
# Couple Models
# =============================================================================

class TestCoupleModels:

    def test_couple_create_parses_fields(self):
        couple = CoupleCreate(
            partner2_id=PARTNER_ID,
            relationship_start_date="2021-06-12",
            relationship_status="married",
        )
        assert couple.partner2_id == UUID(PARTNER_ID)
        assert couple.relationship_start_date == date(2021, 6, 12)
        assert couple.relationship_status == RelationshipStatus.MARRIED

    def test_couple_create_partner_optional_at_schema_level(self):
        assert CoupleCreate().partner2_id is None

    def test_couple_create_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            CoupleCreate(partner2_id=PARTNER_ID, relationship_status="situationship")

    def test_couple_update_only_dumps_set_fields(self):
        update = CoupleUpdate(health_score=80)
        assert update.model_dump(exclude_unset=True) == {"health_score": 80}

    @pytest.mark.parametrize("score", [-1, 101])
    def test_couple_update_health_score_range(self, score):
        with pytest.raises(ValidationError):
            CoupleUpdate(health_score=score)

    def test_health_score_request_requires_all_scores(self):
        with pytest.raises(ValidationError):
            HealthScoreRequest(communication_score=80, trust_score=70, satisfaction_score=60)


# =============================================================================
# Question / Response Models
# =============================================================================

class TestQuestionModels:

    def test_question_create(self):
        question = QuestionCreate(couple_id=COUPLE_ID, category="memories", difficulty_level=3)
        assert question.category == QuestionCategory.MEMORIES
        assert question.difficulty_level == 3

    @pytest.mark.parametrize("level", [0, 6])
    def test_difficulty_range(self, level):
        with pytest.raises(ValidationError):
            QuestionCreate(couple_id=COUPLE_ID, difficulty_level=level)

    def test_response_defaults_to_shared(self):
        response = ResponseCreate(question_id=COUPLE_ID, content="Our first trip")
        assert response.is_private is False

    def test_response_content_max_length(self):
        ResponseCreate(content="x" * 1000)
        with pytest.raises(ValidationError):
            ResponseCreate(content="x" * 1001)

    def test_invitation_accept_code_optional(self):
        assert InvitationAccept().invite_code is None


# =============================================================================
# Psychology Models
# =============================================================================

class TestPsychologyModels:

    def test_profile_create(self):
        profile = PsychologyProfileCreate(
            attachment_style="secure",
            primary_love_language="quality_time",
            anxiety_score=20,
        )
        assert profile.attachment_style == AttachmentStyle.SECURE
        assert profile.primary_love_language == LoveLanguage.QUALITY_TIME

    def test_profile_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            PsychologyProfileUpdate(user_id="someone-else")

    def test_profile_score_range(self):
        with pytest.raises(ValidationError):
            PsychologyProfileUpdate(mindfulness_score=150)

    def test_assessment_create_accepts_list_or_dict(self):
        assert AssessmentCreate(assessment_type="cbt", questions_responses=[1, 2]).questions_responses == [1, 2]
        assert AssessmentCreate(assessment_type="dbt", questions_responses={"q1": 3}).questions_responses == {"q1": 3}

    def test_answers_must_be_likert(self):
        LikertScoreRequest(responses={"anx_01": 1, "anx_02": 7})
        with pytest.raises(ValidationError):
            LikertScoreRequest(responses={"anx_01": 8})
        with pytest.raises(ValidationError):
            LikertScoreRequest(responses={})

    def test_act_value_ranks_start_at_one(self):
        request = ACTScoreRequest(responses={"act_01": 5}, value_rankings={"trust": 1})
        assert request.value_rankings == {"trust": 1}
        assert ACTScoreRequest(responses={"act_01": 5}).value_rankings is None
        with pytest.raises(ValidationError):
            ACTScoreRequest(responses={"act_01": 5}, value_rankings={"trust": 0})

    def test_four_horsemen_text_required(self):
        with pytest.raises(ValidationError):
            FourHorsemenRequest(text="")
        with pytest.raises(ValidationError):
            FourHorsemenRequest(text="x" * 1001)


class TestRegisterRequest:

    def test_accepts_camel_case_display_name(self):
        assert RegisterRequest(displayName="Alex").display_name == "Alex"
        assert RegisterRequest(display_name="Sam").display_name == "Sam"


# =============================================================================
# Crisis Severity
# =============================================================================

class TestCrisisSeverity:

    @pytest.mark.parametrize("confidence, expected", [
        (0.95, CrisisSeverity.CRITICAL),
        (0.81, CrisisSeverity.CRITICAL),
        (0.8, CrisisSeverity.HIGH),
        (0.61, CrisisSeverity.HIGH),
        (0.6, CrisisSeverity.MEDIUM),
        (0.41, CrisisSeverity.MEDIUM),
        (0.4, CrisisSeverity.LOW),
        (0.0, CrisisSeverity.LOW),
    ])
    def test_thresholds_are_strict(self, confidence, expected):
        assert CrisisSeverity.from_confidence(confidence) == expected


class TestCrisisDetectionResult:

    def test_none_scores_default_to_zero(self):
        result = CrisisDetectionResult.model_validate({"confidence": None, "sentiment": None})
        assert (result.confidence, result.sentiment) == (0.0, 0.0)

    @pytest.mark.parametrize("value", [[0.9], {"value": 0.9}, "high"])
    def test_non_numeric_confidence_is_validation_error(self, value):
        with pytest.raises(ValidationError):
            CrisisDetectionResult.model_validate({"confidence": value})
