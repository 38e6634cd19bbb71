# =============================================================================
# tests/test_coach.py - AI Relationship Coach Tests
# =============================================================================
# Prompt builders plus the OpenAI-backed calls with a mocked client:
# - question generation and its fallback
# - crisis detection (JSON parsing, keyword fallback)
# - moderation failing open
# - compatibility insights fallback
# =============================================================================

import json
from unittest.mock import MagicMock, patch

import pytest

from agents.models.coach import CompatibilityInsights, CrisisDetectionResult, QuestionGenerationParams
from agents.prompts.coach import build_compatibility_prompt, build_crisis_prompt, build_question_prompt
from agents.psychology_insights import generate_compatibility_insights
from agents.relationship_coach import (
    FALLBACK_QUESTION,
    detect_crisis,
    generate_daily_question,
    moderate_content,
)


def completion(content: str | None) -> MagicMock:
    """Fake chat.completions.create() return value."""
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    return response


@pytest.fixture
def openai_client():
    client = MagicMock()
    with patch("agents.relationship_coach.get_openai_client", return_value=client), \
            patch("agents.psychology_insights.get_openai_client", return_value=client):
        yield client


# =============================================================================
# Prompts
# =============================================================================

class TestPrompts:

    def test_question_prompt_includes_known_characteristics(self):
        prompt = build_question_prompt(QuestionGenerationParams(
            couple_id="c1",
            attachment_styles=["secure", "anxious"],
            relationship_stage="engaged",
        ))
        assert "Attachment styles: secure, anxious" in prompt
        assert "Relationship stage: engaged" in prompt
        assert "Current mood" not in prompt

    def test_question_prompt_keeps_last_three_previous_questions(self):
        prompt = build_question_prompt(QuestionGenerationParams(
            couple_id="c1",
            previous_questions=["Q1?", "Q2?", "Q3?", "Q4?"],
        ))
        assert "Recent questions (avoid similar): Q2?, Q3?, Q4?" in prompt
        assert "Q1?" not in prompt

    def test_crisis_prompt_with_context(self):
        prompt = build_crisis_prompt("I feel alone", context="What made you smile?")
        assert prompt.startswith('Analyze this content: "I feel alone"')
        assert "Context: What made you smile?" in prompt

    def test_compatibility_prompt_handles_missing_scores(self):
        prompt = build_compatibility_prompt({"attachment_style": "secure"}, {})
        assert "- Attachment: secure" in prompt
        assert "- Love Language: unknown" in prompt


# =============================================================================
# Question Generation
# =============================================================================

class TestGenerateDailyQuestion:

    def test_returns_model_text_trimmed(self, openai_client):
        openai_client.chat.completions.create.return_value = completion("  What song reminds you of us?  ")

        text = generate_daily_question(QuestionGenerationParams(couple_id="c1"))

        assert text == "What song reminds you of us?"
        kwargs = openai_client.chat.completions.create.call_args.kwargs
        assert kwargs["temperature"] == 0.7
        assert kwargs["max_tokens"] == 150

    def test_empty_text_falls_back(self, openai_client):
        openai_client.chat.completions.create.return_value = completion("")
        assert generate_daily_question(QuestionGenerationParams(couple_id="c1")) == FALLBACK_QUESTION

    def test_api_error_falls_back(self, openai_client):
        openai_client.chat.completions.create.side_effect = RuntimeError("rate limited")
        assert generate_daily_question(QuestionGenerationParams(couple_id="c1")) == "What made you smile today?"


# =============================================================================
# Crisis Detection
# =============================================================================

class TestDetectCrisis:

    def test_parses_model_json(self, openai_client):
        openai_client.chat.completions.create.return_value = completion(json.dumps({
            "isCrisisDetected": True,
            "confidence": 0.9,
            "keywords": ["hopeless"],
            "sentiment": -0.8,
            "recommendations": ["Call 988"],
        }))

        result = detect_crisis("I feel hopeless")

        assert result.is_crisis_detected is True
        assert result.confidence == 0.9
        assert result.recommendations == ["Call 988"]
        kwargs = openai_client.chat.completions.create.call_args.kwargs
        assert kwargs["temperature"] == 0.1
        assert kwargs["response_format"] == {"type": "json_object"}

    def test_missing_fields_default(self, openai_client):
        openai_client.chat.completions.create.return_value = completion("{}")

        result = detect_crisis("We had a lovely day")

        assert result == CrisisDetectionResult()

    def test_out_of_range_confidence_is_clamped(self, openai_client):
        openai_client.chat.completions.create.return_value = completion(
            json.dumps({"isCrisisDetected": True, "confidence": 3})
        )
        assert detect_crisis("text").confidence == 1.0

    def test_unparseable_reply_uses_keywords(self, openai_client):
        openai_client.chat.completions.create.return_value = completion("not json")

        result = detect_crisis("I just want to end it all")

        assert result.is_crisis_detected is True
        assert result.confidence == 0.5
        assert result.keywords == ["end it all"]

    @pytest.mark.parametrize("reply", [
        {"isCrisisDetected": True, "confidence": [0.9]},
        {"isCrisisDetected": True, "sentiment": {"score": -1}},
        {"isCrisisDetected": True, "confidence": "very"},
    ])
    def test_non_numeric_scores_use_keywords(self, openai_client, reply):
        openai_client.chat.completions.create.return_value = completion(json.dumps(reply))

        result = detect_crisis("I just want to end it all")

        assert result.is_crisis_detected is True
        assert result.confidence == 0.5
        assert result.keywords == ["end it all"]

    def test_api_error_without_keywords_is_not_crisis(self, openai_client):
        openai_client.chat.completions.create.side_effect = RuntimeError("timeout")

        result = detect_crisis("We went for a walk")

        assert result.is_crisis_detected is False
        assert result.confidence == 0.0


# =============================================================================
# Moderation
# =============================================================================

class TestModerateContent:

    def test_flagged(self, openai_client):
        openai_client.moderations.create.return_value = MagicMock(results=[MagicMock(flagged=True)])
        assert moderate_content("something awful") is True

    def test_not_flagged(self, openai_client):
        openai_client.moderations.create.return_value = MagicMock(results=[MagicMock(flagged=False)])
        assert moderate_content("something kind") is False

    def test_fails_open(self, openai_client):
        openai_client.moderations.create.side_effect = RuntimeError("down")
        assert moderate_content("anything") is False


# =============================================================================
# Compatibility Insights
# =============================================================================

class TestCompatibilityInsights:

    def test_parses_model_json(self, openai_client):
        openai_client.chat.completions.create.return_value = completion(json.dumps({
            "overallCompatibility": 82,
            "strengths": ["Shared values"],
            "challenges": [],
            "recommendations": ["Weekly date night"],
            "modalityFocus": ["gottman"],
        }))

        insights = generate_compatibility_insights({"attachment_style": "secure"}, {"attachment_style": "anxious"})

        assert insights.overall_compatibility == 82
        assert insights.modality_focus == ["gottman"]

    def test_failure_returns_fallback(self, openai_client):
        openai_client.chat.completions.create.side_effect = RuntimeError("down")

        insights = generate_compatibility_insights({}, {})

        assert isinstance(insights, CompatibilityInsights)
        assert insights.overall_compatibility == 75
        assert insights.modality_focus == ["gottman", "attachment"]
