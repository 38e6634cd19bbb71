# =============================================================================
# tests/test_assessments.py - Psychology Assessment Scoring Tests
# =============================================================================

import pytest

from core.assessments import (
    ACT_QUESTIONS,
    ATTACHMENT_QUESTIONS,
    CBT_QUESTIONS,
    DBT_QUESTIONS,
    EFT_QUESTIONS,
    GOTTMAN_QUESTIONS,
    LOVE_LANGUAGE_QUESTIONS,
    SUPPORTED_ASSESSMENTS,
    analyze_text,
    get_attachment_compatibility,
    get_love_language_compatibility,
    score_act,
    score_attachment,
    score_cbt,
    score_dbt,
    score_eft,
    score_gottman,
    score_love_languages,
)
from core.assessments.attachment import determine_attachment_style, subscale_mean
from core.assessments.dbt import skill_level
from core.assessments.gottman import AREAS, determine_stability
from core.models.enums import AttachmentStyle, LoveLanguage


def answer_all(anxiety: int, avoidance: int, security: int = 4) -> dict[str, int]:
    """Answers that produce the given raw subscale means after reverse scoring."""
    responses = {}
    for q in ATTACHMENT_QUESTIONS:
        target = {"anxiety": anxiety, "avoidance": avoidance, "security": security}[q.subscale]
        responses[q.id] = 8 - target if q.reverse_scored else target
    return responses


def answer_likert(questions, default: int, **targets: int) -> dict[str, int]:
    """Answers giving each dimension its target mean (default elsewhere) after reverse scoring."""
    responses = {}
    for q in questions:
        target = targets.get(q.dimension, default)
        responses[q.id] = 8 - target if q.reverse_scored else target
    return responses


# =============================================================================
# Attachment
# =============================================================================

class TestAttachmentScoring:

    def test_question_bank_shape(self):
        subscales = [q.subscale for q in ATTACHMENT_QUESTIONS]
        assert subscales.count("anxiety") == 12
        assert subscales.count("avoidance") == 12
        assert subscales.count("security") == 8
        assert len({q.id for q in ATTACHMENT_QUESTIONS}) == len(ATTACHMENT_QUESTIONS)

    def test_reverse_scored_items(self):
        reversed_ids = {q.id for q in ATTACHMENT_QUESTIONS if q.reverse_scored}
        assert "anx_09" in reversed_ids
        assert "anx_01" not in reversed_ids
        assert {f"avo_{i:02d}" for i in range(5, 13)} <= reversed_ids

    def test_reverse_item_counts_as_eight_minus_answer(self):
        # anx_09 is reverse scored: answering 1 means high anxiety (7)
        assert subscale_mean({"anx_09": 1}, "anxiety") == 7
        assert subscale_mean({"anx_01": 1}, "anxiety") == 1

    def test_unanswered_subscale_is_zero(self):
        assert subscale_mean({}, "security") == 0

    @pytest.mark.parametrize("anxiety, avoidance, expected", [
        (2, 2, AttachmentStyle.SECURE),
        (6, 2, AttachmentStyle.ANXIOUS),
        (2, 6, AttachmentStyle.AVOIDANT),
        (6, 6, AttachmentStyle.DISORGANIZED),
    ])
    def test_style_quadrants(self, anxiety, avoidance, expected):
        result = score_attachment(answer_all(anxiety, avoidance))
        assert result.attachment_style == expected

    def test_threshold_is_inclusive_at_four(self):
        assert determine_attachment_style(4.0, 3.99) == AttachmentStyle.ANXIOUS
        assert determine_attachment_style(3.99, 3.99) == AttachmentStyle.SECURE

    def test_scores_are_percentages(self):
        result = score_attachment(answer_all(7, 1, security=7))
        assert result.anxiety_score == 100
        assert result.avoidance_score == 14  # round(100/7)
        assert result.security_score == 100

    def test_half_percent_rounds_up(self):
        # security mean 4.375 -> 62.5%
        responses = answer_all(2, 2)
        for i, answer in enumerate([5, 5, 5, 4, 4, 4, 4, 4], start=1):
            responses[f"sec_{i:02d}"] = answer

        result = score_attachment(responses)

        assert result.security_score == 63

    def test_high_dimensions_add_growth_areas(self):
        result = score_attachment(answer_all(6, 6))
        assert "Focus on anxiety management and self-regulation" in result.growth_areas
        assert "Work on increasing emotional openness and vulnerability" in result.growth_areas

        calm = score_attachment(answer_all(2, 2))
        assert "Focus on anxiety management and self-regulation" not in calm.growth_areas

    def test_to_dict(self):
        data = score_attachment(answer_all(2, 2)).to_dict()
        assert data["attachment_style"] == "secure"
        assert data["description"]


# =============================================================================
# Love Languages
# =============================================================================

class TestLoveLanguageScoring:

    def test_question_bank_shape(self):
        assert len(LOVE_LANGUAGE_QUESTIONS) == 10
        for question in LOVE_LANGUAGE_QUESTIONS:
            assert len(question.options) == 5
            assert {o.language for o in question.options} == set(LoveLanguage)

    def test_primary_and_secondary(self):
        responses = {f"q{i}": f"q{i}_c" for i in range(1, 7)}           # quality time x6
        responses.update({f"q{i}": f"q{i}_e" for i in range(7, 10)})    # touch x3
        responses["q10"] = "q10_a"                                       # words x1

        result = score_love_languages(responses)

        assert result.primary == LoveLanguage.QUALITY_TIME
        assert result.secondary == LoveLanguage.PHYSICAL_TOUCH
        assert result.scores[LoveLanguage.WORDS_OF_AFFIRMATION] == 1

    def test_ties_keep_bank_order(self):
        # acts and words tied: words comes first
        result = score_love_languages({"q1": "q1_b", "q2": "q2_a"})
        assert result.primary == LoveLanguage.WORDS_OF_AFFIRMATION
        assert result.secondary == LoveLanguage.ACTS_OF_SERVICE

    def test_no_secondary_when_single_language(self):
        result = score_love_languages({"q1": "q1_d", "q2": "q2_d"})
        assert result.primary == LoveLanguage.RECEIVING_GIFTS
        assert result.secondary is None

    def test_unknown_options_ignored(self):
        result = score_love_languages({"q1": "q1_z", "q2": "q2_e"})
        assert result.primary == LoveLanguage.PHYSICAL_TOUCH
        assert sum(result.scores.values()) == 1


# =============================================================================
# Compatibility
# =============================================================================

class TestCompatibility:

    def test_attachment_matrix_is_symmetric(self):
        assert get_attachment_compatibility("secure", "anxious")["compatibility_score"] == 80
        assert get_attachment_compatibility("anxious", "secure")["compatibility_score"] == 80
        assert get_attachment_compatibility("anxious", "avoidant")["compatibility_score"] == 45

    def test_attachment_same_style(self):
        assert get_attachment_compatibility("secure", "secure")["compatibility_score"] == 95
        assert get_attachment_compatibility("disorganized", "disorganized")["compatibility_score"] == 35

    def test_every_attachment_pair_covered(self):
        for a in AttachmentStyle:
            for b in AttachmentStyle:
                result = get_attachment_compatibility(a, b)
                assert 0 <= result["compatibility_score"] <= 100
                assert result["recommendations"]

    def test_love_language_pairs(self):
        assert get_love_language_compatibility("quality_time", "quality_time")["compatibility_score"] == 95
        assert get_love_language_compatibility("physical_touch", "receiving_gifts")["compatibility_score"] == 65
        mixed = get_love_language_compatibility("words_of_affirmation", "acts_of_service")
        assert mixed["compatibility_score"] == 80
        assert "Words of Affirmation" in mixed["insights"][0]

    def test_supported_assessments(self):
        assert SUPPORTED_ASSESSMENTS == [
            "attachment", "love_languages", "gottman", "cbt", "dbt", "eft", "act",
        ]


# =============================================================================
# Likert Question Banks
# =============================================================================

class TestLikertQuestionBanks:

    @pytest.mark.parametrize("questions, size, per_dimension, reversed_count", [
        (GOTTMAN_QUESTIONS, 56, 8, 0),
        (CBT_QUESTIONS, 21, 3, 7),
        (DBT_QUESTIONS, 24, 6, 6),
        (EFT_QUESTIONS, 25, 5, 5),
        (ACT_QUESTIONS, 24, 4, 7),
    ])
    def test_shape(self, questions, size, per_dimension, reversed_count):
        assert len(questions) == size
        assert len({q.id for q in questions}) == size
        dimensions = [q.dimension for q in questions]
        assert all(dimensions.count(d) == per_dimension for d in set(dimensions))
        assert sum(q.reverse_scored for q in questions) == reversed_count

    def test_question_dict(self):
        assert CBT_QUESTIONS[2].to_dict() == {
            "id": "cbt_03",
            "text": "I can usually find logical explanations for my partner's behavior.",
            "dimension": "catastrophizing",
            "scale": {"min": 1, "max": 7},
        }


# =============================================================================
# Gottman
# =============================================================================

class TestGottmanScoring:

    def test_strong_relationship_is_stable(self):
        result = score_gottman(answer_likert(GOTTMAN_QUESTIONS, 7))

        assert result.overall_score == 100
        assert result.relationship_stability == "stable"
        love_maps = result.areas["love_maps"]
        assert len(love_maps.strengths) == 4
        assert love_maps.growth_areas == ["Learn more about partner's current stresses"]
        assert love_maps.interventions == ["Love Map questionnaire exercises"]

    def test_middling_relationship_is_at_risk(self):
        result = score_gottman(answer_likert(GOTTMAN_QUESTIONS, 4))

        # 4/7 -> 57
        assert result.areas["turn_towards"].score == 57
        assert result.overall_score == 57
        assert result.relationship_stability == "at_risk"
        assert len(result.areas["turn_towards"].strengths) == 1
        assert len(result.areas["turn_towards"].growth_areas) == 2

    def test_low_critical_area_needs_attention(self):
        result = score_gottman(answer_likert(GOTTMAN_QUESTIONS, 7, positive_perspective=2))

        assert result.overall_score == 90
        assert result.relationship_stability == "needs_attention"
        assert len(result.areas["positive_perspective"].interventions) == 4

    def test_stability_uses_unrounded_overall(self):
        critical = {"positive_perspective": 80, "manage_conflict": 80}
        assert determine_stability(69.99, critical) == "at_risk"
        assert determine_stability(70, critical) == "stable"
        assert determine_stability(49.99, critical) == "needs_attention"

    def test_unanswered_areas_score_zero(self):
        result = score_gottman({"lm_01": 7})

        assert result.areas["love_maps"].score == 100
        assert all(result.areas[a].score == 0 for a in AREAS if a != "love_maps")
        assert result.raw_scores["love_maps"] == 100

    def test_to_dict(self):
        data = score_gottman(answer_likert(GOTTMAN_QUESTIONS, 6)).to_dict()

        assert set(data["areas"]) == set(AREAS)
        assert data["areas"]["manage_conflict"]["score"] == 86
        assert data["relationship_stability"] == "stable"


class TestFourHorsemen:

    def test_stonewalling_one_word(self):
        result = analyze_text("Fine.")

        assert result["horsemen"] == ["stonewalling"]
        assert result["confidence"] == 1.0
        assert "Practice self-soothing techniques" in result["suggestions"]

    def test_several_horsemen_in_order(self):
        result = analyze_text("You always leave dishes. Whatever.")

        assert result["horsemen"] == ["criticism", "contempt", "stonewalling"]
        assert set(result["descriptions"]) == {"criticism", "contempt", "stonewalling"}

    def test_confidence_scales_with_length(self):
        # 2 criticism matches in 40 words -> 2 / 4
        text = " ".join(["You", "never", "call"] + ["today"] * 37)

        result = analyze_text(text)

        assert result["horsemen"] == ["criticism"]
        assert result["confidence"] == 0.5

    def test_kind_text_is_clean(self):
        result = analyze_text("We had a nice dinner and talked about our week.")

        assert result == {"horsemen": [], "confidence": 0.0, "suggestions": [], "descriptions": {}}


# =============================================================================
# CBT
# =============================================================================

class TestCBTScoring:

    def test_primary_distortions_worst_first(self):
        responses = answer_likert(
            CBT_QUESTIONS, 1, catastrophizing=7, mind_reading=6, all_or_nothing=5,
        )

        result = score_cbt(responses)

        assert result.primary_distortions == ["catastrophizing", "mind_reading", "all_or_nothing"]
        assert result.category_scores["all_or_nothing"] == 71
        assert result.category_scores["personalization"] == 14
        # 100 - 313/7
        assert result.cognitive_flexibility_score == 55
        assert result.thought_patterns == ["worst_case_thinking", "assumption_making", "black_white_thinking"]
        assert len(result.interventions) == 3
        assert result.distortion_levels["catastrophizing"] == "high"
        assert result.distortion_levels["mental_filtering"] == "low"
        assert "Balanced attention to positives and negatives" in result.strengths
        assert result.growth_areas[0] == "Developing realistic thinking patterns"

    def test_low_flexibility_adds_core_practices(self):
        result = score_cbt(answer_likert(CBT_QUESTIONS, 4))

        assert result.cognitive_flexibility_score == 43
        assert result.primary_distortions == []
        assert result.interventions[0].startswith("Daily thought record practice")
        assert result.strengths == ["Open to growth and self-awareness"]
        assert set(result.distortion_levels.values()) == {"moderate"}

    def test_reverse_item(self):
        # cbt_03 is reverse scored: answering 1 means a strong distortion
        assert score_cbt({"cbt_03": 1}).category_scores["catastrophizing"] == 100


# =============================================================================
# DBT
# =============================================================================

class TestDBTScoring:

    def test_development_areas_drive_plan(self):
        responses = answer_likert(
            DBT_QUESTIONS, 4,
            emotional_regulation=7, distress_tolerance=2, interpersonal_effectiveness=5,
        )

        result = score_dbt(responses)

        assert result.skill_scores == {
            "emotional_regulation": 100,
            "distress_tolerance": 29,
            "interpersonal_effectiveness": 71,
            "mindfulness": 57,
        }
        assert result.overall_skills_score == 64
        assert result.skill_levels["distress_tolerance"] == "beginner"
        assert result.skill_levels["emotional_regulation"] == "advanced"
        assert result.strongest_areas == ["emotional_regulation", "interpersonal_effectiveness"]
        assert result.development_areas == ["mindfulness", "distress_tolerance"]
        assert result.daily_practices == [
            "10-15 minute daily meditation practice",
            "Mindful listening during conversations with your partner",
            "Practice 4-7-8 breathing for 5 minutes daily",
            "Use ice cubes or cold water when overwhelmed",
        ]
        assert result.crisis_skills[0].startswith("TIPP technique")
        assert len(result.crisis_skills) == 4
        assert len(result.relationship_skills) == 2
        assert result.growth_plan == [
            "Mindfulness: Apply mindfulness to relationship interactions",
            "Distress Tolerance: Build basic distress tolerance skills",
        ]

    def test_mindfulness_practice_always_included(self):
        result = score_dbt(answer_likert(DBT_QUESTIONS, 7, emotional_regulation=2, interpersonal_effectiveness=3))

        assert "mindfulness" not in result.development_areas
        assert "Daily 5-minute mindfulness practice" in result.daily_practices
        assert any(s.startswith("PLEASE skill") for s in result.crisis_skills)
        assert any(s.startswith("DEAR MAN") for s in result.relationship_skills)

    @pytest.mark.parametrize("mean, level", [
        (3, "beginner"),
        (3.2, "developing"),
        (4.5, "developing"),
        (6, "skilled"),
        (6.5, "advanced"),
    ])
    def test_skill_levels(self, mean, level):
        assert skill_level(mean) == level


# =============================================================================
# EFT
# =============================================================================

class TestEFTScoring:

    def test_secure_bond(self):
        result = score_eft(answer_likert(EFT_QUESTIONS, 7))

        assert result.overall_emotional_connection == 100
        assert result.attachment_bond == "secure_bond"
        assert result.emotional_cycle_pattern == "secure_cycle"
        assert len(result.emotional_strengths) == 5
        assert result.growth_areas == []
        assert result.couple_exercises == [
            "Daily emotional temperature check-ins",
            'Practice the "Hold Me Tight" conversation',
        ]

    def test_disconnected(self):
        result = score_eft(answer_likert(EFT_QUESTIONS, 1))

        assert result.attachment_bond == "disconnected"
        assert result.emotional_cycle_pattern == "pursue_withdraw"
        assert result.emotional_strengths == ["Willingness to work on emotional connection"]
        assert len(result.growth_areas) == 5
        assert len(result.eft_insights) == 3
        assert len(result.recommended_interventions) == 5
        assert len(result.couple_exercises) == 6

    def test_withdraw_withdraw(self):
        responses = answer_likert(
            EFT_QUESTIONS, 7,
            cycle_awareness=4, attachment_accessibility=2, emotional_expression=2,
        )

        result = score_eft(responses)

        assert result.emotional_cycle_pattern == "withdraw_withdraw"
        # (29 + 100 + 29) / 3
        assert result.attachment_bond == "fragile_bond"

    def test_demand_defend(self):
        result = score_eft(answer_likert(EFT_QUESTIONS, 7, cycle_awareness=3))

        assert result.category_scores["cycle_awareness"] == 43
        assert result.emotional_cycle_pattern == "demand_defend"
        assert "Understanding your negative interaction cycles is key to change" in result.eft_insights


# =============================================================================
# ACT
# =============================================================================

class TestACTScoring:

    def test_growth_areas_and_goals(self):
        responses = answer_likert(
            ACT_QUESTIONS, 4,
            present_moment=7, acceptance=6, defusion=5, values=3, committed_action=2,
        )

        result = score_act(responses)

        assert result.overall_psychological_flexibility == 64
        assert result.flexibility_strengths == ["present_moment", "acceptance"]
        assert result.growth_areas == ["values", "committed_action"]
        assert result.values_alignment_score == 43
        assert result.values_alignment_level == "low"
        assert len(result.act_interventions) == 4
        assert result.flexibility_goals == [
            "Increase values clarity and alignment from 43 to 63",
            "Improve committed action toward goals from 29 to 49",
        ]
        assert len(result.mindfulness_practices) == 2
        assert len(result.values_exercises) == 5
        assert result.primary_values == []

    def test_value_rankings(self):
        rankings = {"fun": 3, "trust": 1, "love": 2, "made_up": 1}

        result = score_act(answer_likert(ACT_QUESTIONS, 6), value_rankings=rankings)

        assert result.primary_values == ["trust", "love", "fun"]
        assert "Focus especially on living your top value: trust" in result.values_exercises

    def test_goal_target_capped(self):
        result = score_act(answer_likert(ACT_QUESTIONS, 6))

        # 86 + 20 capped at 90
        assert result.flexibility_goals[0] == "Increase values clarity and alignment from 86 to 90"
        assert result.values_alignment_level == "very_high"
