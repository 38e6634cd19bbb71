# =============================================================================
# core/assessments/cbt.py - Cognitive Distortions (CBT)
# =============================================================================
# 21 statements (1-7), three per distortion; the third of each is reverse
# scored. A high category score means more of that distortion, so
# cognitive flexibility is 100 minus the average.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field

from core.assessments.likert import LikertQuestion, dimension_mean, rank_dimensions, to_percent
from lib.utils import round_half_up

CATEGORIES = [
    "catastrophizing",
    "mind_reading",
    "all_or_nothing",
    "emotional_reasoning",
    "personalization",
    "should_statements",
    "mental_filtering",
]

PRIMARY_DISTORTION_SCORE = 60
MAX_PRIMARY_DISTORTIONS = 3
THOUGHT_PATTERN_SCORE = 70
STRENGTH_SCORE = 40
LOW_FLEXIBILITY = 50


def _q(number: int, category: str, text: str, reverse_scored: bool = False) -> LikertQuestion:
    return LikertQuestion(f"cbt_{number:02d}", text, category, reverse_scored)


CBT_QUESTIONS: list[LikertQuestion] = [
    _q(1, "catastrophizing", "When my partner seems distant, I immediately think our relationship is in trouble."),
    _q(2, "catastrophizing", "If my partner doesn't respond to my text quickly, I assume they're upset with me."),
    _q(3, "catastrophizing", "I can usually find logical explanations for my partner's behavior.", True),
    _q(4, "mind_reading", "I often think I know what my partner is thinking without asking them."),
    _q(5, "mind_reading", "I assume my partner should know how I'm feeling without me telling them."),
    _q(6, "mind_reading", "I check with my partner before assuming what they mean.", True),
    _q(7, "all_or_nothing", "When we have a disagreement, I think our whole relationship is problematic."),
    _q(8, "all_or_nothing", "I see my partner as either perfect or terrible, with little in between."),
    _q(9, "all_or_nothing", "I can see both my partner's strengths and areas for growth.", True),
    _q(10, "emotional_reasoning", "If I feel unloved, I assume my partner doesn't love me."),
    _q(11, "emotional_reasoning", "My emotions about the relationship are always accurate indicators of reality."),
    _q(12, "emotional_reasoning", "I recognize that my feelings might not always reflect the actual situation.", True),
    _q(13, "personalization", "When my partner is in a bad mood, I assume it's because of something I did."),
    _q(14, "personalization", "I blame myself for most problems in our relationship."),
    _q(15, "personalization", "I understand that my partner's moods can be influenced by many factors.", True),
    _q(16, "should_statements", 'I often think about how my partner "should" behave in our relationship.'),
    _q(17, "should_statements", "I get frustrated when my partner doesn't meet my expectations."),
    _q(18, "should_statements", "I accept that my partner and I have different ways of showing love.", True),
    _q(19, "mental_filtering", "I tend to focus on the negative things in our relationship."),
    _q(20, "mental_filtering", "When my partner does something nice, I dismiss it as not that important."),
    _q(21, "mental_filtering", "I make an effort to notice and appreciate positive moments with my partner.", True),
]

THOUGHT_PATTERNS = {
    "catastrophizing": "worst_case_thinking",
    "mind_reading": "assumption_making",
    "all_or_nothing": "black_white_thinking",
    "emotional_reasoning": "emotion_as_fact",
    "personalization": "self_blame",
    "should_statements": "rigid_expectations",
    "mental_filtering": "negative_focus",
}

DISTORTION_INTERVENTIONS = {
    "catastrophizing": 'Practice asking "What\'s the most likely outcome?" instead of worst-case scenarios',
    "mind_reading": 'Use "I" statements and ask clarifying questions instead of assuming',
    "all_or_nothing": "Look for the gray areas and practice seeing partial positives",
    "emotional_reasoning": 'Fact-check your emotions: "I feel X, but what\'s the evidence?"',
    "personalization": "Consider external factors that might influence your partner's behavior",
    "should_statements": 'Replace "should" with "prefer" or "would like" in your thoughts',
    "mental_filtering": "Daily gratitude practice to balance focus on positives",
}

LOW_FLEXIBILITY_INTERVENTIONS = [
    "Daily thought record practice to identify and challenge negative thoughts",
    "Mindfulness meditation to create space between thoughts and reactions",
]

CATEGORY_STRENGTHS = {
    "catastrophizing": "Realistic thinking and problem-solving approach",
    "mind_reading": "Good communication and verification skills",
    "all_or_nothing": "Balanced perspective and nuanced thinking",
    "emotional_reasoning": "Ability to separate emotions from facts",
    "personalization": "Healthy boundaries and realistic responsibility",
    "should_statements": "Flexible expectations and acceptance",
    "mental_filtering": "Balanced attention to positives and negatives",
}

DEFAULT_STRENGTH = "Open to growth and self-awareness"

CATEGORY_GROWTH = {
    "catastrophizing": "Developing realistic thinking patterns",
    "mind_reading": "Improving communication and clarification skills",
    "all_or_nothing": "Practicing nuanced, balanced perspectives",
    "emotional_reasoning": "Learning to separate feelings from facts",
    "personalization": "Building healthy boundaries and realistic responsibility",
    "should_statements": "Developing flexible expectations and acceptance",
    "mental_filtering": "Cultivating balanced attention and gratitude",
}


@dataclass
class CBTResult:
    cognitive_flexibility_score: int
    primary_distortions: list[str]
    category_scores: dict[str, int]
    distortion_levels: dict[str, str]
    thought_patterns: list[str] = field(default_factory=list)
    interventions: list[str] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)
    growth_areas: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "cognitive_flexibility_score": self.cognitive_flexibility_score,
            "primary_distortions": list(self.primary_distortions),
            "category_scores": dict(self.category_scores),
            "distortion_levels": dict(self.distortion_levels),
            "thought_patterns": list(self.thought_patterns),
            "interventions": list(self.interventions),
            "strengths": list(self.strengths),
            "growth_areas": list(self.growth_areas),
        }

    @property
    def raw_scores(self) -> dict[str, int]:
        return dict(self.category_scores)


def distortion_level(mean: float) -> str:
    if mean <= 2.5:
        return "low"
    if mean <= 4.5:
        return "moderate"
    return "high"


def score_cbt(responses: dict[str, int]) -> CBTResult:
    """
    Score the cognitive distortions questionnaire.

    Args:
        responses: Likert answers (1-7) keyed by question ID.

    Returns:
        CBTResult. primary_distortions holds up to three categories
        scoring above 60, worst first.
    """
    means = {name: dimension_mean(CBT_QUESTIONS, responses, name) for name in CATEGORIES}
    scores = {name: to_percent(mean) for name, mean in means.items()}

    flexibility = round_half_up(100 - sum(scores.values()) / len(CATEGORIES))
    primary = [
        name for name in rank_dimensions(scores)
        if scores[name] > PRIMARY_DISTORTION_SCORE
    ][:MAX_PRIMARY_DISTORTIONS]

    interventions = list(LOW_FLEXIBILITY_INTERVENTIONS) if flexibility < LOW_FLEXIBILITY else []
    interventions.extend(DISTORTION_INTERVENTIONS[name] for name in primary)

    strengths = [CATEGORY_STRENGTHS[name] for name in CATEGORIES if scores[name] < STRENGTH_SCORE]

    return CBTResult(
        cognitive_flexibility_score=flexibility,
        primary_distortions=primary,
        category_scores=scores,
        distortion_levels={name: distortion_level(mean) for name, mean in means.items()},
        thought_patterns=[
            THOUGHT_PATTERNS[name] for name in CATEGORIES
            if scores[name] > THOUGHT_PATTERN_SCORE
        ],
        interventions=interventions,
        strengths=strengths or [DEFAULT_STRENGTH],
        growth_areas=[CATEGORY_GROWTH[name] for name in primary],
    )
