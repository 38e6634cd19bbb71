# =============================================================================
# core/assessments/act.py - Acceptance and Commitment Therapy (ACT)
# =============================================================================
# 24 statements (1-7), four for each of the six psychological flexibility
# processes. Optionally the user ranks relationship values (1 = most
# important); the top five become their primary values.
#
# Usage:
#   result = score_act({"act_01": 6, ...}, value_rankings={"trust": 1, "fun": 2})
#   result.values_alignment_level  # "high"
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field

from core.assessments.likert import (
    LikertQuestion,
    average_score,
    dimension_mean,
    rank_dimensions,
    to_percent,
)

PROCESSES = [
    "present_moment",
    "acceptance",
    "defusion",
    "self_as_context",
    "values",
    "committed_action",
]

MAX_PRIMARY_VALUES = 5
MAX_INTERVENTIONS = 6
MAX_MINDFULNESS_PRACTICES = 5
GROWTH_SCORE = 60
GOAL_STEP = 20
GOAL_CEILING = 90


def _q(number: int, process: str, text: str, reverse_scored: bool = False) -> LikertQuestion:
    return LikertQuestion(f"act_{number:02d}", text, process, reverse_scored)


ACT_QUESTIONS: list[LikertQuestion] = [
    _q(1, "present_moment", "I am fully present when spending time with my partner."),
    _q(2, "present_moment", "I often find my mind wandering during conversations with my partner.", True),
    _q(3, "present_moment", "I notice when I'm not being present in my relationship."),
    _q(4, "present_moment", "I can focus on what's happening right now in our relationship."),
    _q(5, "acceptance", "I can accept difficult emotions in my relationship without fighting them."),
    _q(6, "acceptance", "I struggle against uncomfortable feelings about my relationship.", True),
    _q(7, "acceptance", "I allow myself to feel whatever comes up about my relationship."),
    _q(8, "acceptance", "I try to avoid or push away negative emotions about my partner.", True),
    _q(9, "defusion", "I can observe my thoughts about my relationship without being controlled by them."),
    _q(10, "defusion", "I get caught up in negative thoughts about my partner.", True),
    _q(11, "defusion", "I recognize that my thoughts about my relationship are just thoughts, not facts."),
    _q(12, "defusion", "I step back and observe my mind during relationship conflicts."),
    _q(13, "self_as_context", "I have a stable sense of who I am in my relationship."),
    _q(14, "self_as_context", "My sense of self depends on how well my relationship is going.", True),
    _q(15, "self_as_context", "I can observe my relationship experiences without losing myself."),
    _q(16, "self_as_context", "I maintain my identity while being close to my partner."),
    _q(17, "values", "I am clear about what matters most to me in relationships."),
    _q(18, "values", "I act according to my values even when it's difficult in my relationship."),
    _q(19, "values", "I often do things in my relationship that go against what I value.", True),
    _q(20, "values", "My relationship choices align with my deepest values."),
    _q(21, "committed_action", "I take action toward my relationship goals even when I feel afraid."),
    _q(22, "committed_action", "I avoid doing things in my relationship when they feel uncomfortable.", True),
    _q(23, "committed_action", "I persist in working on my relationship even when progress is slow."),
    _q(24, "committed_action", "I follow through on commitments I make to my partner."),
]

RELATIONSHIP_VALUES = {
    "love": ("Love", "Expressing and receiving love deeply"),
    "trust": ("Trust", "Building and maintaining trust"),
    "honesty": ("Honesty", "Being truthful and authentic"),
    "commitment": ("Commitment", "Dedicating yourself to the relationship"),
    "growth": ("Growth", "Growing individually and together"),
    "fun": ("Fun", "Enjoying life and playing together"),
    "intimacy": ("Intimacy", "Emotional and physical closeness"),
    "respect": ("Respect", "Treating each other with dignity"),
    "support": ("Support", "Being there for each other"),
    "independence": ("Independence", "Maintaining individual identity"),
    "adventure": ("Adventure", "Exploring and trying new things together"),
    "stability": ("Stability", "Creating a secure, predictable foundation"),
    "communication": ("Communication", "Open, honest dialogue"),
    "compassion": ("Compassion", "Showing kindness and understanding"),
    "spirituality": ("Spirituality", "Sharing spiritual or meaningful practices"),
}

PROCESS_INTERVENTIONS = {
    "present_moment": [
        "Practice mindful presence during daily interactions with your partner",
        "Use the 5-4-3-2-1 grounding technique during relationship stress",
    ],
    "acceptance": [
        "Practice allowing difficult emotions without trying to change them",
        "Use the RAIN technique (Recognize, Allow, Investigate, Nurture)",
    ],
    "defusion": [
        'Label thoughts as "having the thought that..." during conflicts',
        "Practice observing your mental chatter without believing every thought",
    ],
    "self_as_context": [
        "Develop a stable sense of self independent of relationship outcomes",
        "Practice self-compassion and maintaining identity within relationships",
    ],
    "values": [
        "Clarify and prioritize your core relationship values",
        "Make daily choices that align with your identified values",
    ],
    "committed_action": [
        "Set specific, values-based goals for your relationship",
        "Take small daily actions toward your relationship goals",
    ],
}

GOAL_TEMPLATES = {
    "present_moment": "Increase present-moment awareness from {current} to {target}",
    "acceptance": "Improve acceptance of difficult emotions from {current} to {target}",
    "defusion": "Enhance cognitive defusion skills from {current} to {target}",
    "self_as_context": "Strengthen stable sense of self from {current} to {target}",
    "values": "Increase values clarity and alignment from {current} to {target}",
    "committed_action": "Improve committed action toward goals from {current} to {target}",
}


@dataclass
class ACTResult:
    overall_psychological_flexibility: int
    process_scores: dict[str, int]
    flexibility_strengths: list[str]
    growth_areas: list[str]
    values_alignment_score: int
    values_alignment_level: str
    primary_values: list[str] = field(default_factory=list)
    act_interventions: list[str] = field(default_factory=list)
    values_exercises: list[str] = field(default_factory=list)
    mindfulness_practices: list[str] = field(default_factory=list)
    flexibility_goals: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "overall_psychological_flexibility": self.overall_psychological_flexibility,
            "process_scores": dict(self.process_scores),
            "flexibility_strengths": list(self.flexibility_strengths),
            "growth_areas": list(self.growth_areas),
            "values_alignment_score": self.values_alignment_score,
            "values_alignment_level": self.values_alignment_level,
            "primary_values": list(self.primary_values),
            "act_interventions": list(self.act_interventions),
            "values_exercises": list(self.values_exercises),
            "mindfulness_practices": list(self.mindfulness_practices),
            "flexibility_goals": list(self.flexibility_goals),
        }

    @property
    def raw_scores(self) -> dict[str, int]:
        return dict(self.process_scores)


def values_alignment_level(score: int) -> str:
    if score >= 85:
        return "very_high"
    if score >= 70:
        return "high"
    if score >= 50:
        return "moderate"
    return "low"


def primary_values(value_rankings: dict[str, int] | None) -> list[str]:
    """Top five known value IDs, lowest rank number first."""
    if not value_rankings:
        return []
    known = [value for value in value_rankings if value in RELATIONSHIP_VALUES]
    ranked = sorted(known, key=lambda value: value_rankings[value])
    return ranked[:MAX_PRIMARY_VALUES]


def _values_exercises(values: list[str], values_score: int) -> list[str]:
    exercises = []
    if values_score < GROWTH_SCORE:
        exercises.append("Complete a comprehensive values clarification exercise")
        exercises.append("Write about why your top values matter to you personally")
    exercises.append("Rate how well you're living your values daily (1-10 scale)")
    exercises.append("Plan one values-based action for your relationship each week")
    if values:
        exercises.append(f"Focus especially on living your top value: {values[0]}")
    exercises.append("Share your core values with your partner and discuss alignment")
    return exercises


def _mindfulness_practices(scores: dict[str, int]) -> list[str]:
    practices = []
    if scores["present_moment"] < GROWTH_SCORE:
        practices.append("5-minute daily mindfulness meditation")
        practices.append("Mindful listening practice with your partner")
    practices.append("Body scan before important relationship conversations")
    practices.append("Mindful appreciation - notice three things you appreciate about your partner daily")
    if scores["acceptance"] < GROWTH_SCORE:
        practices.append("Loving-kindness meditation for yourself and your partner")
    if scores["defusion"] < GROWTH_SCORE:
        practices.append("Observing thoughts meditation - watch thoughts without judgment")
    return practices[:MAX_MINDFULNESS_PRACTICES]


def score_act(responses: dict[str, int], value_rankings: dict[str, int] | None = None) -> ACTResult:
    """
    Score the psychological flexibility questionnaire.

    Args:
        responses: Likert answers (1-7) keyed by question ID.
        value_rankings: Optional rank (1 = most important) keyed by value
            ID, see RELATIONSHIP_VALUES. Unknown IDs are ignored.

    Returns:
        ACTResult. flexibility_strengths are the top two processes,
        growth_areas the bottom two.
    """
    scores = {
        name: to_percent(dimension_mean(ACT_QUESTIONS, responses, name))
        for name in PROCESSES
    }
    ranked = rank_dimensions(scores)
    growth = ranked[-2:]
    values = primary_values(value_rankings)

    interventions = [text for area in growth for text in PROCESS_INTERVENTIONS[area]]
    goals = [
        GOAL_TEMPLATES[area].format(
            current=scores[area],
            target=min(scores[area] + GOAL_STEP, GOAL_CEILING),
        )
        for area in growth
    ]

    return ACTResult(
        overall_psychological_flexibility=average_score(scores),
        process_scores=scores,
        flexibility_strengths=ranked[:2],
        growth_areas=growth,
        values_alignment_score=scores["values"],
        values_alignment_level=values_alignment_level(scores["values"]),
        primary_values=values,
        act_interventions=interventions[:MAX_INTERVENTIONS],
        values_exercises=_values_exercises(values, scores["values"]),
        mindfulness_practices=_mindfulness_practices(scores),
        flexibility_goals=goals,
    )
