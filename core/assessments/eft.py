# =============================================================================
# core/assessments/eft.py - Emotionally Focused Therapy (EFT)
# =============================================================================
# 25 statements (1-7), five per category. Category scores decide the
# attachment bond strength and which negative interaction cycle the couple
# is most likely caught in; both shape the insights and interventions.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field

from core.assessments.likert import LikertQuestion, average_score, dimension_mean, to_percent

CATEGORIES = [
    "emotional_awareness",
    "emotional_expression",
    "emotional_responsiveness",
    "attachment_accessibility",
    "cycle_awareness",
]

STRENGTH_SCORE = 70
GROWTH_SCORE = 60
MAX_INTERVENTIONS = 5
MAX_EXERCISES = 6


def _q(number: int, category: str, text: str, reverse_scored: bool = False) -> LikertQuestion:
    return LikertQuestion(f"eft_{number:02d}", text, category, reverse_scored)


EFT_QUESTIONS: list[LikertQuestion] = [
    _q(1, "emotional_awareness", "I am aware of my emotions as they arise in my relationship."),
    _q(2, "emotional_awareness", "I can identify the specific emotions I feel during conflicts with my partner."),
    _q(3, "emotional_awareness", "I often feel confused about what I'm actually feeling in my relationship.", True),
    _q(4, "emotional_awareness", "I notice my emotional reactions before they become overwhelming."),
    _q(5, "emotional_awareness", "I can distinguish between surface emotions and deeper feelings."),
    _q(6, "emotional_expression", "I can express my vulnerable emotions to my partner."),
    _q(7, "emotional_expression", "I hold back my true feelings to avoid conflict.", True),
    _q(8, "emotional_expression", "I feel safe sharing my deepest emotions with my partner."),
    _q(9, "emotional_expression", "I can express anger without attacking my partner."),
    _q(10, "emotional_expression", "I share my fears and insecurities with my partner."),
    _q(11, "emotional_responsiveness", "I respond with empathy when my partner shares emotions."),
    _q(12, "emotional_responsiveness", "I get defensive when my partner expresses difficult emotions.", True),
    _q(13, "emotional_responsiveness", "I can comfort my partner when they are upset."),
    _q(14, "emotional_responsiveness", "I validate my partner's emotions even when I don't understand them."),
    _q(15, "emotional_responsiveness", "I am emotionally available when my partner needs support."),
    _q(16, "attachment_accessibility", "I feel emotionally connected to my partner most of the time."),
    _q(17, "attachment_accessibility", "I often feel emotionally distant from my partner.", True),
    _q(18, "attachment_accessibility", "My partner and I can reach each other emotionally."),
    _q(19, "attachment_accessibility", "I feel like my partner is emotionally available to me."),
    _q(20, "attachment_accessibility", "We can find our way back to connection after conflict."),
    _q(21, "cycle_awareness", "I understand the negative patterns my partner and I get stuck in."),
    _q(22, "cycle_awareness", "I can see how my actions trigger negative responses in my partner."),
    _q(23, "cycle_awareness", "We get caught in the same fight over and over.", True),
    _q(24, "cycle_awareness", "I can step out of negative cycles when they start."),
    _q(25, "cycle_awareness", "I understand how my partner's behavior affects me emotionally."),
]

CATEGORY_STRENGTHS = {
    "emotional_awareness": "Strong emotional self-awareness",
    "emotional_expression": "Ability to express emotions authentically",
    "emotional_responsiveness": "Empathetic and responsive to partner's emotions",
    "attachment_accessibility": "Strong emotional connection and accessibility",
    "cycle_awareness": "Good awareness of relationship patterns",
}

DEFAULT_STRENGTH = "Willingness to work on emotional connection"

CATEGORY_GROWTH = {
    "emotional_awareness": "Developing greater emotional self-awareness",
    "emotional_expression": "Learning to express vulnerable emotions safely",
    "emotional_responsiveness": "Becoming more emotionally responsive to partner",
    "attachment_accessibility": "Building emotional accessibility and connection",
    "cycle_awareness": "Understanding and changing negative interaction cycles",
}

BOND_INSIGHTS = {
    "secure_bond": [
        "You have a strong emotional bond with good mutual responsiveness",
        "Continue nurturing your emotional connection through daily practices",
    ],
    "developing_bond": [
        "Your emotional bond is developing with room for strengthening",
        "Focus on increasing emotional accessibility and responsiveness",
    ],
    "fragile_bond": [
        "Your emotional bond needs attention and care to strengthen",
        "Work on creating safety for vulnerable emotional expression",
    ],
    "disconnected": [
        "There's significant emotional disconnection that needs addressing",
        "Start with building basic emotional safety and awareness",
    ],
}

CYCLE_INTERVENTIONS = {
    "pursue_withdraw": [
        "The pursuing partner: Practice self-soothing and giving space",
        "The withdrawing partner: Practice small steps toward emotional engagement",
    ],
    "withdraw_withdraw": [
        "Both partners: Take turns initiating emotional connection",
        "Schedule regular emotional check-ins to prevent disconnection",
    ],
    "demand_defend": [
        "Practice expressing needs without criticism or blame",
        "Focus on sharing underlying emotions rather than positions",
    ],
    "secure_cycle": [
        "Maintain your positive cycle through daily emotional connection",
        "Help other couples by modeling secure attachment behaviors",
    ],
    "transitional": [
        "Continue building awareness of your interaction patterns",
        "Practice new responses when old patterns emerge",
    ],
}

CATEGORY_INTERVENTIONS = {
    "emotional_awareness": "Daily emotion identification and journaling practice",
    "emotional_expression": "Practice expressing one vulnerable emotion daily",
    "emotional_responsiveness": "Focus on validation before problem-solving",
}

CATEGORY_EXERCISES = {
    "cycle_awareness": [
        "Map your negative cycle together",
        "Practice stepping out of the cycle when it starts",
    ],
    "emotional_expression": [
        "Share one fear or vulnerability weekly",
        "Practice expressing primary emotions under secondary emotions",
    ],
    "attachment_accessibility": [
        "Create rituals for emotional connection",
        "Practice accessibility - being emotionally available when needed",
    ],
}

CORE_EXERCISES = [
    "Daily emotional temperature check-ins",
    'Practice the "Hold Me Tight" conversation',
]


@dataclass
class EFTResult:
    overall_emotional_connection: int
    category_scores: dict[str, int]
    attachment_bond: str
    emotional_cycle_pattern: str
    emotional_strengths: list[str] = field(default_factory=list)
    growth_areas: list[str] = field(default_factory=list)
    eft_insights: list[str] = field(default_factory=list)
    recommended_interventions: list[str] = field(default_factory=list)
    couple_exercises: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "overall_emotional_connection": self.overall_emotional_connection,
            "category_scores": dict(self.category_scores),
            "attachment_bond": self.attachment_bond,
            "emotional_cycle_pattern": self.emotional_cycle_pattern,
            "emotional_strengths": list(self.emotional_strengths),
            "growth_areas": list(self.growth_areas),
            "eft_insights": list(self.eft_insights),
            "recommended_interventions": list(self.recommended_interventions),
            "couple_exercises": list(self.couple_exercises),
        }

    @property
    def raw_scores(self) -> dict[str, int]:
        return dict(self.category_scores)


def determine_attachment_bond(scores: dict[str, int]) -> str:
    """Bond strength from accessibility, responsiveness and expression."""
    bond = (
        scores["attachment_accessibility"]
        + scores["emotional_responsiveness"]
        + scores["emotional_expression"]
    ) / 3
    if bond >= 80:
        return "secure_bond"
    if bond >= 60:
        return "developing_bond"
    if bond >= 40:
        return "fragile_bond"
    return "disconnected"


def identify_emotional_cycle(scores: dict[str, int]) -> str:
    cycle = scores["cycle_awareness"]
    responsiveness = scores["emotional_responsiveness"]

    if cycle < 40 and responsiveness < 40:
        return "pursue_withdraw"
    if scores["attachment_accessibility"] < 40 and scores["emotional_expression"] < 40:
        return "withdraw_withdraw"
    if cycle < 50:
        return "demand_defend"
    if cycle >= 70 and responsiveness >= 70:
        return "secure_cycle"
    return "transitional"


def score_eft(responses: dict[str, int]) -> EFTResult:
    """
    Score the emotionally focused therapy questionnaire.

    Args:
        responses: Likert answers (1-7) keyed by question ID.
    """
    scores = {
        name: to_percent(dimension_mean(EFT_QUESTIONS, responses, name))
        for name in CATEGORIES
    }
    bond = determine_attachment_bond(scores)
    cycle = identify_emotional_cycle(scores)

    insights = list(BOND_INSIGHTS[bond])
    if scores["cycle_awareness"] < 50:
        insights.append("Understanding your negative interaction cycles is key to change")

    interventions = list(CYCLE_INTERVENTIONS[cycle])
    interventions.extend(
        text for name, text in CATEGORY_INTERVENTIONS.items()
        if scores[name] < GROWTH_SCORE
    )

    exercises = list(CORE_EXERCISES)
    for name, extra in CATEGORY_EXERCISES.items():
        if scores[name] < GROWTH_SCORE:
            exercises.extend(extra)

    strengths = [CATEGORY_STRENGTHS[n] for n in CATEGORIES if scores[n] >= STRENGTH_SCORE]

    return EFTResult(
        overall_emotional_connection=average_score(scores),
        category_scores=scores,
        attachment_bond=bond,
        emotional_cycle_pattern=cycle,
        emotional_strengths=strengths or [DEFAULT_STRENGTH],
        growth_areas=[CATEGORY_GROWTH[n] for n in CATEGORIES if scores[n] < GROWTH_SCORE],
        eft_insights=insights,
        recommended_interventions=interventions[:MAX_INTERVENTIONS],
        couple_exercises=exercises[:MAX_EXERCISES],
    )
