# =============================================================================
# core/assessments/attachment.py - Attachment Style Assessment
# =============================================================================
# ECR-R style questionnaire on a 1-7 Likert scale:
# - anxiety and avoidance subscales decide the style (midpoint 4.0)
# - a short security subscale is reported alongside
# - reverse-scored items count as (8 - answer)
#
# Usage:
#   result = score_attachment({"anx_01": 6, "avo_01": 2, ...})
#   result.attachment_style  # AttachmentStyle.ANXIOUS
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field

from core.assessments.likert import LIKERT_MAX, LIKERT_MIN, to_percent
from core.models.enums import AttachmentStyle

STYLE_THRESHOLD = 4.0
HIGH_DIMENSION = 5.0


@dataclass(frozen=True)
class AttachmentQuestion:
    id: str
    text: str
    subscale: str  # "anxiety" | "avoidance" | "security"
    reverse_scored: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "subscale": self.subscale,
            "scale": {"min": LIKERT_MIN, "max": LIKERT_MAX},
        }


ATTACHMENT_QUESTIONS: list[AttachmentQuestion] = [
    # Anxiety
    AttachmentQuestion("anx_01", "I worry about being abandoned by my romantic partner.", "anxiety"),
    AttachmentQuestion("anx_02", "I need a lot of reassurance from my partner.", "anxiety"),
    AttachmentQuestion("anx_03", "I fear my partner doesn't care about me as much as I care about them.", "anxiety"),
    AttachmentQuestion("anx_04", "I get frustrated when my partner is not available when I need them.", "anxiety"),
    AttachmentQuestion("anx_05", "I worry that romantic partners won't care about me as much as I care about them.", "anxiety"),
    AttachmentQuestion("anx_06", "My desire to be very close sometimes scares people away.", "anxiety"),
    AttachmentQuestion("anx_07", "I worry about being alone in my relationship.", "anxiety"),
    AttachmentQuestion("anx_08", "When I show my feelings for romantic partners, I'm afraid they will not feel the same about me.", "anxiety"),
    AttachmentQuestion("anx_09", "I rarely worry about my partner leaving me.", "anxiety", reverse_scored=True),
    AttachmentQuestion("anx_10", "My romantic partner makes me doubt myself.", "anxiety"),
    AttachmentQuestion("anx_11", "I do not often worry about being abandoned.", "anxiety", reverse_scored=True),
    AttachmentQuestion("anx_12", "I find that my partner(s) don't want to get as close as I would like.", "anxiety"),
    # Avoidance
    AttachmentQuestion("avo_01", "I prefer not to show a partner how I feel deep down.", "avoidance"),
    AttachmentQuestion("avo_02", "I find it difficult to depend on romantic partners.", "avoidance"),
    AttachmentQuestion("avo_03", "I don't feel comfortable opening up to romantic partners.", "avoidance"),
    AttachmentQuestion("avo_04", "I prefer not to show others how I feel deep down.", "avoidance"),
    AttachmentQuestion("avo_05", "I find it relatively easy to get close to my partner.", "avoidance", reverse_scored=True),
    AttachmentQuestion("avo_06", "It's not difficult for me to get close to my partner.", "avoidance", reverse_scored=True),
    AttachmentQuestion("avo_07", "I usually discuss my problems and concerns with my partner.", "avoidance", reverse_scored=True),
    AttachmentQuestion("avo_08", "It helps to turn to my romantic partner in times of need.", "avoidance", reverse_scored=True),
    AttachmentQuestion("avo_09", "I tell my partner just about everything.", "avoidance", reverse_scored=True),
    AttachmentQuestion("avo_10", "I talk things over with my partner.", "avoidance", reverse_scored=True),
    AttachmentQuestion("avo_11", "I am very comfortable being close to romantic partners.", "avoidance", reverse_scored=True),
    AttachmentQuestion("avo_12", "I find it easy to depend on romantic partners.", "avoidance", reverse_scored=True),
    # Security
    AttachmentQuestion("sec_01", "I feel confident that my partner loves me.", "security"),
    AttachmentQuestion("sec_02", "I can easily share my thoughts and feelings with my partner.", "security"),
    AttachmentQuestion("sec_03", "I feel comfortable depending on my romantic partner.", "security"),
    AttachmentQuestion("sec_04", "I trust that my partner will be there for me when I need them.", "security"),
    AttachmentQuestion("sec_05", "I feel safe being emotionally vulnerable with my partner.", "security"),
    AttachmentQuestion("sec_06", "I can express my needs clearly to my partner.", "security"),
    AttachmentQuestion("sec_07", "I feel valued and appreciated by my partner.", "security"),
    AttachmentQuestion("sec_08", "I can handle conflict with my partner constructively.", "security"),
]


DESCRIPTIONS = {
    AttachmentStyle.SECURE: (
        "You tend to be comfortable with intimacy and autonomy. You find it relatively easy "
        "to get close to others and are comfortable depending on them."
    ),
    AttachmentStyle.ANXIOUS: (
        "You want to be very close to your romantic partners, but you worry that others don't "
        "feel the same way about you. You desire a lot of closeness, attention, and reassurance."
    ),
    AttachmentStyle.AVOIDANT: (
        "It's important to you to feel independent and self-sufficient, and you prefer not to "
        "depend on others or have others depend on you."
    ),
    AttachmentStyle.DISORGANIZED: (
        "You want emotionally close relationships, but you find it difficult to trust others "
        "completely or to depend on them."
    ),
}

RELATIONSHIP_IMPLICATIONS = {
    AttachmentStyle.SECURE: [
        "Tend to have satisfying, long-lasting relationships",
        "Communicate needs and feelings effectively",
        "Handle conflict constructively",
    ],
    AttachmentStyle.ANXIOUS: [
        "May seek excessive reassurance from partners",
        "Can be sensitive to partner's moods and behaviors",
        "May have difficulty with partner's need for space",
    ],
    AttachmentStyle.AVOIDANT: [
        "May have difficulty with emotional intimacy",
        "Tend to value independence over connection",
        "May withdraw during conflict or stress",
    ],
    AttachmentStyle.DISORGANIZED: [
        "May have unpredictable relationship patterns",
        "May have conflicting desires for closeness and distance",
        "Can develop more secure patterns with support",
    ],
}

GROWTH_AREAS = {
    AttachmentStyle.SECURE: [
        "Continue developing emotional intelligence",
        "Support partner's growth and development",
        "Practice gratitude and appreciation",
    ],
    AttachmentStyle.ANXIOUS: [
        "Practice self-soothing techniques",
        "Develop individual interests and friendships",
        "Learn to communicate needs without seeking excessive reassurance",
    ],
    AttachmentStyle.AVOIDANT: [
        "Practice emotional expression and vulnerability",
        "Learn to recognize and respond to partner's emotional needs",
        "Practice staying present during emotional conversations",
    ],
    AttachmentStyle.DISORGANIZED: [
        "Consider working with a trauma-informed therapist",
        "Practice emotional regulation techniques",
        "Focus on building self-compassion and emotional safety",
    ],
}


@dataclass
class AttachmentResult:
    attachment_style: AttachmentStyle
    anxiety_score: int
    avoidance_score: int
    security_score: int
    raw_means: dict[str, float]
    description: str
    relationship_implications: list[str] = field(default_factory=list)
    growth_areas: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "attachment_style": self.attachment_style.value,
            "anxiety_score": self.anxiety_score,
            "avoidance_score": self.avoidance_score,
            "security_score": self.security_score,
            "description": self.description,
            "relationship_implications": list(self.relationship_implications),
            "growth_areas": list(self.growth_areas),
        }

    @property
    def raw_scores(self) -> dict[str, float]:
        return dict(self.raw_means)


def subscale_mean(responses: dict[str, int], subscale: str) -> float:
    """
    Mean of the answered items in a subscale, after reverse scoring.

    Unanswered items are skipped; a subscale with no answers scores 0.
    """
    scores = [
        (LIKERT_MAX + 1 - responses[q.id]) if q.reverse_scored else responses[q.id]
        for q in ATTACHMENT_QUESTIONS
        if q.subscale == subscale and q.id in responses
    ]
    return sum(scores) / len(scores) if scores else 0.0


def determine_attachment_style(anxiety: float, avoidance: float) -> AttachmentStyle:
    """Map the two dimensions (1-7 means) to a quadrant."""
    high_anxiety = anxiety >= STYLE_THRESHOLD
    high_avoidance = avoidance >= STYLE_THRESHOLD

    if not high_anxiety and not high_avoidance:
        return AttachmentStyle.SECURE
    if high_anxiety and not high_avoidance:
        return AttachmentStyle.ANXIOUS
    if not high_anxiety and high_avoidance:
        return AttachmentStyle.AVOIDANT
    return AttachmentStyle.DISORGANIZED


def score_attachment(responses: dict[str, int]) -> AttachmentResult:
    """
    Score a completed attachment questionnaire.

    Args:
        responses: Likert answers (1-7) keyed by question ID. Unknown IDs
            are ignored.

    Returns:
        AttachmentResult with 0-100 subscale scores and the style.
    """
    anxiety = subscale_mean(responses, "anxiety")
    avoidance = subscale_mean(responses, "avoidance")
    security = subscale_mean(responses, "security")

    style = determine_attachment_style(anxiety, avoidance)

    growth = list(GROWTH_AREAS[style])
    if anxiety > HIGH_DIMENSION:
        growth.append("Focus on anxiety management and self-regulation")
    if avoidance > HIGH_DIMENSION:
        growth.append("Work on increasing emotional openness and vulnerability")

    return AttachmentResult(
        attachment_style=style,
        anxiety_score=to_percent(anxiety),
        avoidance_score=to_percent(avoidance),
        security_score=to_percent(security),
        raw_means={
            "anxiety": round(anxiety, 2),
            "avoidance": round(avoidance, 2),
            "security": round(security, 2),
        },
        description=DESCRIPTIONS[style],
        relationship_implications=RELATIONSHIP_IMPLICATIONS[style],
        growth_areas=growth,
    )


# =============================================================================
# Couple Compatibility
# =============================================================================
# Symmetric: (anxious, secure) is looked up as (secure, anxious).

_S, _ANX, _AVO, _DIS = (
    AttachmentStyle.SECURE,
    AttachmentStyle.ANXIOUS,
    AttachmentStyle.AVOIDANT,
    AttachmentStyle.DISORGANIZED,
)

ATTACHMENT_COMPATIBILITY: dict[frozenset, dict] = {
    frozenset([_S]): {
        "compatibility_score": 95,
        "strengths": ["Both partners feel safe and supported", "High relationship satisfaction and stability"],
        "challenges": ["May occasionally take the relationship for granted"],
        "recommendations": ["Continue regular check-ins and appreciation", "Explore new ways to deepen intimacy"],
    },
    frozenset([_S, _ANX]): {
        "compatibility_score": 80,
        "strengths": ["Secure partner provides stability and reassurance", "Strong emotional connection"],
        "challenges": ["Anxious partner may need more reassurance than the secure partner naturally gives"],
        "recommendations": ["Offer extra reassurance during anxious periods", "Anxious partner practices self-soothing"],
    },
    frozenset([_S, _AVO]): {
        "compatibility_score": 75,
        "strengths": ["Secure partner models emotional openness", "Balanced relationship dynamic"],
        "challenges": ["Risk of emotional distance developing over time"],
        "recommendations": ["Avoidant partner practices emotional expression", "Respect the need for space"],
    },
    frozenset([_S, _DIS]): {
        "compatibility_score": 70,
        "strengths": ["Secure partner offers a stable base for healing"],
        "challenges": ["Unpredictable reactions can be confusing for the secure partner"],
        "recommendations": ["Prioritize emotional safety", "Consider trauma-informed support"],
    },
    frozenset([_ANX]): {
        "compatibility_score": 60,
        "strengths": ["Both value closeness and emotional expression"],
        "challenges": ["Mutual anxiety can escalate during conflict"],
        "recommendations": ["Build self-soothing skills together", "Agree on reassurance rituals"],
    },
    frozenset([_ANX, _AVO]): {
        "compatibility_score": 45,
        "strengths": ["Opportunity for both partners to grow toward security"],
        "challenges": ["Classic pursue-withdraw cycle", "Needs for closeness and space collide"],
        "recommendations": ["Name the pursue-withdraw pattern when it starts", "Consider couples therapy (EFT)"],
    },
    frozenset([_ANX, _DIS]): {
        "compatibility_score": 40,
        "strengths": ["Deep desire for connection on both sides"],
        "challenges": ["High emotional reactivity", "Trust can feel fragile"],
        "recommendations": ["Learn emotional regulation skills together", "Work with a therapist"],
    },
    frozenset([_AVO]): {
        "compatibility_score": 65,
        "strengths": ["Mutual respect for independence"],
        "challenges": ["Emotional intimacy may stay shallow"],
        "recommendations": ["Schedule intentional emotional check-ins", "Practice small vulnerable shares"],
    },
    frozenset([_AVO, _DIS]): {
        "compatibility_score": 50,
        "strengths": ["Both can learn to feel safe with closeness"],
        "challenges": ["Withdrawal can trigger fear and confusion"],
        "recommendations": ["Move toward closeness in small, predictable steps"],
    },
    frozenset([_DIS]): {
        "compatibility_score": 35,
        "strengths": ["Shared understanding of difficult attachment histories"],
        "challenges": ["Both partners may struggle with regulation at the same time"],
        "recommendations": ["Individual and couples therapy", "Build grounding routines together"],
    },
}


def get_attachment_compatibility(
    style1: AttachmentStyle | str,
    style2: AttachmentStyle | str,
) -> dict:
    """Compatibility score and guidance for a pair of attachment styles."""
    key = frozenset([AttachmentStyle(style1), AttachmentStyle(style2)])
    return dict(ATTACHMENT_COMPATIBILITY[key])
