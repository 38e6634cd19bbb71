# =============================================================================
# core/assessments/gottman.py - Gottman Sound Relationship House
# =============================================================================
# 56 statements (1-7), eight for each of the seven areas of the Sound
# Relationship House. Each area gets a 0-100 score with strengths, growth
# areas and interventions sized to how low it is; the overall score and
# the two "critical" areas decide relationship stability.
#
# Also home to the Four Horsemen text check (criticism, contempt,
# defensiveness, stonewalling) used on free-text conflict descriptions.
#
# Usage:
#   result = score_gottman({"lm_01": 6, "mc_03": 2, ...})
#   result.relationship_stability  # "at_risk"
#   analyze_text("You never listen. Whatever.")["horsemen"]
# =============================================================================

from __future__ import annotations

import re
from dataclasses import dataclass, field

from core.assessments.likert import LikertQuestion, average_score, dimension_mean, to_percent

AREAS = [
    "love_maps",
    "nurture_affection",
    "turn_towards",
    "positive_perspective",
    "manage_conflict",
    "make_dreams_reality",
    "create_shared_meaning",
]

CRITICAL_AREAS = ("positive_perspective", "manage_conflict")
CRITICAL_FLOOR = 50
STABLE_SCORE = 70
AT_RISK_SCORE = 50


def _area(area: str, prefix: str, *texts: str) -> list[LikertQuestion]:
    return [
        LikertQuestion(f"{prefix}_{i:02d}", text, area)
        for i, text in enumerate(texts, start=1)
    ]


GOTTMAN_QUESTIONS: list[LikertQuestion] = [
    *_area(
        "love_maps", "lm",
        "I know my partner's current stresses and worries.",
        "I can name my partner's best friends.",
        "I know what my partner's current goals are.",
        "I am familiar with my partner's religious beliefs and philosophy.",
        "I can name my partner's favorite movie or book.",
        "I know my partner's biggest fears and worries.",
        "I know what my partner's ideal vacation would be.",
        "I know my partner's current favorite way to spend an evening.",
    ),
    *_area(
        "nurture_affection", "na",
        "I often tell my partner that I love them.",
        "I regularly show physical affection to my partner.",
        "I express appreciation for things my partner does.",
        "I notice and comment on positive things about my partner.",
        "I feel appreciated by my partner.",
        "My partner and I are affectionate with each other.",
        "I feel loved and cared for in this relationship.",
        "Romance is definitely alive in our relationship.",
    ),
    *_area(
        "turn_towards", "tt",
        "When my partner tries to get my attention, I usually respond positively.",
        "I am interested in my partner's daily experiences.",
        "My partner and I have good conversations.",
        "I feel my partner is interested in my thoughts and feelings.",
        "When my partner shares something with me, I listen carefully.",
        "My partner responds positively when I try to get their attention.",
        "We enjoy each other's company.",
        "I feel emotionally connected to my partner.",
    ),
    *_area(
        "positive_perspective", "pp",
        "I generally feel positive about my relationship.",
        "I believe my partner has good intentions, even during conflicts.",
        "I focus more on my partner's positive qualities than negative ones.",
        "I give my partner the benefit of the doubt.",
        "I feel optimistic about our future together.",
        "When problems arise, I believe we can work through them.",
        "I feel grateful for my partner and our relationship.",
        "I look forward to spending time with my partner.",
    ),
    *_area(
        "manage_conflict", "mc",
        "We can discuss our differences without it becoming a big fight.",
        "When we argue, we are able to resolve things.",
        "I can express my needs without attacking my partner.",
        "My partner and I compromise during disagreements.",
        "We rarely bring up past issues during current conflicts.",
        "I avoid criticism and contempt during disagreements.",
        "We take breaks when discussions get too heated.",
        "After conflicts, we repair and reconnect well.",
    ),
    *_area(
        "make_dreams_reality", "mdr",
        "My partner supports my personal goals and dreams.",
        "I feel comfortable sharing my dreams with my partner.",
        "We work together to make our individual dreams happen.",
        "I encourage my partner to pursue their goals.",
        "We have shared dreams and goals for our future.",
        "I feel my partner believes in me and my abilities.",
        "We help each other grow as individuals.",
        "My partner doesn't try to change my fundamental dreams.",
    ),
    *_area(
        "create_shared_meaning", "csm",
        "We share similar values about what's important in life.",
        "We have created meaningful traditions together.",
        "We have a shared vision for our future.",
        "We agree on what makes life meaningful.",
        "Our relationship has a spiritual dimension that we both value.",
        "We share similar goals for our family life.",
        "We have created our own unique culture as a couple.",
        "We support each other's roles and responsibilities.",
    ),
]


AREA_STRENGTHS = {
    "love_maps": [
        "Good awareness of partner's inner world",
        "Understanding of partner's current life",
        "Knowledge of partner's values and beliefs",
        "Awareness of partner's goals and dreams",
    ],
    "nurture_affection": [
        "Regular expressions of love and appreciation",
        "Physical affection and romance",
        "Positive emotional climate",
        "Mutual admiration and respect",
    ],
    "turn_towards": [
        "Responsive to partner's bids for connection",
        "Good daily communication habits",
        "Emotional attunement and interest",
        "Strong friendship foundation",
    ],
    "positive_perspective": [
        "Optimistic view of the relationship",
        "Assumes positive intent from partner",
        "Focus on partner's good qualities",
        "Hope for the future together",
    ],
    "manage_conflict": [
        "Effective conflict resolution skills",
        "Ability to compromise and negotiate",
        "Avoids the Four Horsemen",
        "Good repair and recovery after fights",
    ],
    "make_dreams_reality": [
        "Supports partner's individual goals",
        "Encourages personal growth",
        "Works together on shared dreams",
        "Believes in each other's potential",
    ],
    "create_shared_meaning": [
        "Shared values and life philosophy",
        "Meaningful traditions and rituals",
        "Common vision for the future",
        "Spiritual or deeper connection",
    ],
}

AREA_GROWTH = {
    "love_maps": [
        "Learn more about partner's current stresses",
        "Ask about partner's dreams and aspirations",
        "Understand partner's values and beliefs better",
        "Stay updated on partner's changing inner world",
    ],
    "nurture_affection": [
        "Express appreciation more frequently",
        "Increase physical affection and romance",
        "Show love in partner's preferred way",
        "Create more positive moments together",
    ],
    "turn_towards": [
        "Respond more positively to partner's bids",
        "Show more interest in daily experiences",
        "Put away distractions during conversations",
        "Ask more questions about partner's thoughts",
    ],
    "positive_perspective": [
        "Focus more on partner's positive qualities",
        "Assume positive intent during conflicts",
        "Practice gratitude for the relationship",
        "Build hope for the future together",
    ],
    "manage_conflict": [
        "Avoid criticism and contempt",
        "Take responsibility instead of being defensive",
        "Practice active listening during disagreements",
        "Learn to take breaks when emotions escalate",
    ],
    "make_dreams_reality": [
        "Ask about and support partner's goals",
        "Share your own dreams more openly",
        "Work together on mutual aspirations",
        "Encourage individual growth and development",
    ],
    "create_shared_meaning": [
        "Discuss values and what's meaningful to each of you",
        "Create new traditions and rituals together",
        "Develop a shared vision for your future",
        "Explore spiritual or philosophical connections",
    ],
}

AREA_INTERVENTIONS = {
    "love_maps": [
        "Love Map questionnaire exercises",
        "Daily check-ins about each other's world",
        "Regular updates about life changes",
        "Mindful conversation practices",
    ],
    "nurture_affection": [
        "Daily appreciation exercises",
        "Physical affection challenges",
        "Regular date nights and romance",
        "Love language practice",
    ],
    "turn_towards": [
        "Attention and responsiveness training",
        "Active listening practice",
        "Phone-free conversation time",
        "Emotional check-in rituals",
    ],
    "positive_perspective": [
        "Gratitude journal for relationship",
        "Positive reframing exercises",
        "Strengths focus activities",
        "Hope and vision building",
    ],
    "manage_conflict": [
        "Four Horsemen antidotes training",
        "Taking breaks during conflict",
        "I-statements and softer startups",
        "Repair and recovery practices",
    ],
    "make_dreams_reality": [
        "Dreams and aspirations sharing",
        "Goal-setting as a couple",
        "Individual growth support",
        "Life vision exercises",
    ],
    "create_shared_meaning": [
        "Values clarification exercises",
        "Tradition and ritual creation",
        "Future visioning activities",
        "Meaning-making conversations",
    ],
}


@dataclass
class GottmanArea:
    score: int
    strengths: list[str] = field(default_factory=list)
    growth_areas: list[str] = field(default_factory=list)
    interventions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "strengths": list(self.strengths),
            "growth_areas": list(self.growth_areas),
            "interventions": list(self.interventions),
        }


@dataclass
class GottmanResult:
    areas: dict[str, GottmanArea]
    overall_score: int
    relationship_stability: str  # "stable" | "at_risk" | "needs_attention"

    def to_dict(self) -> dict:
        return {
            "areas": {name: area.to_dict() for name, area in self.areas.items()},
            "overall_score": self.overall_score,
            "relationship_stability": self.relationship_stability,
        }

    @property
    def raw_scores(self) -> dict[str, int]:
        return {name: area.score for name, area in self.areas.items()}


def _by_weakness(items: list[str], score: int) -> list[str]:
    """All items below 50, the first two below 70, otherwise just the first."""
    if score < 50:
        return list(items)
    if score < 70:
        return items[:2]
    return items[:1]


def _by_strength(items: list[str], score: int) -> list[str]:
    """All items from 80, the first two from 60, otherwise just the first."""
    if score >= 80:
        return list(items)
    if score >= 60:
        return items[:2]
    return items[:1]


def determine_stability(overall: float, area_scores: dict[str, int]) -> str:
    low_critical = any(area_scores[name] < CRITICAL_FLOOR for name in CRITICAL_AREAS)
    if overall >= STABLE_SCORE and not low_critical:
        return "stable"
    if overall >= AT_RISK_SCORE and not low_critical:
        return "at_risk"
    return "needs_attention"


def score_gottman(responses: dict[str, int]) -> GottmanResult:
    """
    Score the Sound Relationship House questionnaire.

    Args:
        responses: Likert answers (1-7) keyed by question ID. Unknown IDs
            are ignored; an area with no answers scores 0.

    Returns:
        GottmanResult with per-area guidance and overall stability.
    """
    area_scores = {
        name: to_percent(dimension_mean(GOTTMAN_QUESTIONS, responses, name))
        for name in AREAS
    }
    areas = {
        name: GottmanArea(
            score=score,
            strengths=_by_strength(AREA_STRENGTHS[name], score),
            growth_areas=_by_weakness(AREA_GROWTH[name], score),
            interventions=_by_weakness(AREA_INTERVENTIONS[name], score),
        )
        for name, score in area_scores.items()
    }

    # Stability uses the unrounded mean
    overall = sum(area_scores.values()) / len(AREAS)

    return GottmanResult(
        areas=areas,
        overall_score=average_score(area_scores),
        relationship_stability=determine_stability(overall, area_scores),
    )


# =============================================================================
# Four Horsemen
# =============================================================================
# Keywords count once each when present (case-insensitive substring);
# every regex match counts.

FOUR_HORSEMEN = {
    "criticism": {
        "description": "Attacking your partner's character or personality rather than addressing specific behavior",
        "keywords": [
            "you always", "you never", "you are", "you don't", "you can't",
            "what's wrong with you", "you should", "you shouldn't", "typical",
            "again", "every time",
        ],
        "patterns": [
            r"you\s+(always|never)\s+",
            r"what'?s\s+wrong\s+with\s+you",
            r"you\s+(are|should|don'?t|can'?t)\s+",
            r"typical\s+you",
            r"here\s+we\s+go\s+again",
        ],
        "suggestions": [
            'Try using "I" statements instead of "you" statements',
            "Focus on specific behaviors rather than character attacks",
        ],
    },
    "contempt": {
        "description": "Attacking your partner from a position of superiority with sarcasm, cynicism, or mean-spirited humor",
        "keywords": [
            "stupid", "idiot", "moron", "pathetic", "worthless", "loser",
            "ridiculous", "whatever", "seriously?", "unbelievable", "grow up",
            "get real", "drama queen", "crybaby",
        ],
        "patterns": [
            r".*\s+(stupid|idiot|moron|pathetic|worthless|loser)\s+.*",
            r"seriously\?+",
            r"whatever\.*",
            r"grow\s+up",
            r"get\s+real",
            r"oh\s+please",
        ],
        "suggestions": [
            "Take a break to cool down before continuing",
            "Remember your partner's positive qualities",
            "Avoid sarcasm and mean-spirited humor",
        ],
    },
    "defensiveness": {
        "description": "Playing the victim or counter-attacking instead of taking responsibility",
        "keywords": [
            "it's not my fault", "you're wrong", "that's not true", "no i didn't",
            "you're the one", "i didn't", "but you", "you started", "you made me",
            "if you hadn't",
        ],
        "patterns": [
            r"it'?s\s+not\s+my\s+fault",
            r"you'?re\s+wrong",
            r"that'?s\s+not\s+true",
            r"no\s+i\s+didn'?t",
            r"but\s+you\s+",
            r"you\s+made\s+me",
            r"if\s+you\s+hadn'?t",
        ],
        "suggestions": [
            "Try to understand your partner's perspective",
            "Take some responsibility for the issue",
            "Ask questions to clarify instead of defending",
        ],
    },
    "stonewalling": {
        "description": "Withdrawing emotionally and shutting down during conflict",
        "keywords": [
            "fine", "whatever", "i don't care", "nothing", "forget it",
            "i'm done", "leave me alone", "not talking", "silence",
        ],
        "patterns": [
            r"^fine\.?$",
            r"^whatever\.?$",
            r"i\s+don'?t\s+care",
            r"^nothing\.?$",
            r"forget\s+it",
            r"i'?m\s+done",
            r"leave\s+me\s+alone",
        ],
        "suggestions": [
            "Let your partner know you need a break",
            "Schedule a time to return to the conversation",
            "Practice self-soothing techniques",
        ],
    },
}

_HORSEMEN_PATTERNS = {
    name: [re.compile(pattern, re.IGNORECASE) for pattern in data["patterns"]]
    for name, data in FOUR_HORSEMEN.items()
}


def count_horseman_matches(text: str, horseman: str) -> int:
    lowered = text.lower()
    keyword_hits = sum(1 for keyword in FOUR_HORSEMEN[horseman]["keywords"] if keyword in lowered)
    pattern_hits = sum(
        sum(1 for _ in pattern.finditer(text))
        for pattern in _HORSEMEN_PATTERNS[horseman]
    )
    return keyword_hits + pattern_hits


def analyze_text(text: str) -> dict:
    """
    Look for the Four Horsemen in a piece of conflict text.

    Confidence is total matches per ten words, capped at 1.

    Returns:
        {"horsemen": [...], "confidence": float, "suggestions": [...],
         "descriptions": {horseman: description}}
    """
    detected = []
    total = 0
    for horseman in FOUR_HORSEMEN:
        matches = count_horseman_matches(text, horseman)
        if matches:
            detected.append(horseman)
            total += matches

    word_count = len(text.split(" "))
    confidence = min(total / max(word_count / 10, 1), 1.0)

    return {
        "horsemen": detected,
        "confidence": confidence,
        "suggestions": [s for h in detected for s in FOUR_HORSEMEN[h]["suggestions"]],
        "descriptions": {h: FOUR_HORSEMEN[h]["description"] for h in detected},
    }
