# =============================================================================
# core/assessments/love_languages.py - Love Languages Assessment
# =============================================================================
# Ten forced-choice questions; each option maps to one love language.
# The language picked most often is primary, the runner-up (if picked at
# all) is secondary.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field

from core.models.enums import LoveLanguage

_W = LoveLanguage.WORDS_OF_AFFIRMATION
_A = LoveLanguage.ACTS_OF_SERVICE
_Q = LoveLanguage.QUALITY_TIME
_G = LoveLanguage.RECEIVING_GIFTS
_T = LoveLanguage.PHYSICAL_TOUCH

# Order matters: ties for primary are broken by this order
LANGUAGE_ORDER = [_W, _Q, _T, _A, _G]


@dataclass(frozen=True)
class LoveLanguageOption:
    id: str
    text: str
    language: LoveLanguage


@dataclass(frozen=True)
class LoveLanguageQuestion:
    id: str
    text: str
    options: tuple[LoveLanguageOption, ...]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "options": [{"id": o.id, "text": o.text} for o in self.options],
        }


def _question(qid: str, text: str, words: str, acts: str, quality: str, gifts: str, touch: str) -> LoveLanguageQuestion:
    return LoveLanguageQuestion(
        id=qid,
        text=text,
        options=(
            LoveLanguageOption(f"{qid}_a", words, _W),
            LoveLanguageOption(f"{qid}_b", acts, _A),
            LoveLanguageOption(f"{qid}_c", quality, _Q),
            LoveLanguageOption(f"{qid}_d", gifts, _G),
            LoveLanguageOption(f"{qid}_e", touch, _T),
        ),
    )


LOVE_LANGUAGE_QUESTIONS: list[LoveLanguageQuestion] = [
    _question(
        "q1", "I feel most loved when...",
        "My partner tells me they love me and appreciate me",
        "My partner helps me with tasks or does something practical for me",
        "My partner gives me their undivided attention",
        "My partner surprises me with a thoughtful gift",
        "My partner gives me a hug, holds my hand, or shows physical affection",
    ),
    _question(
        "q2", "What would hurt me most in a relationship?",
        "My partner criticizing me or speaking harshly to me",
        "My partner constantly asking me to do things for them",
        "My partner being distracted or not listening when I talk",
        "My partner forgetting important occasions like my birthday",
        "My partner being physically distant or avoiding touch",
    ),
    _question(
        "q3", "I feel most connected to my partner when...",
        "They express their feelings for me in words",
        "They do something to help me without being asked",
        "We spend uninterrupted time together",
        "They give me something that shows they were thinking of me",
        "We are physically close and affectionate",
    ),
    _question(
        "q4", "When I want to show love to my partner, I usually...",
        "Tell them how much they mean to me",
        "Do something helpful for them",
        "Plan special time together",
        "Give them a gift or surprise",
        "Give them a hug, kiss, or other physical affection",
    ),
    _question(
        "q5", "I feel most appreciated when my partner...",
        "Compliments me or expresses gratitude",
        "Takes care of something I needed to do",
        "Makes time to really listen to me",
        "Brings me something they know I'll enjoy",
        "Shows physical affection",
    ),
    _question(
        "q6", "When I'm stressed, I most want my partner to...",
        "Tell me everything will be okay and that they believe in me",
        "Help me with practical things to reduce my stress",
        "Sit with me and give me their full attention",
        "Surprise me with something to cheer me up",
        "Hold me or give me physical comfort",
    ),
    _question(
        "q7", "I feel most secure in my relationship when...",
        "My partner regularly tells me they love me",
        "My partner consistently shows they care through their actions",
        "My partner prioritizes spending time with me",
        "My partner remembers and celebrates important moments",
        "My partner is physically affectionate with me",
    ),
    _question(
        "q8", "The best way for my partner to comfort me is...",
        "Saying encouraging and supportive words",
        "Doing something practical to help me",
        "Being present and available to listen",
        "Bringing me something thoughtful",
        "Giving me physical comfort like hugs",
    ),
    _question(
        "q9", "When celebrating an achievement, I most want my partner to...",
        "Tell me how proud they are of me",
        "Take care of everything so I can relax and celebrate",
        "Spend dedicated time celebrating with me",
        "Give me a special gift to commemorate the occasion",
        "Celebrate with hugs, kisses, and physical affection",
    ),
    _question(
        "q10", "What would make me feel most loved on an ordinary day?",
        "A text or note telling me they're thinking of me",
        "Coming home to find they've done something helpful",
        "Having an uninterrupted conversation over dinner",
        "A small, unexpected gift or surprise",
        "A warm hug or physical affection when they get home",
    ),
]

_OPTION_LANGUAGE: dict[str, LoveLanguage] = {
    option.id: option.language
    for question in LOVE_LANGUAGE_QUESTIONS
    for option in question.options
}


LOVE_LANGUAGE_PROFILES: dict[LoveLanguage, dict] = {
    _W: {
        "name": "Words of Affirmation",
        "description": "You feel most loved when your partner expresses their feelings verbally, offers compliments, and speaks encouraging words.",
        "daily_actions": ["Send loving text messages throughout the day", "Give specific compliments about what you appreciate", "Leave encouraging notes"],
        "partner_guidance": ["Be generous with compliments and appreciation", "Avoid harsh criticism or speaking in anger"],
    },
    _Q: {
        "name": "Quality Time",
        "description": "You feel most loved when your partner gives you their undivided attention.",
        "daily_actions": ["Put away devices during conversations", "Share meals together without TV or phones", "Take walks and talk without distractions"],
        "partner_guidance": ["Give them your full attention when together", "Make time together a priority in your schedule"],
    },
    _T: {
        "name": "Physical Touch",
        "description": "You feel most loved through physical expressions of affection like hugs, kisses and holding hands.",
        "daily_actions": ["Give hugs and kisses regularly", "Hold hands while walking or sitting together", "Sit close together rather than apart"],
        "partner_guidance": ["Initiate appropriate physical affection regularly", "Remember that non-sexual touch is also important"],
    },
    _A: {
        "name": "Acts of Service",
        "description": "You feel most loved when your partner does helpful things for you and lightens your load.",
        "daily_actions": ["Take care of responsibilities without being asked", "Follow through on promises and commitments", "Look for ways to make their life easier"],
        "partner_guidance": ["Follow through on what you say you'll do", "Take initiative rather than waiting to be asked"],
    },
    _G: {
        "name": "Receiving Gifts",
        "description": "You feel most loved when your partner gives you thoughtful gifts; the thought matters more than the cost.",
        "daily_actions": ["Give small, thoughtful gifts regularly", "Remember special occasions and anniversaries", "Notice things they mention wanting"],
        "partner_guidance": ["Remember important dates and occasions", "Make gifts personal and meaningful"],
    },
}


@dataclass
class LoveLanguageResult:
    primary: LoveLanguage
    secondary: LoveLanguage | None
    scores: dict[LoveLanguage, int]
    description: str
    daily_actions: list[str] = field(default_factory=list)
    partner_guidance: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "primary": self.primary.value,
            "secondary": self.secondary.value if self.secondary else None,
            "scores": {lang.value: count for lang, count in self.scores.items()},
            "description": self.description,
            "daily_actions": list(self.daily_actions),
            "partner_guidance": list(self.partner_guidance),
        }

    @property
    def raw_scores(self) -> dict[str, int]:
        return {lang.value: count for lang, count in self.scores.items()}


def score_love_languages(responses: dict[str, str]) -> LoveLanguageResult:
    """
    Count chosen options per love language.

    Args:
        responses: Option ID (e.g. "q3_c") keyed by question ID. Unknown
            option IDs are ignored.
    """
    scores = {lang: 0 for lang in LANGUAGE_ORDER}
    for option_id in responses.values():
        language = _OPTION_LANGUAGE.get(option_id)
        if language is not None:
            scores[language] += 1

    # sorted() is stable, so ties keep LANGUAGE_ORDER
    ranked = sorted(LANGUAGE_ORDER, key=lambda lang: scores[lang], reverse=True)
    primary = ranked[0]
    secondary = ranked[1] if scores[ranked[1]] > 0 else None
    profile = LOVE_LANGUAGE_PROFILES[primary]

    return LoveLanguageResult(
        primary=primary,
        secondary=secondary,
        scores=scores,
        description=profile["description"],
        daily_actions=profile["daily_actions"],
        partner_guidance=profile["partner_guidance"],
    )


# =============================================================================
# Couple Compatibility
# =============================================================================

LOVE_LANGUAGE_COMPATIBILITY_SCORES: dict[frozenset, int] = {
    frozenset([_W]): 90,
    frozenset([_W, _Q]): 85,
    frozenset([_W, _T]): 75,
    frozenset([_W, _A]): 80,
    frozenset([_W, _G]): 70,
    frozenset([_Q]): 95,
    frozenset([_Q, _T]): 80,
    frozenset([_Q, _A]): 75,
    frozenset([_Q, _G]): 70,
    frozenset([_T]): 95,
    frozenset([_T, _A]): 70,
    frozenset([_T, _G]): 65,
    frozenset([_A]): 90,
    frozenset([_A, _G]): 75,
    frozenset([_G]): 85,
}


def get_love_language_compatibility(
    language1: LoveLanguage | str,
    language2: LoveLanguage | str,
) -> dict:
    """Compatibility score plus insights for two primary love languages."""
    first, second = LoveLanguage(language1), LoveLanguage(language2)
    score = LOVE_LANGUAGE_COMPATIBILITY_SCORES[frozenset([first, second])]
    first_name = LOVE_LANGUAGE_PROFILES[first]["name"]
    second_name = LOVE_LANGUAGE_PROFILES[second]["name"]

    if first == second:
        insights = [
            f"Both partners feel most loved through {first_name}",
            "Natural understanding of each other's needs",
        ]
        recommendations = [
            "Keep expressing love in your shared language",
            "Explore the other love languages for variety",
        ]
    else:
        insights = [
            f"Different primary languages: {first_name} and {second_name}",
            "Love may need to be 'translated' to land with your partner",
        ]
        recommendations = [
            f"Partner 1: practise {LOVE_LANGUAGE_PROFILES[second]['daily_actions'][0].lower()}",
            f"Partner 2: practise {LOVE_LANGUAGE_PROFILES[first]['daily_actions'][0].lower()}",
        ]

    return {
        "compatibility_score": score,
        "insights": insights,
        "recommendations": recommendations,
    }
