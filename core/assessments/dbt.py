# =============================================================================
# core/assessments/dbt.py - DBT Skills
# =============================================================================
# 24 statements (1-7), six for each of the four DBT skill areas. Each area
# gets a 0-100 score and a level (beginner -> advanced); the two weakest
# areas drive the daily practices and growth plan.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field

from core.assessments.likert import (
    LikertQuestion,
    average_score,
    dimension_label,
    dimension_mean,
    rank_dimensions,
    to_percent,
)

SKILL_AREAS = [
    "emotional_regulation",
    "distress_tolerance",
    "interpersonal_effectiveness",
    "mindfulness",
]

MAX_DAILY_PRACTICES = 4
PRACTICES_PER_AREA = 2


def _q(number: int, area: str, text: str, reverse_scored: bool = False) -> LikertQuestion:
    return LikertQuestion(f"dbt_{number:02d}", text, area, reverse_scored)


DBT_QUESTIONS: list[LikertQuestion] = [
    # Emotional regulation
    _q(1, "emotional_regulation", "I can identify what I'm feeling when emotions arise in my relationship."),
    _q(2, "emotional_regulation", "When I'm upset with my partner, I often react impulsively.", True),
    _q(3, "emotional_regulation", "I can calm myself down when I'm feeling overwhelmed in my relationship."),
    _q(4, "emotional_regulation", "My emotions about my relationship often feel out of control.", True),
    _q(5, "emotional_regulation", "I practice techniques to manage my emotions when they get intense."),
    _q(6, "emotional_regulation", "I understand what triggers my emotional reactions with my partner."),
    # Distress tolerance
    _q(7, "distress_tolerance", "When my partner and I are in conflict, I can tolerate the discomfort without making it worse."),
    _q(8, "distress_tolerance", "I do things that make relationship problems worse when I'm upset.", True),
    _q(9, "distress_tolerance", "I can accept difficult emotions without trying to escape them immediately."),
    _q(10, "distress_tolerance", "When I'm in relationship distress, I engage in behaviors I later regret.", True),
    _q(11, "distress_tolerance", "I have healthy ways to cope when my relationship feels difficult."),
    _q(12, "distress_tolerance", "I can sit with uncertainty about my relationship without panicking."),
    # Interpersonal effectiveness
    _q(13, "interpersonal_effectiveness", "I can ask for what I need in my relationship clearly and directly."),
    _q(14, "interpersonal_effectiveness", "I often give in to my partner even when it's important to me to stand my ground.", True),
    _q(15, "interpersonal_effectiveness", "I can say no to my partner when I need to without feeling guilty."),
    _q(16, "interpersonal_effectiveness", "I maintain my values and boundaries in my relationship."),
    _q(17, "interpersonal_effectiveness", "I know how to repair our relationship after a conflict."),
    _q(18, "interpersonal_effectiveness", "I can balance being true to myself with being considerate of my partner."),
    # Mindfulness
    _q(19, "mindfulness", "I notice my thoughts and feelings without being overwhelmed by them."),
    _q(20, "mindfulness", "When I'm with my partner, I often find my mind wandering to other things.", True),
    _q(21, "mindfulness", "I can observe my emotions during relationship conflicts without being consumed by them."),
    _q(22, "mindfulness", "I practice being present and aware in my relationship interactions."),
    _q(23, "mindfulness", "I can step back and observe my relationship patterns without judgment."),
    _q(24, "mindfulness", "I am aware of my automatic reactions to my partner's behavior."),
]


DAILY_PRACTICES = {
    "emotional_regulation": {
        "beginner": [
            "Practice naming your emotions 3 times daily",
            "Use the STOP skill when emotions feel intense",
            "Track your emotions on a simple 1-10 scale",
        ],
        "developing": [
            "Daily emotion diary with triggers and responses",
            "Practice opposite action once daily",
            "Use temperature change for emotional regulation",
        ],
        "skilled": [
            "Advanced emotion regulation through checking the facts",
            "Practice emotion surfing - riding the wave without reacting",
            "Teach emotion regulation skills to your partner",
        ],
        "advanced": [
            "Model emotional regulation in challenging situations",
            "Help your partner develop their emotional awareness",
            "Practice emotional mastery in conflict situations",
        ],
    },
    "distress_tolerance": {
        "beginner": [
            "Practice 4-7-8 breathing for 5 minutes daily",
            "Use ice cubes or cold water when overwhelmed",
            "Create a distraction list for difficult moments",
        ],
        "developing": [
            "Daily radical acceptance practice",
            "Use the TIPP technique during conflicts",
            "Practice distress tolerance without making problems worse",
        ],
        "skilled": [
            "Advanced distress tolerance during relationship challenges",
            "Teach distress tolerance skills to your partner",
            "Practice willingness and acceptance in difficult times",
        ],
        "advanced": [
            "Model distress tolerance in crisis situations",
            "Help others develop distress tolerance skills",
            "Maintain equanimity during major relationship stressors",
        ],
    },
    "interpersonal_effectiveness": {
        "beginner": [
            'Practice using "I" statements daily',
            "Ask for one thing you need each day",
            "Say no to one request without over-explaining",
        ],
        "developing": [
            "Use DEAR MAN technique for important requests",
            "Practice GIVE skills in daily interactions",
            "Balance priorities: relationship, objectives, self-respect",
        ],
        "skilled": [
            "Advanced interpersonal effectiveness in conflicts",
            "Teach communication skills to your partner",
            "Navigate complex relationship negotiations",
        ],
        "advanced": [
            "Model effective communication in challenging situations",
            "Help others develop interpersonal skills",
            "Maintain relationships while achieving objectives",
        ],
    },
    "mindfulness": {
        "beginner": [
            "5-minute daily mindfulness meditation",
            "Practice one-mindfully during routine activities",
            "Notice when your mind wanders and gently return to the present",
        ],
        "developing": [
            "10-15 minute daily meditation practice",
            "Mindful listening during conversations with your partner",
            "Practice observe, describe, participate skills",
        ],
        "skilled": [
            "Advanced mindfulness during relationship interactions",
            "Teach mindfulness skills to your partner",
            "Practice mindfulness in emotionally charged situations",
        ],
        "advanced": [
            "Model mindful presence in all interactions",
            "Help others develop mindfulness practice",
            "Maintain mindful awareness during relationship crises",
        ],
    },
}

NEXT_FOCUS = {
    "emotional_regulation": {
        "beginner": "Learn to identify and name emotions accurately",
        "developing": "Practice emotion regulation techniques consistently",
        "skilled": "Master advanced emotion regulation in relationships",
        "advanced": "Teach and model emotional regulation for others",
    },
    "distress_tolerance": {
        "beginner": "Build basic distress tolerance skills",
        "developing": "Practice tolerating distress without making it worse",
        "skilled": "Master distress tolerance in relationship challenges",
        "advanced": "Model distress tolerance in crisis situations",
    },
    "interpersonal_effectiveness": {
        "beginner": "Learn basic assertiveness and boundary skills",
        "developing": "Practice structured interpersonal skills",
        "skilled": "Master complex interpersonal situations",
        "advanced": "Teach interpersonal effectiveness to others",
    },
    "mindfulness": {
        "beginner": "Establish daily mindfulness practice",
        "developing": "Apply mindfulness to relationship interactions",
        "skilled": "Master mindfulness in challenging situations",
        "advanced": "Teach mindfulness and model present-moment living",
    },
}


@dataclass
class DBTResult:
    overall_skills_score: int
    skill_scores: dict[str, int]
    skill_levels: dict[str, str]
    strongest_areas: list[str]
    development_areas: list[str]
    daily_practices: list[str] = field(default_factory=list)
    crisis_skills: list[str] = field(default_factory=list)
    relationship_skills: list[str] = field(default_factory=list)
    growth_plan: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "overall_skills_score": self.overall_skills_score,
            "skill_scores": dict(self.skill_scores),
            "skill_levels": dict(self.skill_levels),
            "strongest_areas": list(self.strongest_areas),
            "development_areas": list(self.development_areas),
            "daily_practices": list(self.daily_practices),
            "crisis_skills": list(self.crisis_skills),
            "relationship_skills": list(self.relationship_skills),
            "growth_plan": list(self.growth_plan),
        }

    @property
    def raw_scores(self) -> dict[str, int]:
        return dict(self.skill_scores)


def skill_level(mean: float) -> str:
    if mean <= 3:
        return "beginner"
    if mean <= 4.5:
        return "developing"
    if mean <= 6:
        return "skilled"
    return "advanced"


def _daily_practices(development: list[str], levels: dict[str, str]) -> list[str]:
    practices = []
    for area in development:
        practices.extend(DAILY_PRACTICES[area][levels[area]][:PRACTICES_PER_AREA])
    if "mindfulness" not in development:
        # Keep one mindfulness practice inside the cap
        practices = practices[:MAX_DAILY_PRACTICES - 1]
        practices.append("Daily 5-minute mindfulness practice")
    return practices[:MAX_DAILY_PRACTICES]


def _crisis_skills(scores: dict[str, int]) -> list[str]:
    skills = []
    if scores["distress_tolerance"] < 50:
        skills.append(
            "TIPP technique for intense emotions (Temperature, Intense exercise, "
            "Paced breathing, Paired muscle relaxation)"
        )
        skills.append(
            "STOP skill when feeling overwhelmed (Stop, Take a breath, Observe, Proceed mindfully)"
        )
    if scores["emotional_regulation"] < 50:
        skills.append(
            "PLEASE skill for emotional vulnerability (treat PhysicaL illness, balance Eating, "
            "avoid mood-Altering substances, balance Sleep, get Exercise)"
        )
    skills.append("Radical acceptance when you can't change the situation")
    skills.append("Self-soothing with your five senses during difficult moments")
    return skills


def _relationship_skills(scores: dict[str, int]) -> list[str]:
    skills = []
    if scores["interpersonal_effectiveness"] < 60:
        skills.append(
            "DEAR MAN for making requests (Describe, Express, Assert, Reinforce, "
            "Mindful, Appear confident, Negotiate)"
        )
        skills.append("GIVE for maintaining relationships (Gentle, Interested, Validate, Easy manner)")
    if scores["emotional_regulation"] < 60:
        skills.append("Opposite action when emotions don't fit the facts")
        skills.append("Emotion regulation through checking the facts")
    skills.append("Validation skills for your partner's emotions")
    skills.append("Mindful listening without planning your response")
    return skills


def score_dbt(responses: dict[str, int]) -> DBTResult:
    """
    Score the DBT skills questionnaire.

    Args:
        responses: Likert answers (1-7) keyed by question ID.

    Returns:
        DBTResult. strongest_areas are the top two skill areas,
        development_areas the bottom two.
    """
    means = {area: dimension_mean(DBT_QUESTIONS, responses, area) for area in SKILL_AREAS}
    scores = {area: to_percent(mean) for area, mean in means.items()}
    levels = {area: skill_level(mean) for area, mean in means.items()}

    ranked = rank_dimensions(scores)
    development = ranked[-2:]

    return DBTResult(
        overall_skills_score=average_score(scores),
        skill_scores=scores,
        skill_levels=levels,
        strongest_areas=ranked[:2],
        development_areas=development,
        daily_practices=_daily_practices(development, levels),
        crisis_skills=_crisis_skills(scores),
        relationship_skills=_relationship_skills(scores),
        growth_plan=[
            f"{dimension_label(area)}: {NEXT_FOCUS[area][levels[area]]}"
            for area in development
        ],
    )
