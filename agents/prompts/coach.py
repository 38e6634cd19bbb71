# =============================================================================
# agents/prompts/coach.py - Relationship Coach Prompts
# =============================================================================
# System prompts for the three coach calls plus the user-prompt builders.
# Builders take plain data and return strings so they can be tested without
# touching the OpenAI client.
# =============================================================================

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from agents.models.coach import QuestionGenerationParams

# Only the most recent questions are shown to the model
PREVIOUS_QUESTIONS_IN_PROMPT = 3


QUESTION_SYSTEM_PROMPT = """<role>
You are a relationship wellness expert creating personalized daily questions for couples.
</role>

<guidelines>
Create questions that are:
- Emotionally safe and appropriate
- Science-backed (Gottman, EFT, attachment theory)
- Adapted to the couple's stage and attachment styles
- Encouraging deeper connection
- Taking 2-3 minutes to answer thoughtfully
</guidelines>

<output_format>
Return only the question text, no additional formatting or explanation.
</output_format>"""


CRISIS_SYSTEM_PROMPT = """<role>
You are a crisis detection system for a relationship app.
</role>

<scope>
Analyze the content for signs of:
- Suicidal ideation
- Self-harm mentions
- Domestic violence indicators
- Severe mental health crisis
- Substance abuse crisis
</scope>

<output_format>
Respond with ONLY a JSON object:
{
    "isCrisisDetected": true | false,
    "confidence": 0.0-1.0,
    "keywords": ["detected crisis keywords"],
    "sentiment": -1.0 to 1.0,
    "recommendations": ["immediate actions"]
}
</output_format>"""


COMPATIBILITY_SYSTEM_PROMPT = """<role>
You are a relationship psychologist analyzing couple compatibility across multiple therapeutic modalities:
1. Attachment Theory
2. Love Languages
3. Gottman Method
4. CBT patterns
5. DBT emotional regulation
6. EFT emotional expression
7. ACT values alignment
8. Positive Psychology strengths
9. Mindfulness practices
10. Communication styles
</role>

<output_format>
Provide evidence-based compatibility analysis as a JSON object:
{
    "overallCompatibility": 0-100,
    "strengths": ["..."],
    "challenges": ["..."],
    "recommendations": ["..."],
    "modalityFocus": ["gottman" | "attachment" | "cbt" | ...]
}
</output_format>"""


def build_question_prompt(params: QuestionGenerationParams) -> str:
    """
    Build the user prompt for daily question generation.

    Lines for missing characteristics are left out entirely. Only the last
    three previous questions are included.
    """
    lines = ["Generate a daily question for a couple with these characteristics:"]

    if params.attachment_styles:
        lines.append(f"Attachment styles: {', '.join(params.attachment_styles)}")
    if params.relationship_stage:
        lines.append(f"Relationship stage: {params.relationship_stage}")
    if params.mood:
        lines.append(f"Current mood: {params.mood}")
    if params.category:
        lines.append(f"Question category: {params.category}")
    if params.topics_of_interest:
        lines.append(f"Topics of interest: {', '.join(params.topics_of_interest)}")
    if params.previous_questions:
        recent = params.previous_questions[-PREVIOUS_QUESTIONS_IN_PROMPT:]
        lines.append(f"Recent questions (avoid similar): {', '.join(recent)}")

    return "\n".join(lines)


def build_crisis_prompt(content: str, context: str | None = None) -> str:
    prompt = f'Analyze this content: "{content}"'
    if context:
        prompt += f"\n\nContext: {context}"
    return prompt


def build_compatibility_prompt(profile1: dict, profile2: dict) -> str:
    """Summarize both partners' psychology profiles for the insights call."""

    def describe(label: str, profile: dict) -> str:
        return (
            f"{label}:\n"
            f"- Attachment: {profile.get('attachment_style') or 'unknown'}\n"
            f"- Love Language: {profile.get('primary_love_language') or 'unknown'}\n"
            f"- CBT Score: {profile.get('cbt_progress_score') or 'unknown'}\n"
            f"- Emotional Regulation: {profile.get('emotional_regulation_score') or 'unknown'}\n"
            f"- Values Alignment: {profile.get('values_living_score') or 'unknown'}"
        )

    return (
        "Analyze compatibility between:\n\n"
        f"{describe('Partner 1', profile1)}\n\n"
        f"{describe('Partner 2', profile2)}"
    )
