# =============================================================================
# agents/relationship_coach.py - AI Relationship Coach
# =============================================================================
# Thin wrapper around the OpenAI client for the three calls the API makes on
# every question/response:
# - generate_daily_question: personalized question text
# - detect_crisis: structured crisis verdict (JSON mode)
# - moderate_content: moderation endpoint "flagged" bit
#
# None of these raise. Each has a fixed fallback so a model outage never
# blocks a couple from answering their daily question.
#
# Usage:
#   text = generate_daily_question(QuestionGenerationParams(couple_id=...))
#   verdict = detect_crisis("I feel hopeless")
#   if moderate_content(content): ...
# =============================================================================

import json
import logging

from agents.models.coach import CrisisDetectionResult, QuestionGenerationParams
from agents.prompts.coach import (
    CRISIS_SYSTEM_PROMPT,
    QUESTION_SYSTEM_PROMPT,
    build_crisis_prompt,
    build_question_prompt,
)
from lib.validation import find_crisis_keywords

logger = logging.getLogger(__name__)

FALLBACK_QUESTION = "What made you smile today?"
QUESTION_MAX_TOKENS = 150
CRISIS_MAX_TOKENS = 300
KEYWORD_FALLBACK_CONFIDENCE = 0.5

KEYWORD_FALLBACK_RECOMMENDATIONS = [
    "Reach out to a crisis line such as 988 (US) or your local emergency number",
    "Talk to someone you trust right now",
]

# Lazy-loaded OpenAI client
_client = None


def get_openai_client():
    """Get or create OpenAI client (lazy initialization)."""
    global _client
    if _client is None:
        from openai import OpenAI
        from app.config import settings
        _client = OpenAI(api_key=settings.OPENAI_API_KEY)
    return _client


# =============================================================================
# Daily Questions
# =============================================================================

def generate_daily_question(params: QuestionGenerationParams) -> str:
    """
    Generate a personalized daily question for a couple.

    Args:
        params: What is known about the couple (attachment styles, recent
            questions, mood, ...)

    Returns:
        Question text. FALLBACK_QUESTION when the call fails or the model
        returns nothing.
    """
    from app.config import settings

    try:
        client = get_openai_client()
        response = client.chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=[
                {"role": "system", "content": QUESTION_SYSTEM_PROMPT},
                {"role": "user", "content": build_question_prompt(params)},
            ],
            temperature=settings.QUESTION_TEMPERATURE,
            max_tokens=QUESTION_MAX_TOKENS,
        )
        text = (response.choices[0].message.content or "").strip()
    except Exception as e:
        logger.error(f"Question generation failed for couple {params.couple_id}: {e}")
        return FALLBACK_QUESTION

    if not text:
        logger.warning(f"Empty question from model for couple {params.couple_id}")
        return FALLBACK_QUESTION

    return text


# =============================================================================
# Crisis Detection
# =============================================================================

def detect_crisis_by_keywords(content: str) -> CrisisDetectionResult:
    """Local keyword check used when the model is unavailable."""
    keywords = find_crisis_keywords(content)
    if not keywords:
        return CrisisDetectionResult()

    return CrisisDetectionResult(
        is_crisis_detected=True,
        confidence=KEYWORD_FALLBACK_CONFIDENCE,
        keywords=keywords,
        sentiment=-1.0,
        recommendations=list(KEYWORD_FALLBACK_RECOMMENDATIONS),
    )


def detect_crisis(content: str, context: str | None = None) -> CrisisDetectionResult:
    """
    Ask the model whether content shows signs of a crisis.

    Args:
        content: User-written text (already sanitized)
        context: Optional extra context, e.g. the question being answered

    Returns:
        CrisisDetectionResult. Falls back to the keyword list when the call
        fails or the reply is not valid JSON.
    """
    from app.config import settings

    try:
        client = get_openai_client()
        response = client.chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=[
                {"role": "system", "content": CRISIS_SYSTEM_PROMPT},
                {"role": "user", "content": build_crisis_prompt(content, context)},
            ],
            temperature=settings.CRISIS_TEMPERATURE,
            max_tokens=CRISIS_MAX_TOKENS,
            response_format={"type": "json_object"},
        )
        result_text = response.choices[0].message.content or ""
    except Exception as e:
        logger.error(f"Crisis detection call failed: {e}")
        return detect_crisis_by_keywords(content)

    try:
        return CrisisDetectionResult.model_validate(json.loads(result_text))
    except (json.JSONDecodeError, ValueError, TypeError) as e:
        logger.warning(f"Failed to parse crisis detection response: {e}")
        return detect_crisis_by_keywords(content)


# =============================================================================
# Moderation
# =============================================================================

def moderate_content(content: str) -> bool:
    """
    Check content against the moderation endpoint.

    Returns:
        True if flagged. Fails open (False) when the call errors.
    """
    try:
        client = get_openai_client()
        response = client.moderations.create(input=content)
        return bool(response.results[0].flagged)
    except Exception as e:
        logger.error(f"Moderation call failed, allowing content: {e}")
        return False
