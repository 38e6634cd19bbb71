# =============================================================================
# agents/psychology_insights.py - AI Compatibility Insights
# =============================================================================
# Optional narrative layer on top of the fixed compatibility matrices in
# core/assessments. Used by GET /api/psychology/compatibility?insights=true.
# =============================================================================

import json
import logging

from agents.models.coach import CompatibilityInsights
from agents.prompts.coach import COMPATIBILITY_SYSTEM_PROMPT, build_compatibility_prompt
from agents.relationship_coach import get_openai_client

logger = logging.getLogger(__name__)

INSIGHTS_TEMPERATURE = 0.4
INSIGHTS_MAX_TOKENS = 500


def fallback_compatibility_insights() -> CompatibilityInsights:
    return CompatibilityInsights(
        overall_compatibility=75,
        strengths=[
            "Both partners show commitment to growth",
            "Willingness to engage in relationship work",
            "Open to learning about each other",
        ],
        challenges=[
            "Different communication styles may require practice",
            "Individual growth alongside relationship growth",
        ],
        recommendations=[
            "Practice daily appreciation",
            "Regular check-ins about needs and feelings",
            "Explore love languages together",
        ],
        modality_focus=["gottman", "attachment"],
    )


def generate_compatibility_insights(profile1: dict, profile2: dict) -> CompatibilityInsights:
    """
    Generate compatibility insights for two psychology profiles.

    Args:
        profile1: user_psychology_profiles row for partner 1
        profile2: user_psychology_profiles row for partner 2

    Returns:
        CompatibilityInsights from the model, or the fixed fallback when the
        call fails or returns something unusable.
    """
    from app.config import settings

    try:
        client = get_openai_client()
        response = client.chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=[
                {"role": "system", "content": COMPATIBILITY_SYSTEM_PROMPT},
                {"role": "user", "content": build_compatibility_prompt(profile1, profile2)},
            ],
            temperature=INSIGHTS_TEMPERATURE,
            max_tokens=INSIGHTS_MAX_TOKENS,
            response_format={"type": "json_object"},
        )
        result = json.loads(response.choices[0].message.content or "{}")
        return CompatibilityInsights.model_validate(result)
    except Exception as e:
        logger.error(f"Compatibility insights failed, using fallback: {e}")
        return fallback_compatibility_insights()
