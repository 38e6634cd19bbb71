# =============================================================================
# agents/ - AI Relationship Coach
# =============================================================================
# Wrappers around the OpenAI API:
# - relationship_coach.py: daily question generation, crisis detection,
#   content moderation
# - psychology_insights.py: couple compatibility insights
#
# Models:
# - models/coach.py: QuestionGenerationParams, CrisisDetectionResult,
#   CompatibilityInsights
#
# Prompts:
# - prompts/coach.py: system prompts and user-prompt builders
# =============================================================================

from agents.models.coach import (
    CompatibilityInsights,
    CrisisDetectionResult,
    QuestionGenerationParams,
)
from agents.relationship_coach import (
    FALLBACK_QUESTION,
    detect_crisis,
    generate_daily_question,
    moderate_content,
)
from agents.psychology_insights import generate_compatibility_insights

__all__ = [
    # Models
    "CompatibilityInsights",
    "CrisisDetectionResult",
    "QuestionGenerationParams",
    # Coach
    "FALLBACK_QUESTION",
    "detect_crisis",
    "generate_daily_question",
    "moderate_content",
    # Insights
    "generate_compatibility_insights",
]
