# =============================================================================
# agents/models/ - Coach Communication Schemas
# =============================================================================
# Pydantic models that define what the coach expects and produces:
# - coach.py: QuestionGenerationParams, CrisisDetectionResult,
#   CompatibilityInsights
# =============================================================================

from agents.models.coach import (
    CompatibilityInsights,
    CrisisDetectionResult,
    QuestionGenerationParams,
)

__all__ = [
    "CompatibilityInsights",
    "CrisisDetectionResult",
    "QuestionGenerationParams",
]
