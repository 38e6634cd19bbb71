# =============================================================================
# agents/prompts/ - System Prompts for the AI Coach
# =============================================================================
# - coach.py: question generation, crisis detection and compatibility prompts
#
# Organized with XML tags for clear structure.
# =============================================================================

from agents.prompts.coach import (
    COMPATIBILITY_SYSTEM_PROMPT,
    CRISIS_SYSTEM_PROMPT,
    QUESTION_SYSTEM_PROMPT,
    build_compatibility_prompt,
    build_crisis_prompt,
    build_question_prompt,
)

__all__ = [
    "COMPATIBILITY_SYSTEM_PROMPT",
    "CRISIS_SYSTEM_PROMPT",
    "QUESTION_SYSTEM_PROMPT",
    "build_compatibility_prompt",
    "build_crisis_prompt",
    "build_question_prompt",
]
