# =============================================================================
# core/assessments/ - Psychology Assessment Scorers
# =============================================================================
# Deterministic scoring for the self-report questionnaires:
# - attachment.py: ECR-R style attachment assessment + style compatibility
# - love_languages.py: forced-choice love languages + language compatibility
# - gottman.py: Sound Relationship House areas + Four Horsemen text check
# - cbt.py / dbt.py / eft.py / act.py: therapy-modality skill questionnaires
# - likert.py: shared 1-7 scoring helpers
#
# SCORERS maps an assessment kind (as used in URLs) to its question bank
# and scoring function.
# =============================================================================

from core.assessments.act import ACT_QUESTIONS, ACTResult, score_act
from core.assessments.attachment import (
    ATTACHMENT_QUESTIONS,
    AttachmentResult,
    get_attachment_compatibility,
    score_attachment,
)
from core.assessments.cbt import CBT_QUESTIONS, CBTResult, score_cbt
from core.assessments.dbt import DBT_QUESTIONS, DBTResult, score_dbt
from core.assessments.eft import EFT_QUESTIONS, EFTResult, score_eft
from core.assessments.gottman import GOTTMAN_QUESTIONS, GottmanResult, analyze_text, score_gottman
from core.assessments.love_languages import (
    LOVE_LANGUAGE_QUESTIONS,
    LoveLanguageResult,
    get_love_language_compatibility,
    score_love_languages,
)

SCORERS = {
    "attachment": (ATTACHMENT_QUESTIONS, score_attachment),
    "love_languages": (LOVE_LANGUAGE_QUESTIONS, score_love_languages),
    "gottman": (GOTTMAN_QUESTIONS, score_gottman),
    "cbt": (CBT_QUESTIONS, score_cbt),
    "dbt": (DBT_QUESTIONS, score_dbt),
    "eft": (EFT_QUESTIONS, score_eft),
    "act": (ACT_QUESTIONS, score_act),
}

SUPPORTED_ASSESSMENTS = list(SCORERS)

__all__ = [
    "ATTACHMENT_QUESTIONS",
    "AttachmentResult",
    "get_attachment_compatibility",
    "score_attachment",
    "LOVE_LANGUAGE_QUESTIONS",
    "LoveLanguageResult",
    "get_love_language_compatibility",
    "score_love_languages",
    "GOTTMAN_QUESTIONS",
    "GottmanResult",
    "analyze_text",
    "score_gottman",
    "CBT_QUESTIONS",
    "CBTResult",
    "score_cbt",
    "DBT_QUESTIONS",
    "DBTResult",
    "score_dbt",
    "EFT_QUESTIONS",
    "EFTResult",
    "score_eft",
    "ACT_QUESTIONS",
    "ACTResult",
    "score_act",
    "SCORERS",
    "SUPPORTED_ASSESSMENTS",
]
