# =============================================================================
# core/assessments/likert.py - Shared 1-7 Likert Scoring
# =============================================================================
# The Gottman, CBT, DBT, EFT and ACT questionnaires share one shape:
# statements rated 1-7, grouped into dimensions, some reverse scored.
# A dimension's score is the mean of its answered items as 0-100.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass

from lib.utils import round_half_up

LIKERT_MIN = 1
LIKERT_MAX = 7


@dataclass(frozen=True)
class LikertQuestion:
    id: str
    text: str
    dimension: str
    reverse_scored: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "dimension": self.dimension,
            "scale": {"min": LIKERT_MIN, "max": LIKERT_MAX},
        }


def dimension_mean(
    questions: list[LikertQuestion],
    responses: dict[str, int],
    dimension: str,
) -> float:
    """
    Mean answer for one dimension after reverse scoring (8 - answer).

    Unanswered items are skipped; a dimension with no answers is 0.
    """
    scores = [
        (LIKERT_MAX + 1 - responses[q.id]) if q.reverse_scored else responses[q.id]
        for q in questions
        if q.dimension == dimension and q.id in responses
    ]
    return sum(scores) / len(scores) if scores else 0.0


def to_percent(mean: float) -> int:
    """A 1-7 mean on the 0-100 scale."""
    return round_half_up(mean * 100 / LIKERT_MAX)


def average_score(scores: dict[str, int]) -> int:
    return round_half_up(sum(scores.values()) / len(scores)) if scores else 0


def rank_dimensions(scores: dict[str, int]) -> list[str]:
    """Dimensions from highest to lowest score; ties keep dimension order."""
    return sorted(scores, key=lambda name: scores[name], reverse=True)


def dimension_label(name: str) -> str:
    """'emotional_regulation' -> 'Emotional Regulation'."""
    return name.replace("_", " ").title()
