# =============================================================================
# core/models/crisis.py - Crisis Severity
# =============================================================================
# Detection itself is delegated to the language model; this module only
# buckets the detector's confidence into the severity stored on
# crisis_events rows.
# =============================================================================

from enum import Enum


class CrisisSeverity(str, Enum):
    """
    Severity of a detected crisis signal.

    Thresholds on detector confidence (strictly greater than):
        > 0.8 critical, > 0.6 high, > 0.4 medium, otherwise low
    """
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @classmethod
    def from_confidence(cls, confidence: float) -> "CrisisSeverity":
        if confidence > 0.8:
            return cls.CRITICAL
        if confidence > 0.6:
            return cls.HIGH
        if confidence > 0.4:
            return cls.MEDIUM
        return cls.LOW
