# =============================================================================
# core/models/enums.py - Shared Enumerations
# =============================================================================
# String enums mirroring the Postgres enum types in Supabase.
# Values are stored verbatim, so never rename a member's value.
# =============================================================================

from enum import Enum


class AttachmentStyle(str, Enum):
    """Adult attachment styles (anxiety x avoidance quadrants)."""
    SECURE = "secure"
    ANXIOUS = "anxious"
    AVOIDANT = "avoidant"
    DISORGANIZED = "disorganized"


class RelationshipStatus(str, Enum):
    """Where the couple is in their relationship."""
    DATING = "dating"
    ENGAGED = "engaged"
    MARRIED = "married"
    PARTNERSHIP = "partnership"


class QuestionCategory(str, Enum):
    """Themes for daily questions."""
    VALUES = "values"
    MEMORIES = "memories"
    FUTURE = "future"
    INTIMACY = "intimacy"
    CONFLICT = "conflict"
    GRATITUDE = "gratitude"


class InvitationStatus(str, Enum):
    """
    Lifecycle of a partner invitation.

    Flow: pending -> accepted
                 \\-> expired
    """
    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"


class MoodType(str, Enum):
    HAPPY = "happy"
    SAD = "sad"
    ANXIOUS = "anxious"
    EXCITED = "excited"
    CONFUSED = "confused"
    GRATEFUL = "grateful"
    FRUSTRATED = "frustrated"


class LoveLanguage(str, Enum):
    """Chapman's five love languages."""
    WORDS_OF_AFFIRMATION = "words_of_affirmation"
    QUALITY_TIME = "quality_time"
    PHYSICAL_TOUCH = "physical_touch"
    ACTS_OF_SERVICE = "acts_of_service"
    RECEIVING_GIFTS = "receiving_gifts"


class AssessmentType(str, Enum):
    """Kinds of psychology assessment a user can store."""
    ATTACHMENT = "attachment"
    LOVE_LANGUAGES = "love_languages"
    GOTTMAN = "gottman"
    CBT = "cbt"
    DBT = "dbt"
    EFT = "eft"
    ACT = "act"
    COMPREHENSIVE = "comprehensive"


class TherapyModality(str, Enum):
    ATTACHMENT = "attachment"
    LOVE_LANGUAGES = "love_languages"
    GOTTMAN = "gottman"
    CBT = "cbt"
    DBT = "dbt"
    EFT = "eft"
    ACT = "act"
    POSITIVE_PSYCHOLOGY = "positive_psychology"
    MINDFULNESS = "mindfulness"
    SOMATIC = "somatic"
