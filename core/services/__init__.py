# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_service import UserService
from .couple_service import CoupleService
from .invitation_service import InvitationService
from .question_service import QuestionService
from .response_service import ResponseService
from .psychology_service import PsychologyService

__all__ = [
    "UserService",
    "CoupleService",
    "InvitationService",
    "QuestionService",
    "ResponseService",
    "PsychologyService",
]
