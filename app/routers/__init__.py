# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - couples.py: Couple CRUD, summary and health score
# - invitations.py: Partner invitations
# - questions.py: Daily questions
# - responses.py: Answers to questions (moderation + crisis screening)
# - psychology.py: Psychology profiles, assessments and compatibility
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import couples
from . import invitations
from . import questions
from . import responses
from . import psychology

__all__ = [
    "health",
    "couples",
    "invitations",
    "questions",
    "responses",
    "psychology",
]
