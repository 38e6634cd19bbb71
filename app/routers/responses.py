# =============================================================================
# app/routers/responses.py - Question Response Endpoints
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.auth import AuthUser, get_current_user
from core.models.question import ResponseCreate
from core.services.response_service import ResponseService

router = APIRouter()


@router.get("")
async def list_responses(
    user: AuthUser = Depends(get_current_user),
    question_id: Annotated[UUID | None, Query(description="Question UUID")] = None,
):
    """Responses to a question, oldest first."""
    return {"responses": ResponseService.list_responses(question_id, user.id)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_response(
    request: ResponseCreate,
    user: AuthUser = Depends(get_current_user),
):
    """
    Answer a question.

    Content is moderated and screened for crisis signals before it is
    stored. crisis_recommendations is non-empty only when a crisis was
    detected.
    """
    response, crisis = ResponseService.create_response(user.id, request)
    return {
        "response": response,
        "crisis_detected": crisis.is_crisis_detected,
        "crisis_recommendations": crisis.recommendations if crisis.is_crisis_detected else [],
    }
