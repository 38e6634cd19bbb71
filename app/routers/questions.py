# =============================================================================
# app/routers/questions.py - Daily Question Endpoints
# =============================================================================
# Questions are per couple and per UTC day. /daily lazily generates the
# day's question on first request.
# =============================================================================

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.auth import AuthUser, get_current_user
from core.models.question import QuestionCreate
from core.services.question_service import QuestionService

router = APIRouter()


@router.get("")
async def list_questions(
    user: AuthUser = Depends(get_current_user),
    couple_id: Annotated[UUID | None, Query(description="Couple UUID")] = None,
    on_date: Annotated[date | None, Query(alias="date", description="YYYY-MM-DD, defaults to today (UTC)")] = None,
):
    """Questions for a couple on a date, newest first."""
    return {"questions": QuestionService.list_questions(couple_id, user.id, on_date)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_question(
    request: QuestionCreate,
    user: AuthUser = Depends(get_current_user),
):
    """Generate a new personalized question for a couple."""
    return {"question": QuestionService.create_question(user.id, request)}


@router.get("/daily")
async def get_daily_question(
    user: AuthUser = Depends(get_current_user),
    couple_id: Annotated[UUID | None, Query(description="Couple UUID")] = None,
):
    """Today's question and the responses to it so far."""
    question, responses = QuestionService.get_daily_question(couple_id, user.id)
    return {"question": question, "responses": responses}
