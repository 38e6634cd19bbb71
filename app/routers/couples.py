# =============================================================================
# app/routers/couples.py - Couple Endpoints
# =============================================================================
# All endpoints require authentication and only ever expose couples the
# current user is a partner in.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status

from app.auth import AuthUser, get_current_user
from core.models.couple import CoupleCreate, CoupleSummary, CoupleUpdate, HealthScoreRequest
from core.services.couple_service import CoupleService

router = APIRouter()

CoupleId = Annotated[UUID, Path(description="Couple UUID")]


@router.get("")
async def list_couples(user: AuthUser = Depends(get_current_user)):
    """Every couple the user belongs to, with both partners embedded."""
    return {"couples": CoupleService.list_couples(user.id)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_couple(
    request: CoupleCreate,
    user: AuthUser = Depends(get_current_user),
):
    """
    Create a couple with the current user as partner1.

    Usually couples are formed by accepting an invitation instead.
    """
    return {"couple": CoupleService.create_couple(user.id, request)}


@router.get("/{couple_id}")
async def get_couple(
    couple_id: CoupleId,
    user: AuthUser = Depends(get_current_user),
):
    return {"couple": CoupleService.get_couple(couple_id, user.id)}


@router.put("/{couple_id}")
async def update_couple(
    couple_id: CoupleId,
    request: CoupleUpdate,
    user: AuthUser = Depends(get_current_user),
):
    """Update relationship details, goals, score or streaks."""
    return {"couple": CoupleService.update_couple(couple_id, user.id, request)}


@router.get("/{couple_id}/summary", response_model=CoupleSummary)
async def get_couple_summary(
    couple_id: CoupleId,
    user: AuthUser = Depends(get_current_user),
):
    """Dashboard summary: health score, streaks and time together."""
    return CoupleService.get_summary(couple_id, user.id)


@router.post("/{couple_id}/health-score")
async def update_health_score(
    couple_id: CoupleId,
    request: HealthScoreRequest,
    user: AuthUser = Depends(get_current_user),
):
    """
    Recompute the health score from four 0-100 sub-scores.

    Weights: communication 30%, trust 30%, satisfaction 25%, engagement 15%.
    """
    score, couple = CoupleService.update_health_score(couple_id, user.id, request)
    return {"health_score": score, "couple": couple}
