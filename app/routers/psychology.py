# =============================================================================
# app/routers/psychology.py - Psychology Profile & Assessment Endpoints
# =============================================================================
# - /profiles: the current user's psychology profile
# - /assessments: stored assessments, built-in questionnaires and scoring
# - /compatibility: couple compatibility from both partners' profiles
# - /four-horsemen: Gottman's Four Horsemen check on a piece of text
# =============================================================================

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status

from app.auth import AuthUser, get_current_user
from core.models.psychology import (
    AssessmentCreate,
    FourHorsemenRequest,
    PsychologyProfileCreate,
    PsychologyProfileUpdate,
)
from core.services.psychology_service import PsychologyService

router = APIRouter()


# =============================================================================
# Profiles
# =============================================================================

@router.get("/profiles")
async def get_profile(user: AuthUser = Depends(get_current_user)):
    """The user's profile, or null if none exists yet."""
    return {"profile": PsychologyService.get_profile(user.id)}


@router.post("/profiles", status_code=status.HTTP_201_CREATED)
async def create_profile(
    request: PsychologyProfileCreate,
    user: AuthUser = Depends(get_current_user),
):
    """Create or replace the profile. attachment_style and primary_love_language are required."""
    return {"profile": PsychologyService.upsert_profile(user.id, request)}


@router.put("/profiles")
async def update_profile(
    request: PsychologyProfileUpdate,
    user: AuthUser = Depends(get_current_user),
):
    return {"profile": PsychologyService.update_profile(user.id, request)}


# =============================================================================
# Assessments
# =============================================================================

@router.get("/assessments")
async def list_assessments(user: AuthUser = Depends(get_current_user)):
    """The user's assessments, newest first."""
    return {"assessments": PsychologyService.list_assessments(user.id)}


@router.post("/assessments", status_code=status.HTTP_201_CREATED)
async def create_assessment(
    request: AssessmentCreate,
    user: AuthUser = Depends(get_current_user),
):
    """Store an assessment scored elsewhere (e.g. client-side)."""
    return {"assessment": PsychologyService.create_assessment(user.id, request)}


@router.get("/assessments/{kind}/questions")
async def get_assessment_questions(
    kind: str,
    user: AuthUser = Depends(get_current_user),
):
    """Question bank for a built-in assessment (attachment, love_languages, gottman, cbt, dbt, eft, act)."""
    return {"assessment_type": kind, "questions": PsychologyService.get_questions(kind)}


@router.post("/assessments/{kind}/score", status_code=status.HTTP_201_CREATED)
async def score_assessment(
    kind: str,
    body: Annotated[dict[str, Any], Body()],
    user: AuthUser = Depends(get_current_user),
):
    """
    Score a built-in questionnaire and store the result.

    Body: {"responses": {"q1": "q1_c", ...}} for love_languages (option IDs),
    {"responses": {"anx_01": 6, ...}} for the 1-7 questionnaires. ACT also
    accepts "value_rankings": {"trust": 1, ...}.
    """
    results, assessment = PsychologyService.score_assessment(user.id, kind, body)
    return {"results": results, "assessment": assessment}


# =============================================================================
# Compatibility
# =============================================================================

@router.get("/compatibility")
async def get_compatibility(
    user: AuthUser = Depends(get_current_user),
    couple_id: Annotated[UUID | None, Query(description="Couple UUID")] = None,
    insights: Annotated[bool, Query(description="Add AI-generated insights")] = False,
):
    """Attachment and love-language compatibility for a couple."""
    return PsychologyService.get_compatibility(couple_id, user.id, include_insights=insights)


# =============================================================================
# Conflict Text
# =============================================================================

@router.post("/four-horsemen")
async def analyze_four_horsemen(
    request: FourHorsemenRequest,
    user: AuthUser = Depends(get_current_user),
):
    """Criticism, contempt, defensiveness and stonewalling found in the text."""
    return PsychologyService.analyze_four_horsemen(request.text)
