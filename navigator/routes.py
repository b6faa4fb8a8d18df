"""
Visa Navigator API Routes

Exposes the visa engine via REST API. Every endpoint takes a profile
snapshot in the request body; nothing is persisted here.
"""

import logging
from typing import Optional, List, Dict, Any
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from .logic.contracts import UserProfile
from .logic.engine import VisaNavigatorEngine, get_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/visa-navigator", tags=["visa-navigator"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class ProfileRequest(BaseModel):
    """Request body carrying a profile snapshot."""
    profile: Dict[str, Any] = Field(
        ...,
        description="User profile snapshot",
        examples=[{
            "education_level": "masters",
            "years_of_experience": 3,
            "english_proficiency": 3,
            "country_of_citizenship": "IN",
            "investment_amount": 0,
            "current_visa": "f1",
        }],
    )


class ExploreRequest(ProfileRequest):
    allowed_categories: Optional[List[str]] = Field(
        default=None,
        description="Visa categories to show on the map (default: student, worker, immigrant, investor)"
    )
    max_depth: int = Field(default=3, ge=0, le=10, description="Maximum BFS depth")


def _parse_profile(data: Dict[str, Any]) -> UserProfile:
    try:
        return UserProfile(**data)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid profile: {str(e)}")


def _engine() -> VisaNavigatorEngine:
    return get_engine()


def _server_error(e: Exception) -> JSONResponse:
    logger.exception(f"Visa navigator request failed: {e}")
    return JSONResponse(status_code=500, content={"error": str(e)})


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get("/visas", summary="List the visa catalog")
def list_visas():
    engine = _engine()
    return {
        "visas": [visa.model_dump() for visa in engine.knowledge_base],
        "count": len(engine.knowledge_base),
    }


@router.get("/visas/{visa_id}", summary="Get one visa definition")
def get_visa(visa_id: str):
    visa = _engine().knowledge_base.get(visa_id.lower())
    if visa is None:
        raise HTTPException(status_code=404, detail=f"Unknown visa: {visa_id}")
    return visa.model_dump()


@router.post("/scores", summary="Score every visa for a profile")
def get_scores(request: ProfileRequest):
    """
    Score the profile against every visa.

    **Response:**
    - `scores`: visa id -> eligibility score
    - `by_status`: visa ids grouped as recommended/available/locked
    """
    profile = _parse_profile(request.profile)
    try:
        engine = _engine()
        scores = engine.score_all(profile)
        by_status: Dict[str, List[str]] = {"recommended": [], "available": [], "locked": []}
        for visa_id, visa_score in scores.items():
            by_status[visa_score.status].append(visa_id)
        return {
            "scores": {visa_id: s.model_dump() for visa_id, s in scores.items()},
            "by_status": {status: sorted(ids) for status, ids in by_status.items()},
        }
    except Exception as e:
        return _server_error(e)


@router.post("/visas/{visa_id}/report", summary="Eligibility report for one visa")
def get_report(visa_id: str, request: ProfileRequest):
    profile = _parse_profile(request.profile)
    engine = _engine()
    report = engine.eligibility_report(visa_id.lower(), profile)
    if report is None:
        raise HTTPException(status_code=404, detail=f"Unknown visa: {visa_id}")
    requirements = engine.requirement_status(visa_id.lower(), profile)
    return {
        "report": report.model_dump(),
        "requirements": requirements.model_dump() if requirements else None,
        "next_options": [o.model_dump() for o in engine.next_visa_options(visa_id.lower(), profile)],
    }


@router.post("/path", summary="Recommended visa path")
def get_path(request: ProfileRequest):
    """
    Greedy recommended path from the profile's current visa.
    Returns `{"path": null}` when no viable first step exists.
    """
    profile = _parse_profile(request.profile)
    try:
        path = _engine().recommend_path(profile)
        return {"path": path.model_dump() if path else None}
    except Exception as e:
        return _server_error(e)


@router.post("/explore", summary="Full visa map for a profile")
def explore(request: ExploreRequest):
    """
    Scores, visible graph, tiers, node positions and recommended path in
    one response.
    """
    profile = _parse_profile(request.profile)
    try:
        view = _engine().explore(
            profile,
            allowed_categories=request.allowed_categories,
            max_depth=request.max_depth,
        )
        return view.model_dump()
    except Exception as e:
        return _server_error(e)


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Visa engine health check")
def health_check():
    """Check if the visa engine is operational."""
    engine = _engine()
    return {
        "status": "ok" if not engine.knowledge_base.problems else "degraded",
        "engine": "visa-navigator",
        "version": engine.version,
        "visas": len(engine.knowledge_base),
    }
