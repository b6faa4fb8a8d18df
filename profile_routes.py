"""
Profile API Routes

Endpoints to save/update and fetch the visa navigator profile of a user.
Table: user_profiles
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Body
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Dict, Any

from db import get_db
from navigator.logic.contracts import UserProfile
from utils.crud_profile import load_profile, save_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/profile", tags=["profile"])

PROFILE_FIELDS = (
    "education_level",
    "years_of_experience",
    "field_of_work",
    "english_proficiency",
    "country_of_citizenship",
    "investment_amount",
    "current_visa",
)


# ─────────────────────────────────────────────
# GET /api/profile/{user_id}
# ─────────────────────────────────────────────
@router.get("/{user_id}", summary="Fetch user profile")
def get_profile(user_id: str, db: Session = Depends(get_db)):
    """
    Return profile for the given user_id.
    Returns empty object with status 200 if not found.
    """
    try:
        profile = load_profile(db, user_id)
        return profile.model_dump() if profile else {}

    except SQLAlchemyError as e:
        logger.error(f"Profile load failed for {user_id}: {e}")
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": f"Database error: {str(e)}"},
        )


# ─────────────────────────────────────────────
# POST /api/profile
# ─────────────────────────────────────────────
@router.post("", summary="Create or update user profile")
def upsert_profile(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    """
    Create or update a profile row.
    Uses user_id as the unique key; fields missing from the payload keep
    their stored values.
    """
    user_id = payload.get("user_id")
    if not user_id:
        raise HTTPException(status_code=400, detail="user_id is required")

    try:
        existing = load_profile(db, user_id)
        merged = existing.model_dump() if existing else {}
        merged.update({k: payload[k] for k in PROFILE_FIELDS if k in payload})
        merged["id"] = user_id

        try:
            profile = UserProfile(**merged)
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=f"Invalid profile: {str(e)}")

        if not save_profile(db, user_id, profile, email=payload.get("email")):
            return JSONResponse(
                status_code=500,
                content={"status": "error", "message": "Could not save profile"},
            )
        db.commit()

        return {"status": "ok", "message": "Profile saved", "profile": profile.model_dump()}

    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Profile save failed for {user_id}: {e}")
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": f"Database error: {str(e)}"},
        )
