"""
Profile Adapter

Converts between the persisted user_profiles row and the engine's
UserProfile contract. Column names and the text English level differ from
the engine's field names; all mapping lives here.

This is a pure mapping layer - NO scoring, NO DB queries.
"""

import logging
from typing import Any, Dict, Optional

from .constants import EducationLevel
from .contracts import UserProfile

logger = logging.getLogger(__name__)


ENGLISH_LEVEL_TO_PROFICIENCY: Dict[str, int] = {
    "basic": 1,
    "intermediate": 2,
    "advanced": 3,
    "fluent": 4,
}

DEFAULT_COUNTRY = "US"


def english_level_to_proficiency(level: Optional[str]) -> int:
    """Text English level -> 0-5 proficiency. Unknown or empty -> 0."""
    if not level:
        return 0
    return ENGLISH_LEVEL_TO_PROFICIENCY.get(level.strip().lower(), 0)


def proficiency_to_english_level(proficiency: Optional[int]) -> Optional[str]:
    """0-5 proficiency -> text English level. Zero or missing -> None."""
    if not proficiency:
        return None
    if proficiency <= 1:
        return "basic"
    if proficiency == 2:
        return "intermediate"
    if proficiency == 3:
        return "advanced"
    return "fluent"


def _education_level(value: Optional[str]) -> str:
    valid = {level.value for level in EducationLevel}
    if value and value.lower() in valid:
        return value.lower()
    if value:
        logger.debug(f"Unrecognised education level {value!r} - using 'other'")
    return EducationLevel.OTHER.value


def record_to_profile(record: Any) -> UserProfile:
    """
    Convert a UserProfileRecord (or any object with the same attributes)
    to a UserProfile.
    """
    return UserProfile(
        id=str(record.id),
        current_visa=record.current_visa or None,
        education_level=_education_level(record.education_level),
        years_of_experience=record.work_experience_years or 0,
        field_of_work=record.field_of_work or "",
        country_of_citizenship=record.country_of_citizenship or DEFAULT_COUNTRY,
        english_proficiency=english_level_to_proficiency(record.english_level),
        investment_amount=record.investment_amount_usd or 0.0,
    )


def profile_to_record_values(profile: UserProfile) -> Dict[str, Any]:
    """
    Column values for inserting/updating a user_profiles row.
    Zero or empty values are stored as NULL.
    """
    return {
        "current_visa": profile.current_visa or None,
        "education_level": profile.education_level or None,
        "work_experience_years": profile.years_of_experience or None,
        "field_of_work": profile.field_of_work or None,
        "country_of_citizenship": profile.country_of_citizenship or None,
        "english_level": proficiency_to_english_level(profile.english_proficiency),
        "investment_amount_usd": profile.investment_amount or None,
    }
