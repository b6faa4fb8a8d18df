"""
Tests for the user_profiles row <-> UserProfile mapping.
"""

from types import SimpleNamespace

import pytest

from navigator.logic import UserProfile
from navigator.logic.adapter import (
    english_level_to_proficiency,
    profile_to_record_values,
    proficiency_to_english_level,
    record_to_profile,
)


def record(**overrides):
    values = dict(
        id="u1",
        current_visa=None,
        education_level=None,
        work_experience_years=None,
        field_of_work=None,
        country_of_citizenship=None,
        english_level=None,
        investment_amount_usd=None,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


@pytest.mark.parametrize("level,proficiency", [
    ("basic", 1),
    ("intermediate", 2),
    ("advanced", 3),
    ("fluent", 4),
    ("Fluent", 4),
    ("native", 0),
    (None, 0),
])
def test_english_level_to_proficiency(level, proficiency):
    assert english_level_to_proficiency(level) == proficiency


def test_proficiency_to_english_level():
    assert proficiency_to_english_level(0) is None
    assert proficiency_to_english_level(1) == "basic"
    assert proficiency_to_english_level(2) == "intermediate"
    assert proficiency_to_english_level(3) == "advanced"
    assert proficiency_to_english_level(5) == "fluent"


def test_empty_record_uses_defaults():
    profile = record_to_profile(record())
    assert profile.id == "u1"
    assert profile.education_level == "other"
    assert profile.country_of_citizenship == "US"
    assert profile.english_proficiency == 0
    assert profile.current_visa is None


def test_full_record():
    profile = record_to_profile(record(
        current_visa="F1",
        education_level="Masters",
        work_experience_years=3,
        field_of_work="Engineering",
        country_of_citizenship="in",
        english_level="advanced",
        investment_amount_usd=1000.0,
    ))
    assert profile.current_visa == "f1"
    assert profile.education_level == "masters"
    assert profile.years_of_experience == 3
    assert profile.country_of_citizenship == "IN"
    assert profile.english_proficiency == 3
    assert profile.investment_amount == 1000.0


def test_unknown_education_falls_back_to_other():
    assert record_to_profile(record(education_level="bootcamp")).education_level == "other"


def test_profile_to_record_values():
    values = profile_to_record_values(UserProfile(
        education_level="phd",
        years_of_experience=0,
        english_proficiency=4,
        country_of_citizenship="DE",
        current_visa="o1",
    ))
    assert values["education_level"] == "phd"
    assert values["work_experience_years"] is None
    assert values["english_level"] == "fluent"
    assert values["country_of_citizenship"] == "DE"
    assert values["current_visa"] == "o1"
    assert values["investment_amount_usd"] is None
