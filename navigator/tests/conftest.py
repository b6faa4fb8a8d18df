"""
Shared fixtures for the visa navigator tests.
"""

import pytest

from navigator.logic import UserProfile, VisaNavigatorEngine, default_knowledge_base
from navigator.logic.knowledge_base import VisaKnowledgeBase


@pytest.fixture
def kb() -> VisaKnowledgeBase:
    return default_knowledge_base()


@pytest.fixture
def engine(kb) -> VisaNavigatorEngine:
    return VisaNavigatorEngine(kb)


@pytest.fixture
def masters_profile() -> UserProfile:
    return UserProfile(
        id="user-masters",
        education_level="masters",
        years_of_experience=3,
        english_proficiency=3,
        country_of_citizenship="IN",
        investment_amount=0,
        current_visa="f1",
    )


@pytest.fixture
def blank_profile() -> UserProfile:
    return UserProfile(id="user-blank")
