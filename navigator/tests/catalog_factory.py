"""
Builders for fabricated mini-catalogs used in tests.
"""

from typing import List, Optional, Sequence

from navigator.logic.contracts import EligibilityRule, NextStep, VisaDefinition
from navigator.logic.knowledge_base import VisaKnowledgeBase


PASSING_RULE = EligibilityRule(
    field="years_of_experience", operator="gte", value=0, description="Always passes"
)


def failing_rule(n: int = 0) -> EligibilityRule:
    return EligibilityRule(
        field="years_of_experience", operator="gte", value=100, description=f"Needs 100 years ({n})"
    )


def rules_with(passing: int, failing: int) -> List[EligibilityRule]:
    return [PASSING_RULE] * passing + [failing_rule(i) for i in range(failing)]


def make_visa(
    visa_id: str,
    category: str = "worker",
    tier: str = "intermediate",
    rules: Optional[List[EligibilityRule]] = None,
    next_steps: Sequence[str] = (),
    time_horizon: Optional[str] = "medium",
    difficulty: int = 1,
) -> VisaDefinition:
    return VisaDefinition(
        id=visa_id,
        code=visa_id.upper(),
        name=f"{visa_id.upper()} Visa",
        category=category,
        tier=tier,
        eligibility_rules=rules or [],
        common_next_steps=[NextStep(visa_id=n, reason=f"{visa_id} to {n}") for n in next_steps],
        time_horizon=time_horizon,
        difficulty=difficulty,
    )


def make_kb(*visas: VisaDefinition, strict: bool = False) -> VisaKnowledgeBase:
    return VisaKnowledgeBase(visas, strict=strict)
