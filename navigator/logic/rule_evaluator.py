"""
Rule Evaluator

Evaluates a single EligibilityRule against a UserProfile.
Each known RuleField has its own resolver; each RuleOperator its own
comparison. Unknown fields or operators pass (fail open) with a warning so a
malformed or future rule never blocks a user.
"""

import logging
from typing import Any, Callable, Dict

from .citizenship import classify
from .constants import EDUCATION_LEVEL_ORDINAL, RuleField, RuleOperator
from .contracts import EligibilityRule, UserProfile

logger = logging.getLogger(__name__)


# =============================================================================
# FIELD RESOLVERS
# =============================================================================

def _resolve_education_level(profile: UserProfile) -> int:
    return EDUCATION_LEVEL_ORDINAL.get(profile.education_level, 0)


def _resolve_citizenship(profile: UserProfile) -> str:
    return classify(profile.country_of_citizenship)


FIELD_RESOLVERS: Dict[RuleField, Callable[[UserProfile], Any]] = {
    RuleField.EDUCATION_LEVEL: _resolve_education_level,
    RuleField.YEARS_OF_EXPERIENCE: lambda p: p.years_of_experience,
    RuleField.FIELD_OF_WORK: lambda p: p.field_of_work,
    RuleField.ENGLISH_PROFICIENCY: lambda p: p.english_proficiency,
    RuleField.INVESTMENT_AMOUNT: lambda p: p.investment_amount,
    RuleField.CITIZENSHIP_RESTRICTION_CATEGORY: _resolve_citizenship,
    RuleField.PREVIOUS_VISA: lambda p: p.current_visa,
}

# =============================================================================
# OPERATORS
# =============================================================================

OPERATORS: Dict[RuleOperator, Callable[[Any, Any], bool]] = {
    RuleOperator.GTE: lambda actual, operand: actual >= operand,
    RuleOperator.LTE: lambda actual, operand: actual <= operand,
    RuleOperator.EQ: lambda actual, operand: actual == operand,
    RuleOperator.INCLUDES: lambda actual, operand: actual in operand,
    RuleOperator.EXCLUDES: lambda actual, operand: actual not in operand,
}


def resolve_field(field: RuleField, profile: UserProfile) -> Any:
    """Concrete value of a known rule field for this profile."""
    return FIELD_RESOLVERS[field](profile)


def evaluate(rule: EligibilityRule, profile: UserProfile) -> bool:
    """
    Evaluate one rule.

    Args:
        rule: Rule from the knowledge base
        profile: User profile snapshot

    Returns:
        True if the rule passes (or cannot be interpreted), False otherwise
    """
    try:
        field = RuleField(rule.field)
    except ValueError:
        logger.warning(f"Unknown rule field: {rule.field!r} - treating rule as passed")
        return True

    try:
        operator = RuleOperator(rule.operator)
    except ValueError:
        logger.warning(f"Unknown operator: {rule.operator!r} - treating rule as passed")
        return True

    actual = resolve_field(field, profile)

    try:
        return bool(OPERATORS[operator](actual, rule.value))
    except TypeError as e:
        # e.g. a string operand on a numeric comparison
        logger.warning(
            f"Cannot apply {operator.value} to {field.value}={actual!r} and {rule.value!r}: {e}"
        )
        return False
