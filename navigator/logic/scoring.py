"""
Eligibility Scoring

Runs every rule of a visa through the rule evaluator, computes the match
percentage and classifies the visa. Also builds the per-visa detail views
(eligibility report, requirement breakdown, next options) used by the UI.

All functions are pure: safe to call on every profile change.
"""

import logging
from typing import Dict, List, Optional

from .classifier import classify_status, round_half_up
from .constants import (
    EMPTY_RULES_MATCH_PERCENTAGE,
    ENTRY_OPTION_VISAS,
    EligibilityStatus,
    RuleField,
)
from .contracts import (
    EligibilityReport,
    EligibilityScore,
    NextVisaOption,
    RequirementStatus,
    UserProfile,
    VisaDefinition,
)
from .knowledge_base import VisaKnowledgeBase
from .rule_evaluator import evaluate

logger = logging.getLogger(__name__)


# Requirement flag populated by rules on each field
REQUIREMENT_FLAGS: Dict[str, str] = {
    RuleField.EDUCATION_LEVEL.value: "education_met",
    RuleField.YEARS_OF_EXPERIENCE.value: "experience_met",
    RuleField.ENGLISH_PROFICIENCY.value: "english_met",
    RuleField.INVESTMENT_AMOUNT.value: "investment_met",
    RuleField.CITIZENSHIP_RESTRICTION_CATEGORY.value: "citizenship_ok",
    RuleField.PREVIOUS_VISA.value: "previous_visa_met",
}


def score_visa(visa: VisaDefinition, profile: UserProfile) -> EligibilityScore:
    """
    Score one visa definition against a profile.

    Args:
        visa: Visa definition from the knowledge base
        profile: User profile snapshot

    Returns:
        EligibilityScore with matched/total counts, status and failed rules
    """
    failed_rules: List[str] = []
    matched_rules = 0

    for rule in visa.eligibility_rules:
        if evaluate(rule, profile):
            matched_rules += 1
        else:
            failed_rules.append(rule.description)

    total_rules = len(visa.eligibility_rules)
    if total_rules > 0:
        match_percentage = round_half_up(matched_rules / total_rules * 100)
    else:
        match_percentage = EMPTY_RULES_MATCH_PERCENTAGE

    return EligibilityScore(
        visa_id=visa.id,
        status=classify_status(match_percentage),
        matched_rules=matched_rules,
        total_rules=total_rules,
        match_percentage=match_percentage,
        failed_rules=failed_rules,
    )


def score(
    visa_id: str,
    profile: UserProfile,
    knowledge_base: VisaKnowledgeBase
) -> Optional[EligibilityScore]:
    """Score a visa by id. Returns None if the id is not in the knowledge base."""
    visa = knowledge_base.get(visa_id)
    if visa is None:
        return None
    return score_visa(visa, profile)


def score_all(
    profile: UserProfile,
    knowledge_base: VisaKnowledgeBase
) -> Dict[str, EligibilityScore]:
    """
    Score every visa in the knowledge base, in catalog order.

    O(visas x rules); no caching needed.
    """
    return {visa.id: score_visa(visa, profile) for visa in knowledge_base}


def _verdict(score: EligibilityScore, visa_name: str) -> str:
    prefix = f"Your profile matches {score.match_percentage}% of requirements for {visa_name}."
    if score.status == EligibilityStatus.RECOMMENDED.value:
        return f"{prefix} This may be a strong match."
    if score.status == EligibilityStatus.AVAILABLE.value:
        return f"{prefix} This could be a possible path."
    return f"{prefix} You may need to strengthen: {', '.join(score.failed_rules[:2])}."


def eligibility_report(
    visa_id: str,
    profile: UserProfile,
    knowledge_base: VisaKnowledgeBase
) -> Optional[EligibilityReport]:
    """
    Detailed report for a single visa: why the user qualifies or doesn't.
    """
    visa = knowledge_base.get(visa_id)
    if visa is None:
        return None

    visa_score = score_visa(visa, profile)
    return EligibilityReport(
        visa=visa,
        score=visa_score,
        message=_verdict(visa_score, visa.name or visa.code),
    )


def requirement_status(
    visa_id: str,
    profile: UserProfile,
    knowledge_base: VisaKnowledgeBase
) -> Optional[RequirementStatus]:
    """
    Break a visa's rules down into per-requirement flags.

    Flags stay None for requirement kinds the visa has no rule for. When a
    visa has several rules on one field, the flag is met only if all pass.
    """
    visa = knowledge_base.get(visa_id)
    if visa is None:
        logger.warning(f"Requirement status requested for unknown visa: {visa_id}")
        return None

    visa_score = score_visa(visa, profile)

    flags: Dict[str, bool] = {}
    for rule in visa.eligibility_rules:
        flag = REQUIREMENT_FLAGS.get(rule.field)
        if flag is None:
            continue
        flags[flag] = flags.get(flag, True) and evaluate(rule, profile)

    meets_core = visa_score.status == EligibilityStatus.RECOMMENDED.value
    pct = visa_score.match_percentage
    if meets_core:
        detail = f"Your profile matches {pct}% of requirements. This may be a strong match for you."
    elif visa_score.status == EligibilityStatus.AVAILABLE.value:
        detail = (
            f"Your profile matches {pct}% of requirements. "
            f"Consider strengthening: {', '.join(visa_score.failed_rules[:2])}."
        )
    else:
        detail = (
            f"Your profile matches {pct}% of requirements. "
            f"You may need to work on: {', '.join(visa_score.failed_rules[:3])}."
        )

    logger.debug(f"Requirement status for {visa.code}: {flags} ({pct}%)")

    return RequirementStatus(
        visa_id=visa.id,
        meets_core_requirements=meets_core,
        detail_message=detail,
        match_percentage=pct,
        **flags,
    )


def next_visa_options(
    current_visa: Optional[str],
    profile: UserProfile,
    knowledge_base: VisaKnowledgeBase
) -> List[NextVisaOption]:
    """
    Typical next steps from the current visa, with the user's status for each.

    With no current visa, the entry-level options are listed instead.
    An unknown current visa has no options.
    """
    if not current_visa:
        candidates = [(visa_id, "Entry-level visa option") for visa_id in ENTRY_OPTION_VISAS]
    else:
        visa = knowledge_base.get(current_visa)
        if visa is None:
            return []
        candidates = [(step.visa_id, step.reason) for step in visa.common_next_steps]

    options = []
    for visa_id, reason in candidates:
        visa_score = score(visa_id, profile, knowledge_base)
        options.append(NextVisaOption(
            visa_id=visa_id,
            reason=reason,
            status=visa_score.status if visa_score else EligibilityStatus.LOCKED,
        ))
    return options
