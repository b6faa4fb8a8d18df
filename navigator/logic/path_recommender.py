"""
Path Recommender

Greedily walks forward through next-step edges from the user's current visa,
picking the strongest option at each hop, to produce a recommended path
toward long-term goals (green card, citizenship).

Pipeline:
1. Score every visa for the profile
2. Pick the first step (entry candidates, or the current visa's next steps)
3. Extend while the best next option is strong enough, up to max_depth hops
4. Estimate months per step and an overall confidence
"""

import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .classifier import classify_confidence
from .constants import (
    DEFAULT_TIME_MONTHS,
    ENTRY_CANDIDATE_VISAS,
    ENTRY_STEP_REASON,
    PATH_MAX_DEPTH,
    PATH_MIN_EXTENSION_MATCH,
    TIME_HORIZON_MONTHS,
    EligibilityStatus,
)
from .contracts import EligibilityScore, PathStep, RecommendedPath, UserProfile, VisaDefinition
from .knowledge_base import VisaKnowledgeBase
from .scoring import score_all

logger = logging.getLogger(__name__)


def estimated_time_months(visa: VisaDefinition) -> int:
    """Typical months spent in a visa, from its time horizon."""
    return TIME_HORIZON_MONTHS.get(visa.time_horizon, DEFAULT_TIME_MONTHS)


def _rank_key(step: PathStep) -> Tuple[int, int]:
    # Recommended first, then highest match
    is_recommended = step.score.status == EligibilityStatus.RECOMMENDED.value
    return (0 if is_recommended else 1, -step.score.match_percentage)


def _build_steps(
    candidates: Iterable[Tuple[str, str]],
    scores: Dict[str, EligibilityScore],
    knowledge_base: VisaKnowledgeBase,
    exclude: Set[str]
) -> List[PathStep]:
    steps = []
    for visa_id, reason in candidates:
        visa = knowledge_base.get(visa_id)
        visa_score = scores.get(visa_id)
        if visa is None or visa_score is None or visa_id in exclude:
            continue
        steps.append(PathStep(
            visa_id=visa_id,
            score=visa_score,
            reason=reason,
            estimated_time_months=estimated_time_months(visa),
        ))
    return steps


def rank_next_steps(
    visa_id: str,
    scores: Dict[str, EligibilityScore],
    knowledge_base: VisaKnowledgeBase,
    exclude: Optional[Set[str]] = None
) -> List[PathStep]:
    """
    Candidate next steps of a visa, best first.

    Dangling edges and visas in `exclude` are skipped. Ties keep the
    declaration order of the visa's next steps.
    """
    visa = knowledge_base.get(visa_id)
    if visa is None:
        return []

    steps = _build_steps(
        ((step.visa_id, step.reason) for step in visa.common_next_steps),
        scores,
        knowledge_base,
        exclude or set(),
    )
    return sorted(steps, key=_rank_key)


def _best_entry_step(
    scores: Dict[str, EligibilityScore],
    knowledge_base: VisaKnowledgeBase,
    entry_candidates: Iterable[str]
) -> Optional[PathStep]:
    steps = _build_steps(
        ((visa_id, ENTRY_STEP_REASON) for visa_id in entry_candidates),
        scores,
        knowledge_base,
        set(),
    )
    if not steps:
        return None
    # Stable sort: ties fall back to candidate order
    return sorted(steps, key=lambda s: -s.score.match_percentage)[0]


def generate_path_description(
    steps: List[PathStep],
    knowledge_base: VisaKnowledgeBase,
    current_name: Optional[str] = None
) -> str:
    """Human-readable summary of a path."""
    if not steps:
        return ""

    names = []
    for step in steps:
        visa = knowledge_base.get(step.visa_id)
        names.append(visa.name if visa and visa.name else step.visa_id)

    if len(names) == 1:
        return f"Your next recommended step: {names[0]}"
    if current_name:
        return f"From {current_name}, we recommend: {' → '.join(names)}"
    return f"Based on your profile, we recommend starting with {names[0]} and progressing towards {names[-1]}."


def recommend_path(
    profile: UserProfile,
    knowledge_base: VisaKnowledgeBase,
    max_depth: int = PATH_MAX_DEPTH,
    min_extension_match: int = PATH_MIN_EXTENSION_MATCH,
    entry_candidates: Iterable[str] = ENTRY_CANDIDATE_VISAS,
    scores: Optional[Dict[str, EligibilityScore]] = None
) -> Optional[RecommendedPath]:
    """
    Compute the best multi-step path from the user's current position.

    Args:
        profile: User profile snapshot
        knowledge_base: Visa catalog
        max_depth: Maximum number of extensions after the first step
        min_extension_match: Options below this match never extend the path
        entry_candidates: First-step candidates when there is no current visa
        scores: Precomputed score_all() result, if the caller has one

    Returns:
        RecommendedPath, or None when no viable first step exists
    """
    if scores is None:
        scores = score_all(profile, knowledge_base)

    current = profile.current_visa
    current_visa = knowledge_base.get(current)
    if current is not None and current_visa is None:
        logger.warning(f"Current visa not found: {current} - treating as no current visa")

    # Step 1: first step
    if current_visa is None:
        first = _best_entry_step(scores, knowledge_base, entry_candidates)
    else:
        ranked = rank_next_steps(current_visa.id, scores, knowledge_base, exclude={current_visa.id})
        first = ranked[0] if ranked else None

    if first is None or first.score.match_percentage <= 0:
        logger.info(f"No viable first step for profile {profile.id or 'anonymous'}")
        return None

    steps: List[PathStep] = [first]
    visited = {first.visa_id}
    if current_visa is not None:
        visited.add(current_visa.id)

    # Step 2: greedy extension
    for _ in range(max_depth):
        options = rank_next_steps(steps[-1].visa_id, scores, knowledge_base, exclude=visited)
        if not options or options[0].score.match_percentage < min_extension_match:
            break
        best = options[0]
        steps.append(best)
        visited.add(best.visa_id)

    # Step 3: summary
    total_months = sum(step.estimated_time_months for step in steps)
    average_match = sum(step.score.match_percentage for step in steps) / len(steps)

    path = RecommendedPath(
        steps=steps,
        total_estimated_months=total_months,
        confidence=classify_confidence(average_match),
        description=generate_path_description(
            steps,
            knowledge_base,
            current_visa.name if current_visa is not None else None,
        ),
    )
    logger.debug(f"Recommended path: {[s.visa_id for s in steps]} ({path.confidence})")
    return path
