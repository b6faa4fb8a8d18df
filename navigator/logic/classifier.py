"""
Classifier

Maps numeric results onto categories:
- match percentage -> Recommended / Available / Locked
- average path match -> High / Medium / Low confidence
"""

import math
from typing import Dict, List

from .constants import (
    CONFIDENCE_THRESHOLDS,
    STATUS_THRESHOLDS,
    EligibilityStatus,
    PathConfidence,
)
from .contracts import EligibilityScore


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (89.5 -> 90)."""
    return int(math.floor(value + 0.5))


def classify_status(match_percentage: int) -> EligibilityStatus:
    """
    Classify a match percentage into an eligibility status.

    Thresholds are inclusive lower bounds: 90 is recommended, 89 available,
    50 available, 49 locked.
    """
    for status, minimum in STATUS_THRESHOLDS:
        if match_percentage >= minimum:
            return status
    return EligibilityStatus.LOCKED


def classify_confidence(average_match: float) -> PathConfidence:
    for confidence, minimum in CONFIDENCE_THRESHOLDS:
        if average_match >= minimum:
            return confidence
    return PathConfidence.LOW


def filter_by_status(
    scores: Dict[str, EligibilityScore],
    status: EligibilityStatus
) -> List[str]:
    """
    Visa ids with the given status, sorted for consistent ordering.
    """
    wanted = EligibilityStatus(status).value
    return sorted(visa_id for visa_id, score in scores.items() if score.status == wanted)


def get_status_counts(scores: Dict[str, EligibilityScore]) -> Dict[str, int]:
    """
    Count visas in each status.
    """
    counts = {status.value: 0 for status in EligibilityStatus}
    for score in scores.values():
        counts[score.status] += 1
    return counts
