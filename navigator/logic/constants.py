"""
Visa Engine Constants

Defines all enums, ordinal mappings, thresholds and layout parameters used by
the eligibility engine, the graph traversal and the path recommender.
All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict, FrozenSet, List, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class VisaCategory(str, Enum):
    """Broad visa family, used to filter the exploration graph."""
    STUDENT = "student"
    WORKER = "worker"
    VISITOR = "visitor"
    INVESTOR = "investor"
    IMMIGRANT = "immigrant"
    FAMILY = "family"
    SPECIAL = "special"
    TOURIST = "tourist"


class VisaTier(str, Enum):
    """Coarse progression stage of a visa."""
    START = "start"
    ENTRY = "entry"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class TimeHorizon(str, Enum):
    SHORT = "short"        # ~6 months - 1 year
    MEDIUM = "medium"      # 1-3 years
    LONG = "long"          # 3+ years / permanent


class EducationLevel(str, Enum):
    HIGH_SCHOOL = "high_school"
    BACHELORS = "bachelors"
    MASTERS = "masters"
    PHD = "phd"
    OTHER = "other"


class RuleField(str, Enum):
    """Closed set of profile attributes an eligibility rule may reference."""
    EDUCATION_LEVEL = "education_level"
    YEARS_OF_EXPERIENCE = "years_of_experience"
    FIELD_OF_WORK = "field_of_work"
    ENGLISH_PROFICIENCY = "english_proficiency"
    INVESTMENT_AMOUNT = "investment_amount"
    CITIZENSHIP_RESTRICTION_CATEGORY = "citizenship_restriction_category"
    PREVIOUS_VISA = "previous_visa"


class RuleOperator(str, Enum):
    GTE = "gte"
    LTE = "lte"
    EQ = "eq"
    INCLUDES = "includes"
    EXCLUDES = "excludes"


class RestrictionCategory(str, Enum):
    UNRESTRICTED = "unrestricted"
    RESTRICTED = "restricted"
    US_NATIONAL = "usNational"


class EligibilityStatus(str, Enum):
    """Classification of a visa for a given profile."""
    RECOMMENDED = "recommended"  # 90%+ rules pass
    AVAILABLE = "available"      # 50%+ rules pass
    LOCKED = "locked"            # fewer than half pass


class PathConfidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# =============================================================================
# RULE EVALUATION
# =============================================================================

# Education ordinal used for gte/lte comparisons
EDUCATION_LEVEL_ORDINAL: Dict[str, int] = {
    "high_school": 1,
    "bachelors": 2,
    "masters": 3,
    "phd": 4,
    "other": 0,
}

# Operators whose operand must be a list of strings
LIST_OPERATORS: FrozenSet[str] = frozenset({
    RuleOperator.INCLUDES.value,
    RuleOperator.EXCLUDES.value,
})

# =============================================================================
# CITIZENSHIP RESTRICTIONS
# =============================================================================

# Checked in this order: U.S. nationals, then restricted, else unrestricted
US_NATIONAL_COUNTRIES: FrozenSet[str] = frozenset({"AS"})

RESTRICTED_COUNTRIES: FrozenSet[str] = frozenset({
    "CN", "RU", "IR", "SY", "KP", "CU",  # High restriction
    "VN", "ID", "PK", "BD", "NG", "EG",  # Medium restriction
})

# Listed for reference only; anything not in the two sets above is unrestricted
UNRESTRICTED_COUNTRIES: FrozenSet[str] = frozenset({
    "CA", "AU", "NZ", "GB", "DE", "FR", "IT", "ES", "NL", "SE", "NO", "DK",
    "JP", "KR", "SG", "TH", "MX", "BR", "AR", "CL", "CO", "IN", "UA", "IL",
    "ZA", "AE", "SA", "KZ", "TR", "GR", "CZ", "PL", "HU", "RO", "PT", "IE",
})

# =============================================================================
# CLASSIFICATION THRESHOLDS
# =============================================================================

# Minimum match percentage for each status, checked highest first
STATUS_THRESHOLDS: List[Tuple[EligibilityStatus, int]] = [
    (EligibilityStatus.RECOMMENDED, 90),
    (EligibilityStatus.AVAILABLE, 50),
]

# A visa with no rules is trivially satisfied
EMPTY_RULES_MATCH_PERCENTAGE = 100

# =============================================================================
# GRAPH CONFIGURATION
# =============================================================================

# Categories shown on the primary exploration surface (tourist/family/special excluded)
DEFAULT_ALLOWED_CATEGORIES: Tuple[str, ...] = (
    VisaCategory.STUDENT.value,
    VisaCategory.WORKER.value,
    VisaCategory.IMMIGRANT.value,
    VisaCategory.INVESTOR.value,
)

# Synthetic level-0 node used when the user holds no visa
START_NODE_ID = "start"

DEFAULT_BFS_MAX_DEPTH = 3

# BFS level for each tier when every allowed visa is reachable
TIER_LEVELS: Dict[str, int] = {
    "start": 0,
    "entry": 1,
    "intermediate": 2,
    "advanced": 3,
}

# =============================================================================
# PATH RECOMMENDATION
# =============================================================================

# Candidate first steps for users without a current visa, in tie-break order
ENTRY_CANDIDATE_VISAS: Tuple[str, ...] = ("f1", "j1", "h1b", "o1", "l1b")

# Short labels that differ from catalog ids once dashes and spaces are removed
VISA_ID_ALIASES: Dict[str, str] = {
    "l1": "l1b",
    "eb2": "eb2gc",
    "uscitizenship": "us_citizenship",
}

# Options listed as "next" for users without a current visa
ENTRY_OPTION_VISAS: Tuple[str, ...] = ("f1", "j1", "b2")

# Tunable: number of greedy extensions after the first step
PATH_MAX_DEPTH = 3

# Tunable: a candidate below this match never extends a path
PATH_MIN_EXTENSION_MATCH = 50

ENTRY_STEP_REASON = "Entry-level visa option based on your profile"

TIME_HORIZON_MONTHS: Dict[str, int] = {
    "short": 9,     # 6-12 months average
    "medium": 24,   # 1-3 years average
    "long": 48,     # 3-5+ years average
}
DEFAULT_TIME_MONTHS = 12

CONFIDENCE_THRESHOLDS: List[Tuple[PathConfidence, float]] = [
    (PathConfidence.HIGH, 85),
    (PathConfidence.MEDIUM, 60),
]

# =============================================================================
# LAYOUT
# =============================================================================

LAYOUT_BASE_X = 160
LAYOUT_COLUMN_SPACING = 260
LAYOUT_BASE_Y = 260
LAYOUT_ROW_SPACING = 110

# Harder visas are lifted slightly so same-tier nodes separate visually
LAYOUT_DIFFICULTY_STEP = -12
