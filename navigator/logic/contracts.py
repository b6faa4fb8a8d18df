"""
Data Contracts for the Visa Eligibility Engine

Defines Pydantic models for the knowledge base schema (VisaDefinition), the
engine input (UserProfile) and the engine outputs (EligibilityScore,
RecommendedPath, VisaMapView). These contracts are the API boundary for the
engine and the HTTP layer.
"""

from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import (
    EducationLevel,
    EligibilityStatus,
    LIST_OPERATORS,
    PathConfidence,
    TimeHorizon,
    VISA_ID_ALIASES,
    VisaCategory,
    VisaTier,
)


# =============================================================================
# KNOWLEDGE BASE SCHEMA
# =============================================================================

class EligibilityRule(BaseModel):
    """
    One testable condition comparing a profile field against an operand.

    `field` and `operator` are kept as plain strings so that a rule written
    for a future field or operator still loads; the evaluator fails such
    rules open.
    """
    field: str
    operator: str
    value: Union[int, float, str, List[str]]
    description: str = ""

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_operand_type(self):
        if self.operator in LIST_OPERATORS and not isinstance(self.value, list):
            raise ValueError(
                f"operator '{self.operator}' requires a list value, got {type(self.value).__name__}"
            )
        return self


class NextStep(BaseModel):
    """Directed edge to a plausible next visa."""
    visa_id: str
    reason: str = ""

    class Config:
        frozen = True


class VisaDefinition(BaseModel):
    """
    A single visa / immigration category in the knowledge base.
    Defined once at startup and never mutated.
    """
    # Identifiers
    id: str
    code: str
    name: str = ""
    short_description: str = ""

    # Categorization
    category: VisaCategory
    tier: VisaTier

    # Eligibility (evaluated by the scoring engine)
    eligibility_rules: List[EligibilityRule] = Field(default_factory=list)

    # Connections
    common_next_steps: List[NextStep] = Field(default_factory=list)
    common_previous_visas: List[str] = Field(default_factory=list)

    # Map positioning & difficulty
    time_horizon: Optional[TimeHorizon] = None
    difficulty: int = Field(default=1, ge=1, le=3)

    # Metadata
    estimated_total_time: str = ""
    notes: str = ""

    class Config:
        frozen = True
        use_enum_values = True

    @field_validator("id")
    @classmethod
    def lowercase_id(cls, v: str) -> str:
        return v.strip().lower()


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class UserProfile(BaseModel):
    """
    Input contract for the engine.
    A read-only snapshot of the user's qualifications.
    """
    id: Optional[str] = None

    education_level: EducationLevel = EducationLevel.OTHER
    years_of_experience: int = Field(default=0, ge=0)
    field_of_work: str = ""
    english_proficiency: int = Field(default=0, ge=0, le=5)
    country_of_citizenship: str = "US"  # ISO-3166 alpha-2
    investment_amount: float = Field(default=0.0, ge=0.0)  # USD

    # None means "no visa yet"
    current_visa: Optional[str] = None

    class Config:
        use_enum_values = True

    @field_validator("country_of_citizenship")
    @classmethod
    def uppercase_country(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("current_visa")
    @classmethod
    def normalize_current_visa(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        # UI labels such as "F-1" or "H-1B" map onto catalog ids
        v = v.strip().lower().replace("-", "").replace(" ", "")
        if not v or v == "none":
            return None
        return VISA_ID_ALIASES.get(v, v)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class EligibilityScore(BaseModel):
    """Result of scoring one (profile, visa) pair."""
    visa_id: str
    status: EligibilityStatus
    matched_rules: int = 0
    total_rules: int = 0
    match_percentage: int = Field(ge=0, le=100)
    failed_rules: List[str] = Field(default_factory=list)

    class Config:
        use_enum_values = True


class PathStep(BaseModel):
    visa_id: str
    score: EligibilityScore
    reason: str = ""
    estimated_time_months: int = 0


class RecommendedPath(BaseModel):
    """Greedily chosen sequence of next visas from the user's position."""
    steps: List[PathStep] = Field(default_factory=list)
    total_estimated_months: int = 0
    confidence: PathConfidence
    description: str = ""

    class Config:
        use_enum_values = True


class Position(BaseModel):
    x: float
    y: float


class EligibilityReport(BaseModel):
    """Visa, score and a human-readable verdict for detail panels."""
    visa: VisaDefinition
    score: EligibilityScore
    message: str


class RequirementStatus(BaseModel):
    """
    Per-requirement breakdown for a visa.
    A `None` flag means the visa has no rule on that field.
    """
    visa_id: str
    meets_core_requirements: bool
    education_met: Optional[bool] = None
    experience_met: Optional[bool] = None
    english_met: Optional[bool] = None
    investment_met: Optional[bool] = None
    citizenship_ok: Optional[bool] = None
    previous_visa_met: Optional[bool] = None
    detail_message: str = ""
    match_percentage: int = 0


class NextVisaOption(BaseModel):
    visa_id: str
    reason: str = ""
    status: EligibilityStatus

    class Config:
        use_enum_values = True


class VisaMapView(BaseModel):
    """
    Everything the map UI needs for one profile: per-visa status, the
    visible subgraph, node positions and the highlighted path.
    """
    profile_id: Optional[str] = None
    start_visa: Optional[str] = None

    scores: Dict[str, EligibilityScore] = Field(default_factory=dict)
    adjacency: Dict[str, List[str]] = Field(default_factory=dict)
    tiers: Dict[int, List[str]] = Field(default_factory=dict)
    reachable: List[str] = Field(default_factory=list)
    positions: Dict[str, Position] = Field(default_factory=dict)
    recommended_path: Optional[RecommendedPath] = None

    processing_time_ms: Optional[float] = None
    warnings: List[str] = Field(default_factory=list)
