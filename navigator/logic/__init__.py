"""
Visa Navigator Logic Module

Provides the deterministic eligibility engine, graph traversal, path
recommendation and map layout for U.S. visa exploration.
"""

from .contracts import (
    EligibilityRule,
    NextStep,
    VisaDefinition,
    UserProfile,
    EligibilityScore,
    PathStep,
    RecommendedPath,
    Position,
    EligibilityReport,
    RequirementStatus,
    NextVisaOption,
    VisaMapView,
)
from .engine import (
    VisaNavigatorEngine,
    get_engine,
    score_all,
    score,
    build_adjacency,
    reachable_from,
    tiered_bfs,
    recommend_path,
    assign_positions,
)
from .knowledge_base import VisaKnowledgeBase, KnowledgeBaseError, default_knowledge_base
from .constants import (
    VisaCategory,
    VisaTier,
    EligibilityStatus,
    PathConfidence,
    RuleField,
    RuleOperator,
)

__all__ = [
    # Main engine
    "VisaNavigatorEngine",
    "get_engine",
    "score_all",
    "score",
    "build_adjacency",
    "reachable_from",
    "tiered_bfs",
    "recommend_path",
    "assign_positions",

    # Knowledge base
    "VisaKnowledgeBase",
    "KnowledgeBaseError",
    "default_knowledge_base",

    # Contracts
    "EligibilityRule",
    "NextStep",
    "VisaDefinition",
    "UserProfile",
    "EligibilityScore",
    "PathStep",
    "RecommendedPath",
    "Position",
    "EligibilityReport",
    "RequirementStatus",
    "NextVisaOption",
    "VisaMapView",

    # Enums
    "VisaCategory",
    "VisaTier",
    "EligibilityStatus",
    "PathConfidence",
    "RuleField",
    "RuleOperator",
]
