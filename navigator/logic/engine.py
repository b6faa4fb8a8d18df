"""
Visa Navigator Engine

Main orchestrator that binds a knowledge base to the scoring, graph, path
and layout components. This is the primary entry point for the UI and the
HTTP layer.
"""

import logging
import time
from typing import Dict, Iterable, List, Optional, Set

from . import graph, layout, path_recommender, scoring
from .classifier import filter_by_status
from .constants import (
    DEFAULT_ALLOWED_CATEGORIES,
    DEFAULT_BFS_MAX_DEPTH,
    START_NODE_ID,
    EligibilityStatus,
)
from .contracts import (
    EligibilityReport,
    EligibilityScore,
    NextVisaOption,
    Position,
    RecommendedPath,
    RequirementStatus,
    UserProfile,
    VisaMapView,
)
from .knowledge_base import VisaKnowledgeBase, default_knowledge_base

logger = logging.getLogger(__name__)


class VisaNavigatorEngine:
    """
    Visa engine bound to one knowledge base.

    Pipeline flow (explore):
    1. Scoring - Score every visa for the profile
    2. Graph - Build the category-filtered adjacency
    3. Reachability - Tier the visas reachable from the current visa
    4. Path - Greedy recommended path toward long-term goals
    5. Layout - Position the tiered visas for the map
    """

    def __init__(self, knowledge_base: Optional[VisaKnowledgeBase] = None):
        """
        Args:
            knowledge_base: Visa catalog. Defaults to the built-in U.S. catalog.
        """
        self.knowledge_base = knowledge_base or default_knowledge_base()
        self.version = "1.0.0"

    # -------------------------------------------------------------------------
    # Scoring
    # -------------------------------------------------------------------------

    def score(self, visa_id: str, profile: UserProfile) -> Optional[EligibilityScore]:
        return scoring.score(visa_id, profile, self.knowledge_base)

    def score_all(self, profile: UserProfile) -> Dict[str, EligibilityScore]:
        return scoring.score_all(profile, self.knowledge_base)

    def visas_by_status(self, profile: UserProfile, status: EligibilityStatus) -> List[str]:
        return filter_by_status(self.score_all(profile), status)

    def visas_by_tier(self, tier: str) -> List[str]:
        return self.knowledge_base.by_tier(getattr(tier, "value", tier))

    def eligibility_report(self, visa_id: str, profile: UserProfile) -> Optional[EligibilityReport]:
        return scoring.eligibility_report(visa_id, profile, self.knowledge_base)

    def requirement_status(self, visa_id: str, profile: UserProfile) -> Optional[RequirementStatus]:
        return scoring.requirement_status(visa_id, profile, self.knowledge_base)

    def next_visa_options(self, current_visa: Optional[str], profile: UserProfile) -> List[NextVisaOption]:
        return scoring.next_visa_options(current_visa, profile, self.knowledge_base)

    # -------------------------------------------------------------------------
    # Graph
    # -------------------------------------------------------------------------

    def build_adjacency(
        self,
        allowed_categories: Iterable = DEFAULT_ALLOWED_CATEGORIES
    ) -> Dict[str, List[str]]:
        return graph.build_adjacency(self.knowledge_base, allowed_categories)

    def reachable_from(self, start: Optional[str], adjacency: Dict[str, List[str]]) -> Set[str]:
        return graph.reachable_from(start, adjacency)

    def tiered_bfs(
        self,
        start: Optional[str],
        adjacency: Dict[str, List[str]],
        max_depth: int = DEFAULT_BFS_MAX_DEPTH
    ) -> Dict[int, List[str]]:
        return graph.tiered_bfs(start, adjacency, max_depth, knowledge_base=self.knowledge_base)

    # -------------------------------------------------------------------------
    # Path & layout
    # -------------------------------------------------------------------------

    def recommend_path(self, profile: UserProfile, **kwargs) -> Optional[RecommendedPath]:
        """
        Recommended path for a profile.

        Keyword arguments (max_depth, min_extension_match, entry_candidates)
        are passed through to path_recommender.recommend_path.
        """
        return path_recommender.recommend_path(profile, self.knowledge_base, **kwargs)

    def assign_positions(self, tiers: Dict[int, List[str]]) -> Dict[str, Position]:
        return layout.assign_positions(tiers, self.knowledge_base)

    # -------------------------------------------------------------------------
    # Full pipeline
    # -------------------------------------------------------------------------

    def explore(
        self,
        profile: UserProfile,
        allowed_categories: Optional[Iterable] = None,
        max_depth: int = DEFAULT_BFS_MAX_DEPTH
    ) -> VisaMapView:
        """
        Build the complete map view for a profile.

        Args:
            profile: User profile snapshot
            allowed_categories: Categories shown on the map (default: primary surface)
            max_depth: Maximum BFS depth for the tiered view

        Returns:
            VisaMapView with scores, graph, tiers, positions and path
        """
        start_time = time.perf_counter()
        warnings: List[str] = []

        logger.info(f"🚀 Exploring visa map for profile: {profile.id or 'anonymous'}")

        # Step 1: Score
        scores = self.score_all(profile)
        logger.info(f"📊 Visas scored: {len(scores)}")

        # Step 2: Graph
        categories = allowed_categories if allowed_categories is not None else DEFAULT_ALLOWED_CATEGORIES
        adjacency = self.build_adjacency(categories)

        # Step 3: Reachability
        start = profile.current_visa if profile.current_visa in adjacency else None
        if profile.current_visa and start is None:
            warnings.append(
                f"Current visa '{profile.current_visa}' is not on the map; showing all options."
            )
        tiers = self.tiered_bfs(start, adjacency, max_depth)
        # Only visas placed within max_depth are on the map
        reachable = {visa_id for level in tiers.values() for visa_id in level}
        if start is None:
            reachable.discard(START_NODE_ID)
        logger.info(f"🧭 Reachable visas: {len(reachable)} across {len(tiers)} levels")

        # Step 4: Path
        path = path_recommender.recommend_path(profile, self.knowledge_base, scores=scores)
        if path is None:
            warnings.append("No recommended path available for this profile.")

        # Step 5: Layout
        positions = self.assign_positions(tiers)

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(f"✨ Visa map complete ({processing_time:.2f}ms)")

        return VisaMapView(
            profile_id=profile.id,
            start_visa=start,
            scores=scores,
            adjacency=adjacency,
            tiers=tiers,
            reachable=sorted(reachable),
            positions=positions,
            recommended_path=path,
            processing_time_ms=round(processing_time, 2),
            warnings=warnings,
        )


# =============================================================================
# Convenience functions bound to the built-in catalog
# =============================================================================

def get_engine() -> VisaNavigatorEngine:
    return VisaNavigatorEngine(default_knowledge_base())


def score_all(profile: UserProfile) -> Dict[str, EligibilityScore]:
    return get_engine().score_all(profile)


def score(visa_id: str, profile: UserProfile) -> Optional[EligibilityScore]:
    return get_engine().score(visa_id, profile)


def build_adjacency(allowed_categories: Iterable = DEFAULT_ALLOWED_CATEGORIES) -> Dict[str, List[str]]:
    return get_engine().build_adjacency(allowed_categories)


def reachable_from(start: Optional[str], adjacency: Dict[str, List[str]]) -> Set[str]:
    return graph.reachable_from(start, adjacency)


def tiered_bfs(
    start: Optional[str],
    adjacency: Dict[str, List[str]],
    max_depth: int = DEFAULT_BFS_MAX_DEPTH
) -> Dict[int, List[str]]:
    return get_engine().tiered_bfs(start, adjacency, max_depth)


def recommend_path(profile: UserProfile) -> Optional[RecommendedPath]:
    return get_engine().recommend_path(profile)


def assign_positions(tiers: Dict[int, List[str]]) -> Dict[str, Position]:
    return get_engine().assign_positions(tiers)
