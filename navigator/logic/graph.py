"""
Visa Graph

Builds the directed "common next step" graph filtered to an allowed set of
categories, and traverses it:
- reachable_from: every visa reachable from a start visa
- tiered_bfs: the same, partitioned into hop levels and bounded in depth
- find_path: shortest chain between two visas, for highlighting

Policy when the user has no (known) current visa: every allowed-category
visa is reachable. In the tiered view the synthetic START node sits at
level 0 and each visa sits at the level of its tier.
"""

import logging
from collections import deque
from typing import Dict, Iterable, List, Optional, Set

from .constants import (
    DEFAULT_BFS_MAX_DEPTH,
    START_NODE_ID,
    TIER_LEVELS,
)
from .knowledge_base import VisaKnowledgeBase

logger = logging.getLogger(__name__)

Adjacency = Dict[str, List[str]]


def _category_values(categories: Iterable) -> Set[str]:
    return {getattr(c, "value", c) for c in categories}


def build_adjacency(
    knowledge_base: VisaKnowledgeBase,
    allowed_categories: Iterable
) -> Adjacency:
    """
    Map each allowed-category visa to its allowed-category next steps.

    Visas outside the allowed set appear neither as keys nor as edge targets.
    Dangling edges are dropped.

    Args:
        knowledge_base: Visa catalog
        allowed_categories: Category tokens (or VisaCategory members) to keep

    Returns:
        Dict of visa id -> list of next visa ids, in catalog order
    """
    allowed = _category_values(allowed_categories)
    graph: Adjacency = {}

    for visa in knowledge_base:
        if visa.category not in allowed:
            continue

        next_ids = []
        for step in visa.common_next_steps:
            target = knowledge_base.get(step.visa_id)
            if target is not None and target.category in allowed:
                next_ids.append(target.id)
        graph[visa.id] = next_ids

    logger.debug(f"Built adjacency graph for {sorted(allowed)}: {graph}")
    return graph


def reachable_from(start: Optional[str], adjacency: Adjacency) -> Set[str]:
    """
    Set of visas reachable from `start` (inclusive) via directed edges.

    A None or unknown start means no current visa: all visas in the
    adjacency are reachable.
    """
    if start is None or start not in adjacency:
        return set(adjacency.keys())

    reachable = {start}
    queue = deque([start])
    while queue:
        visa_id = queue.popleft()
        for next_id in adjacency.get(visa_id, []):
            if next_id not in reachable:
                reachable.add(next_id)
                queue.append(next_id)
    return reachable


def _tiers_without_start(
    adjacency: Adjacency,
    max_depth: int,
    knowledge_base: Optional[VisaKnowledgeBase]
) -> Dict[int, List[str]]:
    levels: Dict[int, List[str]] = {0: [START_NODE_ID]}
    if max_depth < 1:
        return levels

    for visa_id in adjacency:
        if visa_id == START_NODE_ID:
            continue
        visa = knowledge_base.get(visa_id) if knowledge_base else None
        tier_level = TIER_LEVELS.get(visa.tier, 1) if visa else 1
        level = max(1, min(tier_level, max_depth))
        levels.setdefault(level, []).append(visa_id)

    return dict(sorted(levels.items()))


def tiered_bfs(
    start: Optional[str],
    adjacency: Adjacency,
    max_depth: int = DEFAULT_BFS_MAX_DEPTH,
    knowledge_base: Optional[VisaKnowledgeBase] = None
) -> Dict[int, List[str]]:
    """
    Partition reachable visas into hop levels from `start`.

    Each visa is assigned the level at which it is first discovered and
    appears in exactly one level. Nothing is placed beyond `max_depth`.

    Args:
        start: Current visa id, or None
        adjacency: Graph from build_adjacency
        max_depth: Maximum hop count to expand
        knowledge_base: Used for tier levels when there is no start visa

    Returns:
        Dict of level -> visa ids in discovery order
    """
    if start is None or start not in adjacency:
        if start is not None:
            logger.warning(f"Start visa not in graph: {start} - treating as no current visa")
        return _tiers_without_start(adjacency, max_depth, knowledge_base)

    discovered = {start: 0}
    levels: Dict[int, List[str]] = {0: [start]}
    queue = deque([start])

    while queue:
        visa_id = queue.popleft()
        level = discovered[visa_id]
        if level >= max_depth:
            continue
        for next_id in adjacency.get(visa_id, []):
            if next_id in discovered:
                continue
            discovered[next_id] = level + 1
            levels.setdefault(level + 1, []).append(next_id)
            queue.append(next_id)

    return levels


def find_path(adjacency: Adjacency, from_id: str, to_id: str) -> Optional[List[str]]:
    """
    Shortest chain of visa ids from `from_id` to `to_id`, or None.
    """
    if from_id == to_id:
        return [from_id]

    parents: Dict[str, Optional[str]] = {from_id: None}
    queue = deque([from_id])
    while queue:
        visa_id = queue.popleft()
        for next_id in adjacency.get(visa_id, []):
            if next_id in parents:
                continue
            parents[next_id] = visa_id
            if next_id == to_id:
                path = [next_id]
                while parents[path[-1]] is not None:
                    path.append(parents[path[-1]])
                return list(reversed(path))
            queue.append(next_id)
    return None


def highlighted_path_ids(
    adjacency: Adjacency,
    current_visa: Optional[str],
    selected_visa: str
) -> Set[str]:
    """
    Visas to highlight when the user selects a node on the map.

    Without a current visa only the selected node is highlighted; when no
    chain exists, just the two endpoints.
    """
    if not current_visa:
        return {selected_visa}

    path = find_path(adjacency, current_visa, selected_visa)
    if path is None:
        logger.info(f"No path from {current_visa} to {selected_visa} - highlighting endpoints")
        return {current_visa, selected_visa}
    return set(path)
