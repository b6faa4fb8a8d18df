"""
Visa Knowledge Base

Immutable, id-indexed view over a list of VisaDefinitions. Constructed once
(at startup, or per test with a fabricated mini-catalog) and passed into
every engine function.
"""

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional

from .contracts import VisaDefinition

logger = logging.getLogger(__name__)


class KnowledgeBaseError(ValueError):
    """Raised in strict mode when the catalog fails integrity checks."""


class VisaKnowledgeBase:
    """
    Read-only catalog of visa definitions keyed by id.

    Integrity (duplicate ids, dangling next-step edges) is checked once at
    construction. Problems are logged; with `strict=True` they raise
    KnowledgeBaseError instead.
    """

    def __init__(self, visas: Iterable[VisaDefinition], strict: bool = False):
        by_id = {}
        duplicates: List[str] = []
        for visa in visas:
            if visa.id in by_id:
                duplicates.append(visa.id)
                continue
            by_id[visa.id] = visa

        self._visas = MappingProxyType(by_id)
        self.problems = [f"Duplicate visa id '{visa_id}'" for visa_id in duplicates]
        self.problems.extend(self.validate())

        for problem in self.problems:
            logger.error(f"Visa knowledge base integrity: {problem}")
        if strict and self.problems:
            raise KnowledgeBaseError("; ".join(self.problems))

    def validate(self) -> List[str]:
        """Return a description of every next-step edge that does not resolve."""
        problems = []
        for visa in self._visas.values():
            for step in visa.common_next_steps:
                if step.visa_id not in self._visas:
                    problems.append(
                        f"'{visa.id}' lists unknown next step '{step.visa_id}'"
                    )
        return problems

    def get(self, visa_id: Optional[str]) -> Optional[VisaDefinition]:
        if not visa_id:
            return None
        return self._visas.get(visa_id)

    def ids(self) -> List[str]:
        return list(self._visas.keys())

    def by_tier(self, tier: str) -> List[str]:
        """Visa ids of one tier, in catalog order."""
        return [visa.id for visa in self._visas.values() if visa.tier == tier]

    def __contains__(self, visa_id: object) -> bool:
        return visa_id in self._visas

    def __iter__(self) -> Iterator[VisaDefinition]:
        return iter(self._visas.values())

    def __len__(self) -> int:
        return len(self._visas)

    def __repr__(self) -> str:
        return f"VisaKnowledgeBase({len(self)} visas)"


@lru_cache(maxsize=1)
def default_knowledge_base() -> VisaKnowledgeBase:
    """The built-in U.S. catalog, loaded and validated once per process."""
    from .catalog import VISA_CATALOG

    kb = VisaKnowledgeBase(VISA_CATALOG)
    logger.info(f"Loaded visa knowledge base: {len(kb)} visas")
    return kb
