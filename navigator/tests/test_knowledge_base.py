"""
Tests for the visa knowledge base loader and the built-in catalog.
"""

import logging

import pytest
from pydantic import ValidationError

from catalog_factory import make_kb, make_visa
from navigator.logic import KnowledgeBaseError, VisaDefinition, default_knowledge_base


def test_default_catalog_is_consistent(kb):
    assert kb.problems == []
    assert len(kb) == 15
    for visa in kb:
        for step in visa.common_next_steps:
            assert step.visa_id in kb


def test_default_catalog_is_cached():
    assert default_knowledge_base() is default_knowledge_base()


def test_dangling_edge_is_logged(caplog):
    with caplog.at_level(logging.ERROR, logger="navigator.logic.knowledge_base"):
        kb = make_kb(make_visa("a", next_steps=("ghost",)))
    assert len(kb.problems) == 1
    assert "ghost" in caplog.text


def test_dangling_edge_raises_in_strict_mode():
    with pytest.raises(KnowledgeBaseError):
        make_kb(make_visa("a", next_steps=("ghost",)), strict=True)


def test_duplicate_ids_keep_first():
    first = make_visa("a", tier="entry")
    kb = make_kb(first, make_visa("a", tier="advanced"))
    assert len(kb) == 1
    assert kb.get("a") is first
    assert any("Duplicate" in p for p in kb.problems)


def test_visa_definitions_are_frozen(kb):
    visa = kb.get("f1")
    with pytest.raises(ValidationError):
        visa.difficulty = 3


def test_visa_id_is_lowercased():
    visa = make_visa("H1B")
    assert visa.id == "h1b"


def test_difficulty_bounds():
    with pytest.raises(ValidationError):
        VisaDefinition(id="x", code="X", category="worker", tier="entry", difficulty=4)


def test_lookup_and_tiers(kb):
    assert kb.get(None) is None
    assert kb.get("nope") is None
    assert kb.get("eb5").category == "investor"
    assert kb.by_tier("start") == ["start"]
    assert "us_citizenship" in kb.by_tier("advanced")
    assert kb.ids()[0] == "start"
