"""
Tests for the category-filtered visa graph and its traversals.
"""

from catalog_factory import make_kb, make_visa
from navigator.logic.constants import DEFAULT_ALLOWED_CATEGORIES
from navigator.logic.graph import (
    build_adjacency,
    find_path,
    highlighted_path_ids,
    reachable_from,
    tiered_bfs,
)


def test_adjacency_filters_categories(kb):
    graph = build_adjacency(kb, ["student", "worker"])

    assert set(graph) == {"f1", "j1", "opt", "h1b", "l1b", "o1"}
    assert graph["f1"] == ["opt", "h1b"]
    assert graph["h1b"] == ["l1b"]

    all_targets = {target for targets in graph.values() for target in targets}
    assert "esta" not in graph and "esta" not in all_targets
    assert "eb2gc" not in graph and "eb2gc" not in all_targets


def test_adjacency_includes_start_when_special_allowed(kb):
    graph = build_adjacency(kb, ["special", "student"])
    assert graph["start"] == ["f1", "j1"]


def test_adjacency_drops_dangling_edges():
    kb = make_kb(make_visa("a", next_steps=("b", "ghost")), make_visa("b"))
    assert build_adjacency(kb, ["worker"]) == {"a": ["b"], "b": []}


def test_reachable_without_current_visa(kb):
    graph = build_adjacency(kb, DEFAULT_ALLOWED_CATEGORIES)
    expected = {
        "f1", "j1", "opt", "h1b", "l1b", "o1",
        "eb5", "eb2gc", "eb1a", "eb1c", "us_citizenship",
    }
    assert reachable_from(None, graph) == expected
    assert reachable_from("xyz", graph) == expected


def test_reachable_is_stable_across_calls(kb):
    graph = build_adjacency(kb, DEFAULT_ALLOWED_CATEGORIES)
    snapshot = {k: list(v) for k, v in graph.items()}

    first = reachable_from(None, graph)
    from_f1 = reachable_from("f1", graph)
    second = reachable_from(None, graph)
    again_f1 = reachable_from("f1", graph)

    assert first == second
    assert from_f1 == again_f1
    assert graph == snapshot


def test_reachable_from_visa(kb):
    graph = build_adjacency(kb, DEFAULT_ALLOWED_CATEGORIES)
    assert reachable_from("o1", graph) == {"o1", "eb1a", "us_citizenship"}
    assert reachable_from("us_citizenship", graph) == {"us_citizenship"}


def test_tiered_bfs_from_f1(kb):
    graph = build_adjacency(kb, DEFAULT_ALLOWED_CATEGORIES)
    assert tiered_bfs("f1", graph) == {
        0: ["f1"],
        1: ["opt", "h1b", "eb2gc"],
        2: ["l1b", "us_citizenship"],
        3: ["eb1c"],
    }


def test_tiered_bfs_respects_max_depth(kb):
    graph = build_adjacency(kb, DEFAULT_ALLOWED_CATEGORIES)
    levels = tiered_bfs("f1", graph, max_depth=1)
    assert levels == {0: ["f1"], 1: ["opt", "h1b", "eb2gc"]}
    assert tiered_bfs("f1", graph, max_depth=0) == {0: ["f1"]}


def test_tiered_bfs_each_visa_once():
    kb = make_kb(
        make_visa("a", next_steps=("b", "c")),
        make_visa("b", next_steps=("c", "a")),
        make_visa("c", next_steps=("a",)),
    )
    levels = tiered_bfs("a", build_adjacency(kb, ["worker"]))
    assert levels == {0: ["a"], 1: ["b", "c"]}


def test_tiered_bfs_without_start_uses_tiers(engine):
    graph = engine.build_adjacency()
    assert engine.tiered_bfs(None, graph) == {
        0: ["start"],
        1: ["f1", "j1"],
        2: ["opt", "h1b", "l1b"],
        3: ["o1", "eb5", "eb2gc", "eb1a", "eb1c", "us_citizenship"],
    }


def test_tiered_bfs_without_start_clamps_to_depth(engine):
    graph = engine.build_adjacency()
    levels = engine.tiered_bfs(None, graph, max_depth=1)
    assert levels[0] == ["start"]
    assert set(levels) == {0, 1}
    assert len(levels[1]) == len(graph)


def test_tiered_bfs_without_knowledge_base():
    graph = {"a": ["b"], "b": []}
    assert tiered_bfs(None, graph) == {0: ["start"], 1: ["a", "b"]}


def test_find_path(kb):
    graph = build_adjacency(kb, DEFAULT_ALLOWED_CATEGORIES)
    assert find_path(graph, "f1", "eb1c") == ["f1", "h1b", "l1b", "eb1c"]
    assert find_path(graph, "f1", "f1") == ["f1"]
    assert find_path(graph, "eb1a", "f1") is None


def test_highlighted_path_ids(kb):
    graph = build_adjacency(kb, DEFAULT_ALLOWED_CATEGORIES)
    assert highlighted_path_ids(graph, "f1", "eb1c") == {"f1", "h1b", "l1b", "eb1c"}
    assert highlighted_path_ids(graph, None, "h1b") == {"h1b"}
    assert highlighted_path_ids(graph, "eb1a", "f1") == {"eb1a", "f1"}


def test_explore_reachable_stays_within_depth(engine, masters_profile):
    view = engine.explore(masters_profile, max_depth=1)
    assert set(view.reachable) <= set(view.positions)
    assert set(view.reachable) == {"f1", "opt", "h1b", "eb2gc"}


def test_explore_without_visa_at_depth_zero(engine, blank_profile):
    view = engine.explore(blank_profile, max_depth=0)
    assert view.tiers == {0: ["start"]}
    assert view.reachable == []
