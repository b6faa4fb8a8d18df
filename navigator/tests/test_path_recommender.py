"""
Tests for the greedy path recommender.
"""

from catalog_factory import make_kb, make_visa, rules_with
from navigator.logic import UserProfile
from navigator.logic.path_recommender import (
    estimated_time_months,
    generate_path_description,
    rank_next_steps,
    recommend_path,
)
from navigator.logic.scoring import score_all


def ids(path):
    return [step.visa_id for step in path.steps]


def test_h1b_holder_path(kb):
    profile = UserProfile(
        education_level="masters",
        years_of_experience=2,
        english_proficiency=3,
        country_of_citizenship="IN",
        current_visa="h1b",
    )
    path = recommend_path(profile, kb)

    assert ids(path) == ["l1b", "eb1c", "us_citizenship"]
    assert path.steps[-1].score.match_percentage == 50
    assert path.total_estimated_months == 24 + 48 + 48
    assert path.confidence == "medium"
    assert path.description.startswith("From ")


def test_path_without_current_visa(kb):
    profile = UserProfile(
        education_level="masters",
        years_of_experience=3,
        english_proficiency=3,
        country_of_citizenship="IN",
    )
    path = recommend_path(profile, kb)

    assert ids(path) == ["f1", "h1b", "l1b", "eb1c"]
    assert path.steps[0].reason == "Entry-level visa option based on your profile"
    assert path.total_estimated_months == 105
    assert path.confidence == "high"


def test_stale_current_visa_behaves_like_none(kb, caplog):
    profile = UserProfile(
        education_level="masters",
        years_of_experience=3,
        english_proficiency=3,
        country_of_citizenship="IN",
        current_visa="xyz",
    )
    path = recommend_path(profile, kb)
    assert ids(path) == ["f1", "h1b", "l1b", "eb1c"]
    assert "Current visa not found" in caplog.text


def test_extension_stops_below_threshold(blank_profile):
    kb = make_kb(
        make_visa("a", next_steps=("b",)),
        make_visa("b", next_steps=("c",)),
        make_visa("c", rules=rules_with(2, 3)),
    )
    profile = blank_profile.model_copy(update={"current_visa": "a"})
    path = recommend_path(profile, kb)

    assert ids(path) == ["b"]
    assert path.total_estimated_months == 24
    assert path.confidence == "high"
    assert path.description.startswith("Your next recommended step")


def test_terminal_visa_has_no_path(kb):
    profile = UserProfile(years_of_experience=10, english_proficiency=4, current_visa="us_citizenship")
    assert recommend_path(profile, kb) is None


def test_no_viable_entry_step(kb):
    profile = UserProfile(
        country_of_citizenship="AS",
        education_level="other",
        english_proficiency=0,
        years_of_experience=0,
    )
    assert recommend_path(profile, kb) is None


def test_first_step_at_zero_is_rejected(blank_profile):
    kb = make_kb(
        make_visa("a", next_steps=("b",)),
        make_visa("b", rules=rules_with(0, 2)),
    )
    profile = blank_profile.model_copy(update={"current_visa": "a"})
    assert recommend_path(profile, kb) is None


def test_max_depth_zero_gives_single_step(kb, masters_profile):
    path = recommend_path(masters_profile, kb, max_depth=0)
    assert len(path.steps) == 1


def test_path_never_revisits(blank_profile):
    kb = make_kb(
        make_visa("a", next_steps=("b",)),
        make_visa("b", next_steps=("a", "c")),
        make_visa("c", next_steps=("b",)),
    )
    profile = blank_profile.model_copy(update={"current_visa": "a"})
    path = recommend_path(profile, kb)
    assert ids(path) == ["b", "c"]


def test_path_respects_max_depth(kb, masters_profile):
    path = recommend_path(masters_profile, kb)
    assert ids(path) == ["opt", "h1b", "l1b", "eb1c"]
    assert len(path.steps) <= 4


def test_ranking_prefers_recommended_then_match(blank_profile):
    kb = make_kb(
        make_visa("a", next_steps=("low", "mid", "top", "top2")),
        make_visa("low", rules=rules_with(1, 3)),
        make_visa("mid", rules=rules_with(7, 3)),
        make_visa("top", rules=rules_with(9, 1)),
        make_visa("top2"),
    )
    scores = score_all(blank_profile, kb)
    ranked = rank_next_steps("a", scores, kb)
    assert [s.visa_id for s in ranked] == ["top2", "top", "mid", "low"]


def test_ranking_ties_keep_declaration_order(blank_profile):
    kb = make_kb(make_visa("a", next_steps=("x", "y")), make_visa("x"), make_visa("y"))
    ranked = rank_next_steps("a", score_all(blank_profile, kb), kb)
    assert [s.visa_id for s in ranked] == ["x", "y"]


def test_estimated_time_months():
    assert estimated_time_months(make_visa("s", time_horizon="short")) == 9
    assert estimated_time_months(make_visa("m", time_horizon="medium")) == 24
    assert estimated_time_months(make_visa("l", time_horizon="long")) == 48
    assert estimated_time_months(make_visa("n", time_horizon=None)) == 12


def test_generate_path_description(kb, masters_profile):
    path = recommend_path(masters_profile, kb)
    assert generate_path_description([], kb) == ""
    text = generate_path_description(path.steps, kb)
    assert text.startswith("Based on your profile")
    assert "→" in generate_path_description(path.steps, kb, current_name="F-1")


def test_ui_label_keeps_position_on_path(kb):
    profile = UserProfile(
        education_level="masters",
        years_of_experience=2,
        english_proficiency=3,
        country_of_citizenship="IN",
        current_visa="H-1B",
    )
    path = recommend_path(profile, kb)
    assert ids(path) == ["l1b", "eb1c", "us_citizenship"]
