"""Functional tests for path resolution precedence and ordering."""

from __future__ import annotations

from survey_routing.logic.path_resolver import resolve_path
from survey_routing.models.response_types import MatchReason
from survey_factories import make_path, make_question


QUESTIONS = [make_question("q1", "single_choice", {"o1": 5, "o2": -5})]


def test_empty_selections_yield_no_match_regardless_of_paths():
    paths = [make_path("pA", advanced=True), make_path("pB", score_max=100), make_path("pC", mapped=["o1"])]
    result = resolve_path(set(), paths, QUESTIONS)
    assert result.path is None
    assert result.reason is MatchReason.NO_MATCH
    assert result.score is None


def test_empty_paths_yield_no_match():
    result = resolve_path({"o1"}, [], QUESTIONS)
    assert result.path is None
    assert result.reason is MatchReason.NO_MATCH


def test_round_trip_score_then_mapping():
    paths = [make_path("pA", score_min=1, score_max=10), make_path("pB", mapped=["o2"])]

    high = resolve_path({"o1"}, paths, QUESTIONS)
    assert high.path.id == "pA"
    assert high.reason is MatchReason.SCORE_THRESHOLD
    assert high.score == 5

    low = resolve_path({"o2"}, paths, QUESTIONS)
    assert low.path.id == "pB"
    assert low.reason is MatchReason.SIMPLE_MAPPING
    assert low.score == -5


def test_failing_advanced_rules_skip_path_entirely():
    gated = make_path(
        "gated",
        advanced=True,
        require_all=["never-selected"],
        score_min=0,
        mapped=["o1"],
    )
    fallback = make_path("fallback", mapped=["o1"])
    result = resolve_path({"o1"}, [gated, fallback], QUESTIONS)
    assert result.path.id == "fallback"
    assert result.reason is MatchReason.SIMPLE_MAPPING


def test_failing_advanced_rules_without_other_paths_is_no_match():
    gated = make_path("gated", advanced=True, require_none=["o1"], score_max=100, mapped=["o1"])
    result = resolve_path({"o1"}, [gated], QUESTIONS)
    assert result.path is None
    assert result.reason is MatchReason.NO_MATCH
    assert result.score == 5


def test_matching_advanced_rules_win_on_their_path():
    path = make_path("adv", advanced=True, require_any=["o1"], score_min=100, mapped=["o2"])
    result = resolve_path({"o1"}, [path], QUESTIONS)
    assert result.path.id == "adv"
    assert result.reason is MatchReason.ADVANCED_RULES


def test_enabled_empty_advanced_rules_route_any_selection():
    result = resolve_path({"whatever"}, [make_path("catch-all", advanced=True)], QUESTIONS)
    assert result.path.id == "catch-all"
    assert result.reason is MatchReason.ADVANCED_RULES


def test_score_tier_beats_mapping_on_same_path():
    path = make_path("both", score_min=0, mapped=["o1"])
    result = resolve_path({"o1"}, [path], QUESTIONS)
    assert result.reason is MatchReason.SCORE_THRESHOLD


def test_failing_score_falls_through_to_mapping_on_same_path():
    path = make_path("both", score_min=100, mapped=["o1"])
    result = resolve_path({"o1"}, [path], QUESTIONS)
    assert result.path.id == "both"
    assert result.reason is MatchReason.SIMPLE_MAPPING


def test_first_matching_path_in_order_wins():
    first = make_path("first", mapped=["o1"])
    second = make_path("second", mapped=["o1"])
    assert resolve_path({"o1"}, [first, second], QUESTIONS).path.id == "first"
    assert resolve_path({"o1"}, [second, first], QUESTIONS).path.id == "second"


def test_order_beats_tier_across_paths():
    mapped = make_path("mapped", mapped=["o1"])
    advanced = make_path("advanced", advanced=True, require_all=["o1"])

    result = resolve_path({"o1"}, [mapped, advanced], QUESTIONS)
    assert result.path.id == "mapped"
    assert result.reason is MatchReason.SIMPLE_MAPPING

    result = resolve_path({"o1"}, [advanced, mapped], QUESTIONS)
    assert result.path.id == "advanced"
    assert result.reason is MatchReason.ADVANCED_RULES


def test_resolution_does_not_mutate_inputs():
    paths = [make_path("pA", score_min=1, score_max=10), make_path("pB", mapped=["o2"])]
    before = [p.model_dump() for p in paths]
    selections = {"o2"}
    resolve_path(selections, paths, QUESTIONS)
    assert [p.model_dump() for p in paths] == before
    assert selections == {"o2"}


def test_unknown_selected_ids_still_route_by_mapping():
    result = resolve_path({"ghost"}, [make_path("p", mapped=["ghost"])], QUESTIONS)
    assert result.path.id == "p"
    assert result.score == 0
