"""Pure survey routing engine: scoring, tier predicates, resolution and validation."""

from __future__ import annotations

from survey_routing.logic.path_resolver import resolve_path
from survey_routing.logic.path_rules import (
    matches_advanced_rules,
    matches_score_threshold,
    matches_simple_mapping,
)
from survey_routing.logic.path_validation import validate_all_paths, validate_path_configuration
from survey_routing.logic.scoring import compute_score
from survey_routing.logic.simulation import simulate_survey
from survey_routing.logic.survey_checks import check_survey_structure

__all__ = [
    "compute_score",
    "matches_advanced_rules",
    "matches_score_threshold",
    "matches_simple_mapping",
    "resolve_path",
    "validate_path_configuration",
    "validate_all_paths",
    "simulate_survey",
    "check_survey_structure",
]
