"""Survey completion simulation.

Runs scoring, resolution and validation together and reports how every
path's tier predicates evaluated, for interactive "test this survey" views.
"""

from __future__ import annotations

from typing import Iterable, Sequence
import logging

from survey_routing.logic.path_resolver import resolve_path
from survey_routing.logic.path_rules import (
    advanced_rules_enabled,
    matches_advanced_rules,
    matches_score_threshold,
    matches_simple_mapping,
)
from survey_routing.logic.path_validation import validate_all_paths
from survey_routing.logic.scoring import compute_score
from survey_routing.models.response_types import PathEvaluation, SimulationResult
from survey_routing.models.survey import Question, ResponsePath

logger = logging.getLogger(__name__)


def simulate_survey(
    selections: Iterable[str] | None,
    questions: Sequence[Question] | None,
    paths: Sequence[ResponsePath] | None,
) -> SimulationResult:
    selected = frozenset(selections or ())
    score = compute_score(selected, questions)
    route = resolve_path(selected, paths, questions)

    evaluations = [
        PathEvaluation(
            path=path,
            advanced_rules_match=(
                matches_advanced_rules(selected, path.advanced_rules) if advanced_rules_enabled(path) else None
            ),
            score_match=matches_score_threshold(score, path),
            simple_mapping_match=matches_simple_mapping(selected, path),
        )
        for path in paths or ()
    ]
    return SimulationResult(
        score=score,
        selected_path=route.path,
        match_reason=route.reason,
        warnings=validate_all_paths(paths, questions),
        paths_evaluated=evaluations,
    )


__all__ = ["simulate_survey"]
