"""Path resolution for completed surveys.

Paths are scanned once, in the order given. Each path is judged only by its
own applicable tier:

1. advanced rules, when enabled on the path. A failing rule set skips the
   path entirely; score thresholds and mapped options on it are ignored.
2. score threshold, when the path sets a min or max bound.
3. simple option mapping.

The first path that satisfies its tier wins. This is not a global
"highest tier first" scan: an earlier path matched by simple mapping beats a
later path matched by advanced rules.
"""

from __future__ import annotations

from typing import Iterable, Sequence
import logging

from survey_routing.logic.path_rules import (
    advanced_rules_enabled,
    has_score_threshold,
    matches_advanced_rules,
    matches_score_threshold,
    matches_simple_mapping,
)
from survey_routing.logic.scoring import compute_score
from survey_routing.models.response_types import MatchReason, RouteResult
from survey_routing.models.survey import Question, ResponsePath

logger = logging.getLogger(__name__)


def resolve_path(
    selections: Iterable[str] | None,
    paths: Sequence[ResponsePath] | None,
    questions: Sequence[Question] | None,
) -> RouteResult:
    """Return the first path in order that satisfies its own routing tier."""
    selected = frozenset(selections or ())
    if not selected or not paths:
        return RouteResult(path=None, reason=MatchReason.NO_MATCH)

    score = compute_score(selected, questions)
    for path in paths:
        if advanced_rules_enabled(path):
            if matches_advanced_rules(selected, path.advanced_rules):
                return _matched(path, MatchReason.ADVANCED_RULES, score)
            continue
        if has_score_threshold(path) and matches_score_threshold(score, path):
            return _matched(path, MatchReason.SCORE_THRESHOLD, score)
        if matches_simple_mapping(selected, path):
            return _matched(path, MatchReason.SIMPLE_MAPPING, score)

    logger.debug("route_unmatched paths=%s score=%s", len(paths), score)
    return RouteResult(path=None, reason=MatchReason.NO_MATCH, score=score)


def _matched(path: ResponsePath, reason: MatchReason, score: int) -> RouteResult:
    logger.debug("route_matched path_id=%s reason=%s score=%s", path.id, reason.value, score)
    return RouteResult(path=path, reason=reason, score=score)


__all__ = ["resolve_path"]
