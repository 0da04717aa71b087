"""Tier predicates for survey path routing.

Centralizes the three independent checks used by the resolver, the
validator and the simulator so the tier semantics cannot drift:

- advanced AND/OR/NOT option rules (opt-in per path),
- numeric score thresholds (active when at least one bound is set),
- simple option-to-path mapping.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable
import logging

from survey_routing.models.survey import AdvancedRules, ResponsePath

logger = logging.getLogger(__name__)


def _as_set(selections: Iterable[str] | None) -> AbstractSet[str]:
    if isinstance(selections, (set, frozenset)):
        return selections
    return frozenset(selections or ())


def has_score_threshold(path: ResponsePath) -> bool:
    return path.score_min is not None or path.score_max is not None


def advanced_rules_enabled(path: ResponsePath) -> bool:
    return bool(path.advanced_rules is not None and path.advanced_rules.enabled)


def has_active_advanced_rules(path: ResponsePath) -> bool:
    """Return True when advanced rules are enabled and at least one list is non-empty."""
    return advanced_rules_enabled(path) and not path.advanced_rules.is_empty  # type: ignore[union-attr]


def matches_advanced_rules(selections: Iterable[str] | None, advanced_rules: AdvancedRules | None) -> bool:
    """Return True if the selections satisfy an enabled advanced rule set.

    Disabled or absent rules never match. An enabled rule set whose three
    lists are all empty matches any selection set.
    """
    if advanced_rules is None or not advanced_rules.enabled:
        return False
    selected = _as_set(selections)
    if advanced_rules.require_all and not all(oid in selected for oid in advanced_rules.require_all):
        return False
    if advanced_rules.require_any and not any(oid in selected for oid in advanced_rules.require_any):
        return False
    if advanced_rules.require_none and any(oid in selected for oid in advanced_rules.require_none):
        return False
    return True


def matches_score_threshold(score: int | float, path: ResponsePath) -> bool:
    """Return True if score lies within the path's inclusive [min, max] range.

    A path with neither bound set does not use score routing and never
    matches; an unset bound imposes no constraint on that side.
    """
    if not has_score_threshold(path):
        return False
    if path.score_min is not None and score < path.score_min:
        return False
    if path.score_max is not None and score > path.score_max:
        return False
    return True


def matches_simple_mapping(selections: Iterable[str] | None, path: ResponsePath) -> bool:
    """Return True if any selected option is mapped to the path."""
    if not path.mapped_options:
        return False
    selected = _as_set(selections)
    return any(oid in selected for oid in path.mapped_options)


__all__ = [
    "has_score_threshold",
    "advanced_rules_enabled",
    "has_active_advanced_rules",
    "matches_advanced_rules",
    "matches_score_threshold",
    "matches_simple_mapping",
]
