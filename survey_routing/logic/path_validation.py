"""Static validation of response path configurations.

Produces advisory warning strings only. Routing never depends on these
results; a path with warnings is still evaluated normally by the resolver.
"""

from __future__ import annotations

from typing import Dict, List, Sequence
import logging

from survey_routing.logic.path_rules import advanced_rules_enabled, has_active_advanced_rules, has_score_threshold
from survey_routing.models.question_type import QuestionType
from survey_routing.models.survey import Question, ResponsePath

logger = logging.getLogger(__name__)


def _display_name(path: ResponsePath) -> str:
    return path.label or path.id


def _single_choice_owners(questions: Sequence[Question] | None) -> Dict[str, str]:
    """Map option id -> owning question id for single-choice questions only."""
    owners: Dict[str, str] = {}
    for question in questions or ():
        if question.question_type is not QuestionType.SINGLE_CHOICE:
            continue
        for option in question.response_options:
            owners[option.id] = question.id
    return owners


def validate_path_configuration(path: ResponsePath, questions: Sequence[Question] | None) -> List[str]:
    """Return the ordered list of warnings for a single path."""
    name = _display_name(path)
    warnings: List[str] = []

    scored = has_score_threshold(path)
    advanced = has_active_advanced_rules(path)
    mapped = bool(path.mapped_options)

    if not scored and not advanced and not mapped:
        warnings.append(f'Path "{name}" has no routing logic configured')

    if advanced and mapped:
        warnings.append(
            f'Path "{name}" has both advanced rules and simple mapping - '
            "advanced rules will take priority and the mapping will never be used"
        )

    if path.score_min is not None and path.score_max is not None and path.score_min > path.score_max:
        warnings.append(f'Path "{name}" has invalid score range (min {path.score_min} > max {path.score_max})')

    rules = path.advanced_rules
    if advanced_rules_enabled(path) and rules is not None and len(rules.require_all) > 1:
        owners = _single_choice_owners(questions)
        seen: set[str] = set()
        flagged: set[str] = set()
        for option_id in rules.require_all:
            question_id = owners.get(option_id)
            if question_id is None:
                continue
            if question_id in seen and question_id not in flagged:
                flagged.add(question_id)
                warnings.append(
                    f'Path "{name}" requires multiple options from the same single-choice question '
                    f'"{question_id}" (impossible: the AND condition can never be satisfied)'
                )
            seen.add(question_id)

    return warnings


def validate_all_paths(paths: Sequence[ResponsePath] | None, questions: Sequence[Question] | None) -> Dict[str, List[str]]:
    """Return a mapping of path id to warnings, omitting paths without warnings."""
    results: Dict[str, List[str]] = {}
    for path in paths or ():
        warnings = validate_path_configuration(path, questions)
        if warnings:
            # Duplicate path ids share one entry
            results.setdefault(path.id, []).extend(warnings)
    if results:
        logger.debug("path_validation_warnings paths=%s", sorted(results))
    return results


__all__ = ["validate_path_configuration", "validate_all_paths"]
