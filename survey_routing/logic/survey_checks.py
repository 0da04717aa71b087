"""Survey-level structure checks.

Complements path validation with content issues on the survey as a whole:
missing questions, prompts or options, missing paths, and path rules that
reference option ids no question owns. Dangling references stay inert for
routing; they are only reported here.
"""

from __future__ import annotations

from typing import List, Sequence
import logging

from survey_routing.models.response_types import IssueSeverity, SurveyIssue
from survey_routing.models.survey import Question, ResponsePath

logger = logging.getLogger(__name__)


def _path_references(path: ResponsePath) -> List[str]:
    refs: List[str] = list(path.mapped_options)
    rules = path.advanced_rules
    if rules is not None:
        refs.extend(rules.require_all)
        refs.extend(rules.require_any)
        refs.extend(rules.require_none)
    return refs


def check_survey_structure(
    questions: Sequence[Question] | None,
    paths: Sequence[ResponsePath] | None,
) -> List[SurveyIssue]:
    questions = list(questions or ())
    paths = list(paths or ())
    issues: List[SurveyIssue] = []

    if not questions:
        issues.append(SurveyIssue(severity=IssueSeverity.ERROR, code="no_questions", message="Survey has no questions"))

    for idx, question in enumerate(questions, start=1):
        if not question.text.strip():
            issues.append(
                SurveyIssue(
                    severity=IssueSeverity.WARNING,
                    code="question_missing_text",
                    message=f"Question {idx} has no text",
                    question_id=question.id,
                )
            )
        if question.is_scoreable and not question.response_options:
            issues.append(
                SurveyIssue(
                    severity=IssueSeverity.ERROR,
                    code="question_missing_options",
                    message=f"Question {idx} has no response options",
                    question_id=question.id,
                )
            )

    if not paths:
        issues.append(
            SurveyIssue(
                severity=IssueSeverity.ERROR,
                code="no_response_paths",
                message="Survey has no response paths defined",
            )
        )

    known = {option.id for question in questions for option in question.response_options}
    for path in paths:
        dangling: List[str] = []
        for option_id in _path_references(path):
            if option_id not in known and option_id not in dangling:
                dangling.append(option_id)
        if dangling:
            issues.append(
                SurveyIssue(
                    severity=IssueSeverity.WARNING,
                    code="dangling_option_reference",
                    message=f'Path "{path.label or path.id}" references unknown options: {", ".join(dangling)}',
                    path_id=path.id,
                )
            )

    logger.debug("survey_structure_checked questions=%s paths=%s issues=%s", len(questions), len(paths), len(issues))
    return issues


__all__ = ["check_survey_structure"]
