"""Score aggregation across scoreable survey questions."""

from __future__ import annotations

from typing import Iterable, Sequence
import logging

from survey_routing.models.survey import Question

logger = logging.getLogger(__name__)


def compute_score(selections: Iterable[str] | None, questions: Sequence[Question] | None) -> int:
    """Sum the points of every selected option on single/multi choice questions.

    Free-text and numeric questions contribute nothing, even if options were
    attached to them. Empty or absent inputs yield 0.
    """
    selected = set(selections or ())
    if not selected:
        return 0
    total = 0
    for question in questions or ():
        if not question.is_scoreable:
            continue
        for option in question.response_options:
            if option.id in selected:
                total += option.points or 0
    logger.debug("score_computed selections=%s total=%s", len(selected), total)
    return total


__all__ = ["compute_score"]
