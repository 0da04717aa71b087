"""Centralised construction of problem+json payloads for survey requests.

Route modules build error bodies through these helpers instead of
embedding codes and titles inline.
"""

from __future__ import annotations

from typing import Dict
import logging


logger = logging.getLogger(__name__)

SURVEY_LIMIT_EXCEEDED = "SURVEY_LIMIT_EXCEEDED"


def problem_survey_limit_exceeded(limit: str, actual: int, maximum: int) -> Dict[str, object]:
    """Return a 422 problem for a survey payload larger than a configured limit."""
    detail = f"{limit} has {actual} entries; the maximum is {maximum}"
    problem = {
        "title": "Survey Too Large",
        "status": 422,
        "detail": detail,
        "message": detail,
        "code": SURVEY_LIMIT_EXCEEDED,
        "limit": limit,
    }
    logger.info("error_handler.handle code=%s limit=%s actual=%s", SURVEY_LIMIT_EXCEEDED, limit, actual)
    return problem


__all__ = ["SURVEY_LIMIT_EXCEEDED", "problem_survey_limit_exceeded"]
