"""Data shapes consumed and produced by the survey routing engine."""

from __future__ import annotations

from survey_routing.models.question_type import QuestionType
from survey_routing.models.response_types import MatchReason, RouteResult, SimulationResult, SurveyIssue
from survey_routing.models.survey import AdvancedRules, Question, RangeCondition, ResponseOption, ResponsePath

__all__ = [
    "QuestionType",
    "ResponseOption",
    "Question",
    "RangeCondition",
    "AdvancedRules",
    "ResponsePath",
    "MatchReason",
    "RouteResult",
    "SimulationResult",
    "SurveyIssue",
]
