"""Pydantic models for routing results and HTTP request/response bodies."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from survey_routing.models.survey import Question, ResponsePath, SurveyModel


class MatchReason(str, Enum):
    ADVANCED_RULES = "advanced_rules"
    SCORE_THRESHOLD = "score_threshold"
    SIMPLE_MAPPING = "simple_mapping"
    NO_MATCH = "no_match"


class RouteResult(SurveyModel):
    path: Optional[ResponsePath] = None
    reason: MatchReason = MatchReason.NO_MATCH
    # None when resolution short-circuited before scoring
    score: Optional[int] = None

    @property
    def matched(self) -> bool:
        return self.path is not None


class PathEvaluation(SurveyModel):
    path: ResponsePath
    advanced_rules_match: Optional[bool] = None
    score_match: bool = False
    simple_mapping_match: bool = False


class SimulationResult(SurveyModel):
    score: int
    selected_path: Optional[ResponsePath] = None
    match_reason: MatchReason = MatchReason.NO_MATCH
    warnings: Dict[str, List[str]] = Field(default_factory=dict)
    paths_evaluated: List[PathEvaluation] = Field(default_factory=list)


class IssueSeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class SurveyIssue(SurveyModel):
    severity: IssueSeverity
    code: str
    message: str
    question_id: Optional[str] = None
    path_id: Optional[str] = None


class SurveyDefinition(SurveyModel):
    """Request body carrying a survey's questions and response paths."""

    questions: List[Question] = Field(default_factory=list)
    response_paths: List[ResponsePath] = Field(default_factory=list)


class SurveySubmission(SurveyDefinition):
    """Survey definition plus the option ids a respondent selected."""

    selections: List[str] = Field(default_factory=list)


class ScoreResult(SurveyModel):
    score: int


class ValidationReport(SurveyModel):
    warnings: Dict[str, List[str]] = Field(default_factory=dict)


class StructureReport(SurveyModel):
    issues: List[SurveyIssue] = Field(default_factory=list)


__all__ = [
    "MatchReason",
    "RouteResult",
    "PathEvaluation",
    "SimulationResult",
    "IssueSeverity",
    "SurveyIssue",
    "SurveyDefinition",
    "SurveySubmission",
    "ScoreResult",
    "ValidationReport",
    "StructureReport",
]
