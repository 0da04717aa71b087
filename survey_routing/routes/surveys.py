"""Survey routing endpoints.

Implements:
- POST /surveys/score      total score of the selected options
- POST /surveys/resolve    path the respondent is routed to, with reason
- POST /surveys/validate   advisory warnings per path
- POST /surveys/simulate   score, route, warnings and per-path breakdown
- POST /surveys/check      survey-level structure issues

Handlers only enforce request limits and delegate to `survey_routing.logic`.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from survey_routing.config import RoutingConfig
from survey_routing.http.problem import SurveyProblem
from survey_routing.logic.path_resolver import resolve_path
from survey_routing.logic.path_validation import validate_all_paths
from survey_routing.logic.problem_factory import problem_survey_limit_exceeded
from survey_routing.logic.scoring import compute_score
from survey_routing.logic.simulation import simulate_survey
from survey_routing.logic.survey_checks import check_survey_structure
from survey_routing.models.response_types import (
    RouteResult,
    ScoreResult,
    SimulationResult,
    StructureReport,
    SurveyDefinition,
    SurveySubmission,
    ValidationReport,
)

router = APIRouter(prefix="/surveys")
logger = logging.getLogger(__name__)


def _config(request: Request) -> RoutingConfig:
    cfg = getattr(request.app.state, "config", None)
    return cfg if isinstance(cfg, RoutingConfig) else RoutingConfig()


def _enforce_limits(cfg: RoutingConfig, survey: SurveyDefinition) -> None:
    checks = [
        ("questions", len(survey.questions), cfg.limits.max_questions),
        ("responsePaths", len(survey.response_paths), cfg.limits.max_paths),
    ]
    if isinstance(survey, SurveySubmission):
        checks.append(("selections", len(survey.selections), cfg.limits.max_selections))
    for name, actual, maximum in checks:
        if actual > maximum:
            raise SurveyProblem(problem_survey_limit_exceeded(name, actual, maximum))


@router.post("/score", response_model=ScoreResult, summary="Compute the score of selected options")
def score_survey(payload: SurveySubmission, request: Request) -> ScoreResult:
    _enforce_limits(_config(request), payload)
    return ScoreResult(score=compute_score(payload.selections, payload.questions))


@router.post("/resolve", response_model=RouteResult, summary="Resolve the response path for selections")
def resolve_survey(payload: SurveySubmission, request: Request) -> RouteResult:
    cfg = _config(request)
    _enforce_limits(cfg, payload)
    result = resolve_path(payload.selections, payload.response_paths, payload.questions)
    if cfg.log_decisions:
        logger.info(
            "route_resolved paths=%s selections=%s reason=%s path_id=%s score=%s",
            len(payload.response_paths),
            len(payload.selections),
            result.reason.value,
            result.path.id if result.path is not None else None,
            result.score,
        )
    return result


@router.post("/validate", response_model=ValidationReport, summary="Validate response path configuration")
def validate_survey(payload: SurveyDefinition, request: Request) -> ValidationReport:
    _enforce_limits(_config(request), payload)
    return ValidationReport(warnings=validate_all_paths(payload.response_paths, payload.questions))


@router.post("/simulate", response_model=SimulationResult, summary="Simulate survey completion")
def simulate(payload: SurveySubmission, request: Request) -> SimulationResult:
    cfg = _config(request)
    _enforce_limits(cfg, payload)
    result = simulate_survey(payload.selections, payload.questions, payload.response_paths)
    if cfg.log_decisions:
        logger.info(
            "survey_simulated reason=%s path_id=%s score=%s warned_paths=%s",
            result.match_reason.value,
            result.selected_path.id if result.selected_path is not None else None,
            result.score,
            len(result.warnings),
        )
    return result


@router.post("/check", response_model=StructureReport, summary="Check survey structure")
def check_survey(payload: SurveyDefinition, request: Request) -> StructureReport:
    _enforce_limits(_config(request), payload)
    return StructureReport(issues=check_survey_structure(payload.questions, payload.response_paths))


__all__ = ["router", "score_survey", "resolve_survey", "validate_survey", "simulate", "check_survey"]
