"""Problem+JSON utilities and global exception handlers.

Defines the RFC7807 media type and handler callables that produce
application/problem+json responses.
"""

from __future__ import annotations

import logging
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

PROBLEM_MEDIA_TYPE = "application/problem+json"

logger = logging.getLogger(__name__)


class SurveyProblem(Exception):
    """Raised by route handlers to return a prepared problem+json body."""

    def __init__(self, problem: dict) -> None:
        super().__init__(problem.get("detail") or problem.get("title"))
        self.problem = problem

    @property
    def status_code(self) -> int:
        return int(self.problem.get("status", 400) or 400)


async def handle_survey_problem(request: Request, exc: SurveyProblem) -> JSONResponse:  # noqa: D401
    return JSONResponse(exc.problem, status_code=exc.status_code, media_type=PROBLEM_MEDIA_TYPE)


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:  # noqa: D401
    status_code = int(getattr(exc, "status_code", 500) or 500)
    if isinstance(getattr(exc, "detail", None), dict):
        detail = exc.detail
    else:
        detail = {
            "title": "Error",
            "status": status_code,
            "detail": str(getattr(exc, "detail", "")),
        }
    headers = getattr(exc, "headers", None)
    return JSONResponse(
        detail,
        status_code=status_code,
        media_type=PROBLEM_MEDIA_TYPE,
        headers=dict(headers) if isinstance(headers, dict) else None,
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:  # noqa: D401
    errors = jsonable_encoder(list(exc.errors()))
    logger.info(
        "validation_422 route=%s method=%s errors_cnt=%s",
        request.url.path,
        request.method,
        len(errors),
    )
    problem = {
        "title": "Invalid Request",
        "status": 422,
        "detail": "Request validation failed",
        "errors": errors,
    }
    return JSONResponse(problem, status_code=422, media_type=PROBLEM_MEDIA_TYPE)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:  # noqa: D401
    logger.error("unexpected_error route=%s", request.url.path, exc_info=exc)
    return JSONResponse({"title": "Internal Server Error", "status": 500}, status_code=500, media_type=PROBLEM_MEDIA_TYPE)


__all__ = [
    "PROBLEM_MEDIA_TYPE",
    "SurveyProblem",
    "handle_survey_problem",
    "handle_http_exception",
    "handle_request_validation_error",
    "handle_unexpected_error",
]
