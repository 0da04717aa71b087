from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from survey_routing.config import RoutingConfig, load_config
from survey_routing.http.problem import (
    SurveyProblem,
    handle_http_exception,
    handle_request_validation_error,
    handle_survey_problem,
    handle_unexpected_error,
)
from survey_routing.http.request_id import RequestIdMiddleware
from survey_routing.logging_setup import configure_logging
from survey_routing.routes import api_router

logger = logging.getLogger(__name__)


def create_app(config: Optional[RoutingConfig] = None) -> FastAPI:
    """Build the FastAPI application.

    `config` defaults to `load_config()`; tests pass an explicit instance.
    """
    cfg = config if config is not None else load_config()
    # Configure global logging before app instantiation so all modules emit
    configure_logging(engine_debug=cfg.engine_debug)

    app = FastAPI(title="Survey Routing Service")
    app.state.config = cfg
    app.add_exception_handler(SurveyProblem, handle_survey_problem)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
    app.add_middleware(RequestIdMiddleware)

    @app.get("/health", summary="Liveness probe")
    def health() -> dict:
        return {"status": "ok"}

    app.include_router(api_router, prefix=cfg.api_prefix)
    logger.info(
        "app_created api_prefix=%s max_questions=%s max_paths=%s max_selections=%s",
        cfg.api_prefix or "/",
        cfg.limits.max_questions,
        cfg.limits.max_paths,
        cfg.limits.max_selections,
    )
    return app


__all__ = ["create_app"]
