"""Behave environment hooks for survey routing integration scenarios.

Scenarios drive the FastAPI application in-process through TestClient, so
no server or database is required. Set `TEST_API_PREFIX` to exercise a
non-default route prefix.
"""

from __future__ import annotations

import os
from typing import Any

from fastapi.testclient import TestClient

from survey_routing.config import RoutingConfig
from survey_routing.main import create_app


def before_all(context: Any) -> None:
    context.api_prefix = os.getenv("TEST_API_PREFIX", "/api/v1").rstrip("/")
    context.client = TestClient(create_app(RoutingConfig(api_prefix=context.api_prefix)))


def before_scenario(context: Any, scenario: Any) -> None:
    context.questions = []
    context.paths = []
    context.response = None


def after_all(context: Any) -> None:
    client = getattr(context, "client", None)
    if client is not None:
        client.close()
