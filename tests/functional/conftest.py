from __future__ import annotations

"""Functional test bootstrap for the survey routing service.

Builds an in-process FastAPI TestClient from an explicit configuration so
no config files or environment variables leak into the suite. Survey
builders live in `survey_factories`.
"""

import pytest
from fastapi.testclient import TestClient

from survey_routing.config import LimitsConfig, RoutingConfig
from survey_routing.main import create_app


@pytest.fixture
def routing_config() -> RoutingConfig:
    return RoutingConfig(api_prefix="/api/v1", limits=LimitsConfig(max_questions=5, max_paths=5, max_selections=10))


@pytest.fixture
def client(routing_config: RoutingConfig) -> TestClient:
    return TestClient(create_app(routing_config))
