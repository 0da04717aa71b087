"""Survey response-routing service package.

The routing engine (scoring, tier predicates, path resolution, path
validation) lives in `survey_routing/logic/` and is pure and stateless.
A small FastAPI application factory exposes it over JSON; route handlers
live in `survey_routing/routes/`.
"""

from __future__ import annotations

from survey_routing.main import create_app

__all__ = ["create_app"]
