"""APIRouter registration for the survey routing service."""

from __future__ import annotations

from fastapi import APIRouter

from survey_routing.routes.surveys import router as surveys_router

api_router = APIRouter()
api_router.include_router(surveys_router, tags=["Surveys"])

__all__ = ["api_router"]
