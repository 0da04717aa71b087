"""Configuration utilities for the survey routing service.

This module loads application configuration with the following rules:
- Primary source: `survey_routing_config.json` at the project root.
- Overrides: environment variables, then optional text files under `config/`.
- Validation: Pydantic models enforce value constraints.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator


CONFIG_DIR = Path("config")
ROOT_CONFIG = Path("survey_routing_config.json")
logger = logging.getLogger(__name__)


def _read_config_file(rel_path: str) -> Optional[str]:
    path = CONFIG_DIR / rel_path
    try:
        if path.exists():
            return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read override %s: %s", path, e)
        return None
    return None


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(key, default)


class LimitsConfig(BaseModel):
    max_questions: int = Field(default=200, gt=0)
    max_paths: int = Field(default=100, gt=0)
    max_selections: int = Field(default=1000, gt=0)


class RoutingConfig(BaseModel):
    api_prefix: str = "/api/v1"
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
    log_decisions: bool = True
    engine_debug: bool = False

    @field_validator("api_prefix")
    @classmethod
    def prefix_must_be_rooted(cls, v: str) -> str:
        v = (v or "").strip().rstrip("/")
        if v and not v.startswith("/"):
            raise ValueError("api_prefix must be empty or start with '/'")
        return v


def _read_json_file(path: Path) -> dict:
    try:
        if path.exists():
            return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("Failed to read JSON config %s: %s", path, e)
    return {}


def _truthy(text: object) -> bool:
    return str(text).strip().lower() in {"1", "true", "yes", "on"}


def load_config() -> RoutingConfig:
    """Load configuration with validation.

    Precedence (highest first):
    1) Environment variables
    2) Text files in `config/` (optional)
    3) survey_routing_config.json at project root
    4) Defaults
    """

    base = _read_json_file(ROOT_CONFIG)

    def _base(path: str, default: Optional[str] = None) -> Optional[str]:
        cur: object = base
        for key in path.split("."):
            if not isinstance(cur, dict) or key not in cur:
                return default
            cur = cur[key]
        return str(cur) if cur is not None else default

    api_prefix = _env("SURVEY_ROUTING_API_PREFIX") or _read_config_file("api.prefix") or _base("api_prefix", "/api/v1")
    max_questions = _env("SURVEY_ROUTING_MAX_QUESTIONS") or _read_config_file("limits.max_questions") or _base("limits.max_questions", "200")
    max_paths = _env("SURVEY_ROUTING_MAX_PATHS") or _read_config_file("limits.max_paths") or _base("limits.max_paths", "100")
    max_selections = _env("SURVEY_ROUTING_MAX_SELECTIONS") or _read_config_file("limits.max_selections") or _base("limits.max_selections", "1000")
    log_decisions = _env("SURVEY_ROUTING_LOG_DECISIONS") or _read_config_file("log.decisions") or _base("log_decisions", "true")
    engine_debug = _env("SURVEY_ROUTING_ENGINE_DEBUG") or _read_config_file("log.engine_debug") or _base("engine_debug", "false")

    try:
        return RoutingConfig(
            api_prefix=str(api_prefix),
            limits=LimitsConfig(
                max_questions=str(max_questions).strip(),
                max_paths=str(max_paths).strip(),
                max_selections=str(max_selections).strip(),
            ),
            log_decisions=_truthy(log_decisions),
            engine_debug=_truthy(engine_debug),
        )
    except PydanticValidationError as e:
        logger.error("Invalid application configuration: %s", e)
        raise


__all__ = [
    "RoutingConfig",
    "LimitsConfig",
    "load_config",
]
