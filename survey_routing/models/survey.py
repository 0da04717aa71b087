"""Pydantic models for survey definitions consumed by the routing engine.

Field names are snake_case; the builder's camelCase JSON keys
(`questionType`, `responseOptions`, `scoreMin`, `mappedOptions`,
`advancedRules`, `requireAll`, ...) are accepted as aliases and used when
serialising responses.
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from survey_routing.models.question_type import QuestionType, normalize_question_type


Bound = Union[int, float]


class SurveyModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _none_to_list(value: object) -> object:
    return [] if value is None else value


class ResponseOption(SurveyModel):
    id: str
    text: str = ""
    points: int = 0
    allow_text: bool = False

    @field_validator("points", mode="before")
    @classmethod
    def points_default_zero(cls, v: object) -> object:
        return 0 if v is None else v


class Question(SurveyModel):
    id: str
    text: str = ""
    question_type: QuestionType = QuestionType.SINGLE_CHOICE
    response_options: List[ResponseOption] = Field(default_factory=list)

    @field_validator("question_type", mode="before")
    @classmethod
    def normalize_type(cls, v: object) -> QuestionType:
        return normalize_question_type(v)

    @field_validator("response_options", mode="before")
    @classmethod
    def options_default_empty(cls, v: object) -> object:
        return _none_to_list(v)

    @property
    def is_scoreable(self) -> bool:
        return self.question_type.is_scoreable


class RangeCondition(SurveyModel):
    """Numeric-question routing affordance; carried but not used for routing."""

    question_id: str
    min: Optional[Bound] = None
    max: Optional[Bound] = None


class AdvancedRules(SurveyModel):
    enabled: bool = False
    require_all: List[str] = Field(default_factory=list)
    require_any: List[str] = Field(default_factory=list)
    require_none: List[str] = Field(default_factory=list)

    @field_validator("require_all", "require_any", "require_none", mode="before")
    @classmethod
    def lists_default_empty(cls, v: object) -> object:
        return _none_to_list(v)

    @property
    def is_empty(self) -> bool:
        return not (self.require_all or self.require_any or self.require_none)


class ResponsePath(SurveyModel):
    id: str
    label: str = ""
    color: Optional[str] = None
    score_min: Optional[Bound] = None
    score_max: Optional[Bound] = None
    range_conditions: List[RangeCondition] = Field(default_factory=list)
    mapped_options: List[str] = Field(default_factory=list)
    advanced_rules: Optional[AdvancedRules] = None

    @field_validator("range_conditions", "mapped_options", mode="before")
    @classmethod
    def lists_default_empty(cls, v: object) -> object:
        return _none_to_list(v)


__all__ = [
    "SurveyModel",
    "ResponseOption",
    "Question",
    "RangeCondition",
    "AdvancedRules",
    "ResponsePath",
]
