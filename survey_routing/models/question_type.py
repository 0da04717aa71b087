"""QuestionType enumeration for survey questions.

The campaign builder historically tagged questions with widget names
(`radio`, `checkbox`, `text`, `range`). Those tags are accepted at the
boundary and normalised to the canonical values below.
"""

from __future__ import annotations

from enum import Enum


class QuestionType(str, Enum):
    SINGLE_CHOICE = "single_choice"
    MULTI_CHOICE = "multi_choice"
    FREE_TEXT = "free_text"
    NUMERIC = "numeric"

    @property
    def is_scoreable(self) -> bool:
        return self in SCOREABLE_TYPES


SCOREABLE_TYPES = frozenset({QuestionType.SINGLE_CHOICE, QuestionType.MULTI_CHOICE})

LEGACY_ALIASES = {
    "radio": QuestionType.SINGLE_CHOICE,
    "checkbox": QuestionType.MULTI_CHOICE,
    "text": QuestionType.FREE_TEXT,
    "range": QuestionType.NUMERIC,
}


def normalize_question_type(value: object) -> QuestionType:
    """Return the canonical QuestionType for a canonical value or legacy tag.

    Raises ValueError for unknown tags.
    """
    if isinstance(value, QuestionType):
        return value
    token = str(value or "").strip().lower().replace("-", "_")
    if token in LEGACY_ALIASES:
        return LEGACY_ALIASES[token]
    try:
        return QuestionType(token)
    except ValueError:
        raise ValueError(f"unknown question type: {value!r}") from None


__all__ = ["QuestionType", "SCOREABLE_TYPES", "LEGACY_ALIASES", "normalize_question_type"]
