"""Functional tests for survey data shapes at the boundary."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from survey_routing.models.question_type import QuestionType, normalize_question_type
from survey_routing.models.survey import Question, ResponsePath


BUILDER_PATH = {
    "id": "path_1",
    "label": "Path 1",
    "mappedOptions": ["q_1_opt_1"],
    "color": "#10b981",
    "scoreMin": None,
    "scoreMax": None,
    "rangeConditions": [],
    "advancedRules": {"enabled": False, "requireAll": [], "requireAny": [], "requireNone": []},
}


def test_builder_path_json_is_accepted():
    path = ResponsePath.model_validate(BUILDER_PATH)
    assert path.mapped_options == ["q_1_opt_1"]
    assert path.score_min is None and path.score_max is None
    assert path.advanced_rules is not None and path.advanced_rules.enabled is False


def test_null_lists_become_empty():
    path = ResponsePath.model_validate({"id": "p", "mappedOptions": None, "advancedRules": {"enabled": True, "requireAll": None}})
    assert path.mapped_options == []
    assert path.advanced_rules.require_all == []


def test_serialisation_uses_builder_keys():
    dumped = ResponsePath.model_validate(BUILDER_PATH).model_dump(by_alias=True)
    assert "mappedOptions" in dumped and "advancedRules" in dumped
    assert "requireAll" in dumped["advancedRules"]


@pytest.mark.parametrize(
    "tag,expected",
    [
        ("radio", QuestionType.SINGLE_CHOICE),
        ("checkbox", QuestionType.MULTI_CHOICE),
        ("text", QuestionType.FREE_TEXT),
        ("range", QuestionType.NUMERIC),
        ("single-choice", QuestionType.SINGLE_CHOICE),
        ("NUMERIC", QuestionType.NUMERIC),
    ],
)
def test_question_type_tags_normalise(tag, expected):
    assert normalize_question_type(tag) is expected


def test_unknown_question_type_is_rejected_at_boundary():
    with pytest.raises(ValidationError):
        Question.model_validate({"id": "q", "questionType": "slider"})


def test_option_points_default_to_zero():
    question = Question.model_validate(
        {"id": "q", "questionType": "radio", "responseOptions": [{"id": "a", "text": "A", "points": None}, {"id": "b"}]}
    )
    assert [o.points for o in question.response_options] == [0, 0]
    assert question.is_scoreable is True
