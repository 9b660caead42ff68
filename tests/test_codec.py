"""
Tests for the camelCase JSON encoding of evaluations.
"""

from __future__ import annotations

import json

import pytest

from promptsim.core.codec import (
    EvaluationSchemaViolation,
    InvalidEvaluationJSON,
    evaluation_to_dict,
    evaluation_to_json,
    parse_evaluation,
)
from promptsim.core.evaluator import evaluate

from conftest import GOOD_PROMPT


@pytest.fixture()
def payload() -> dict:
    return evaluation_to_dict(evaluate(GOOD_PROMPT))


def test_encoding_uses_camel_case_field_names(payload):
    assert set(payload) == {"totalScore", "maxScore", "criteria", "overallFeedback", "grade"}
    assert set(payload["criteria"][0]) == {"name", "score", "maxScore", "feedback", "found"}
    assert payload["grade"] == "good"
    assert [c["name"] for c in payload["criteria"]] == ["Role", "Context", "Task", "Constraints"]


def test_parse_restores_an_equal_evaluation():
    evaluation = evaluate(GOOD_PROMPT)
    assert parse_evaluation(evaluation_to_json(evaluation)) == evaluation


def test_json_keeps_non_ascii_text():
    raw = evaluation_to_json(evaluate("hola"))
    assert "Añade" in raw


def test_snake_case_input_is_accepted(payload):
    payload["total_score"] = payload.pop("totalScore")
    assert parse_evaluation(json.dumps(payload)).total_score == 75


def test_not_json_raises():
    with pytest.raises(InvalidEvaluationJSON):
        parse_evaluation("{not json")


def test_non_object_raises():
    with pytest.raises(EvaluationSchemaViolation):
        parse_evaluation("[1, 2, 3]")


def test_partial_credit_is_rejected(payload):
    payload["criteria"][0]["score"] = 10
    with pytest.raises(EvaluationSchemaViolation):
        parse_evaluation(json.dumps(payload))


def test_found_flag_must_agree_with_score(payload):
    payload["criteria"][0]["found"] = True
    with pytest.raises(EvaluationSchemaViolation):
        parse_evaluation(json.dumps(payload))


def test_total_must_match_criteria(payload):
    payload["totalScore"] = 100
    with pytest.raises(EvaluationSchemaViolation):
        parse_evaluation(json.dumps(payload))


def test_criteria_order_is_enforced(payload):
    payload["criteria"].reverse()
    with pytest.raises(EvaluationSchemaViolation):
        parse_evaluation(json.dumps(payload))


def test_grade_must_match_total(payload):
    payload["grade"] = "excellent"
    with pytest.raises(EvaluationSchemaViolation, match="does not match total score 75"):
        parse_evaluation(json.dumps(payload))
