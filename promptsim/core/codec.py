import json
from typing import Any, Dict, Optional

from pydantic import ValidationError

from promptsim.core.eval_schemas import EvaluationResult
from promptsim.core.rubric import grade_for


class InvalidEvaluationJSON(ValueError):
    """Raised when a payload is not valid JSON."""


class EvaluationSchemaViolation(ValueError):
    """Raised when JSON is valid but is not a well-formed evaluation."""


def evaluation_to_dict(evaluation: EvaluationResult) -> Dict[str, Any]:
    return evaluation.model_dump(mode="json", by_alias=True)


def evaluation_to_json(evaluation: EvaluationResult, *, indent: Optional[int] = None) -> str:
    return json.dumps(evaluation_to_dict(evaluation), ensure_ascii=False, indent=indent)


def parse_evaluation(raw: str) -> EvaluationResult:
    """
    Parse a saved evaluation (camelCase JSON) back into an EvaluationResult.

    Besides the schema itself, the grade must agree with the total score.
    Raises InvalidEvaluationJSON or EvaluationSchemaViolation.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidEvaluationJSON("Evaluation payload is not valid JSON") from e

    if not isinstance(data, dict):
        raise EvaluationSchemaViolation("Evaluation payload must be a JSON object")

    try:
        result = EvaluationResult.model_validate(data)
    except ValidationError as e:
        raise EvaluationSchemaViolation("Evaluation JSON did not match schema") from e

    expected = grade_for(result.total_score)
    if result.grade is not expected:
        raise EvaluationSchemaViolation(
            f"grade '{result.grade.value}' does not match total score {result.total_score} "
            f"(expected '{expected.value}')"
        )
    return result
