from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

CRITERION_MAX_SCORE = 25
TOTAL_MAX_SCORE = 100


class Criterion(str, Enum):
    """Rubric dimensions, declared in evaluation order."""

    ROLE = "Role"
    CONTEXT = "Context"
    TASK = "Task"
    CONSTRAINTS = "Constraints"


class Grade(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    NEEDS_IMPROVEMENT = "needs-improvement"


class _Record(BaseModel):
    """
    Immutable record serialized with camelCase keys (totalScore, maxScore, ...).
    Snake_case attribute names are accepted on input as well.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CriteriaScore(_Record):
    name: Criterion
    score: int = Field(ge=0, le=CRITERION_MAX_SCORE)
    max_score: int = CRITERION_MAX_SCORE
    feedback: str
    found: bool

    @model_validator(mode="after")
    def _all_or_nothing(self) -> "CriteriaScore":
        if self.max_score != CRITERION_MAX_SCORE:
            raise ValueError(f"max_score must be {CRITERION_MAX_SCORE}")
        if self.score not in (0, self.max_score):
            raise ValueError(f"score must be 0 or {self.max_score} (got {self.score})")
        if self.found != (self.score == self.max_score):
            raise ValueError("found must be true exactly when score == max_score")
        return self


class EvaluationResult(_Record):
    total_score: int = Field(ge=0, le=TOTAL_MAX_SCORE)
    max_score: int = TOTAL_MAX_SCORE
    criteria: Tuple[CriteriaScore, ...]
    overall_feedback: str
    grade: Grade

    @model_validator(mode="after")
    def _consistent_totals(self) -> "EvaluationResult":
        if self.max_score != TOTAL_MAX_SCORE:
            raise ValueError(f"max_score must be {TOTAL_MAX_SCORE}")
        names = [c.name for c in self.criteria]
        if names != list(Criterion):
            raise ValueError(f"criteria must be {[c.value for c in Criterion]} in order")
        total = sum(c.score for c in self.criteria)
        if self.total_score != total:
            raise ValueError(f"total_score {self.total_score} != sum of criteria {total}")
        return self

    def failing(self) -> List[CriteriaScore]:
        """Criteria below their max score, in rubric order."""
        return [c for c in self.criteria if c.score < c.max_score]
