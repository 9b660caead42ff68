from __future__ import annotations

from typing import List

from promptsim.core.eval_schemas import (
    CRITERION_MAX_SCORE,
    Criterion,
    CriteriaScore,
    EvaluationResult,
)
from promptsim.core.rubric import OVERALL_FEEDBACK, RULES, CriterionRule, grade_for


def word_count(text: str) -> int:
    return len((text or "").split())


def _passes(rule: CriterionRule, text: str, lowered: str) -> bool:
    if any(kw in lowered for kw in rule.keywords):
        return True
    return rule.min_words is not None and word_count(text) > rule.min_words


def score_criterion(criterion: Criterion, text: str) -> CriteriaScore:
    rule = RULES[criterion]
    found = _passes(rule, text or "", (text or "").lower())
    score = CRITERION_MAX_SCORE if found else 0
    return CriteriaScore(
        name=criterion,
        score=score,
        feedback=rule.passed if found else rule.failed,
        found=found,
    )


def evaluate(text: str) -> EvaluationResult:
    """
    Deterministic rubric scoring (no LLM).

    Each criterion passes when any of its keywords appears in the
    lower-cased text; Context also passes on length alone.
    Any string is accepted, including "" (scores 0 everywhere).
    """
    criteria: List[CriteriaScore] = [score_criterion(c, text) for c in Criterion]
    total_score = sum(c.score for c in criteria)
    grade = grade_for(total_score)

    return EvaluationResult(
        total_score=total_score,
        criteria=tuple(criteria),
        overall_feedback=OVERALL_FEEDBACK[grade],
        grade=grade,
    )
