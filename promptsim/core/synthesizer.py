from __future__ import annotations

from typing import Dict

from promptsim.core.eval_schemas import EvaluationResult, Grade
from promptsim.core.prompt_loader import load_prompt
from promptsim.core.rubric import RULES

# Used by the "good" template when nothing failed
FALLBACK_ASPECT = "algunos aspectos"
ECHO_CHARS = 50


def _template_vars(text: str, evaluation: EvaluationResult) -> Dict[str, str]:
    failing = evaluation.failing()
    grade = evaluation.grade

    if grade is Grade.EXCELLENT:
        return {}

    if grade is Grade.GOOD:
        aspect = RULES[failing[0].name].label.lower() if failing else FALLBACK_ASPECT
        return {"aspect": aspect}

    if grade is Grade.FAIR:
        return {
            "preview": text[:ECHO_CHARS] + "...",
            "missing": "\n".join(f"- {c.feedback}" for c in failing),
        }

    return {
        "missing": "\n\n".join(
            f"{i}. {c.feedback}" for i, c in enumerate(failing, start=1)
        ),
    }


def synthesize(text: str, evaluation: EvaluationResult, *, version: str = "v1") -> str:
    """
    Simulated model reply for a scored prompt.

    One template per grade under prompts/responses/<grade>/; the better the
    grade, the more confident the copy. No model is called.
    """
    name = f"responses/{evaluation.grade.value}"
    rendered = load_prompt(name, version=version, **_template_vars(text or "", evaluation))
    return rendered.rstrip("\n")
