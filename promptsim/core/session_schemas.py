from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from promptsim.core.eval_schemas import TOTAL_MAX_SCORE, EvaluationResult


class HistoryEntry(BaseModel):
    """One past attempt, as shown in the history list."""

    model_config = ConfigDict(frozen=True)

    attempt_id: str
    prompt: str = Field(description="Truncated preview of the submitted prompt")
    score: int = Field(ge=0, le=TOTAL_MAX_SCORE)


class SessionState(BaseModel):
    """
    Everything the simulator screen holds between interactions.

    Reason:
    - The core functions stay pure; state lives here and is passed explicitly.
    Benefit:
    - Each transition returns a new state, so any step can be replayed or tested alone.
    """

    model_config = ConfigDict(frozen=True)

    prompt: str = ""
    evaluation: Optional[EvaluationResult] = None
    response: Optional[str] = None

    # Oldest first, capped at SimConfig.history_limit
    history: Tuple[HistoryEntry, ...] = ()
