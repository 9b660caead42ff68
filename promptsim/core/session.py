from __future__ import annotations

from typing import Iterable, Optional, Tuple

from promptsim.config import SimConfig, load_config
from promptsim.core.evaluator import evaluate
from promptsim.core.prompt_loader import load_prompt
from promptsim.core.session_schemas import HistoryEntry, SessionState
from promptsim.core.synthesizer import synthesize
from promptsim.infra.ids import new_attempt_id
from promptsim.infra.logging import log_event

EMPTY_PROMPT_MESSAGE = "Por favor, escribe un prompt antes de generar"


class EmptyPromptError(ValueError):
    """Raised when a blank or whitespace-only prompt is submitted."""


def new_session() -> SessionState:
    return SessionState()


def preview(text: str, limit: int) -> str:
    return text[:limit] + "..."


def append_history(
    history: Iterable[HistoryEntry], entry: HistoryEntry, *, limit: int
) -> Tuple[HistoryEntry, ...]:
    if limit < 1:
        return ()
    return (tuple(history) + (entry,))[-limit:]


def edit(state: SessionState, text: str) -> SessionState:
    return state.model_copy(update={"prompt": text})


def submit(
    state: SessionState, text: Optional[str] = None, *, cfg: Optional[SimConfig] = None
) -> SessionState:
    """
    Evaluate a prompt, synthesize the simulated reply and record the attempt.

    Uses `text` when given, otherwise the prompt already held in `state`.
    Raises EmptyPromptError for blank input; `state` is left as it was.
    """
    cfg = cfg or load_config()
    prompt = state.prompt if text is None else text

    if not prompt.strip():
        log_event("prompt_rejected", reason="blank", chars=len(prompt))
        raise EmptyPromptError(EMPTY_PROMPT_MESSAGE)

    attempt_id = new_attempt_id()

    evaluation = evaluate(prompt)
    log_event(
        "prompt_evaluated",
        attempt_id=attempt_id,
        total_score=evaluation.total_score,
        grade=evaluation.grade.value,
        chars=len(prompt),
    )

    response = synthesize(prompt, evaluation, version=cfg.template_version)
    log_event(
        "response_synthesized",
        attempt_id=attempt_id,
        template_version=cfg.template_version,
        chars=len(response),
    )

    entry = HistoryEntry(
        attempt_id=attempt_id,
        prompt=preview(prompt, cfg.preview_chars),
        score=evaluation.total_score,
    )

    return SessionState(
        prompt=prompt,
        evaluation=evaluation,
        response=response,
        history=append_history(state.history, entry, limit=cfg.history_limit),
    )


def reset(state: SessionState) -> SessionState:
    """Clear the form and the last result; past attempts stay in history."""
    log_event("session_reset", history_size=len(state.history))
    return SessionState(history=state.history)


def example_prompt(*, version: str = "v1") -> str:
    return load_prompt("examples", version=version).rstrip("\n")


def load_example(state: SessionState, *, cfg: Optional[SimConfig] = None) -> SessionState:
    cfg = cfg or load_config()
    text = example_prompt(version=cfg.template_version)
    log_event("example_loaded", chars=len(text))
    return edit(state, text)
