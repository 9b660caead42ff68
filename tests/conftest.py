from __future__ import annotations

import pytest

from promptsim.config import SimConfig

FULL_PROMPT = (
    "Eres un experto en matemáticas. Necesito una explicación para mi curso. "
    "Explica el teorema de Pitágoras. Máximo 100 palabras."
)
# Role fails; Context, Task, Constraints pass -> 75
GOOD_PROMPT = "Necesito un resumen para mi curso. Explica la fotosíntesis. Máximo 100 palabras."
# Task + Constraints only -> 50
FAIR_PROMPT = "Explica la fotosíntesis. Máximo 100 palabras."
# Task only -> 25
WEAK_PROMPT = "Explica la fotosíntesis."


@pytest.fixture(autouse=True)
def _quiet_env(monkeypatch):
    """No JSON log lines and no simulated delay unless a test opts in."""
    monkeypatch.setenv("PROMPTSIM_LOG", "0")
    monkeypatch.setenv("PROMPTSIM_DELAY", "0")
    for name in ("PROMPTSIM_HISTORY_LIMIT", "PROMPTSIM_PREVIEW_CHARS", "PROMPTSIM_TEMPLATE_VERSION"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def cfg() -> SimConfig:
    return SimConfig(
        history_limit=5,
        preview_chars=50,
        delay_seconds=0.0,
        template_version="v1",
        log_enabled=False,
    )
