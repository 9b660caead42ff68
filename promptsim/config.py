from __future__ import annotations

from dataclasses import dataclass
import os

from promptsim.core.prompt_loader import available_versions


@dataclass(frozen=True)
class SimConfig:
    # Session
    history_limit: int
    preview_chars: int

    # Presentation
    delay_seconds: float

    # Response templates
    template_version: str

    # Observability
    log_enabled: bool


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer (got {raw!r})") from e


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number (got {raw!r})") from e


def log_enabled_from_env() -> bool:
    return os.getenv("PROMPTSIM_LOG", "1").strip() != "0"


def load_config() -> SimConfig:
    history_limit = _int_env("PROMPTSIM_HISTORY_LIMIT", 5)
    preview_chars = _int_env("PROMPTSIM_PREVIEW_CHARS", 50)
    if history_limit < 1:
        raise ValueError(f"PROMPTSIM_HISTORY_LIMIT must be >= 1 (got {history_limit})")
    if preview_chars < 0:
        raise ValueError(f"PROMPTSIM_PREVIEW_CHARS must be >= 0 (got {preview_chars})")

    # Simulated "thinking" pause used by the interactive session only
    delay_seconds = max(0.0, _float_env("PROMPTSIM_DELAY", 1.5))

    template_version = os.getenv("PROMPTSIM_TEMPLATE_VERSION", "v1").strip() or "v1"
    versions = available_versions()
    if template_version not in versions:
        raise ValueError(
            f"PROMPTSIM_TEMPLATE_VERSION {template_version!r} has no templates "
            f"(available: {', '.join(versions) or 'none'})"
        )

    log_enabled = log_enabled_from_env()

    return SimConfig(
        history_limit=history_limit,
        preview_chars=preview_chars,
        delay_seconds=delay_seconds,
        template_version=template_version,
        log_enabled=log_enabled,
    )
