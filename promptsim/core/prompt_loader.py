from pathlib import Path
from string import Template
from typing import List

PROMPT_DIR = Path(__file__).parent.parent / "prompts"


class TemplateSubstitutionError(RuntimeError):
    """Raised when a template references a variable the caller did not supply."""


class TemplateNotFoundError(ValueError):
    """Raised when no template file exists for a name/version pair."""


def _template_dirs() -> List[Path]:
    """Every directory holding versioned templates (responses/<grade>, examples)."""
    return sorted({p.parent for p in PROMPT_DIR.rglob("*.txt")})


def available_versions() -> List[str]:
    """Versions shipped for every template, e.g. ["v1"]."""
    dirs = set(_template_dirs())
    if not dirs:
        return []
    per_dir = [{p.stem for p in d.glob("*.txt")} for d in dirs]
    return sorted(set.intersection(*per_dir))


def load_prompt(name: str, *, version: str = "v1", **kwargs) -> str:
    """
    Reason:
    - Response copy must be versioned and editable without touching code.
    Benefit:
    - $placeholders only; user text substituted in is never re-parsed.
    """
    prompt_path = PROMPT_DIR / name / f"{version}.txt"
    if not prompt_path.is_file():
        raise TemplateNotFoundError(
            f"No template '{name}' for version '{version}' "
            f"(available: {', '.join(available_versions()) or 'none'})"
        )

    with open(prompt_path, "r", encoding="utf-8") as f:
        template = Template(f.read())

    try:
        return template.substitute(**kwargs)
    except KeyError as e:
        raise TemplateSubstitutionError(
            f"Template substitution failed for '{name}'. Missing variable: {e}"
        ) from e
