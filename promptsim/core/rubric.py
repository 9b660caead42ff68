"""
rubric.py

Static scoring tables for the four prompt criteria.

Everything the evaluator and the CLI need to know about wording lives here:
- keyword sets (lower-case substrings)
- pass / fail feedback per criterion
- grade bands and their narrative feedback
- display labels
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from promptsim.core.eval_schemas import Criterion, Grade


@dataclass(frozen=True)
class CriterionRule:
    label: str
    keywords: Tuple[str, ...]
    passed: str
    failed: str
    # Passes on length alone when the prompt has MORE than this many words
    min_words: Optional[int] = None


RULES: Dict[Criterion, CriterionRule] = {
    Criterion.ROLE: CriterionRule(
        label="Rol",
        keywords=(
            "eres", "actúa como", "rol", "experto", "especialista",
            "profesor", "tutor", "consultor", "asistente", "eres un",
        ),
        passed="✓ Buen trabajo definiendo un rol para la IA.",
        failed=(
            '✗ Intenta especificar un rol (ej: "Eres un experto en..."). '
            "Esto ayuda a la IA a adoptar la perspectiva correcta."
        ),
    ),
    Criterion.CONTEXT: CriterionRule(
        label="Contexto",
        keywords=(
            "contexto:", "para", "porque", "con el fin de", "objetivo",
            "necesito", "estoy", "proyecto", "trabajo", "curso",
        ),
        passed="✓ Proporcionas contexto útil para la IA.",
        failed=(
            "✗ Añade información de fondo relevante. "
            "Explica por qué necesitas esto o en qué situación lo usarás."
        ),
        min_words=15,
    ),
    Criterion.TASK: CriterionRule(
        label="Tarea",
        keywords=(
            "crea", "genera", "escribe", "explica", "describe", "analiza",
            "resume", "lista", "compara", "diseña", "desarrolla", "traduce",
            "corrige", "mejora", "sugiere", "proporciona",
        ),
        passed="✓ La tarea está claramente especificada.",
        failed=(
            "✗ Define claramente qué quieres que haga la IA "
            "usando verbos de acción (genera, explica, crea, etc.)."
        ),
    ),
    Criterion.CONSTRAINTS: CriterionRule(
        label="Restricciones",
        keywords=(
            "máximo", "mínimo", "no más de", "al menos", "debe", "no debe",
            "formato", "estilo", "tono", "longitud", "palabras", "párrafos",
            "incluye", "evita", "usa", "no uses", "requisitos", "restricciones",
        ),
        passed="✓ Incluyes restricciones específicas.",
        failed=(
            "✗ Añade restricciones o requisitos "
            "(ej: longitud, formato, tono, qué incluir/evitar)."
        ),
    ),
}

# Evaluated top-down; first floor the total reaches wins
GRADE_BANDS: Tuple[Tuple[int, Grade], ...] = (
    (90, Grade.EXCELLENT),
    (70, Grade.GOOD),
    (50, Grade.FAIR),
    (0, Grade.NEEDS_IMPROVEMENT),
)

OVERALL_FEEDBACK: Dict[Grade, str] = {
    Grade.EXCELLENT: (
        "¡Excelente prompt! Has incluido todos los elementos clave. "
        "Este tipo de prompt generará respuestas de alta calidad y muy específicas a tus necesidades."
    ),
    Grade.GOOD: (
        "Buen prompt. Has cubierto la mayoría de los elementos importantes. "
        "Considera agregar más detalles en los criterios faltantes para obtener respuestas aún más precisas."
    ),
    Grade.FAIR: (
        "Prompt regular. Hay elementos importantes que faltan. "
        "Intenta ser más específico sobre el rol, contexto o restricciones "
        "para mejorar la calidad de las respuestas."
    ),
    Grade.NEEDS_IMPROVEMENT: (
        "El prompt necesita mejoras significativas. Un buen prompt debe incluir: "
        "un rol claro, contexto relevante, una tarea específica y restricciones útiles. "
        "Revisa los criterios faltantes."
    ),
}

GRADE_LABELS: Dict[Grade, str] = {
    Grade.EXCELLENT: "Excelente",
    Grade.GOOD: "Bueno",
    Grade.FAIR: "Regular",
    Grade.NEEDS_IMPROVEMENT: "Necesita Mejorar",
}


def grade_for(total_score: int) -> Grade:
    for floor, grade in GRADE_BANDS:
        if total_score >= floor:
            return grade
    return Grade.NEEDS_IMPROVEMENT
