import argparse
import sys
import time
from pathlib import Path
from typing import Iterable

from promptsim.config import SimConfig, load_config
from promptsim.core.codec import (
    EvaluationSchemaViolation,
    InvalidEvaluationJSON,
    evaluation_to_json,
    parse_evaluation,
)
from promptsim.core.eval_schemas import EvaluationResult
from promptsim.core.rubric import GRADE_LABELS, RULES
from promptsim.core.session import (
    EmptyPromptError,
    example_prompt,
    load_example,
    new_session,
    reset,
    submit,
)
from promptsim.core.session_schemas import HistoryEntry, SessionState
from promptsim.core.synthesizer import synthesize


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="promptsim",
        description="Score a prompt on Rol, Contexto, Tarea y Restricciones and show a simulated reply.",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    # evaluate
    p_eval = sub.add_parser("evaluate", help="Score a prompt against the rubric")
    p_eval.add_argument("text", help="Prompt text, or '-' to read stdin")
    p_eval.add_argument("--json", action="store_true", help="Print the evaluation as JSON")

    # respond
    p_resp = sub.add_parser("respond", help="Print the simulated reply for a prompt")
    p_resp.add_argument("text", help="Prompt text, or '-' to read stdin")
    p_resp.add_argument(
        "--evaluation",
        type=str,
        default="",
        help="Reuse a saved evaluation JSON file instead of scoring the text",
    )

    # example
    sub.add_parser("example", help="Print the built-in example prompt")

    # session
    sub.add_parser(
        "session",
        help="Interactive loop. Commands: :example :submit :reset :history :quit",
    )

    return parser


def _read_text(value: str) -> str:
    if value == "-":
        return sys.stdin.read()
    return value


def _error(message: str) -> int:
    print(f"error: {message}", file=sys.stderr)
    return 2


def format_evaluation(evaluation: EvaluationResult) -> str:
    lines = [
        f"Evaluación del Prompt: {GRADE_LABELS[evaluation.grade]} "
        f"({evaluation.total_score}/{evaluation.max_score})",
        "",
    ]
    for c in evaluation.criteria:
        label = RULES[c.name].label
        lines.append(f"  {label:<14} {c.score:>2}/{c.max_score}  {c.feedback}")
    lines.append("")
    lines.append(evaluation.overall_feedback)
    return "\n".join(lines)


def format_history(history: Iterable[HistoryEntry]) -> str:
    rows = [f"  {h.score:>3}/100  {h.prompt}" for h in history]
    if not rows:
        return "(sin intentos)"
    return "\n".join(["Historial de Intentos"] + rows)


def cmd_evaluate(args, cfg: SimConfig) -> int:
    try:
        state = submit(new_session(), _read_text(args.text), cfg=cfg)
    except EmptyPromptError as e:
        return _error(str(e))

    if args.json:
        print(evaluation_to_json(state.evaluation, indent=2))
    else:
        print(format_evaluation(state.evaluation))
    return 0


def cmd_respond(args, cfg: SimConfig) -> int:
    text = _read_text(args.text)

    if not args.evaluation:
        try:
            state = submit(new_session(), text, cfg=cfg)
        except EmptyPromptError as e:
            return _error(str(e))
        print(state.response)
        return 0

    path = Path(args.evaluation)
    if not path.exists():
        return _error(f"evaluation file not found: {path}")
    try:
        evaluation = parse_evaluation(path.read_text(encoding="utf-8"))
    except (InvalidEvaluationJSON, EvaluationSchemaViolation) as e:
        return _error(f"{e} ({path})")

    print(synthesize(text, evaluation, version=cfg.template_version))
    return 0


def cmd_example(args, cfg: SimConfig) -> int:
    print(example_prompt(version=cfg.template_version))
    return 0


def _show_result(state: SessionState) -> None:
    print()
    print(state.response)
    print()
    print(format_evaluation(state.evaluation))
    print()


def _session_submit(state: SessionState, text, cfg: SimConfig) -> SessionState:
    if cfg.delay_seconds > 0:
        print("Evaluando...")
        time.sleep(cfg.delay_seconds)
    new_state = submit(state, text, cfg=cfg)
    _show_result(new_state)
    return new_state


def cmd_session(args, cfg: SimConfig) -> int:
    state = new_session()

    print("Prompt Simulator: escribe un prompt y pulsa Enter (:quit para salir)")
    while True:
        try:
            line = input("> ")
        except EOFError:
            break

        command = line.strip()
        if command == ":quit":
            break
        if command == ":example":
            state = load_example(state, cfg=cfg)
            print(state.prompt)
            print("(ejemplo cargado; usa :submit para evaluarlo)")
            continue
        if command == ":reset":
            state = reset(state)
            print("Formulario reiniciado")
            continue
        if command == ":history":
            print(format_history(state.history))
            continue

        text = None if command == ":submit" else line
        try:
            state = _session_submit(state, text, cfg)
        except EmptyPromptError as e:
            print(e)

    return 0


def dispatch(args) -> int:
    try:
        cfg = load_config()
    except ValueError as e:
        return _error(f"invalid configuration: {e}")

    if args.cmd == "evaluate":
        return cmd_evaluate(args, cfg)
    if args.cmd == "respond":
        return cmd_respond(args, cfg)
    if args.cmd == "example":
        return cmd_example(args, cfg)
    if args.cmd == "session":
        return cmd_session(args, cfg)

    print(f"Unknown command: {args.cmd}")
    return 2


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    raise SystemExit(dispatch(args))


if __name__ == "__main__":
    main()
