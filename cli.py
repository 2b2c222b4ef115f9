import argparse
import logging
import sys
from pathlib import Path

import session
from api.utils import json_dump, read_json_file
from core.logging_setup import setup_console_logging
from formula_details import build_formula_details
from grading import grade_items
from models import CalcQuestion, CaseText, Explanation, McQuestion
from quiz_data import QUIZ_ITEMS, SIMULATION_PHASES
from serialization import (
    serialize_formula_details,
    serialize_grade_report,
    serialize_quiz_payload,
)

log = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Shunt physiology quiz")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("items", help="Print all quiz items as JSON")

    formula = sub.add_parser("formula", help="Show the worked example of a question")
    formula.add_argument("index", type=int, help="Quiz item index")

    grade = sub.add_parser("grade", help="Grade answers from a JSON file")
    grade.add_argument(
        "answers",
        type=Path,
        help='JSON object keyed by item index, e.g. {"1": {"pao2": "100"}, "16": "2"}',
    )

    sub.add_parser("play", help="Work through the case interactively")
    return parser.parse_args(argv)


def load_answers(path: Path) -> dict[int, object]:
    if not path.is_file():
        raise ValueError(f"{path} does not exist")
    data = read_json_file(path, {})
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    answers: dict[int, object] = {}
    for key, value in data.items():
        try:
            answers[int(key)] = value
        except ValueError:
            log.warning("Skipping answer with non-numeric key %r", key)
    return answers


def _prompt(text: str) -> str:
    try:
        return input(text)
    except EOFError:
        return ""


def play() -> None:
    state = session.initial_state()
    for index, item in enumerate(QUIZ_ITEMS):
        if isinstance(item, CaseText):
            state = session.navigate_to_balance(state, QUIZ_ITEMS, index)
            print(f"\n== {item.title} [{SIMULATION_PHASES[state.phase].button}]")
            for paragraph in item.content:
                print(paragraph)
        elif isinstance(item, CalcQuestion):
            print(f"\n{item.title}")
            for field_name in item.correct:
                raw = _prompt(f"  {field_name}: ")
                if raw.strip() == "?":
                    details = build_formula_details(QUIZ_ITEMS, index)
                    state = session.toggle_formula(state, index)
                    if details:
                        print(f"  {details.formula}\n  {details.example}\n  {details.result}")
                    raw = _prompt(f"  {field_name}: ")
                state = session.set_calc_answer(state, index, field_name, raw)
        elif isinstance(item, McQuestion):
            print(f"\n{item.title}")
            for option_index, option in enumerate(item.options):
                print(f"  [{option_index}] {option}")
            state = session.set_mc_answer(state, index, _prompt("  Antwort: "))
        elif isinstance(item, Explanation):
            print(f"\n{item.question}")
            if _prompt("  Erklärung anzeigen? [j/N] ").strip().lower() == "j":
                state = session.toggle_explanation(state, index)
                for paragraph in item.answer:
                    print(f"  {paragraph}")

    state = session.check_answers(state, QUIZ_ITEMS)
    for index, result in session.feedback_for(state, QUIZ_ITEMS).items():
        print(f"  #{index}: {result.value}")
    print(f"Punkte: {state.score} / {len(state.feedback)}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_console_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == "items":
        print(json_dump(serialize_quiz_payload(QUIZ_ITEMS)))
    elif args.command == "formula":
        try:
            details = build_formula_details(QUIZ_ITEMS, args.index)
        except IndexError as exc:
            print(exc, file=sys.stderr)
            return 1
        if details is None:
            print(f"Item {args.index} is not a calculation question", file=sys.stderr)
            return 1
        print(json_dump(serialize_formula_details(args.index, details)))
    elif args.command == "grade":
        try:
            answers = load_answers(args.answers)
        except ValueError as exc:
            print(f"Cannot read answers: {exc}", file=sys.stderr)
            return 1
        report = grade_items(QUIZ_ITEMS, answers)
        print(json_dump(serialize_grade_report(report)))
    elif args.command == "play":
        play()
    return 0


if __name__ == "__main__":
    sys.exit(main())
