"""Service layer for quiz content, worked examples and grading."""
from fastapi import HTTPException

from api.utils import validate_item_index
from context_extract import extract_context
from formula_details import build_formula_details
from grading import grade_items
from models import Answer, FormulaDetails, GradeReport, QuizItem
from quiz_data import QUIZ_ITEMS


def get_items() -> tuple[QuizItem, ...]:
    """Return the static quiz content."""
    return QUIZ_ITEMS


def get_quiz_item(index: int) -> QuizItem:
    """Get quiz item by index."""
    items = get_items()
    validate_item_index(index, len(items))
    return items[index]


def get_context_values(index: int) -> dict[str, float]:
    """Values mentioned in the case up to and including the item."""
    items = get_items()
    validate_item_index(index, len(items))
    return extract_context(items, index)


def get_formula_details(index: int) -> FormulaDetails:
    """Worked example for a calculation question."""
    items = get_items()
    validate_item_index(index, len(items))
    details = build_formula_details(items, index)
    if details is None:
        raise HTTPException(
            status_code=400, detail="Item is not a calculation question"
        )
    return details


def grade_answers(answers: dict[int, Answer]) -> GradeReport:
    """Grade all questions against the submitted answers."""
    return grade_items(get_items(), answers)
