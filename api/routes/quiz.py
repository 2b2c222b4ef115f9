"""Quiz content and grading endpoints."""
from fastapi import APIRouter

from api.models import FormulaDetailsResponse, GradeRequest, GradeResponse
from api.services.quiz_service import (
    get_context_values,
    get_formula_details,
    get_items,
    get_quiz_item,
    grade_answers,
)
from serialization import (
    serialize_formula_details,
    serialize_grade_report,
    serialize_quiz_item,
    serialize_quiz_payload,
)

router = APIRouter(prefix="/api/quiz", tags=["quiz"])


@router.get("")
def get_quiz() -> dict[str, object]:
    """Get all quiz items in order."""
    return serialize_quiz_payload(get_items())


@router.get("/items/{index}")
def get_item(index: int) -> dict[str, object]:
    """Get a single quiz item."""
    return serialize_quiz_item(index, get_quiz_item(index))


@router.get("/items/{index}/context")
def get_item_context(index: int) -> dict[str, object]:
    """Get the values mentioned in the case up to this item."""
    return {"id": index, "values": get_context_values(index)}


@router.get("/items/{index}/formula", response_model=FormulaDetailsResponse)
def get_item_formula(index: int) -> dict[str, object]:
    """Get formula and worked example for a calculation question."""
    return serialize_formula_details(index, get_formula_details(index))


@router.post("/grade", response_model=GradeResponse)
def grade_quiz(payload: GradeRequest) -> dict[str, object]:
    """Grade all questions; the result replaces any earlier feedback."""
    report = grade_answers(dict(payload.answers))
    return serialize_grade_report(report)
