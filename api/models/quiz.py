"""Quiz-related Pydantic models."""
from typing import Any

from pydantic import BaseModel, Field


class GradeRequest(BaseModel):
    """Model for grading all questions at once.

    Keys are item indices; calc answers map field names to raw input,
    mc answers hold the selected option index. Values are not validated
    here: anything unusable is graded as incorrect.
    """

    answers: dict[int, Any] = Field(default_factory=dict)


class GradeResponse(BaseModel):
    """Model for grading result."""

    feedback: dict[str, str]
    score: int
    total: int


class FormulaDetailsResponse(BaseModel):
    """Model for a worked example."""

    id: int
    field: str
    formula: str
    example: str
    result: str
    value: float | None = None
    cao2Source: str | None = None
