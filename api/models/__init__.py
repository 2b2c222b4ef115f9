"""Pydantic models."""
from api.models.generate import GenerateRequest, GenerateResponse
from api.models.quiz import FormulaDetailsResponse, GradeRequest, GradeResponse

__all__ = [
    "FormulaDetailsResponse",
    "GenerateRequest",
    "GenerateResponse",
    "GradeRequest",
    "GradeResponse",
]
