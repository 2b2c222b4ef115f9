"""Validation utilities."""
from fastapi import HTTPException

from models import SimulationPhase


def validate_item_index(index: int, item_count: int) -> int:
    """Validate that a quiz item index exists."""
    if index < 0 or index >= item_count:
        raise HTTPException(status_code=404, detail="Quiz item not found")
    return index


def validate_phase(value: str) -> SimulationPhase:
    """Validate a simulation phase key."""
    cleaned = value.strip().lower() if isinstance(value, str) else ""
    try:
        return SimulationPhase(cleaned)
    except ValueError:
        raise HTTPException(status_code=404, detail="Phase not found") from None
