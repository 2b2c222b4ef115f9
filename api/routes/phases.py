"""Simulation phase and formula sheet endpoints."""
from fastapi import APIRouter

from api.utils import validate_phase
from models import SimulationPhase
from serialization import serialize_cheat_sheet, serialize_phase

router = APIRouter(prefix="/api", tags=["phases"])


@router.get("/phases")
def list_phases() -> list[dict[str, object]]:
    """List all simulation phases in display order."""
    return [serialize_phase(phase) for phase in SimulationPhase]


@router.get("/phases/{phase}")
def get_phase(phase: str) -> dict[str, object]:
    """Get title, description and balance nodes of one phase."""
    return serialize_phase(validate_phase(phase))


@router.get("/cheatsheet")
def get_cheat_sheet() -> dict[str, object]:
    """Get formulas and nomenclature."""
    return serialize_cheat_sheet()
