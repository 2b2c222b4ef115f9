from __future__ import annotations

from typing import Any, Sequence

from grading import FIELD_TOLERANCES
from models import (
    CalcQuestion,
    CaseText,
    Explanation,
    FormulaDetails,
    GradeReport,
    McQuestion,
    QuizItem,
    SimulationPhase,
)
from quiz_data import (
    BALANCE_NODE_IDS,
    CHEAT_SHEET,
    SIMULATION_PHASES,
    balance_node,
    gradeable_total,
    phase_for_case_title,
)


FIELD_LABELS = {
    "pao2": "PAO₂ (mmHg)",
    "cao2": "CaO₂ (mL/dL)",
    "shunt": "Qs/Qt (%)",
    "do2": "DO₂ (mL/min)",
}


def serialize_quiz_item(index: int, item: QuizItem) -> dict[str, Any]:
    payload: dict[str, Any] = {"id": index, "type": item.item_type}
    if isinstance(item, CaseText):
        payload["title"] = item.title
        payload["content"] = list(item.content)
        payload["phase"] = phase_for_case_title(item.title).value
    elif isinstance(item, CalcQuestion):
        payload["title"] = item.title
        payload["fields"] = [
            {
                "name": name,
                "label": FIELD_LABELS.get(name, name),
                "tolerance": FIELD_TOLERANCES.get(name),
            }
            for name in item.correct
        ]
    elif isinstance(item, McQuestion):
        payload["title"] = item.title
        payload["options"] = [
            {"id": option_index, "text": option}
            for option_index, option in enumerate(item.options)
        ]
    elif isinstance(item, Explanation):
        payload["question"] = item.question
        payload["answer"] = list(item.answer)
    return payload


def serialize_quiz_payload(items: Sequence[QuizItem]) -> dict[str, Any]:
    return {
        "items": [serialize_quiz_item(index, item) for index, item in enumerate(items)],
        "totalQuestions": gradeable_total(items),
        "tolerances": dict(FIELD_TOLERANCES),
    }


def serialize_grade_report(report: GradeReport) -> dict[str, Any]:
    return {
        "feedback": {str(index): result.value for index, result in report.feedback.items()},
        "score": report.score,
        "total": report.total,
    }


def serialize_formula_details(index: int, details: FormulaDetails) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": index,
        "field": details.field,
        "formula": details.formula,
        "example": details.example,
        "result": details.result,
        "value": details.value,
    }
    if details.cao2_source:
        payload["cao2Source"] = details.cao2_source
    return payload


def serialize_phase(phase: SimulationPhase) -> dict[str, Any]:
    info = SIMULATION_PHASES[phase]
    return {
        "id": phase.value,
        "title": info.title,
        "description": info.description,
        "button": info.button,
        "nodes": {
            node_id: {
                "title": balance_node(phase, node_id).title,
                "lines": list(balance_node(phase, node_id).lines),
            }
            for node_id in BALANCE_NODE_IDS
        },
    }


def serialize_cheat_sheet() -> dict[str, Any]:
    return {
        section: [{"symbol": symbol, "text": text} for symbol, text in entries]
        for section, entries in CHEAT_SHEET.items()
    }
