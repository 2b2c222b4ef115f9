"""Grade calculation and multiple-choice answers."""
from __future__ import annotations

import logging
import math
from typing import Mapping, Sequence

from models import (
    Answer,
    CalcQuestion,
    Feedback,
    GradeReport,
    McQuestion,
    QuizItem,
)
from quiz_data import is_gradeable

log = logging.getLogger(__name__)

# absolute tolerance per answer field; the edge itself counts as correct
FIELD_TOLERANCES: dict[str, float] = {
    "pao2": 5.0,
    "cao2": 0.5,
    "shunt": 3.0,
    "do2": 20.0,
}

# absorbs float noise such as abs(20.71 - 20.21) > 0.5
_EDGE_SLACK = 1e-9


def parse_number(raw: object) -> float | None:
    """Parse a user-entered number. Accepts a decimal comma."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        cleaned = raw.strip().replace(",", ".")
        if not cleaned:
            return None
        try:
            value = float(cleaned)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(value):
        return None
    return value


def grade_calc(item: CalcQuestion, answer: Answer | None) -> bool:
    if not isinstance(answer, Mapping):
        return False
    for field_name, expected in item.correct.items():
        value = parse_number(answer.get(field_name))
        if value is None:
            return False
        tolerance = FIELD_TOLERANCES[field_name]
        if abs(value - expected) > tolerance + _EDGE_SLACK:
            return False
    return True


def grade_mc(item: McQuestion, answer: Answer | None) -> bool:
    if isinstance(answer, bool) or answer is None:
        return False
    if isinstance(answer, int):
        return answer == item.answer
    if not isinstance(answer, str):
        return False
    try:
        selected = int(answer.strip())
    except ValueError:
        return False
    return selected == item.answer


def grade_item(item: QuizItem, answer: Answer | None) -> Feedback:
    if isinstance(item, CalcQuestion):
        correct = grade_calc(item, answer)
    elif isinstance(item, McQuestion):
        correct = grade_mc(item, answer)
    else:
        raise ValueError(f"{item.item_type} items are not graded")
    return Feedback.CORRECT if correct else Feedback.INCORRECT


def grade_items(
    items: Sequence[QuizItem],
    answers: Mapping[int, Answer],
) -> GradeReport:
    """
    Grade every calc/mc item independently against ``answers`` (keyed by
    item index). Case texts and explanations are not counted.
    """
    feedback: dict[int, Feedback] = {}
    score = 0
    for index, item in enumerate(items):
        if not is_gradeable(item):
            continue
        result = grade_item(item, answers.get(index))
        feedback[index] = result
        if result is Feedback.CORRECT:
            score += 1
    log.info("Graded %s questions: %s correct", len(feedback), score)
    return GradeReport(feedback=feedback, score=score, total=len(feedback))


def pending_feedback(items: Sequence[QuizItem]) -> dict[int, Feedback]:
    return {
        index: Feedback.PENDING
        for index, item in enumerate(items)
        if is_gradeable(item)
    }
