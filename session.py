"""Quiz session state and its pure update functions.

The controller (CLI or a front end) owns one ``QuizState`` and replaces it
with the value returned by each update; nothing here mutates in place.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Mapping, Sequence

from grading import grade_items, pending_feedback
from models import Answer, CaseText, Feedback, QuizItem, SimulationPhase
from quiz_data import get_item, phase_for_case_title


@dataclass(frozen=True)
class QuizState:
    answers: Mapping[int, Answer] = field(default_factory=dict)
    feedback: Mapping[int, Feedback] = field(default_factory=dict)
    score: int = 0
    phase: SimulationPhase = SimulationPhase.NORMAL
    visible_formulas: frozenset[int] = frozenset()
    expanded_explanations: frozenset[int] = frozenset()


def initial_state() -> QuizState:
    return QuizState()


def set_calc_answer(state: QuizState, index: int, field_name: str, value: str) -> QuizState:
    previous = state.answers.get(index)
    fields = dict(previous) if isinstance(previous, Mapping) else {}
    fields[field_name] = value
    answers = dict(state.answers)
    answers[index] = fields
    return replace(state, answers=answers)


def set_mc_answer(state: QuizState, index: int, value: str) -> QuizState:
    answers = dict(state.answers)
    answers[index] = value
    return replace(state, answers=answers)


def check_answers(state: QuizState, items: Sequence[QuizItem]) -> QuizState:
    """Grade everything at once; previous feedback is discarded."""
    report = grade_items(items, state.answers)
    return replace(state, feedback=dict(report.feedback), score=report.score)


def feedback_for(state: QuizState, items: Sequence[QuizItem]) -> dict[int, Feedback]:
    """Feedback per gradeable item, ``pending`` until the first check."""
    merged = pending_feedback(items)
    merged.update(state.feedback)
    return merged


def select_phase(state: QuizState, phase: SimulationPhase | str) -> QuizState:
    return replace(state, phase=SimulationPhase(phase))


def navigate_to_balance(state: QuizState, items: Sequence[QuizItem], index: int) -> QuizState:
    """Show the balance view for the case text at ``index``."""
    item = get_item(items, index)
    if not isinstance(item, CaseText):
        raise ValueError(f"Item {index} is not a case text")
    return select_phase(state, phase_for_case_title(item.title))


def reset_phase(state: QuizState) -> QuizState:
    return replace(state, phase=SimulationPhase.NORMAL)


def _toggle(values: frozenset[int], index: int) -> frozenset[int]:
    if index in values:
        return values - {index}
    return values | {index}


def toggle_formula(state: QuizState, index: int) -> QuizState:
    return replace(state, visible_formulas=_toggle(state.visible_formulas, index))


def toggle_explanation(state: QuizState, index: int) -> QuizState:
    return replace(
        state, expanded_explanations=_toggle(state.expanded_explanations, index)
    )
