import pytest

import session
from models import Feedback, SimulationPhase
from quiz_data import QUIZ_ITEMS


def test_set_calc_answer_merges_fields_without_mutation() -> None:
    start = session.initial_state()
    first = session.set_calc_answer(start, 1, "pao2", "99")
    second = session.set_calc_answer(first, 1, "cao2", "20")
    assert start.answers == {}
    assert first.answers == {1: {"pao2": "99"}}
    assert second.answers == {1: {"pao2": "99", "cao2": "20"}}


def test_set_mc_answer_replaces_selection() -> None:
    state = session.set_mc_answer(session.initial_state(), 16, "1")
    state = session.set_mc_answer(state, 16, "2")
    assert state.answers == {16: "2"}


def test_feedback_is_pending_until_checked() -> None:
    state = session.initial_state()
    feedback = session.feedback_for(state, QUIZ_ITEMS)
    assert len(feedback) == 12
    assert set(feedback.values()) == {Feedback.PENDING}


def test_check_answers_replaces_feedback_and_score() -> None:
    state = session.set_calc_answer(session.initial_state(), 1, "pao2", "100")
    state = session.set_mc_answer(state, 16, "2")
    checked = session.check_answers(state, QUIZ_ITEMS)
    assert checked.score == 2
    assert checked.feedback[1] is Feedback.CORRECT
    assert checked.feedback[16] is Feedback.CORRECT
    assert checked.feedback[2] is Feedback.INCORRECT

    changed = session.set_mc_answer(checked, 16, "0")
    # answers change, feedback stays until the next check
    assert changed.feedback[16] is Feedback.CORRECT
    rechecked = session.check_answers(changed, QUIZ_ITEMS)
    assert rechecked.feedback[16] is Feedback.INCORRECT
    assert rechecked.score == 1


def test_check_answers_twice_is_stable() -> None:
    state = session.set_calc_answer(session.initial_state(), 2, "cao2", "20.2")
    once = session.check_answers(state, QUIZ_ITEMS)
    twice = session.check_answers(once, QUIZ_ITEMS)
    assert once == twice


def test_any_phase_can_follow_any_phase() -> None:
    state = session.initial_state()
    for phase in SimulationPhase:
        for target in SimulationPhase:
            moved = session.select_phase(session.select_phase(state, phase), target)
            assert moved.phase is target
    assert session.select_phase(state, "ecmo").phase is SimulationPhase.ECMO


@pytest.mark.parametrize(
    "index, phase",
    [
        (0, SimulationPhase.NORMAL),
        (4, SimulationPhase.ARDS),
        (15, SimulationPhase.SHOCK),
        (22, SimulationPhase.INTERVENTION),
        (24, SimulationPhase.INTERVENTION),
        (26, SimulationPhase.ACIDOSIS),
        (28, SimulationPhase.ECMO),
    ],
)
def test_navigate_to_balance(index: int, phase: SimulationPhase) -> None:
    state = session.navigate_to_balance(session.initial_state(), QUIZ_ITEMS, index)
    assert state.phase is phase


def test_navigate_to_balance_requires_case_text() -> None:
    with pytest.raises(ValueError):
        session.navigate_to_balance(session.initial_state(), QUIZ_ITEMS, 1)


def test_reset_phase() -> None:
    state = session.select_phase(session.initial_state(), SimulationPhase.SHOCK)
    assert session.reset_phase(state).phase is SimulationPhase.NORMAL


def test_toggles() -> None:
    state = session.toggle_formula(session.initial_state(), 3)
    assert state.visible_formulas == {3}
    assert session.toggle_formula(state, 3).visible_formulas == frozenset()

    state = session.toggle_explanation(state, 8)
    state = session.toggle_explanation(state, 9)
    assert state.expanded_explanations == {8, 9}
