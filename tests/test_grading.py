import pytest

from grading import (
    FIELD_TOLERANCES,
    grade_calc,
    grade_item,
    grade_items,
    grade_mc,
    parse_number,
    pending_feedback,
)
from models import CalcQuestion, Explanation, Feedback, McQuestion
from quiz_data import QUIZ_ITEMS


def _all_correct_answers() -> dict[int, object]:
    answers: dict[int, object] = {}
    for index, item in enumerate(QUIZ_ITEMS):
        if isinstance(item, CalcQuestion):
            answers[index] = {name: str(value) for name, value in item.correct.items()}
        elif isinstance(item, McQuestion):
            answers[index] = str(item.answer)
    return answers


def test_parse_number() -> None:
    assert parse_number("100") == 100.0
    assert parse_number(" 20,21 ") == pytest.approx(20.21)
    assert parse_number(3) == 3.0
    assert parse_number("") is None
    assert parse_number("abc") is None
    assert parse_number(None) is None
    assert parse_number(True) is None
    assert parse_number("inf") is None
    assert parse_number("nan") is None


@pytest.mark.parametrize("field_name", sorted(FIELD_TOLERANCES))
def test_exact_answer_is_correct(field_name: str) -> None:
    item = CalcQuestion("Frage", {field_name: 42.0})
    assert grade_calc(item, {field_name: "42"})


@pytest.mark.parametrize(
    "field_name, expected",
    [("pao2", 100.0), ("cao2", 20.21), ("shunt", 3.8), ("do2", 679.0)],
)
def test_tolerance_edge_is_inclusive(field_name: str, expected: float) -> None:
    item = CalcQuestion("Frage", {field_name: expected})
    tolerance = FIELD_TOLERANCES[field_name]
    assert grade_calc(item, {field_name: str(expected + tolerance)})
    assert grade_calc(item, {field_name: str(expected - tolerance)})
    assert not grade_calc(item, {field_name: str(expected + tolerance + 1e-6)})
    assert not grade_calc(item, {field_name: str(expected - tolerance - 1e-6)})


def test_calc_missing_or_unparsable_fields_are_incorrect() -> None:
    item = CalcQuestion("Frage", {"cao2": 20.21})
    assert not grade_calc(item, None)
    assert not grade_calc(item, {})
    assert not grade_calc(item, {"pao2": "20.21"})
    assert not grade_calc(item, {"cao2": "zwanzig"})
    assert not grade_calc(item, "20.21")


def test_calc_accepts_decimal_comma() -> None:
    item = CalcQuestion("Frage", {"cao2": 20.21})
    assert grade_calc(item, {"cao2": "20,3"})


def test_mc_grading() -> None:
    item = McQuestion("Frage", ("a", "b", "c", "d"), 2)
    assert grade_mc(item, "2")
    assert grade_mc(item, 2)
    assert not grade_mc(item, "1")
    assert not grade_mc(item, "")
    assert not grade_mc(item, "zwei")
    assert not grade_mc(item, None)


def test_grade_item_rejects_ungraded_items() -> None:
    with pytest.raises(ValueError):
        grade_item(Explanation("Warum?", ("Darum.",)), None)


def test_grade_items_all_correct() -> None:
    report = grade_items(QUIZ_ITEMS, _all_correct_answers())
    assert report.total == 12
    assert report.score == 12
    assert set(report.feedback.values()) == {Feedback.CORRECT}


def test_grade_items_without_answers() -> None:
    report = grade_items(QUIZ_ITEMS, {})
    assert report.score == 0
    assert report.total == 12
    assert set(report.feedback.values()) == {Feedback.INCORRECT}


def test_grade_items_skips_case_text_and_explanations() -> None:
    report = grade_items(QUIZ_ITEMS, {})
    assert 0 not in report.feedback
    assert 8 not in report.feedback
    assert 1 in report.feedback
    assert 16 in report.feedback


def test_grade_items_is_idempotent() -> None:
    answers = {1: {"pao2": "101"}, 2: {"cao2": "19"}, 16: "2", 17: "0"}
    first = grade_items(QUIZ_ITEMS, answers)
    second = grade_items(QUIZ_ITEMS, answers)
    assert first == second
    assert first.score == 2
    assert first.feedback[2] is Feedback.INCORRECT


def test_pending_feedback_covers_gradeable_items() -> None:
    pending = pending_feedback(QUIZ_ITEMS)
    assert len(pending) == 12
    assert set(pending.values()) == {Feedback.PENDING}
