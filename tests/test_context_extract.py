import re

import pytest

from context_extract import (
    CONTEXT_FIELDS,
    ContextField,
    extract_context,
    item_search_text,
    parse_decimal,
)
from models import CalcQuestion, CaseText, Explanation, McQuestion
from quiz_data import QUIZ_ITEMS


def test_parse_decimal() -> None:
    assert parse_decimal("0,40.") == pytest.approx(0.4)
    assert parse_decimal("0.8.") == pytest.approx(0.8)
    assert parse_decimal("15") == 15.0
    assert parse_decimal(".5") == 0.5
    assert parse_decimal(",") is None
    assert parse_decimal("") is None


def test_context_fields_have_unique_symbols() -> None:
    symbols = [context_field.symbol for context_field in CONTEXT_FIELDS]
    assert len(symbols) == len(set(symbols))


def test_baseline_values_from_first_case_text() -> None:
    values = extract_context(QUIZ_ITEMS, 0)
    assert values == {
        "FiO2": pytest.approx(0.21),
        "PB": 760.0,
        "PH2O": 47.0,
        "PaCO2": 40.0,
        "RQ": pytest.approx(0.8),
        "PaO2": 95.0,
        "SaO2": pytest.approx(0.991),
        "SvO2": pytest.approx(0.75),
        "PvO2": 40.0,
        "Hb": 15.0,
    }


def test_later_mentions_override_earlier_ones() -> None:
    values = extract_context(QUIZ_ITEMS, 5)
    assert values["FiO2"] == pytest.approx(0.4)
    assert values["PaCO2"] == 45.0
    # untouched values survive from phase 1
    assert values["PB"] == 760.0


def test_values_from_question_titles() -> None:
    values = extract_context(QUIZ_ITEMS, 6)
    assert values["Hb"] == pytest.approx(14.5)
    assert values["SaO2"] == pytest.approx(0.88)
    assert values["PaO2"] == 60.0


def test_content_values_with_equals_and_parentheses() -> None:
    assert extract_context(QUIZ_ITEMS, 3)["CcO2"] == pytest.approx(20.41)
    assert extract_context(QUIZ_ITEMS, 3)["CvO2"] == pytest.approx(15.2)
    assert extract_context(QUIZ_ITEMS, 7)["CcO2"] == pytest.approx(20.4)
    assert extract_context(QUIZ_ITEMS, 7)["CvO2"] == pytest.approx(12.7)


def test_values_after_intervention() -> None:
    values = extract_context(QUIZ_ITEMS, 25)
    assert values["Hb"] == pytest.approx(9.5)
    assert values["SaO2"] == pytest.approx(0.95)
    assert values["PaO2"] == 90.0
    assert values["HF"] == 90.0
    assert values["SV"] == 61.0


def test_missing_symbol_is_absent() -> None:
    values = extract_context(QUIZ_ITEMS, 0)
    assert "CcO2" not in values
    assert "Qt" not in values


def test_index_out_of_range() -> None:
    with pytest.raises(IndexError):
        extract_context(QUIZ_ITEMS, len(QUIZ_ITEMS))
    with pytest.raises(IndexError):
        extract_context(QUIZ_ITEMS, -1)


def test_custom_field_table() -> None:
    fields = (ContextField("VO2", re.compile(r"VO₂\s*=\s*([0-9.,]+)", re.IGNORECASE)),)
    items = (
        CaseText("Fall", ("VO₂ = 250 mL/min", "später VO₂ = 300 mL/min")),
        CalcQuestion("Frage", {"do2": 0.0}),
    )
    assert extract_context(items, 1, fields) == {"VO2": 300.0}


def test_item_search_text() -> None:
    assert item_search_text(CaseText("T", ("a", "b"))) == "a b"
    assert item_search_text(CalcQuestion("calc title", {"pao2": 1.0})) == "calc title"
    assert item_search_text(McQuestion("mc title", ("x",), 0)) == "mc title"
    assert item_search_text(Explanation("question", ("answer",))) == "question"
