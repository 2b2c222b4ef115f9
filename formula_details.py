"""Worked examples shown next to the calculation questions."""
from __future__ import annotations

import math
from typing import Mapping, Sequence

import formulas
from context_extract import extract_context
from models import CalcQuestion, FormulaDetails, QuizItem
from quiz_data import get_item

NOT_AVAILABLE = "n/a"


def _fmt(value: float | None) -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return NOT_AVAILABLE
    return f"{value:g}"


def _result(value: float | None, digits: int, unit: str) -> str:
    if value is None or math.isnan(value):
        return NOT_AVAILABLE
    return f"≈ {value:.{digits}f} {unit}"


def _clean(value: float | None) -> float | None:
    if value is None or math.isnan(value):
        return None
    return value


def preceding_expected_cao2(items: Sequence[QuizItem], index: int) -> float | None:
    """Expected CaO2 of the nearest calc question before ``index``."""
    for prev in reversed(items[:index]):
        if isinstance(prev, CalcQuestion) and "cao2" in prev.correct:
            return prev.correct["cao2"]
    return None


def _alveolar_inputs(values: Mapping[str, float]) -> tuple[float, ...]:
    return tuple(
        values.get(symbol, math.nan) for symbol in ("PB", "PH2O", "FiO2", "PaCO2", "RQ")
    )


def _alveolar_details(values: Mapping[str, float]) -> FormulaDetails:
    pb, ph2o, fio2, paco2, rq = _alveolar_inputs(values)
    value = formulas.alveolar_po2(pb, ph2o, fio2, paco2, rq)
    return FormulaDetails(
        field="pao2",
        formula="PAO₂ = (P_B - PH₂O) × FiO₂ - (PaCO₂ / RQ)",
        example=f"= ({_fmt(pb)} - {_fmt(ph2o)}) × {_fmt(fio2)} - ({_fmt(paco2)} / {_fmt(rq)})",
        result=_result(value, 1, "mmHg"),
        value=_clean(value),
    )


def _context_cao2(values: Mapping[str, float]) -> float:
    return formulas.arterial_content(
        values.get("Hb", math.nan),
        values.get("SaO2", math.nan),
        values.get("PaO2", math.nan),
    )


def _content_details(values: Mapping[str, float]) -> FormulaDetails:
    hb = values.get("Hb", math.nan)
    sao2 = values.get("SaO2", math.nan)
    pao2 = values.get("PaO2", math.nan)
    value = formulas.arterial_content(hb, sao2, pao2)
    return FormulaDetails(
        field="cao2",
        formula="CaO₂ = (Hb × 1.34 × SaO₂) + (PaO₂ × 0.003)",
        example=f"= ({_fmt(hb)} × 1.34 × {_fmt(sao2)}) + ({_fmt(pao2)} × 0.003)",
        result=_result(value, 2, "mL/dL"),
        value=_clean(value),
    )


def _shunt_details(
    items: Sequence[QuizItem], index: int, values: Mapping[str, float]
) -> FormulaDetails:
    cao2 = preceding_expected_cao2(items, index)
    source = "previous_question"
    if cao2 is None:
        # no earlier CaO2 question: recompute from the narrative and say so
        cao2 = _context_cao2(values)
        source = "context"

    hb = values.get("Hb", math.nan)
    cc_o2 = values.get("CcO2")
    if cc_o2 is None:
        # fully saturated at the alveolar PO2
        cc_o2 = formulas.end_capillary_content(
            hb, formulas.alveolar_po2(*_alveolar_inputs(values))
        )
    cv_o2 = values.get("CvO2")
    if cv_o2 is None:
        cv_o2 = formulas.venous_content(
            hb, values.get("SvO2", math.nan), values.get("PvO2", math.nan)
        )
    value = formulas.shunt_fraction(cc_o2, cao2, cv_o2)
    cao2_text = NOT_AVAILABLE if math.isnan(cao2) else f"{cao2:.2f}"
    example = f"= ({_fmt(cc_o2)} - {cao2_text}) / ({_fmt(cc_o2)} - {_fmt(cv_o2)}) × 100"
    qt = values.get("Qt")
    if qt is not None and value is not None and not math.isnan(value):
        qs = formulas.shunt_flow(qt, value)
        example += f" | Qs = {_fmt(qt)} × {value:.1f} / 100 ≈ {qs:.2f} L/min"
    return FormulaDetails(
        field="shunt",
        formula="Qs/Qt = (Cc’O₂ - CaO₂) / (Cc’O₂ - CvO₂) × 100",
        example=example,
        result=_result(value, 1, "%"),
        value=_clean(value),
        cao2_source=source,
    )


def _delivery_details(values: Mapping[str, float]) -> FormulaDetails:
    cao2 = _context_cao2(values)
    cao2_text = NOT_AVAILABLE if math.isnan(cao2) else f"{cao2:.2f}"
    heart_rate = values.get("HF")
    stroke_volume = values.get("SV")

    if heart_rate and stroke_volume:
        sv_liters = stroke_volume / 1000
        value = formulas.oxygen_delivery(
            formulas.cardiac_output(heart_rate, stroke_volume), cao2
        )
        return FormulaDetails(
            field="do2",
            formula="DO₂ = HF [bpm] × SV [L] × CaO₂ [mL/dL] × 10",
            example=(
                f"CaO₂ ≈ {cao2_text} | "
                f"DO₂ = {_fmt(heart_rate)} × {sv_liters:.3f} × {cao2_text} × 10"
            ),
            result=_result(value, 0, "mL/min"),
            value=_clean(value),
        )

    qt = values.get("Qt", math.nan)
    value = formulas.oxygen_delivery(qt, cao2)
    return FormulaDetails(
        field="do2",
        formula="DO₂ = Q̇t [L/min] × CaO₂ [mL/dL] × 10",
        example=f"CaO₂ ≈ {cao2_text} mL/dL | DO₂ = {_fmt(qt)} × {cao2_text} × 10",
        result=_result(value, 0, "mL/min"),
        value=_clean(value),
    )


def build_formula_details(
    items: Sequence[QuizItem], index: int
) -> FormulaDetails | None:
    """
    Formula, worked example and result for the calc question at ``index``,
    using the values mentioned in the case so far. None for other items.
    """
    item = get_item(items, index)
    if not isinstance(item, CalcQuestion):
        return None

    values = extract_context(items, index)
    if "pao2" in item.correct:
        return _alveolar_details(values)
    if "cao2" in item.correct:
        return _content_details(values)
    if "shunt" in item.correct:
        return _shunt_details(items, index, values)
    if "do2" in item.correct:
        return _delivery_details(values)
    return None
