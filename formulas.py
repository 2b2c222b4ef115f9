"""Closed-form oxygen transport formulas.

All functions are pure. Missing inputs are expected as ``math.nan`` and
simply propagate; values are never checked for physiological plausibility.
"""
from __future__ import annotations

HB_O2_BINDING = 1.34  # mL O2 per g Hb
O2_SOLUBILITY = 0.003  # mL O2 / dL / mmHg

# below this a denominator counts as zero
ZERO_EPSILON = 1e-9


def alveolar_po2(
    pb: float,
    ph2o: float,
    fio2: float,
    paco2: float,
    rq: float,
) -> float:
    """Alveolar gas equation: PAO2 = (PB - PH2O) * FiO2 - PaCO2 / RQ."""
    return (pb - ph2o) * fio2 - (paco2 / rq)


def oxygen_content(hb: float, saturation: float, po2: float) -> float:
    """Oxygen content (mL O2/dL blood)."""
    return (hb * HB_O2_BINDING * saturation) + (po2 * O2_SOLUBILITY)


def arterial_content(hb: float, sao2: float, pao2: float) -> float:
    return oxygen_content(hb, sao2, pao2)


def venous_content(hb: float, svo2: float, pvo2: float) -> float:
    return oxygen_content(hb, svo2, pvo2)


def end_capillary_content(hb: float, alveolar_po2_value: float) -> float:
    """Cc'O2: end-capillary blood is assumed fully saturated at PAO2."""
    return oxygen_content(hb, 1.0, alveolar_po2_value)


def venous_content_from_consumption(
    ca_o2: float, vo2: float, cardiac_output_l_min: float
) -> float | None:
    """CvO2 = CaO2 - VO2 / (Qt * 10); None when Qt is zero."""
    denominator = cardiac_output_l_min * 10
    if abs(denominator) < ZERO_EPSILON:
        return None
    return ca_o2 - vo2 / denominator


def shunt_fraction(cc_o2: float, ca_o2: float, cv_o2: float) -> float | None:
    """
    Qs/Qt in percent.
    Returns None when Cc'O2 and CvO2 are (nearly) equal.
    """
    denominator = cc_o2 - cv_o2
    if abs(denominator) < ZERO_EPSILON:
        return None
    return (cc_o2 - ca_o2) / denominator * 100


def shunt_flow(cardiac_output_l_min: float, shunt_percent: float) -> float:
    """Qs = Qt * (Qs/Qt)."""
    return cardiac_output_l_min * shunt_percent / 100


def cardiac_output(heart_rate: float, stroke_volume_ml: float) -> float:
    """Qt in L/min from heart rate (bpm) and stroke volume (mL)."""
    return heart_rate * (stroke_volume_ml / 1000)


def oxygen_delivery(cardiac_output_l_min: float, ca_o2: float) -> float:
    """DO2 (mL/min) = Qt [L/min] * CaO2 [mL/dL] * 10."""
    return cardiac_output_l_min * ca_o2 * 10


def oxygen_extraction_ratio(vo2: float, do2: float) -> float | None:
    """O2ER in percent; None when DO2 is zero."""
    if abs(do2) < ZERO_EPSILON:
        return None
    return vo2 / do2 * 100
