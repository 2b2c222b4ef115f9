"""Pull labelled numbers ("Hb = 15 g/dL") out of the case narrative.

The patterns are tuned to the fixed case text in ``quiz_data``; the result is
only used to fill in worked examples, never for grading.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Sequence

from models import CalcQuestion, CaseText, Explanation, McQuestion, QuizItem

log = logging.getLogger(__name__)

# "=" or "(" followed by the number, e.g. "CvO₂ = 15.2" or "CvO₂ (12.7)"
_ASSIGN = r"\s*=\s*([0-9.,]+)"
_ASSIGN_OR_PAREN = r"\s*(?:=\s*|\()\s*([0-9.,]+)\)?"

_LEADING_NUMBER = re.compile(r"\d+(?:\.\d+)?|\.\d+")


def parse_decimal(raw: str) -> float | None:
    """
    Parse the leading number of a captured group.
    The first decimal comma becomes a point; trailing punctuation such as
    the full stop in "RQ = 0.8." is ignored.
    """
    normalized = raw.strip().replace(",", ".", 1)
    match = _LEADING_NUMBER.match(normalized)
    if not match:
        return None
    return float(match.group(0))


@dataclass(frozen=True)
class ContextField:
    symbol: str
    pattern: re.Pattern[str]

    def last_value(self, text: str) -> float | None:
        value = None
        for match in self.pattern.finditer(text):
            parsed = parse_decimal(match.group(1))
            if parsed is not None:
                value = parsed
        return value


def _field(symbol: str, regex: str) -> ContextField:
    return ContextField(symbol, re.compile(regex, re.IGNORECASE))


CONTEXT_FIELDS: tuple[ContextField, ...] = (
    _field("FiO2", r"FiO₂" + _ASSIGN),
    _field("PB", r"PB" + _ASSIGN),
    _field("PH2O", r"PH₂O" + _ASSIGN),
    _field("PaCO2", r"PaCO₂" + _ASSIGN),
    _field("RQ", r"RQ" + _ASSIGN),
    _field("PaO2", r"PaO₂" + _ASSIGN),
    _field("SaO2", r"SaO₂" + _ASSIGN),
    _field("SvO2", r"SvO₂" + _ASSIGN),
    _field("PvO2", r"PvO₂" + _ASSIGN),
    _field("Hb", r"Hb" + _ASSIGN),
    _field("CvO2", r"C(?:vO₂|vO2)" + _ASSIGN_OR_PAREN),
    _field("CcO2", r"C(?:c’O₂|cO₂|c'O₂)" + _ASSIGN_OR_PAREN),
    _field("Qt", r"Q̇t" + _ASSIGN),
    _field("HF", r"HF" + _ASSIGN),
    _field("SV", r"Schlagvolumen\s*von\s*([0-9.,]+)\s*ml"),
)


def item_search_text(item: QuizItem) -> str:
    if isinstance(item, CaseText):
        return " ".join(item.content)
    if isinstance(item, (CalcQuestion, McQuestion)):
        return item.title
    if isinstance(item, Explanation):
        return item.question
    return ""


def extract_context(
    items: Sequence[QuizItem],
    index: int,
    fields: Iterable[ContextField] = CONTEXT_FIELDS,
) -> dict[str, float]:
    """
    Values known at ``index``: every item up to and including it is scanned
    and the last mention of each symbol wins.
    """
    if index < 0 or index >= len(items):
        raise IndexError(f"Quiz item {index} does not exist")

    fields = tuple(fields)
    values: dict[str, float] = {}
    for item in items[: index + 1]:
        text = item_search_text(item)
        if not text:
            continue
        for context_field in fields:
            value = context_field.last_value(text)
            if value is not None:
                values[context_field.symbol] = value
    log.debug("Context for item %s: %s", index, values)
    return values
