from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple, Union


class SimulationPhase(str, Enum):
    NORMAL = "normal"
    ARDS = "ards"
    SHOCK = "shock"
    INTERVENTION = "intervention"
    ACIDOSIS = "acidosis"
    ECMO = "ecmo"


class Feedback(str, Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    PENDING = "pending"


@dataclass(frozen=True)
class CaseText:
    title: str
    content: Tuple[str, ...]
    item_type: str = field(default="caseText", init=False)


@dataclass(frozen=True)
class CalcQuestion:
    title: str
    correct: Mapping[str, float]  # field name ("pao2", "cao2", "shunt", "do2") -> expected
    item_type: str = field(default="calc", init=False)


@dataclass(frozen=True)
class McQuestion:
    title: str
    options: Tuple[str, ...]
    answer: int
    item_type: str = field(default="mc", init=False)


@dataclass(frozen=True)
class Explanation:
    question: str
    answer: Tuple[str, ...]
    item_type: str = field(default="explanation", init=False)


QuizItem = Union[CaseText, CalcQuestion, McQuestion, Explanation]

# calc answers are {field: raw input}; mc answers are the chosen option index
Answer = Union[Dict[str, Union[str, float]], str, int]


@dataclass(frozen=True)
class GradeReport:
    feedback: Dict[int, Feedback]
    score: int
    total: int


@dataclass(frozen=True)
class FormulaDetails:
    field: str
    formula: str
    example: str
    result: str
    value: Optional[float]
    cao2_source: Optional[str] = None
