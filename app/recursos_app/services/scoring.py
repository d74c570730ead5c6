"""Rounding and the five-tier quality ladder shared by every report."""
from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, Union

Number = Union[int, float]

GRAMMAR_WEIGHT = 0.6
LEXICAL_WEIGHT = 0.4


def round_half_up(value: Number, ndigits: int = 0) -> Number:
    """Round halves upwards (0.5 -> 1, 2.5 -> 3), unlike the builtin ``round``."""
    factor = 10 ** ndigits
    rounded = math.floor(value * factor + 0.5) / factor
    return int(rounded) if ndigits == 0 else rounded


def mean(values: Iterable[Number]) -> float:
    values = list(values)
    return sum(values) / len(values) if values else 0.0


class QualityLevel(str, Enum):
    EXCELLENT = 'Excelente'
    GOOD = 'Bueno'
    REGULAR = 'Regular'
    NEEDS_IMPROVEMENT_MILD = 'Mejorable'
    NEEDS_IMPROVEMENT = 'Necesita mejora'


def combined_score(grammatical_percentage: Number, ttr: Number) -> int:
    """Weighted 0-100 score: 60% grammar percentage, 40% TTR."""
    return round_half_up(
        (grammatical_percentage / 100 * GRAMMAR_WEIGHT + ttr * LEXICAL_WEIGHT) * 100
    )


def quality_level(score: Number) -> QualityLevel:
    if score >= 80:
        return QualityLevel.EXCELLENT
    if score >= 70:
        return QualityLevel.GOOD
    if score >= 60:
        return QualityLevel.REGULAR
    if score >= 50:
        return QualityLevel.NEEDS_IMPROVEMENT_MILD
    return QualityLevel.NEEDS_IMPROVEMENT
