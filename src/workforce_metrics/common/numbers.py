from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable


def round_half_up(value: float, places: int = 1) -> float:
    """Round like the dashboards do: halves go up, never banker's rounding."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, or 0 when the denominator is zero."""
    if not denominator:
        return 0.0
    return numerator / denominator


def percentage(part: float, whole: float) -> float:
    return safe_ratio(part, whole) * 100


def mean(values: Iterable[float]) -> float:
    items = list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)
