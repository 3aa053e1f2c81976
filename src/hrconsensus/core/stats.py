"""Small descriptive statistics helpers shared by the calculators."""

from __future__ import annotations

import math
import re
from typing import Sequence

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def population_variance(values: Sequence[float]) -> float:
    """Variance dividing by N, not N - 1."""
    if not values:
        return 0.0
    centre = mean(values)
    return sum((value - centre) ** 2 for value in values) / len(values)


def population_std_dev(values: Sequence[float]) -> float:
    return math.sqrt(population_variance(values))


def coerce_rating(value: float | int | str | None) -> float:
    """Turn a rating into a float; anything without a leading number is 0.

    Strings are read up to the first non-numeric character, so ``"8/10"`` is 8.
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_NUMBER.match(str(value))
        if match is None:
            return 0.0
        number = float(match.group(1))
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number
