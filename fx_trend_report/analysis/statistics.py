"""Descriptive statistics over a sequence of rates."""

from typing import Sequence

import numpy as np

from fx_trend_report.errors import EmptySeriesError
from fx_trend_report.models import Trend


MOVING_AVERAGE_PERIODS = (7, 14, 30)


def _as_array(values: Sequence[float]) -> np.ndarray:
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        raise EmptySeriesError("No historical data available")
    return data


def _mean(data: np.ndarray) -> float:
    # A constant window averages to its own value exactly
    if data.min() == data.max():
        return float(data[0])
    return float(np.mean(data))


def mean(values: Sequence[float]) -> float:
    return _mean(_as_array(values))


def median(values: Sequence[float]) -> float:
    """Middle value; for an even count, the average of the two central values."""
    data = np.sort(_as_array(values))
    mid = data.size // 2
    if data.size % 2 == 0:
        return float((data[mid - 1] + data[mid]) / 2)
    return float(data[mid])


def moving_average(values: Sequence[float], period: int) -> float:
    """
    Trailing moving average over the last `period` values.

    Falls back to the mean of everything when fewer than `period`
    values are available.
    """
    if period <= 0:
        raise ValueError(f"Moving average period must be positive, got {period}")

    data = _as_array(values)
    if data.size < period:
        return _mean(data)
    return _mean(data[-period:])


def volatility(values: Sequence[float]) -> float:
    """Population standard deviation (divides by N)."""
    data = np.asarray(values, dtype=float)
    if data.size < 2 or data.min() == data.max():
        return 0.0
    return float(np.std(data))


def classify_trend(current: float, ma7: float, ma14: float) -> Trend:
    """
    Compare the latest value with the 7 and 14 period averages.

    Both comparisons have to agree; ties and mixed signals are stable.
    """
    if current > ma7 and ma7 > ma14:
        return Trend.UP
    if current < ma7 and ma7 < ma14:
        return Trend.DOWN
    return Trend.STABLE
