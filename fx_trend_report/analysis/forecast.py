"""
Short-horizon rate forecasts.

Two simple extrapolations are provided, plus their average:
- Linear: ordinary least squares over the observation index
- Exponential: single exponential smoothing with a damped local trend

Confidence values are heuristic 0-100 scores that decay with the horizon
and with historical volatility. They are not statistical intervals.
"""

from datetime import timedelta

import numpy as np

from fx_trend_report.analysis.statistics import volatility
from fx_trend_report.errors import InsufficientDataError
from fx_trend_report.models import ForecastMethod, Prediction, RateSeries
from fx_trend_report.utils import round_currency


DEFAULT_ALPHA = 0.3

# Confidence heuristics: (baseline, volatility penalty, per-day penalty)
LINEAR_CONFIDENCE = (100.0, 10.0, 2.0)
EXPONENTIAL_CONFIDENCE = (95.0, 15.0, 3.0)


def _check_inputs(series: RateSeries, days_ahead: int) -> None:
    if len(series) < 2:
        raise InsufficientDataError(
            f"Not enough data for prediction: {len(series)} point(s), need at least 2"
        )
    if days_ahead < 0:
        raise ValueError(f"days_ahead must not be negative, got {days_ahead}")


def _confidence(params: tuple[float, float, float], vol: float, offset: int) -> float:
    baseline, vol_penalty, day_penalty = params
    return max(0.0, baseline - vol * vol_penalty - offset * day_penalty)


def linear_fit(values: list[float]) -> tuple[float, float]:
    """
    Least-squares line over zero-based indices.

    Returns:
        (slope, intercept)
    """
    y = np.asarray(values, dtype=float)
    n = y.size
    x = np.arange(n, dtype=float)

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_x2 = float(np.sum(x * x))

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n
    return slope, intercept


def forecast_linear(series: RateSeries, days_ahead: int) -> list[Prediction]:
    """Extrapolate the least-squares line `days_ahead` days past the last observation."""
    _check_inputs(series, days_ahead)

    rates = series.rates
    n = len(rates)
    slope, intercept = linear_fit(rates)
    vol = volatility(rates)
    last_date = series.last_date

    predictions = []
    for i in range(1, days_ahead + 1):
        predicted = intercept + slope * (n - 1 + i)
        predictions.append(Prediction(
            date=last_date + timedelta(days=i),
            predicted=round_currency(predicted),
            confidence=round_currency(_confidence(LINEAR_CONFIDENCE, vol, i)),
            method=ForecastMethod.LINEAR,
        ))

    return predictions


def forecast_exponential_smoothing(
    series: RateSeries, days_ahead: int, alpha: float = DEFAULT_ALPHA
) -> list[Prediction]:
    """
    Exponential smoothing with a damped trend.

    The trend increment comes from the last two observations only and is
    held constant; its contribution saturates geometrically with the
    horizon so distant predictions do not diverge.
    """
    _check_inputs(series, days_ahead)
    if not 0 < alpha < 1:
        raise ValueError(f"alpha must be in (0, 1), got {alpha}")

    rates = series.rates
    smoothed = rates[0]
    for rate in rates[1:]:
        smoothed = alpha * rate + (1 - alpha) * smoothed

    trend = (rates[-1] - rates[-2]) * alpha
    vol = volatility(rates)
    last_date = series.last_date

    predictions = []
    for i in range(1, days_ahead + 1):
        smoothed = smoothed + trend * (1 - (1 - alpha) ** i)
        predictions.append(Prediction(
            date=last_date + timedelta(days=i),
            predicted=round_currency(smoothed),
            confidence=round_currency(_confidence(EXPONENTIAL_CONFIDENCE, vol, i)),
            method=ForecastMethod.EXPONENTIAL,
        ))

    return predictions


def forecast_combined(series: RateSeries, days_ahead: int) -> list[Prediction]:
    """Average the linear and exponential forecasts day by day."""
    linear = forecast_linear(series, days_ahead)
    exponential = forecast_exponential_smoothing(series, days_ahead)

    return [
        Prediction(
            date=lin.date,
            predicted=round_currency((lin.predicted + exp.predicted) / 2),
            confidence=round_currency((lin.confidence + exp.confidence) / 2),
            method=ForecastMethod.COMBINED,
        )
        for lin, exp in zip(linear, exponential)
    ]
