"""Data models for exchange-rate series and analysis results."""

from fx_trend_report.models.rates import (
    ForecastMethod,
    LatestRates,
    MovingAverages,
    Prediction,
    RatePoint,
    RateSeries,
    Trend,
    TrendMetrics,
)

__all__ = [
    "ForecastMethod",
    "LatestRates",
    "MovingAverages",
    "Prediction",
    "RatePoint",
    "RateSeries",
    "Trend",
    "TrendMetrics",
]
