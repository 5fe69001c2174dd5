"""Trend statistics and forecasting."""

from fx_trend_report.analysis.engine import TrendEngine, trend_engine
from fx_trend_report.analysis.forecast import DEFAULT_ALPHA

__all__ = ["TrendEngine", "trend_engine", "DEFAULT_ALPHA"]
