"""Trend engine: metrics and forecasts for an exchange-rate series."""

from typing import Sequence

from fx_trend_report.analysis import forecast as fc
from fx_trend_report.analysis import statistics as stats
from fx_trend_report.errors import EmptySeriesError
from fx_trend_report.models import (
    ForecastMethod,
    MovingAverages,
    Prediction,
    RateSeries,
    TrendMetrics,
)
from fx_trend_report.utils import percentage_change, round_currency


class TrendEngine:
    """
    Computes trend metrics and forecasts from a rate series.

    The engine holds no state: every method is a pure function of its
    arguments, so one instance can be shared freely.

    Example:
    ```python
    engine = TrendEngine()
    metrics = engine.compute_metrics(series)
    predictions = engine.forecast(series, days_ahead=7)
    ```
    """

    def moving_average(self, values: Sequence[float], period: int) -> float:
        return stats.moving_average(values, period)

    def volatility(self, values: Sequence[float]) -> float:
        return stats.volatility(values)

    def compute_metrics(self, series: RateSeries) -> TrendMetrics:
        """
        Summarize a series.

        Raises:
            EmptySeriesError: if the series has no points
        """
        rates = series.rates
        if not rates:
            raise EmptySeriesError(
                f"No historical data available for {series.base}/{series.target}"
            )

        current = rates[-1]
        previous = rates[-2] if len(rates) > 1 else current

        ma7 = stats.moving_average(rates, 7)
        ma14 = stats.moving_average(rates, 14)
        ma30 = stats.moving_average(rates, 30)

        return TrendMetrics(
            current=round_currency(current),
            mean=round_currency(stats.mean(rates)),
            median=round_currency(stats.median(rates)),
            min=round_currency(min(rates)),
            max=round_currency(max(rates)),
            volatility=round_currency(stats.volatility(rates)),
            trend=stats.classify_trend(current, ma7, ma14),
            change_percent=round_currency(percentage_change(previous, current)),
            moving_averages=MovingAverages(
                ma7=round_currency(ma7),
                ma14=round_currency(ma14),
                ma30=round_currency(ma30),
            ),
        )

    def forecast_linear(self, series: RateSeries, days_ahead: int) -> list[Prediction]:
        return fc.forecast_linear(series, days_ahead)

    def forecast_exponential_smoothing(
        self, series: RateSeries, days_ahead: int, alpha: float = fc.DEFAULT_ALPHA
    ) -> list[Prediction]:
        return fc.forecast_exponential_smoothing(series, days_ahead, alpha)

    def forecast_combined(self, series: RateSeries, days_ahead: int) -> list[Prediction]:
        return fc.forecast_combined(series, days_ahead)

    def forecast(
        self,
        series: RateSeries,
        days_ahead: int,
        method: ForecastMethod | str = ForecastMethod.COMBINED,
    ) -> list[Prediction]:
        """Forecast with the named method ("linear", "exponential" or "combined")."""
        method = ForecastMethod(method)
        if method is ForecastMethod.LINEAR:
            return self.forecast_linear(series, days_ahead)
        if method is ForecastMethod.EXPONENTIAL:
            return self.forecast_exponential_smoothing(series, days_ahead)
        return self.forecast_combined(series, days_ahead)


trend_engine = TrendEngine()
