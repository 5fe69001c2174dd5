"""Bundle a series with its metrics and predictions for rendering."""

import json
from dataclasses import dataclass, field

from fx_trend_report.analysis import TrendEngine, trend_engine
from fx_trend_report.models import ForecastMethod, Prediction, RateSeries, TrendMetrics
from fx_trend_report.utils import percentage_change, round_currency


@dataclass(frozen=True)
class TrendReport:
    """Everything a renderer needs; values are displayed as-is."""

    series: RateSeries
    metrics: TrendMetrics
    predictions: list[Prediction] = field(default_factory=list)
    expected_change: float | None = None

    @property
    def base(self) -> str:
        return self.series.base

    @property
    def target(self) -> str:
        return self.series.target

    def to_dict(self) -> dict:
        return {
            "base": self.base,
            "target": self.target,
            "period": {
                "start": self.series.first_date.isoformat(),
                "end": self.series.last_date.isoformat(),
                "days": len(self.series),
            },
            "metrics": self.metrics.to_dict(),
            "predictions": [p.to_dict() for p in self.predictions],
            "expected_change": self.expected_change,
            "historical": self.series.to_dict(),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def build_report(
    series: RateSeries,
    predict_days: int = 7,
    method: ForecastMethod | str = ForecastMethod.COMBINED,
    engine: TrendEngine | None = None,
) -> TrendReport:
    """
    Compute metrics and, when predict_days > 0, a forecast.

    expected_change is the percent move from the current rate to the
    average predicted rate.
    """
    engine = engine or trend_engine
    metrics = engine.compute_metrics(series)

    predictions = engine.forecast(series, predict_days, method) if predict_days > 0 else []

    expected_change = None
    if predictions:
        avg_predicted = sum(p.predicted for p in predictions) / len(predictions)
        expected_change = round_currency(percentage_change(metrics.current, avg_predicted))

    return TrendReport(
        series=series,
        metrics=metrics,
        predictions=predictions,
        expected_change=expected_change,
    )
