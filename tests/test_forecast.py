"""
Tests for the linear, exponential-smoothing and combined forecasts: values on
the reference series, horizon and date handling, confidence bounds, and the
insufficient-data errors.
"""

from datetime import date, timedelta

import pytest

from conftest import make_series
from fx_trend_report.analysis import TrendEngine, trend_engine
from fx_trend_report.analysis.forecast import linear_fit
from fx_trend_report.errors import InsufficientDataError
from fx_trend_report.models import ForecastMethod, RateSeries
from fx_trend_report.utils import round_currency


FORECASTS = [
    trend_engine.forecast_linear,
    trend_engine.forecast_exponential_smoothing,
    trend_engine.forecast_combined,
]


def test_linear_fit_exact_line():
    slope, intercept = linear_fit([1.0, 3.0, 5.0, 7.0])
    assert slope == pytest.approx(2.0)
    assert intercept == pytest.approx(1.0)


def test_linear_predictions(reference_series):
    predictions = trend_engine.forecast_linear(reference_series, 3)

    assert [p.predicted for p in predictions] == [0.90, 0.91, 0.91]
    assert [p.confidence for p in predictions] == pytest.approx([97.88, 95.88, 93.88])
    assert all(p.method is ForecastMethod.LINEAR for p in predictions)


def test_exponential_predictions(reference_series):
    predictions = trend_engine.forecast_exponential_smoothing(reference_series, 3)

    assert [p.predicted for p in predictions] == [0.89, 0.89, 0.89]
    assert [p.confidence for p in predictions] == pytest.approx([91.81, 88.81, 85.81])
    assert all(p.method is ForecastMethod.EXPONENTIAL for p in predictions)


def test_exponential_trend_is_damped():
    # steadily rising series: increments shrink relative to a linear continuation
    series = make_series([1.0 + 0.1 * i for i in range(10)])
    predictions = trend_engine.forecast_exponential_smoothing(series, 30)

    values = [p.predicted for p in predictions]
    assert values == sorted(values)
    assert values[-1] < 1.0 + 0.1 * 39


def test_exponential_alpha_changes_result(reference_series):
    low = trend_engine.forecast_exponential_smoothing(reference_series, 3, alpha=0.1)
    high = trend_engine.forecast_exponential_smoothing(reference_series, 3, alpha=0.9)
    assert low != high


@pytest.mark.parametrize("alpha", [0, 1, -0.2, 1.5])
def test_exponential_rejects_alpha_outside_unit_interval(reference_series, alpha):
    with pytest.raises(ValueError):
        trend_engine.forecast_exponential_smoothing(reference_series, 3, alpha=alpha)


def test_combined_is_mean_of_methods(reference_series):
    linear = trend_engine.forecast_linear(reference_series, 5)
    exponential = trend_engine.forecast_exponential_smoothing(reference_series, 5)
    combined = trend_engine.forecast_combined(reference_series, 5)

    assert len(combined) == 5
    for lin, exp, comb in zip(linear, exponential, combined):
        assert comb.date == lin.date == exp.date
        assert comb.predicted == round_currency((lin.predicted + exp.predicted) / 2)
        assert comb.confidence == round_currency((lin.confidence + exp.confidence) / 2)
        assert comb.method is ForecastMethod.COMBINED


@pytest.mark.parametrize("forecast", FORECASTS)
def test_dates_are_contiguous_after_last_observation(reference_series, forecast):
    predictions = forecast(reference_series, 10)

    assert len(predictions) == 10
    assert [p.date for p in predictions] == [
        date(2024, 1, 8) + timedelta(days=i) for i in range(1, 11)
    ]


@pytest.mark.parametrize("forecast", FORECASTS)
def test_confidence_within_bounds(forecast):
    # very volatile series over a long horizon drives the score to zero
    series = make_series([1.0, 9.0, 2.0, 8.0, 3.0, 7.0])
    predictions = forecast(series, 60)

    assert all(0 <= p.confidence <= 100 for p in predictions)
    assert predictions[-1].confidence == 0


@pytest.mark.parametrize("forecast", FORECASTS)
@pytest.mark.parametrize("rates", [[], [0.86]])
def test_insufficient_data(forecast, rates):
    series = make_series(rates) if rates else RateSeries("EUR", "GBP")
    with pytest.raises(InsufficientDataError):
        forecast(series, 3)


@pytest.mark.parametrize("forecast", FORECASTS)
def test_zero_horizon_is_empty(reference_series, forecast):
    assert forecast(reference_series, 0) == []


def test_negative_horizon_rejected(reference_series):
    with pytest.raises(ValueError):
        trend_engine.forecast_linear(reference_series, -1)


def test_forecast_dispatch(reference_series):
    engine = TrendEngine()
    assert engine.forecast(reference_series, 3, "linear") == engine.forecast_linear(reference_series, 3)
    assert engine.forecast(reference_series, 3, ForecastMethod.EXPONENTIAL) == \
        engine.forecast_exponential_smoothing(reference_series, 3)
    assert engine.forecast(reference_series, 3) == engine.forecast_combined(reference_series, 3)

    with pytest.raises(ValueError):
        engine.forecast(reference_series, 3, "arima")


@pytest.mark.parametrize("forecast", FORECASTS)
def test_forecasts_are_idempotent(reference_series, forecast):
    assert forecast(reference_series, 7) == forecast(reference_series, 7)
