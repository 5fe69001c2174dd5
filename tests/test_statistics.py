"""
Tests for the descriptive statistics helpers: moving averages, volatility,
median and trend classification.
"""

import pytest

from fx_trend_report.analysis import statistics as stats
from fx_trend_report.errors import EmptySeriesError
from fx_trend_report.models import Trend


def test_moving_average_uses_trailing_window():
    assert stats.moving_average([1, 2, 3, 4, 5], 3) == 4


def test_moving_average_period_longer_than_data():
    assert stats.moving_average([1, 2, 3], 5) == 2


def test_moving_average_period_equal_to_length():
    assert stats.moving_average([2, 4, 6, 8], 4) == 5


@pytest.mark.parametrize("period", [0, -3])
def test_moving_average_rejects_non_positive_period(period):
    with pytest.raises(ValueError):
        stats.moving_average([1, 2, 3], period)


def test_moving_average_empty():
    with pytest.raises(EmptySeriesError):
        stats.moving_average([], 7)


def test_volatility_constant_is_zero():
    assert stats.volatility([1, 1, 1, 1]) == 0
    # not exactly representable, still exactly zero
    assert stats.volatility([0.1] * 30) == 0.0


def test_volatility_is_population_std():
    assert stats.volatility([1, 2, 3, 4]) == pytest.approx(1.118, abs=0.001)


@pytest.mark.parametrize("values", [[], [1.5]])
def test_volatility_short_series(values):
    assert stats.volatility(values) == 0.0


def test_median_odd_and_even():
    assert stats.median([3, 1, 2]) == 2
    assert stats.median([4, 1, 3, 2]) == 2.5


def test_mean_of_constant_window_is_exact():
    assert stats.mean([0.87] * 20) == 0.87
    assert stats.moving_average([0.87] * 20, 7) == 0.87


def test_classify_trend():
    assert stats.classify_trend(3.0, 2.0, 1.0) is Trend.UP
    assert stats.classify_trend(1.0, 2.0, 3.0) is Trend.DOWN
    # mixed signals and ties
    assert stats.classify_trend(3.0, 1.0, 2.0) is Trend.STABLE
    assert stats.classify_trend(2.0, 2.0, 1.0) is Trend.STABLE
    assert stats.classify_trend(1.0, 1.0, 1.0) is Trend.STABLE
