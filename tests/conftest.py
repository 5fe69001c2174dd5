import os
import sys
from datetime import date, timedelta

import pytest

# ensure workspace root is on sys.path so the package imports without installing
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from fx_trend_report.config import Settings
from fx_trend_report.models import RatePoint, RateSeries


REFERENCE_RATES = [0.86, 0.87, 0.865, 0.88, 0.875, 0.89, 0.885, 0.90]


def make_series(rates, start=date(2024, 1, 1), base="EUR", target="GBP") -> RateSeries:
    """Daily series starting at `start`, one point per rate."""
    points = tuple(
        RatePoint(date=start + timedelta(days=i), rate=rate) for i, rate in enumerate(rates)
    )
    return RateSeries(base, target, points)


@pytest.fixture
def reference_series() -> RateSeries:
    """EUR/GBP 2024-01-01..08, rising with small pullbacks."""
    return make_series(REFERENCE_RATES)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        api_base_url="https://api.test",
        cache_dir=tmp_path / "cache",
        request_delay=0,
    )
