"""Data models for exchange-rate series."""

import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

import pandas as pd

from fx_trend_report.errors import InvalidSeriesError


class Trend(Enum):
    """Direction of the short-term moving averages."""
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class ForecastMethod(Enum):
    """Available forecasting methods."""
    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    COMBINED = "combined"


@dataclass(frozen=True)
class RatePoint:
    """Single observed exchange rate."""

    date: date
    rate: float


@dataclass(frozen=True)
class RateSeries:
    """
    Ordered daily rates for one currency pair.

    Points must be strictly ascending by date with finite, non-negative
    rates; anything else raises InvalidSeriesError on construction.
    """

    base: str
    target: str
    points: tuple[RatePoint, ...] = ()

    def __post_init__(self) -> None:
        points = tuple(self.points)
        object.__setattr__(self, "points", points)

        previous: date | None = None
        for point in points:
            if not math.isfinite(point.rate) or point.rate < 0:
                raise InvalidSeriesError(
                    f"Invalid rate {point.rate!r} on {point.date} for {self.base}/{self.target}"
                )
            if previous is not None and point.date <= previous:
                raise InvalidSeriesError(
                    f"Dates must be strictly ascending: {point.date} follows {previous}"
                )
            previous = point.date

    def __len__(self) -> int:
        return len(self.points)

    @property
    def rates(self) -> list[float]:
        return [p.rate for p in self.points]

    @property
    def dates(self) -> list[date]:
        return [p.date for p in self.points]

    @property
    def first_date(self) -> date | None:
        return self.points[0].date if self.points else None

    @property
    def last_date(self) -> date | None:
        return self.points[-1].date if self.points else None

    def tail(self, n: int) -> "RateSeries":
        """Series restricted to the last n points."""
        if n <= 0:
            return RateSeries(self.base, self.target)
        return RateSeries(self.base, self.target, self.points[-n:])

    @classmethod
    def from_pairs(
        cls, base: str, target: str, pairs: list[tuple[date | str, float]]
    ) -> "RateSeries":
        """Build a series from (date, rate) pairs; ISO date strings are accepted."""
        points = [
            RatePoint(
                date=d if isinstance(d, date) else date.fromisoformat(d),
                rate=float(r),
            )
            for d, r in pairs
        ]
        return cls(base, target, tuple(points))

    @classmethod
    def from_frame(cls, df: pd.DataFrame, base: str, target: str) -> "RateSeries":
        """
        Build a series from a DataFrame with a date index and a 'value' column.

        Rows are sorted by date; NaN values are dropped.
        """
        if df.empty:
            return cls(base, target)

        values = df["value"].dropna().sort_index()
        points = tuple(
            RatePoint(date=pd.Timestamp(idx).date(), rate=float(val))
            for idx, val in values.items()
        )
        return cls(base, target, points)

    def to_frame(self) -> pd.DataFrame:
        """DataFrame with DatetimeIndex and 'value' column."""
        if not self.points:
            return pd.DataFrame(columns=["value"])

        df = pd.DataFrame(
            {"value": self.rates},
            index=pd.to_datetime([d.isoformat() for d in self.dates]),
        )
        df.index.name = "date"
        return df

    def to_dict(self) -> list[dict]:
        return [{"date": p.date.isoformat(), "rate": p.rate} for p in self.points]


@dataclass(frozen=True)
class MovingAverages:
    """Trailing moving averages over 7, 14 and 30 observations."""

    ma7: float
    ma14: float
    ma30: float

    def to_dict(self) -> dict[str, float]:
        return {"ma7": self.ma7, "ma14": self.ma14, "ma30": self.ma30}


@dataclass(frozen=True)
class TrendMetrics:
    """Summary statistics of a series, rounded to two decimals."""

    current: float
    mean: float
    median: float
    min: float
    max: float
    volatility: float
    trend: Trend
    change_percent: float
    moving_averages: MovingAverages

    def to_dict(self) -> dict:
        return {
            "current": self.current,
            "mean": self.mean,
            "median": self.median,
            "min": self.min,
            "max": self.max,
            "volatility": self.volatility,
            "trend": self.trend.value,
            "change_percent": self.change_percent,
            "moving_averages": self.moving_averages.to_dict(),
        }


@dataclass(frozen=True)
class Prediction:
    """One forecasted rate."""

    date: date
    predicted: float
    confidence: float  # 0-100 heuristic score, not a probability
    method: ForecastMethod

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "predicted": self.predicted,
            "confidence": self.confidence,
            "method": self.method.value,
        }


@dataclass(frozen=True)
class LatestRates:
    """Latest published rates for a base currency."""

    base: str
    date: date
    rates: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"base": self.base, "date": self.date.isoformat(), "rates": dict(self.rates)}
