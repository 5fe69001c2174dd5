"""Exception types raised across the package."""


class TrendAnalysisError(ValueError):
    """Base class for errors raised by the trend engine."""


class EmptySeriesError(TrendAnalysisError):
    """Metrics were requested on a series with no observations."""


class InsufficientDataError(TrendAnalysisError):
    """A forecast needs at least two observations."""


class InvalidSeriesError(TrendAnalysisError):
    """Dates are unsorted or duplicated, or a rate is not a finite number."""


class DataFetchError(RuntimeError):
    """The rates provider failed or returned an unusable payload."""


class UnsupportedCurrencyError(ValueError):
    """Currency code is not in the supported list."""
