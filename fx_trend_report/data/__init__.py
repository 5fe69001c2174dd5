"""Data fetching and caching."""

from .fetcher import RatesFetcher
from .cache import DataCache

__all__ = ["RatesFetcher", "DataCache"]
