"""Exchange-rate fetcher with a read-through cache."""

import logging
import time
from datetime import date, datetime, timedelta

import httpx

from fx_trend_report.config import Settings, SUPPORTED_CURRENCIES
from fx_trend_report.data.cache import DataCache
from fx_trend_report.errors import DataFetchError, TrendAnalysisError, UnsupportedCurrencyError
from fx_trend_report.models import LatestRates, RatePoint, RateSeries


logger = logging.getLogger(__name__)


class RatesFetcher:
    """Fetches daily rates from a Frankfurter-compatible API with local caching."""

    def __init__(
        self,
        settings: Settings | None = None,
        cache: DataCache | None = None,
        client: httpx.Client | None = None,
        offline: bool = False,
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self.cache = cache or DataCache(self.settings.db_path)
        self.offline = offline
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.settings.request_timeout)
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "RatesFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _expiry(self) -> datetime:
        return datetime.now() + timedelta(hours=self.settings.cache_ttl_hours)

    @staticmethod
    def _normalize_currency(code: str) -> str:
        normalized = code.strip().upper()
        if normalized not in SUPPORTED_CURRENCIES:
            raise UnsupportedCurrencyError(f"Unsupported currency: {code}")
        return normalized

    def _request(self, endpoint: str, params: dict) -> dict:
        """GET an endpoint and decode the JSON body."""
        if self.offline:
            raise DataFetchError(f"Offline mode: no cached data for {endpoint}")

        url = f"{self.settings.api_base_url.rstrip('/')}/{endpoint}"
        try:
            response = self.client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DataFetchError(
                f"Failed to fetch {endpoint}: HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise DataFetchError(f"Failed to fetch {endpoint}: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise DataFetchError(f"Invalid JSON from {endpoint}") from e

        if not isinstance(data, dict) or "rates" not in data:
            raise DataFetchError(f"Unexpected payload from {endpoint}: missing 'rates'")
        return data

    def fetch_latest_rates(self, base: str = "EUR") -> LatestRates:
        """Fetch the most recent published rates against `base`."""
        base = self._normalize_currency(base)

        cached = self.cache.get_latest(base)
        if cached is not None:
            logger.debug(f"Using cached latest rates for {base}")
            return cached

        logger.info(f"Fetching latest rates for {base}...")
        data = self._request("latest", {"from": base})

        try:
            latest = LatestRates(
                base=base,
                date=date.fromisoformat(data["date"]),
                rates={code: float(rate) for code, rate in data["rates"].items()},
            )
        except (KeyError, TypeError, ValueError) as e:
            raise DataFetchError(f"Malformed latest rates payload for {base}: {e}") from e

        self.cache.put_latest(latest, self._expiry())
        return latest

    def fetch_historical_rates(
        self,
        base: str,
        target: str,
        days: int = 30,
        end_date: date | None = None,
    ) -> RateSeries:
        """
        Fetch daily rates for base/target over the trailing window.

        Args:
            base: Base currency code
            target: Target currency code
            days: Calendar days to look back from end_date
            end_date: Last day of the window (default: today)

        Returns:
            Series sorted ascending by date
        """
        base = self._normalize_currency(base)
        target = self._normalize_currency(target)
        if days <= 0:
            raise ValueError(f"days must be positive, got {days}")

        end = end_date or date.today()
        start = end - timedelta(days=days)
        endpoint = f"{start.isoformat()}..{end.isoformat()}"
        cache_key = f"{endpoint}?from={base}&to={target}"

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Using cached historical rates for {base}/{target}")
            return cached

        logger.info(f"Fetching historical rates {base}/{target} from {start} to {end}...")
        data = self._request(endpoint, {"from": base, "to": target})
        series = self._transform_historical(data, base, target)

        rows_stored = self.cache.put(cache_key, series, self._expiry())
        logger.info(f"  Stored {rows_stored} observations")

        return series

    def _transform_historical(self, data: dict, base: str, target: str) -> RateSeries:
        """Convert the provider's {date: {currency: rate}} mapping into a series."""
        points = []
        for day, day_rates in sorted(data["rates"].items()):
            if not isinstance(day_rates, dict) or target not in day_rates:
                raise DataFetchError(f"No {base}/{target} rate on {day}")
            try:
                points.append(
                    RatePoint(date=date.fromisoformat(day), rate=float(day_rates[target]))
                )
            except (TypeError, ValueError) as e:
                raise DataFetchError(f"Malformed {base}/{target} rate on {day}: {e}") from e

        return RateSeries(base, target, tuple(points))

    def fetch_multiple_historical_rates(
        self, base: str, targets: list[str], days: int = 30
    ) -> dict[str, RateSeries]:
        """
        Fetch several pairs sharing a base currency.

        Failures are logged and skipped; the result holds only the pairs
        that were fetched.
        """
        results = {}
        errors = {}

        for target in targets:
            try:
                results[target.upper()] = self.fetch_historical_rates(base, target, days)
                time.sleep(self.settings.request_delay)
            except (DataFetchError, UnsupportedCurrencyError, TrendAnalysisError) as e:
                logger.error(f"Failed to fetch {base}/{target}: {e}")
                errors[target] = str(e)

        if errors:
            logger.warning(f"Failed to fetch {len(errors)} pair(s): {list(errors.keys())}")

        return results
