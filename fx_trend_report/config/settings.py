"""Configuration settings for the trend report."""

from dataclasses import dataclass, field
from pathlib import Path
import os

from dotenv import load_dotenv


load_dotenv()


# Currencies the rates provider quotes against each other
SUPPORTED_CURRENCIES: dict[str, str] = {
    "EUR": "Euro",
    "USD": "US Dollar",
    "GBP": "British Pound",
    "CHF": "Swiss Franc",
    "SEK": "Swedish Krona",
    "NOK": "Norwegian Krone",
    "DKK": "Danish Krone",
    "PLN": "Polish Zloty",
    "CZK": "Czech Koruna",
    "HUF": "Hungarian Forint",
    "RON": "Romanian Leu",
    "BGN": "Bulgarian Lev",
    "HRK": "Croatian Kuna",
    "ISK": "Icelandic Krona",
}


@dataclass
class Settings:
    """Application settings."""

    api_base_url: str = field(
        default_factory=lambda: os.getenv("FX_API_BASE_URL", "https://api.frankfurter.app")
    )
    cache_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv("FX_CACHE_DIR", Path(__file__).parent.parent.parent / "cache")
        )
    )
    cache_ttl_hours: float = field(
        default_factory=lambda: float(os.getenv("FX_CACHE_TTL_HOURS", "24"))
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("FX_REQUEST_TIMEOUT", "30"))
    )
    request_delay: float = field(
        default_factory=lambda: float(os.getenv("FX_REQUEST_DELAY", "0.1"))
    )
    default_base: str = "EUR"
    default_target: str = "GBP"
    default_days: int = 30
    default_predict: int = 7
    db_path: Path = field(init=False)

    def __post_init__(self) -> None:
        self.cache_dir = Path(self.cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.db_path = self.cache_dir / "rates.db"

    def validate(self) -> None:
        """Validate settings before talking to the provider."""
        if self.cache_ttl_hours <= 0:
            raise ValueError(f"FX_CACHE_TTL_HOURS must be positive, got {self.cache_ttl_hours}")
        if self.request_timeout <= 0:
            raise ValueError(f"FX_REQUEST_TIMEOUT must be positive, got {self.request_timeout}")
        for code in (self.default_base, self.default_target):
            if code.upper() not in SUPPORTED_CURRENCIES:
                raise ValueError(f"Unsupported default currency: {code}")
