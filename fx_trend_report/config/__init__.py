"""Application configuration."""

from fx_trend_report.config.settings import Settings, SUPPORTED_CURRENCIES

__all__ = ["Settings", "SUPPORTED_CURRENCIES"]
