"""Exchange-rate trend statistics and short-horizon forecasts."""

__version__ = "0.1.0"
