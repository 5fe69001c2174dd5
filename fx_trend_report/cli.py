"""Command-line trend report."""

import argparse
import logging
import sys

from rich.console import Console

from fx_trend_report.analysis import TrendEngine
from fx_trend_report.config import Settings, SUPPORTED_CURRENCIES
from fx_trend_report.data import RatesFetcher
from fx_trend_report.errors import DataFetchError, TrendAnalysisError, UnsupportedCurrencyError
from fx_trend_report.models import ForecastMethod
from fx_trend_report.ui.charts import export_html
from fx_trend_report.ui.report import TrendReport, build_report
from fx_trend_report.ui.terminal import render_report
from fx_trend_report.utils import validate_currency_code


logger = logging.getLogger(__name__)

EPILOG = """\
examples:
  # EUR/GBP trend for the last 30 days with a 7-day prediction
  fx-trend-report

  # EUR/CHF over 60 days, 14-day prediction
  fx-trend-report --from EUR --to CHF --days 60 --predict 14

  # Output as JSON
  fx-trend-report --format json
"""


def parse_args(argv: list[str] | None = None, settings: Settings | None = None) -> argparse.Namespace:
    settings = settings or Settings()
    parser = argparse.ArgumentParser(
        prog="fx-trend-report",
        description="Exchange-rate trend report",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-f", "--from", dest="base", default=settings.default_base,
        help=f"Base currency (default: {settings.default_base})",
    )
    parser.add_argument(
        "-t", "--to", dest="target", default=settings.default_target,
        help=f"Target currency (default: {settings.default_target})",
    )
    parser.add_argument(
        "-d", "--days", type=int, default=settings.default_days,
        help=f"Days of historical data (default: {settings.default_days})",
    )
    parser.add_argument(
        "-p", "--predict", type=int, default=settings.default_predict,
        help=f"Days to predict ahead, 0 to skip (default: {settings.default_predict})",
    )
    parser.add_argument(
        "-m", "--method", choices=[m.value for m in ForecastMethod],
        default=ForecastMethod.COMBINED.value,
        help="Forecast method (default: combined)",
    )
    parser.add_argument(
        "--format", choices=["text", "json"], default="text",
        help="Output format (default: text)",
    )
    parser.add_argument("--html", metavar="PATH", help="Also write an HTML chart to PATH")
    parser.add_argument(
        "--offline", action="store_true",
        help="Use cached data only, never call the rates API",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show progress")
    verbosity.add_argument("--debug", action="store_true", help="Show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show errors")
    return parser.parse_args(argv)


def configure_logging(args: argparse.Namespace) -> None:
    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def generate_trend_report(
    args: argparse.Namespace,
    fetcher: RatesFetcher,
    engine: TrendEngine | None = None,
) -> TrendReport:
    """Fetch the series named by args and analyze it."""
    for code in (args.base, args.target):
        if not validate_currency_code(code):
            raise UnsupportedCurrencyError(
                f"Invalid currency: {code}. Available: {', '.join(SUPPORTED_CURRENCIES)}"
            )
    if args.days <= 0:
        raise ValueError(f"--days must be positive, got {args.days}")
    if args.predict < 0:
        raise ValueError(f"--predict must not be negative, got {args.predict}")

    logger.info("Fetching historical rates...")
    series = fetcher.fetch_historical_rates(args.base, args.target, args.days)

    logger.info("Analyzing trends...")
    report = build_report(series, args.predict, args.method, engine)
    logger.info(f"Generated {len(report.predictions)} prediction(s)")
    return report


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    settings = Settings()
    args = parse_args(argv, settings)
    configure_logging(args)

    try:
        with RatesFetcher(settings, offline=args.offline) as fetcher:
            report = generate_trend_report(args, fetcher)
    except (DataFetchError, TrendAnalysisError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.format == "json":
        print(report.to_json())
    else:
        render_report(report, Console())

    if args.html:
        path = export_html(report, args.html)
        logger.info(f"Wrote chart to {path}")


if __name__ == "__main__":
    main()
