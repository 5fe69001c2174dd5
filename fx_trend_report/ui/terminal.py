"""Colored terminal rendering of a trend report."""

import math

from rich.console import Console
from rich.rule import Rule
from rich.table import Table
from rich import box

from fx_trend_report.models import Trend
from fx_trend_report.ui.report import TrendReport
from fx_trend_report.utils import format_percentage


SPARK_CHARS = "▁▂▃▄▅▆▇█"

TREND_LABELS = {
    Trend.UP: ("▲ UP", "green"),
    Trend.DOWN: ("▼ DOWN", "red"),
    Trend.STABLE: ("→ STABLE", "yellow"),
}


def sparkline(values: list[float], width: int = 20) -> str:
    """Draw values as a row of block characters, sampled down to `width`."""
    if not values:
        return ""

    low, high = min(values), max(values)
    span = high - low
    if span == 0:
        return "─" * width

    step = len(values) / width
    chars = []
    for i in range(width):
        value = values[math.floor(i * step)]
        normalized = (value - low) / span
        chars.append(SPARK_CHARS[math.floor(normalized * (len(SPARK_CHARS) - 1))])
    return "".join(chars)


def confidence_style(confidence: float) -> str:
    if confidence >= 70:
        return "green"
    if confidence >= 50:
        return "yellow"
    return "red"


def _signed(value: float) -> str:
    color = "green" if value >= 0 else "red"
    return f"[{color}]{format_percentage(value)}[/{color}]"


def render_report(report: TrendReport, console: Console | None = None) -> None:
    """Print the report as sections: status, history, averages, chart, predictions."""
    console = console or Console()
    metrics = report.metrics
    series = report.series

    console.print()
    console.print(f"[bold blue]{report.base}/{report.target} Currency Trend Report[/bold blue]")
    console.print(Rule(style="blue"))

    label, color = TREND_LABELS[metrics.trend]
    console.print("\n[bold]Current Status[/bold]")
    console.print(f"  Rate: [bold]{metrics.current:.4f}[/bold]")
    console.print(f"  Change: {_signed(metrics.change_percent)}")
    console.print(f"  Trend: [{color}]{label}[/{color}]")

    console.print("\n[bold]Historical Analysis[/bold]")
    console.print(f"  Period: {series.first_date} to {series.last_date}")
    console.print(f"  Mean: {metrics.mean:.4f}")
    console.print(f"  Median: {metrics.median:.4f}")
    console.print(f"  Range: {metrics.min:.4f} - {metrics.max:.4f}")
    console.print(f"  Volatility: {metrics.volatility:.4f}")

    averages = metrics.moving_averages
    console.print("\n[bold]Moving Averages[/bold]")
    console.print(f"  7-day: {averages.ma7:.4f}")
    console.print(f"  14-day: {averages.ma14:.4f}")
    console.print(f"  30-day: {averages.ma30:.4f}")

    console.print("\n[bold]Rate Chart (Last 30 Days)[/bold]")
    chart = sparkline(series.tail(30).rates, width=40)
    console.print(f"  [dim]{metrics.min:.2f}[/dim] {chart} [dim]{metrics.max:.2f}[/dim]")

    if report.predictions:
        console.print("\n[bold]Predictions[/bold]")
        table = Table(box=box.SIMPLE, show_edge=False, padding=(0, 2))
        table.add_column("Date", style="dim")
        table.add_column("Rate", justify="right")
        table.add_column("Confidence", justify="right")
        for p in report.predictions:
            style = confidence_style(p.confidence)
            table.add_row(
                p.date.isoformat(),
                f"{p.predicted:.4f}",
                f"[{style}]{p.confidence:.0f}%[/{style}]",
            )
        console.print(table)

        if report.expected_change is not None:
            console.print(f"  [bold]Expected Change:[/bold] {_signed(report.expected_change)}")

    console.print(Rule(style="blue"))
    console.print()
