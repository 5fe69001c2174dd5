"""Plotly charts and self-contained HTML export."""

from pathlib import Path

import plotly.graph_objects as go

from fx_trend_report.models import Trend
from fx_trend_report.ui.report import TrendReport


TREND_COLORS = {
    Trend.UP: "#10b981",
    Trend.DOWN: "#ef4444",
    Trend.STABLE: "#f59e0b",
}


def build_figure(report: TrendReport) -> go.Figure:
    """Historical rates with moving-average reference lines and the forecast."""
    series = report.series
    metrics = report.metrics

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=series.dates, y=series.rates,
        mode="lines+markers", line=dict(color="#3b82f6", width=2),
        marker=dict(size=4),
        name=f"{report.base}/{report.target}",
        hovertemplate="%{x|%Y-%m-%d}: %{y:.4f}<extra></extra>",
    ))

    fig.add_hline(
        y=metrics.moving_averages.ma7, line_dash="dot", line_color="#94a3b8", line_width=1,
        annotation_text="MA7", annotation_position="top left",
    )
    fig.add_hline(
        y=metrics.moving_averages.ma14, line_dash="dot", line_color="#64748b", line_width=1,
        annotation_text="MA14", annotation_position="bottom left",
    )

    if report.predictions:
        # Join the forecast to the last observation so the line is continuous
        x = [series.last_date] + [p.date for p in report.predictions]
        y = [series.rates[-1]] + [p.predicted for p in report.predictions]
        confidence = [None] + [p.confidence for p in report.predictions]
        method = report.predictions[0].method.value

        fig.add_trace(go.Scatter(
            x=x, y=y, customdata=confidence,
            mode="lines+markers",
            line=dict(color=TREND_COLORS[metrics.trend], width=2, dash="dash"),
            marker=dict(size=5),
            name=f"Forecast ({method})",
            hovertemplate="%{x|%Y-%m-%d}: %{y:.4f} (confidence %{customdata:.0f}%)<extra></extra>",
        ))

    fig.update_layout(
        title=f"{report.base}/{report.target} trend: {metrics.trend.value}",
        height=420,
        margin=dict(l=40, r=20, t=60, b=40),
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        yaxis=dict(title="Rate", tickformat=".4f"),
    )

    return fig


def export_html(report: TrendReport, output_path: Path | str | None = None) -> Path:
    """
    Write the report chart as a self-contained HTML file.

    Args:
        report: Report to draw
        output_path: Where to save the file. Defaults to dist/<BASE>_<TARGET>_trend.html

    Returns:
        Path to the generated file
    """
    if output_path is None:
        output_path = Path("dist") / f"{report.base}_{report.target}_trend.html"
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig = build_figure(report)
    fig.write_html(str(output_path), include_plotlyjs=True, full_html=True)
    return output_path
