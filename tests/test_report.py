"""Tests for report assembly and its text, JSON and chart renderings."""

import io
import json

import pytest
from rich.console import Console

from fx_trend_report.models import ForecastMethod
from fx_trend_report.ui.charts import build_figure, export_html
from fx_trend_report.ui.report import build_report
from fx_trend_report.ui.terminal import confidence_style, render_report, sparkline
from fx_trend_report.utils import percentage_change, round_currency


def test_build_report_combined(reference_series):
    report = build_report(reference_series, 3)

    assert len(report.predictions) == 3
    assert all(p.method is ForecastMethod.COMBINED for p in report.predictions)

    average = sum(p.predicted for p in report.predictions) / 3
    assert report.expected_change == round_currency(percentage_change(report.metrics.current, average))


def test_build_report_without_predictions(reference_series):
    report = build_report(reference_series, 0)
    assert report.predictions == []
    assert report.expected_change is None


def test_build_report_method(reference_series):
    report = build_report(reference_series, 2, method="linear")
    assert [p.method for p in report.predictions] == [ForecastMethod.LINEAR] * 2


def test_report_json_document(reference_series):
    document = json.loads(build_report(reference_series, 2).to_json())

    assert document["base"] == "EUR"
    assert document["target"] == "GBP"
    assert document["period"] == {"start": "2024-01-01", "end": "2024-01-08", "days": 8}
    assert document["metrics"]["trend"] == "up"
    assert document["metrics"]["current"] == 0.9
    assert document["metrics"]["moving_averages"]["ma14"] == 0.88
    assert document["predictions"][0]["date"] == "2024-01-09"
    assert document["predictions"][0]["method"] == "combined"
    assert len(document["historical"]) == 8


def test_sparkline():
    assert sparkline([]) == ""
    assert sparkline([2, 2, 2], width=5) == "─────"
    assert sparkline([0, 1], width=2) == "▁█"
    assert len(sparkline([0.86, 0.9, 0.87], width=40)) == 40


@pytest.mark.parametrize("confidence, style", [(95, "green"), (70, "green"), (55, "yellow"), (10, "red")])
def test_confidence_style(confidence, style):
    assert confidence_style(confidence) == style


def test_render_report(reference_series):
    console = Console(file=io.StringIO(), width=100, record=True)
    render_report(build_report(reference_series, 3), console)
    text = console.export_text()

    assert "EUR/GBP Currency Trend Report" in text
    assert "▲ UP" in text
    assert "Rate: 0.9000" in text
    assert "2024-01-09" in text
    assert "Expected Change:" in text


def test_build_figure(reference_series):
    fig = build_figure(build_report(reference_series, 3))

    assert len(fig.data) == 2
    assert fig.data[1].name == "Forecast (combined)"
    # forecast trace starts at the last observation
    assert len(fig.data[1].x) == 4


def test_export_html(tmp_path, reference_series):
    path = export_html(build_report(reference_series, 3), tmp_path / "out" / "chart.html")

    assert path.exists()
    assert "<html" in path.read_text(encoding="utf-8")
