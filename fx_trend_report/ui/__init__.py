"""Report building and rendering."""

from fx_trend_report.ui.report import TrendReport, build_report

__all__ = ["TrendReport", "build_report"]
