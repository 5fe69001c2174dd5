"""Streamlit dashboard for exchange-rate trends.

Run with: streamlit run fx_trend_report/ui/dashboard.py
"""

import streamlit as st
import pandas as pd

from fx_trend_report.config import Settings, SUPPORTED_CURRENCIES
from fx_trend_report.data import RatesFetcher
from fx_trend_report.errors import DataFetchError, TrendAnalysisError
from fx_trend_report.models import ForecastMethod
from fx_trend_report.ui.charts import TREND_COLORS, build_figure
from fx_trend_report.ui.report import TrendReport, build_report
from fx_trend_report.utils import format_percentage


def predictions_frame(report: TrendReport) -> pd.DataFrame:
    """Prediction table for display."""
    if not report.predictions:
        return pd.DataFrame(columns=["predicted", "confidence", "method"])
    return pd.DataFrame([p.to_dict() for p in report.predictions]).set_index("date")


def render_metrics(report: TrendReport) -> None:
    """Render headline metric cards."""
    metrics = report.metrics
    color = TREND_COLORS[metrics.trend]

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Rate", f"{metrics.current:.4f}", format_percentage(metrics.change_percent))
    col2.markdown(
        f"""<div style="font-size: 0.85rem; color: #64748b;">Trend</div>
        <div style="font-size: 1.8rem; font-weight: 600; color: {color};">{metrics.trend.value.upper()}</div>""",
        unsafe_allow_html=True,
    )
    col3.metric("Volatility", f"{metrics.volatility:.4f}")
    if report.expected_change is not None:
        col4.metric("Expected Change", format_percentage(report.expected_change))

    averages = metrics.moving_averages
    st.caption(
        f"Mean {metrics.mean:.4f} | Median {metrics.median:.4f} | "
        f"Range {metrics.min:.4f} - {metrics.max:.4f} | "
        f"MA7 {averages.ma7:.4f} | MA14 {averages.ma14:.4f} | MA30 {averages.ma30:.4f}"
    )


def main() -> None:
    """Main dashboard entry point."""
    st.set_page_config(
        page_title="FX Trend Report",
        page_icon="",
        layout="wide",
    )

    settings = Settings()
    codes = list(SUPPORTED_CURRENCIES.keys())

    with st.sidebar:
        base = st.selectbox("Base", codes, index=codes.index(settings.default_base))
        target = st.selectbox("Target", codes, index=codes.index(settings.default_target))
        days = st.slider("History (days)", min_value=7, max_value=365, value=settings.default_days)
        predict = st.slider("Predict (days)", min_value=0, max_value=30, value=settings.default_predict)
        method = st.radio("Method", [m.value for m in ForecastMethod], index=2)

    st.title(f"{base}/{target} Currency Trend Report")

    if base == target:
        st.info("Pick two different currencies.")
        return

    try:
        with st.spinner("Loading..."):
            with RatesFetcher(settings) as fetcher:
                series = fetcher.fetch_historical_rates(base, target, days)
            report = build_report(series, predict, method)
    except (DataFetchError, TrendAnalysisError) as e:
        st.error(f"Could not build report: {e}")
        return

    render_metrics(report)
    st.plotly_chart(build_figure(report), use_container_width=True)

    if report.predictions:
        st.subheader("Predictions")
        st.dataframe(predictions_frame(report), use_container_width=True)


if __name__ == "__main__":
    main()
