from __future__ import annotations

import pandas as pd
import streamlit as st

from analytics.n4_1_presentation import build_weekly_chart_frame, format_currency
from pipelines.dashboard_refresh import build_weekly_view, load_campaigns

# =========================================
# PAGE SETUP
# =========================================
st.set_page_config(
    page_title="Weekly View",
    layout="wide",
)

# ========================================
# LOAD DATA
# ========================================
campaigns = load_campaigns()
view = build_weekly_view(campaigns)

st.title("📈 Weekly View")
if view["range_summary"]:
    st.caption(f"Insights covering {view['range_summary']}")

# ========================================
# WEEKLY TRENDS
# ========================================
st.subheader("Weekly Performance Trends")

if not view["weeks"]:
    st.info("No weekly performance data available.")
    st.stop()

st.caption(f"{view['week_count']} weeks of performance data")

weeks = build_weekly_chart_frame(view["weeks"])

left, right = st.columns(2)

with left:
    st.markdown("**Revenue by Week**")
    st.line_chart(weeks["revenue"])

with right:
    st.markdown("**Spend by Week**")
    st.line_chart(weeks["spend"])

# ========================================
# WEEKLY TOTALS
# ========================================
st.subheader("📋 Weekly Totals")

totals_df = pd.DataFrame(
    {
        "Week": [p["label"] for p in view["revenue"]],
        "Revenue": [format_currency(p["value"]) for p in view["revenue"]],
        "Spend": [format_currency(p["value"]) for p in view["spend"]],
    }
)

st.dataframe(totals_df, hide_index=True, use_container_width=True)
