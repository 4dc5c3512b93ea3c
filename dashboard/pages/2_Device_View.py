from __future__ import annotations

import pandas as pd
import streamlit as st

from pipelines.dashboard_refresh import build_device_view, load_campaigns

# =========================================
# PAGE SETUP
# =========================================
st.set_page_config(
    page_title="Device View",
    layout="wide",
)

st.title("📱 Device View")
st.caption(
    "Compare how marketing campaigns perform on mobile versus desktop "
    "across spend, revenue, efficiency, and traffic share."
)

# ========================================
# LOAD DATA
# ========================================
campaigns = load_campaigns()

if not campaigns:
    st.warning("No marketing data available. Check the data source and refresh.")

view = build_device_view(campaigns)
insights = view["insights"]

# ========================================
# CHANNEL OVERVIEW
# ========================================
st.subheader("Channel Overview")
st.caption(f"Mobile share of clicks: {insights['mobile_traffic_share']}")

cols = st.columns(3)
for i, card in enumerate(view["cards"]):
    cols[i % 3].metric(card["title"], card["value"])

st.divider()


def render_bar(title: str, points: list) -> None:
    st.markdown(f"**{title}**")
    if not points:
        st.info("No data available.")
        return
    st.bar_chart(pd.DataFrame(points), x="label", y="value", color="color")


# ========================================
# SPEND & REVENUE
# ========================================
st.subheader("💸 Spend & Revenue Comparison")
st.caption(
    f"Mobile revenue {insights['revenue_delta_label']} desktop by {insights['revenue_delta']}"
)

left, right = st.columns(2)
with left:
    render_bar("Marketing Spend by Device", view["spend"])
with right:
    render_bar("Revenue by Device", view["revenue"])

# ========================================
# CONVERSION INSIGHTS
# ========================================
st.subheader("🎯 Conversion Insights")
st.caption(
    f"Mobile spend {insights['spend_delta_label']} desktop by {insights['spend_delta']}"
)

left, right = st.columns(2)
with left:
    render_bar("Conversions by Device", view["conversions"])

with right:
    st.markdown("**Metric Breakdown**")
    c1, c2 = st.columns(2)
    for col, key, label in [(c1, "mobile", "Mobile"), (c2, "desktop", "Desktop")]:
        detail = insights["details"][key]
        col.metric(f"{label} CTR", detail["ctr"])
        col.caption(detail["ctr_detail"])
        col.metric(f"{label} ROAS", detail["roas"])
        col.caption(detail["roas_detail"])
