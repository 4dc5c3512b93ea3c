from __future__ import annotations

import math

import pandas as pd
import streamlit as st

from pipelines.dashboard_refresh import build_region_view, load_campaigns

# =========================================
# CONFIG
# =========================================
MIN_RADIUS_M = 10_000
MAX_RADIUS_M = 50_000

st.set_page_config(
    page_title="Region View",
    layout="wide",
)

# ========================================
# LOAD DATA
# ========================================
campaigns = load_campaigns()
view = build_region_view(campaigns)
summary = view["summary"]

st.title("🗺 Region View")
st.caption(f"Tracking geographic performance across {summary['region_count']} key cities")

if summary["top_region"]:
    c1, c2, c3 = st.columns(3)
    c1.metric("Total Revenue", summary["total_revenue"])
    c2.metric("Total Spend", summary["total_spend"])
    c3.metric("Top City", summary["top_region"])
elif not campaigns:
    st.warning("No marketing data available. Check the data source and refresh.")

st.divider()


# ========================================
# BUBBLE MAPS
# ========================================
def bubble_frame(points: list) -> pd.DataFrame:
    """Circle area scales with value (sqrt radius)."""
    df = pd.DataFrame(points)
    max_value = df["value"].max()
    safe_max = max_value if max_value > 0 else 1

    df["size"] = [
        MIN_RADIUS_M + math.sqrt(v / safe_max) * (MAX_RADIUS_M - MIN_RADIUS_M)
        for v in df["value"]
    ]
    return df


st.subheader("Regional Bubble Heat Maps")
st.caption("Circle area scales with performance size")

left, right = st.columns(2)

for col, title, points, note in [
    (left, "Revenue by Region", view["revenue_points"], "Higher revenue cities appear with larger, green-toned markers."),
    (right, "Spend by Region", view["spend_points"], "Marketing investment levels visualized by spend intensity."),
]:
    with col:
        st.markdown(f"**{title}**")
        if not points:
            st.info("No regional data available.")
            continue

        df = bubble_frame(points)
        st.map(df, latitude="latitude", longitude="longitude", size="size", color="color")
        st.caption(note)
