from __future__ import annotations

import pandas as pd
import streamlit as st

from pipelines.dashboard_refresh import build_demographic_view, load_campaigns

# =========================================
# CONFIG
# =========================================
TABLE_COLUMN_CONFIG = {
    "age_group": st.column_config.TextColumn("Age Group"),
    "impressions": st.column_config.NumberColumn("Impressions", format="%d"),
    "clicks": st.column_config.NumberColumn("Clicks", format="%d"),
    "conversions": st.column_config.NumberColumn("Conversions", format="%d"),
    "ctr": st.column_config.NumberColumn("CTR", format="%.2f%%"),
    "conversion_rate": st.column_config.NumberColumn("Conversion Rate", format="%.2f%%"),
}

st.set_page_config(
    page_title="Demographic View",
    layout="wide",
)

st.title("🧠 Demographic View")
st.caption("Spend, revenue and engagement by gender and age group")

# ========================================
# LOAD DATA
# ========================================
campaigns = load_campaigns()

if not campaigns:
    st.warning("No marketing data available. Check the data source and refresh.")

view = build_demographic_view(campaigns)

# ========================================
# GENDER CARDS
# ========================================
st.subheader("👥 Gender Performance Overview")

cols = st.columns(3)
for i, card in enumerate(view["cards"]):
    cols[i % 3].metric(card["title"], card["value"])

st.divider()

# ========================================
# AGE GROUP CHARTS
# ========================================
st.subheader("📊 Age Group Performance")


def render_bar(title: str, points: list) -> None:
    st.markdown(f"**{title}**")
    if not points:
        st.info("No data available.")
        return
    st.bar_chart(pd.DataFrame(points), x="label", y="value", color="color")


left, right = st.columns(2)

with left:
    render_bar("Total Spend by Age Group", view["age_spend"])

with right:
    render_bar("Total Revenue by Age Group", view["age_revenue"])

# ========================================
# GENDER x AGE TABLES
# ========================================
st.subheader("📋 Campaign Performance by Gender & Age")

left, right = st.columns(2)

for col, title, rows, empty in [
    (left, "Male Age Groups", view["male_table"], "No performance data available for male audiences"),
    (right, "Female Age Groups", view["female_table"], "No performance data available for female audiences"),
]:
    with col:
        st.markdown(f"**Campaign Performance by {title}**")
        if not rows:
            st.info(empty)
        else:
            st.dataframe(
                pd.DataFrame(rows),
                column_config=TABLE_COLUMN_CONFIG,
                use_container_width=True,
            )

st.caption("Spend and revenue are allocated to segments by share of audience.")
