from __future__ import annotations

import streamlit as st

from analytics.n2_1_marketing_ingestion import MARKETING_DATA_ENDPOINT

# ===================================================
# APP CONFIG
# ===================================================
st.set_page_config(
    page_title="Amana Marketing Dashboard",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ===============================================
# HEADER
# ================================================
st.markdown(
    """
    <style>
        .app-title {
            font-size: 26px;
            font-weight: 600;
            margin-bottom: 0;
        }
        .app-subtitle {
            font-size: 14px;
            color: #666;
        }
    </style>
    """,
    unsafe_allow_html=True,
)

st.markdown("<div class='app-title'> 📊 Amana Marketing Dashboard</div>", unsafe_allow_html=True)
st.markdown("<div class='app-subtitle'> Campaign performance by audience, device, region and week</div>", unsafe_allow_html=True)

st.caption(f"Data source: {MARKETING_DATA_ENDPOINT}")

# ===================================================
# SIDEBAR
# ===================================================
st.sidebar.title("Navigation")

st.sidebar.markdown("---")

st.sidebar.caption("Views")

st.sidebar.page_link(
    "pages/1_Demographic_View.py",
    label="🧠 Demographic View",
)

st.sidebar.page_link(
    "pages/2_Device_View.py",
    label="📱 Device View",
)

st.sidebar.page_link(
    "pages/3_Region_View.py",
    label="🗺 Region View",
)

st.sidebar.page_link(
    "pages/4_Weekly_View.py",
    label="📈 Weekly View",
)

# ===================================================
# FOOTER
# ===================================================
st.sidebar.markdown("---")
st.sidebar.caption("© Amana Marketing Analytics")
