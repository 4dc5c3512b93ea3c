# notebook 4- 2- dashboard refresh

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from tqdm import tqdm

# -------------------------------
# Core pipeline modules
# -------------------------------
from analytics.n2_1_marketing_ingestion import (
    campaigns_from_payload,
    fetch_marketing_data,
)

from analytics.n3_2_demographics import (
    aggregate_age_totals,
    aggregate_gender_age_totals,
    aggregate_gender_totals,
    build_gender_age_table_rows,
    order_age_groups,
)
from analytics.n3_3_devices import aggregate_device_performance, device_metrics_records
from analytics.n3_4_regions import aggregate_regional_performance
from analytics.n3_5_weekly import aggregate_weekly_performance

from analytics.n4_1_presentation import (
    AGE_REVENUE_COLOR_MAP,
    AGE_SPEND_COLOR_MAP,
    DEFAULT_REVENUE_COLOR,
    DEFAULT_SPEND_COLOR,
    REGION_REVENUE_COLOR,
    REGION_SPEND_COLOR,
    build_age_series,
    build_device_cards,
    build_device_insights,
    build_device_series,
    build_gender_cards,
    build_region_map_points,
    build_region_summary,
    build_weekly_range_summary,
    build_weekly_series,
)

# ===================================================
# CONFIG
# ===================================================
VIEW_NAMES = ["demographic", "device", "region", "weekly"]


# ===================================================
# INGEST
# ===================================================
def load_campaigns(endpoint: Optional[str] = None) -> List[Dict[str, Any]]:
    """Fetch once and unwrap; any failure means no campaigns."""
    return campaigns_from_payload(fetch_marketing_data(endpoint))


# ===================================================
# VIEW MODELS
# ===================================================
def build_demographic_view(campaigns: Sequence[Any]) -> Dict[str, Any]:
    gender_totals = aggregate_gender_totals(campaigns)
    age_totals = aggregate_age_totals(campaigns)
    gender_age_totals = aggregate_gender_age_totals(campaigns)

    ordered_age_groups = order_age_groups(age_totals.index)

    return {
        "cards": build_gender_cards(gender_totals),
        "age_spend": build_age_series(
            age_totals,
            ordered_age_groups,
            "spend",
            AGE_SPEND_COLOR_MAP,
            DEFAULT_SPEND_COLOR,
        ),
        "age_revenue": build_age_series(
            age_totals,
            ordered_age_groups,
            "revenue",
            AGE_REVENUE_COLOR_MAP,
            DEFAULT_REVENUE_COLOR,
        ),
        "male_table": build_gender_age_table_rows(
            gender_age_totals["male"], ordered_age_groups
        ),
        "female_table": build_gender_age_table_rows(
            gender_age_totals["female"], ordered_age_groups
        ),
    }


def build_device_view(campaigns: Sequence[Any]) -> Dict[str, Any]:
    device_totals = aggregate_device_performance(campaigns)

    return {
        "metrics": device_metrics_records(device_totals),
        "cards": build_device_cards(device_totals),
        "spend": build_device_series(device_totals, "spend"),
        "revenue": build_device_series(device_totals, "revenue"),
        "conversions": build_device_series(device_totals, "conversions"),
        "insights": build_device_insights(device_totals),
    }


def build_region_view(campaigns: Sequence[Any]) -> Dict[str, Any]:
    region_totals = aggregate_regional_performance(campaigns)

    return {
        "summary": build_region_summary(region_totals),
        "revenue_points": build_region_map_points(
            region_totals, "revenue", REGION_REVENUE_COLOR
        ),
        "spend_points": build_region_map_points(
            region_totals, "spend", REGION_SPEND_COLOR
        ),
    }


def build_weekly_view(campaigns: Sequence[Any]) -> Dict[str, Any]:
    weekly = aggregate_weekly_performance(campaigns)

    return {
        "revenue": build_weekly_series(weekly, "revenue"),
        "spend": build_weekly_series(weekly, "spend"),
        "weeks": weekly.to_dict(orient="records"),
        "range_summary": build_weekly_range_summary(weekly),
        "week_count": int(len(weekly)),
    }


VIEW_BUILDERS = {
    "demographic": build_demographic_view,
    "device": build_device_view,
    "region": build_region_view,
    "weekly": build_weekly_view,
}


# ===================================================
# DASHBOARD REFRESH PIPELINE
# ===================================================
def run_dashboard_refresh(
        *,
        endpoint: Optional[str] = None,
        campaigns: Optional[Sequence[Any]] = None,
        show_progress: bool = False,
) -> Dict[str, Any]:
    """
    Fetch + aggregate every view in one pass.

    Flow:
    marketing endpoint
    -> campaign list
    -> demographic / device / region / weekly aggregation
    -> presentation view models

    Pass `campaigns` to skip the fetch. Nothing is cached between runs.
    """
    if show_progress:
        print("\n==============================")
        print("🔄 DASHBOARD REFRESH START")
        print("==============================")

    pbar = tqdm(
        total=len(VIEW_NAMES) + 1,
        desc="Dashboard",
        unit="step",
        disable=not show_progress,
    )

    # -------------------------------------------------
    # 0. INGEST
    # -------------------------------------------------
    if campaigns is None:
        campaigns = load_campaigns(endpoint)
    pbar.update(1)

    # -------------------------------------------------
    # 1. AGGREGATE + ADAPT (independent per view)
    # -------------------------------------------------
    views: Dict[str, Any] = {"campaign_count": len(campaigns)}

    for name in VIEW_NAMES:
        views[name] = VIEW_BUILDERS[name](campaigns)
        pbar.update(1)

    pbar.close()

    if show_progress:
        print("✅ DASHBOARD REFRESH COMPLETE.")
        print(f"Campaigns -> {len(campaigns)}")

    return views
