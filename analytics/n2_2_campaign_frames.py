# notebook 2- 2-campaign frames

# ========================================================
# MARK: Flatten nested campaign JSON into tabular frames
# ========================================================

from __future__ import annotations

import math
from typing import Any, Mapping, Sequence

import pandas as pd

from analytics.n1_1_cleaning import (
    as_mapping,
    as_records,
    coerce_numeric_columns,
)

# ----------------------------------
# Canonical columns per breakdown
# ----------------------------------
SEGMENT_COLUMNS = [
    "campaign_idx",
    "campaign_spend",
    "campaign_revenue",
    "age_group",
    "gender",
    "percentage_of_audience",
    "impressions",
    "clicks",
    "conversions",
]

DEVICE_COLUMNS = [
    "campaign_idx",
    "device",
    "impressions",
    "clicks",
    "conversions",
    "spend",
    "revenue",
]

REGION_COLUMNS = [
    "campaign_idx",
    "region",
    "country",
    "spend",
    "revenue",
]

WEEK_COLUMNS = [
    "campaign_idx",
    "week_start",
    "week_end",
    "spend",
    "revenue",
]

SEGMENT_NUMERIC = [
    "campaign_spend",
    "campaign_revenue",
    "impressions",
    "clicks",
    "conversions",
]

METRIC_COLUMNS = ["spend", "revenue", "impressions", "clicks", "conversions"]


def _campaign_records(campaigns: Any) -> list[Mapping[str, Any]]:
    if isinstance(campaigns, (list, tuple)):
        return as_records(campaigns)
    return []


def _percentage(value: Any) -> float:
    """
    Audience percentage used as an allocation weight.
    Absent, non-finite and unparseable values weigh nothing;
    negative weights are clipped to zero.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0

    if not math.isfinite(number):
        return 0.0

    return max(number, 0.0)


# ----------------------------------
# 1. Demographic segments
# ----------------------------------
def build_segment_frame(campaigns: Sequence[Any]) -> pd.DataFrame:
    """
    One row per demographic segment, carrying its campaign's totals.

    Rules:
    - campaigns without segments contribute no rows
    - absent age_group stays None here (labelled by the aggregator)
    - numeric fields are parse-or-zero
    """
    rows: list[dict[str, Any]] = []

    for idx, campaign in enumerate(_campaign_records(campaigns)):
        for segment in as_records(campaign.get("demographic_breakdown")):
            performance = as_mapping(segment.get("performance"))

            rows.append(
                {
                    "campaign_idx": idx,
                    "campaign_spend": campaign.get("spend"),
                    "campaign_revenue": campaign.get("revenue"),
                    "age_group": segment.get("age_group"),
                    "gender": segment.get("gender"),
                    "percentage_of_audience": _percentage(
                        segment.get("percentage_of_audience")
                    ),
                    "impressions": performance.get("impressions"),
                    "clicks": performance.get("clicks"),
                    "conversions": performance.get("conversions"),
                }
            )

    # object dtype keeps labels verbatim (18 must not become 18.0)
    df = pd.DataFrame(rows, columns=SEGMENT_COLUMNS, dtype=object)
    return coerce_numeric_columns(df, SEGMENT_NUMERIC + ["percentage_of_audience"])


# ----------------------------------
# 2. Flat breakdowns (device / region / week)
# ----------------------------------
def _build_breakdown_frame(
        campaigns: Sequence[Any],
        field: str,
        columns: list[str],
        numeric: list[str],
) -> pd.DataFrame:
    rows: list[dict[str, Any]] = []

    for idx, campaign in enumerate(_campaign_records(campaigns)):
        for entry in as_records(campaign.get(field)):
            row: dict[str, Any] = {"campaign_idx": idx}
            for col in columns[1:]:
                row[col] = entry.get(col)
            rows.append(row)

    df = pd.DataFrame(rows, columns=columns, dtype=object)
    return coerce_numeric_columns(df, numeric)


def build_device_frame(campaigns: Sequence[Any]) -> pd.DataFrame:
    return _build_breakdown_frame(
        campaigns,
        "device_performance",
        DEVICE_COLUMNS,
        METRIC_COLUMNS,
    )


def build_region_frame(campaigns: Sequence[Any]) -> pd.DataFrame:
    return _build_breakdown_frame(
        campaigns,
        "regional_performance",
        REGION_COLUMNS,
        ["spend", "revenue"],
    )


def build_week_frame(campaigns: Sequence[Any]) -> pd.DataFrame:
    return _build_breakdown_frame(
        campaigns,
        "weekly_performance",
        WEEK_COLUMNS,
        ["spend", "revenue"],
    )


def empty_metrics_frame(index: list[str], name: str) -> pd.DataFrame:
    """All-zero metrics frame for the given keys."""
    return pd.DataFrame(
        0.0,
        index=pd.Index(index, name=name),
        columns=METRIC_COLUMNS,
    )
