# notebook 3- 2-demographic aggregation

# ========================================================
# MARK: Gender / Age / Gender x Age aggregation
# ========================================================

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence

import pandas as pd

from analytics.n1_1_cleaning import GENDERS, Gender
from analytics.n2_2_campaign_frames import (
    METRIC_COLUMNS,
    build_segment_frame,
    empty_metrics_frame,
)
from analytics.n3_1_metrics import attach_derived_metrics

# ===================================================
# CONFIG
# ===================================================
AGE_GROUP_ORDER = ["18-24", "25-34", "35-44", "45-54", "55+"]
UNKNOWN_AGE_GROUP = "Unknown"

GENDER_METRICS = ["clicks", "spend", "revenue"]
TABLE_COUNT_COLUMNS = ["impressions", "clicks", "conversions"]


# ----------------------------------
# 1. Share allocation
# ----------------------------------
def allocate_segment_shares(segments: pd.DataFrame) -> pd.DataFrame:
    """
    Distribute each campaign's spend/revenue across its segments.

    Per campaign:
    - percentages summing to > 0  -> share = pct / sum(pct)
    - otherwise                    -> share = 1 / segment_count

    Shares of one campaign always sum to 1, so allocated spend
    sums back to the campaign total.
    """
    df = segments.copy()

    if df.empty:
        df["share"] = pd.Series(dtype=float)
        df["spend"] = pd.Series(dtype=float)
        df["revenue"] = pd.Series(dtype=float)
        return df

    by_campaign = df.groupby("campaign_idx")
    total_pct = by_campaign["percentage_of_audience"].transform("sum")
    segment_count = df["campaign_idx"].map(df["campaign_idx"].value_counts())

    weighted = df["percentage_of_audience"] / total_pct.where(total_pct > 0)
    uniform = 1.0 / segment_count

    df["share"] = weighted.where(total_pct > 0, uniform)
    df["spend"] = df["campaign_spend"] * df["share"]
    df["revenue"] = df["campaign_revenue"] * df["share"]

    return df


def _labelled_segments(campaigns: Sequence[Any]) -> pd.DataFrame:
    df = allocate_segment_shares(build_segment_frame(campaigns))

    df["age_group"] = [
        UNKNOWN_AGE_GROUP if _is_missing(v) else str(v) for v in df["age_group"]
    ]
    df["gender_key"] = [Gender.parse(v) for v in df["gender"]]

    return df


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and pd.isna(value))


# ----------------------------------
# 2. Gender aggregator
# ----------------------------------
def aggregate_gender_totals(campaigns: Sequence[Any]) -> pd.DataFrame:
    """
    Clicks, allocated spend and allocated revenue per gender.

    Output is always indexed [male, female]; any other gender
    value (absent included) is left out of these totals.
    """
    df = _labelled_segments(campaigns)
    df = df[df["gender_key"] != Gender.UNRECOGNIZED]

    totals = (
        df.assign(gender=[g.value for g in df["gender_key"]])
        .groupby("gender")[GENDER_METRICS]
        .sum()
    )

    return totals.reindex(
        pd.Index([g.value for g in GENDERS], name="gender"),
        fill_value=0.0,
    ).astype(float)


# ----------------------------------
# 3. Age aggregator
# ----------------------------------
def order_age_groups(labels: Iterable[str]) -> List[str]:
    """
    Canonical age order followed by any other labels, ascending.

    The canonical groups are always listed, observed or not.
    """
    extras = sorted({label for label in labels if label not in AGE_GROUP_ORDER})
    return [*AGE_GROUP_ORDER, *extras]


def _sum_by_age(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty:
        return empty_metrics_frame([], "age_group")

    totals = df.groupby("age_group")[METRIC_COLUMNS].sum().astype(float)
    ordered = [g for g in order_age_groups(totals.index) if g in totals.index]

    return totals.reindex(ordered)


def aggregate_age_totals(campaigns: Sequence[Any]) -> pd.DataFrame:
    """
    Five-field metrics per age group across every segment,
    regardless of gender. Rows follow `order_age_groups`.
    """
    return _sum_by_age(_labelled_segments(campaigns))


# ----------------------------------
# 4. Gender x Age aggregator
# ----------------------------------
def aggregate_gender_age_totals(campaigns: Sequence[Any]) -> Dict[str, pd.DataFrame]:
    """
    Age-keyed metrics computed separately for male and female segments.
    """
    df = _labelled_segments(campaigns)

    return {
        gender.value: _sum_by_age(df[df["gender_key"] == gender])
        for gender in GENDERS
    }


def build_gender_age_table_rows(
        totals: pd.DataFrame,
        ordered_age_groups: Sequence[str],
) -> List[Dict[str, Any]]:
    """
    Table rows for one gender.

    - rows without impressions, clicks or conversions are dropped
    - counts rounded to int, CTR / conversion rate attached
    - sorted by impressions (desc) for initial display
    """
    if totals.empty:
        return []

    order = [*ordered_age_groups]
    order += [g for g in totals.index if g not in order]

    df = totals.reindex([g for g in order if g in totals.index])

    active = (df[TABLE_COUNT_COLUMNS] > 0).any(axis=1)
    df = attach_derived_metrics(df[active])

    if df.empty:
        return []

    df = df.sort_values("impressions", ascending=False, kind="mergesort")

    return [
        {
            "age_group": age_group,
            "impressions": int(round(row["impressions"])),
            "clicks": int(round(row["clicks"])),
            "conversions": int(round(row["conversions"])),
            "ctr": float(row["ctr"]),
            "conversion_rate": float(row["conversion_rate"]),
        }
        for age_group, row in df.iterrows()
    ]
