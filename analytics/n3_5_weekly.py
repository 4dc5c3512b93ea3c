# notebook 3- 5-weekly aggregation

from __future__ import annotations

from typing import Any, Sequence

import pandas as pd

from analytics.n2_2_campaign_frames import build_week_frame

WEEK_OUTPUT_COLUMNS = ["week_start", "week_end", "spend", "revenue"]


def aggregate_weekly_performance(campaigns: Sequence[Any]) -> pd.DataFrame:
    """
    Spend / revenue per reporting week, oldest first.

    Weeks are bucketed on the literal (week_start, week_end) strings,
    no calendar normalisation: "2024-01-01" and "2024-1-1" stay apart.
    Unparseable week starts sort last.
    """
    df = build_week_frame(campaigns)

    if df.empty:
        return pd.DataFrame(columns=WEEK_OUTPUT_COLUMNS).astype(
            {"spend": float, "revenue": float}
        )

    df["week_start"] = [None if v is None else str(v) for v in df["week_start"]]
    df["week_end"] = [None if v is None else str(v) for v in df["week_end"]]

    weekly = (
        df.groupby(["week_start", "week_end"], dropna=False, sort=False)[
            ["spend", "revenue"]
        ]
        .sum()
        .reset_index()
    )

    # dropna=False groups come back keyed by NaN
    for col in ["week_start", "week_end"]:
        weekly[col] = weekly[col].astype(object).where(weekly[col].notna(), None)

    weekly["_start_ts"] = pd.to_datetime(
        weekly["week_start"], errors="coerce", format="mixed", utc=True
    )

    weekly = weekly.sort_values(
        "_start_ts",
        kind="mergesort",
        na_position="last",
    )

    return weekly[WEEK_OUTPUT_COLUMNS].reset_index(drop=True)
