# notebook 3- 1-derived metrics

# ========================================================
# MARK: Derived metrics (CTR, CVR, ROAS, traffic share)
# ========================================================

from __future__ import annotations

import math
from typing import Optional

import numpy as np
import pandas as pd

# Denominator <= 0 -> 0 for every rate except ROAS, which is None.


def _ratio(numerator: float, denominator: float) -> Optional[float]:
    if denominator is None or not denominator > 0:
        return None

    value = numerator / denominator
    return value if math.isfinite(value) else None


def ctr(clicks: float, impressions: float) -> float:
    """Click-through rate in percent."""
    value = _ratio(clicks, impressions)
    return value * 100 if value is not None else 0.0


def conversion_rate(conversions: float, clicks: float) -> float:
    """Conversions per click in percent."""
    value = _ratio(conversions, clicks)
    return value * 100 if value is not None else 0.0


def roas(revenue: float, spend: float) -> Optional[float]:
    """Return on ad spend; None when spend is not positive."""
    return _ratio(revenue, spend)


def traffic_share(clicks: float, total_clicks: float) -> float:
    value = _ratio(clicks, total_clicks)
    return value * 100 if value is not None else 0.0


# ----------------------------------
# Vectorised variants
# ----------------------------------
def _ratio_series(numerator: pd.Series, denominator: pd.Series) -> pd.Series:
    return (
        numerator / denominator.where(denominator > 0)
    ).replace([np.inf, -np.inf], np.nan)


def attach_derived_metrics(
        df: pd.DataFrame,
        *,
        total_clicks: Optional[float] = None,
) -> pd.DataFrame:
    """
    Add derived metric columns to an accumulated metrics frame.

    Adds whichever the input columns allow:
    - ctr              (clicks / impressions * 100)
    - conversion_rate  (conversions / clicks * 100)
    - roas             (revenue / spend, NaN when not computable)
    - traffic_share    (clicks / total_clicks * 100)

    total_clicks defaults to the sum of the frame's clicks.
    """
    df = df.copy()

    if {"clicks", "impressions"}.issubset(df.columns):
        df["ctr"] = (_ratio_series(df["clicks"], df["impressions"]) * 100).fillna(0.0)

    if {"conversions", "clicks"}.issubset(df.columns):
        df["conversion_rate"] = (
            _ratio_series(df["conversions"], df["clicks"]) * 100
        ).fillna(0.0)

    if {"revenue", "spend"}.issubset(df.columns):
        # NaN on purpose: "not computable" is not the same as zero
        df["roas"] = _ratio_series(df["revenue"], df["spend"])

    if "clicks" in df.columns:
        if total_clicks is None:
            total_clicks = float(df["clicks"].sum())
        df["traffic_share"] = [
            traffic_share(clicks, total_clicks) for clicks in df["clicks"]
        ]

    return df
