# notebook 3- 4-regional aggregation

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Sequence

import pandas as pd

from analytics.n1_1_cleaning import normalize_key
from analytics.n2_2_campaign_frames import build_region_frame

logger = logging.getLogger(__name__)

# ---------------------------------
# Static geocoding (lowercase city -> lat / lon)
# ---------------------------------
REGION_COORDINATES: Dict[str, Dict[str, float]] = {
    "abu dhabi": {"lat": 24.4539, "lon": 54.3773},
    "al ain": {"lat": 24.1302, "lon": 55.8023},
    "al khobar": {"lat": 26.2172, "lon": 50.1971},
    "dammam": {"lat": 26.4207, "lon": 50.088},
    "doha": {"lat": 25.2854, "lon": 51.531},
    "dubai": {"lat": 25.2048, "lon": 55.2708},
    "fujairah": {"lat": 25.1288, "lon": 56.3265},
    "jeddah": {"lat": 21.4858, "lon": 39.1925},
    "kuwait city": {"lat": 29.3786, "lon": 47.9903},
    "manama": {"lat": 26.2235, "lon": 50.5876},
    "muscat": {"lat": 23.588, "lon": 58.3829},
    "ras al khaimah": {"lat": 25.8007, "lon": 55.9762},
    "riyadh": {"lat": 24.7136, "lon": 46.6753},
    "sharjah": {"lat": 25.3463, "lon": 55.4211},
    "shuwaikh": {"lat": 29.3499, "lon": 47.9647},
    "ajman": {"lat": 25.4052, "lon": 55.5136},
    "bahrain": {"lat": 26.0667, "lon": 50.5577},
}

REGION_OUTPUT_COLUMNS = [
    "region",
    "country",
    "latitude",
    "longitude",
    "spend",
    "revenue",
]


def aggregate_regional_performance(
        campaigns: Sequence[Any],
        coordinates: Mapping[str, Mapping[str, float]] = REGION_COORDINATES,
) -> pd.DataFrame:
    """
    Spend / revenue per mapped city, sorted by revenue (desc).

    - region names are matched trimmed + lowercased
    - cities missing from the coordinate table are dropped and
      reported once as a warning
    - display name, country and coordinates come from the first
      matching entry seen
    """
    df = build_region_frame(campaigns)
    df["region_key"] = [normalize_key(v) for v in df["region"]]

    matched = df["region_key"].isin(list(coordinates.keys()))

    missing = sorted({str(v) for v in df.loc[~matched, "region"]})
    if missing:
        logger.warning("Missing coordinates for regions: %s", missing)

    df = df[matched]

    if df.empty:
        return pd.DataFrame(
            columns=REGION_OUTPUT_COLUMNS,
            index=pd.Index([], name="region_key"),
        ).astype({"spend": float, "revenue": float})

    first_seen = df.drop_duplicates("region_key").set_index("region_key")
    sums = df.groupby("region_key", sort=False)[["spend", "revenue"]].sum()

    result = first_seen[["region", "country"]].join(sums)
    result["latitude"] = [float(coordinates[k]["lat"]) for k in result.index]
    result["longitude"] = [float(coordinates[k]["lon"]) for k in result.index]

    return result[REGION_OUTPUT_COLUMNS].sort_values(
        "revenue",
        ascending=False,
        kind="mergesort",
    )
