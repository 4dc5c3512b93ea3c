# notebook 4- 1-presentation adapters

# ========================================================
# MARK: Aggregates -> cards / chart series / map points
# ========================================================

from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Optional, Sequence, TypedDict, Union

import pandas as pd

from analytics.n1_1_cleaning import DEVICES, GENDERS, Device, to_number


# ===================================================
# OUTPUT SHAPES
# ===================================================
class MetricCard(TypedDict):
    title: str
    value: Union[str, float]


class _ChartPointBase(TypedDict):
    label: str
    value: float


class ChartPoint(_ChartPointBase, total=False):
    color: str


class _MapPointBase(TypedDict):
    id: str
    label: str
    latitude: float
    longitude: float
    value: float


class MapPoint(_MapPointBase, total=False):
    subtitle: str
    color: str


# ===================================================
# COLOURS
# ===================================================
AGE_SPEND_COLOR_MAP = {
    "18-24": "#60A5FA",
    "25-34": "#3B82F6",
    "35-44": "#2563EB",
    "45-54": "#1D4ED8",
    "55+": "#1E40AF",
}

AGE_REVENUE_COLOR_MAP = {
    "18-24": "#FDE68A",
    "25-34": "#FBBF24",
    "35-44": "#F59E0B",
    "45-54": "#D97706",
    "55+": "#B45309",
}

DEFAULT_SPEND_COLOR = "#1E3A8A"
DEFAULT_REVENUE_COLOR = "#92400E"

DEVICE_COLORS = {
    Device.MOBILE.value: "#60A5FA",
    Device.DESKTOP.value: "#F97316",
}

REGION_REVENUE_COLOR = "#22C55E"
REGION_SPEND_COLOR = "#F97316"

# spend / revenue bars hide empty buckets
MONETARY_METRICS = {"spend", "revenue"}


# ===================================================
# FORMATTERS
# ===================================================
def _round_half_up(value: float) -> int:
    return int(math.floor(to_number(value) + 0.5))


def format_currency(value: float) -> str:
    """Whole-dollar USD, e.g. 1234.5 -> "$1,235", -40 -> "-$40"."""
    amount = _round_half_up(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,}"


def format_count(value: float) -> str:
    return f"{_round_half_up(value):,}"


def format_percentage(value: float, decimals: int = 2) -> str:
    return f"{to_number(value):.{decimals}f}%"


def format_roas(value: Optional[float]) -> str:
    if value is None or pd.isna(value):
        return "NA"
    return f"{value:.1f}x"


def format_week_label(iso_date: Any) -> str:
    """"2024-01-05" -> "Jan 05"; unparseable input is echoed back."""
    ts = pd.to_datetime(iso_date, errors="coerce")
    if ts is None or pd.isna(ts):
        return "" if iso_date is None or pd.isna(iso_date) else str(iso_date)
    return ts.strftime("%b %d")


# ===================================================
# DEMOGRAPHIC VIEW
# ===================================================
def build_gender_cards(gender_totals: pd.DataFrame) -> List[MetricCard]:
    """Clicks / spend / revenue cards, males first."""
    cards: List[MetricCard] = []

    for gender in GENDERS:
        row = gender_totals.loc[gender.value]
        noun = "Males" if gender.value == "male" else "Females"
        cards.extend(
            [
                {"title": f"Total Clicks by {noun}", "value": format_count(row["clicks"])},
                {"title": f"Total Spend by {noun}", "value": format_currency(row["spend"])},
                {"title": f"Total Revenue by {noun}", "value": format_currency(row["revenue"])},
            ]
        )

    return cards


def build_age_series(
        age_totals: pd.DataFrame,
        ordered_age_groups: Sequence[str],
        metric: str,
        color_map: Mapping[str, str],
        fallback_color: str,
) -> List[ChartPoint]:
    """
    Bar series over the ordered age groups; non-positive values dropped.
    """
    points: List[ChartPoint] = []

    for label in ordered_age_groups:
        if label not in age_totals.index:
            continue

        value = float(age_totals.at[label, metric])
        if value <= 0:
            continue

        points.append(
            {
                "label": label,
                "value": value,
                "color": color_map.get(label, fallback_color),
            }
        )

    return points


# ===================================================
# DEVICE VIEW
# ===================================================
def build_device_cards(device_totals: pd.DataFrame) -> List[MetricCard]:
    cards: List[MetricCard] = []

    for device in DEVICES:
        row = device_totals.loc[device.value]
        label = row["device"]
        cards.extend(
            [
                {"title": f"{label} Revenue", "value": format_currency(row["revenue"])},
                {"title": f"{label} Spend", "value": format_currency(row["spend"])},
                {"title": f"{label} Conversions", "value": format_count(row["conversions"])},
            ]
        )

    return cards


def build_device_series(device_totals: pd.DataFrame, metric: str) -> List[ChartPoint]:
    points: List[ChartPoint] = []

    for device in DEVICES:
        row = device_totals.loc[device.value]
        value = float(row[metric])

        if metric in MONETARY_METRICS and value <= 0:
            continue

        points.append(
            {
                "label": row["device"],
                "value": value,
                "color": DEVICE_COLORS[device.value],
            }
        )

    return points


def build_device_insights(device_totals: pd.DataFrame) -> Dict[str, Any]:
    """
    Headline comparisons (mobile vs desktop) and per-device
    CTR / ROAS detail lines.
    """
    mobile = device_totals.loc[Device.MOBILE.value]
    desktop = device_totals.loc[Device.DESKTOP.value]

    revenue_delta = float(mobile["revenue"] - desktop["revenue"])
    spend_delta = float(mobile["spend"] - desktop["spend"])

    details = {}
    for device in DEVICES:
        row = device_totals.loc[device.value]
        roas = None if pd.isna(row["roas"]) else float(row["roas"])
        details[device.value] = {
            "ctr": format_percentage(row["ctr"], decimals=1),
            "ctr_detail": (
                f"{format_count(row['clicks'])} clicks from "
                f"{format_count(row['impressions'])} impressions"
            ),
            "roas": format_roas(roas),
            "roas_detail": f"{format_currency(row['revenue'])} revenue",
        }

    return {
        "mobile_traffic_share": format_percentage(mobile["traffic_share"], decimals=1),
        "revenue_delta_label": "outpaces" if revenue_delta >= 0 else "trails",
        "revenue_delta": format_currency(abs(revenue_delta)),
        "spend_delta_label": "exceeds" if spend_delta >= 0 else "lags behind",
        "spend_delta": format_currency(abs(spend_delta)),
        "details": details,
    }


# ===================================================
# REGION VIEW
# ===================================================
def build_region_map_points(
        region_totals: pd.DataFrame,
        metric: str,
        color: str,
) -> List[MapPoint]:
    points: List[MapPoint] = []

    for _, row in region_totals.iterrows():
        value = float(row[metric])
        if value <= 0:
            continue

        point: MapPoint = {
            "id": f"{row['region']}-{metric}",
            "label": str(row["region"]),
            "latitude": float(row["latitude"]),
            "longitude": float(row["longitude"]),
            "value": value,
            "color": color,
        }
        if isinstance(row["country"], str) and row["country"]:
            point["subtitle"] = row["country"]

        points.append(point)

    return points


def build_region_summary(region_totals: pd.DataFrame) -> Dict[str, Any]:
    top_region = None
    if not region_totals.empty:
        top_region = str(region_totals.iloc[0]["region"])

    return {
        "total_revenue": format_currency(region_totals["revenue"].sum()),
        "total_spend": format_currency(region_totals["spend"].sum()),
        "region_count": int(len(region_totals)),
        "top_region": top_region,
    }


# ===================================================
# WEEKLY VIEW
# ===================================================
def build_weekly_series(weekly: pd.DataFrame, metric: str) -> List[ChartPoint]:
    return [
        {"label": format_week_label(row["week_start"]), "value": float(row[metric])}
        for _, row in weekly.iterrows()
    ]


def build_weekly_range_summary(weekly: pd.DataFrame) -> Optional[str]:
    if weekly.empty:
        return None

    first = format_week_label(weekly.iloc[0]["week_start"])
    last = format_week_label(weekly.iloc[-1]["week_end"])
    return f"{first} - {last}"


def build_weekly_chart_frame(weeks: Sequence[Mapping[str, Any]]) -> pd.DataFrame:
    """
    Revenue / spend indexed by parsed week start (UTC), oldest first.

    Offset and plain dates may be mixed; unparseable starts are dropped.
    """
    df = pd.DataFrame(list(weeks), columns=["week_start", "spend", "revenue"])

    df["week"] = pd.to_datetime(
        df["week_start"], errors="coerce", format="mixed", utc=True
    )

    return (
        df.dropna(subset=["week"])
        .sort_values("week", kind="mergesort")
        .set_index("week")[["revenue", "spend"]]
        .astype(float)
    )
