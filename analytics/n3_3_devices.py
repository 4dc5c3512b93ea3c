# notebook 3- 3-device aggregation

from __future__ import annotations

from typing import Any, Dict, Sequence

import pandas as pd

from analytics.n1_1_cleaning import DEVICES, Device
from analytics.n2_2_campaign_frames import METRIC_COLUMNS, build_device_frame
from analytics.n3_1_metrics import attach_derived_metrics

# ===================================================
# CONFIG
# ===================================================
DEVICE_LABELS = {
    Device.MOBILE.value: "Mobile",
    Device.DESKTOP.value: "Desktop",
}

DEVICE_OUTPUT_COLUMNS = [
    "device",
    *METRIC_COLUMNS,
    "ctr",
    "conversion_rate",
    "roas",
    "traffic_share",
]


def aggregate_device_performance(campaigns: Sequence[Any]) -> pd.DataFrame:
    """
    Mobile vs desktop totals with efficiency metrics.

    - device labels match case-insensitively; anything else
      (tablet, tv, missing ...) is ignored, not bucketed
    - spend / revenue are taken verbatim from each device record
    - both devices are always present, zero-filled when unseen
    - traffic_share is measured against mobile + desktop clicks
    """
    df = build_device_frame(campaigns)
    df["device_key"] = [Device.parse(v) for v in df["device"]]
    df = df[df["device_key"] != Device.UNRECOGNIZED]

    totals = (
        df.assign(device_key=[d.value for d in df["device_key"]])
        .groupby("device_key")[METRIC_COLUMNS]
        .sum()
        .reindex([d.value for d in DEVICES], fill_value=0.0)
        .astype(float)
    )
    totals.index.name = "device_key"

    totals = attach_derived_metrics(totals)
    totals["device"] = [DEVICE_LABELS[key] for key in totals.index]

    return totals[DEVICE_OUTPUT_COLUMNS]


def device_metrics_records(totals: pd.DataFrame) -> Dict[str, Dict[str, Any]]:
    """
    Plain-dict view keyed by device, ROAS NaN -> None.
    """
    records: Dict[str, Dict[str, Any]] = {}

    for key, row in totals.iterrows():
        record = row.to_dict()
        record["roas"] = None if pd.isna(record["roas"]) else float(record["roas"])
        records[key] = record

    return records

