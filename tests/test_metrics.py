import math

import pandas as pd

from analytics.n3_1_metrics import (
    attach_derived_metrics,
    conversion_rate,
    ctr,
    roas,
    traffic_share,
)


def test_scalar_metrics():
    assert ctr(50, 1000) == 5.0
    assert conversion_rate(5, 50) == 10.0
    assert roas(300, 100) == 3.0
    assert traffic_share(25, 100) == 25.0


def test_zero_denominator_policy():
    assert ctr(10, 0) == 0.0
    assert conversion_rate(3, 0) == 0.0
    assert traffic_share(0, 0) == 0.0
    assert roas(0, 0) is None
    assert roas(100, 0) is None
    assert roas(0, 50) == 0.0
    assert ctr(5, -10) == 0.0


def test_attach_derived_metrics_on_zero_rows():
    df = pd.DataFrame(
        {
            "spend": [0.0, 100.0],
            "revenue": [0.0, 250.0],
            "impressions": [0.0, 1000.0],
            "clicks": [0.0, 40.0],
            "conversions": [0.0, 4.0],
        },
        index=["empty", "busy"],
    )

    out = attach_derived_metrics(df)

    assert out.loc["empty", "ctr"] == 0.0
    assert out.loc["empty", "conversion_rate"] == 0.0
    assert out.loc["empty", "traffic_share"] == 0.0
    assert math.isnan(out.loc["empty", "roas"])

    assert out.loc["busy", "ctr"] == 4.0
    assert out.loc["busy", "conversion_rate"] == 10.0
    assert out.loc["busy", "roas"] == 2.5
    assert out.loc["busy", "traffic_share"] == 100.0
    assert "ctr" not in df.columns
