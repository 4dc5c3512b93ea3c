import pandas as pd

from analytics.n3_2_demographics import aggregate_age_totals, aggregate_gender_totals, order_age_groups
from analytics.n3_3_devices import aggregate_device_performance
from analytics.n3_4_regions import aggregate_regional_performance
from analytics.n3_5_weekly import aggregate_weekly_performance
from analytics.n4_1_presentation import (
    AGE_SPEND_COLOR_MAP,
    DEFAULT_SPEND_COLOR,
    build_age_series,
    build_device_cards,
    build_device_insights,
    build_device_series,
    build_gender_cards,
    build_region_map_points,
    build_region_summary,
    build_weekly_chart_frame,
    build_weekly_range_summary,
    build_weekly_series,
    format_count,
    format_currency,
    format_percentage,
    format_roas,
    format_week_label,
)


def test_formatters():
    assert format_currency(1234.5) == "$1,235"
    assert format_currency(0) == "$0"
    assert format_currency(-40.2) == "-$40"
    assert format_count(1234567) == "1,234,567"
    assert format_percentage(12.3456) == "12.35%"
    assert format_percentage(5, decimals=1) == "5.0%"
    assert format_roas(3.21) == "3.2x"
    assert format_roas(None) == "NA"
    assert format_roas(float("nan")) == "NA"
    assert format_week_label("2024-01-05") == "Jan 05"
    assert format_week_label("someday") == "someday"


def test_gender_cards():
    campaigns = [
        {
            "spend": 1000,
            "revenue": 2500.4,
            "demographic_breakdown": [
                {"gender": "male", "age_group": "18-24", "percentage_of_audience": 100,
                 "performance": {"clicks": 1500}},
            ],
        }
    ]

    cards = build_gender_cards(aggregate_gender_totals(campaigns))

    assert [c["title"] for c in cards] == [
        "Total Clicks by Males",
        "Total Spend by Males",
        "Total Revenue by Males",
        "Total Clicks by Females",
        "Total Spend by Females",
        "Total Revenue by Females",
    ]
    assert cards[0]["value"] == "1,500"
    assert cards[1]["value"] == "$1,000"
    assert cards[2]["value"] == "$2,500"
    assert cards[4]["value"] == "$0"


def test_age_series_order_colors_and_zero_filter():
    campaigns = [
        {
            "spend": 30,
            "demographic_breakdown": [
                {"age_group": "Teen", "gender": "male"},
                {"age_group": "55+", "gender": "male"},
                {"age_group": "18-24", "gender": "male"},
            ],
        },
        {
            "spend": 0,
            "demographic_breakdown": [{"age_group": "25-34", "gender": "female"}],
        },
    ]
    totals = aggregate_age_totals(campaigns)

    series = build_age_series(
        totals,
        order_age_groups(totals.index),
        "spend",
        AGE_SPEND_COLOR_MAP,
        DEFAULT_SPEND_COLOR,
    )

    assert [p["label"] for p in series] == ["18-24", "55+", "Teen"]
    assert series[0]["color"] == "#60A5FA"
    assert series[2]["color"] == DEFAULT_SPEND_COLOR
    assert all(p["value"] == 10.0 for p in series)


def test_device_cards_series_and_insights():
    totals = aggregate_device_performance(
        [
            {
                "device_performance": [
                    {"device": "mobile", "impressions": 2000, "clicks": 75, "conversions": 1200, "spend": 100, "revenue": 320},
                    {"device": "desktop", "impressions": 100, "clicks": 25, "conversions": 3, "spend": 0, "revenue": 0},
                ]
            }
        ]
    )

    cards = build_device_cards(totals)
    assert cards[0] == {"title": "Mobile Revenue", "value": "$320"}
    assert cards[2] == {"title": "Mobile Conversions", "value": "1,200"}
    assert cards[3]["title"] == "Desktop Revenue"

    spend = build_device_series(totals, "spend")
    assert spend == [{"label": "Mobile", "value": 100.0, "color": "#60A5FA"}]

    conversions = build_device_series(totals, "conversions")
    assert [p["label"] for p in conversions] == ["Mobile", "Desktop"]

    insights = build_device_insights(totals)
    assert insights["mobile_traffic_share"] == "75.0%"
    assert insights["revenue_delta_label"] == "outpaces"
    assert insights["revenue_delta"] == "$320"
    assert insights["spend_delta_label"] == "exceeds"
    assert insights["details"]["desktop"]["roas"] == "NA"
    assert insights["details"]["mobile"]["roas"] == "3.2x"
    assert insights["details"]["mobile"]["ctr_detail"] == "75 clicks from 2,000 impressions"


def test_region_points_and_summary():
    totals = aggregate_regional_performance(
        [
            {
                "regional_performance": [
                    {"region": "Doha", "country": "Qatar", "spend": 0, "revenue": 900},
                    {"region": "Muscat", "country": "Oman", "spend": 40, "revenue": 100},
                ]
            }
        ]
    )

    revenue = build_region_map_points(totals, "revenue", "#22C55E")
    spend = build_region_map_points(totals, "spend", "#F97316")

    assert [p["id"] for p in revenue] == ["Doha-revenue", "Muscat-revenue"]
    assert revenue[0]["subtitle"] == "Qatar"
    assert revenue[0]["latitude"] == 25.2854
    assert [p["id"] for p in spend] == ["Muscat-spend"]

    summary = build_region_summary(totals)
    assert summary == {
        "total_revenue": "$1,000",
        "total_spend": "$40",
        "region_count": 2,
        "top_region": "Doha",
    }


def test_region_summary_empty():
    totals = aggregate_regional_performance([])

    assert build_region_summary(totals)["top_region"] is None
    assert build_region_map_points(totals, "revenue", "#22C55E") == []


def test_weekly_series_and_range():
    weekly = aggregate_weekly_performance(
        [
            {
                "weekly_performance": [
                    {"week_start": "2024-02-05", "week_end": "2024-02-11", "spend": 7, "revenue": 0},
                    {"week_start": "2024-01-29", "week_end": "2024-02-04", "spend": 3, "revenue": 9},
                ]
            }
        ]
    )

    assert build_weekly_series(weekly, "revenue") == [
        {"label": "Jan 29", "value": 9.0},
        {"label": "Feb 05", "value": 0.0},
    ]
    assert build_weekly_range_summary(weekly) == "Jan 29 - Feb 11"
    assert build_weekly_range_summary(pd.DataFrame()) is None


def test_weekly_chart_frame_handles_mixed_offsets():
    weekly = aggregate_weekly_performance(
        [
            {
                "weekly_performance": [
                    {"week_start": "2024-01-08", "week_end": "2024-01-14", "spend": 2, "revenue": 4},
                    {"week_start": "2024-01-01T00:00:00+04:00", "week_end": "2024-01-07", "spend": 1, "revenue": 3},
                    {"week_start": "not a date", "week_end": "?", "spend": 9, "revenue": 9},
                ]
            }
        ]
    )

    frame = build_weekly_chart_frame(weekly.to_dict(orient="records"))

    assert len(frame) == 2
    assert frame["revenue"].tolist() == [3.0, 4.0]
    assert frame["spend"].tolist() == [1.0, 2.0]
    assert frame.index.is_monotonic_increasing


def test_weekly_chart_frame_empty():
    assert build_weekly_chart_frame([]).empty
