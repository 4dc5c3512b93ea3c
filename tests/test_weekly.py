from analytics.n3_5_weekly import aggregate_weekly_performance


def test_weeks_merge_on_literal_bounds_and_sort_chronologically():
    campaigns = [
        {
            "weekly_performance": [
                {"week_start": "2024-01-15", "week_end": "2024-01-21", "spend": 10, "revenue": 30},
                {"week_start": "2024-01-01", "week_end": "2024-01-07", "spend": 5, "revenue": 8},
            ]
        },
        {
            "weekly_performance": [
                {"week_start": "2024-01-15", "week_end": "2024-01-21", "spend": 2, "revenue": "4"},
                {"week_start": "2024-01-08", "week_end": "2024-01-14", "spend": None, "revenue": 1},
            ]
        },
    ]

    weekly = aggregate_weekly_performance(campaigns)

    assert weekly["week_start"].tolist() == ["2024-01-01", "2024-01-08", "2024-01-15"]
    assert weekly["spend"].tolist() == [5.0, 0.0, 12.0]
    assert weekly["revenue"].tolist() == [8.0, 1.0, 34.0]


def test_differently_formatted_weeks_do_not_merge():
    campaigns = [
        {"weekly_performance": [{"week_start": "2024-01-01", "week_end": "2024-01-07", "spend": 1}]},
        {"weekly_performance": [{"week_start": "2024/01/01", "week_end": "2024/01/07", "spend": 1}]},
    ]

    weekly = aggregate_weekly_performance(campaigns)

    assert len(weekly) == 2


def test_no_weeks():
    weekly = aggregate_weekly_performance([{"spend": 10}])

    assert weekly.empty
    assert list(weekly.columns) == ["week_start", "week_end", "spend", "revenue"]


def test_missing_week_bounds_are_none():
    campaigns = [
        {"weekly_performance": [{"spend": 3}, {"week_start": "2024-01-01", "spend": 1}]},
    ]

    weekly = aggregate_weekly_performance(campaigns)
    records = weekly.to_dict(orient="records")

    assert records[0]["week_start"] == "2024-01-01"
    assert records[0]["week_end"] is None
    assert records[1]["week_start"] is None
    assert records[1]["spend"] == 3.0
