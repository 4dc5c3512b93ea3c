from unittest.mock import MagicMock, patch

import requests

from analytics.n2_1_marketing_ingestion import (
    MARKETING_DATA_ENDPOINT,
    campaigns_from_payload,
    fetch_marketing_data,
)


def _response(payload=None, status_error=None, json_error=None):
    response = MagicMock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@patch("analytics.n2_1_marketing_ingestion.requests.get")
def test_fetch_returns_decoded_payload(mock_get):
    mock_get.return_value = _response({"campaigns": [{"spend": 1}]})

    payload = fetch_marketing_data("https://example.test/data")

    assert payload == {"campaigns": [{"spend": 1}]}
    assert mock_get.call_args[0][0] == "https://example.test/data"


@patch("analytics.n2_1_marketing_ingestion.requests.get")
def test_fetch_defaults_to_configured_endpoint(mock_get):
    mock_get.return_value = _response({})

    fetch_marketing_data()

    assert mock_get.call_args[0][0] == MARKETING_DATA_ENDPOINT


@patch("analytics.n2_1_marketing_ingestion.requests.get")
def test_fetch_http_error_returns_none(mock_get, caplog):
    mock_get.return_value = _response(
        status_error=requests.HTTPError("500 Server Error")
    )

    assert fetch_marketing_data("https://example.test/data") is None
    assert "Error fetching marketing data" in caplog.text


@patch("analytics.n2_1_marketing_ingestion.requests.get")
def test_fetch_network_error_returns_none(mock_get):
    mock_get.side_effect = requests.ConnectionError("boom")

    assert fetch_marketing_data("https://example.test/data") is None


@patch("analytics.n2_1_marketing_ingestion.requests.get")
def test_fetch_invalid_json_returns_none(mock_get):
    mock_get.return_value = _response(json_error=ValueError("Expecting value"))

    assert fetch_marketing_data("https://example.test/data") is None


def test_campaigns_from_payload():
    assert campaigns_from_payload(None) == []
    assert campaigns_from_payload([1, 2]) == []
    assert campaigns_from_payload({"campaigns": "nope"}) == []
    assert campaigns_from_payload({}) == []
    assert campaigns_from_payload({"campaigns": [{"spend": 5}, "x"]}) == [
        {"spend": 5},
        {},
    ]
