# notebook 2- 1-marketing data ingestion

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import requests

from analytics.n1_1_cleaning import as_records

logger = logging.getLogger(__name__)

# ==================================================
# CONFIG
# ==================================================
DEFAULT_MARKETING_DATA_ENDPOINT = (
    "https://www.amanabootcamp.org/api/fs-classwork-data/amana-marketing"
)
MARKETING_DATA_ENDPOINT = os.getenv(
    "MARKETING_DATA_ENDPOINT", DEFAULT_MARKETING_DATA_ENDPOINT
)

REQUEST_TIMEOUT_SECONDS = 30


# ==================================================
# Fetch (single round trip, no retry)
# ==================================================
def fetch_marketing_data(endpoint: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """
    GET the marketing payload and return the decoded JSON body.

    Handles:
    - network failures
    - non-2xx status codes
    - non-JSON bodies

    Every failure is logged and turned into None so the dashboard
    degrades to empty aggregates instead of crashing.
    """
    url = endpoint or MARKETING_DATA_ENDPOINT

    try:
        response = requests.get(url, timeout=REQUEST_TIMEOUT_SECONDS)
        response.raise_for_status()
        return response.json()

    except requests.RequestException as exc:
        logger.error("Error fetching marketing data from %s: %s", url, exc)
        return None

    except ValueError as exc:
        logger.error("Marketing data from %s is not valid JSON: %s", url, exc)
        return None


def campaigns_from_payload(payload: Any) -> List[Dict[str, Any]]:
    """
    Extract the campaign list from a fetched payload.

    None, non-object payloads and a missing / non-list `campaigns`
    field all yield an empty list.
    """
    if not isinstance(payload, dict):
        return []

    return [dict(c) for c in as_records(payload.get("campaigns"))]
