"""Shared fixtures for Celenium API tests."""

import json
from unittest.mock import MagicMock, patch

import pytest

from celestia_agent.tools.celestia.celestia_client import celestia_client


def full_stats_payload(**overrides):
    """Builds a complete stats body with every field set to "0"."""
    payload = {
        "tx_count": "0",
        "block_time": "0",
        "gas_limit": "0",
        "gas_used": "0",
        "square_size": "0",
        "bytes_in_block": "0",
        "events_count": "0",
        "blobs_count": "0",
        "blobs_size": "0",
        "fee": "0",
        "supply_change": "0",
        "inflation_rate": "0",
        "fill_rate": "0",
        "rewards": "0",
        "commissions": "0",
    }
    payload.update(overrides)
    return payload


def make_response(status_code=200, body=None, text=None):
    """Returns a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text if text is not None else json.dumps(body)
    return response


@pytest.fixture
def mock_session():
    """Replaces the shared client's HTTP session."""
    session = MagicMock()
    with patch.object(celestia_client, "session", session):
        yield session
