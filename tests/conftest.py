"""Pytest configuration and shared fixtures."""

from typing import Any
from unittest.mock import Mock

import pytest
import requests

from api.client import ApiClient

from tests.helpers import TEST_API_KEY, make_response, status_block


@pytest.fixture
def mock_session():
    session = Mock(spec=requests.Session)
    session.get.return_value = make_response(200, {"data": [], "status": status_block()})
    return session


@pytest.fixture
def client(mock_session):
    c = ApiClient(TEST_API_KEY, api_url="https://pro-api.coinmarketcap.com")
    c.http.session = mock_session
    return c


@pytest.fixture
def listings_body() -> dict[str, Any]:
    return {
        "data": [
            {
                "id": 1,
                "name": "Bitcoin",
                "symbol": "BTC",
                "slug": "bitcoin",
                "cmc_rank": 1,
                "num_market_pairs": 500,
                "circulating_supply": 16950100,
                "total_supply": 16950100,
                "max_supply": 21000000,
                "infinite_supply": False,
                "last_updated": "2024-03-01T11:59:00.000Z",
                "date_added": "2013-04-28T00:00:00.000Z",
                "tags": ["mineable"],
                "platform": None,
                "quote": {
                    "USD": {
                        "price": 9283.92,
                        "volume_24h": 7155680000,
                        "percent_change_1h": -0.152774,
                        "percent_change_24h": 0.518894,
                        "percent_change_7d": 0.986573,
                        "market_cap": 158055024432,
                        "last_updated": "2024-03-01T11:59:00.000Z",
                    }
                },
            },
            {
                "id": 1027,
                "name": "Ethereum",
                "symbol": "ETH",
                "slug": "ethereum",
                "cmc_rank": 2,
                "circulating_supply": 120000000,
                "tags": [],
                "platform": None,
                "quote": {"USD": {"price": 3500.5}},
                "brand_new_field": {"unexpected": True},
            },
        ],
        "status": status_block(credit_count=1),
    }
