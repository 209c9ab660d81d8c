"""Tests for the command-line script."""

from unittest.mock import patch

import pytest
import requests

from api.client import ApiClient
from app.config import ConfigError
from scripts import cmc_cli

from tests.helpers import make_response, status_block


@pytest.fixture
def patched_client(client):
    with patch.object(cmc_cli, "build_client", return_value=client):
        yield client


def test_listings_prints_rows(patched_client, mock_session, listings_body, capsys):
    mock_session.get.return_value = make_response(200, listings_body)

    assert cmc_cli.main(["listings", "--limit", "2"]) == 0

    out = capsys.readouterr().out
    assert "#1 BTC USD 9,283.9200 24h +0.52%" in out
    assert "#2 ETH USD 3,500.5000 24h n/a" in out
    assert mock_session.get.call_args.kwargs["params"] == {"limit": "2", "convert": "USD"}


def test_listings_convert_is_matched_case_insensitively(patched_client, mock_session, listings_body, capsys):
    mock_session.get.return_value = make_response(200, listings_body)

    assert cmc_cli.main(["listings", "--convert", "usd"]) == 0

    assert "#1 BTC USD 9,283.9200 24h +0.52%" in capsys.readouterr().out
    assert mock_session.get.call_args.kwargs["params"]["convert"] == "usd"


def test_map_prints_rows(patched_client, mock_session, capsys):
    body = {"data": [{"id": 1, "symbol": "BTC", "slug": "bitcoin", "rank": 1}], "status": status_block()}
    mock_session.get.return_value = make_response(200, body)

    assert cmc_cli.main(["map", "--symbol", "BTC"]) == 0

    assert "1 BTC bitcoin rank=1" in capsys.readouterr().out
    assert mock_session.get.call_args.kwargs["params"] == {"symbol": "BTC"}


def test_info_prints_rows(patched_client, mock_session, capsys):
    body = {
        "data": {"bitcoin": {"id": 1, "symbol": "BTC", "name": "Bitcoin", "category": "coin", "urls": {"website": ["https://bitcoin.org/"]}}},
        "status": status_block(),
    }
    mock_session.get.return_value = make_response(200, body)

    assert cmc_cli.main(["info", "--slug", "bitcoin"]) == 0

    assert "bitcoin: 1 BTC Bitcoin [coin] https://bitcoin.org/" in capsys.readouterr().out


def test_failure_exit_code(patched_client, mock_session, capsys):
    mock_session.get.side_effect = requests.ConnectionError("no route to host")

    assert cmc_cli.main(["listings"]) == 1

    err = capsys.readouterr().err
    assert "TRANSPORT (no response): no route to host" in err


def test_config_error_exit_code(capsys):
    with patch.object(cmc_cli, "build_client", side_effect=ConfigError("CMC_PRO_API_KEY not found")):
        assert cmc_cli.main(["map"]) == 2
    assert "CMC_PRO_API_KEY" in capsys.readouterr().err


def test_client_is_closed(patched_client, mock_session):
    assert isinstance(patched_client, ApiClient)
    cmc_cli.main(["map"])
    mock_session.close.assert_called_once()
