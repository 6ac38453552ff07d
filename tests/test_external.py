from __future__ import annotations

from datetime import date

import pytest
import requests

from emotrade.config import Settings
from emotrade.services import HttpPriceProvider
from emotrade.services.external import parse_historical_closes

from conftest import FakeResponse, FakeSession


def _settings(api_key: str = "secret") -> Settings:
    settings = Settings()
    settings.market_data_api_base = "https://example.test/api/v3"
    settings.market_data_api_key = api_key
    settings.external_timeout = 5
    return settings


def test_parse_sorts_oldest_first_and_skips_gaps() -> None:
    payload = {
        "symbol": "AAPL",
        "historical": [
            {"date": "2024-03-14", "close": 172.5},
            {"date": "2024-03-13", "close": None},
            {"date": "2024-03-12", "close": 170.0},
            {"close": 1.0},
        ],
    }
    assert parse_historical_closes(payload) == [170.0, 172.5]


@pytest.mark.parametrize("payload", [{}, {"historical": []}, [], None])
def test_parse_unexpected_payloads(payload) -> None:
    assert parse_historical_closes(payload) == []


def test_fetch_closes_queries_the_range() -> None:
    session = FakeSession(FakeResponse({"historical": [{"date": "2024-03-01", "close": "101.5"}]}))
    provider = HttpPriceProvider(_settings(), session=session)

    closes = provider.fetch_closes("aapl", date(2024, 2, 14), date(2024, 3, 15))

    assert closes == [101.5]
    url, params, timeout = session.requests[0]
    assert url == "https://example.test/api/v3/historical-price-full/AAPL"
    assert params["from"] == "2024-02-14"
    assert params["to"] == "2024-03-15"
    assert params["apikey"] == "secret"
    assert timeout == 5


def test_without_api_key_no_request_is_made() -> None:
    session = FakeSession(FakeResponse({}))
    provider = HttpPriceProvider(_settings(api_key=""), session=session)

    assert provider.fetch_closes("AAPL", date(2024, 2, 14), date(2024, 3, 15)) == []
    assert session.requests == []


def test_http_errors_propagate() -> None:
    provider = HttpPriceProvider(_settings(), session=FakeSession(FakeResponse({}, status_code=503)))

    with pytest.raises(requests.HTTPError):
        provider.fetch_closes("AAPL", date(2024, 2, 14), date(2024, 3, 15))


def test_parse_skips_malformed_rows() -> None:
    payload = {
        "historical": [
            {"date": "2024-03-04", "close": "n/a"},
            "2024-03-05",
            None,
            {"date": "2024-03-06", "close": {"value": 1}},
            {"date": "2024-03-07"},
            {"date": "2024-03-01", "close": "99.5"},
        ]
    }
    assert parse_historical_closes(payload) == [99.5]


def test_fetch_closes_with_only_unparseable_closes_is_empty() -> None:
    session = FakeSession(FakeResponse({"historical": [{"date": "2024-03-01", "close": "n/a"}]}))
    provider = HttpPriceProvider(_settings(), session=session)

    assert provider.fetch_closes("AAPL", date(2024, 2, 14), date(2024, 3, 15)) == []
