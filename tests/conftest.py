from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import List, Optional

import pytest
import requests

from emotrade.models import Trade, TradeAction
from emotrade.services import PriceFeatures


class FakeResponse:
    def __init__(self, payload, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.payload


class FakeSession:
    """Sesion HTTP falsa que registra las peticiones y devuelve una respuesta fija."""

    def __init__(self, response: FakeResponse) -> None:
        self.response = response
        self.requests: list[tuple[str, dict, int]] = []

    def get(self, url, params=None, timeout=None):
        self.requests.append((url, params, timeout))
        return self.response


class FakePriceProvider:
    """Proveedor en memoria que registra las consultas recibidas."""

    def __init__(self, prices: Optional[List[float]] = None, error: Optional[Exception] = None) -> None:
        self.prices = prices
        self.error = error
        self.calls: list[tuple[str, date, date]] = []

    def fetch_closes(self, ticker: str, start: date, end: date) -> Optional[List[float]]:
        self.calls.append((ticker, start, end))
        if self.error is not None:
            raise self.error
        return self.prices


def make_trade(action: str = "buy", price: str = "100", ticker: str = "AAPL", on: date = date(2024, 3, 15)) -> Trade:
    return Trade(ticker=ticker, action=TradeAction(action), price=Decimal(price), date=on)


def make_features(**overrides: float) -> PriceFeatures:
    """Indicadores neutros (ninguna regla se dispara) con los cambios indicados."""
    values = dict(
        trade_price=100.0,
        avg_7=100.0,
        avg_30=100.0,
        std_dev_7=1.0,
        std_dev_30=1.0,
        max_30=101.0,
        min_30=99.0,
        range_30=2.0,
        z_score_7=0.0,
        z_score_30=0.0,
        percentile=50.0,
        coefficient_of_variation=1.0,
    )
    values.update(overrides)
    return PriceFeatures(**values)


@pytest.fixture
def flat_series() -> List[float]:
    return [100.0] * 30


@pytest.fixture
def ramp_series() -> List[float]:
    # 30 cierres crecientes de 100 a 130
    return [100 + i * 30 / 29 for i in range(30)]
