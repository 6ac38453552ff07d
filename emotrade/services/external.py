from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Protocol, Tuple

import requests

from ..config import Settings, get_settings

logger = logging.getLogger(__name__)


class HistoricalPriceProvider(Protocol):
    """Fuente de cierres diarios para un ticker en un rango de fechas."""

    def fetch_closes(self, ticker: str, start: date, end: date) -> List[float]:
        ...


def _get_session() -> requests.Session:
    """Crea una sesión HTTP reutilizable."""
    return requests.Session()


class HttpPriceProvider:
    """Obtiene cierres historicos de la API de Financial Modeling Prep.

    Sin API key configurada no se hace ninguna peticion y se devuelve una
    serie vacia. Los errores HTTP se propagan como ``requests.RequestException``.
    """

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None) -> None:
        self.settings = settings or get_settings()
        self.session = session or _get_session()

    def fetch_closes(self, ticker: str, start: date, end: date) -> List[float]:
        if not self.settings.market_data_api_key:
            logger.warning("MARKET_DATA_API_KEY no configurada; no se consultan precios de %s", ticker)
            return []

        url = f"{self.settings.market_data_api_base}/historical-price-full/{ticker.upper()}"
        params = {
            "from": start.isoformat(),
            "to": end.isoformat(),
            "serietype": "line",
            "apikey": self.settings.market_data_api_key,
        }
        response = self.session.get(url, params=params, timeout=self.settings.external_timeout)
        response.raise_for_status()
        payload: Dict[str, Any] = response.json() or {}
        return parse_historical_closes(payload)


def parse_historical_closes(payload: Dict[str, Any]) -> List[float]:
    """Extrae los cierres de la respuesta, de mas antiguo a mas reciente.

    La API devuelve primero los dias mas recientes.
    """
    if not isinstance(payload, dict):
        return []
    rows: List[Tuple[str, float]] = []
    for row in payload.get("historical") or []:
        if not isinstance(row, dict) or not row.get("date"):
            continue
        try:
            close = float(row["close"])
        except (KeyError, TypeError, ValueError):
            # Cierre ausente o no numerico
            continue
        rows.append((str(row["date"]), close))
    rows.sort(key=lambda item: item[0])
    return [close for _, close in rows]
