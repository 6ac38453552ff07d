from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List, Tuple

import requests

from ..models import Trade
from .analytics import AnalysisOutcome, DataUnavailable, analyse_trade
from .external import HistoricalPriceProvider

logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK_DAYS = 30


def history_window(trade_date: date, days: int = DEFAULT_LOOKBACK_DAYS) -> Tuple[date, date]:
    """Rango de fechas [trade_date - days, trade_date] a consultar."""
    return trade_date - timedelta(days=days), trade_date


def evaluate_trade(
    trade: Trade,
    provider: HistoricalPriceProvider,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> AnalysisOutcome:
    """Descarga la serie historica de la operacion y la analiza.

    Un fallo del proveedor (red o respuesta malformada) se trata como serie
    vacia: no se reintenta.
    """
    start, end = history_window(trade.date, lookback_days)
    try:
        prices: List[float] = provider.fetch_closes(trade.ticker, start, end) or []
    except (requests.RequestException, ValueError, TypeError, AttributeError) as exc:
        logger.warning("No se pudo obtener el historico de %s: %s", trade.ticker, exc)
        prices = []

    outcome = analyse_trade(trade, prices)
    if isinstance(outcome, DataUnavailable):
        logger.warning(
            "Analisis no disponible para %s (%s, %d cierres)", trade.ticker, outcome.reason, len(prices)
        )
    else:
        logger.info(
            "Operacion %s %s a %s: riesgo=%d alertas=%d",
            trade.action.value,
            trade.ticker,
            trade.price,
            outcome.risk_score,
            len(outcome.flags),
        )
    return outcome
