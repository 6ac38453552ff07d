from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..config import Settings, get_settings
from ..schemas import AnalysisResult, TradeRequest
from ..services import HistoricalPriceProvider, HttpPriceProvider, evaluate_trade

logger = logging.getLogger(__name__)

router = APIRouter()


def get_price_provider(settings: Settings = Depends(get_settings)) -> HistoricalPriceProvider:
    return HttpPriceProvider(settings)


@router.post("/analysis", response_model=AnalysisResult)
def analyse(
    payload: TradeRequest,
    provider: HistoricalPriceProvider = Depends(get_price_provider),
    settings: Settings = Depends(get_settings),
) -> AnalysisResult:
    trade = payload.to_trade()
    try:
        outcome = evaluate_trade(trade, provider, lookback_days=settings.history_lookback_days)
        return AnalysisResult.from_outcome(
            trade.ticker,
            trade.action.value,
            outcome,
            shares=payload.shares,
            mood=payload.mood,
            notes=payload.notes,
        )
    except Exception as exc:
        logger.exception("Error inesperado analizando %s", trade.ticker)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
