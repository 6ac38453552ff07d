from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Union

from ..models import Trade
from .features import PriceFeatures, extract_features
from .rules import Flag, RuleHit, evaluate_rules

MIN_SCORE = 0
MAX_SCORE = 100
EMOTIONAL_THRESHOLD = 30
NEUTRAL_SCORE = 50

DATA_UNAVAILABLE = "data unavailable"


@dataclass(frozen=True)
class TradeAnalysis:
    """Resultado calculado: puntuacion de riesgo emocional, alertas e indicadores."""

    risk_score: int
    flags: List[Flag]
    features: PriceFeatures
    is_emotional: bool


@dataclass(frozen=True)
class DataUnavailable:
    """No se pudo evaluar la operacion; el riesgo es desconocido.

    ``risk_score`` es un valor neutro por defecto, no una puntuacion calculada.
    """

    reason: str = DATA_UNAVAILABLE
    risk_score: int = NEUTRAL_SCORE
    flags: List[Flag] = field(default_factory=list)


AnalysisOutcome = Union[TradeAnalysis, DataUnavailable]


def aggregate_score(hits: Iterable[RuleHit]) -> int:
    """Suma los puntos de las reglas disparadas y recorta al rango [0, 100]."""
    total = sum(hit.points for hit in hits)
    return max(MIN_SCORE, min(MAX_SCORE, total))


def analyse_trade(trade: Trade, prices: Optional[Sequence[float]]) -> AnalysisOutcome:
    """Evalua una operacion frente a su serie historica de cierres.

    Nunca lanza excepciones: una serie vacia o cualquier fallo durante el
    calculo devuelve :class:`DataUnavailable`.
    """
    if not prices:
        return DataUnavailable()

    try:
        features = extract_features(prices, float(trade.price))
        hits = evaluate_rules(trade.action, features)
        score = aggregate_score(hits)
    except Exception:  # noqa: BLE001
        return DataUnavailable()

    return TradeAnalysis(
        risk_score=score,
        flags=[hit.flag for hit in hits],
        features=features,
        is_emotional=score >= EMOTIONAL_THRESHOLD,
    )
