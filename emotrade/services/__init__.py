"""Reexporta funciones de la capa de servicios.

El nucleo de analisis (:mod:`.features`, :mod:`.rules` y :mod:`.analytics`)
es puro y no hace E/S. :mod:`.external` habla con el proveedor de precios y
:mod:`.trades` une ambas piezas para las rutas.
"""

from .analytics import (
    AnalysisOutcome,
    DataUnavailable,
    TradeAnalysis,
    aggregate_score,
    analyse_trade,
)
from .external import HistoricalPriceProvider, HttpPriceProvider
from .features import PriceFeatures, extract_features, standard_score
from .rules import Flag, FlagType, RuleHit, Severity, evaluate_rules
from .trades import evaluate_trade, history_window

__all__ = [
    "AnalysisOutcome",
    "DataUnavailable",
    "TradeAnalysis",
    "aggregate_score",
    "analyse_trade",
    "HistoricalPriceProvider",
    "HttpPriceProvider",
    "PriceFeatures",
    "extract_features",
    "standard_score",
    "Flag",
    "FlagType",
    "RuleHit",
    "Severity",
    "evaluate_rules",
    "evaluate_trade",
    "history_window",
]
