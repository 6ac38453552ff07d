from __future__ import annotations

import statistics
from dataclasses import asdict, dataclass
from typing import Any, Dict, Sequence

RECENT_WINDOW = 7


@dataclass(frozen=True)
class PriceFeatures:
    """Indicadores estadisticos de la serie historica frente al precio operado."""

    trade_price: float
    avg_7: float
    avg_30: float
    std_dev_7: float
    std_dev_30: float
    max_30: float
    min_30: float
    range_30: float
    z_score_7: float
    z_score_30: float
    percentile: float
    coefficient_of_variation: float

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def standard_score(value: float, window_mean: float, window_std_dev: float) -> float:
    """Numero de desviaciones estandar entre ``value`` y la media de la ventana.

    Devuelve 0 cuando la ventana no tiene dispersion (precios planos).
    """
    if window_std_dev == 0:
        return 0.0
    return (value - window_mean) / window_std_dev


def percentile_rank(value: float, prices: Sequence[float]) -> float:
    """Porcentaje de precios de la serie menores o iguales a ``value``."""
    below_or_equal = sum(1 for p in prices if p <= value)
    return 100.0 * below_or_equal / len(prices)


def extract_features(prices: Sequence[float], trade_price: float) -> PriceFeatures:
    """Calcula los indicadores sobre la ventana completa y los ultimos 7 cierres.

    La serie debe venir ordenada de mas antigua a mas reciente y no puede
    estar vacia. Con menos de 30 o de 7 puntos se usa lo que haya.
    """
    if not prices:
        raise ValueError("La serie de precios no puede estar vacia")

    full = [float(p) for p in prices]
    recent = full[-RECENT_WINDOW:]
    price = float(trade_price)

    avg_30 = statistics.fmean(full)
    avg_7 = statistics.fmean(recent)
    # Varianza poblacional (divide entre N) en ambas ventanas
    std_dev_30 = statistics.pstdev(full)
    std_dev_7 = statistics.pstdev(recent)
    max_30 = max(full)
    min_30 = min(full)

    z_score_7 = standard_score(price, avg_7, std_dev_7) if len(recent) > 1 else 0.0
    z_score_30 = standard_score(price, avg_30, std_dev_30)

    return PriceFeatures(
        trade_price=price,
        avg_7=avg_7,
        avg_30=avg_30,
        std_dev_7=std_dev_7,
        std_dev_30=std_dev_30,
        max_30=max_30,
        min_30=min_30,
        range_30=max_30 - min_30,
        z_score_7=z_score_7,
        z_score_30=z_score_30,
        percentile=percentile_rank(price, full),
        coefficient_of_variation=100.0 * std_dev_30 / avg_30,
    )
