from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from ..models import TradeAction
from .features import PriceFeatures


class FlagType(str, Enum):
    FOMO_BUYING = "fomo_buying"
    PANIC_SELLING = "panic_selling"
    BUYING_AT_PEAK = "buying_at_peak"
    SELLING_AT_BOTTOM = "selling_at_bottom"
    HIGH_VOLATILITY = "high_volatility"
    EXTREME_OVERPAYING = "extreme_overpaying"
    EXTREME_UNDERSELLING = "extreme_underselling"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Flag:
    """Alerta explicativa que se devuelve al usuario."""

    type: FlagType
    message: str
    severity: Severity


@dataclass(frozen=True)
class RuleHit:
    """Resultado de una regla disparada: la alerta y los puntos que aporta."""

    flag: Flag
    points: int


Rule = Callable[[TradeAction, PriceFeatures], Optional[RuleHit]]


def _deviation_pct(price: float, average: float) -> float:
    return (price - average) / average * 100


def fomo_buying(action: TradeAction, f: PriceFeatures) -> Optional[RuleHit]:
    """Compra tras un repunte significativo respecto a la media de 7 dias."""
    z = f.z_score_7
    if action is not TradeAction.BUY or z <= 1.5:
        return None
    if z > 3:
        severity, points = Severity.HIGH, 50
    elif z > 2:
        severity, points = Severity.MEDIUM, 35
    else:
        severity, points = Severity.LOW, 20
    deviation = _deviation_pct(f.trade_price, f.avg_7)
    message = (
        f"Alerta FOMO: compraste un {deviation:.1f}% por encima de la media de 7 dias "
        f"({z:.2f} desviaciones estandar)"
    )
    return RuleHit(Flag(FlagType.FOMO_BUYING, message, severity), points)


def panic_selling(action: TradeAction, f: PriceFeatures) -> Optional[RuleHit]:
    """Venta tras una caida significativa respecto a la media de 7 dias."""
    z = f.z_score_7
    if action is not TradeAction.SELL or z >= -1.5:
        return None
    if z < -3:
        severity, points = Severity.HIGH, 50
    elif z < -2:
        severity, points = Severity.MEDIUM, 35
    else:
        severity, points = Severity.LOW, 20
    deviation = abs(_deviation_pct(f.trade_price, f.avg_7))
    message = (
        f"Alerta de panico: vendiste un {deviation:.1f}% por debajo de la media de 7 dias "
        f"({abs(z):.2f} desviaciones estandar)"
    )
    return RuleHit(Flag(FlagType.PANIC_SELLING, message, severity), points)


def buying_at_peak(action: TradeAction, f: PriceFeatures) -> Optional[RuleHit]:
    pct = f.percentile
    if action is not TradeAction.BUY or pct < 95:
        return None
    if pct >= 99:
        severity, points = Severity.HIGH, 35
    elif pct >= 97:
        severity, points = Severity.MEDIUM, 25
    else:
        severity, points = Severity.MEDIUM, 15
    message = (
        f"Compra en maximos: compraste en el percentil {pct:.1f} "
        f"(5% superior del rango de 30 dias)"
    )
    return RuleHit(Flag(FlagType.BUYING_AT_PEAK, message, severity), points)


def selling_at_bottom(action: TradeAction, f: PriceFeatures) -> Optional[RuleHit]:
    pct = f.percentile
    if action is not TradeAction.SELL or pct > 5:
        return None
    if pct <= 1:
        severity, points = Severity.HIGH, 35
    elif pct <= 3:
        severity, points = Severity.MEDIUM, 25
    else:
        severity, points = Severity.MEDIUM, 15
    message = (
        f"Venta en minimos: vendiste en el percentil {pct:.1f} "
        f"(5% inferior del rango de 30 dias)"
    )
    return RuleHit(Flag(FlagType.SELLING_AT_BOTTOM, message, severity), points)


def high_volatility(action: TradeAction, f: PriceFeatures) -> Optional[RuleHit]:
    """Aplica a compras y ventas por igual."""
    cv = f.coefficient_of_variation
    if cv <= 5:
        return None
    if cv > 10:
        severity, points = Severity.HIGH, 15
    else:
        severity, points = Severity.MEDIUM, 8
    message = f"Alta volatilidad: la volatilidad del activo es del {cv:.1f}% (umbral del 5%)"
    return RuleHit(Flag(FlagType.HIGH_VOLATILITY, message, severity), points)


def extreme_overpaying(action: TradeAction, f: PriceFeatures) -> Optional[RuleHit]:
    z = f.z_score_30
    if action is not TradeAction.BUY or z <= 2:
        return None
    if z > 3:
        severity, points = Severity.HIGH, 30
    else:
        severity, points = Severity.MEDIUM, 20
    deviation = _deviation_pct(f.trade_price, f.avg_30)
    message = (
        f"Sobreprecio extremo: compraste un {deviation:.1f}% por encima de la media de 30 dias "
        f"({z:.2f} desviaciones estandar)"
    )
    return RuleHit(Flag(FlagType.EXTREME_OVERPAYING, message, severity), points)


def extreme_underselling(action: TradeAction, f: PriceFeatures) -> Optional[RuleHit]:
    z = f.z_score_30
    if action is not TradeAction.SELL or z >= -2:
        return None
    if z < -3:
        severity, points = Severity.HIGH, 30
    else:
        severity, points = Severity.MEDIUM, 20
    deviation = abs(_deviation_pct(f.trade_price, f.avg_30))
    message = (
        f"Venta a precio extremo: vendiste un {deviation:.1f}% por debajo de la media de 30 dias "
        f"({abs(z):.2f} desviaciones estandar)"
    )
    return RuleHit(Flag(FlagType.EXTREME_UNDERSELLING, message, severity), points)


# El orden de esta tupla fija el orden de las alertas en la respuesta.
RULES: Tuple[Rule, ...] = (
    fomo_buying,
    panic_selling,
    buying_at_peak,
    selling_at_bottom,
    high_volatility,
    extreme_overpaying,
    extreme_underselling,
)


def evaluate_rules(action: TradeAction, features: PriceFeatures) -> List[RuleHit]:
    """Aplica todas las reglas y devuelve las que se disparan, en orden fijo."""
    hits: List[RuleHit] = []
    for rule in RULES:
        hit = rule(action, features)
        if hit is not None:
            hits.append(hit)
    return hits
