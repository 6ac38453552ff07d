from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TradeAction(str, Enum):
    """Sentido de la operacion."""

    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class Trade:
    """Operacion propuesta por el usuario, ya validada y tipada."""

    ticker: str
    action: TradeAction
    price: Decimal
    date: date
    shares: Optional[Decimal] = None
