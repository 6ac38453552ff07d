from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import Trade, TradeAction


class TradeRequest(BaseModel):
    """Operacion tal y como llega del formulario web.

    Los valores numericos y la fecha pueden llegar como texto; aqui se
    convierten y validan antes de llegar al analizador.
    """

    ticker: str = Field(
        ..., min_length=1, max_length=15, pattern=r"^[A-Z0-9.\-^=]+$", description="Ticker del activo"
    )
    action: TradeAction = Field(..., description="Sentido de la operacion (buy/sell)")
    price: Decimal = Field(..., gt=0, description="Precio por accion")
    date: dt.date = Field(..., description="Fecha de la operacion (YYYY-MM-DD)")
    shares: Optional[Decimal] = Field(None, gt=0, description="Numero de acciones")
    mood: Optional[str] = Field(None, max_length=50, description="Estado de animo declarado")
    notes: Optional[str] = Field(None, max_length=1000, description="Notas libres del usuario")

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("ticker", mode="before")
    @classmethod
    def _normalise_ticker(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("action", mode="before")
    @classmethod
    def _normalise_action(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def to_trade(self) -> Trade:
        return Trade(
            ticker=self.ticker,
            action=self.action,
            price=self.price,
            date=self.date,
            shares=self.shares,
        )
