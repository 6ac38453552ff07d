from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from ..services import AnalysisOutcome, DataUnavailable, PriceFeatures


class FlagItem(BaseModel):
    type: str = Field(..., description="Patron emocional detectado")
    message: str = Field(..., description="Explicacion legible del patron")
    severity: str = Field(..., description="Severidad (low/medium/high)")


class FeatureSnapshot(BaseModel):
    trade_price: float = Field(..., description="Precio de la operacion")
    avg_7: float = Field(..., description="Media de los ultimos 7 cierres")
    avg_30: float = Field(..., description="Media de la ventana completa")
    std_dev_7: float = Field(..., description="Desviacion estandar poblacional (7 cierres)")
    std_dev_30: float = Field(..., description="Desviacion estandar poblacional (ventana completa)")
    max_30: float = Field(..., description="Cierre maximo de la ventana")
    min_30: float = Field(..., description="Cierre minimo de la ventana")
    range_30: float = Field(..., description="Diferencia entre maximo y minimo")
    z_score_7: float = Field(..., description="Z-score frente a los ultimos 7 cierres")
    z_score_30: float = Field(..., description="Z-score frente a la ventana completa")
    percentile: float = Field(..., description="Percentil del precio dentro de la ventana")
    coefficient_of_variation: float = Field(..., description="Volatilidad relativa a la media (%)")

    @classmethod
    def from_features(cls, features: PriceFeatures) -> "FeatureSnapshot":
        return cls(**features.as_dict())


class AnalysisResult(BaseModel):
    ticker: str = Field(..., description="Ticker analizado")
    action: str = Field(..., description="Sentido de la operacion")
    shares: Optional[Decimal] = Field(None, description="Numero de acciones enviado")
    mood: Optional[str] = Field(None, description="Estado de animo declarado")
    notes: Optional[str] = Field(None, description="Notas libres del usuario")
    risk_score: int = Field(..., ge=0, le=100, description="Puntuacion de riesgo emocional (0-100)")
    is_emotional: bool = Field(False, description="True si la puntuacion es >= 30")
    flags: List[FlagItem] = Field(default_factory=list)
    features: Optional[FeatureSnapshot] = Field(
        None, description="Indicadores calculados a partir de la serie historica"
    )
    error: Optional[str] = Field(
        None, description="Motivo por el que no se pudo calcular el riesgo (riesgo desconocido)"
    )

    @classmethod
    def from_outcome(
        cls, ticker: str, action: str, outcome: AnalysisOutcome, **echo: Any
    ) -> "AnalysisResult":
        """Construye la respuesta; ``echo`` devuelve los campos del formulario (shares, mood, notes)."""
        if isinstance(outcome, DataUnavailable):
            return cls(
                ticker=ticker, action=action, risk_score=outcome.risk_score, error=outcome.reason, **echo
            )
        return cls(
            ticker=ticker,
            action=action,
            **echo,
            risk_score=outcome.risk_score,
            is_emotional=outcome.is_emotional,
            flags=[
                FlagItem(type=f.type.value, message=f.message, severity=f.severity.value)
                for f in outcome.flags
            ],
            features=FeatureSnapshot.from_features(outcome.features),
        )
