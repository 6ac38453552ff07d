"""Modelos Pydantic utilizados para validar peticiones y serializar respuestas.

``TradeRequest`` es la capa de adaptacion entre el formulario web (valores en
texto) y el tipo de dominio :class:`emotrade.models.Trade`.  ``AnalysisResult``
serializa tanto un analisis calculado como el caso de datos no disponibles.
"""

from .TradeRequest import TradeRequest
from .AnalysisResult import AnalysisResult, FeatureSnapshot, FlagItem

__all__ = ["TradeRequest", "AnalysisResult", "FeatureSnapshot", "FlagItem"]
