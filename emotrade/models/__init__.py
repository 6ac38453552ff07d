"""Tipos de dominio del analizador de operaciones."""

from .trade import Trade, TradeAction

__all__ = ["Trade", "TradeAction"]
