from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv

# Cargar variables de entorno desde .env
load_dotenv()

class Settings:
    """Configuración centralizada del microservicio."""

    def __init__(self) -> None:
        self.app_name: str = os.getenv("APP_NAME", "Microservicio Python – Emotional Trade Analyzer")
        self.app_version: str = os.getenv("APP_VERSION", "1.0.0")
        self.market_data_api_base: str = os.getenv(
            "MARKET_DATA_API_BASE", "https://financialmodelingprep.com/api/v3"
        ).rstrip("/")
        self.market_data_api_key: str = (
            os.getenv("MARKET_DATA_API_KEY") or os.getenv("FMP_API_KEY") or ""
        ).strip()
        try:
            self.external_timeout: int = int(os.getenv("EXTERNAL_TIMEOUT", "15"))
        except ValueError:
            self.external_timeout = 15
        try:
            self.history_lookback_days: int = int(os.getenv("HISTORY_LOOKBACK_DAYS", "30"))
        except ValueError:
            self.history_lookback_days = 30
        self.host: str = os.getenv("HOST", "0.0.0.0")
        try:
            self.port: int = int(os.getenv("PORT", "5002"))
        except ValueError:
            self.port = 5002
        self.reload: bool = os.getenv("RELOAD", "false").lower() in {"1", "true", "yes", "on"}
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

@lru_cache
def get_settings() -> Settings:
    """Devuelve una instancia cacheada de Settings."""
    return Settings()
