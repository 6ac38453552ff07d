"""Punto de entrada para servidores ASGI (``uvicorn wsgi:app``) o ejecucion directa."""
from __future__ import annotations

from emotrade import app
from emotrade.config import get_settings

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "emotrade:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
