from fastapi import APIRouter, Depends
import requests
from ..config import Settings, get_settings

router = APIRouter()

@router.get("/health")
def health(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    if not settings.market_data_api_key:
        return {"status": "ok", "market_data": "not configured"}
    api_status = "unknown"
    try:
        url = f"{settings.market_data_api_base}/is-the-market-open"
        resp = requests.get(url, params={"apikey": settings.market_data_api_key}, timeout=settings.external_timeout)
        api_status = "online" if resp.ok else f"error: {resp.status_code}"
    except Exception as exc:
        api_status = f"error: {exc.__class__.__name__}"
    return {"status": "ok", "market_data": api_status}
