from fastapi import APIRouter, Depends

from MIW.api.dependencies import get_config
from MIW.api.schemas import HealthResponse
from packages.miw_core.config import MIWConfig
from packages.miw_core.time import to_iso, utc_now

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(config: MIWConfig = Depends(get_config)):
    """
    Server Liveness Probe.
    Returns status, version, and current timestamp.
    """
    return {
        "status": "ok",
        "version": config.VERSION,
        "timestamp": to_iso(utc_now())
    }
