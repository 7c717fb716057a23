"""
Health check and status endpoints.
"""
import time
from fastapi import APIRouter

from settings import REFRESH_STRATEGIES

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint with the configured strategy order"""
    return {"status": "healthy", "timestamp": time.time(), "strategies": REFRESH_STRATEGIES}


@router.get("/healthz")
async def healthz_check():
    """Alternative health check endpoint (Kubernetes style)"""
    return {"status": "ok", "timestamp": time.time()}
