"""
Health check endpoints.
"""
import time
from datetime import datetime, timezone
from fastapi import APIRouter
from login_finder.config.settings import settings

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "status": "operational"
    }


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/ping")
async def ping():
    """Liveness probe with epoch milliseconds."""
    return {"ok": True, "time": int(time.time() * 1000)}
