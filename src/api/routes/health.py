"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_settings
from adapter.mongodb.connection import get_mongodb_client
from utils.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(settings: Settings = Depends(get_settings)):
    """Health check endpoint with dependency status."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {},
    }

    if get_mongodb_client(settings.mongo_url):
        health_status["services"]["mongodb"] = {
            "status": "healthy",
            "message": "Connection successful",
        }
        return health_status

    health_status["status"] = "unhealthy"
    health_status["services"]["mongodb"] = {
        "status": "unhealthy",
        "message": "Connection failed or not configured",
    }
    logger.warning("Health check failed", extra={"service": "mongodb"})
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status)
