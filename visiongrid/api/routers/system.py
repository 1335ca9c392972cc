"""
System API Router - Status monitoring
"""

import logging
import time

import psutil
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from visiongrid.api.dependencies import get_app_settings
from visiongrid.api.exceptions import safe_endpoint
from visiongrid.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter()

# Track start time
START_TIME = time.time()


class SystemStatus(BaseModel):
    """Service status"""

    status: str
    environment: str
    uptime: float
    memory_usage: dict


@router.get("/status")
@safe_endpoint
async def get_status(settings: Settings = Depends(get_app_settings)) -> SystemStatus:
    """Get system status"""
    memory_info = psutil.Process().memory_info()
    virtual_memory = psutil.virtual_memory()

    return SystemStatus(
        status="healthy",
        environment=settings.environment,
        uptime=time.time() - START_TIME,
        memory_usage={
            "process_mb": memory_info.rss / 1024 / 1024,
            "system_percent": virtual_memory.percent,
            "available_mb": virtual_memory.available / 1024 / 1024,
        },
    )
