"""
System API Router - Status monitoring
"""

import logging
import time

import psutil
from fastapi import APIRouter, Depends

from api.dependencies import get_config, get_session_manager, get_thumbnail_store
from api.exceptions import safe_endpoint

logger = logging.getLogger(__name__)

router = APIRouter()

# Track start time
START_TIME = time.time()


@router.get("/status")
@safe_endpoint
async def get_status(
    session_manager=Depends(get_session_manager),
    thumbnail_store=Depends(get_thumbnail_store),
) -> dict:
    """Get system status"""
    # Get memory usage
    process = psutil.Process()
    memory_info = process.memory_info()

    # Get system memory
    virtual_memory = psutil.virtual_memory()

    return {
        "status": "healthy",
        "uptime": time.time() - START_TIME,
        "memory_usage": {
            "process_mb": memory_info.rss / 1024 / 1024,
            "system_percent": virtual_memory.percent,
            "available_mb": virtual_memory.available / 1024 / 1024,
        },
        "sessions": session_manager.get_stats(),
        "thumbnails": len(thumbnail_store.list_thumbnails()),
    }


@router.get("/thumbnails")
@safe_endpoint
async def list_thumbnails(thumbnail_store=Depends(get_thumbnail_store)) -> dict:
    """List stored thumbnails"""
    return {"thumbnails": thumbnail_store.list_thumbnails()}


@router.get("/config")
@safe_endpoint
async def get_configuration(config=Depends(get_config)) -> dict:
    """Get active configuration"""
    return config
