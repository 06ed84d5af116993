"""
FastAPI integration for the exception hierarchy.

Domain exceptions are rendered as ``{"success": false, "error": ...}`` so the
UI can show them as transient notices.
"""

import functools
import logging
from typing import Callable

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from core.exceptions import (  # noqa: F401
    ImageLoadException,
    ImageNotLoadedException,
    ImageTooSmallException,
    MissingInputException,
    NoSelectionException,
    PersistenceException,
    SessionNotFoundException,
    ThumbnailStudioException,
)

logger = logging.getLogger(__name__)


def safe_endpoint(func: Callable) -> Callable:
    """
    Decorator for async endpoints.

    Domain exceptions and HTTPException propagate to the registered handlers;
    anything else is logged and converted to a 500 HTTPException.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except (ThumbnailStudioException, HTTPException):
            raise
        except Exception as e:
            logger.error(f"Unhandled error in {func.__name__}: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    return wrapper


async def thumbnail_studio_exception_handler(
    request: Request, exc: ThumbnailStudioException
) -> JSONResponse:
    """Render a domain exception as JSON"""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_kind} on {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{exc.error_kind} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application"""
    app.add_exception_handler(ThumbnailStudioException, thumbnail_studio_exception_handler)
