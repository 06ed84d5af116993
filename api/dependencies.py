"""
Shared FastAPI dependencies for Circle Thumbnail Studio.
Centralizes access to the managers stored on app state.
"""

import logging
from typing import Any, Dict

from fastapi import Depends, HTTPException, Request

from core.image_loader import ImageLoader
from core.session_manager import SessionManager
from core.thumbnail_store import ThumbnailStore
from services.export_service import ExportService
from services.selection_service import SelectionService

logger = logging.getLogger(__name__)


class Managers:
    """Container for all manager instances."""

    def __init__(
        self,
        session_manager: SessionManager,
        thumbnail_store: ThumbnailStore,
        image_loader: ImageLoader,
    ):
        self.session_manager = session_manager
        self.thumbnail_store = thumbnail_store
        self.image_loader = image_loader


def get_managers(request: Request) -> Managers:
    """
    Get all manager instances from app state.

    Args:
        request: FastAPI request object

    Returns:
        Managers container with all manager instances

    Raises:
        HTTPException: If managers not initialized
    """
    try:
        return Managers(
            session_manager=request.app.state.session_manager,
            thumbnail_store=request.app.state.thumbnail_store,
            image_loader=request.app.state.image_loader,
        )
    except AttributeError as e:
        logger.error(f"Managers not initialized in app state: {e}")
        raise HTTPException(
            status_code=500, detail="Internal server error: Managers not initialized"
        )


def get_session_manager(managers: Managers = Depends(get_managers)) -> SessionManager:
    """Get SessionManager instance."""
    return managers.session_manager


def get_thumbnail_store(managers: Managers = Depends(get_managers)) -> ThumbnailStore:
    """Get ThumbnailStore instance."""
    return managers.thumbnail_store


def get_image_loader(managers: Managers = Depends(get_managers)) -> ImageLoader:
    """Get ImageLoader instance."""
    return managers.image_loader


def get_config(request: Request) -> Dict[str, Any]:
    """
    Get application configuration.

    Args:
        request: FastAPI request object

    Returns:
        Configuration dictionary
    """
    try:
        return request.app.state.config
    except AttributeError:
        logger.warning("Config not found in app state, using defaults")
        return {}


# Service layer dependencies
def get_selection_service(
    session_manager: SessionManager = Depends(get_session_manager),
    image_loader: ImageLoader = Depends(get_image_loader),
) -> SelectionService:
    """
    Get selection service instance.

    Args:
        session_manager: Session manager dependency
        image_loader: Image loader dependency

    Returns:
        SelectionService instance
    """
    return SelectionService(session_manager=session_manager, image_loader=image_loader)


def get_export_service(
    session_manager: SessionManager = Depends(get_session_manager),
    thumbnail_store: ThumbnailStore = Depends(get_thumbnail_store),
) -> ExportService:
    """
    Get export service instance.

    Args:
        session_manager: Session manager dependency
        thumbnail_store: Thumbnail store dependency

    Returns:
        ExportService instance
    """
    return ExportService(session_manager=session_manager, thumbnail_store=thumbnail_store)
