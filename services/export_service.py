"""
Export Service - Business logic for thumbnail preview and persistence.
"""

import copy
import logging
from typing import Any, Optional, Tuple

import numpy as np

from api.exceptions import ImageNotLoadedException, SessionNotFoundException
from core.compositor import ExportSpec, build_export_spec, compose
from core.geometry import Circle
from core.session_manager import SessionManager
from core.thumbnail_store import SaveResult, ThumbnailStore
from core.utils.decorators import timer

logger = logging.getLogger(__name__)


class ExportService:
    """
    Service for exporting the current selection.

    The selection is snapshotted under the session lock and composed
    outside it, so a slow export never blocks pointer handling.
    """

    def __init__(self, session_manager: SessionManager, thumbnail_store: ThumbnailStore):
        """
        Initialize export service.

        Args:
            session_manager: Session registry
            thumbnail_store: Thumbnail persistence
        """
        self.session_manager = session_manager
        self.thumbnail_store = thumbnail_store

    def _snapshot(self, session_id: str) -> Tuple[np.ndarray, Optional[Circle]]:
        session = self.session_manager.get(session_id)
        if session is None:
            raise SessionNotFoundException(session_id)

        with session.lock:
            controller = session.controller
            if not controller.has_image:
                raise ImageNotLoadedException(session_id)
            return controller.image, copy.copy(controller.circle)

    def render(self, session_id: str, background: Any = None) -> Tuple[bytes, ExportSpec]:
        """
        Compose the session's current selection.

        Args:
            session_id: Session identifier
            background: Background selection ("white"/"black")

        Returns:
            Tuple of (PNG bytes, export spec)

        Raises:
            NoSelectionException: If nothing is selected
            ImageTooSmallException: If the selection diameter is below 200
        """
        image, circle = self._snapshot(session_id)
        spec = build_export_spec(circle, background)
        return self._compose(session_id, image, circle, spec), spec

    def _compose(
        self, session_id: str, image: np.ndarray, circle: Circle, spec: ExportSpec
    ) -> bytes:
        with timer() as t:
            png_bytes = compose(image, circle, spec.background_color)

        logger.info(
            f"Session {session_id}: composed {spec.target_size}px thumbnail "
            f"on {spec.background_hex} in {t['ms']} ms"
        )
        return png_bytes

    def save(
        self, session_id: str, filename: str, background: Any = None
    ) -> Tuple[SaveResult, ExportSpec]:
        """
        Compose the current selection and store it.

        Returns:
            Tuple of (save result, export spec)
        """
        image, circle = self._snapshot(session_id)
        spec = build_export_spec(circle, background)
        # Selection problems are reported before filename problems
        self.thumbnail_store.validate_filename(filename)

        png_bytes = self._compose(session_id, image, circle, spec)
        result = self.thumbnail_store.save(png_bytes, spec.target_size, filename)
        return result, spec

    def save_bytes(
        self, png_bytes: bytes, target_size: Optional[int], filename: str
    ) -> SaveResult:
        """Store an already composed thumbnail (client-side export path)."""
        return self.thumbnail_store.save(png_bytes, target_size, filename)
