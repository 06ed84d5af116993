"""
Selection Service - Business logic for editor sessions.

Wraps the session registry, image acquisition and the selection controller
behind session-id based operations used by the API layer.
"""

import logging
from typing import Tuple

from api.exceptions import ImageNotLoadedException, SessionNotFoundException
from core.image.converters import ImageConverters
from core.image_loader import ImageLoader
from core.selection_controller import PointerEvent
from core.session_manager import EditorSession, SessionManager
from schemas import PointerEventRequest

logger = logging.getLogger(__name__)


class SelectionService:
    """
    Service for interactive circle selection.

    Every mutation of a session happens under that session's lock so
    pointer events are processed one at a time, in arrival order.
    """

    def __init__(self, session_manager: SessionManager, image_loader: ImageLoader):
        """
        Initialize selection service.

        Args:
            session_manager: Session registry
            image_loader: Image acquisition helper
        """
        self.session_manager = session_manager
        self.image_loader = image_loader

    def create_session(self) -> EditorSession:
        return self.session_manager.create()

    def get_session(self, session_id: str) -> EditorSession:
        """
        Get a session or fail.

        Raises:
            SessionNotFoundException: If the id is unknown
        """
        session = self.session_manager.get(session_id)
        if session is None:
            raise SessionNotFoundException(session_id)
        return session

    def delete_session(self, session_id: str) -> None:
        if not self.session_manager.delete(session_id):
            raise SessionNotFoundException(session_id)

    def load_image_bytes(
        self, session_id: str, data: bytes, filename: str = "upload"
    ) -> EditorSession:
        """
        Decode an uploaded image and make it the session's source image.

        A rejected image leaves the previous image and selection untouched.
        """
        session = self.get_session(session_id)
        image = self.image_loader.from_bytes(data, source=filename or "upload")
        return self._replace_image(session, image, filename or "upload")

    def load_image_url(self, session_id: str, url: str) -> EditorSession:
        """Download an image and make it the session's source image."""
        session = self.get_session(session_id)
        image = self.image_loader.from_url(url)
        return self._replace_image(session, image, url.strip())

    def _replace_image(self, session: EditorSession, image, source: str) -> EditorSession:
        with session.lock:
            session.controller.load_image(image)
            session.source = source
        logger.info(f"Session {session.id}: source image replaced from {source}")
        return session

    def dispatch(self, session_id: str, event: PointerEventRequest) -> Tuple[bool, EditorSession]:
        """
        Feed a pointer event to the session's selection controller.

        Returns:
            Tuple of (changed, session)

        Raises:
            SessionNotFoundException: If the id is unknown
            ImageNotLoadedException: If no image is loaded yet
        """
        session = self.get_session(session_id)
        pointer_event = PointerEvent(
            type=event.type,
            client_x=event.client_x,
            client_y=event.client_y,
            display=event.display.to_display_rect() if event.display else None,
        )

        with session.lock:
            if not session.controller.has_image:
                raise ImageNotLoadedException(session_id)
            changed = session.controller.dispatch(pointer_event)

        return changed, session

    def reset(self, session_id: str) -> EditorSession:
        """Clear the session's selection."""
        session = self.get_session(session_id)
        with session.lock:
            session.controller.reset()
        logger.debug(f"Session {session_id}: selection reset")
        return session

    def render_overlay(self, session_id: str) -> bytes:
        """
        Current selection view as PNG.

        Raises:
            ImageNotLoadedException: If no image is loaded yet
        """
        session = self.get_session(session_id)
        with session.lock:
            if not session.controller.has_image:
                raise ImageNotLoadedException(session_id)
            overlay = session.controller.render()
        return ImageConverters.encode_png(overlay)
