"""
Pytest configuration and fixtures for Circle Thumbnail Studio tests
"""

from unittest.mock import MagicMock

import cv2
import numpy as np
import pytest

from core.image_loader import ImageLoader
from core.selection_controller import SelectionController
from core.session_manager import SessionManager
from core.thumbnail_store import ThumbnailStore
from services.export_service import ExportService
from services.selection_service import SelectionService


def make_image(width, height):
    """Create a BGR test image with some content"""
    image = np.full((height, width, 3), 90, dtype=np.uint8)
    cv2.rectangle(image, (width // 4, height // 4), (width // 2, height // 2), (0, 200, 0), -1)
    cv2.circle(image, (width // 2, height // 2), min(width, height) // 8, (30, 30, 220), -1)
    return image


def encode(image, ext=".png"):
    success, buffer = cv2.imencode(ext, image)
    assert success
    return buffer.tobytes()


@pytest.fixture
def square_image():
    """300x300 source image"""
    return make_image(300, 300)


@pytest.fixture
def wide_image():
    """600x400 source image"""
    return make_image(600, 400)


@pytest.fixture
def large_image():
    """1000x800 source image, big enough for 400px exports"""
    return make_image(1000, 800)


@pytest.fixture
def transparent_image():
    """300x300 BGRA image: opaque red disc on a fully transparent field"""
    image = np.zeros((300, 300, 4), dtype=np.uint8)
    cv2.circle(image, (150, 150), 60, (0, 0, 255, 255), -1)
    return image


@pytest.fixture
def png_bytes():
    """Factory encoding a width x height test image as PNG"""

    def _png(width=300, height=300):
        return encode(make_image(width, height))

    return _png


@pytest.fixture
def controller(square_image):
    """SelectionController with the 300x300 image loaded"""
    return SelectionController(image=square_image)


@pytest.fixture
def session_manager():
    """Create SessionManager instance for testing"""
    manager = SessionManager(max_sessions=5)
    yield manager
    # Cleanup
    manager.clear()


@pytest.fixture
def thumbnail_store(tmp_path):
    """Create ThumbnailStore instance with temporary directory"""
    return ThumbnailStore(str(tmp_path / "thumbnails"))


@pytest.fixture
def mock_http():
    """Stand-in for requests.Session used by the image loader"""
    return MagicMock()


@pytest.fixture
def serve_bytes(mock_http):
    """Make the mocked HTTP session answer every GET with the given body"""

    def _serve(body, status_error=None):
        response = MagicMock()
        response.iter_content.return_value = [body[i : i + 4096] for i in range(0, len(body), 4096)]
        if status_error is not None:
            response.raise_for_status.side_effect = status_error
        mock_http.get.return_value.__enter__.return_value = response
        return response

    return _serve


@pytest.fixture
def image_loader(mock_http):
    """Create ImageLoader instance that never touches the network"""
    return ImageLoader(url_timeout_s=2.0, max_download_mb=1, http=mock_http)


@pytest.fixture
def selection_service(session_manager, image_loader):
    """Create SelectionService instance for testing"""
    return SelectionService(session_manager=session_manager, image_loader=image_loader)


@pytest.fixture
def export_service(session_manager, thumbnail_store):
    """Create ExportService instance for testing"""
    return ExportService(session_manager=session_manager, thumbnail_store=thumbnail_store)
