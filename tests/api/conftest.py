"""
Pytest configuration for API integration tests
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="function")
def client(tmp_path, image_loader):
    """
    Create a test client with properly initialized app state.
    Each test gets a fresh client to avoid state contamination.
    """
    from core.session_manager import SessionManager
    from core.thumbnail_store import ThumbnailStore
    from main import app

    session_manager = SessionManager(max_sessions=10)
    thumbnail_store = ThumbnailStore(str(tmp_path / "thumbnails"))

    # Create test config
    test_config = {
        "system": {"debug": False, "log_level": "INFO"},
        "session": {"max_sessions": 10},
    }

    # Set in app state
    app.state.session_manager = session_manager
    app.state.thumbnail_store = thumbnail_store
    app.state.image_loader = image_loader
    app.state.config = test_config

    # Create test client (no context manager to avoid running the lifespan)
    test_client = TestClient(app, raise_server_exceptions=False)

    yield test_client

    session_manager.clear()


@pytest.fixture
def session_id(client):
    """Create a session and return its id"""
    response = client.post("/api/session")
    return response.json()["session_id"]


@pytest.fixture
def loaded_session(client, session_id, png_bytes):
    """Session with a 600x400 source image uploaded"""
    response = client.post(
        f"/api/session/{session_id}/image",
        files={"file": ("photo.png", png_bytes(600, 400), "image/png")},
    )
    assert response.status_code == 200
    return session_id


@pytest.fixture
def select_circle(client):
    """Draw a circle in image-space coordinates through the pointer endpoint"""

    def _select(session_id, cx, cy, radius):
        url = f"/api/session/{session_id}/pointer"
        client.post(url, json={"type": "down", "client_x": cx, "client_y": cy})
        client.post(url, json={"type": "move", "client_x": cx + radius, "client_y": cy})
        return client.post(url, json={"type": "up"})

    return _select
