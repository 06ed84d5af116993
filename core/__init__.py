"""
Core modules for Circle Thumbnail Studio
"""

from .compositor import ExportSpec, compose
from .geometry import Circle
from .image_loader import ImageLoader
from .selection_controller import PointerEvent, SelectionController
from .session_manager import EditorSession, SessionManager
from .thumbnail_store import SaveResult, ThumbnailStore

__all__ = [
    "Circle",
    "ExportSpec",
    "compose",
    "ImageLoader",
    "PointerEvent",
    "SelectionController",
    "EditorSession",
    "SessionManager",
    "SaveResult",
    "ThumbnailStore",
]
