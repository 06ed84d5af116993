"""
API Routers for Circle Thumbnail Studio
"""

from . import export, image, session, system

__all__ = ["export", "image", "session", "system"]
