"""
Centralized enum definitions for Circle Thumbnail Studio.

Shared by the core state machine, the schemas and the API layer.
"""

from enum import Enum


class InteractionMode(str, Enum):
    """Pointer interaction state of a selection controller"""

    IDLE = "idle"
    DRAWING = "drawing"
    MOVING = "moving"


class PointerEventType(str, Enum):
    """Pointer events understood by the selection controller"""

    DOWN = "down"
    MOVE = "move"
    UP = "up"
    LEAVE = "leave"


class BackgroundColor(str, Enum):
    """Background fill choices for exported thumbnails"""

    WHITE = "white"
    BLACK = "black"
