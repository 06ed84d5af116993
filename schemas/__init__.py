"""
Schemas Package

This package contains all Pydantic schemas for request validation and
response serialization, organized by domain.
"""

# Re-export enums from centralized location for convenience
from core.enums import BackgroundColor, InteractionMode, PointerEventType

# Common models
from .common import Size

# Export models
from .export import ExportSpecModel, PreviewRequest, PreviewResponse, SaveRequest, SaveResponse

# Selection models
from .selection import (
    CircleModel,
    DisplayRectModel,
    DragOffsetModel,
    ImageLoadResponse,
    ImageUrlRequest,
    PointerEventRequest,
    PointerEventResponse,
    SessionState,
)

# Explicitly declare public API for re-export
__all__ = [
    # Common models
    "Size",
    # Selection models
    "CircleModel",
    "DisplayRectModel",
    "DragOffsetModel",
    "ImageLoadResponse",
    "ImageUrlRequest",
    "PointerEventRequest",
    "PointerEventResponse",
    "SessionState",
    # Export models
    "ExportSpecModel",
    "PreviewRequest",
    "PreviewResponse",
    "SaveRequest",
    "SaveResponse",
    # Enums (re-exported from core.enums)
    "BackgroundColor",
    "InteractionMode",
    "PointerEventType",
]
