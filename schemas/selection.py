"""
Selection API models.

This module contains models for editor sessions:
- Pointer events and display rectangles
- Circle selection and session state
- Image loading requests and responses
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from core.enums import InteractionMode, PointerEventType
from core.geometry import Circle, DisplayRect
from core.session_manager import EditorSession

from .common import Size


class DisplayRectModel(BaseModel):
    """On-screen rectangle the image is displayed in (device pixels)"""

    left: float = 0.0
    top: float = 0.0
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    def to_display_rect(self) -> DisplayRect:
        return DisplayRect(left=self.left, top=self.top, width=self.width, height=self.height)


class PointerEventRequest(BaseModel):
    """Pointer event forwarded from the UI"""

    type: PointerEventType
    client_x: float = Field(0.0, description="Pointer x in device pixels")
    client_y: float = Field(0.0, description="Pointer y in device pixels")
    display: Optional[DisplayRectModel] = Field(
        None, description="Displayed image rectangle; omit when coordinates are image-space"
    )


class CircleModel(BaseModel):
    """Circle selection in image-space pixels"""

    center_x: float
    center_y: float
    radius: float = Field(..., ge=0)
    diameter: float = Field(..., ge=0)

    @classmethod
    def from_circle(cls, circle: Circle) -> "CircleModel":
        return cls(
            center_x=circle.center_x,
            center_y=circle.center_y,
            radius=circle.radius,
            diameter=circle.diameter,
        )


class DragOffsetModel(BaseModel):
    """Grab offset from the circle center while moving"""

    dx: float
    dy: float


class SessionState(BaseModel):
    """Snapshot of an editor session"""

    session_id: str
    has_image: bool
    image_size: Optional[Size] = None
    max_radius: float = 0.0
    mode: InteractionMode
    circle: Optional[CircleModel] = None
    drag_offset: Optional[DragOffsetModel] = None
    revision: int
    source: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_session(cls, session: EditorSession) -> "SessionState":
        controller = session.controller
        offset = controller.drag_offset
        return cls(
            session_id=session.id,
            has_image=controller.has_image,
            image_size=(
                Size(width=controller.width, height=controller.height)
                if controller.has_image
                else None
            ),
            max_radius=controller.max_radius,
            mode=controller.mode,
            circle=CircleModel.from_circle(controller.circle) if controller.circle else None,
            drag_offset=DragOffsetModel(dx=offset.dx, dy=offset.dy) if offset else None,
            revision=controller.revision,
            source=session.source,
            created_at=session.created_at,
        )


class ImageUrlRequest(BaseModel):
    """Request to load a source image from a URL"""

    url: str = Field("", description="http(s) URL of the image")


class ImageLoadResponse(BaseModel):
    """Response after loading a source image"""

    success: bool
    message: str
    state: SessionState


class PointerEventResponse(BaseModel):
    """Response to a pointer event"""

    changed: bool
    state: SessionState


__all__ = [
    "CircleModel",
    "DisplayRectModel",
    "DragOffsetModel",
    "ImageLoadResponse",
    "ImageUrlRequest",
    "PointerEventRequest",
    "PointerEventResponse",
    "SessionState",
]
