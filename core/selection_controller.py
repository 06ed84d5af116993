"""
Selection Controller - pointer-driven circle selection over a source image.

The controller is an explicit state machine:

    IDLE --down outside circle--> DRAWING   (new circle, radius 0)
    IDLE --down inside circle---> MOVING    (remembers grab offset)
    DRAWING --move--> radius follows pointer distance, center fixed
    MOVING  --move--> center follows pointer, clamped to the image
    DRAWING/MOVING --up/leave--> IDLE       (no geometry change)

Every transition redraws the overlay. The circle always satisfies
radius <= min(w, h) / 2 and center within [radius, dim - radius].
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np

from core.enums import InteractionMode, PointerEventType
from core.geometry import (
    Circle,
    DisplayRect,
    DragOffset,
    clamp,
    clamp_center,
    edge_distance,
    max_radius,
    to_image_coords,
)
from core.overlay_renderer import OverlayRenderer

logger = logging.getLogger(__name__)

RedrawListener = Callable[[np.ndarray], None]


@dataclass
class PointerEvent:
    """Pointer event in device pixels"""

    type: PointerEventType
    client_x: float = 0.0
    client_y: float = 0.0
    display: Optional[DisplayRect] = None


class SelectionController:
    """
    Owns the interaction state of one image being edited.

    Attributes:
        image: Current source image (None until loaded)
        circle: Current selection (None when nothing is selected)
        mode: Current interaction mode
        drag_offset: Grab offset while MOVING, otherwise None
        revision: Incremented on every redraw
    """

    def __init__(
        self,
        image: Optional[np.ndarray] = None,
        renderer: Optional[OverlayRenderer] = None,
    ):
        self.renderer = renderer or OverlayRenderer()
        self.image: Optional[np.ndarray] = None
        self.circle: Optional[Circle] = None
        self.mode = InteractionMode.IDLE
        self.drag_offset: Optional[DragOffset] = None
        self.revision = 0
        self._overlay: Optional[np.ndarray] = None
        self._listeners: List[RedrawListener] = []

        if image is not None:
            self.load_image(image)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def has_image(self) -> bool:
        return self.image is not None

    @property
    def width(self) -> int:
        return 0 if self.image is None else int(self.image.shape[1])

    @property
    def height(self) -> int:
        return 0 if self.image is None else int(self.image.shape[0])

    @property
    def max_radius(self) -> float:
        return max_radius(self.width, self.height)

    @property
    def has_selection(self) -> bool:
        return self.circle is not None and not self.circle.is_empty

    # ------------------------------------------------------------------
    # Image and reset
    # ------------------------------------------------------------------

    def load_image(self, image: np.ndarray) -> None:
        """Replace the source image; all selection state is discarded."""
        self.image = image
        self.circle = None
        self._stop_tracking()
        logger.debug(f"Loaded {self.width}x{self.height} image into selection controller")
        self._redraw()

    def reset(self) -> None:
        """Clear the selection and return to the plain image."""
        self.circle = None
        self._stop_tracking()
        self._redraw()

    # ------------------------------------------------------------------
    # Event dispatch
    # ------------------------------------------------------------------

    def add_redraw_listener(self, listener: RedrawListener) -> None:
        """Register a callback receiving the overlay after each redraw."""
        self._listeners.append(listener)

    def dispatch(self, event: PointerEvent) -> bool:
        """
        Feed one pointer event through the state machine.

        Args:
            event: Pointer event in device pixels

        Returns:
            True if the event caused a transition (and a redraw)

        Raises:
            RuntimeError: If no image is loaded
        """
        if self.image is None:
            raise RuntimeError("No image loaded")

        if event.type in (PointerEventType.UP, PointerEventType.LEAVE):
            return self.pointer_up()

        x, y = to_image_coords(
            event.client_x, event.client_y, self.width, self.height, event.display
        )
        if event.type == PointerEventType.DOWN:
            return self.pointer_down(x, y)
        return self.pointer_move(x, y)

    def pointer_down(self, x: float, y: float) -> bool:
        """
        Start drawing or moving at an image-space point.

        Inside the current circle the circle is grabbed for moving; anywhere
        else a new circle with radius 0 is started at the point.
        """
        if self.has_selection and self.circle.contains_point(x, y):
            self.mode = InteractionMode.MOVING
            self.drag_offset = DragOffset(dx=x - self.circle.center_x, dy=y - self.circle.center_y)
            logger.debug(
                f"Moving circle, grab offset "
                f"({self.drag_offset.dx:.1f}, {self.drag_offset.dy:.1f})"
            )
        else:
            self.mode = InteractionMode.DRAWING
            self.drag_offset = None
            self.circle = Circle(
                center_x=clamp(x, 0, self.width), center_y=clamp(y, 0, self.height), radius=0.0
            )
            logger.debug(
                f"Drawing new circle at "
                f"({self.circle.center_x:.1f}, {self.circle.center_y:.1f})"
            )

        self._redraw()
        return True

    def pointer_move(self, x: float, y: float) -> bool:
        """Update the circle from the pointer; ignored while IDLE."""
        if self.mode == InteractionMode.DRAWING:
            self._resize_to(x, y)
        elif self.mode == InteractionMode.MOVING:
            self._move_to(x, y)
        else:
            return False

        self._redraw()
        return True

    def pointer_up(self) -> bool:
        """Stop tracking the pointer (pointer released or left the surface)."""
        if self.mode == InteractionMode.IDLE:
            return False

        self._stop_tracking()
        self._redraw()
        return True

    # ------------------------------------------------------------------
    # Geometry updates
    # ------------------------------------------------------------------

    def _resize_to(self, x: float, y: float) -> None:
        circle = self.circle
        # Center stays put, so the radius is also bounded by the nearest edge
        limit = min(
            self.max_radius,
            edge_distance(circle.center_x, circle.center_y, self.width, self.height),
        )
        circle.radius = min(circle.distance_to(x, y), limit)

    def _move_to(self, x: float, y: float) -> None:
        circle = self.circle
        circle.center_x, circle.center_y = clamp_center(
            x - self.drag_offset.dx,
            y - self.drag_offset.dy,
            circle.radius,
            self.width,
            self.height,
        )

    def _stop_tracking(self) -> None:
        self.mode = InteractionMode.IDLE
        self.drag_offset = None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _redraw(self) -> None:
        self.revision += 1
        self._overlay = None
        if self._listeners and self.image is not None:
            overlay = self.render()
            for listener in self._listeners:
                listener(overlay)

    def render(self) -> np.ndarray:
        """
        Get the current overlay (image, outline, scrim with circle cut out).

        Rendered lazily and cached until the next transition.
        """
        if self.image is None:
            raise RuntimeError("No image loaded")
        if self._overlay is None:
            self._overlay = self.renderer.render_selection(self.image, self.circle)
        return self._overlay
