"""
Overlay rendering for the circle selection editor.

Produces the "spotlight" view of a selection: the source image, the circle
outline, and a semi-transparent scrim over everything outside the circle.
The overlay is visual guidance only and never part of exported pixels.
"""

from typing import Optional, Tuple

import cv2
import numpy as np

from core.constants import OverlayConstants
from core.geometry import Circle
from core.image.converters import ImageConverters


class OverlayRenderer:
    """
    Renders circle selections as overlays on images.

    Provides consistent styling for the selection outline and scrim.
    """

    def __init__(
        self,
        outline_color: Tuple[int, int, int] = OverlayConstants.OUTLINE_COLOR,
        outline_thickness: int = OverlayConstants.OUTLINE_THICKNESS,
        scrim_color: Tuple[int, int, int] = OverlayConstants.SCRIM_COLOR,
        scrim_alpha: float = OverlayConstants.SCRIM_ALPHA,
        line_type=cv2.LINE_AA,
    ):
        """
        Initialize overlay renderer.

        Args:
            outline_color: Circle outline color in BGR format
            outline_thickness: Circle outline thickness in pixels
            scrim_color: Scrim color in BGR format
            scrim_alpha: Scrim opacity (0.0-1.0)
            line_type: Line type for anti-aliasing
        """
        if not 0.0 <= scrim_alpha <= 1.0:
            raise ValueError(f"scrim_alpha must be within [0, 1], got {scrim_alpha}")

        self.outline_color = outline_color
        self.outline_thickness = outline_thickness
        self.scrim_color = scrim_color
        self.scrim_alpha = scrim_alpha
        self.line_type = line_type

    def draw_outline(self, image: np.ndarray, circle: Circle) -> np.ndarray:
        """
        Draw the circle outline on the image (in place).

        Args:
            image: BGR image
            circle: Selection circle

        Returns:
            Image with outline drawn
        """
        cv2.circle(
            image,
            _pixel_center(circle),
            int(round(circle.radius)),
            self.outline_color,
            self.outline_thickness,
            self.line_type,
        )
        return image

    def draw_scrim(self, image: np.ndarray, circle: Circle) -> np.ndarray:
        """
        Cover the image with the scrim, leaving the circle interior clear.

        Args:
            image: BGR image
            circle: Selection circle

        Returns:
            New image with the scrim applied
        """
        scrim = np.empty_like(image)
        scrim[:] = self.scrim_color
        dimmed = cv2.addWeighted(image, 1.0 - self.scrim_alpha, scrim, self.scrim_alpha, 0)

        hole = np.zeros(image.shape[:2], dtype=np.uint8)
        cv2.circle(hole, _pixel_center(circle), int(round(circle.radius)), 255, -1)

        return np.where(hole[..., None] > 0, image, dimmed)

    def render_selection(self, image: np.ndarray, circle: Optional[Circle]) -> np.ndarray:
        """
        Render the selection view of an image.

        Full repaint of the source image, then the outline, then the scrim
        with the circle interior punched out. With no circle (or a zero
        radius) the plain image is returned.

        Args:
            image: Source image (grayscale, BGR or BGRA)
            circle: Current selection, or None

        Returns:
            BGR image with the overlay
        """
        result = ImageConverters.ensure_bgr(image)
        if circle is None or circle.is_empty:
            return result

        self.draw_outline(result, circle)
        return self.draw_scrim(result, circle)


def _pixel_center(circle: Circle) -> Tuple[int, int]:
    return int(round(circle.center_x)), int(round(circle.center_y))
