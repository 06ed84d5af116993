"""
Geometry primitives for circular selections.

All coordinates are image-space pixels: positions relative to the original
source raster, independent of how the image is scaled for display.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class Circle:
    """Circular selection: center and radius in image-space pixels"""

    center_x: float
    center_y: float
    radius: float = 0.0

    @property
    def diameter(self) -> float:
        return 2 * self.radius

    @property
    def is_empty(self) -> bool:
        return self.radius <= 0

    def distance_to(self, x: float, y: float) -> float:
        """Euclidean distance from the center to a point."""
        return math.hypot(x - self.center_x, y - self.center_y)

    def contains_point(self, x: float, y: float) -> bool:
        """Check if point lies on or inside the circle boundary."""
        return self.distance_to(x, y) <= self.radius

    def bounding_box(self) -> Tuple[float, float, float]:
        """
        Get the axis-aligned square bounding the circle.

        Returns:
            Tuple of (left, top, side)
        """
        return (self.center_x - self.radius, self.center_y - self.radius, self.diameter)

    def to_dict(self) -> dict:
        return {"center_x": self.center_x, "center_y": self.center_y, "radius": self.radius}


@dataclass
class DragOffset:
    """Pointer offset from the circle center captured when a move starts"""

    dx: float = 0.0
    dy: float = 0.0


@dataclass
class DisplayRect:
    """
    On-screen rectangle the image is displayed in.

    Mirrors a DOM bounding client rect: origin plus displayed size, all in
    device pixels.
    """

    left: float
    top: float
    width: float
    height: float


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def to_image_coords(
    client_x: float,
    client_y: float,
    image_width: int,
    image_height: int,
    display: Optional[DisplayRect] = None,
) -> Tuple[float, float]:
    """
    Convert a device pointer position into image-space coordinates.

    Each axis is scaled independently by image_dim / displayed_dim, so the
    selection stays correct whatever size the image is shown at.

    Args:
        client_x: Pointer x in device pixels
        client_y: Pointer y in device pixels
        image_width: Source image width
        image_height: Source image height
        display: Display rectangle; None when the pointer is already in image space

    Returns:
        Tuple of (x, y) in image space
    """
    if display is None:
        return float(client_x), float(client_y)

    if display.width <= 0 or display.height <= 0:
        raise ValueError(f"Display size must be positive: {display.width}x{display.height}")

    scale_x = image_width / display.width
    scale_y = image_height / display.height
    return (client_x - display.left) * scale_x, (client_y - display.top) * scale_y


def max_radius(image_width: int, image_height: int) -> float:
    """Largest radius whose circle fits inside the image."""
    return min(image_width, image_height) / 2


def edge_distance(x: float, y: float, image_width: int, image_height: int) -> float:
    """Distance from a point to the nearest image edge (0 when outside)."""
    return max(0.0, min(x, y, image_width - x, image_height - y))


def clamp_center(
    x: float, y: float, radius: float, image_width: int, image_height: int
) -> Tuple[float, float]:
    """
    Clamp a candidate center so a circle of the given radius stays in the image.

    Each axis is clamped independently to [radius, dimension - radius].
    """
    return (
        clamp(x, radius, image_width - radius),
        clamp(y, radius, image_height - radius),
    )


def is_circle_contained(circle: Circle, image_width: int, image_height: int) -> bool:
    """Check the circle invariants against the image bounds."""
    if circle.radius < 0 or circle.radius > max_radius(image_width, image_height):
        return False
    if circle.radius == 0:
        return True
    return (
        circle.radius <= circle.center_x <= image_width - circle.radius
        and circle.radius <= circle.center_y <= image_height - circle.radius
    )
