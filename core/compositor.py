"""
Thumbnail compositor.

Turns a source image and a finalized circle selection into a square PNG
thumbnail of a fixed size (200 or 400 px) on an opaque background:

    validate -> crop bounding square -> flatten -> resample -> encode

Everything here is a pure function of (image, circle, background color): no
I/O and no shared state, so identical inputs always give identical bytes.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np

from core.exceptions import ImageTooSmallException, NoSelectionException
from core.constants import Colors, ExportConstants
from core.enums import BackgroundColor
from core.geometry import Circle
from core.image.converters import ImageConverters
from core.image.processors import ImageProcessors
from core.utils.enum_converter import EnumConverter

logger = logging.getLogger(__name__)

BACKGROUND_BGR = {
    BackgroundColor.WHITE: Colors.WHITE,
    BackgroundColor.BLACK: Colors.BLACK,
}

BACKGROUND_HEX = {
    BackgroundColor.WHITE: Colors.WHITE_HEX,
    BackgroundColor.BLACK: Colors.BLACK_HEX,
}


@dataclass(frozen=True)
class ExportSpec:
    """Export parameters derived from a finalized circle"""

    diameter: float
    target_size: int
    background_color: BackgroundColor

    @property
    def background_hex(self) -> str:
        return BACKGROUND_HEX[self.background_color]


def parse_background(value: Any) -> BackgroundColor:
    """Parse a background selection; anything unset or unknown means white."""
    return EnumConverter.parse_enum(value, BackgroundColor, BackgroundColor.WHITE, normalize=True)


def select_target_size(diameter: float) -> int:
    """
    Map a circle diameter to the output size.

    Args:
        diameter: Circle diameter in image pixels

    Returns:
        400 for diameters of 400 and above, 200 for [200, 400)

    Raises:
        ImageTooSmallException: If diameter is below 200
    """
    if diameter >= ExportConstants.LARGE_TARGET_SIZE:
        return ExportConstants.LARGE_TARGET_SIZE
    if diameter >= ExportConstants.MIN_DIAMETER:
        return ExportConstants.SMALL_TARGET_SIZE
    raise ImageTooSmallException.for_diameter(diameter)


def build_export_spec(circle: Optional[Circle], background: Any = None) -> ExportSpec:
    """
    Validate a selection and derive its export parameters.

    Raises:
        NoSelectionException: If there is no circle or its radius is 0
        ImageTooSmallException: If the diameter is below 200
    """
    if circle is None or circle.is_empty:
        raise NoSelectionException()

    diameter = circle.diameter
    return ExportSpec(
        diameter=diameter,
        target_size=select_target_size(diameter),
        background_color=parse_background(background),
    )


def crop_box(circle: Circle, image_width: int, image_height: int) -> Tuple[int, int, int]:
    """
    Integer pixel square bounding a circle, kept inside the image.

    Returns:
        Tuple of (left, top, side)
    """
    left, top, side = circle.bounding_box()
    side_px = max(1, min(int(round(side)), image_width, image_height))
    left_px = max(0, min(int(round(left)), image_width - side_px))
    top_px = max(0, min(int(round(top)), image_height - side_px))
    return left_px, top_px, side_px


def compose_image(
    image: np.ndarray, circle: Optional[Circle], background: Any = None
) -> np.ndarray:
    """
    Composite the selected region into a square thumbnail raster.

    Args:
        image: Source image (grayscale, BGR or BGRA)
        circle: Finalized selection
        background: Background selection ("white"/"black"); defaults to white

    Returns:
        Opaque BGR image of target_size x target_size

    Raises:
        NoSelectionException: If there is no usable selection
        ImageTooSmallException: If the selection diameter is below 200
    """
    spec = build_export_spec(circle, background)
    img_height, img_width = image.shape[:2]

    left, top, side = crop_box(circle, img_width, img_height)
    cropped = ImageProcessors.extract_square(image, left, top, side)
    # Transparent pixels take the background before resampling
    flattened = ImageProcessors.flatten_onto_background(
        cropped, BACKGROUND_BGR[spec.background_color]
    )
    result = ImageProcessors.resize_square(flattened, spec.target_size)

    logger.debug(
        f"Composed {side}px crop at ({left},{top}) into {spec.target_size}px "
        f"on {spec.background_hex}"
    )
    return result


def compose(image: np.ndarray, circle: Optional[Circle], background: Any = None) -> bytes:
    """
    Composite the selected region and encode it as PNG.

    Args:
        image: Source image
        circle: Finalized selection
        background: Background selection ("white"/"black"); defaults to white

    Returns:
        PNG bytes of the square thumbnail
    """
    return ImageConverters.encode_png(compose_image(image, circle, background))
