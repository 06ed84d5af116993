"""
Image processing operations.

Handles image manipulation tasks used by thumbnail export:
- Square region extraction
- Resizing to a fixed square size
- Flattening onto an opaque background
"""

import logging
from typing import Tuple

import cv2
import numpy as np

from core.image.converters import ImageConverters

logger = logging.getLogger(__name__)


class ImageProcessors:
    """Utilities for image manipulation."""

    @staticmethod
    def extract_square(image: np.ndarray, left: int, top: int, side: int) -> np.ndarray:
        """
        Extract a square region from an image.

        The region is shifted (never shrunk) to stay inside the image, so the
        result is always side x side as long as the image is large enough.

        Args:
            image: Input image
            left: Region x coordinate
            top: Region y coordinate
            side: Region side length

        Returns:
            Copy of the square region

        Raises:
            ValueError: If the square cannot fit in the image
        """
        img_height, img_width = image.shape[:2]

        if side <= 0 or side > img_width or side > img_height:
            raise ValueError(f"Square of side {side} does not fit image {img_width}x{img_height}")

        x = max(0, min(left, img_width - side))
        y = max(0, min(top, img_height - side))
        if (x, y) != (left, top):
            logger.warning(f"Square region ({left},{top},{side}) shifted to ({x},{y}) to fit image")

        return image[y : y + side, x : x + side].copy()

    @staticmethod
    def resize_square(image: np.ndarray, size: int) -> np.ndarray:
        """
        Resample an image to size x size.

        Uses area interpolation when shrinking and cubic when enlarging.

        Args:
            image: Input image as NumPy array
            size: Target side length

        Returns:
            Resized image as NumPy array
        """
        h, w = image.shape[:2]
        if (w, h) == (size, size):
            return image.copy()

        interpolation = cv2.INTER_AREA if size < max(w, h) else cv2.INTER_CUBIC
        return cv2.resize(image, (size, size), interpolation=interpolation)

    @staticmethod
    def flatten_onto_background(
        image: np.ndarray, background: Tuple[int, int, int]
    ) -> np.ndarray:
        """
        Draw an image over an opaque canvas of the background color.

        Alpha channels are blended over the background; opaque images cover
        it completely.

        Args:
            image: Input image (grayscale, BGR or BGRA)
            background: Background color in BGR format

        Returns:
            Opaque BGR image of the same size
        """
        h, w = image.shape[:2]
        canvas = np.empty((h, w, 3), dtype=np.uint8)
        canvas[:] = background

        if not ImageConverters.has_alpha(image):
            canvas[:] = ImageConverters.ensure_bgr(image)
            return canvas

        alpha = image[:, :, 3:4].astype(np.float32) / 255.0
        foreground = image[:, :, :3].astype(np.float32)
        blended = foreground * alpha + canvas.astype(np.float32) * (1.0 - alpha)
        return np.clip(np.rint(blended), 0, 255).astype(np.uint8)
