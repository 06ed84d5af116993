"""
Image format conversion utilities.

Handles conversions between different image formats:
- Encoded bytes (PNG, JPEG, ...) to NumPy arrays (OpenCV BGR/BGRA format)
- NumPy arrays to PNG bytes
- PIL Images
- Base64 encoded strings
- Grayscale/color conversions
"""

import base64
import io
import logging
from typing import Union

import cv2
import numpy as np
from PIL import Image

from core.constants import ImageConstants

logger = logging.getLogger(__name__)


class ImageConverters:
    """Utilities for converting between image formats."""

    @staticmethod
    def decode_image(data: bytes) -> np.ndarray:
        """
        Decode encoded image bytes to a NumPy array.

        The alpha channel is preserved when present, so the result is
        BGR (3 channels), BGRA (4 channels) or grayscale (2-D).

        Args:
            data: Encoded image bytes

        Returns:
            NumPy array (OpenCV format)

        Raises:
            ValueError: If the bytes cannot be decoded
        """
        if not data:
            raise ValueError("Empty image data")

        nparr = np.frombuffer(data, np.uint8)
        image = cv2.imdecode(nparr, cv2.IMREAD_UNCHANGED)

        if image is None:
            # Fall back to PIL for formats OpenCV does not read (e.g. GIF)
            try:
                with Image.open(io.BytesIO(data)) as pil_image:
                    has_alpha = pil_image.mode in ("RGBA", "LA", "P")
                    pil_image = pil_image.convert("RGBA" if has_alpha else "RGB")
                    image = ImageConverters.pil_to_numpy(pil_image, bgr=True)
            except Exception as e:
                raise ValueError(f"Unsupported or corrupt image data: {e}") from e

        if image.dtype == np.uint16:
            # 16-bit PNG/TIFF: scale down to 8 bits per channel
            image = cv2.convertScaleAbs(image, alpha=255.0 / 65535)
        elif image.dtype != np.uint8:
            raise ValueError(f"Unsupported pixel type: {image.dtype}")

        return image

    @staticmethod
    def encode_png(image: np.ndarray) -> bytes:
        """
        Encode OpenCV image (NumPy array) to PNG bytes.

        Args:
            image: OpenCV image (NumPy array)

        Returns:
            PNG encoded bytes
        """
        success, buffer = cv2.imencode(ImageConstants.EXPORT_FORMAT, image)
        if not success:
            raise ValueError("Failed to encode image as PNG")
        return buffer.tobytes()

    @staticmethod
    def pil_to_numpy(image: Image.Image, bgr: bool = True) -> np.ndarray:
        """
        Convert PIL Image to NumPy array.

        Args:
            image: PIL Image
            bgr: If True, convert to BGR/BGRA format (OpenCV), else keep RGB

        Returns:
            NumPy array
        """
        array = np.array(image)

        if bgr and len(array.shape) == 3 and array.shape[2] == 3:
            array = cv2.cvtColor(array, cv2.COLOR_RGB2BGR)
        elif bgr and len(array.shape) == 3 and array.shape[2] == 4:
            array = cv2.cvtColor(array, cv2.COLOR_RGBA2BGRA)

        return array

    @staticmethod
    def to_base64(image: Union[np.ndarray, bytes]) -> str:
        """
        Convert image to base64 string.

        Args:
            image: NumPy array (encoded as PNG) or already encoded bytes

        Returns:
            Base64 encoded string
        """
        try:
            if isinstance(image, np.ndarray):
                image = ImageConverters.encode_png(image)
            return base64.b64encode(image).decode("utf-8")
        except Exception as e:
            logger.error(f"Failed to convert image to base64: {e}")
            raise

    @staticmethod
    def ensure_bgr(image: np.ndarray) -> np.ndarray:
        """
        Ensure image is in 3-channel BGR format.

        Grayscale is expanded and an alpha channel is dropped.

        Args:
            image: Input image (grayscale, BGR or BGRA)

        Returns:
            Image in BGR format
        """
        if len(image.shape) == 2:
            return cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
        if image.shape[2] == 4:
            return cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)
        return image.copy()

    @staticmethod
    def has_alpha(image: np.ndarray) -> bool:
        """Check if image carries an alpha channel."""
        return len(image.shape) == 3 and image.shape[2] == 4
