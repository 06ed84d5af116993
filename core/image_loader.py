"""
Image acquisition - load source images from uploads, files or URLs.

All paths decode to an OpenCV array and enforce the minimum source size.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
import requests

from core.exceptions import ImageLoadException, ImageTooSmallException, MissingInputException
from core.constants import ErrorMessages, ImageConstants, LoaderConstants
from core.image.converters import ImageConverters

logger = logging.getLogger(__name__)


class ImageLoader:
    """Decodes and validates source images"""

    def __init__(
        self,
        url_timeout_s: float = LoaderConstants.DEFAULT_URL_TIMEOUT_S,
        max_download_mb: int = LoaderConstants.DEFAULT_MAX_DOWNLOAD_MB,
        min_dimension: int = ImageConstants.MIN_IMAGE_DIMENSION,
        http: Optional[requests.Session] = None,
    ):
        """
        Initialize image loader.

        Args:
            url_timeout_s: Connect/read timeout for remote images
            max_download_mb: Largest remote image accepted
            min_dimension: Minimum width and height of a source image
            http: Optional requests session (shared connection pool)
        """
        self.url_timeout_s = url_timeout_s
        self.max_download_mb = max_download_mb
        self.min_dimension = min_dimension
        self.http = http or requests.Session()

    def validate_dimensions(self, image: np.ndarray) -> np.ndarray:
        """
        Reject images whose width or height is below the minimum.

        Raises:
            ImageTooSmallException: If either dimension is too small
        """
        height, width = image.shape[:2]
        if width < self.min_dimension or height < self.min_dimension:
            raise ImageTooSmallException.for_image(width, height)
        return image

    def from_bytes(self, data: bytes, source: str = "upload") -> np.ndarray:
        """
        Decode encoded image bytes.

        Args:
            data: Encoded image bytes
            source: Description of the origin, for logs

        Returns:
            Decoded image

        Raises:
            MissingInputException: If data is empty
            ImageLoadException: If the data cannot be decoded
            ImageTooSmallException: If the image is below the minimum size
        """
        if not data:
            raise MissingInputException(ErrorMessages.MISSING_FILE)

        try:
            image = ImageConverters.decode_image(data)
        except ValueError as e:
            logger.error(f"Failed to decode image from {source}: {e}")
            raise ImageLoadException(ErrorMessages.IMAGE_DECODE_FAILED.format(error=e))

        self.validate_dimensions(image)
        logger.info(f"Loaded {image.shape[1]}x{image.shape[0]} image from {source}")
        return image

    def from_file(self, path: Union[str, Path]) -> np.ndarray:
        """Load an image from a local file."""
        if not str(path).strip():
            raise MissingInputException(ErrorMessages.MISSING_FILE)

        try:
            data = Path(path).read_bytes()
        except OSError as e:
            logger.error(f"Failed to read image file {path}: {e}")
            raise ImageLoadException(ErrorMessages.IMAGE_DECODE_FAILED.format(error=e))

        return self.from_bytes(data, source=str(path))

    def from_url(self, url: str) -> np.ndarray:
        """
        Download and decode an image from a URL.

        Args:
            url: http(s) URL of the image

        Returns:
            Decoded image

        Raises:
            MissingInputException: If url is empty
            ImageLoadException: On network errors, bad status or oversize body
            ImageTooSmallException: If the image is below the minimum size
        """
        url = (url or "").strip()
        if not url:
            raise MissingInputException(ErrorMessages.MISSING_URL)

        data = self._download(url)
        return self.from_bytes(data, source=url)

    def _download(self, url: str) -> bytes:
        limit = self.max_download_mb * 1024 * 1024

        try:
            with self.http.get(url, stream=True, timeout=self.url_timeout_s) as response:
                response.raise_for_status()

                chunks = []
                received = 0
                for chunk in response.iter_content(chunk_size=LoaderConstants.DOWNLOAD_CHUNK_SIZE):
                    received += len(chunk)
                    if received > limit:
                        raise ImageLoadException(
                            ErrorMessages.IMAGE_DOWNLOAD_TOO_LARGE.format(
                                limit_mb=self.max_download_mb
                            )
                        )
                    chunks.append(chunk)

        except requests.RequestException as e:
            logger.error(f"Failed to download image from {url}: {e}")
            raise ImageLoadException(ErrorMessages.IMAGE_URL_FAILED.format(error=e))

        return b"".join(chunks)
