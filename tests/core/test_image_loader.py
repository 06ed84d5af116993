"""
Tests for image acquisition
"""

import cv2
import numpy as np
import pytest
import requests

from core.exceptions import ImageLoadException, ImageTooSmallException, MissingInputException
from core.image_loader import ImageLoader


def _png(image):
    return cv2.imencode(".png", image)[1].tobytes()


class TestFromBytes:
    """Decoding uploaded bytes"""

    def test_loads_png(self, image_loader, png_bytes):
        image = image_loader.from_bytes(png_bytes(300, 250))
        assert image.shape == (250, 300, 3)

    def test_loads_jpeg(self, image_loader, square_image):
        data = cv2.imencode(".jpg", square_image)[1].tobytes()
        assert image_loader.from_bytes(data).shape == (300, 300, 3)

    def test_keeps_alpha_channel(self, image_loader, transparent_image):
        image = image_loader.from_bytes(_png(transparent_image))
        assert image.shape == (300, 300, 4)

    def test_minimum_size_accepted(self, image_loader, png_bytes):
        assert image_loader.from_bytes(png_bytes(200, 200)).shape[:2] == (200, 200)

    def test_narrow_image_rejected(self, image_loader, png_bytes):
        with pytest.raises(ImageTooSmallException) as exc_info:
            image_loader.from_bytes(png_bytes(199, 500))
        assert "Your image is 199x500" in exc_info.value.message
        assert exc_info.value.details == {"width": 199, "height": 500}

    def test_short_image_rejected(self, image_loader, png_bytes):
        with pytest.raises(ImageTooSmallException):
            image_loader.from_bytes(png_bytes(500, 199))

    def test_empty_data(self, image_loader):
        with pytest.raises(MissingInputException):
            image_loader.from_bytes(b"")

    def test_corrupt_data(self, image_loader):
        with pytest.raises(ImageLoadException) as exc_info:
            image_loader.from_bytes(b"definitely not an image")
        assert exc_info.value.status_code == 422

    def test_16bit_png_scaled_to_8bit(self, image_loader):
        deep = np.full((220, 220, 3), 65535, dtype=np.uint16)
        image = image_loader.from_bytes(_png(deep))
        assert image.dtype == np.uint8
        assert np.all(image == 255)


class TestFromFile:
    """Loading from disk"""

    def test_loads_file(self, image_loader, tmp_path, png_bytes):
        path = tmp_path / "photo.png"
        path.write_bytes(png_bytes(320, 240))
        assert image_loader.from_file(path).shape == (240, 320, 3)

    def test_missing_file(self, image_loader, tmp_path):
        with pytest.raises(ImageLoadException):
            image_loader.from_file(tmp_path / "nope.png")


class TestFromUrl:
    """Downloading remote images"""

    def test_downloads_and_decodes(self, image_loader, mock_http, serve_bytes, png_bytes):
        serve_bytes(png_bytes(400, 300))
        image = image_loader.from_url("  https://example.com/photo.png ")

        assert image.shape == (300, 400, 3)
        mock_http.get.assert_called_once_with(
            "https://example.com/photo.png", stream=True, timeout=2.0
        )

    def test_empty_url(self, image_loader, mock_http):
        with pytest.raises(MissingInputException) as exc_info:
            image_loader.from_url("   ")
        assert exc_info.value.message == "Please enter an image URL"
        mock_http.get.assert_not_called()

    def test_network_error(self, image_loader, mock_http):
        mock_http.get.side_effect = requests.ConnectionError("connection refused")
        with pytest.raises(ImageLoadException) as exc_info:
            image_loader.from_url("https://example.com/photo.png")
        assert "connection refused" in exc_info.value.message

    def test_http_error_status(self, image_loader, serve_bytes):
        serve_bytes(b"", status_error=requests.HTTPError("404 Client Error"))
        with pytest.raises(ImageLoadException):
            image_loader.from_url("https://example.com/missing.png")

    def test_download_size_limit(self, image_loader, serve_bytes):
        serve_bytes(b"\0" * (1024 * 1024 + 1))
        with pytest.raises(ImageLoadException) as exc_info:
            image_loader.from_url("https://example.com/huge.png")
        assert "exceeds 1 MB" in exc_info.value.message

    def test_too_small_remote_image(self, image_loader, serve_bytes, png_bytes):
        serve_bytes(png_bytes(150, 150))
        with pytest.raises(ImageTooSmallException):
            image_loader.from_url("https://example.com/tiny.png")

    def test_default_session(self):
        loader = ImageLoader()
        assert isinstance(loader.http, requests.Session)
        loader.http.close()

    def test_explicit_none_session(self):
        loader = ImageLoader(http=None)
        assert isinstance(loader.http, requests.Session)
        loader.http.close()
