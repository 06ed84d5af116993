"""
Image utilities - modular architecture.

This package provides focused image utilities:
- converters: Format conversions (bytes, NumPy, PIL, base64, color spaces)
- processors: Image operations (square extraction, resize, background flattening)
"""

from core.image.converters import ImageConverters
from core.image.processors import ImageProcessors

__all__ = ["ImageConverters", "ImageProcessors"]
