"""
Constants and configuration values for Circle Thumbnail Studio.
Centralizes all magic numbers and configuration constants.
"""


# Image Constants
class ImageConstants:
    """Constants related to source images."""

    # Both dimensions of a source image must reach this size
    MIN_IMAGE_DIMENSION = 200

    # Encoding
    EXPORT_FORMAT = ".png"
    EXPORT_MEDIA_TYPE = "image/png"


# Export Constants
class ExportConstants:
    """Constants related to thumbnail export."""

    # Output is always one of two fixed square sizes
    SMALL_TARGET_SIZE = 200
    LARGE_TARGET_SIZE = 400
    TARGET_SIZES = (SMALL_TARGET_SIZE, LARGE_TARGET_SIZE)

    # Smallest circle diameter that can be exported
    MIN_DIAMETER = SMALL_TARGET_SIZE


# Selection Overlay Constants
class OverlayConstants:
    """Constants for the selection overlay."""

    OUTLINE_COLOR = (255, 123, 0)  # #007bff (BGR)
    OUTLINE_THICKNESS = 3
    SCRIM_COLOR = (0, 0, 0)
    SCRIM_ALPHA = 0.5


# Colors (BGR format for OpenCV)
class Colors:
    """Standard colors in BGR format."""

    WHITE = (255, 255, 255)
    BLACK = (0, 0, 0)

    WHITE_HEX = "#FFFFFF"
    BLACK_HEX = "#000000"


# Storage Constants
class StorageConstants:
    """Constants related to thumbnail persistence."""

    DEFAULT_THUMBNAILS_DIR = "thumbnails"
    DEFAULT_STATIC_DIR = "static"
    FILE_EXTENSION = ".png"


# Session Constants
class SessionConstants:
    """Constants related to editor sessions."""

    DEFAULT_MAX_SESSIONS = 50
    MIN_SESSIONS = 1
    MAX_SESSIONS = 1000
    SESSION_ID_PREFIX = "sess_"


# Loader Constants
class LoaderConstants:
    """Constants related to image acquisition."""

    DEFAULT_URL_TIMEOUT_S = 10.0
    DEFAULT_MAX_DOWNLOAD_MB = 25
    DOWNLOAD_CHUNK_SIZE = 64 * 1024


# Error Messages
class ErrorMessages:
    """Standard error messages."""

    # Image errors
    IMAGE_TOO_SMALL = (
        "Image is too small. Minimum dimensions are {min}x{min} pixels. "
        "Your image is {width}x{height}."
    )
    IMAGE_NOT_LOADED = "No image loaded in session {session_id}"
    IMAGE_DECODE_FAILED = "Failed to decode image: {error}"
    IMAGE_URL_FAILED = (
        "Failed to load image from URL. Make sure the URL is correct and reachable: {error}"
    )
    IMAGE_DOWNLOAD_TOO_LARGE = "Image download exceeds {limit_mb} MB"

    # Selection errors
    NO_SELECTION = (
        "Please select a circular area first by clicking and dragging on the image."
    )
    SELECTION_TOO_SMALL = "Selected circle is too small. Minimum diameter is {min} pixels."

    # Input errors
    MISSING_URL = "Please enter an image URL"
    MISSING_FILE = "No image provided"
    MISSING_FILENAME = "Please enter a filename."

    # Session errors
    SESSION_NOT_FOUND = "Session {session_id} not found"

    # Persistence errors
    SAVE_FAILED = "Failed to save image: {error}"


# Success Messages
class SuccessMessages:
    """Standard success messages."""

    IMAGE_LOADED = "Image loaded successfully! Click and drag to select a circular area."
    PREVIEW_GENERATED = "Preview generated at {size}x{size}px"
    IMAGE_SAVED = "Image saved successfully as {filename}"
