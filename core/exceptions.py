"""
Exception hierarchy for Circle Thumbnail Studio.

Every user-facing failure is a ThumbnailStudioException subclass carrying its
HTTP status code and a short error kind, so the API layer can render it
without knowing the individual failure.
"""

from typing import Any, Dict, Optional

from core.constants import ErrorMessages, ExportConstants, ImageConstants


class ThumbnailStudioException(Exception):
    """Base exception for all application errors"""

    status_code = 500
    error_kind = "Error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {
            "success": False,
            "error": self.message,
            "kind": self.error_kind,
        }
        if self.details:
            content["details"] = self.details
        return content


class ImageTooSmallException(ThumbnailStudioException):
    """Source image or selected circle is below the minimum size"""

    status_code = 400
    error_kind = "ImageTooSmall"

    @classmethod
    def for_image(cls, width: int, height: int) -> "ImageTooSmallException":
        return cls(
            ErrorMessages.IMAGE_TOO_SMALL.format(
                min=ImageConstants.MIN_IMAGE_DIMENSION, width=width, height=height
            ),
            details={"width": width, "height": height},
        )

    @classmethod
    def for_diameter(cls, diameter: float) -> "ImageTooSmallException":
        return cls(
            ErrorMessages.SELECTION_TOO_SMALL.format(min=ExportConstants.MIN_DIAMETER),
            details={"diameter": diameter},
        )


class NoSelectionException(ThumbnailStudioException):
    """Export attempted without a circle (or with a zero radius)"""

    status_code = 400
    error_kind = "NoSelection"

    def __init__(self, message: str = ErrorMessages.NO_SELECTION, **kwargs):
        super().__init__(message, **kwargs)


class MissingInputException(ThumbnailStudioException):
    """Required user input (URL, file, filename) is empty"""

    status_code = 400
    error_kind = "MissingInput"


class ImageNotLoadedException(ThumbnailStudioException):
    """Session has no source image yet"""

    status_code = 400
    error_kind = "ImageNotLoaded"

    def __init__(self, session_id: str):
        super().__init__(ErrorMessages.IMAGE_NOT_LOADED.format(session_id=session_id))


class ImageLoadException(ThumbnailStudioException):
    """Network or decode failure while acquiring an image"""

    status_code = 422
    error_kind = "LoadFailure"


class PersistenceException(ThumbnailStudioException):
    """Writing a thumbnail to storage failed"""

    status_code = 500
    error_kind = "PersistenceFailure"


class SessionNotFoundException(ThumbnailStudioException):
    """Unknown editor session id"""

    status_code = 404
    error_kind = "SessionNotFound"

    def __init__(self, session_id: str):
        super().__init__(ErrorMessages.SESSION_NOT_FOUND.format(session_id=session_id))
