"""
Thumbnail Store - persists exported PNG thumbnails to disk
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Optional

from core.exceptions import MissingInputException, PersistenceException
from core.constants import ErrorMessages, ExportConstants, StorageConstants

logger = logging.getLogger(__name__)

_PNG_SUFFIX = re.compile(r"\.png$", re.IGNORECASE)


@dataclass
class SaveResult:
    """Outcome of a save attempt"""

    success: bool
    filename: str
    target_size: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"success": self.success, "filename": self.filename}


def strip_png_suffix(name: str) -> str:
    """Remove one trailing .png (any case) from a user supplied name."""
    return _PNG_SUFFIX.sub("", name.strip())


def storage_stem(filename: str) -> str:
    """
    File stem a suggested name is stored under.

    Only the last path component is kept so names cannot leave the storage
    directory. Returns an empty string for unusable names.
    """
    stem = strip_png_suffix(Path((filename or "").strip()).name)
    return "" if stem in (".", "..") else stem


class ThumbnailStore:
    """
    Writes thumbnails under a fixed storage directory.

    Names are used as given apart from the .png suffix: an existing file of
    the same name is overwritten.
    """

    def __init__(self, storage_path: str = StorageConstants.DEFAULT_THUMBNAILS_DIR):
        """
        Initialize Thumbnail Store

        Args:
            storage_path: Directory thumbnails are written to (created if missing)
        """
        self.storage_path = Path(storage_path)
        self.lock = Lock()

        if not self.storage_path.exists():
            self.storage_path.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created thumbnails directory: {self.storage_path}")

    def validate_filename(self, filename: str) -> str:
        """
        Check a suggested name and return the stem it is stored under.

        Raises:
            MissingInputException: If nothing usable remains of the name
        """
        stem = storage_stem(filename)
        if not stem:
            raise MissingInputException(ErrorMessages.MISSING_FILENAME)
        return stem

    def relative_name(self, stem: str) -> str:
        """Public name of a stored thumbnail, e.g. thumbnails/avatar.png"""
        return f"{self.storage_path.name}/{stem}{StorageConstants.FILE_EXTENSION}"

    def save(self, png_bytes: bytes, target_size: Optional[int], filename: str) -> SaveResult:
        """
        Store a thumbnail.

        Args:
            png_bytes: Encoded PNG image
            target_size: Side of the thumbnail (200 or 400), informational
            filename: Suggested name, with or without .png

        Returns:
            SaveResult with the stored relative filename

        Raises:
            MissingInputException: If filename or image bytes are empty
            PersistenceException: If the write fails
        """
        stem = self.validate_filename(filename)
        if not png_bytes:
            raise MissingInputException(ErrorMessages.MISSING_FILE)

        if target_size is not None and target_size not in ExportConstants.TARGET_SIZES:
            logger.warning(f"Unexpected thumbnail size {target_size} for {stem}")

        path = self.storage_path / f"{stem}{StorageConstants.FILE_EXTENSION}"

        with self.lock:
            try:
                if path.exists():
                    logger.warning(f"Overwriting existing thumbnail {path}")
                path.write_bytes(png_bytes)
            except OSError as e:
                logger.error(f"Failed to write thumbnail {path}: {e}")
                raise PersistenceException(ErrorMessages.SAVE_FAILED.format(error=e))

        relative = self.relative_name(stem)
        logger.info(f"Saved {target_size}px thumbnail as {relative} ({len(png_bytes)} bytes)")
        return SaveResult(success=True, filename=relative, target_size=target_size)

    def list_thumbnails(self) -> List[str]:
        """List stored thumbnails by relative name"""
        return sorted(self.relative_name(p.stem) for p in self.storage_path.glob("*.png"))

    def exists(self, filename: str) -> bool:
        stem = storage_stem(filename)
        return bool(stem) and (self.storage_path / f"{stem}.png").exists()
