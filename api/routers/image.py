"""
Image API Router - Store thumbnails composed by the browser
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from starlette.concurrency import run_in_threadpool

from api.dependencies import get_export_service
from api.exceptions import MissingInputException, safe_endpoint
from core.constants import ErrorMessages
from schemas import SaveResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_size(size: Optional[str]) -> Optional[int]:
    try:
        return int(size) if size not in (None, "") else None
    except ValueError:
        logger.warning(f"Ignoring non-numeric thumbnail size {size!r}")
        return None


@router.post("/save-image")
@safe_endpoint
async def save_image(
    image: Optional[UploadFile] = File(None),
    size: Optional[str] = Form(None),
    export_service=Depends(get_export_service),
) -> SaveResponse:
    """
    Store a PNG thumbnail uploaded as multipart form data.

    The uploaded file name is the suggested name; a trailing .png is removed
    and the file is written as thumbnails/<name>.png.

    Args:
        image: PNG thumbnail
        size: Thumbnail size (200 or 400)
        export_service: Export service dependency

    Returns:
        SaveResponse with the stored relative filename
    """
    if image is None:
        raise MissingInputException(ErrorMessages.MISSING_FILE)

    contents = await image.read()
    result = await run_in_threadpool(
        export_service.save_bytes, contents, _parse_size(size), image.filename or ""
    )

    return SaveResponse(success=result.success, filename=result.filename)
