"""
Export API Router - Thumbnail preview and save
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from api.dependencies import get_export_service
from api.exceptions import safe_endpoint
from core.compositor import ExportSpec
from core.constants import SuccessMessages
from core.image.converters import ImageConverters
from schemas import ExportSpecModel, PreviewRequest, PreviewResponse, SaveRequest, SaveResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _spec_model(spec: ExportSpec) -> ExportSpecModel:
    return ExportSpecModel(
        diameter=spec.diameter,
        target_size=spec.target_size,
        background_color=spec.background_color.value,
        background_hex=spec.background_hex,
    )


@router.post("/{session_id}/preview")
@safe_endpoint
async def preview_thumbnail(
    session_id: str,
    request: Optional[PreviewRequest] = None,
    export_service=Depends(get_export_service),
) -> PreviewResponse:
    """
    Render the thumbnail for the current selection without storing it.

    Output is 400x400 for diameters of 400 and above, 200x200 for [200, 400);
    smaller selections are rejected.
    """
    background = request.background if request else None
    png_bytes, spec = await run_in_threadpool(export_service.render, session_id, background)

    return PreviewResponse(
        success=True,
        message=SuccessMessages.PREVIEW_GENERATED.format(size=spec.target_size),
        image_base64=ImageConverters.to_base64(png_bytes),
        spec=_spec_model(spec),
    )


@router.post("/{session_id}/save")
@safe_endpoint
async def save_thumbnail(
    session_id: str,
    request: SaveRequest,
    export_service=Depends(get_export_service),
) -> SaveResponse:
    """Render the thumbnail for the current selection and store it"""
    result, spec = await run_in_threadpool(
        export_service.save, session_id, request.filename, request.background
    )

    return SaveResponse(
        success=result.success,
        filename=result.filename,
        message=SuccessMessages.IMAGE_SAVED.format(filename=result.filename),
        spec=_spec_model(spec),
    )
