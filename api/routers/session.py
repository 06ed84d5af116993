"""
Session API Router - Editor sessions and pointer-driven circle selection
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from api.dependencies import get_selection_service
from api.exceptions import MissingInputException, safe_endpoint
from core.constants import ErrorMessages, ImageConstants, SuccessMessages
from schemas import (
    ImageLoadResponse,
    ImageUrlRequest,
    PointerEventRequest,
    PointerEventResponse,
    SessionState,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
@safe_endpoint
async def create_session(selection_service=Depends(get_selection_service)) -> SessionState:
    """Create a new editor session"""
    session = selection_service.create_session()
    return SessionState.from_session(session)


@router.get("/{session_id}")
@safe_endpoint
async def get_session_state(
    session_id: str, selection_service=Depends(get_selection_service)
) -> SessionState:
    """Get current selection state"""
    return SessionState.from_session(selection_service.get_session(session_id))


@router.delete("/{session_id}")
@safe_endpoint
async def delete_session(
    session_id: str, selection_service=Depends(get_selection_service)
) -> dict:
    """Discard a session"""
    selection_service.delete_session(session_id)
    return {"success": True, "message": f"Session {session_id} deleted"}


@router.post("/{session_id}/image")
@safe_endpoint
async def upload_image(
    session_id: str,
    file: Optional[UploadFile] = File(None),
    selection_service=Depends(get_selection_service),
) -> ImageLoadResponse:
    """
    Load a source image from an uploaded file.

    Images smaller than 200x200 are rejected and the previous image (if
    any) stays loaded.
    """
    if file is None:
        raise MissingInputException(ErrorMessages.MISSING_FILE)

    contents = await file.read()
    session = await run_in_threadpool(
        selection_service.load_image_bytes, session_id, contents, file.filename
    )

    return ImageLoadResponse(
        success=True,
        message=SuccessMessages.IMAGE_LOADED,
        state=SessionState.from_session(session),
    )


@router.post("/{session_id}/image-url")
@safe_endpoint
async def load_image_from_url(
    session_id: str,
    request: ImageUrlRequest,
    selection_service=Depends(get_selection_service),
) -> ImageLoadResponse:
    """Load a source image from a remote URL"""
    session = await run_in_threadpool(selection_service.load_image_url, session_id, request.url)

    return ImageLoadResponse(
        success=True,
        message=SuccessMessages.IMAGE_LOADED,
        state=SessionState.from_session(session),
    )


@router.post("/{session_id}/pointer")
@safe_endpoint
async def pointer_event(
    session_id: str,
    event: PointerEventRequest,
    selection_service=Depends(get_selection_service),
) -> PointerEventResponse:
    """
    Feed one pointer event (down/move/up/leave) to the selection controller.

    Coordinates are device pixels; pass the displayed image rectangle so
    they can be mapped to image space.
    """
    changed, session = await run_in_threadpool(selection_service.dispatch, session_id, event)
    return PointerEventResponse(changed=changed, state=SessionState.from_session(session))


@router.post("/{session_id}/reset")
@safe_endpoint
async def reset_selection(
    session_id: str, selection_service=Depends(get_selection_service)
) -> SessionState:
    """Clear the current selection"""
    session = selection_service.reset(session_id)
    return SessionState.from_session(session)


@router.get("/{session_id}/overlay")
@safe_endpoint
async def get_overlay(session_id: str, selection_service=Depends(get_selection_service)):
    """Current selection view (image, outline and scrim) as PNG"""
    png_bytes = await run_in_threadpool(selection_service.render_overlay, session_id)
    return Response(content=png_bytes, media_type=ImageConstants.EXPORT_MEDIA_TYPE)
