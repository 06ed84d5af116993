"""
Export API models.

This module contains models for thumbnail export:
- Preview requests and responses
- Save requests and responses
"""

from typing import Optional

from pydantic import BaseModel, Field


class ExportSpecModel(BaseModel):
    """Export parameters derived from the current circle"""

    diameter: float
    target_size: int
    background_color: str
    background_hex: str


class PreviewRequest(BaseModel):
    """Request to render a preview thumbnail"""

    background: Optional[str] = Field(
        None, description="'white' or 'black'; anything else means white"
    )


class PreviewResponse(BaseModel):
    """Preview thumbnail"""

    success: bool
    message: str
    image_base64: str
    spec: ExportSpecModel


class SaveRequest(BaseModel):
    """Request to export and store a thumbnail"""

    filename: str = Field("", description="Target name; a trailing .png is removed")
    background: Optional[str] = Field(
        None, description="'white' or 'black'; anything else means white"
    )


class SaveResponse(BaseModel):
    """Stored thumbnail"""

    success: bool
    filename: str
    message: Optional[str] = None
    spec: Optional[ExportSpecModel] = None
