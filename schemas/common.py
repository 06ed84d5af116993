"""
Common data models shared across the API.
"""

from pydantic import BaseModel, Field


class Size(BaseModel):
    """Image size"""

    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
