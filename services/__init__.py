"""
Service layer for Circle Thumbnail Studio
"""

from .export_service import ExportService
from .selection_service import SelectionService

__all__ = ["ExportService", "SelectionService"]
