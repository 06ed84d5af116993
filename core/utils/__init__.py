"""
Utility modules for core functionality.

Modules:
- decorators: Utility decorators and context managers (timer)
- enum_converter: Enum parsing and conversion
"""

from .decorators import timer
from .enum_converter import EnumConverter, parse_enum

__all__ = ["EnumConverter", "parse_enum", "timer"]
