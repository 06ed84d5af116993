"""
Enum conversion utilities.

Provides standardized parsing of strings into enums,
with support for case-insensitive parsing and fallback defaults.
"""

from typing import Any, Type, TypeVar

T = TypeVar("T")


def parse_enum(value: Any, enum_class: Type[T], default: T, normalize: bool = False) -> T:
    """
    Parse value to enum with fallback to default.

    Args:
        value: Value to parse (string, enum, or None)
        enum_class: Enum class to parse to
        default: Default enum value if parsing fails
        normalize: Whether to lowercase and strip string before parsing
            (for case-insensitive matching)

    Returns:
        Parsed enum value or default

    Example:
        >>> color = EnumConverter.parse_enum(
        ...     "Black", BackgroundColor, BackgroundColor.WHITE, normalize=True
        ... )
        >>> # Returns BackgroundColor.BLACK; "purple" or None give WHITE
    """
    # Already an enum instance
    if isinstance(value, enum_class):
        return value

    # None or missing value
    if value is None:
        return default

    # String value - try to parse
    try:
        str_value = value.strip().lower() if normalize else value
        return enum_class(str_value)
    except (ValueError, AttributeError):
        return default


class EnumConverter:
    """Namespace wrapper so callers can use EnumConverter.parse_enum(...)"""

    parse_enum = staticmethod(parse_enum)
