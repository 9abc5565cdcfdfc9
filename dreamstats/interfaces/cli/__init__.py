"""
Cli package.
"""

from .json_source import JsonFileSource
from .ui import (
    COLOR_ERROR,
    COLOR_INFO,
    COLOR_SUCCESS,
    COLOR_WARNING,
    InfoPanel,
    TableDisplay,
    print_error,
    print_success,
    print_warning,
    show_analytics,
)
from .utils import format_duration, format_mood, format_percentage

__all__ = [
    "COLOR_ERROR",
    "COLOR_INFO",
    "COLOR_SUCCESS",
    "COLOR_WARNING",
    "InfoPanel",
    "JsonFileSource",
    "TableDisplay",
    "format_duration",
    "format_mood",
    "format_percentage",
    "print_error",
    "print_success",
    "print_warning",
    "show_analytics",
]
