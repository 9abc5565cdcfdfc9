"""
Helpers package.
"""

from .exceptions import ConfigError, DataSourceError
from .logging_helper import resolve_log_level, setup_logging

__all__ = [
    "ConfigError",
    "DataSourceError",
    "resolve_log_level",
    "setup_logging",
]
