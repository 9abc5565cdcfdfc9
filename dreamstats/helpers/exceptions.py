"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when a configuration value is present but invalid."""


class DataSourceError(Exception):
    """Raised when a record source cannot produce dream or interpretation rows."""
