"""
Logging setup shared by the CLI and any host application embedding dreamstats.

Components log with module-level ``logging`` calls and a bracketed tag
(``[analytics]``, ``[ingest]``); services use ``logging.getLogger(__name__)``.
Nothing in the package configures handlers on import.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level(level: str | int | None) -> int:
    """
    Translate a config/CLI log level into a ``logging`` constant.

    Unknown names fall back to INFO rather than failing the run.

    Examples:
        >>> resolve_log_level("debug")
        10
        >>> resolve_log_level(None)
        20
    """
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str | int | None = "INFO") -> None:
    """Configure root logging once for a process (CLI entry point)."""
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)
