"""
Shared utility functions for CLI commands.
Helper functions used across multiple command modules.
"""

from __future__ import annotations

__all__ = [
    "format_duration",
    "format_mood",
    "format_percentage",
]


def format_duration(seconds: float) -> str:
    """Format seconds into human readable: 2d 5h 30m"""
    if seconds < 60:
        return f"{int(seconds)}s"
    elif seconds < 3600:
        m = int(seconds / 60)
        s = int(seconds % 60)
        return f"{m}m {s}s" if s > 0 else f"{m}m"
    elif seconds < 86400:
        h = int(seconds / 3600)
        m = int((seconds % 3600) / 60)
        return f"{h}h {m}m"
    else:
        d = int(seconds / 86400)
        h = int((seconds % 86400) / 3600)
        return f"{d}d {h}h"


def format_mood(avg_mood: float | None) -> str:
    """Average mood with one decimal, or a dash when no dream had a mood."""
    return "-" if avg_mood is None else f"{avg_mood:.1f}"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"
