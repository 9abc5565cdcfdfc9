"""
CLI commands.
"""

from .analyze import cmd_analyze

__all__ = ["cmd_analyze"]
