"""
dreamstats - personalized statistics over dream journal entries.
"""

from .__version__ import __version__

__all__ = ["__version__"]
