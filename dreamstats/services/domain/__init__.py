"""
Domain package.
"""

from .analytics_svc import AnalyticsService, DreamDataSource, hash_records

__all__ = [
    "AnalyticsService",
    "DreamDataSource",
    "hash_records",
]
