"""
Services package.
"""

from .config_svc import ConfigService
from .domain.analytics_svc import AnalyticsService, DreamDataSource, hash_records

__all__ = [
    "AnalyticsService",
    "ConfigService",
    "DreamDataSource",
    "hash_records",
]
