"""
Data models for DiscoSync.
"""

from .releases import Track, Release, CatalogDataset, format_duration
from .search_results import CandidateRecord

__all__ = [
    'Track',
    'Release',
    'CatalogDataset',
    'CandidateRecord',
    'format_duration',
]
