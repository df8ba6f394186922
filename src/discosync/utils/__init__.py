"""
Utility modules for DiscoSync.
"""

from .string_utils import normalize, strip_catalog_suffix

__all__ = [
    'normalize',
    'strip_catalog_suffix',
]
