"""
Search result models from secondary catalogs.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CandidateRecord:
    """A single search hit that may be linked to a release."""
    title: str
    url: str
    source: str
    channel: Optional[str] = None
    catalog_id: Optional[str] = None
