"""
Reconciliation services for DiscoSync.
"""

from .title_matcher import TitleMatcher
from .manual_fields import ManualFieldPreserver, ReleaseLinks, TrackLinks
from .dataset_store import DatasetStore
from .resync_service import ResyncService
from .backfill_service import (
    BackfillService,
    BackfillTarget,
    BackfillReport,
    apple_music_backfill,
    youtube_backfill,
)

__all__ = [
    'TitleMatcher',
    'ManualFieldPreserver',
    'ReleaseLinks',
    'TrackLinks',
    'DatasetStore',
    'ResyncService',
    'BackfillService',
    'BackfillTarget',
    'BackfillReport',
    'apple_music_backfill',
    'youtube_backfill',
]
