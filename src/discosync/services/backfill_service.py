"""
Targeted backfill of cross-platform links from secondary catalogs.

Each run walks the dataset once, searches the secondary catalog for every
release missing a link, and saves the whole document once at the end.
Failures are isolated per release and reported, never fatal.
"""

import time
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Dict, List, Optional
from ..clients.itunes import ITunesClient
from ..clients.youtube import YouTubeClient
from ..models.releases import Release
from ..models.search_results import CandidateRecord
from ..core.config import SYNC_CONFIG, ERROR_MESSAGES
from ..core.exceptions import APIError, NotFoundError, TransientRequestError
from ..core.logger import get_logger
from ..ui.user_interaction import AlwaysAccept, ConfirmationStrategy
from .dataset_store import DatasetStore
from .title_matcher import TitleMatcher

logger = get_logger("services.backfill")


@dataclass
class BackfillTarget:
    """One release field to fill and how to find a value for it."""
    label: str
    field_name: str
    search: Callable[[str], List[CandidateRecord]]
    select: Callable[[List[CandidateRecord], str], Optional[str]]
    applies_to: Callable[[Release], bool] = lambda release: True
    
    def needs(self, release: Release) -> bool:
        return self.applies_to(release) and not getattr(release, self.field_name)


@dataclass
class BackfillReport:
    """Outcome of a backfill run."""
    updated: Dict[str, int] = field(default_factory=dict)
    already_set: int = 0
    unresolved: List[str] = field(default_factory=list)
    
    @property
    def total_updated(self) -> int:
        return sum(self.updated.values())


class BackfillService:
    """Fills missing release links from a secondary catalog."""
    
    def __init__(
        self,
        store: DatasetStore,
        targets: List[BackfillTarget],
        artist_name: Optional[str] = None,
        confirmation: Optional[ConfirmationStrategy] = None,
        delay: Optional[float] = None,
        sleep: Optional[Callable[[float], None]] = None,
        today: Callable[[], date] = date.today
    ):
        self.store = store
        self.targets = targets
        self.artist_name = artist_name
        self.confirmation = confirmation or AlwaysAccept()
        self.delay = SYNC_CONFIG["REQUEST_DELAY"] if delay is None else delay
        self.sleep = sleep or time.sleep
        self.today = today
    
    def run(self) -> BackfillReport:
        dataset = self.store.load()
        artist_name = self.artist_name or dataset.artist_name
        report = BackfillReport(updated={target.label: 0 for target in self.targets})
        
        for release in dataset.releases:
            pending = [target for target in self.targets if target.needs(release)]
            if not pending:
                logger.info(f"✓ {release.title} - already set")
                report.already_set += 1
                continue
            
            for target in pending:
                self._backfill_field(release, target, artist_name, report)
        
        dataset.last_updated = self.today().isoformat()
        self.store.save(dataset)
        return report
    
    def _backfill_field(self, release: Release, target: BackfillTarget, artist_name: str, report: BackfillReport):
        item_name = f"{release.title} ({target.label})"
        logger.info(f"? {release.title} - searching for {target.label}...")
        
        if self.delay:
            self.sleep(self.delay)
        
        try:
            candidates = target.search(f"{artist_name} {release.title}")
            url = target.select(candidates, release.title)
            if not url:
                raise NotFoundError(f"{ERROR_MESSAGES['NO_MATCH']} {item_name}")
        except (NotFoundError, APIError, TransientRequestError) as e:
            logger.warning(f"{item_name}: {e}")
            report.unresolved.append(item_name)
            return
        
        chosen = self.confirmation.confirm(release.title, target.label, url)
        if not chosen:
            logger.info(f"Skipped {item_name} - add manually")
            report.unresolved.append(item_name)
            return
        
        setattr(release, target.field_name, chosen)
        report.updated[target.label] += 1
        logger.info(f"Found {item_name}: {chosen}")


def apple_music_backfill(
    store: DatasetStore,
    client: Optional[ITunesClient] = None,
    artist_name: Optional[str] = None,
    confirmation: Optional[ConfirmationStrategy] = None,
    **kwargs
) -> BackfillService:
    """Backfill service filling appleMusicUrl from the iTunes Search API."""
    client = client or ITunesClient()
    matcher = TitleMatcher()
    target = BackfillTarget(
        label="apple music",
        field_name="apple_music_url",
        search=lambda query: client.search(query, kind="album"),
        select=matcher.select_best,
    )
    return BackfillService(store, [target], artist_name=artist_name, confirmation=confirmation, **kwargs)


def youtube_backfill(
    store: DatasetStore,
    client: YouTubeClient,
    artist_name: str,
    confirmation: Optional[ConfirmationStrategy] = None,
    **kwargs
) -> BackfillService:
    """Backfill service filling youtubeUrl and, for non-singles, youtubePlaylistUrl."""
    matcher = TitleMatcher()
    
    def select(candidates: List[CandidateRecord], title: str) -> Optional[str]:
        return matcher.select_best_video(candidates, title, artist_name)
    
    targets = [
        BackfillTarget(
            label="video",
            field_name="youtube_url",
            search=lambda query: client.search(query, kind="video"),
            select=select,
        ),
        BackfillTarget(
            label="playlist",
            field_name="youtube_playlist_url",
            search=lambda query: client.search(query, kind="playlist"),
            select=select,
            applies_to=lambda release: release.release_type != "single",
        ),
    ]
    return BackfillService(store, targets, artist_name=artist_name, confirmation=confirmation, **kwargs)
