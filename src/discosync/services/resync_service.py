"""
Full resync of the dataset against the primary catalog.
"""

from datetime import date
from typing import Any, Callable, Dict, List, Optional
from ..clients.spotify import SpotifyClient
from ..models.releases import CatalogDataset, Release, Track
from ..core.config import ARTWORK_CONFIG
from ..core.logger import get_logger
from .dataset_store import DatasetStore
from .manual_fields import ManualFieldPreserver

logger = get_logger("services.resync")


def best_artwork_url(images: Optional[List[Dict[str, Any]]], min_width: Optional[int] = None) -> str:
    """Widest image at least min_width wide, else the widest one."""
    if not images:
        return ""
    min_width = ARTWORK_CONFIG["MIN_LARGE_WIDTH"] if min_width is None else min_width
    by_width = sorted(images, key=lambda img: img.get("width") or 0, reverse=True)
    for image in by_width:
        if (image.get("width") or 0) >= min_width:
            return image.get("url", "")
    return by_width[0].get("url", "")


def small_artwork_url(images: Optional[List[Dict[str, Any]]]) -> str:
    """Narrowest image; images without a width sort last."""
    if not images:
        return ""
    by_width = sorted(images, key=lambda img: img.get("width") or 9999)
    return by_width[0].get("url", "")


def release_sort_key(release: Release) -> str:
    """Sort key for release dates of year, month or day precision."""
    parts = (release.release_date or "").split("-")
    parts += ["01"] * (3 - len(parts))
    return "-".join(parts[:3])


class ResyncService:
    """Rebuilds every release and track from the primary catalog."""
    
    def __init__(
        self,
        client: SpotifyClient,
        store: DatasetStore,
        artist_id: str,
        artist_name: str,
        today: Callable[[], date] = date.today
    ):
        self.client = client
        self.store = store
        self.artist_id = artist_id
        self.artist_name = artist_name
        self.today = today
    
    def run(self) -> CatalogDataset:
        """
        Fetch, merge and persist the complete discography.
        
        Any client error propagates before the dataset is written, leaving
        the previous document untouched.
        """
        existing = self.store.load(missing_ok=True)
        preserver = ManualFieldPreserver(existing)
        
        logger.info("Authenticating with Spotify...")
        self.client.authenticate()
        
        albums = self.client.get_artist_releases(self.artist_id)
        logger.info(f"Found {len(albums)} releases. Fetching track data...")
        
        releases = []
        for album in albums:
            logger.info(f"Fetching tracks for \"{album.get('name')}\"")
            full_album = self.client.get_release(album["id"])
            releases.append(self.build_release(album, full_album, preserver))
        
        releases.sort(key=release_sort_key, reverse=True)
        
        dataset = CatalogDataset(
            last_updated=self.today().isoformat(),
            artist_name=self.artist_name,
            spotify_artist_id=self.artist_id,
            releases=releases,
            extra=dict(existing.extra),
        )
        self.store.save(dataset)
        return dataset
    
    def build_release(
        self,
        album: Dict[str, Any],
        full_album: Dict[str, Any],
        preserver: ManualFieldPreserver
    ) -> Release:
        """Build a Release from catalog data plus preserved curated links."""
        album_id = album["id"]
        release_type = "album" if album.get("album_type") == "album" else "single"
        track_items = (full_album.get("tracks") or {}).get("items") or []
        
        tracks = [self.build_track(album_id, item, preserver) for item in track_items]
        links = preserver.preserve_release(album_id)
        
        return Release(
            release_type=release_type,
            title=album.get("name", ""),
            release_date=album.get("release_date", ""),
            spotify_id=album_id,
            spotify_url=(album.get("external_urls") or {}).get("spotify", ""),
            artwork_url=best_artwork_url(full_album.get("images")),
            artwork_url_small=small_artwork_url(full_album.get("images")),
            total_tracks=full_album.get("total_tracks") or len(tracks),
            tracks=tracks,
            **links.as_dict(),
        )
    
    def build_track(self, album_id: str, item: Dict[str, Any], preserver: ManualFieldPreserver) -> Track:
        links = preserver.preserve_track(album_id, item["id"])
        return Track(
            track_number=item.get("track_number", 0),
            title=item.get("name", ""),
            spotify_id=item["id"],
            spotify_url=(item.get("external_urls") or {}).get("spotify", ""),
            duration_ms=item.get("duration_ms") or 0,
            is_explicit=bool(item.get("explicit", False)),
            **links.as_dict(),
        )
