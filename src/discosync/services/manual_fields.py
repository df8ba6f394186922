"""
Carries manually curated cross-platform links across a primary-catalog resync.
"""

from dataclasses import asdict, dataclass
from typing import Dict, Optional, Tuple
from ..models.releases import CatalogDataset, RELEASE_LINK_FIELDS, TRACK_LINK_FIELDS


@dataclass(frozen=True)
class ReleaseLinks:
    """Curated links of one release."""
    apple_music_url: Optional[str] = None
    amazon_music_url: Optional[str] = None
    youtube_playlist_url: Optional[str] = None
    youtube_url: Optional[str] = None
    
    def as_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


@dataclass(frozen=True)
class TrackLinks:
    """Curated links of one track."""
    apple_music_url: Optional[str] = None
    amazon_music_url: Optional[str] = None
    youtube_url: Optional[str] = None
    
    def as_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


EMPTY_RELEASE_LINKS = ReleaseLinks()
EMPTY_TRACK_LINKS = TrackLinks()


class ManualFieldPreserver:
    """
    Keyed view of the links stored in the previous dataset.
    
    The index is built once from the existing document; the document itself
    is never modified. Lookups are by exact catalog identifier, so a release
    that was not in the previous document starts with every link unset.
    """
    
    def __init__(self, existing: Optional[CatalogDataset]):
        self._releases: Dict[str, ReleaseLinks] = {}
        self._tracks: Dict[Tuple[str, str], TrackLinks] = {}
        
        for release in (existing.releases if existing else []):
            self._releases[release.spotify_id] = ReleaseLinks(
                **{attr: getattr(release, attr) or None for attr in RELEASE_LINK_FIELDS}
            )
            for track in release.tracks:
                self._tracks[(release.spotify_id, track.spotify_id)] = TrackLinks(
                    **{attr: getattr(track, attr) or None for attr in TRACK_LINK_FIELDS}
                )
    
    def preserve_release(self, catalog_id: str) -> ReleaseLinks:
        """Return the stored links of a release, or all-None if it is new."""
        return self._releases.get(catalog_id, EMPTY_RELEASE_LINKS)
    
    def preserve_track(self, release_catalog_id: str, track_catalog_id: str) -> TrackLinks:
        """Return the stored links of a track within its release, or all-None."""
        return self._tracks.get((release_catalog_id, track_catalog_id), EMPTY_TRACK_LINKS)
