"""
Release, track and dataset models.

These mirror the JSON document read by the website build: attribute names
are snake_case here and camelCase in the serialized form.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


RELEASE_TYPES = ("single", "album")

# Cross-platform links that only manual curation or a backfill may set
RELEASE_LINK_FIELDS = {
    "apple_music_url": "appleMusicUrl",
    "amazon_music_url": "amazonMusicUrl",
    "youtube_playlist_url": "youtubePlaylistUrl",
    "youtube_url": "youtubeUrl",
}

TRACK_LINK_FIELDS = {
    "apple_music_url": "appleMusicUrl",
    "amazon_music_url": "amazonMusicUrl",
    "youtube_url": "youtubeUrl",
}

# Keys written by to_dict; anything else in the document is carried in `extra`
TRACK_KEYS = frozenset([
    "trackNumber", "title", "spotifyId", "spotifyUrl", "appleMusicUrl",
    "amazonMusicUrl", "youtubeUrl", "durationMs", "durationFormatted", "isExplicit",
])

RELEASE_KEYS = frozenset([
    "id", "type", "title", "releaseDate", "year", "spotifyId", "spotifyUrl",
    "appleMusicUrl", "amazonMusicUrl", "youtubePlaylistUrl", "youtubeUrl",
    "artworkUrl", "artworkUrlSmall", "totalTracks", "tracks",
])

DATASET_KEYS = frozenset(["lastUpdated", "artistName", "spotifyArtistId", "releases"])


def _with_extra(data: Dict[str, Any], extra: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in extra.items():
        data.setdefault(key, value)
    return data


def _extra_keys(data: Dict[str, Any], known: frozenset) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if key not in known}


def format_duration(duration_ms: int) -> str:
    """Format milliseconds as M:SS, truncating partial seconds."""
    total_seconds = max(int(duration_ms or 0), 0) // 1000
    minutes = total_seconds // 60
    seconds = total_seconds % 60
    return f"{minutes}:{seconds:02d}"


@dataclass
class Track:
    """Track belonging to a release."""
    track_number: int
    title: str
    spotify_id: str
    spotify_url: str = ""
    duration_ms: int = 0
    is_explicit: bool = False
    apple_music_url: Optional[str] = None
    amazon_music_url: Optional[str] = None
    youtube_url: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    
    @property
    def duration_formatted(self) -> str:
        """Display duration, always derived from duration_ms."""
        return format_duration(self.duration_ms)
    
    def to_dict(self) -> Dict[str, Any]:
        return _with_extra({
            "trackNumber": self.track_number,
            "title": self.title,
            "spotifyId": self.spotify_id,
            "spotifyUrl": self.spotify_url,
            "appleMusicUrl": self.apple_music_url,
            "amazonMusicUrl": self.amazon_music_url,
            "youtubeUrl": self.youtube_url,
            "durationMs": self.duration_ms,
            "durationFormatted": self.duration_formatted,
            "isExplicit": self.is_explicit,
        }, self.extra)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Track":
        # durationFormatted is ignored on purpose; it is recomputed from durationMs
        return cls(
            track_number=int(data.get("trackNumber") or 0),
            title=data.get("title", ""),
            spotify_id=data.get("spotifyId", ""),
            spotify_url=data.get("spotifyUrl") or "",
            duration_ms=int(data.get("durationMs") or 0),
            is_explicit=bool(data.get("isExplicit", False)),
            apple_music_url=data.get("appleMusicUrl"),
            amazon_music_url=data.get("amazonMusicUrl"),
            youtube_url=data.get("youtubeUrl"),
            extra=_extra_keys(data, TRACK_KEYS),
        )


@dataclass
class Release:
    """One catalog release (single, EP or album)."""
    release_type: str
    title: str
    release_date: str
    spotify_id: str
    spotify_url: str = ""
    artwork_url: str = ""
    artwork_url_small: str = ""
    total_tracks: int = 0
    apple_music_url: Optional[str] = None
    amazon_music_url: Optional[str] = None
    youtube_playlist_url: Optional[str] = None
    youtube_url: Optional[str] = None
    tracks: List[Track] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    
    def __post_init__(self):
        """Initialize tracks list if not provided."""
        if self.tracks is None:
            self.tracks = []
        if self.release_type not in RELEASE_TYPES:
            raise ValueError(f"Unknown release type: {self.release_type!r}")
    
    @property
    def id(self) -> str:
        """Stable identifier derived from release type and catalog id."""
        return f"{self.release_type}-{self.spotify_id}"
    
    @property
    def year(self) -> Optional[int]:
        try:
            return int(self.release_date[:4])
        except (TypeError, ValueError):
            return None
    
    def to_dict(self) -> Dict[str, Any]:
        return _with_extra({
            "id": self.id,
            "type": self.release_type,
            "title": self.title,
            "releaseDate": self.release_date,
            "year": self.year,
            "spotifyId": self.spotify_id,
            "spotifyUrl": self.spotify_url,
            "appleMusicUrl": self.apple_music_url,
            "amazonMusicUrl": self.amazon_music_url,
            "youtubePlaylistUrl": self.youtube_playlist_url,
            "youtubeUrl": self.youtube_url,
            "artworkUrl": self.artwork_url,
            "artworkUrlSmall": self.artwork_url_small,
            "totalTracks": self.total_tracks,
            "tracks": [track.to_dict() for track in self.tracks],
        }, self.extra)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Release":
        release_type = data.get("type", "single")
        spotify_id = data.get("spotifyId")
        if not spotify_id:
            # Hand-written entries may only carry the composite id
            prefix = f"{release_type}-"
            release_id = data.get("id", "")
            spotify_id = release_id[len(prefix):] if release_id.startswith(prefix) else release_id
        tracks = [Track.from_dict(t) for t in data.get("tracks") or []]
        return cls(
            release_type=release_type,
            title=data.get("title", ""),
            release_date=data.get("releaseDate", ""),
            spotify_id=spotify_id,
            spotify_url=data.get("spotifyUrl") or "",
            artwork_url=data.get("artworkUrl") or "",
            artwork_url_small=data.get("artworkUrlSmall") or "",
            total_tracks=int(data.get("totalTracks") or len(tracks)),
            apple_music_url=data.get("appleMusicUrl"),
            amazon_music_url=data.get("amazonMusicUrl"),
            youtube_playlist_url=data.get("youtubePlaylistUrl"),
            youtube_url=data.get("youtubeUrl"),
            tracks=tracks,
            extra=_extra_keys(data, RELEASE_KEYS),
        )
    
    def missing_links(self) -> List[str]:
        """Return JSON names of the cross-platform links still unset."""
        missing = []
        for attr, key in RELEASE_LINK_FIELDS.items():
            if attr == "youtube_playlist_url" and self.release_type == "single":
                continue
            if not getattr(self, attr):
                missing.append(key)
        return missing


@dataclass
class CatalogDataset:
    """The persisted discography document."""
    last_updated: str = ""
    artist_name: str = ""
    spotify_artist_id: str = ""
    releases: List[Release] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    
    def __post_init__(self):
        if self.releases is None:
            self.releases = []
    
    def find_release(self, spotify_id: str) -> Optional[Release]:
        """Find a release by its catalog identifier."""
        for release in self.releases:
            if release.spotify_id == spotify_id:
                return release
        return None
    
    def to_dict(self) -> Dict[str, Any]:
        return _with_extra({
            "lastUpdated": self.last_updated,
            "artistName": self.artist_name,
            "spotifyArtistId": self.spotify_artist_id,
            "releases": [release.to_dict() for release in self.releases],
        }, self.extra)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogDataset":
        return cls(
            last_updated=data.get("lastUpdated", ""),
            artist_name=data.get("artistName", ""),
            spotify_artist_id=data.get("spotifyArtistId", ""),
            releases=[Release.from_dict(r) for r in data.get("releases") or []],
            extra=_extra_keys(data, DATASET_KEYS),
        )
