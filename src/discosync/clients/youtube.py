"""
YouTube Client Module
A client for the YouTube Data API v3 search endpoint.
"""

import requests
from typing import List, Optional
from ..models.search_results import CandidateRecord
from ..core.config import YOUTUBE_CONFIG, ERROR_MESSAGES
from ..core.exceptions import APIError, TransientRequestError

SEARCH_KINDS = ("video", "playlist")


class YouTubeClient:
    """YouTube Data API search client (API key required)."""
    
    def __init__(self, api_key: str, max_results: Optional[int] = None) -> None:
        self.api_key = api_key
        self.base_url = YOUTUBE_CONFIG["BASE_URL"]
        self.max_results = max_results or YOUTUBE_CONFIG["MAX_RESULTS"]
        self.timeout = YOUTUBE_CONFIG["TIMEOUT"]
        
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})
    
    def search(self, query: str, kind: str = "video", max_results: Optional[int] = None) -> List[CandidateRecord]:
        """
        Search for videos or playlists.
        
        Args:
            query: Free-text search terms
            kind: "video" or "playlist"
            max_results: Upper bound on returned results
            
        Returns:
            Candidate records carrying the owning channel title
        """
        if kind not in SEARCH_KINDS:
            raise ValueError(f"Unsupported YouTube search kind: {kind}")
        
        url = f"{self.base_url}/search"
        params = {
            "part": "snippet",
            "q": query,
            "type": kind,
            "maxResults": max_results or self.max_results,
            "key": self.api_key,
        }
        
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransientRequestError(f"{ERROR_MESSAGES['NETWORK_ERROR']} {e}") from e
        
        if response.status_code != 200:
            raise APIError(
                f"YouTube API error {response.status_code}: {response.text}",
                status=response.status_code,
                url=url
            )
        
        try:
            items = response.json().get("items") or []
        except ValueError as e:
            raise TransientRequestError(ERROR_MESSAGES["INVALID_RESPONSE"]) from e
        
        return [c for c in (self._to_candidate(item, kind) for item in items) if c]
    
    def _to_candidate(self, item: dict, kind: str) -> Optional[CandidateRecord]:
        snippet = item.get("snippet") or {}
        item_id = item.get("id") or {}
        if kind == "video":
            video_id = item_id.get("videoId")
            if not video_id:
                return None
            url = f"{YOUTUBE_CONFIG['WATCH_URL']}{video_id}"
            catalog_id = video_id
        else:
            playlist_id = item_id.get("playlistId")
            if not playlist_id:
                return None
            url = f"{YOUTUBE_CONFIG['PLAYLIST_URL']}{playlist_id}"
            catalog_id = playlist_id
        
        return CandidateRecord(
            title=snippet.get("title") or "",
            url=url,
            source="youtube",
            channel=snippet.get("channelTitle") or "",
            catalog_id=catalog_id,
        )
