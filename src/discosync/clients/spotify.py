"""
Spotify Client Module
A client for the Spotify Web API, the primary catalog for full resyncs.
"""

import base64
import requests
from typing import Any, Dict, List, Optional
from ..core.config import SPOTIFY_CONFIG, ERROR_MESSAGES
from ..core.exceptions import APIError, AuthError, TransientRequestError
from ..core.logger import get_logger

logger = get_logger("clients.spotify")


class SpotifyClient:
    """Spotify Web API client using the client credentials flow."""
    
    def __init__(self, client_id: str, client_secret: str, market: Optional[str] = None):
        self.base_url = SPOTIFY_CONFIG["BASE_URL"]
        self.auth_url = SPOTIFY_CONFIG["AUTH_URL"]
        self.market = market or SPOTIFY_CONFIG["MARKET"]
        self.page_limit = SPOTIFY_CONFIG["PAGE_LIMIT"]
        self.timeout = SPOTIFY_CONFIG["TIMEOUT"]
        self.client_id = client_id
        self.client_secret = client_secret
        self.access_token: Optional[str] = None
        
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})
    
    def authenticate(self) -> str:
        """
        Exchange client credentials for a bearer token.
        
        Returns:
            The access token, also kept on the client for the rest of the run
            
        Raises:
            AuthError: If the token endpoint rejects the credentials
        """
        credentials = f"{self.client_id}:{self.client_secret}"
        encoded_credentials = base64.b64encode(credentials.encode()).decode()
        
        headers = {
            "Authorization": f"Basic {encoded_credentials}",
            "Content-Type": "application/x-www-form-urlencoded"
        }
        
        try:
            response = self.session.post(
                self.auth_url,
                headers=headers,
                data={"grant_type": "client_credentials"},
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise TransientRequestError(f"{ERROR_MESSAGES['NETWORK_ERROR']} {e}") from e
        
        if response.status_code != 200:
            raise AuthError(f"{ERROR_MESSAGES['AUTH_FAILED']}: {response.status_code} {response.reason}")
        
        try:
            token = response.json().get("access_token")
        except ValueError as e:
            raise AuthError(ERROR_MESSAGES["INVALID_RESPONSE"]) from e
        if not token:
            raise AuthError(f"{ERROR_MESSAGES['AUTH_FAILED']}: no access_token in response")
        
        self.access_token = token
        self.session.headers["Authorization"] = f"Bearer {token}"
        logger.debug("Authenticated with Spotify")
        return token
    
    def _url(self, path: str) -> str:
        """Resolve an API path; absolute URLs (paging links) pass through."""
        if path.startswith("https://"):
            return path
        return f"{self.base_url}{path}"
    
    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Perform an authenticated GET request.
        
        Raises:
            APIError: On any non-success response
            TransientRequestError: On network or decoding failure
        """
        if not self.access_token:
            self.authenticate()
        
        url = self._url(path)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransientRequestError(f"{ERROR_MESSAGES['NETWORK_ERROR']} {url}: {e}") from e
        
        if response.status_code != 200:
            raise APIError(
                f"{ERROR_MESSAGES['API_ERROR']}: {response.status_code} {url}",
                status=response.status_code,
                url=url
            )
        
        try:
            return response.json()
        except ValueError as e:
            raise TransientRequestError(f"{ERROR_MESSAGES['INVALID_RESPONSE']} {url}") from e
    
    def fetch_all(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Fetch every item of a paging object by following its "next" links.
        
        Any failed page aborts the whole fetch; no partial list is returned.
        """
        items: List[Dict[str, Any]] = []
        page = self.get(path, params=params)
        while True:
            items.extend(page.get("items") or [])
            next_url = page.get("next")
            if not next_url:
                break
            page = self.get(next_url)
        return items
    
    def get_artist_releases(self, artist_id: str) -> List[Dict[str, Any]]:
        """Get all albums and singles of an artist."""
        logger.info(f"Fetching releases for artist {artist_id}")
        return self.fetch_all(
            f"/artists/{artist_id}/albums",
            params={
                "include_groups": SPOTIFY_CONFIG["INCLUDE_GROUPS"],
                "market": self.market,
                "limit": self.page_limit,
            }
        )
    
    def get_release(self, album_id: str) -> Dict[str, Any]:
        """
        Get full album details with every track page merged in.
        
        Returns:
            The album object; album["tracks"]["items"] holds all tracks
        """
        album = self.get(f"/albums/{album_id}", params={"market": self.market})
        tracks = album.get("tracks") or {}
        items = list(tracks.get("items") or [])
        
        next_url = tracks.get("next")
        while next_url:
            page = self.get(next_url)
            items.extend(page.get("items") or [])
            next_url = page.get("next")
        
        album["tracks"] = {**tracks, "items": items, "next": None}
        return album
