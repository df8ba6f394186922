"""
iTunes Client Module
A client for the public iTunes Search API, used to find Apple Music links.
"""

import requests
from typing import List, Optional
from ..models.search_results import CandidateRecord
from ..core.config import ITUNES_CONFIG, ERROR_MESSAGES
from ..core.exceptions import APIError, TransientRequestError


class ITunesClient:
    """iTunes Search API client (no credentials required)."""
    
    def __init__(self, country: Optional[str] = None):
        self.base_url = ITUNES_CONFIG["BASE_URL"]
        self.country = country or ITUNES_CONFIG["COUNTRY"]
        self.max_results = ITUNES_CONFIG["MAX_RESULTS"]
        self.timeout = ITUNES_CONFIG["TIMEOUT"]
        
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})
    
    def search(self, query: str, kind: str = "album", max_results: Optional[int] = None) -> List[CandidateRecord]:
        """
        Search the store for collections matching a query.
        
        Args:
            query: Free-text search terms (usually "artist title")
            kind: iTunes entity to search for
            max_results: Upper bound on returned results
            
        Returns:
            Candidate records, possibly empty
        """
        url = f"{self.base_url}/search"
        params = {
            "term": query,
            "media": "music",
            "entity": kind,
            "limit": max_results or self.max_results,
            "country": self.country,
        }
        
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransientRequestError(f"{ERROR_MESSAGES['NETWORK_ERROR']} {e}") from e
        
        if response.status_code != 200:
            raise APIError(
                f"iTunes API error: {response.status_code}",
                status=response.status_code,
                url=url
            )
        
        try:
            results = response.json().get("results") or []
        except ValueError as e:
            raise TransientRequestError(ERROR_MESSAGES["INVALID_RESPONSE"]) from e
        
        candidates = []
        for item in results:
            view_url = item.get("collectionViewUrl")
            if not view_url:
                continue
            collection_id = item.get("collectionId")
            candidates.append(CandidateRecord(
                title=item.get("collectionName") or "",
                url=view_url,
                source="itunes",
                catalog_id=str(collection_id) if collection_id is not None else None,
            ))
        return candidates
