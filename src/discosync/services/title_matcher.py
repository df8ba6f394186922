"""
Title and channel matching used to pick a catalog entry for a release.
"""

from typing import Iterable, List, Optional
from ..models.search_results import CandidateRecord
from ..utils.string_utils import normalize, strip_catalog_suffix


class TitleMatcher:
    """Selects the best search candidate for a release title."""
    
    def _exact_match(self, candidates: Iterable[CandidateRecord], target: str) -> Optional[CandidateRecord]:
        for candidate in candidates:
            title = normalize(candidate.title)
            if title == target or strip_catalog_suffix(title) == target:
                return candidate
        return None
    
    def _prefix_match(self, candidates: Iterable[CandidateRecord], target: str) -> Optional[CandidateRecord]:
        for candidate in candidates:
            if normalize(candidate.title).startswith(target):
                return candidate
        return None
    
    def _containment_match(self, candidates: Iterable[CandidateRecord], target: str) -> Optional[CandidateRecord]:
        # Video titles usually wrap the release title, e.g. "Artist - Title (Official Video)"
        for candidate in candidates:
            if target in normalize(candidate.title):
                return candidate
        return None
    
    def select_best(self, candidates: List[CandidateRecord], target_title: str) -> Optional[str]:
        """
        Pick the URL of the candidate whose title matches the release title.
        
        Exact match (ignoring catalog suffixes such as " - Single" or " - EP")
        wins over a prefix match. Returns None when nothing matches. A title
        that normalizes to an empty string prefixes every candidate, so the
        first candidate is returned.
        """
        if not candidates:
            return None
        target = normalize(target_title)
        
        match = self._exact_match(candidates, target) or self._prefix_match(candidates, target)
        return match.url if match else None
    
    def channel_matches(self, channel: Optional[str], artist_name: str) -> bool:
        """
        Check whether a channel looks like it belongs to the artist.
        
        Case-insensitive substring test on the full artist name or its
        first word.
        """
        if not channel or not artist_name or not artist_name.strip():
            return False
        channel_lower = channel.lower()
        artist_lower = artist_name.strip().lower()
        first_word = artist_lower.split()[0]
        return artist_lower in channel_lower or first_word in channel_lower
    
    def select_best_video(
        self,
        candidates: List[CandidateRecord],
        target_title: str,
        artist_name: str
    ) -> Optional[str]:
        """
        Pick a video or playlist URL, considering only the artist's channels.
        
        Title tiers (exact, prefix, containment) are tried on channel-affine
        candidates first; failing those, the first channel-affine candidate
        is returned so that covers and fan uploads are never chosen.
        """
        affine = [c for c in candidates if self.channel_matches(c.channel, artist_name)]
        if not affine:
            return None
        
        target = normalize(target_title)
        if target:
            match = (
                self._exact_match(affine, target)
                or self._prefix_match(affine, target)
                or self._containment_match(affine, target)
            )
            if match:
                return match.url
        
        return affine[0].url
