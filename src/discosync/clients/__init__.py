"""
Client modules for external catalog APIs.
"""

from .spotify import SpotifyClient
from .itunes import ITunesClient
from .youtube import YouTubeClient

__all__ = [
    'SpotifyClient',
    'ITunesClient',
    'YouTubeClient',
]
