"""
Configuration for DiscoSync.
Contains all constants, settings, and global parameters.
"""

import os
from pathlib import Path

# Project Information
PROJECT_NAME = "DiscoSync"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "Keep an artist's discography dataset in sync with Spotify, Apple Music and YouTube"

# File Paths (relative paths resolve against the working directory)
DATA_PATH = Path(os.getenv("DISCOSYNC_DATA_PATH", "src/data/releases.json"))
ENV_FILE = Path(os.getenv("DISCOSYNC_ENV_FILE", ".env"))

# Artist Configuration
ARTIST_CONFIG = {
    "NAME": os.getenv("DISCOSYNC_ARTIST_NAME", "Jade Three"),
    "SPOTIFY_ID": os.getenv("DISCOSYNC_ARTIST_ID", "2T04y62jXdLsznulD3sT4D"),
}

# Spotify Configuration (primary catalog)
SPOTIFY_CONFIG = {
    "BASE_URL": "https://api.spotify.com/v1",
    "AUTH_URL": "https://accounts.spotify.com/api/token",
    "MARKET": "US",
    "INCLUDE_GROUPS": "album,single",
    "PAGE_LIMIT": 50,
    "TIMEOUT": 30,
}

# iTunes Search Configuration (Apple Music backfill)
ITUNES_CONFIG = {
    "BASE_URL": "https://itunes.apple.com",
    "COUNTRY": "US",
    "MAX_RESULTS": 10,
    "TIMEOUT": 30,
}

# YouTube Data API Configuration (video/playlist backfill)
YOUTUBE_CONFIG = {
    "BASE_URL": "https://www.googleapis.com/youtube/v3",
    "WATCH_URL": "https://www.youtube.com/watch?v=",
    "PLAYLIST_URL": "https://www.youtube.com/playlist?list=",
    "MAX_RESULTS": 10,
    "TIMEOUT": 30,
}

# Reconciliation Configuration
SYNC_CONFIG = {
    "REQUEST_DELAY": 0.3,  # seconds between backfill searches
}

# Artwork Configuration
ARTWORK_CONFIG = {
    "MIN_LARGE_WIDTH": 600,
}

# Credential keys expected in the .env file
CREDENTIAL_KEYS = {
    "SPOTIFY": ("SPOTIFY_CLIENT_ID", "SPOTIFY_CLIENT_SECRET"),
    "YOUTUBE": ("YOUTUBE_API_KEY",),
}

# Error Messages
ERROR_MESSAGES = {
    "MISSING_CREDENTIALS": "Missing required credentials",
    "AUTH_FAILED": "Token request failed",
    "API_ERROR": "Catalog API error",
    "NETWORK_ERROR": "Network error occurred.",
    "INVALID_RESPONSE": "Invalid response from catalog API.",
    "NO_MATCH": "No matching result found.",
    "DATASET_UNREADABLE": "Could not read dataset",
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": os.getenv("DISCOSYNC_LOG_LEVEL", "INFO").upper(),
    "FORMAT": "%(levelname)s - %(name)s - %(message)s",
}
