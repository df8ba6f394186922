"""
Pytest configuration and shared fixtures.
"""

import json
import pytest
import sys
import tempfile
import shutil
from pathlib import Path
from unittest.mock import Mock
from typing import Generator

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def make_response():
    """Factory for fake requests.Response objects."""
    def _make(status_code=200, json_data=None, text="", reason="OK"):
        response = Mock()
        response.status_code = status_code
        response.reason = reason
        response.text = text
        if isinstance(json_data, Exception):
            response.json.side_effect = json_data
        else:
            response.json.return_value = json_data
        return response
    return _make


@pytest.fixture
def sample_dataset_dict():
    """A small persisted document with curated links."""
    return {
        "lastUpdated": "2024-01-01",
        "artistName": "Jade Three",
        "spotifyArtistId": "artist123",
        "releases": [
            {
                "id": "album-alb1",
                "type": "album",
                "title": "Year Until the Fall",
                "releaseDate": "2023-09-15",
                "year": 2023,
                "spotifyId": "alb1",
                "spotifyUrl": "https://open.spotify.com/album/alb1",
                "appleMusicUrl": "https://music.apple.com/album/1",
                "amazonMusicUrl": None,
                "youtubePlaylistUrl": None,
                "youtubeUrl": None,
                "artworkUrl": "https://img/640",
                "artworkUrlSmall": "https://img/64",
                "totalTracks": 2,
                "tracks": [
                    {
                        "trackNumber": 1,
                        "title": "Obey Early",
                        "spotifyId": "trk1",
                        "spotifyUrl": "https://open.spotify.com/track/trk1",
                        "appleMusicUrl": None,
                        "amazonMusicUrl": "https://amazon/trk1",
                        "youtubeUrl": None,
                        "durationMs": 125000,
                        "durationFormatted": "2:05",
                        "isExplicit": False,
                    },
                    {
                        "trackNumber": 2,
                        "title": "Eh Ville",
                        "spotifyId": "trk2",
                        "spotifyUrl": "https://open.spotify.com/track/trk2",
                        "appleMusicUrl": None,
                        "amazonMusicUrl": None,
                        "youtubeUrl": None,
                        "durationMs": 59000,
                        "durationFormatted": "0:59",
                        "isExplicit": True,
                    },
                ],
            },
            {
                "id": "single-sng1",
                "type": "single",
                "title": "Eh Ville",
                "releaseDate": "2022-03-01",
                "year": 2022,
                "spotifyId": "sng1",
                "spotifyUrl": "https://open.spotify.com/album/sng1",
                "appleMusicUrl": None,
                "amazonMusicUrl": None,
                "youtubePlaylistUrl": None,
                "youtubeUrl": "https://www.youtube.com/watch?v=existing",
                "artworkUrl": "",
                "artworkUrlSmall": "",
                "totalTracks": 1,
                "tracks": [],
            },
        ],
    }


@pytest.fixture
def sample_dataset(sample_dataset_dict):
    """The sample document as a CatalogDataset."""
    from discosync.models.releases import CatalogDataset
    return CatalogDataset.from_dict(sample_dataset_dict)


@pytest.fixture
def data_file(temp_dir, sample_dataset_dict) -> Path:
    """The sample document written to disk."""
    path = temp_dir / "releases.json"
    path.write_text(json.dumps(sample_dataset_dict, indent=2) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def store(data_file):
    """DatasetStore pointing at the sample document."""
    from discosync.services.dataset_store import DatasetStore
    return DatasetStore(data_file)
