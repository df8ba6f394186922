"""
Tests for the targeted backfill services.
"""

import json
import pytest
import sys
from datetime import date
from pathlib import Path
from unittest.mock import Mock

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from discosync.clients.itunes import ITunesClient
from discosync.clients.youtube import YouTubeClient
from discosync.core.exceptions import APIError, TransientRequestError
from discosync.models.search_results import CandidateRecord
from discosync.services.backfill_service import (
    BackfillService,
    BackfillTarget,
    apple_music_backfill,
    youtube_backfill,
)
from discosync.services.dataset_store import DatasetStore
from discosync.ui.user_interaction import AlwaysReject, ConfirmationStrategy


def today():
    return date(2025, 5, 1)


def store_hit(title, url):
    return CandidateRecord(title=title, url=url, source="itunes")


def video_hit(title, url, channel="Jade Three"):
    return CandidateRecord(title=title, url=url, source="youtube", channel=channel)


def saved(store):
    return json.loads(store.path.read_text(encoding="utf-8"))


class ReplaceWith(ConfirmationStrategy):
    """Operator pasting a corrected URL."""
    
    def __init__(self, url):
        self.url = url
        self.calls = []
    
    def confirm(self, release_title, label, url):
        self.calls.append((release_title, label, url))
        return self.url


@pytest.fixture
def itunes():
    return Mock(spec=ITunesClient)


@pytest.fixture
def youtube():
    return Mock(spec=YouTubeClient)


class TestAppleMusicBackfill:
    """Tests for the iTunes-backed backfill."""
    
    def test_fills_missing_link_without_confirmation(self, store, itunes):
        """Test the single suffix case end to end."""
        itunes.search.return_value = [store_hit("Eh Ville - Single", "https://u")]
        
        report = apple_music_backfill(store, itunes, artist_name="Jade Three", delay=0, today=today).run()
        
        release = saved(store)["releases"][1]
        assert release["title"] == "Eh Ville"
        assert release["appleMusicUrl"] == "https://u"
        assert report.updated == {"apple music": 1}
        assert report.already_set == 1
        assert report.unresolved == []
        itunes.search.assert_called_once_with("Jade Three Eh Ville", kind="album")
    
    def test_already_set_releases_are_not_searched(self, store, itunes):
        """Test that existing links are never overwritten."""
        itunes.search.return_value = []
        
        apple_music_backfill(store, itunes, artist_name="Jade Three", delay=0, today=today).run()
        
        assert itunes.search.call_count == 1
        assert saved(store)["releases"][0]["appleMusicUrl"] == "https://music.apple.com/album/1"
    
    def test_not_found_is_reported(self, store, itunes):
        """Test that no match leaves the field unset and reports it."""
        itunes.search.return_value = [store_hit("Completely Different", "https://x")]
        
        report = apple_music_backfill(store, itunes, artist_name="Jade Three", delay=0, today=today).run()
        
        assert saved(store)["releases"][1]["appleMusicUrl"] is None
        assert report.unresolved == ["Eh Ville (apple music)"]
        assert report.total_updated == 0
    
    def test_uses_dataset_artist_name_by_default(self, store, itunes):
        """Test the search query when no artist name is configured."""
        itunes.search.return_value = []
        
        apple_music_backfill(store, itunes, delay=0, today=today).run()
        
        itunes.search.assert_called_once_with("Jade Three Eh Ville", kind="album")
    
    def test_stamps_last_updated_even_without_changes(self, store, itunes):
        """Test that the document is rewritten once with a fresh date."""
        itunes.search.return_value = []
        
        apple_music_backfill(store, itunes, artist_name="Jade Three", delay=0, today=today).run()
        
        assert saved(store)["lastUpdated"] == "2025-05-01"
    
    def test_unknown_keys_survive(self, sample_dataset_dict, data_file, itunes):
        """Test that hand-added keys outside the model are written back untouched."""
        sample_dataset_dict["siteNotes"] = "keep"
        sample_dataset_dict["releases"][1]["bandcampUrl"] = "https://curated"
        sample_dataset_dict["releases"][0]["tracks"][0]["lyricsUrl"] = "https://lyrics"
        data_file.write_text(json.dumps(sample_dataset_dict), encoding="utf-8")
        itunes.search.return_value = [store_hit("Eh Ville - Single", "https://u")]
        
        apple_music_backfill(DatasetStore(data_file), itunes, artist_name="Jade Three", delay=0, today=today).run()
        
        document = json.loads(data_file.read_text(encoding="utf-8"))
        assert document["siteNotes"] == "keep"
        assert document["releases"][1]["bandcampUrl"] == "https://curated"
        assert document["releases"][1]["appleMusicUrl"] == "https://u"
        assert document["releases"][0]["tracks"][0]["lyricsUrl"] == "https://lyrics"
    
    def test_confirmation_rejection(self, store, itunes):
        """Test that a rejected match is reported, not written."""
        itunes.search.return_value = [store_hit("Eh Ville - Single", "https://u")]
        
        report = apple_music_backfill(
            store, itunes, artist_name="Jade Three", confirmation=AlwaysReject(), delay=0, today=today
        ).run()
        
        assert saved(store)["releases"][1]["appleMusicUrl"] is None
        assert report.unresolved == ["Eh Ville (apple music)"]
    
    def test_throttles_between_searches(self, store, itunes):
        """Test that the fixed delay precedes each search."""
        itunes.search.return_value = []
        sleep = Mock()
        
        apple_music_backfill(store, itunes, artist_name="Jade Three", delay=0.3, sleep=sleep, today=today).run()
        
        sleep.assert_called_once_with(0.3)


class TestBackfillErrors:
    """Tests for per-release error isolation."""
    
    def make_store_with_two_missing(self, store):
        data = saved(store)
        data["releases"][0]["appleMusicUrl"] = None
        store.path.write_text(json.dumps(data), encoding="utf-8")
        return store
    
    @pytest.mark.parametrize("error", [
        TransientRequestError("Network error occurred."),
        APIError("iTunes API error: 503", status=503),
    ])
    def test_error_skips_only_that_release(self, store, itunes, error):
        """Test that one failing search does not abort the run."""
        self.make_store_with_two_missing(store)
        itunes.search.side_effect = [error, [store_hit("Eh Ville - Single", "https://u")]]
        
        report = apple_music_backfill(store, itunes, artist_name="Jade Three", delay=0, today=today).run()
        
        releases = saved(store)["releases"]
        assert releases[0]["appleMusicUrl"] is None
        assert releases[1]["appleMusicUrl"] == "https://u"
        assert report.unresolved == ["Year Until the Fall (apple music)"]
        assert report.updated == {"apple music": 1}
    
    def test_unexpected_errors_propagate(self, store, itunes):
        """Test that programming errors are not swallowed and nothing is written."""
        before = store.path.read_bytes()
        itunes.search.side_effect = KeyError("collectionName")
        
        with pytest.raises(KeyError):
            apple_music_backfill(store, itunes, artist_name="Jade Three", delay=0, today=today).run()
        
        assert store.path.read_bytes() == before


class TestYouTubeBackfill:
    """Tests for the YouTube-backed backfill."""
    
    def test_video_and_playlist_for_albums(self, store, youtube):
        """Test that albums get both a video and a playlist; singles only a video."""
        def search(query, kind="video"):
            if kind == "video":
                return [video_hit("Jade Three - Year Until the Fall (Official Video)", "https://www.youtube.com/watch?v=v1")]
            return [video_hit("Year Until the Fall", "https://www.youtube.com/playlist?list=PL1")]
        youtube.search.side_effect = search
        
        report = youtube_backfill(store, youtube, "Jade Three", delay=0, today=today).run()
        
        releases = saved(store)["releases"]
        assert releases[0]["youtubeUrl"] == "https://www.youtube.com/watch?v=v1"
        assert releases[0]["youtubePlaylistUrl"] == "https://www.youtube.com/playlist?list=PL1"
        # the single already had a video and never needs a playlist
        assert releases[1]["youtubeUrl"] == "https://www.youtube.com/watch?v=existing"
        assert releases[1]["youtubePlaylistUrl"] is None
        assert report.updated == {"video": 1, "playlist": 1}
        assert report.already_set == 1
        assert youtube.search.call_count == 2
    
    def test_fan_uploads_are_unresolved(self, store, youtube):
        """Test that results from other channels are never picked."""
        youtube.search.return_value = [video_hit("Year Until the Fall", "https://fan", channel="Cover Corner")]
        
        report = youtube_backfill(store, youtube, "Jade Three", delay=0, today=today).run()
        
        assert report.unresolved == ["Year Until the Fall (video)", "Year Until the Fall (playlist)"]
        assert saved(store)["releases"][0]["youtubeUrl"] is None
    
    def test_operator_replacement_url(self, store, youtube):
        """Test that a pasted URL replaces the suggested one."""
        youtube.search.return_value = [video_hit("Year Until the Fall", "https://suggested")]
        confirmation = ReplaceWith("https://www.youtube.com/watch?v=corrected")
        
        youtube_backfill(store, youtube, "Jade Three", confirmation=confirmation, delay=0, today=today).run()
        
        releases = saved(store)["releases"]
        assert releases[0]["youtubeUrl"] == "https://www.youtube.com/watch?v=corrected"
        assert confirmation.calls[0] == ("Year Until the Fall", "video", "https://suggested")


class TestBackfillService:
    """Tests for the generic backfill loop."""
    
    def test_custom_target_predicate(self, store):
        """Test that targets only apply to eligible releases."""
        search = Mock(return_value=[store_hit("Eh Ville", "https://amazon/eh")])
        target = BackfillTarget(
            label="amazon",
            field_name="amazon_music_url",
            search=search,
            select=lambda candidates, title: candidates[0].url,
            applies_to=lambda release: release.release_type == "single",
        )
        
        report = BackfillService(store, [target], artist_name="Jade Three", delay=0, today=today).run()
        
        releases = saved(store)["releases"]
        assert releases[0]["amazonMusicUrl"] is None
        assert releases[1]["amazonMusicUrl"] == "https://amazon/eh"
        assert report.already_set == 1
        search.assert_called_once_with("Jade Three Eh Ville")
