"""
Tests for search result models.
"""

import dataclasses
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from discosync.models.search_results import CandidateRecord


class TestCandidateRecord:
    """Test cases for CandidateRecord."""

    def test_defaults(self):
        """Channel and catalog id are optional."""
        record = CandidateRecord(title="Eh Ville - Single", url="https://u", source="itunes")
        assert record.channel is None
        assert record.catalog_id is None

    def test_frozen(self):
        """Records cannot be mutated after creation."""
        record = CandidateRecord(title="X", url="https://u", source="itunes")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.url = "https://other"
