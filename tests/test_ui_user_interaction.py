"""
Tests for operator confirmation strategies.
"""

import io
import pytest
import sys
from pathlib import Path
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rich.console import Console

from discosync.ui.user_interaction import AlwaysAccept, AlwaysReject, ConsoleConfirmation


@pytest.fixture
def confirmation():
    return ConsoleConfirmation(Console(file=io.StringIO()))


class TestNonInteractiveStrategies:
    """Tests for the automated strategies."""
    
    def test_always_accept(self):
        assert AlwaysAccept().confirm("Eh Ville", "video", "https://u") == "https://u"
    
    def test_always_reject(self):
        assert AlwaysReject().confirm("Eh Ville", "video", "https://u") is None


class TestConsoleConfirmation:
    """Tests for the interactive prompt."""
    
    @pytest.mark.parametrize("answer, expected", [
        ("y", "https://u"),
        ("Y", "https://u"),
        (" y ", "https://u"),
        ("n", None),
        ("N", None),
        ("", None),
        ("https://www.youtube.com/watch?v=fixed", "https://www.youtube.com/watch?v=fixed"),
    ])
    def test_answers(self, confirmation, answer, expected):
        """Test accept, skip and replacement answers."""
        with patch('discosync.ui.user_interaction.Prompt.ask', return_value=answer):
            assert confirmation.confirm("Eh Ville", "video", "https://u") == expected
    
    def test_shows_candidate(self, confirmation):
        """Test that the suggested URL is printed before asking."""
        with patch('discosync.ui.user_interaction.Prompt.ask', return_value="n"):
            confirmation.confirm("Eh Ville", "video", "https://u")
        
        assert "https://u" in confirmation.console.file.getvalue()
