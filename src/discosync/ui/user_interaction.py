"""
Operator confirmation of backfill candidates.
"""

from abc import ABC, abstractmethod
from typing import Optional
from rich.console import Console
from rich.prompt import Prompt


class ConfirmationStrategy(ABC):
    """Decides whether a matched URL should be written to a release."""
    
    @abstractmethod
    def confirm(self, release_title: str, label: str, url: str) -> Optional[str]:
        """
        Return the URL to store, or None to leave the field unset.
        """
        pass


class AlwaysAccept(ConfirmationStrategy):
    """Non-interactive mode: every match is stored."""
    
    def confirm(self, release_title: str, label: str, url: str) -> Optional[str]:
        return url


class AlwaysReject(ConfirmationStrategy):
    """Non-interactive mode: nothing is stored."""
    
    def confirm(self, release_title: str, label: str, url: str) -> Optional[str]:
        return None


class ConsoleConfirmation(ConfirmationStrategy):
    """Blocking prompt: accept, skip, or paste a replacement URL."""
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
    
    def confirm(self, release_title: str, label: str, url: str) -> Optional[str]:
        self.console.print(f"    [cyan]{url}[/cyan]")
        answer = Prompt.ask(
            f"    [bold]{release_title}[/bold] ({label}) "
            "[green]\\[y][/green] accept  [red]\\[n][/red] skip  [or paste correct URL]",
            console=self.console,
            default="",
            show_default=False,
        )
        answer = (answer or "").strip()
        if answer.lower() == "y":
            return url
        if answer.lower() == "n" or not answer:
            return None
        return answer
