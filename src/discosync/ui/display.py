"""
Display management for the DiscoSync CLI with Rich components.
"""

from typing import Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.align import Align
from rich import box

from ..models.releases import CatalogDataset
from ..services.backfill_service import BackfillReport


class DisplayManager:
    """Formats run results and dataset summaries for the terminal."""
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
    
    def create_header_panel(self, title: str, subtitle: Optional[str] = None) -> Panel:
        """Create a styled header panel."""
        header_text = Text(title, style="bold cyan")
        if subtitle:
            header_text.append(f"\n{subtitle}", style="dim")
        return Panel(
            Align.center(header_text),
            border_style="cyan",
            box=box.ROUNDED,
            padding=(1, 2)
        )
    
    def print_success(self, message: str):
        self.console.print(f"[bold green]✓[/bold green] {message}")
    
    def print_error(self, message: str):
        self.console.print(f"[bold red]✗[/bold red] {message}")
    
    def print_warning(self, message: str):
        self.console.print(f"[yellow]⚠[/yellow] {message}")
    
    def display_resync_result(self, dataset: CatalogDataset, data_path: str):
        """Summarize a completed full resync."""
        self.print_success(f"Wrote {len(dataset.releases)} releases to {data_path}")
        missing = [r for r in dataset.releases if r.missing_links()]
        if missing:
            self.console.print("\n[bold]Next steps:[/bold]")
            self.console.print(f"  • {len(missing)} release(s) still miss cross-platform links; "
                               "run the backfill modes or add them manually")
    
    def display_backfill_report(self, report: BackfillReport):
        """Display counts and the list of items needing manual attention."""
        counts = ", ".join(f"{label}: {count}" for label, count in report.updated.items())
        self.console.print()
        self.console.print(
            f"[bold]Done.[/bold] Updated {counts}, already set: {report.already_set}, "
            f"not found: {len(report.unresolved)}"
        )
        if report.unresolved:
            self.console.print("[yellow]Not found / rejected (add manually):[/yellow]")
            for item in report.unresolved:
                self.console.print(f"  - {item}")
    
    def display_dataset_status(self, dataset: CatalogDataset):
        """Show every release with the links it is still missing."""
        self.console.print(self.create_header_panel(
            f"🎵 {dataset.artist_name or 'Unknown artist'}",
            f"{len(dataset.releases)} releases, last updated {dataset.last_updated or 'never'}"
        ))
        
        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="blue"
        )
        table.add_column("Date", style="cyan", width=12, justify="center")
        table.add_column("Type", style="magenta", width=8, justify="center")
        table.add_column("Title", style="white")
        table.add_column("Tracks", style="white", justify="right")
        table.add_column("Missing links", style="yellow")
        
        for release in dataset.releases:
            missing = release.missing_links()
            table.add_row(
                release.release_date,
                release.release_type,
                release.title,
                str(release.total_tracks),
                ", ".join(missing) if missing else "[green]complete[/green]"
            )
        
        self.console.print(table)
