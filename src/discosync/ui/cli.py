"""
DiscoSync CLI Module
Command-line interface for resyncing and backfilling the discography dataset.
"""

import argparse
import sys
from typing import List, Optional

from ..clients.itunes import ITunesClient
from ..clients.spotify import SpotifyClient
from ..clients.youtube import YouTubeClient
from ..core.config import (
    PROJECT_NAME,
    PROJECT_VERSION,
    ARTIST_CONFIG,
    CREDENTIAL_KEYS,
    DATA_PATH,
    ENV_FILE,
)
from ..core.exceptions import DiscoSyncError
from ..core.logger import setup_logging, get_logger
from ..core.validation import load_credentials, require_credentials
from ..services.backfill_service import apple_music_backfill, youtube_backfill
from ..services.dataset_store import DatasetStore
from ..services.resync_service import ResyncService
from .display import DisplayManager
from .user_interaction import AlwaysAccept, ConfirmationStrategy, ConsoleConfirmation

logger = get_logger("ui.cli")


class DiscoSyncCLI:
    """Main CLI class for the DiscoSync reconciliation tool."""
    
    def __init__(self, display_manager: Optional[DisplayManager] = None):
        """Initialize the CLI."""
        self.display_manager = display_manager or DisplayManager()
    
    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME.lower(),
            description=f"{PROJECT_NAME} - Discography Sync v{PROJECT_VERSION}",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s resync
  %(prog)s apple-music --confirm
  %(prog)s youtube
  %(prog)s --data-file site/src/data/releases.json status
            """
        )
        
        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )
        parser.add_argument(
            '--data-file', '-d',
            default=str(DATA_PATH),
            help=f'Path to the releases JSON document (default: {DATA_PATH})'
        )
        parser.add_argument(
            '--env-file', '-e',
            default=str(ENV_FILE),
            help=f'Path to the credentials file (default: {ENV_FILE})'
        )
        parser.add_argument(
            '--artist-name', '-a',
            default=ARTIST_CONFIG["NAME"],
            help='Artist display name used in searches'
        )
        parser.add_argument(
            '--verbose', '-v',
            action='store_true',
            help='Enable debug logging'
        )
        
        subparsers = parser.add_subparsers(
            dest='mode',
            help='Available modes',
            required=True
        )
        
        resync_parser = subparsers.add_parser(
            'resync',
            help='Rebuild all releases and tracks from Spotify, keeping curated links'
        )
        resync_parser.add_argument(
            '--artist-id', '-i',
            default=ARTIST_CONFIG["SPOTIFY_ID"],
            help='Spotify artist ID'
        )
        
        apple_parser = subparsers.add_parser(
            'apple-music',
            help='Find missing Apple Music links with the iTunes Search API'
        )
        apple_parser.add_argument(
            '--confirm', '-c',
            action='store_true',
            help='Ask before saving each match'
        )
        
        youtube_parser = subparsers.add_parser(
            'youtube',
            help='Find missing YouTube video and playlist links'
        )
        youtube_parser.add_argument(
            '--no-confirm',
            action='store_true',
            help='Save every match without asking'
        )
        
        subparsers.add_parser(
            'status',
            help='Show which releases still miss cross-platform links'
        )
        
        return parser
    
    def _confirmation(self, interactive: bool) -> ConfirmationStrategy:
        if interactive:
            return ConsoleConfirmation(self.display_manager.console)
        return AlwaysAccept()
    
    def handle_resync(self, store: DatasetStore, env_file: str, artist_id: str, artist_name: str):
        credentials = require_credentials(load_credentials(env_file), CREDENTIAL_KEYS["SPOTIFY"])
        client = SpotifyClient(credentials["SPOTIFY_CLIENT_ID"], credentials["SPOTIFY_CLIENT_SECRET"])
        dataset = ResyncService(client, store, artist_id, artist_name).run()
        self.display_manager.display_resync_result(dataset, str(store.path))
    
    def handle_apple_music(self, store: DatasetStore, artist_name: str, confirm: bool):
        service = apple_music_backfill(
            store,
            ITunesClient(),
            artist_name=artist_name,
            confirmation=self._confirmation(confirm)
        )
        self.display_manager.display_backfill_report(service.run())
    
    def handle_youtube(self, store: DatasetStore, env_file: str, artist_name: str, confirm: bool):
        credentials = require_credentials(load_credentials(env_file), CREDENTIAL_KEYS["YOUTUBE"])
        service = youtube_backfill(
            store,
            YouTubeClient(credentials["YOUTUBE_API_KEY"]),
            artist_name=artist_name,
            confirmation=self._confirmation(confirm)
        )
        self.display_manager.display_backfill_report(service.run())
    
    def handle_status(self, store: DatasetStore):
        self.display_manager.display_dataset_status(store.load())
    
    def run(self, args: List[str] = None):
        """Run the CLI with given arguments."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)
        
        if parsed_args.verbose:
            setup_logging(level="DEBUG")
        
        store = DatasetStore(parsed_args.data_file)
        
        try:
            if parsed_args.mode == 'resync':
                self.handle_resync(store, parsed_args.env_file, parsed_args.artist_id, parsed_args.artist_name)
            elif parsed_args.mode == 'apple-music':
                self.handle_apple_music(store, parsed_args.artist_name, parsed_args.confirm)
            elif parsed_args.mode == 'youtube':
                self.handle_youtube(store, parsed_args.env_file, parsed_args.artist_name, not parsed_args.no_confirm)
            elif parsed_args.mode == 'status':
                self.handle_status(store)
        except KeyboardInterrupt:
            self.display_manager.print_warning("Operation cancelled by user.")
            sys.exit(1)
        except DiscoSyncError as e:
            logger.debug("Run aborted", exc_info=True)
            self.display_manager.print_error(str(e))
            sys.exit(1)
        
        sys.exit(0)
