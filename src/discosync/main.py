"""
DiscoSync - Discography Sync
Main entry point.
"""

from .core import setup_logging
from .core.validation import validate_and_raise
from .ui.cli import DiscoSyncCLI

logger = setup_logging()


def main():
    """Main entry point."""
    logger.debug("Starting DiscoSync")
    try:
        try:
            validate_and_raise()
            logger.debug("Configuration validation passed")
        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise
        
        cli = DiscoSyncCLI()
        cli.run()
    except KeyboardInterrupt:
        logger.debug("Application interrupted by user")
        raise
    except Exception:
        logger.exception("Unhandled exception occurred")
        raise
    finally:
        logger.debug("Application shutting down")


if __name__ == "__main__":
    main()
