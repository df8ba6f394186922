"""
User interface components for DiscoSync.

The CLI and display modules are imported from their own modules
(discosync.ui.cli, discosync.ui.display) because they depend on the
services, which in turn use the confirmation strategies exported here.
"""

from .user_interaction import (
    ConfirmationStrategy,
    AlwaysAccept,
    AlwaysReject,
    ConsoleConfirmation,
)

__all__ = [
    'ConfirmationStrategy',
    'AlwaysAccept',
    'AlwaysReject',
    'ConsoleConfirmation',
]
