"""
Core module for DiscoSync.
Contains configuration, exceptions, logging setup, and validation.
"""

from .config import *
from .exceptions import *
from .logger import setup_logging, get_logger
from .validation import (
    validate_configuration,
    validate_and_raise,
    check_dependencies,
    load_credentials,
    require_credentials,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'validate_configuration',
    'validate_and_raise',
    'check_dependencies',
    'load_credentials',
    'require_credentials',
    'DiscoSyncError',
    'ConfigurationError',
    'AuthError',
    'APIError',
    'NotFoundError',
    'TransientRequestError',
    'DatasetError',
]
