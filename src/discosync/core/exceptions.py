"""
Custom exceptions for DiscoSync.
"""

from typing import Optional


class DiscoSyncError(Exception):
    """Base exception for DiscoSync."""
    pass


class ConfigurationError(DiscoSyncError):
    """Exception raised when configuration or credentials are missing or invalid."""
    pass


class AuthError(DiscoSyncError):
    """Exception raised when a credential exchange is rejected."""
    pass


class APIError(DiscoSyncError):
    """Exception raised when a catalog API returns a non-success response."""

    def __init__(self, message: str, status: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.url = url


class NotFoundError(DiscoSyncError):
    """Exception raised when no search candidate matches a release."""
    pass


class TransientRequestError(DiscoSyncError, ConnectionError):
    """Exception raised when a request fails at the network or decoding level."""
    pass


class DatasetError(DiscoSyncError):
    """Exception raised when the persisted dataset cannot be read."""
    pass
