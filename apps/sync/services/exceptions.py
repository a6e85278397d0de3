"""Custom exceptions for sync services."""


class SyncServiceError(Exception):
    """Base exception for sync services."""
    pass


class CloudAccountUnavailableError(SyncServiceError):
    """Raised when an operation needs an available cloud account."""
    pass


class InvalidAccountStatusError(SyncServiceError):
    """Raised when a reported account status is not recognised."""
    pass
