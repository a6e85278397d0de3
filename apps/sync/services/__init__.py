"""
Sync services - Business logic layer.

This package contains the cloud sync monitor:
- Account status and container tracking
- Schema initialization
- Bounded sync event log and diagnostics
"""

from .sync_monitor import (
    record_sync_event,
    get_sync_state,
    update_account_status,
    is_cloud_sync_available,
    initialize_schema,
    get_events,
    clear_events,
    diagnostic_status,
)

from .exceptions import (
    SyncServiceError,
    CloudAccountUnavailableError,
    InvalidAccountStatusError,
)

__all__ = [
    'record_sync_event',
    'get_sync_state',
    'update_account_status',
    'is_cloud_sync_available',
    'initialize_schema',
    'get_events',
    'clear_events',
    'diagnostic_status',
    'SyncServiceError',
    'CloudAccountUnavailableError',
    'InvalidAccountStatusError',
]
