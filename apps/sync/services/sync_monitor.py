"""
Cloud sync monitoring.

The sync service itself runs elsewhere; this module keeps what the app
knows about it: the account status last reported, whether the cloud
schema was initialized for the current container, and a bounded log of
sync events per user.
"""

import logging
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.db import transaction, DatabaseError
from django.utils import timezone

from apps.bottles.models import Bottle, DrinkingLog
from apps.sync.models import SyncState, SyncEvent, SyncEventKind, AccountStatus
from apps.wishlist.models import WishlistItem
from .exceptions import CloudAccountUnavailableError, InvalidAccountStatusError

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    AccountStatus.AVAILABLE: 'Cloud account is available',
    AccountStatus.NO_ACCOUNT: 'No cloud account configured',
    AccountStatus.RESTRICTED: 'Cloud account is restricted',
    AccountStatus.UNAVAILABLE: 'Cloud account is temporarily unavailable',
    AccountStatus.COULD_NOT_DETERMINE: 'Could not determine cloud account status',
}

DIAGNOSTIC_EVENT_COUNT = 5


def record_sync_event(user, kind: str, message: str) -> Optional[SyncEvent]:
    """
    Log a sync event and append it to the user's event log.

    The log keeps the newest SYNC_EVENT_LOG_LIMIT entries. Persistence
    failures are logged and swallowed.

    Returns:
        Created SyncEvent, or None if it could not be stored
    """
    level = logging.ERROR if kind == SyncEventKind.ERROR else logging.INFO
    logger.log(level, "[sync:%s] %s: %s", user.id, kind, message)

    try:
        with transaction.atomic():
            event = SyncEvent.objects.create(user=user, kind=kind, message=message)
            stale_ids = list(
                SyncEvent.objects
                .filter(user=user)
                .order_by('-created_at')
                .values_list('id', flat=True)[settings.SYNC_EVENT_LOG_LIMIT:]
            )
            if stale_ids:
                SyncEvent.objects.filter(id__in=stale_ids).delete()
    except DatabaseError:
        logger.exception("Could not store sync event for user %s", user.id)
        return None

    return event


def get_sync_state(user) -> SyncState:
    """
    Return the user's sync state, creating it on first access.

    When the configured container differs from the stored one, the schema
    flags are reset so the schema gets initialized again for the new
    container.
    """
    expected = settings.CLOUD_SYNC_CONTAINER_ID
    state, created = SyncState.objects.get_or_create(
        user=user,
        defaults={'container_id': expected}
    )

    if not created and state.container_id != expected:
        previous = state.container_id
        state.container_id = expected
        state.reset_schema()
        state.save()
        record_sync_event(
            user,
            SyncEventKind.INFO,
            f"Container changed from {previous or 'none'} to {expected}; schema must be initialized again"
        )

    return state


def update_account_status(*, user, status: str) -> SyncState:
    """
    Store a freshly reported account status.

    Raises:
        InvalidAccountStatusError: If status is not an AccountStatus value
    """
    if status not in AccountStatus.values:
        raise InvalidAccountStatusError(
            f"Invalid account status: {status!r}. Valid options: {', '.join(AccountStatus.values)}"
        )

    state = get_sync_state(user)
    state.account_status = status
    state.last_checked_at = timezone.now()
    state.save(update_fields=['account_status', 'last_checked_at', 'updated_at'])

    kind = SyncEventKind.INFO if status == AccountStatus.AVAILABLE else SyncEventKind.ERROR
    record_sync_event(user, kind, STATUS_MESSAGES[status])
    return state


def is_cloud_sync_available(state: SyncState) -> bool:
    return state.account_status == AccountStatus.AVAILABLE


def initialize_schema(*, user) -> SyncState:
    """
    Mark the cloud schema as initialized for the current container.

    Initializing an already initialized schema does nothing.

    Raises:
        CloudAccountUnavailableError: If the account is not available
    """
    state = get_sync_state(user)

    if state.schema_initialized:
        record_sync_event(user, SyncEventKind.INFO, 'Schema already initialized, skipping')
        return state

    if not is_cloud_sync_available(state):
        record_sync_event(user, SyncEventKind.ERROR, 'Cannot initialize schema: cloud account not available')
        raise CloudAccountUnavailableError('Cloud account is not available')

    state.schema_initialized = True
    state.schema_initialized_at = timezone.now()
    state.save(update_fields=['schema_initialized', 'schema_initialized_at', 'updated_at'])

    record_sync_event(user, SyncEventKind.SETUP, 'Schema initialized')
    return state


def get_events(*, user, limit: Optional[int] = None) -> List[SyncEvent]:
    """Sync events, newest first."""
    events = SyncEvent.objects.filter(user=user).order_by('-created_at')
    if limit is not None:
        events = events[:limit]
    return list(events)


def clear_events(*, user) -> int:
    """Empty the event log, leaving a single entry noting the clear."""
    deleted, _ = SyncEvent.objects.filter(user=user).delete()
    record_sync_event(user, SyncEventKind.INFO, 'Logs cleared')
    return deleted


def diagnostic_status(*, user) -> Dict[str, Any]:
    """Summary of the sync state and the stored collection."""
    state = get_sync_state(user)
    return {
        'container_id': state.container_id,
        'account_status': state.account_status,
        'cloud_sync_available': is_cloud_sync_available(state),
        'schema_initialized': state.schema_initialized,
        'schema_initialized_at': state.schema_initialized_at,
        'last_checked_at': state.last_checked_at,
        'counts': {
            'bottles': Bottle.objects.filter(owner=user).count(),
            'drinking_logs': DrinkingLog.objects.filter(bottle__owner=user).count(),
            'wishlist_items': WishlistItem.objects.filter(owner=user).count(),
        },
        'recent_events': get_events(user=user, limit=DIAGNOSTIC_EVENT_COUNT),
    }
