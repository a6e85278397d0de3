"""
Notifications services - Business logic layer.

This package contains all business operations for the notifications app:
- Preference management
- Low-stock and days-since-opened reminder scheduling
"""

from .preferences import (
    get_preferences,
    update_preferences,
)

from .scheduler import (
    ReminderScheduler,
    reschedule_for_user,
    request_reschedule,
    cancel_bottle_reminders,
    low_stock_identifier,
    age_identifier,
)

from .exceptions import (
    NotificationsServiceError,
    ReminderDeliveryError,
)

__all__ = [
    # Preferences
    'get_preferences',
    'update_preferences',
    # Scheduling
    'ReminderScheduler',
    'reschedule_for_user',
    'request_reschedule',
    'cancel_bottle_reminders',
    'low_stock_identifier',
    'age_identifier',
    # Exceptions
    'NotificationsServiceError',
    'ReminderDeliveryError',
]
