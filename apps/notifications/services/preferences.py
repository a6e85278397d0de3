"""Notification preferences service."""

from typing import Dict, Any

from django.db import transaction

from apps.notifications.models import NotificationPreferences

PREFERENCE_FIELDS = [
    'notifications_enabled',
    'low_stock_threshold',
    'notify_at_30_days',
    'notify_at_60_days',
    'notify_at_90_days',
]


def get_preferences(*, user) -> NotificationPreferences:
    """Return the user's preferences, creating the defaults on first access."""
    preferences, _ = NotificationPreferences.objects.get_or_create(user=user)
    return preferences


@transaction.atomic
def update_preferences(*, user, data: Dict[str, Any]) -> NotificationPreferences:
    """
    Update notification preferences.

    Args:
        user: Preferences owner
        data: Any subset of PREFERENCE_FIELDS

    Returns:
        Updated NotificationPreferences instance
    """
    preferences = get_preferences(user=user)

    for field in PREFERENCE_FIELDS:
        if field in data:
            setattr(preferences, field, data[field])

    preferences.save()
    return preferences
