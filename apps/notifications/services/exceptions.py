"""Custom exceptions for notifications services."""

from apps.notifications.backends import ReminderDeliveryError


class NotificationsServiceError(Exception):
    """Base exception for notifications services."""
    pass


__all__ = ['NotificationsServiceError', 'ReminderDeliveryError']
