"""
Reminder delivery backends.

The scheduler hands finished Reminder values to a backend; the backend
decides how they reach the user. The configured backend is named by the
REMINDER_BACKEND setting and loaded with get_backend().
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from django.conf import settings
from django.db import transaction, DatabaseError
from django.utils import timezone
from django.utils.module_loading import import_string

from .models import ScheduledReminder

logger = logging.getLogger(__name__)


class ReminderDeliveryError(Exception):
    """Raised when a backend cannot accept a reminder."""
    pass


@dataclass
class Reminder:
    """A reminder ready for delivery."""

    identifier: str
    category: str
    trigger_type: str
    fire_at: datetime
    title: str
    body: str
    payload: dict = field(default_factory=dict)
    bottle_id: Optional[UUID] = None


class BaseReminderBackend:
    """Interface every reminder backend implements."""

    def add(self, user, reminder: Reminder) -> None:
        raise NotImplementedError

    def remove_all(self, user) -> int:
        raise NotImplementedError

    def remove_with_prefix(self, user, prefix: str) -> int:
        raise NotImplementedError

    def remove_for_bottle(self, user, bottle_id: UUID) -> int:
        raise NotImplementedError

    def pending(self, user) -> List[ScheduledReminder]:
        raise NotImplementedError


class DatabaseReminderBackend(BaseReminderBackend):
    """Stores pending reminders as ScheduledReminder rows."""

    def add(self, user, reminder: Reminder) -> None:
        try:
            with transaction.atomic():
                ScheduledReminder.objects.update_or_create(
                    user=user,
                    identifier=reminder.identifier,
                    defaults={
                        'category': reminder.category,
                        'trigger_type': reminder.trigger_type,
                        'fire_at': reminder.fire_at,
                        'title': reminder.title,
                        'body': reminder.body,
                        'payload': reminder.payload,
                        'bottle_id': reminder.bottle_id,
                    }
                )
        except DatabaseError as e:
            raise ReminderDeliveryError(
                f"Could not store reminder {reminder.identifier}: {e}"
            ) from e

    def remove_all(self, user) -> int:
        deleted, _ = ScheduledReminder.objects.filter(user=user).delete()
        return deleted

    def remove_with_prefix(self, user, prefix: str) -> int:
        deleted, _ = ScheduledReminder.objects.filter(user=user, identifier__startswith=prefix).delete()
        return deleted

    def remove_for_bottle(self, user, bottle_id: UUID) -> int:
        deleted, _ = ScheduledReminder.objects.filter(user=user, bottle_id=bottle_id).delete()
        return deleted

    def pending(self, user) -> List[ScheduledReminder]:
        """Reminders still due to fire, soonest first."""
        return list(
            ScheduledReminder.objects
            .filter(user=user, fire_at__gt=timezone.now())
            .order_by('fire_at')
        )


def get_backend(path: Optional[str] = None) -> BaseReminderBackend:
    """Instantiate the reminder backend named by path or settings.REMINDER_BACKEND."""
    backend_class = import_string(path or settings.REMINDER_BACKEND)
    return backend_class()
