"""
Reminder scheduling.

Every reschedule is a full replace: all of the user's pending reminders
are removed and then rebuilt from the current bottles and preferences.
With notifications disabled the rebuild adds nothing, which leaves the
user with no pending reminders.
"""

import logging
from datetime import datetime, timedelta
from typing import Iterable, List, Optional
from uuid import UUID

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from apps.bottles.models import Bottle
from apps.notifications.backends import Reminder, BaseReminderBackend, get_backend
from apps.notifications.models import NotificationPreferences, ReminderCategory, TriggerType
from .exceptions import ReminderDeliveryError
from .preferences import get_preferences

logger = logging.getLogger(__name__)


def low_stock_identifier(bottle_id) -> str:
    return f"low_stock_{bottle_id}"


def age_identifier(days: int, bottle_id) -> str:
    return f"age_{days}_{bottle_id}"


class ReminderScheduler:
    """Builds and delivers reminders for one user's collection."""

    def __init__(
        self,
        *,
        user,
        preferences: NotificationPreferences,
        backend: Optional[BaseReminderBackend] = None,
        now: Optional[datetime] = None
    ):
        self.user = user
        self.preferences = preferences
        self.backend = backend or get_backend()
        self.now = now or timezone.now()

    def low_stock_reminder(self, bottle: Bottle) -> Optional[Reminder]:
        """Reminder for an opened bottle that is running low but not empty."""
        if not bottle.is_opened:
            return None

        percentage = bottle.remaining_percentage
        if not 0 < percentage <= self.preferences.effective_low_stock_threshold:
            return None

        delay = timedelta(seconds=settings.LOW_STOCK_REMINDER_DELAY_SECONDS)
        return Reminder(
            identifier=low_stock_identifier(bottle.id),
            category=ReminderCategory.LOW_STOCK,
            trigger_type=TriggerType.INTERVAL,
            fire_at=self.now + delay,
            title='Running low',
            body=f"{bottle.name} is down to {int(percentage)}% remaining.",
            payload={'bottleId': str(bottle.id)},
            bottle_id=bottle.id,
        )

    def age_reminders(self, bottle: Bottle) -> List[Reminder]:
        """Days-since-opened reminders whose fire date is still in the future."""
        if bottle.opened_date is None:
            return []

        reminders = []
        for days in self.preferences.enabled_age_thresholds:
            fire_at = bottle.opened_date + timedelta(days=days)
            if fire_at <= self.now:
                continue
            reminders.append(Reminder(
                identifier=age_identifier(days, bottle.id),
                category=ReminderCategory.AGE,
                trigger_type=TriggerType.CALENDAR,
                fire_at=fire_at,
                title='Time for another dram',
                body=f"{bottle.name} was opened {days} days ago.",
                payload={'bottleId': str(bottle.id), 'days': days},
                bottle_id=bottle.id,
            ))
        return reminders

    def build_reminders(self, bottle: Bottle) -> List[Reminder]:
        reminders = []
        low_stock = self.low_stock_reminder(bottle)
        if low_stock is not None:
            reminders.append(low_stock)
        reminders.extend(self.age_reminders(bottle))
        return reminders

    def schedule_all(self, bottles: Iterable[Bottle]) -> List[Reminder]:
        """
        Replace the user's pending reminders.

        A reminder the backend rejects is logged and skipped; the rest of
        the batch is still delivered.

        Returns:
            Reminders that were delivered
        """
        removed = self.backend.remove_all(self.user)
        logger.debug("Removed %d pending reminders for user %s", removed, self.user.id)

        if not self.preferences.notifications_enabled:
            return []

        delivered = []
        for bottle in bottles:
            for reminder in self.build_reminders(bottle):
                try:
                    self.backend.add(self.user, reminder)
                except ReminderDeliveryError:
                    logger.warning("Skipping reminder %s", reminder.identifier, exc_info=True)
                    continue
                delivered.append(reminder)

        logger.info("Scheduled %d reminders for user %s", len(delivered), self.user.id)
        return delivered


def reschedule_for_user(user, *, backend: Optional[BaseReminderBackend] = None) -> List[Reminder]:
    """Rebuild all reminders for the user's current collection."""
    scheduler = ReminderScheduler(
        user=user,
        preferences=get_preferences(user=user),
        backend=backend,
    )
    return scheduler.schedule_all(Bottle.objects.filter(owner=user))


def request_reschedule(user) -> None:
    """
    Queue a reschedule to run once the current transaction commits.

    Failures are logged by Django and never reach the caller.
    """
    transaction.on_commit(lambda: reschedule_for_user(user), robust=True)


def cancel_bottle_reminders(*, user, bottle_id: UUID) -> int:
    """Drop every pending reminder that refers to the bottle."""
    removed = get_backend().remove_for_bottle(user, bottle_id)
    if removed:
        logger.info("Cancelled %d reminders for bottle %s", removed, bottle_id)
    return removed
