# ==========================================
# apps/notifications/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid

DEFAULT_LOW_STOCK_THRESHOLD = 10.0


class ReminderCategory(models.TextChoices):
    LOW_STOCK = 'LOW_STOCK', 'Low stock'
    AGE = 'AGE_NOTIFICATION', 'Days since opened'


class TriggerType(models.TextChoices):
    INTERVAL = 'interval', 'Relative interval'
    CALENDAR = 'calendar', 'Calendar date'


class NotificationPreferences(models.Model):
    """Per-user reminder settings."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='notification_preferences'
    )
    notifications_enabled = models.BooleanField(default=False)
    low_stock_threshold = models.FloatField(
        default=DEFAULT_LOW_STOCK_THRESHOLD,
        validators=[MinValueValidator(0.0), MaxValueValidator(100.0)]
    )
    notify_at_30_days = models.BooleanField(default=False)
    notify_at_60_days = models.BooleanField(default=False)
    notify_at_90_days = models.BooleanField(default=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'notification_preferences'
        verbose_name_plural = 'notification preferences'

    def __str__(self):
        state = 'on' if self.notifications_enabled else 'off'
        return f"{self.user} reminders {state}"

    @property
    def effective_low_stock_threshold(self):
        """Threshold percentage; unset or non-positive values fall back to the default."""
        if self.low_stock_threshold and self.low_stock_threshold > 0:
            return self.low_stock_threshold
        return DEFAULT_LOW_STOCK_THRESHOLD

    @property
    def enabled_age_thresholds(self):
        """Enabled days-since-opened thresholds, ascending."""
        flags = [
            (30, self.notify_at_30_days),
            (60, self.notify_at_60_days),
            (90, self.notify_at_90_days),
        ]
        return [days for days, enabled in flags if enabled]


class ScheduledReminder(models.Model):
    """A pending reminder held by the database delivery backend."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='scheduled_reminders')
    identifier = models.CharField(max_length=200)
    category = models.CharField(max_length=30, choices=ReminderCategory.choices)
    trigger_type = models.CharField(max_length=20, choices=TriggerType.choices)
    fire_at = models.DateTimeField()
    title = models.CharField(max_length=200)
    body = models.TextField(blank=True)
    payload = models.JSONField(default=dict, blank=True)
    bottle_id = models.UUIDField(null=True, blank=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'scheduled_reminders'
        unique_together = [['user', 'identifier']]
        indexes = [
            models.Index(fields=['user', 'fire_at'], name='reminders_user_fire_at_idx'),
        ]
        ordering = ['fire_at']

    def __str__(self):
        return f"{self.identifier} @ {self.fire_at:%Y-%m-%d %H:%M}"
