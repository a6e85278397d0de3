from rest_framework import serializers
from .models import NotificationPreferences, ScheduledReminder


class NotificationPreferencesSerializer(serializers.ModelSerializer):
    """Reminder settings of the current user."""

    effective_low_stock_threshold = serializers.FloatField(read_only=True)

    class Meta:
        model = NotificationPreferences
        fields = [
            'notifications_enabled',
            'low_stock_threshold',
            'effective_low_stock_threshold',
            'notify_at_30_days',
            'notify_at_60_days',
            'notify_at_90_days',
            'updated_at',
        ]
        read_only_fields = ['updated_at']


class ScheduledReminderSerializer(serializers.ModelSerializer):

    class Meta:
        model = ScheduledReminder
        fields = [
            'identifier',
            'category',
            'trigger_type',
            'fire_at',
            'title',
            'body',
            'payload',
            'bottle_id',
        ]
        read_only_fields = fields


class RescheduleResponseSerializer(serializers.Serializer):
    scheduled = serializers.IntegerField()
    reminders = ScheduledReminderSerializer(many=True)
