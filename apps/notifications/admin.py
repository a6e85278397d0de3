from django.contrib import admin
from django.utils.html import format_html
from .models import NotificationPreferences, ScheduledReminder


@admin.register(NotificationPreferences)
class NotificationPreferencesAdmin(admin.ModelAdmin):
    list_display = [
        'user',
        'enabled_badge',
        'low_stock_threshold',
        'notify_at_30_days',
        'notify_at_60_days',
        'notify_at_90_days',
        'updated_at',
    ]
    list_filter = ['notifications_enabled']
    search_fields = ['user__email']
    readonly_fields = ['updated_at']

    def enabled_badge(self, obj):
        color = '#28a745' if obj.notifications_enabled else '#6c757d'
        label = 'On' if obj.notifications_enabled else 'Off'
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 10px; border-radius: 3px;">{}</span>',
            color,
            label
        )
    enabled_badge.short_description = 'Reminders'


@admin.register(ScheduledReminder)
class ScheduledReminderAdmin(admin.ModelAdmin):
    list_display = ['identifier', 'user', 'category', 'trigger_type', 'fire_at']
    list_filter = ['category', 'trigger_type']
    search_fields = ['identifier', 'user__email', 'title']
    readonly_fields = ['created_at']
    date_hierarchy = 'fire_at'
