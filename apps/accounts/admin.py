# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Count
from django.utils.html import format_html

from apps.notifications.services import reschedule_for_user
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Collection owners; email replaces the username of the stock admin."""

    list_display = [
        'email',
        'display_name',
        'bottle_count',
        'wishlist_count',
        'reminders_badge',
        'is_active',
        'last_login',
    ]
    list_filter = ['is_active', 'is_staff', 'notification_preferences__notifications_enabled']
    search_fields = ['email', 'display_name']
    ordering = ['-created_at']
    readonly_fields = ['created_at', 'last_login']

    fieldsets = (
        ('Account', {
            'fields': ('email', 'display_name', 'password')
        }),
        ('Access', {
            'fields': ('is_active', 'is_staff', 'is_superuser'),
        }),
        ('Activity', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'display_name', 'password1', 'password2'),
        }),
    )
    filter_horizontal = []
    actions = ['rebuild_reminders']

    def get_queryset(self, request):
        return (
            super().get_queryset(request)
            .select_related('notification_preferences')
            .annotate(
                num_bottles=Count('bottles', distinct=True),
                num_wishlist=Count('wishlist_items', distinct=True),
            )
        )

    def bottle_count(self, obj):
        return obj.num_bottles
    bottle_count.short_description = 'Bottles'
    bottle_count.admin_order_field = 'num_bottles'

    def wishlist_count(self, obj):
        return obj.num_wishlist
    wishlist_count.short_description = 'Wishlist'
    wishlist_count.admin_order_field = 'num_wishlist'

    def reminders_badge(self, obj):
        preferences = getattr(obj, 'notification_preferences', None)
        enabled = preferences is not None and preferences.notifications_enabled
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 10px; border-radius: 3px;">{}</span>',
            '#28a745' if enabled else '#6c757d',
            'On' if enabled else 'Off'
        )
    reminders_badge.short_description = 'Reminders'

    @admin.action(description='Rebuild reminders for selected users')
    def rebuild_reminders(self, request, queryset):
        total = sum(len(reschedule_for_user(user)) for user in queryset)
        self.message_user(request, f'Scheduled {total} reminder(s) for {queryset.count()} user(s).')
