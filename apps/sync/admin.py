from django.contrib import admin
from django.utils.html import format_html
from .models import SyncState, SyncEvent, AccountStatus


@admin.register(SyncState)
class SyncStateAdmin(admin.ModelAdmin):
    list_display = ['user', 'container_id', 'status_badge', 'schema_initialized', 'last_checked_at']
    list_filter = ['account_status', 'schema_initialized']
    search_fields = ['user__email', 'container_id']
    readonly_fields = ['updated_at']

    def status_badge(self, obj):
        color = '#28a745' if obj.account_status == AccountStatus.AVAILABLE else '#ffc107'
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 10px; border-radius: 3px;">{}</span>',
            color,
            obj.get_account_status_display()
        )
    status_badge.short_description = 'Account'


@admin.register(SyncEvent)
class SyncEventAdmin(admin.ModelAdmin):
    list_display = ['created_at', 'user', 'kind', 'message']
    list_filter = ['kind']
    search_fields = ['user__email', 'message']
    date_hierarchy = 'created_at'
