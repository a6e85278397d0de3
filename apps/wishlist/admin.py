from django.contrib import admin
from django.utils.html import format_html
from apps.wishlist.models import WishlistItem, PriorityLevel


@admin.register(WishlistItem)
class WishlistItemAdmin(admin.ModelAdmin):
    list_display = ['name', 'distillery', 'owner', 'priority_badge', 'target_price', 'budget', 'created_at']
    list_filter = ['priority']
    search_fields = ['name', 'distillery', 'owner__email']
    readonly_fields = ['created_at']

    def priority_badge(self, obj):
        colors = {
            PriorityLevel.LOW: '#6c757d',
            PriorityLevel.MEDIUM: '#17a2b8',
            PriorityLevel.HIGH: '#dc3545',
        }
        level = obj.priority_level
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 10px; border-radius: 3px;">{} ({})</span>',
            colors[level],
            level.label,
            obj.priority
        )
    priority_badge.short_description = 'Priority'
