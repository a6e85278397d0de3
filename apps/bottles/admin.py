# ==========================================
# apps/bottles/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from apps.bottles.models import Bottle, DrinkingLog


class DrinkingLogInline(admin.TabularInline):
    """Inline admin for drinking logs."""
    model = DrinkingLog
    extra = 0
    fields = ['volume', 'date', 'notes']
    ordering = ['-date']


@admin.register(Bottle)
class BottleAdmin(admin.ModelAdmin):
    """Admin interface for bottles."""

    list_display = [
        'name',
        'distillery',
        'type',
        'owner',
        'fill_badge',
        'rating',
        'opened_date',
        'updated_at',
    ]
    list_filter = ['type', 'region', 'rating']
    search_fields = ['name', 'distillery', 'owner__email']
    readonly_fields = ['opened_date', 'created_at', 'updated_at']
    inlines = [DrinkingLogInline]
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('owner', 'name', 'distillery', 'region', 'type', 'abv')
        }),
        ('Volume', {
            'fields': ('volume', 'remaining_volume', 'opened_date')
        }),
        ('Purchase', {
            'fields': ('purchase_date', 'purchase_price', 'purchase_place')
        }),
        ('Tasting', {
            'fields': ('rating', 'notes')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def fill_badge(self, obj):
        percentage = obj.remaining_percentage
        if percentage <= 10:
            color = '#dc3545'
        elif percentage <= 50:
            color = '#ffc107'
        else:
            color = '#28a745'
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 10px; border-radius: 3px;">{}%</span>',
            color,
            int(percentage)
        )
    fill_badge.short_description = 'Remaining'


@admin.register(DrinkingLog)
class DrinkingLogAdmin(admin.ModelAdmin):
    list_display = ['bottle', 'volume', 'date', 'notes']
    search_fields = ['bottle__name', 'notes']
    date_hierarchy = 'date'
    raw_id_fields = ['bottle']
