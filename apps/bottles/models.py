# ==========================================
# apps/bottles/models.py
# ==========================================

from django.db import models
from django.utils import timezone
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid


class Bottle(models.Model):
    """A whiskey bottle in a user's collection."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='bottles')

    # Identity
    name = models.CharField(max_length=200)
    distillery = models.CharField(max_length=200, blank=True)
    region = models.CharField(max_length=100, blank=True)
    type = models.CharField(max_length=100, blank=True)
    abv = models.FloatField(default=0.0, validators=[MinValueValidator(0.0), MaxValueValidator(100.0)])

    # Volume tracking (ml)
    volume = models.PositiveIntegerField(default=700, validators=[MinValueValidator(1)])
    remaining_volume = models.PositiveIntegerField(default=700)

    # Purchase info
    purchase_date = models.DateField(null=True, blank=True)
    purchase_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    purchase_place = models.CharField(max_length=200, blank=True)

    # Set once the level first drops below full; never cleared
    opened_date = models.DateTimeField(null=True, blank=True)

    rating = models.PositiveSmallIntegerField(default=0, validators=[MaxValueValidator(5)])
    notes = models.TextField(blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'bottles'
        indexes = [
            models.Index(fields=['owner', 'updated_at'], name='bottles_owner_updated_idx'),
            models.Index(fields=['owner', 'type'], name='bottles_owner_type_idx'),
        ]
        ordering = ['-updated_at']

    def __str__(self):
        return f"{self.name} ({self.remaining_volume}/{self.volume} ml)"

    @property
    def is_opened(self):
        return self.opened_date is not None

    @property
    def remaining_percentage(self):
        """Remaining volume as a percentage of the full bottle."""
        if self.volume <= 0:
            return 0.0
        return self.remaining_volume * 100 / self.volume

    @property
    def searchable_text(self):
        return f"{self.name} {self.distillery}"

    def clamp_remaining(self, value):
        """Clamp a remaining-volume value into [0, volume]."""
        return max(0, min(int(value), self.volume))

    def mark_opened_if_started(self, when=None):
        """Stamp the opened date once the level is below full. Never moves an existing date."""
        if self.opened_date is None and self.remaining_volume < self.volume:
            self.opened_date = when or timezone.now()
        return self.is_opened


class DrinkingLog(models.Model):
    """Immutable record of a pour taken from a bottle."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    bottle = models.ForeignKey(Bottle, on_delete=models.CASCADE, related_name='drinking_logs')
    volume = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    date = models.DateTimeField(default=timezone.now)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'drinking_logs'
        indexes = [
            models.Index(fields=['bottle', 'date'], name='drinking_logs_bottle_date_idx'),
            models.Index(fields=['date'], name='drinking_logs_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.bottle.name} - {self.volume} ml"

