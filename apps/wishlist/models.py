# ==========================================
# apps/wishlist/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid


class PriorityLevel(models.TextChoices):
    LOW = 'low', 'Low'
    MEDIUM = 'medium', 'Medium'
    HIGH = 'high', 'High'


class WishlistItem(models.Model):
    """A bottle the user wants to buy."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='wishlist_items')
    name = models.CharField(max_length=200)
    distillery = models.CharField(max_length=200, blank=True)
    priority = models.PositiveSmallIntegerField(
        default=3,
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    target_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    budget = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'wishlist_items'
        indexes = [
            models.Index(fields=['owner', 'priority'], name='wishlist_owner_priority_idx'),
        ]
        ordering = ['-priority', '-created_at']

    def __str__(self):
        return f"{self.name} (priority {self.priority})"

    @property
    def priority_level(self):
        if self.priority <= 2:
            return PriorityLevel.LOW
        if self.priority == 3:
            return PriorityLevel.MEDIUM
        return PriorityLevel.HIGH

    @property
    def suggested_price(self):
        """Budget if set, otherwise the target price."""
        return self.budget if self.budget is not None else self.target_price
