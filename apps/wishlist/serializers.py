from rest_framework import serializers
from apps.bottles.models import Bottle
from .models import WishlistItem


class WishlistItemSerializer(serializers.ModelSerializer):
    """Main serializer for wishlist items."""

    priority_level = serializers.CharField(read_only=True)

    class Meta:
        model = WishlistItem
        fields = [
            'id',
            'name',
            'distillery',
            'priority',
            'priority_level',
            'target_price',
            'budget',
            'notes',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']


class ConvertToBottleSerializer(serializers.ModelSerializer):
    """Bottle details supplied when a wishlist item is bought."""

    class Meta:
        model = Bottle
        fields = [
            'name',
            'distillery',
            'region',
            'type',
            'abv',
            'volume',
            'purchase_date',
            'purchase_price',
            'purchase_place',
            'notes',
        ]
        extra_kwargs = {field: {'required': False} for field in fields}
