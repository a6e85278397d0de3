from rest_framework import serializers
from .models import Bottle, DrinkingLog


class DrinkingLogSerializer(serializers.ModelSerializer):
    """Read-only view of a drinking log entry."""

    bottle_name = serializers.CharField(source='bottle.name', read_only=True)

    class Meta:
        model = DrinkingLog
        fields = [
            'id',
            'bottle',
            'bottle_name',
            'volume',
            'date',
            'notes',
            'created_at',
        ]
        read_only_fields = fields


class BottleSerializer(serializers.ModelSerializer):
    """Main serializer for bottles."""

    is_opened = serializers.BooleanField(read_only=True)
    remaining_percentage = serializers.FloatField(read_only=True)

    class Meta:
        model = Bottle
        fields = [
            'id',
            'name',
            'distillery',
            'region',
            'type',
            'abv',
            'volume',
            'remaining_volume',
            'remaining_percentage',
            'purchase_date',
            'purchase_price',
            'purchase_place',
            'opened_date',
            'is_opened',
            'rating',
            'notes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = [
            'id',
            'opened_date',
            'created_at',
            'updated_at',
        ]
        extra_kwargs = {
            'remaining_volume': {'required': False},
        }


class BottleListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for collection lists."""

    remaining_percentage = serializers.FloatField(read_only=True)

    class Meta:
        model = Bottle
        fields = [
            'id',
            'name',
            'distillery',
            'type',
            'volume',
            'remaining_volume',
            'remaining_percentage',
            'rating',
            'updated_at',
        ]


class ConsumeSerializer(serializers.Serializer):
    """Input for logging a pour."""

    volume = serializers.IntegerField(min_value=1)
    notes = serializers.CharField(required=False, allow_blank=True, max_length=1000)


class RemainingVolumeSerializer(serializers.Serializer):
    """Input for setting the remaining volume; out-of-range values are clamped."""

    remaining_volume = serializers.IntegerField()
