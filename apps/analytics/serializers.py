"""
Serializers for analytics app.

Input Serializers:
    StatisticsQuerySerializer - Validates period and bucket count

Response Serializers:
    StatisticsResponseSerializer - Full collection statistics
"""

from rest_framework import serializers

from .statistics import PERIOD_MONTH, PERIOD_YEAR

PERIOD_CHOICES = {
    'monthly': PERIOD_MONTH,
    'yearly': PERIOD_YEAR,
}


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class StatisticsQuerySerializer(serializers.Serializer):
    """
    Validate statistics query parameters.

    Query Parameters:
        period (str): 'monthly' (last 6 months) or 'yearly' (last 5 years)
        count (int): Override the number of consumption buckets
    """

    period = serializers.ChoiceField(
        choices=list(PERIOD_CHOICES),
        default='monthly',
        help_text="Consumption period: 'monthly' or 'yearly'"
    )
    count = serializers.IntegerField(
        required=False,
        min_value=1,
        max_value=60,
        help_text='Number of periods to include'
    )

    def validate_period(self, value):
        """Translate the public name into the aggregator's period."""
        return PERIOD_CHOICES[value]


# =============================================================================
# Response Serializers (API Documentation)
# =============================================================================

class TypeCountSerializer(serializers.Serializer):
    type = serializers.CharField()
    count = serializers.IntegerField()


class ConsumptionPointSerializer(serializers.Serializer):
    label = serializers.CharField()
    volume = serializers.IntegerField()


class TrendSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    average = serializers.IntegerField()


class CostPerformanceSerializer(serializers.Serializer):
    bottle_id = serializers.UUIDField()
    name = serializers.CharField()
    price_per_ml = serializers.DecimalField(max_digits=12, decimal_places=4)


class StatisticsResponseSerializer(serializers.Serializer):
    """Response serializer for collection statistics."""
    total_bottles = serializers.IntegerField()
    opened_bottles = serializers.IntegerField()
    unopened_bottles = serializers.IntegerField()
    opened_percentage = serializers.FloatField()
    total_investment = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_remaining_volume = serializers.IntegerField()
    average_abv = serializers.FloatField()
    average_remaining_percentage = serializers.FloatField()
    type_distribution = TypeCountSerializer(many=True)
    period = serializers.CharField()
    consumption = ConsumptionPointSerializer(many=True)
    trend = TrendSerializer()
    cost_performance = CostPerformanceSerializer(many=True)
    has_bottles = serializers.BooleanField()
    has_consumption_data = serializers.BooleanField()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
