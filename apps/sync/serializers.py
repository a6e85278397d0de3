from rest_framework import serializers
from .models import SyncState, SyncEvent, AccountStatus


class SyncEventSerializer(serializers.ModelSerializer):

    class Meta:
        model = SyncEvent
        fields = ['id', 'kind', 'message', 'created_at']
        read_only_fields = fields


class SyncStateSerializer(serializers.ModelSerializer):
    """Sync status of the current user."""

    cloud_sync_available = serializers.SerializerMethodField()

    class Meta:
        model = SyncState
        fields = [
            'container_id',
            'account_status',
            'cloud_sync_available',
            'schema_initialized',
            'schema_initialized_at',
            'last_checked_at',
        ]
        read_only_fields = fields

    def get_cloud_sync_available(self, obj) -> bool:
        return obj.account_status == AccountStatus.AVAILABLE


class RecheckStatusSerializer(serializers.Serializer):
    """Account status reported by the client."""

    status = serializers.ChoiceField(choices=AccountStatus.choices)


class DiagnosticCountsSerializer(serializers.Serializer):
    bottles = serializers.IntegerField()
    drinking_logs = serializers.IntegerField()
    wishlist_items = serializers.IntegerField()


class DiagnosticsSerializer(serializers.Serializer):
    container_id = serializers.CharField()
    account_status = serializers.CharField()
    cloud_sync_available = serializers.BooleanField()
    schema_initialized = serializers.BooleanField()
    schema_initialized_at = serializers.DateTimeField(allow_null=True)
    last_checked_at = serializers.DateTimeField(allow_null=True)
    counts = DiagnosticCountsSerializer()
    recent_events = SyncEventSerializer(many=True)
