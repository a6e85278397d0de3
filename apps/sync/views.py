import logging

from rest_framework import status as http_status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    SyncStateSerializer,
    SyncEventSerializer,
    RecheckStatusSerializer,
    DiagnosticsSerializer,
)
from .services import (
    get_sync_state,
    update_account_status,
    initialize_schema as initialize_cloud_schema,
    get_events,
    clear_events,
    diagnostic_status,
    CloudAccountUnavailableError,
)

logger = logging.getLogger(__name__)


@extend_schema(
    responses={200: SyncStateSerializer},
    description="Get the cloud sync status of the current user.",
    tags=['sync'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def sync_status(request):
    return Response(SyncStateSerializer(get_sync_state(request.user)).data)


@extend_schema(
    request=RecheckStatusSerializer,
    responses={200: SyncStateSerializer},
    description="Record a freshly checked cloud account status.",
    tags=['sync'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def recheck_status(request):
    serializer = RecheckStatusSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    state = update_account_status(
        user=request.user,
        status=serializer.validated_data['status']
    )
    return Response(SyncStateSerializer(state).data)


@extend_schema(
    request=None,
    responses={200: SyncStateSerializer},
    description="Initialize the cloud schema. Requires an available cloud account.",
    tags=['sync'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def initialize_schema(request):
    try:
        state = initialize_cloud_schema(user=request.user)
    except CloudAccountUnavailableError as e:
        return Response({'error': str(e)}, status=http_status.HTTP_409_CONFLICT)

    return Response(SyncStateSerializer(state).data)


@extend_schema(
    responses={200: DiagnosticsSerializer},
    description="Sync diagnostics with collection counts and the latest events.",
    tags=['sync'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def diagnostics(request):
    return Response(DiagnosticsSerializer(diagnostic_status(user=request.user)).data)


@extend_schema(
    methods=['GET'],
    responses={200: SyncEventSerializer(many=True)},
    description="Sync event log, newest first.",
    tags=['sync'],
)
@extend_schema(
    methods=['DELETE'],
    responses={204: None},
    description="Clear the sync event log.",
    tags=['sync'],
)
@api_view(['GET', 'DELETE'])
@permission_classes([IsAuthenticated])
def events(request):
    if request.method == 'DELETE':
        clear_events(user=request.user)
        return Response(status=http_status.HTTP_204_NO_CONTENT)

    return Response(SyncEventSerializer(get_events(user=request.user), many=True).data)
