from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.bottles.models import Bottle, DrinkingLog
from .statistics import CollectionStatistics
from .serializers import (
    StatisticsQuerySerializer,
    StatisticsResponseSerializer,
    ErrorSerializer,
)
from .exceptions import AnalyticsServiceError


@extend_schema(
    parameters=[
        OpenApiParameter('period', OpenApiTypes.STR, description="'monthly' or 'yearly'"),
        OpenApiParameter('count', OpenApiTypes.INT, description='Number of periods'),
    ],
    responses={
        200: StatisticsResponseSerializer,
        400: ErrorSerializer,
    },
    description="Get statistics of the current user's collection.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def collection_statistics(request):
    """Collection statistics - thin HTTP handler."""
    query_serializer = StatisticsQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    # Snapshot of the collection
    bottles = Bottle.objects.filter(owner=request.user)
    logs = DrinkingLog.objects.filter(bottle__owner=request.user)

    stats = CollectionStatistics().refresh(bottles, logs)

    try:
        data = stats.as_dict(params['period'], params.get('count'))
    except AnalyticsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(StatisticsResponseSerializer(data).data)
