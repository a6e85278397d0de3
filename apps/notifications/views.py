import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .backends import get_backend
from .serializers import (
    NotificationPreferencesSerializer,
    ScheduledReminderSerializer,
    RescheduleResponseSerializer,
)
from .services import (
    get_preferences,
    update_preferences,
    reschedule_for_user,
    request_reschedule,
)

logger = logging.getLogger(__name__)


@extend_schema(
    methods=['GET'],
    responses={200: NotificationPreferencesSerializer},
    description="Get reminder preferences of the current user.",
    tags=['notifications'],
)
@extend_schema(
    methods=['PATCH'],
    request=NotificationPreferencesSerializer,
    responses={200: NotificationPreferencesSerializer},
    description="Update reminder preferences. Pending reminders are rebuilt afterwards.",
    tags=['notifications'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def preferences(request):
    """Read or change reminder preferences."""
    current = get_preferences(user=request.user)

    if request.method == 'GET':
        return Response(NotificationPreferencesSerializer(current).data)

    serializer = NotificationPreferencesSerializer(current, data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)

    updated = update_preferences(user=request.user, data=serializer.validated_data)
    request_reschedule(request.user)

    return Response(NotificationPreferencesSerializer(updated).data)


@extend_schema(
    responses={200: ScheduledReminderSerializer(many=True)},
    description="List pending reminders of the current user, soonest first.",
    tags=['notifications'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def pending_reminders(request):
    reminders = get_backend().pending(request.user)
    return Response(ScheduledReminderSerializer(reminders, many=True).data)


@extend_schema(
    request=None,
    responses={200: RescheduleResponseSerializer},
    description="Rebuild all pending reminders now.",
    tags=['notifications'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def reschedule(request):
    """Synchronously rebuild reminders and return what is pending."""
    delivered = reschedule_for_user(request.user)
    pending = get_backend().pending(request.user)

    return Response(
        {
            'scheduled': len(delivered),
            'reminders': ScheduledReminderSerializer(pending, many=True).data,
        },
        status=status.HTTP_200_OK
    )
