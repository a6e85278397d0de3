import logging

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.notifications.services import request_reschedule
from .serializers import (
    BottleSerializer,
    BottleListSerializer,
    DrinkingLogSerializer,
    ConsumeSerializer,
    RemainingVolumeSerializer,
)
from .services import (
    create_bottle,
    get_bottle,
    update_bottle,
    delete_bottle,
    search_bottles,
    pick_random_bottle,
    get_bottle_logs,
    record_consumption,
    set_remaining_volume,
    consume_standard_pour,
    BottleNotFoundError,
    InvalidVolumeError,
    SaveFailedError,
)

logger = logging.getLogger(__name__)


class BottlePagination(PageNumberPagination):
    """Custom pagination for bottles."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class BottleViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the current user's bottles.

    list: Collection, most recently updated first (optional ?search=)
    create: Add a bottle
    retrieve: Get a bottle
    update / partial_update: Manual edit (never logs consumption)
    destroy: Delete a bottle and its logs

    Ledger actions:
    consume: Log a pour of any volume
    pour: Log a standard 30 ml pour
    remaining: Set the remaining volume, logging any decrease
    logs: Drinking history of a bottle
    random: Pick a random bottle
    """

    serializer_class = BottleSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = BottlePagination
    lookup_value_regex = '[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'

    def get_queryset(self):
        return search_bottles(
            owner=self.request.user,
            search=self.request.query_params.get('search'),
        )

    def get_serializer_class(self):
        if self.action == 'list':
            return BottleListSerializer
        return BottleSerializer

    def _get_bottle_or_404(self, pk):
        try:
            return get_bottle(bottle_id=pk, owner=self.request.user), None
        except BottleNotFoundError as e:
            return None, Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    @extend_schema(
        parameters=[
            OpenApiParameter('search', OpenApiTypes.STR, description='Match name or distillery'),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    def create(self, request, *args, **kwargs):
        """Add a bottle to the collection."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            bottle = create_bottle(owner=request.user, **serializer.validated_data)
        except SaveFailedError as e:
            return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        request_reschedule(request.user)

        return Response(
            BottleSerializer(bottle).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        """Manual edit of a bottle."""
        partial = kwargs.pop('partial', False)
        bottle, error = self._get_bottle_or_404(kwargs.get('pk'))
        if error:
            return error

        serializer = self.get_serializer(bottle, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            bottle = update_bottle(
                bottle_id=bottle.id,
                owner=request.user,
                data=serializer.validated_data
            )
        except BottleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except SaveFailedError as e:
            return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        request_reschedule(request.user)

        return Response(BottleSerializer(bottle).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a bottle, its drinking logs and its reminders."""
        try:
            delete_bottle(bottle_id=kwargs.get('pk'), owner=request.user)
        except BottleNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except SaveFailedError as e:
            return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        request_reschedule(request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _ledger_response(self, bottle, log, response_status=status.HTTP_200_OK):
        request_reschedule(self.request.user)
        return Response(
            {
                'bottle': BottleSerializer(bottle).data,
                'log': DrinkingLogSerializer(log).data if log is not None else None,
            },
            status=response_status
        )

    @extend_schema(request=ConsumeSerializer, responses={201: DrinkingLogSerializer})
    @action(detail=True, methods=['post'])
    def consume(self, request, pk=None):
        """Log a pour of the given volume."""
        bottle, error = self._get_bottle_or_404(pk)
        if error:
            return error

        serializer = ConsumeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        kwargs = {'bottle': bottle, 'volume_ml': serializer.validated_data['volume']}
        if serializer.validated_data.get('notes'):
            kwargs['notes'] = serializer.validated_data['notes']

        try:
            log = record_consumption(**kwargs)
        except InvalidVolumeError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except SaveFailedError as e:
            return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        return self._ledger_response(bottle, log, status.HTTP_201_CREATED)

    @extend_schema(request=None, responses={201: DrinkingLogSerializer})
    @action(detail=True, methods=['post'])
    def pour(self, request, pk=None):
        """Log one standard pour."""
        bottle, error = self._get_bottle_or_404(pk)
        if error:
            return error

        try:
            log = consume_standard_pour(bottle=bottle)
        except SaveFailedError as e:
            return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        return self._ledger_response(bottle, log, status.HTTP_201_CREATED)

    @extend_schema(request=RemainingVolumeSerializer, responses={200: BottleSerializer})
    @action(detail=True, methods=['post'])
    def remaining(self, request, pk=None):
        """Set the remaining volume directly."""
        bottle, error = self._get_bottle_or_404(pk)
        if error:
            return error

        serializer = RemainingVolumeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            log = set_remaining_volume(
                bottle=bottle,
                new_remaining_ml=serializer.validated_data['remaining_volume']
            )
        except SaveFailedError as e:
            return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        return self._ledger_response(bottle, log)

    @extend_schema(responses={200: DrinkingLogSerializer(many=True)})
    @action(detail=True, methods=['get'])
    def logs(self, request, pk=None):
        """Drinking history of a bottle, newest first."""
        bottle, error = self._get_bottle_or_404(pk)
        if error:
            return error

        logs = get_bottle_logs(bottle=bottle)
        return Response(DrinkingLogSerializer(logs, many=True).data)

    @extend_schema(responses={200: BottleSerializer})
    @action(detail=False, methods=['get'])
    def random(self, request):
        """Pick a random bottle from the collection."""
        bottle = pick_random_bottle(owner=request.user)
        if bottle is None:
            return Response(
                {'error': 'Collection is empty'},
                status=status.HTTP_404_NOT_FOUND
            )
        return Response(BottleSerializer(bottle).data)
