import logging

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.bottles.serializers import BottleSerializer
from apps.bottles.services import SaveFailedError
from apps.notifications.services import request_reschedule
from .serializers import WishlistItemSerializer, ConvertToBottleSerializer
from .services import (
    create_item,
    update_item,
    delete_item,
    search_items,
    convert_to_bottle,
    WishlistItemNotFoundError,
    WishlistSaveError,
)

logger = logging.getLogger(__name__)


class WishlistItemViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the current user's wishlist.

    list: Wishlist by priority, then newest (optional ?search=)
    create / retrieve / update / partial_update / destroy
    convert: Turn an item into a collection bottle
    """

    serializer_class = WishlistItemSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = '[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'

    def get_queryset(self):
        return search_items(
            owner=self.request.user,
            search=self.request.query_params.get('search'),
        )

    @extend_schema(
        parameters=[
            OpenApiParameter('search', OpenApiTypes.STR, description='Match name or distillery'),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            item = create_item(owner=request.user, **serializer.validated_data)
        except WishlistSaveError as e:
            return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response(
            WishlistItemSerializer(item).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            item = update_item(
                item_id=kwargs.get('pk'),
                owner=request.user,
                data=serializer.validated_data
            )
        except WishlistItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except WishlistSaveError as e:
            return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response(WishlistItemSerializer(item).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_item(item_id=kwargs.get('pk'), owner=request.user)
        except WishlistItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except WishlistSaveError as e:
            return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=ConvertToBottleSerializer, responses={201: BottleSerializer})
    @action(detail=True, methods=['post'])
    def convert(self, request, pk=None):
        """Move the item into the collection as a new bottle."""
        serializer = ConvertToBottleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            bottle = convert_to_bottle(
                item_id=pk,
                owner=request.user,
                bottle_fields=serializer.validated_data
            )
        except WishlistItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except SaveFailedError as e:
            return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        request_reschedule(request.user)
        return Response(
            BottleSerializer(bottle).data,
            status=status.HTTP_201_CREATED
        )
