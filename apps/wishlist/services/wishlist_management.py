"""Wishlist CRUD and conversion into collection bottles."""

import logging
from uuid import UUID
from typing import Optional, Dict, Any

from django.db import transaction, DatabaseError
from django.db.models import Q, QuerySet

from apps.bottles.models import Bottle
from apps.bottles.services import create_bottle, SaveFailedError
from apps.wishlist.models import WishlistItem
from .exceptions import WishlistItemNotFoundError, WishlistSaveError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ['name', 'distillery', 'priority', 'target_price', 'budget', 'notes']


def create_item(*, owner, name: str, **fields) -> WishlistItem:
    """
    Add an item to the owner's wishlist.

    Raises:
        WishlistSaveError: If the database rejected the insert
    """
    unknown = set(fields) - set(EDITABLE_FIELDS)
    if unknown:
        raise TypeError(f"Unexpected wishlist fields: {', '.join(sorted(unknown))}")

    try:
        with transaction.atomic():
            item = WishlistItem.objects.create(owner=owner, name=name, **fields)
    except DatabaseError as e:
        logger.exception("Failed to add wishlist item for user %s", owner.id)
        raise WishlistSaveError(f"Save failed: {e}") from e

    logger.info("Added wishlist item %s for user %s", item.id, owner.id)
    return item


def get_item(*, item_id: UUID, owner) -> WishlistItem:
    """
    Retrieve one of the owner's wishlist items.

    Raises:
        WishlistItemNotFoundError: If item doesn't exist or belongs to someone else
    """
    try:
        return WishlistItem.objects.get(id=item_id, owner=owner)
    except WishlistItem.DoesNotExist:
        raise WishlistItemNotFoundError("Wishlist item not found")


def update_item(*, item_id: UUID, owner, data: Dict[str, Any]) -> WishlistItem:
    item = get_item(item_id=item_id, owner=owner)

    for field in EDITABLE_FIELDS:
        if field in data:
            setattr(item, field, data[field])

    try:
        with transaction.atomic():
            item.save()
    except DatabaseError as e:
        logger.exception("Failed to update wishlist item %s", item_id)
        raise WishlistSaveError(f"Save failed: {e}") from e
    return item


def delete_item(*, item_id: UUID, owner) -> None:
    item = get_item(item_id=item_id, owner=owner)
    try:
        with transaction.atomic():
            item.delete()
    except DatabaseError as e:
        logger.exception("Failed to delete wishlist item %s", item_id)
        raise WishlistSaveError(f"Delete failed: {e}") from e

    logger.info("Removed wishlist item %s for user %s", item_id, owner.id)


def search_items(*, owner, search: Optional[str] = None) -> QuerySet[WishlistItem]:
    """Wishlist ordered by priority (highest first), then newest first."""
    queryset = WishlistItem.objects.filter(owner=owner)

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(distillery__icontains=search)
        )

    return queryset.order_by('-priority', '-created_at')


def convert_to_bottle(*, item_id: UUID, owner, bottle_fields: Optional[Dict[str, Any]] = None) -> Bottle:
    """
    Move a wishlist item into the collection.

    Name and distillery are copied from the item and the purchase price
    defaults to the budget, falling back to the target price. Any of these
    can be overridden in bottle_fields. The bottle is created first and the
    item deleted afterwards, as two separate writes: if the delete fails the
    new bottle is kept.

    Args:
        item_id: Wishlist item UUID
        owner: Collection owner
        bottle_fields: Extra Bottle fields (volume, abv, type, ...)

    Returns:
        Created Bottle instance

    Raises:
        WishlistItemNotFoundError: If item doesn't exist
        SaveFailedError: If the bottle could not be created, or it was
            created but the wishlist item could not be removed
    """
    item = get_item(item_id=item_id, owner=owner)

    fields = {
        'name': item.name,
        'distillery': item.distillery,
        'purchase_price': item.suggested_price,
    }
    fields.update(bottle_fields or {})

    bottle = create_bottle(owner=owner, **fields)

    try:
        item.delete()
    except DatabaseError as e:
        logger.exception("Bottle %s created but wishlist item %s was not removed", bottle.id, item_id)
        raise SaveFailedError(f"Save failed: {e}") from e

    logger.info("Converted wishlist item %s into bottle %s", item_id, bottle.id)
    return bottle
