"""Bottle CRUD operations service."""

import logging
import random
from uuid import UUID
from typing import Optional, Dict, Any

from django.db import transaction, DatabaseError
from django.db.models import Q, QuerySet

from apps.bottles.models import Bottle, DrinkingLog
from apps.notifications.services import cancel_bottle_reminders
from .exceptions import BottleNotFoundError, SaveFailedError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = [
    'name', 'distillery', 'region', 'type', 'abv', 'volume',
    'remaining_volume', 'purchase_date', 'purchase_price',
    'purchase_place', 'rating', 'notes',
]


def create_bottle(*, owner, name: str, **fields) -> Bottle:
    """
    Add a bottle to the owner's collection.

    Remaining volume defaults to the full volume and is clamped into
    [0, volume]. A bottle added below full is recorded as opened now.

    Args:
        owner: Collection owner
        name: Bottle name
        **fields: Any of EDITABLE_FIELDS

    Returns:
        Created Bottle instance

    Raises:
        SaveFailedError: If the database rejected the insert
    """
    unknown = set(fields) - set(EDITABLE_FIELDS)
    if unknown:
        raise TypeError(f"Unexpected bottle fields: {', '.join(sorted(unknown))}")

    bottle = Bottle(owner=owner, name=name, **fields)
    remaining = fields.get('remaining_volume')
    bottle.remaining_volume = bottle.clamp_remaining(
        bottle.volume if remaining is None else remaining
    )
    bottle.mark_opened_if_started()

    try:
        with transaction.atomic():
            bottle.save()
    except DatabaseError as e:
        logger.exception("Failed to create bottle for user %s", owner.id)
        raise SaveFailedError(f"Save failed: {e}") from e

    logger.info("Created bottle %s for user %s", bottle.id, owner.id)
    return bottle


def get_bottle(*, bottle_id: UUID, owner) -> Bottle:
    """
    Retrieve one of the owner's bottles.

    Raises:
        BottleNotFoundError: If bottle doesn't exist or belongs to someone else
    """
    try:
        return Bottle.objects.get(id=bottle_id, owner=owner)
    except Bottle.DoesNotExist:
        raise BottleNotFoundError("Bottle not found")


def update_bottle(*, bottle_id: UUID, owner, data: Dict[str, Any]) -> Bottle:
    """
    Apply a manual edit to a bottle.

    Manual edits never create drinking logs; the remaining volume is only
    clamped into range (including after a volume change). Lowering a
    sealed bottle below full opens it.

    Args:
        bottle_id: Bottle UUID
        owner: Collection owner
        data: Fields to update

    Returns:
        Updated Bottle instance

    Raises:
        BottleNotFoundError: If bottle doesn't exist
        SaveFailedError: If the database rejected the update
    """
    try:
        with transaction.atomic():
            try:
                bottle = (
                    Bottle.objects
                    .select_for_update()
                    .get(id=bottle_id, owner=owner)
                )
            except Bottle.DoesNotExist:
                raise BottleNotFoundError("Bottle not found")

            for field in EDITABLE_FIELDS:
                if field in data:
                    setattr(bottle, field, data[field])

            bottle.remaining_volume = bottle.clamp_remaining(bottle.remaining_volume)
            bottle.mark_opened_if_started()
            bottle.save()
    except DatabaseError as e:
        logger.exception("Failed to update bottle %s", bottle_id)
        raise SaveFailedError(f"Save failed: {e}") from e

    return bottle


def delete_bottle(*, bottle_id: UUID, owner) -> None:
    """
    Delete a bottle with its drinking logs and pending reminders.

    Raises:
        BottleNotFoundError: If bottle doesn't exist
        SaveFailedError: If the database rejected the deletion
    """
    bottle = get_bottle(bottle_id=bottle_id, owner=owner)

    try:
        with transaction.atomic():
            cancel_bottle_reminders(user=owner, bottle_id=bottle.id)
            bottle.delete()
    except DatabaseError as e:
        logger.exception("Failed to delete bottle %s", bottle_id)
        raise SaveFailedError(f"Delete failed: {e}") from e

    logger.info("Deleted bottle %s for user %s", bottle_id, owner.id)


def search_bottles(*, owner, search: Optional[str] = None) -> QuerySet[Bottle]:
    """
    List the owner's bottles, optionally filtered by name or distillery.

    An empty search returns the whole collection. Matching is
    case-insensitive substring search.
    """
    queryset = Bottle.objects.filter(owner=owner)

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(distillery__icontains=search)
        )

    return queryset.order_by('-updated_at')


def pick_random_bottle(*, owner) -> Optional[Bottle]:
    """Pick a random bottle from the collection, or None when it's empty."""
    bottles = list(Bottle.objects.filter(owner=owner))
    if not bottles:
        return None
    return random.choice(bottles)


def get_bottle_logs(*, bottle: Bottle) -> QuerySet[DrinkingLog]:
    """Drinking logs of a bottle, newest first."""
    return bottle.drinking_logs.order_by('-date', '-created_at')
