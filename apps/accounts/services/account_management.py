"""Account management service - wiping a user's collection."""

import logging

from django.db import transaction, DatabaseError

from apps.bottles.models import Bottle
from apps.wishlist.models import WishlistItem
from apps.notifications.models import ScheduledReminder
from .exceptions import DataDeletionError

logger = logging.getLogger(__name__)


def delete_all_collection_data(*, user) -> dict:
    """
    Delete every bottle, drinking log, wishlist item and pending reminder
    owned by the user.

    The deletion runs in one transaction: either everything goes or nothing
    does. Drinking logs are removed by the bottle cascade.

    Args:
        user: Collection owner

    Returns:
        Dictionary with the number of deleted bottles and wishlist items

    Raises:
        DataDeletionError: If the database rejected the deletion
    """
    bottles = Bottle.objects.filter(owner=user)
    wishlist_items = WishlistItem.objects.filter(owner=user)

    bottle_count = bottles.count()
    wishlist_count = wishlist_items.count()

    if not bottle_count and not wishlist_count:
        logger.info("No collection data to delete for user %s", user.id)
        return {'bottles': 0, 'wishlist_items': 0}

    try:
        with transaction.atomic():
            bottles.delete()
            wishlist_items.delete()
            ScheduledReminder.objects.filter(user=user).delete()
    except DatabaseError as e:
        logger.exception("Failed to delete collection data for user %s", user.id)
        raise DataDeletionError(f"Failed to delete collection data: {e}")

    logger.info(
        "Deleted %d bottles and %d wishlist items for user %s",
        bottle_count, wishlist_count, user.id,
    )
    return {'bottles': bottle_count, 'wishlist_items': wishlist_count}
