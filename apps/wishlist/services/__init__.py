"""
Wishlist services - Business logic layer.

This package contains all business operations for the wishlist app:
- Wishlist CRUD and search
- Conversion of a wishlist item into a collection bottle
"""

from .wishlist_management import (
    create_item,
    get_item,
    update_item,
    delete_item,
    search_items,
    convert_to_bottle,
)

from .exceptions import (
    WishlistServiceError,
    WishlistItemNotFoundError,
    WishlistSaveError,
)

__all__ = [
    'create_item',
    'get_item',
    'update_item',
    'delete_item',
    'search_items',
    'convert_to_bottle',
    'WishlistServiceError',
    'WishlistItemNotFoundError',
    'WishlistSaveError',
]
