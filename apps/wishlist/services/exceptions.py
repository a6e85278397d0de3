"""Custom exceptions for wishlist services."""


class WishlistServiceError(Exception):
    """Base exception for wishlist services."""
    pass


class WishlistItemNotFoundError(WishlistServiceError):
    """Raised when wishlist item doesn't exist or belongs to another user."""
    pass


class WishlistSaveError(WishlistServiceError):
    """Raised when the database rejects a wishlist write."""
    pass
