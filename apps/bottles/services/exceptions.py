"""Domain exceptions for bottles app."""


class BottlesServiceError(Exception):
    """Base exception for all bottles service errors."""
    pass


class BottleNotFoundError(BottlesServiceError):
    """Bottle does not exist or belongs to another user."""
    pass


class InvalidVolumeError(BottlesServiceError):
    """Consumed volume must be a positive number of millilitres."""
    pass


class SaveFailedError(BottlesServiceError):
    """The database rejected a write; nothing was persisted."""
    pass
