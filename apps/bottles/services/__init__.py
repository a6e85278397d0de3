"""
Bottles services - Business logic layer.

This package contains all business operations for the bottles app:
- Bottle CRUD, search and random pick
- Consumption ledger (pours, remaining-volume updates)
"""

from .bottle_management import (
    create_bottle,
    get_bottle,
    update_bottle,
    delete_bottle,
    search_bottles,
    pick_random_bottle,
    get_bottle_logs,
)

from .consumption import (
    STANDARD_POUR_ML,
    record_consumption,
    set_remaining_volume,
    consume_standard_pour,
)

from .exceptions import (
    BottlesServiceError,
    BottleNotFoundError,
    InvalidVolumeError,
    SaveFailedError,
)

__all__ = [
    # Bottle Management Services
    'create_bottle',
    'get_bottle',
    'update_bottle',
    'delete_bottle',
    'search_bottles',
    'pick_random_bottle',
    'get_bottle_logs',
    # Consumption Ledger
    'STANDARD_POUR_ML',
    'record_consumption',
    'set_remaining_volume',
    'consume_standard_pour',
    # Exceptions
    'BottlesServiceError',
    'BottleNotFoundError',
    'InvalidVolumeError',
    'SaveFailedError',
]
