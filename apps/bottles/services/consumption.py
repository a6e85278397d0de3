"""
Consumption ledger - recording pours against bottles.

Every operation mutates the given Bottle instance and persists the bottle
together with any DrinkingLog it creates in a single transaction. A
DatabaseError during the save surfaces as SaveFailedError; the transaction
is rolled back and the in-memory bottle is restored to its previous values,
so callers never hold state that was not persisted.

Rescheduling reminders is the caller's job (see
apps.notifications.services.request_reschedule).
"""

import logging
from typing import Optional

from django.db import transaction, DatabaseError
from django.utils import timezone

from apps.bottles.models import Bottle, DrinkingLog
from .exceptions import InvalidVolumeError, SaveFailedError

logger = logging.getLogger(__name__)

STANDARD_POUR_ML = 30
STANDARD_POUR_NOTE = 'Standard pour'
DEFAULT_LOG_NOTE = 'Remaining volume update'

_LEDGER_FIELDS = ('remaining_volume', 'opened_date', 'updated_at')


def _snapshot(bottle: Bottle) -> dict:
    return {field: getattr(bottle, field) for field in _LEDGER_FIELDS}


def _restore(bottle: Bottle, snapshot: dict) -> None:
    for field, value in snapshot.items():
        setattr(bottle, field, value)


def _persist(bottle: Bottle, log: Optional[DrinkingLog], snapshot: dict) -> None:
    """Save the log (if any) and the bottle atomically, undoing in-memory changes on failure."""
    try:
        with transaction.atomic():
            if log is not None:
                log.save()
            bottle.save(update_fields=list(_LEDGER_FIELDS))
    except DatabaseError as e:
        _restore(bottle, snapshot)
        logger.exception("Failed to save consumption for bottle %s", bottle.id)
        raise SaveFailedError(f"Save failed: {e}") from e


def record_consumption(
    *,
    bottle: Bottle,
    volume_ml: int,
    notes: str = DEFAULT_LOG_NOTE
) -> DrinkingLog:
    """
    Record a pour and reduce the bottle's remaining volume.

    This operation:
    1. Sets the opened date if the bottle was still sealed
    2. Creates a DrinkingLog for the full poured volume
    3. Decrements remaining volume, never below zero
    4. Saves log and bottle together

    Args:
        bottle: Bottle being poured from
        volume_ml: Poured volume in millilitres (must be positive)
        notes: Free-text note stored on the log

    Returns:
        Created DrinkingLog instance

    Raises:
        InvalidVolumeError: If volume_ml is not positive
        SaveFailedError: If the database rejected the write
    """
    if volume_ml <= 0:
        raise InvalidVolumeError("Consumed volume must be greater than zero")

    snapshot = _snapshot(bottle)
    now = timezone.now()

    if bottle.opened_date is None:
        bottle.opened_date = now

    log = DrinkingLog(bottle=bottle, volume=volume_ml, notes=notes, date=now)
    bottle.remaining_volume = max(0, bottle.remaining_volume - volume_ml)

    _persist(bottle, log, snapshot)

    logger.info(
        "Recorded %d ml from bottle %s (remaining %d ml)",
        volume_ml, bottle.id, bottle.remaining_volume,
    )
    return log


def set_remaining_volume(
    *,
    bottle: Bottle,
    new_remaining_ml: int
) -> Optional[DrinkingLog]:
    """
    Set the remaining volume directly, logging any decrease as a pour.

    The new value is clamped into [0, bottle.volume]. Lowering the level
    creates one DrinkingLog for the difference. Raising it (a correction)
    creates no log. Any level below full opens a sealed bottle.

    Args:
        bottle: Bottle to update
        new_remaining_ml: Desired remaining volume in millilitres

    Returns:
        The created DrinkingLog, or None when nothing was consumed

    Raises:
        SaveFailedError: If the database rejected the write
    """
    snapshot = _snapshot(bottle)
    new_remaining = bottle.clamp_remaining(new_remaining_ml)
    consumed = bottle.remaining_volume - new_remaining

    now = timezone.now()
    log = None
    if consumed > 0:
        log = DrinkingLog(bottle=bottle, volume=consumed, notes=DEFAULT_LOG_NOTE, date=now)

    bottle.remaining_volume = new_remaining
    bottle.mark_opened_if_started(now)

    _persist(bottle, log, snapshot)

    if log is not None:
        logger.info("Bottle %s lowered by %d ml to %d ml", bottle.id, consumed, new_remaining)
    else:
        logger.info("Bottle %s set to %d ml without consumption", bottle.id, new_remaining)
    return log


def consume_standard_pour(*, bottle: Bottle) -> DrinkingLog:
    """Pour one standard 30 ml measure from the bottle."""
    return record_consumption(
        bottle=bottle,
        volume_ml=STANDARD_POUR_ML,
        notes=STANDARD_POUR_NOTE,
    )
