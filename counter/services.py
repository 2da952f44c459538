# counter/services.py
from datetime import timedelta
import logging

from django.utils import timezone

from .exceptions import InvalidOperation, StoreUnavailable
from .models import Operation
from .store import CounterStore

logger = logging.getLogger(__name__)

DELTAS = {
    Operation.INCREMENT.value: 1,
    Operation.DECREMENT.value: -1,
}


def operation_delta(operation):
    if isinstance(operation, str) and str(operation) in DELTAS:
        return DELTAS[str(operation)]
    logger.warning(f"Rejected counter operation: {operation!r}")
    raise InvalidOperation()


def _next_timestamp(counter):
    # updated_at must move forward even if the clock has not
    return max(timezone.now(), counter.updated_at + timedelta(microseconds=1))


def get_counter(store=None):
    """Return the first counter row, creating it with value 0 on an empty store."""
    store = store or CounterStore()
    try:
        with store.atomic():
            counter = store.first()
            if counter is None:
                counter = store.insert(value=0, updated_at=timezone.now())
                logger.info(f"✅ Created counter {counter.id} with value 0")
    except StoreUnavailable:
        logger.error("Counter fetch failed", exc_info=True)
        raise
    return counter


def update_counter(operation, store=None):
    """
    Apply +1 or -1 to the first counter row and return the stored result.

    On an empty store the row is created with the delta as its value. The
    delta itself is always applied by the database, never computed from a
    value held in memory.
    """
    delta = operation_delta(operation)
    store = store or CounterStore()
    try:
        with store.atomic():
            counter = store.first(lock=True)
            if counter is None:
                counter = store.insert(value=delta, updated_at=timezone.now())
                logger.info(f"✅ Created counter {counter.id} with value {delta}")
                return counter

            counter = store.apply_delta(counter.id, delta, updated_at=_next_timestamp(counter))
            logger.debug(f"Counter {counter.id} {operation} -> {counter.value}")
            return counter
    except StoreUnavailable:
        logger.error(f"Counter update failed (operation={operation})", exc_info=True)
        raise
