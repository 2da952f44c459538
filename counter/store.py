# counter/store.py
from contextlib import contextmanager
from functools import wraps
import logging

from django.db import DatabaseError, transaction
from django.db.models import F

from .exceptions import StoreUnavailable
from .models import Counter

logger = logging.getLogger(__name__)


def _translate_errors(method):
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except DatabaseError as e:
            logger.error(f"Counter store error in {method.__name__}: {e}")
            raise StoreUnavailable() from e
    return wrapper


class CounterStore:
    """
    Persistence layer for counter rows.

    Rows are always read in insertion order, so "first" means the row with
    the smallest id. Every database failure leaves this class as
    StoreUnavailable.
    """

    def __init__(self, using='default'):
        self.using = using

    def _queryset(self):
        return Counter.objects.using(self.using).order_by('id')

    @contextmanager
    def atomic(self):
        try:
            with transaction.atomic(using=self.using):
                yield self
        except DatabaseError as e:
            logger.error(f"Counter store transaction failed: {e}")
            raise StoreUnavailable() from e

    @_translate_errors
    def list_first(self, n=1):
        return list(self._queryset()[:n])

    @_translate_errors
    def first(self, lock=False):
        queryset = self._queryset()
        if lock:
            queryset = queryset.select_for_update()
        return queryset.first()

    @_translate_errors
    def insert(self, value, updated_at):
        return Counter.objects.using(self.using).create(value=value, updated_at=updated_at)

    @_translate_errors
    def apply_delta(self, counter_id, delta, updated_at):
        """
        Add ``delta`` to the stored value in a single UPDATE statement and
        return the row as it is now stored.
        """
        updated = self._queryset().filter(pk=counter_id).update(
            value=F('value') + delta,
            updated_at=updated_at,
        )
        if not updated:
            raise StoreUnavailable(f"Counter {counter_id} no longer exists.")
        return self._queryset().get(pk=counter_id)
