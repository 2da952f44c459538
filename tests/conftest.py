import pytest
from rest_framework.test import APIClient

from counter.models import Counter
from counter.store import CounterStore


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def store():
    return CounterStore()


@pytest.fixture
def seed_counters(db):
    """Insert counter rows in the given order and return them."""
    def _seed(*values, **fields):
        return [Counter.objects.create(value=value, **fields) for value in values]
    return _seed
