import pytest
from django.db import OperationalError
from django.urls import reverse

from counter.models import Counter
from counter.store import CounterStore


pytestmark = pytest.mark.django_db


def test_get_counter_endpoint_bootstraps(api_client):
    response = api_client.get(reverse("get-counter"))

    assert response.status_code == 200
    assert set(response.data) == {"id", "value", "updated_at"}
    assert response.data["value"] == 0
    assert Counter.objects.count() == 1


def test_get_counter_endpoint_returns_same_row(api_client):
    first = api_client.get(reverse("get-counter")).json()
    second = api_client.get(reverse("get-counter")).json()

    assert first == second


def test_update_counter_endpoint(api_client):
    url = reverse("update-counter")

    response = api_client.post(url, {"operation": "increment"}, format="json")
    assert response.status_code == 200
    assert response.data["value"] == 1

    response = api_client.post(url, {"operation": "decrement"}, format="json")
    assert response.status_code == 200
    assert response.data["value"] == 0

    assert api_client.get(reverse("get-counter")).data["value"] == 0


def test_update_counter_endpoint_returns_persisted_row(api_client, seed_counters):
    existing, = seed_counters(41)

    response = api_client.post(reverse("update-counter"), {"operation": "increment"}, format="json")

    assert response.data["id"] == existing.id
    assert response.data["value"] == 42
    assert Counter.objects.get(pk=existing.id).value == 42


@pytest.mark.parametrize("payload", [{"operation": "reset"}, {"operation": None}, {}])
def test_update_counter_endpoint_rejects_bad_operation(api_client, payload):
    response = api_client.post(reverse("update-counter"), payload, format="json")

    assert response.status_code == 400
    assert "operation" in response.data
    assert Counter.objects.count() == 0


def test_store_failure_maps_to_503(api_client, monkeypatch):
    def broken_queryset(self):
        raise OperationalError("connection refused")

    monkeypatch.setattr(CounterStore, "_queryset", broken_queryset)

    response = api_client.get(reverse("get-counter"))
    assert response.status_code == 503
    assert response.data["detail"] == "Counter store is unavailable."

    response = api_client.post(reverse("update-counter"), {"operation": "increment"}, format="json")
    assert response.status_code == 503


def test_update_counter_rejects_get(api_client):
    response = api_client.get(reverse("update-counter"))

    assert response.status_code == 405


def test_health_check(api_client):
    response = api_client.get(reverse("healthz"))

    assert response.status_code == 200
    assert response.data["status"] == "ok"
    assert "timestamp" in response.data
    assert Counter.objects.count() == 0
