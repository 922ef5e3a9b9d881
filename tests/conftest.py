import os

# Avant l'import de l'app: pas de Redis pendant les tests
os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")

import pytest
from typing import Any, Dict, Generator, List
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from gym_backend.app import app as fastapi_app
from gym_backend.payments.gateway import get_gateway
from gym_backend.payments.models import CheckoutRequest, CheckoutResult, CheckoutSuccess

PRODUCTS: Dict[int, Dict[str, Any]] = {
    1: {"id": 1, "name": "Whey Protein", "price": 29.99, "stock_quantity": 10, "active": True,
        "image_url": "/img/whey.jpg", "description": "2kg"},
    2: {"id": 2, "name": "Shaker Bottle", "price": 9.5, "stock_quantity": 0, "active": True,
        "image_url": "/img/shaker.jpg", "description": None},
}

CLASSES: Dict[int, Dict[str, Any]] = {
    1: {"id": 1, "name": "Morning Yoga", "trainer": "Ana", "available_slots": 5, "max_slots": 20, "active": True},
    2: {"id": 2, "name": "Spin Class", "trainer": "Erion", "available_slots": 0, "max_slots": 15, "active": True},
}

VALID_CONTACT = {
    "customerName": "Arben Hoxha",
    "customerEmail": "arben@gmail.com",
    "customerPhone": "+355 69 123 4567",
}

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)


class FakeGateway:
    """Passerelle de paiement enregistrant chaque requête reçue."""

    def __init__(self, result: CheckoutResult = None):
        self.result = result or CheckoutSuccess(url="https://checkout.example.test/cs_123", session_id="cs_123")
        self.requests: List[CheckoutRequest] = []

    def create_session(self, request: CheckoutRequest) -> CheckoutResult:
        self.requests.append(request)
        return self.result


@pytest.fixture(scope="session")
def app():
    return fastapi_app

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

@pytest.fixture()
def fake_gateway(app):
    gateway = FakeGateway()
    app.dependency_overrides[get_gateway] = lambda: gateway
    yield gateway
    app.dependency_overrides.pop(get_gateway, None)

@pytest.fixture()
def sent_emails(monkeypatch):
    """Remplace l'envoi Resend: chaque email est capturé au lieu d'être envoyé."""
    sent: List[Dict[str, Any]] = []

    def _fake_send_email(subject, html, *, to=None):
        sent.append({"subject": subject, "html": html, "to": to})
        return {"success": True, "email_id": f"email-{len(sent)}"}

    monkeypatch.setattr("gym_backend.notifications.email.send_email", _fake_send_email)
    return sent

@pytest.fixture()
def orders(monkeypatch):
    """Table orders / order_items en mémoire."""
    store: Dict[str, List[Dict[str, Any]]] = {"orders": [], "items": []}

    def _insert_order(**kwargs):
        row = dict(kwargs, id=f"order-{len(store['orders']) + 1}")
        store["orders"].append(row)
        return row

    def _insert_order_items(order_id, items):
        store["items"].extend(dict(it, order_id=order_id) for it in items)
        return True

    def _delete_order(order_id):
        store["orders"] = [o for o in store["orders"] if o["id"] != order_id]
        return True

    monkeypatch.setattr("gym_backend.payments.repository.insert_order", _insert_order)
    monkeypatch.setattr("gym_backend.payments.repository.insert_order_items", _insert_order_items)
    monkeypatch.setattr("gym_backend.payments.repository.delete_order", _delete_order)
    return store

# Mock database dependency for all tests
@pytest.fixture(scope="function", autouse=True)
def mock_db_dependency(monkeypatch):
    """
    Aucun accès Supabase réel: clients remplacés par des MagicMock et
    repositories branchés sur les données ci-dessus.
    """
    monkeypatch.setattr("gym_backend.infra.supabase_client.get_supabase", lambda: MagicMock())
    monkeypatch.setattr("gym_backend.infra.supabase_client.get_service_supabase", lambda: MagicMock())

    monkeypatch.setattr("gym_backend.catalog.repository.list_products", lambda: list(PRODUCTS.values()))
    monkeypatch.setattr("gym_backend.catalog.repository.get_product", lambda product_id: PRODUCTS.get(product_id))
    monkeypatch.setattr("gym_backend.catalog.repository.list_classes", lambda: list(CLASSES.values()))
    monkeypatch.setattr("gym_backend.catalog.repository.get_class", lambda class_id: CLASSES.get(class_id))
    monkeypatch.setattr(
        "gym_backend.catalog.repository.class_names",
        lambda: {k: v["name"] for k, v in CLASSES.items()},
    )

    monkeypatch.setattr("gym_backend.bookings.repository.insert_booking", lambda **kwargs: dict(kwargs, id="b-1"))
    monkeypatch.setattr("gym_backend.bookings.repository.list_bookings", lambda class_id=None, limit=500: [])
    monkeypatch.setattr("gym_backend.bookings.repository.count_bookings", lambda: 0)

    monkeypatch.setattr("gym_backend.health.service.health_supabase_info", lambda: {"connect_ok": True})
