from decimal import Decimal

import pytest

from gym_backend.cart.store import CartItemIn, CartStore
from gym_backend.errors import CheckoutError, ValidationError
from gym_backend.payments.models import CheckoutFailure, CheckoutSuccess
from gym_backend.payments.service import CheckoutCoordinator
from tests.conftest import FakeGateway

BASE = "https://gym.example.test"


def _cart():
    cart = CartStore()
    cart.add_item(CartItemIn(product_id=1, name="Whey Protein", unit_price=Decimal("29.99")))
    cart.add_item(CartItemIn(product_id=1, name="Whey Protein", unit_price=Decimal("29.99")))
    cart.add_item(CartItemIn(product_id=2, name="Shaker", unit_price=Decimal("9.50")))
    return cart


@pytest.mark.parametrize("email,message", [
    ("", "email required"),
    ("   ", "email required"),
    ("not-an-email", "invalid email"),
    ("a b@gmail.com", "invalid email"),
])
def test_email_preconditions(email, message):
    gateway = FakeGateway()
    with pytest.raises(ValidationError) as exc:
        CheckoutCoordinator(gateway).checkout(_cart(), email, BASE)
    assert exc.value.message == message
    assert gateway.requests == []


def test_empty_cart_makes_no_gateway_call():
    gateway = FakeGateway()
    with pytest.raises(ValidationError) as exc:
        CheckoutCoordinator(gateway).checkout(CartStore(), "buyer@gmail.com", BASE)
    assert exc.value.message == "cart empty"
    assert exc.value.title == "Cart Empty"
    assert gateway.requests == []


def test_valid_checkout_sends_one_wire_request_and_keeps_cart():
    gateway = FakeGateway()
    cart = _cart()

    result = CheckoutCoordinator(gateway).checkout(cart, " buyer@gmail.com ", BASE)

    assert result.url == "https://checkout.example.test/cs_123"
    assert len(gateway.requests) == 1
    wire = gateway.requests[0].to_wire()
    assert wire == {
        "items": [
            {"id": 1, "name": "Whey Protein", "price": 29.99, "quantity": 2},
            {"id": 2, "name": "Shaker", "price": 9.5, "quantity": 1},
        ],
        "customerEmail": "buyer@gmail.com",
        "successUrl": f"{BASE}/?payment=success",
        "cancelUrl": f"{BASE}/?payment=cancelled",
    }
    assert cart.total_items == 3


def test_gateway_failure_raises_with_provider_message():
    gateway = FakeGateway(CheckoutFailure(error="Your card was declined"))
    cart = _cart()
    with pytest.raises(CheckoutError) as exc:
        CheckoutCoordinator(gateway).checkout(cart, "buyer@gmail.com", BASE)
    assert exc.value.message == "Your card was declined"
    assert exc.value.status_code == 502
    assert cart.total_items == 3


def test_gateway_failure_without_message_uses_generic_one():
    gateway = FakeGateway(CheckoutFailure(error=""))
    with pytest.raises(CheckoutError) as exc:
        CheckoutCoordinator(gateway).checkout(_cart(), "buyer@gmail.com", BASE)
    assert exc.value.message == "Failed to initialize payment. Please try again."


def test_success_without_url_is_an_error():
    gateway = FakeGateway(CheckoutSuccess(url=None, session_id="cs_1"))
    with pytest.raises(CheckoutError) as exc:
        CheckoutCoordinator(gateway).checkout(_cart(), "buyer@gmail.com", BASE)
    assert exc.value.message == "no checkout URL received"
