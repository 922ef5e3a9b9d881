from decimal import Decimal
from unittest.mock import MagicMock

import httpx
import pytest

from gym_backend.errors import NotificationDeliveryError
from gym_backend.notifications import email as notify


@pytest.fixture()
def resend(monkeypatch):
    monkeypatch.setattr(notify, "RESEND_API_KEY", "re_test")
    resp = MagicMock(status_code=200, content=b"{}", text="")
    resp.json.return_value = {"id": "email-1"}
    post = MagicMock(return_value=resp)
    monkeypatch.setattr(notify.httpx, "post", post)
    return post


def test_send_email_posts_to_resend(resend):
    result = notify.send_email("Hello", "<p>hi</p>", to=["owner@gmail.com"])
    assert result == {"success": True, "email_id": "email-1"}
    args, kwargs = resend.call_args
    assert args[0] == "https://api.resend.com/emails"
    assert kwargs["json"]["to"] == ["owner@gmail.com"]
    assert kwargs["headers"]["Authorization"] == "Bearer re_test"


def test_missing_key_and_provider_errors_raise(monkeypatch, resend):
    resend.return_value.status_code = 422
    with pytest.raises(NotificationDeliveryError):
        notify.send_email("s", "h")

    resend.side_effect = httpx.ConnectError("down")
    with pytest.raises(NotificationDeliveryError):
        notify.send_email("s", "h")

    monkeypatch.setattr(notify, "RESEND_API_KEY", "")
    with pytest.raises(NotificationDeliveryError):
        notify.send_email("s", "h")


def test_best_effort_swallows_delivery_errors(monkeypatch):
    monkeypatch.setattr(notify, "RESEND_API_KEY", "")
    assert notify.send_best_effort(
        notify.send_membership_notification,
        customer_name="Arben", customer_email="arben@gmail.com", customer_phone="+355691234567",
        plan_name="Premium", plan_price="49",
    ) is False


def test_shop_email_subject_and_body(resend):
    notify.send_shop_notification(
        customer_name="Arben <b>",
        customer_email="arben@gmail.com",
        customer_phone="+355691234567",
        items=[{"name": "Whey Protein", "quantity": 2, "price": Decimal("29.99"), "total": Decimal("59.98")}],
        total_amount=Decimal("59.98"),
        total_items=2,
    )
    payload = resend.call_args.kwargs["json"]
    assert payload["subject"] == "New Shop Purchase: 2 items - $59.98"
    assert "Whey Protein" in payload["html"]
    assert "Arben &lt;b&gt;" in payload["html"]
