"""
Passerelles de création de session de paiement.

Toutes prennent une CheckoutRequest et renvoient un résultat typé
(CheckoutSuccess | CheckoutFailure), jamais une exception fournisseur brute.
- StripeCheckoutGateway: session Stripe créée par ce service + commande 'pending' en base
- HttpCheckoutGateway: délègue à une fonction de checkout externe (POST JSON)
"""
import logging
from typing import Protocol

import httpx
import stripe

from gym_backend.config import CHECKOUT_FUNCTION_URL, CHECKOUT_CURRENCY, SUPABASE_ANON
from . import cart as cart_logic
from . import repository
from . import stripe_client
from .models import CheckoutFailure, CheckoutRequest, CheckoutResult, CheckoutSuccess, parse_checkout_response

logger = logging.getLogger(__name__)


class PaymentGateway(Protocol):
    def create_session(self, request: CheckoutRequest) -> CheckoutResult:
        ...


class StripeCheckoutGateway:
    def __init__(self, currency: str = CHECKOUT_CURRENCY):
        self.currency = currency

    def create_session(self, request: CheckoutRequest) -> CheckoutResult:
        if not request.items:
            return CheckoutFailure(error="No items provided for checkout")
        if not request.customer_email:
            return CheckoutFailure(error="Customer email is required")

        line_items = cart_logic.to_line_items(request, self.currency)
        try:
            session = stripe_client.create_session(
                line_items=line_items,
                success_url=request.success_url,
                cancel_url=request.cancel_url,
                customer_email=request.customer_email,
                metadata=cart_logic.make_metadata(request.customer_email),
            )
        except RuntimeError as e:
            logger.error("payments.gateway stripe not configured: %s", e)
            return CheckoutFailure(error=str(e))
        except stripe.StripeError as e:
            logger.exception("payments.gateway stripe error email=%s", request.customer_email)
            return CheckoutFailure(error=getattr(e, "user_message", None) or str(e))

        session_id = session.get("id")
        logger.info("payments.gateway session created id=%s items=%s", session_id, len(request.items))
        self._record_pending_order(request, session_id)
        return CheckoutSuccess(url=session.get("url"), session_id=session_id)

    def _record_pending_order(self, request: CheckoutRequest, session_id: str) -> None:
        # Non critique: la session de paiement existe déjà, un échec est seulement journalisé
        order = repository.insert_order(
            customer_email=request.customer_email,
            total_amount=request.total_amount,
            stripe_session_id=session_id,
            status="pending",
        )
        if not order:
            logger.warning("payments.gateway order not recorded session=%s", session_id)
            return
        repository.insert_order_items(
            str(order.get("id")),
            [{"product_id": i.product_id, "quantity": i.quantity, "price": i.unit_price} for i in request.items],
        )


class HttpCheckoutGateway:
    def __init__(self, url: str, api_key: str = SUPABASE_ANON, timeout: float = 15):
        self.url = url
        self.api_key = api_key
        self.timeout = timeout

    def create_session(self, request: CheckoutRequest) -> CheckoutResult:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
            headers["apikey"] = self.api_key
        try:
            resp = httpx.post(self.url, json=request.to_wire(), headers=headers, timeout=self.timeout)
        except httpx.HTTPError as e:
            logger.exception("payments.gateway checkout function unreachable url=%s", self.url)
            return CheckoutFailure(error=str(e))
        try:
            data = resp.json() if resp.content else {}
        except ValueError:
            data = {}
        result = parse_checkout_response(data)
        if resp.status_code >= 400 and isinstance(result, CheckoutSuccess):
            return CheckoutFailure(error=f"Checkout function returned HTTP {resp.status_code}")
        return result


def get_gateway() -> PaymentGateway:
    """Dépendance FastAPI: passerelle externe si CHECKOUT_FUNCTION_URL est défini, Stripe sinon."""
    if CHECKOUT_FUNCTION_URL:
        return HttpCheckoutGateway(CHECKOUT_FUNCTION_URL)
    return StripeCheckoutGateway()
