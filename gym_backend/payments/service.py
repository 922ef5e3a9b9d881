"""
Cas d'usage 'payments': coordonne validation, panier, passerelle et retour de paiement.
"""
import logging
import re
from enum import Enum
from typing import Any, Dict, MutableMapping, Optional

from gym_backend.cart.store import CartStore
from gym_backend.errors import CheckoutError, ValidationError
from gym_backend.notifications.toasts import push_toast
from . import repository
from .cart import build_checkout_request
from .gateway import PaymentGateway
from .models import CheckoutFailure, CheckoutSuccess

logger = logging.getLogger(__name__)

_EMAIL_SHAPE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class PaymentStatus(str, Enum):
    SUCCESS = "success"
    CANCELLED = "cancelled"


class CheckoutCoordinator:
    """
    validate -> build request -> call provider -> handle response, strictement dans cet ordre.
    Le panier n'est jamais vidé ici: il l'est au retour ?payment=success.
    Pas de garde anti double-soumission (deux clics = deux sessions).
    """

    def __init__(self, gateway: PaymentGateway):
        self.gateway = gateway

    def checkout(self, cart: CartStore, customer_email: str, base_url: str) -> CheckoutSuccess:
        email = (customer_email or "").strip()
        if not email:
            raise ValidationError("email required", title="Email Required")
        if not _EMAIL_SHAPE.match(email):
            raise ValidationError("invalid email", title="Invalid Email")
        if cart.is_empty():
            raise ValidationError("cart empty", title="Cart Empty")

        request = build_checkout_request(cart, email, base_url)
        logger.info("payments.checkout start items=%s total=%s", len(request.items), request.total_amount)
        result = self.gateway.create_session(request)

        if isinstance(result, CheckoutFailure):
            raise CheckoutError(result.error or "Failed to initialize payment. Please try again.")
        if not result.url:
            raise CheckoutError("no checkout URL received")
        logger.info("payments.checkout redirect session=%s", result.session_id)
        return result


def parse_payment_marker(value: Optional[str]) -> Optional[PaymentStatus]:
    try:
        return PaymentStatus(value or "")
    except ValueError:
        return None


def handle_payment_return(cart: CartStore, session: MutableMapping[str, Any], marker: Optional[str]) -> Optional[PaymentStatus]:
    """
    Retour depuis la page de paiement:
    - success: vide le panier et met en file une seule notification de succès;
    - cancelled: panier intact ("pas d'inquiétude, vos articles sont conservés");
    - autre / absent: rien.
    """
    status = parse_payment_marker(marker)
    if status is PaymentStatus.SUCCESS:
        cart.clear_cart()
        push_toast(
            session,
            "Payment Successful!",
            "Thank you for your purchase. You will receive a confirmation email shortly.",
        )
    return status


def handle_webhook_event(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    checkout.session.completed: retrouve la commande par stripe_session_id et la complète.
    Les échecs de lecture/RPC sont journalisés; Stripe reçoit toujours {"received": True}.
    """
    if (event or {}).get("type") == "checkout.session.completed":
        obj = ((event or {}).get("data") or {}).get("object") or {}
        session_id = obj.get("id") or ""
        order_id = repository.find_order_id_by_session(session_id) if session_id else None
        if not order_id:
            logger.warning("payments.webhook no order for session=%s", session_id)
        elif repository.complete_order(order_id):
            logger.info("payments.webhook order completed id=%s session=%s", order_id, session_id)
    return {"received": True}
