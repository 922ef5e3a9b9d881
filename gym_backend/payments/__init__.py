"""
Module 'payments' (feature-first): point d'entrée public.
Réunit panier -> requête de paiement, passerelles, client Stripe, repository BD et services.
"""

from .cart import return_urls, build_checkout_request, to_unit_amount, to_line_items, make_metadata
from .models import CheckoutItem, CheckoutRequest, CheckoutSuccess, CheckoutFailure, parse_checkout_response
from .stripe_client import require_stripe, create_session, parse_event
from .repository import insert_order, insert_order_items, delete_order, find_order_id_by_session, complete_order
from .gateway import PaymentGateway, StripeCheckoutGateway, HttpCheckoutGateway, get_gateway
from .service import CheckoutCoordinator, PaymentStatus, handle_payment_return, handle_webhook_event

__all__ = [
    # cart
    "return_urls",
    "build_checkout_request",
    "to_unit_amount",
    "to_line_items",
    "make_metadata",
    # models
    "CheckoutItem",
    "CheckoutRequest",
    "CheckoutSuccess",
    "CheckoutFailure",
    "parse_checkout_response",
    # stripe
    "require_stripe",
    "create_session",
    "parse_event",
    # repository
    "insert_order",
    "insert_order_items",
    "delete_order",
    "find_order_id_by_session",
    "complete_order",
    # gateways
    "PaymentGateway",
    "StripeCheckoutGateway",
    "HttpCheckoutGateway",
    "get_gateway",
    # services
    "CheckoutCoordinator",
    "PaymentStatus",
    "handle_payment_return",
    "handle_webhook_event",
]
