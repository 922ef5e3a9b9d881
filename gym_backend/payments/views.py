import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from gym_backend.cart.session import get_cart, save_cart
from gym_backend.cart.store import CartStore
from gym_backend.config import BASE_URL
from gym_backend.utils.rate_limit import optional_rate_limit
from gym_backend.payments import stripe_client
from gym_backend.payments.gateway import PaymentGateway, StripeCheckoutGateway, get_gateway
from gym_backend.payments.models import CheckoutFailure, CheckoutRequest
from gym_backend.payments.service import (
    CheckoutCoordinator,
    PaymentStatus,
    handle_payment_return,
    handle_webhook_event,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/payments", tags=["Payments API"])


class CheckoutIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer_email: str = Field(default="", alias="customerEmail")


def _app_origin(request: Request) -> str:
    # Les URLs de retour pointent vers le frontend qui a initié le paiement
    return (request.headers.get("origin") or BASE_URL).rstrip("/")

# module gym_backend.payments.views
@router.post("/checkout", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
def checkout(
    body: CheckoutIn,
    request: Request,
    cart: CartStore = Depends(get_cart),
    gateway: PaymentGateway = Depends(get_gateway),
):
    """
    Paie le panier de la session.
    - Entrée JSON: {"customerEmail": "..."}
    - Sortie: {"url", "session_id"}: le client redirige vers url
    - Erreurs: 400 (email manquant/invalide, panier vide), 502 (échec fournisseur, pas d'URL)
    - Le panier est conservé: il n'est vidé qu'au retour ?payment=success
    """
    result = CheckoutCoordinator(gateway).checkout(cart, body.customer_email, _app_origin(request))
    return {"url": result.url, "session_id": result.session_id}

@router.post("/create-checkout")
def create_checkout(body: CheckoutRequest):
    """
    Création directe d'une session à partir d'une requête wire
    {items:[{id,name,price,quantity}], customerEmail, successUrl, cancelUrl}.
    Réponses: {"sessionId", "url"}; {"error"} avec 400 (entrée) ou 500 (fournisseur).
    """
    result = StripeCheckoutGateway().create_session(body)
    if isinstance(result, CheckoutFailure):
        status_code = 400 if not body.items or not body.customer_email else 500
        return JSONResponse({"error": result.error}, status_code=status_code)
    return {"sessionId": result.session_id, "url": result.url}

@router.post("/webhook", include_in_schema=False)
async def webhook_stripe(request: Request):
    """
    Webhook Stripe: checkout.session.completed -> commande 'completed'.
    - 400 si signature absente/invalide (quand STRIPE_WEBHOOK_SECRET est défini) ou payload illisible
    """
    payload = await request.body()
    try:
        event = stripe_client.parse_event(payload, request.headers.get("stripe-signature"))
    except ValueError as e:
        logger.warning("payments.webhook rejected: %s", e)
        return JSONResponse({"error": str(e)}, status_code=400)
    logger.info("payments.webhook event type=%s", (event or {}).get("type"))
    return handle_webhook_event(event)

@router.get("/return")
def payment_return(request: Request, payment: str = "", cart: CartStore = Depends(get_cart)):
    """
    Marqueur de retour ?payment=success|cancelled.
    success: panier vidé + notification unique; cancelled: panier intact.
    """
    status = handle_payment_return(cart, request.session, payment)
    save_cart(request, cart)
    body = {"status": status.value if status else None, "cart": cart.summary()}
    if status is PaymentStatus.CANCELLED:
        body["title"] = "Payment Cancelled"
        body["description"] = "Your payment was cancelled. Don't worry, your items are still in your cart."
    return body
