"""
Adaptateur Stripe: centralise les appels et la configuration Stripe.
"""
import json
from typing import Any, Dict, List, Optional

import stripe

from gym_backend.config import STRIPE_SECRET_KEY, STRIPE_WEBHOOK_SECRET

# module gym_backend.payments.stripe_client
def require_stripe():
    """
    Prépare et retourne le module stripe prêt à l'emploi.
    - Lève RuntimeError si STRIPE_SECRET_KEY est absent (paiement non configuré).
    """
    if not STRIPE_SECRET_KEY:
        raise RuntimeError("Payment service not configured. Please contact support.")
    stripe.api_key = STRIPE_SECRET_KEY
    return stripe

def _as_dict(obj: Any) -> Dict[str, Any]:
    if obj is None:
        return {}
    if isinstance(obj, dict):
        return obj
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return dict(obj)

def create_session(
    *,
    line_items: List[Dict[str, Any]],
    success_url: str,
    cancel_url: str,
    customer_email: str,
    metadata: Dict[str, Any],
    mode: str = "payment",
) -> Dict[str, Any]:
    """
    Crée une session Stripe Checkout.
    Retour: dict session (ex: {"id": "cs_test_...", "url": "https://checkout.stripe.com/..."})
    """
    require_stripe()
    session = stripe.checkout.Session.create(
        customer_email=customer_email,
        line_items=line_items,
        mode=mode,
        success_url=success_url,
        cancel_url=cancel_url,
        metadata=metadata,
    )
    return _as_dict(session)

def parse_event(payload: bytes, sig_header: Optional[str]) -> Dict[str, Any]:
    """
    Parse un événement webhook.
    - Avec STRIPE_WEBHOOK_SECRET: signature vérifiée (stripe.Webhook.construct_event), ValueError sinon.
    - Sans secret (dev): JSON brut, non vérifié, mais en-tête stripe-signature toujours exigé.
    - ValueError si le payload n'est pas un objet JSON.
    """
    if not sig_header:
        raise ValueError("No signature")
    if STRIPE_WEBHOOK_SECRET:
        try:
            event = _as_dict(stripe.Webhook.construct_event(payload, sig_header, STRIPE_WEBHOOK_SECRET))
        except stripe.SignatureVerificationError as e:
            raise ValueError(f"Invalid signature: {e}") from e
    else:
        try:
            event = json.loads(payload.decode("utf-8") or "{}")
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValueError(f"Invalid payload: {e}") from e
    if not isinstance(event, dict):
        raise ValueError("Invalid payload: expected a JSON object")
    return event
