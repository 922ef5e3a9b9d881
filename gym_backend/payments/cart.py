"""
Logique panier -> paiement pure (pas de Stripe, pas de DB).
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

from gym_backend.cart.store import CartStore
from gym_backend.config import CHECKOUT_SUCCESS_PATH, CHECKOUT_CANCEL_PATH, CHECKOUT_CURRENCY
from .models import CheckoutItem, CheckoutRequest

# module gym_backend.payments.cart
def return_urls(base_url: str) -> Dict[str, str]:
    """URLs de retour vers l'application, porteuses du marqueur ?payment=..."""
    base = (base_url or "").rstrip("/")
    return {
        "success_url": f"{base}{CHECKOUT_SUCCESS_PATH}",
        "cancel_url": f"{base}{CHECKOUT_CANCEL_PATH}",
    }

def build_checkout_request(cart: CartStore, customer_email: str, base_url: str) -> CheckoutRequest:
    """
    Construit une CheckoutRequest neuve à partir des lignes du panier.
    - customer_email: déjà validé par l'appelant (espaces retirés)
    - base_url: origine de l'application (success/cancel pointent dessus)
    """
    items = [
        CheckoutItem(product_id=line.product_id, name=line.name, unit_price=line.unit_price, quantity=line.quantity)
        for line in cart.items()
    ]
    return CheckoutRequest(items=items, customer_email=customer_email, **return_urls(base_url))

def to_unit_amount(price: Decimal) -> int:
    """Prix -> centimes (arrondi au plus proche)."""
    return int((Decimal(price) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def to_line_items(request: CheckoutRequest, currency: str = CHECKOUT_CURRENCY) -> List[Dict[str, Any]]:
    """
    Construit les line_items Stripe (price_data) à partir des articles.
    unit_amount en centimes, product_data.name = nom du produit.
    """
    return [
        {
            "price_data": {
                "currency": currency,
                "product_data": {"name": item.name},
                "unit_amount": to_unit_amount(item.unit_price),
            },
            "quantity": item.quantity,
        }
        for item in request.items
    ]

def make_metadata(customer_email: str) -> Dict[str, str]:
    return {"customer_email": customer_email}
