"""
Liaison panier <-> session navigateur (cookie signé de SessionMiddleware).
Le panier vit le temps de la session: rien n'est écrit en base.
"""
from fastapi import Request

from .store import CartStore

CART_SESSION_KEY = "cart"


def get_cart(request: Request) -> CartStore:
    """Dépendance FastAPI: charge le panier de la session courante."""
    return CartStore.from_list(request.session.get(CART_SESSION_KEY))


def save_cart(request: Request, cart: CartStore) -> None:
    """À appeler après chaque mutation pour que le cookie de session soit réécrit."""
    request.session[CART_SESSION_KEY] = cart.to_list()
