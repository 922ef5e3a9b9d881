from fastapi import APIRouter, Depends, Request

from gym_backend.cart.session import get_cart, save_cart
from gym_backend.cart.store import CartStore
from gym_backend.shop import service as shop_service
from gym_backend.utils.rate_limit import optional_rate_limit
from gym_backend.validation.contact import ContactInfo

router = APIRouter(prefix="/api/v1/shop", tags=["Shop API"])

@router.post("/pickup", dependencies=[Depends(optional_rate_limit(times=5, seconds=60))])
def place_pickup_order(request: Request, contact: ContactInfo, cart: CartStore = Depends(get_cart)):
    """Commande retrait en salle à partir du panier de session. Le panier n'est vidé qu'en cas de succès."""
    result = shop_service.place_pickup_order(cart, contact, request.session)
    save_cart(request, cart)
    return result
