"""
Commande boutique avec retrait en salle (paiement sur place).
Écriture de la commande 'pickup' et de ses lignes, email au propriétaire, panier vidé.
"""
import logging
from typing import Any, Dict, MutableMapping

from gym_backend.cart.store import CartStore
from gym_backend.errors import RemoteWriteError, ValidationError
from gym_backend.notifications import email as notify
from gym_backend.notifications.toasts import push_toast
from gym_backend.payments import repository as orders_repository
from gym_backend.validation.contact import ContactInfo, ensure_valid_contact

logger = logging.getLogger(__name__)

PICKUP_STATUS = "pickup"


def place_pickup_order(cart: CartStore, contact: ContactInfo, session: MutableMapping[str, Any]) -> Dict[str, Any]:
    contact = ensure_valid_contact(contact, require_phone=True)
    if cart.is_empty():
        raise ValidationError("cart empty", title="Cart Empty")

    total = cart.get_total_price()
    order = orders_repository.insert_order(
        customer_email=contact.email,
        total_amount=total,
        status=PICKUP_STATUS,
    )
    if not order:
        raise RemoteWriteError("Failed to place your order. Please try again.", title="Order Error")
    order_id = str(order.get("id"))
    lines = cart.items()
    saved = orders_repository.insert_order_items(
        order_id,
        [{"product_id": l.product_id, "quantity": l.quantity, "price": l.unit_price} for l in lines],
    )
    if not saved:
        # Pas de commande sans lignes
        if not orders_repository.delete_order(order_id):
            logger.error("shop.pickup orphan order left id=%s", order_id)
        raise RemoteWriteError("Failed to place your order. Please try again.", title="Order Error")
    logger.info("shop.pickup order=%s items=%s total=%s", order_id, cart.total_items, total)

    notify.send_best_effort(
        notify.send_shop_notification,
        customer_name=contact.name,
        customer_email=contact.email,
        customer_phone=contact.phone or "",
        items=[
            {"name": l.name, "quantity": l.quantity, "price": l.unit_price, "total": l.line_total}
            for l in lines
        ],
        total_amount=total,
        total_items=cart.total_items,
    )
    cart.clear_cart()
    push_toast(
        session,
        "Order Placed!",
        f"Thank you {contact.name}! Your order is reserved for pickup at the gym. Pay when you collect it.",
    )
    return {"order_id": order_id, "total_amount": str(total)}
