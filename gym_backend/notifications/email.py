"""
Emails de notification au propriétaire de la salle (Resend, via httpx).

- send_booking_notification: nouvelle réservation de cours
- send_membership_notification: demande d'information sur un abonnement
- send_shop_notification: commande boutique (retrait en salle)

Les envois sont des effets secondaires: les appelants passent par send_best_effort(),
qui journalise l'échec sans jamais bloquer ni annuler l'action principale.
"""
import logging
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional

import httpx
from jinja2 import Environment, FileSystemLoader, select_autoescape

from gym_backend.config import RESEND_API_KEY, RESEND_API_URL, NOTIFY_FROM, NOTIFY_TO, TEMPLATES_DIR
from gym_backend.errors import NotificationDeliveryError

logger = logging.getLogger(__name__)

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR / "emails")),
    autoescape=select_autoescape(["html"]),
)


def render(template_name: str, **context: Any) -> str:
    return _env.get_template(template_name).render(**context)


def send_email(subject: str, html: str, *, to: Optional[List[str]] = None) -> Dict[str, Any]:
    """
    POST https://api.resend.com/emails.
    Lève NotificationDeliveryError si la clé manque ou si le fournisseur répond en erreur.
    """
    if not RESEND_API_KEY:
        raise NotificationDeliveryError("Email service not configured")
    payload = {"from": NOTIFY_FROM, "to": to or NOTIFY_TO, "subject": subject, "html": html}
    headers = {"Authorization": f"Bearer {RESEND_API_KEY}", "Content-Type": "application/json"}
    try:
        resp = httpx.post(RESEND_API_URL, json=payload, headers=headers, timeout=10)
    except httpx.HTTPError as e:
        raise NotificationDeliveryError(f"Email provider unreachable: {e}") from e
    if resp.status_code >= 400:
        raise NotificationDeliveryError(f"Email provider error {resp.status_code}: {resp.text[:200]}")
    try:
        data = resp.json() if resp.content else {}
    except ValueError:
        data = {}
    logger.info("notifications.email sent subject=%r id=%s", subject, data.get("id"))
    return {"success": True, "email_id": data.get("id")}


def send_booking_notification(*, customer_name: str, customer_email: str, class_name: str,
                              class_id: int, booking_time: str) -> Dict[str, Any]:
    html = render(
        "booking.html",
        customer_name=customer_name,
        customer_email=customer_email,
        class_name=class_name,
        class_id=class_id,
        booking_time=booking_time,
    )
    return send_email(f"New Class Booking: {class_name}", html)


def send_membership_notification(*, customer_name: str, customer_email: str, customer_phone: str,
                                 plan_name: str, plan_price: str) -> Dict[str, Any]:
    html = render(
        "membership.html",
        customer_name=customer_name,
        customer_email=customer_email,
        customer_phone=customer_phone,
        plan_name=plan_name,
        plan_price=plan_price,
    )
    return send_email(f"New Membership Plan Interest: {plan_name} Plan", html)


def send_shop_notification(*, customer_name: str, customer_email: str, customer_phone: str,
                           items: List[Dict[str, Any]], total_amount: Decimal, total_items: int) -> Dict[str, Any]:
    html = render(
        "shop.html",
        customer_name=customer_name,
        customer_email=customer_email,
        customer_phone=customer_phone,
        items=items,
        total_amount=total_amount,
        total_items=total_items,
    )
    return send_email(f"New Shop Purchase: {total_items} items - ${total_amount:.2f}", html)


def send_best_effort(send: Callable[..., Dict[str, Any]], **kwargs: Any) -> bool:
    """Exécute un envoi secondaire; l'échec est journalisé puis ignoré."""
    try:
        send(**kwargs)
        return True
    except NotificationDeliveryError:
        logger.exception("notifications.email %s failed (ignored)", getattr(send, "__name__", "send"))
        return False
