"""
Demande d'information sur un abonnement: aucune écriture en base,
seul l'email au propriétaire est envoyé (best-effort).
"""
import logging
from typing import Any, Dict

from gym_backend.errors import NotFoundError
from gym_backend.notifications import email as notify
from gym_backend.validation.contact import ContactInfo, ensure_valid_contact
from .plans import find_plan

logger = logging.getLogger(__name__)


def submit_inquiry(plan_name: str, contact: ContactInfo) -> Dict[str, Any]:
    plan = find_plan(plan_name)
    if not plan:
        raise NotFoundError(f"Unknown membership plan: {plan_name}", title="Plan Not Found")
    contact = ensure_valid_contact(contact, require_phone=True)

    sent = notify.send_best_effort(
        notify.send_membership_notification,
        customer_name=contact.name,
        customer_email=contact.email,
        customer_phone=contact.phone or "",
        plan_name=plan.name,
        plan_price=plan.price,
    )
    logger.info("membership.inquiry plan=%s email=%s notified=%s", plan.name, contact.email, sent)
    return {
        "plan": plan.name,
        "title": "Inquiry Submitted Successfully!",
        "description": (
            f"Thank you {contact.name}! We've received your interest in the {plan.name} plan. "
            "Our team will contact you soon."
        ),
    }
