from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from pydantic import Field

from gym_backend.membership import service as membership_service
from gym_backend.membership.plans import PLANS
from gym_backend.utils.rate_limit import optional_rate_limit
from gym_backend.validation.contact import ContactInfo

router = APIRouter(prefix="/api/v1/membership", tags=["Membership API"])


class InquiryIn(ContactInfo):
    plan_name: str = Field(alias="planName")


@router.get("/plans")
def list_plans() -> List[Dict[str, Any]]:
    return [p.model_dump() for p in PLANS]

@router.post("/inquiries", dependencies=[Depends(optional_rate_limit(times=5, seconds=60))])
def submit_inquiry(body: InquiryIn):
    """
    Demande d'abonnement: {"planName", "customerName", "customerEmail", "customerPhone"}.
    Les trois coordonnées sont validées indépendamment (400 avec le détail par champ).
    """
    contact = ContactInfo(name=body.name, email=body.email, phone=body.phone)
    return membership_service.submit_inquiry(body.plan_name, contact)
