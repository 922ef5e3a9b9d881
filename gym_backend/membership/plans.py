from typing import List, Optional

from pydantic import BaseModel


class MembershipPlan(BaseModel):
    name: str
    price: str
    period: str = "month"
    description: str
    features: List[str]
    popular: bool = False


PLANS: List[MembershipPlan] = [
    MembershipPlan(
        name="Basic",
        price="29",
        description="Perfect for getting started with your fitness journey",
        features=[
            "Access to gym equipment",
            "Basic locker room access",
            "Free parking",
            "Online workout tracking",
        ],
    ),
    MembershipPlan(
        name="Premium",
        price="49",
        description="Most popular choice with added benefits",
        features=[
            "All Basic features",
            "Group fitness classes",
            "Personal training consultation",
            "Nutritional guidance",
            "Priority booking",
            "Guest passes (2 per month)",
        ],
        popular=True,
    ),
    MembershipPlan(
        name="Elite",
        price="79",
        description="Ultimate fitness experience with VIP treatment",
        features=[
            "All Premium features",
            "Unlimited personal training",
            "Massage therapy sessions",
            "VIP locker room access",
            "Unlimited guest passes",
            "Custom meal planning",
            "24/7 gym access",
        ],
    ),
]


def find_plan(name: str) -> Optional[MembershipPlan]:
    wanted = (name or "").strip().lower()
    return next((p for p in PLANS if p.name.lower() == wanted), None)
