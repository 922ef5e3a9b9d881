"""
Schémas à la frontière du fournisseur de paiement.

Requête (forme wire): {items:[{id,name,price,quantity}], customerEmail, successUrl, cancelUrl}
Réponse: {url} en cas de succès, {error} sinon -> CheckoutSuccess | CheckoutFailure.
"""
from decimal import Decimal
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class CheckoutItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(alias="id")
    name: str
    unit_price: Decimal = Field(alias="price", ge=0)
    quantity: int = Field(ge=1)

    @field_validator("unit_price", mode="before")
    @classmethod
    def _exact_price(cls, v):
        return str(v) if isinstance(v, float) else v

    @field_serializer("unit_price", when_used="json")
    def _price_as_number(self, value: Decimal) -> float:
        return float(value)


class CheckoutRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: List[CheckoutItem] = Field(default_factory=list)
    customer_email: str = Field(default="", alias="customerEmail")
    success_url: str = Field(default="", alias="successUrl")
    cancel_url: str = Field(default="", alias="cancelUrl")

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

    @property
    def total_amount(self) -> Decimal:
        return sum((i.unit_price * i.quantity for i in self.items), Decimal("0"))


class CheckoutSuccess(BaseModel):
    url: Optional[str] = None
    session_id: Optional[str] = None


class CheckoutFailure(BaseModel):
    error: str = ""


CheckoutResult = Union[CheckoutSuccess, CheckoutFailure]


def parse_checkout_response(data: Optional[dict]) -> CheckoutResult:
    """Convertit la réponse brute {url, sessionId} / {error} en résultat typé."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return CheckoutFailure(error="Invalid response from checkout function")
    if data.get("error"):
        return CheckoutFailure(error=str(data.get("error")))
    return CheckoutSuccess(url=data.get("url"), session_id=data.get("sessionId") or data.get("id"))
