from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Product(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    description: Optional[str] = None
    price: Decimal = Field(ge=0)
    image_url: Optional[str] = None
    stock_quantity: Optional[int] = 0

    @field_validator("price", mode="before")
    @classmethod
    def _exact_price(cls, v):
        # Supabase renvoie un float JSON: 29.99 doit rester 29.99
        return str(v) if isinstance(v, float) else v

    @property
    def in_stock(self) -> bool:
        return (self.stock_quantity or 0) > 0


class GymClass(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    description: Optional[str] = None
    trainer: Optional[str] = None
    difficulty: Optional[str] = None
    duration: Optional[str] = None
    schedule_time: Optional[str] = None
    image_url: Optional[str] = None
    price: Optional[Decimal] = None
    available_slots: Optional[int] = None
    max_slots: Optional[int] = None
    active: Optional[bool] = True
