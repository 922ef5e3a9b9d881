"""
Panier: collection de lignes (une par produit) et totaux dérivés.
Logique pure, aucune E/S: la persistance pendant la session navigateur est
assurée par gym_backend.cart.session.
"""
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CartItemIn(BaseModel):
    """Produit à ajouter au panier (ligne sans quantité)."""

    product_id: int
    name: str
    unit_price: Decimal = Field(ge=0)
    image_ref: str = ""


class CartLineItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: int
    name: str
    unit_price: Decimal = Field(ge=0)
    quantity: int = Field(ge=1)
    image_ref: str = ""

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class CartStore:
    """
    Invariants:
    - au plus une ligne par product_id;
    - quantity >= 1 pour toute ligne présente (une mise à jour <= 0 supprime la ligne).
    Seules les opérations ci-dessous modifient le panier; items() renvoie une copie.
    """

    def __init__(self, lines: Optional[Iterable[CartLineItem]] = None):
        self._lines: Dict[int, CartLineItem] = {}
        for line in lines or []:
            self._lines[line.product_id] = line

    def add_item(self, item: CartItemIn) -> CartLineItem:
        existing = self._lines.get(item.product_id)
        if existing:
            line = existing.model_copy(update={"quantity": existing.quantity + 1})
        else:
            line = CartLineItem(
                product_id=item.product_id,
                name=item.name,
                unit_price=item.unit_price,
                quantity=1,
                image_ref=item.image_ref,
            )
        self._lines[item.product_id] = line
        return line

    def update_quantity(self, product_id: int, quantity: int) -> None:
        if quantity <= 0:
            self.remove_item(product_id)
            return
        existing = self._lines.get(product_id)
        if existing:
            self._lines[product_id] = existing.model_copy(update={"quantity": quantity})

    def remove_item(self, product_id: int) -> None:
        self._lines.pop(product_id, None)

    def clear_cart(self) -> None:
        self._lines.clear()

    def get_total_price(self) -> Decimal:
        return sum((line.line_total for line in self._lines.values()), Decimal("0"))

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def items(self) -> Tuple[CartLineItem, ...]:
        return tuple(self._lines.values())

    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    # Sérialisation (cookie de session)
    def to_list(self) -> List[Dict[str, Any]]:
        return [line.model_dump(mode="json") for line in self._lines.values()]

    @classmethod
    def from_list(cls, raw: Optional[Iterable[Dict[str, Any]]]) -> "CartStore":
        lines: List[CartLineItem] = []
        for entry in raw or []:
            try:
                lines.append(CartLineItem.model_validate(entry))
            except ValueError:
                # Ligne corrompue dans le cookie: ignorée
                continue
        return cls(lines)

    def summary(self) -> Dict[str, Any]:
        return {
            "items": self.to_list(),
            "total_items": self.total_items,
            "total_price": str(self.get_total_price()),
        }
