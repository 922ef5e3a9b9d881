"""Endpoints du panier de session (aucune persistance en base)."""
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from gym_backend.cart.session import get_cart, save_cart
from gym_backend.cart.store import CartItemIn, CartStore
from gym_backend.catalog import repository as catalog_repository
from gym_backend.catalog.models import Product
from gym_backend.errors import NotFoundError, ValidationError

router = APIRouter(prefix="/api/v1/cart", tags=["Cart API"])


class AddItemIn(BaseModel):
    product_id: int


class QuantityIn(BaseModel):
    quantity: int


@router.get("")
def read_cart(cart: CartStore = Depends(get_cart)):
    return cart.summary()

@router.post("/items")
def add_item(body: AddItemIn, request: Request, cart: CartStore = Depends(get_cart)):
    """
    Ajoute un produit (quantité +1 s'il est déjà présent).
    Le stock est lu au moment de l'ajout; il n'est ni réservé ni revérifié ensuite.
    """
    row = catalog_repository.get_product(body.product_id)
    if not row or row.get("active") is False:
        raise NotFoundError("Product not found")
    product = Product.model_validate(row)
    if not product.in_stock:
        raise ValidationError("out of stock", title="Out of Stock")
    cart.add_item(CartItemIn(
        product_id=product.id,
        name=product.name,
        unit_price=product.price,
        image_ref=product.image_url or "",
    ))
    save_cart(request, cart)
    summary = cart.summary()
    summary["toast"] = {"title": "Added to Cart", "description": f"{product.name} has been added to your cart."}
    return summary

@router.patch("/items/{product_id}")
def update_quantity(product_id: int, body: QuantityIn, request: Request, cart: CartStore = Depends(get_cart)):
    cart.update_quantity(product_id, body.quantity)
    save_cart(request, cart)
    return cart.summary()

@router.delete("/items/{product_id}")
def remove_item(product_id: int, request: Request, cart: CartStore = Depends(get_cart)):
    cart.remove_item(product_id)
    save_cart(request, cart)
    return cart.summary()

@router.delete("")
def clear_cart(request: Request, cart: CartStore = Depends(get_cart)):
    cart.clear_cart()
    save_cart(request, cart)
    return cart.summary()
