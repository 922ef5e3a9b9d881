"""Endpoints publics du catalogue: produits de la boutique et cours collectifs."""
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from gym_backend.bookings.status import BookingStatusTracker, get_status_tracker
from gym_backend.catalog import repository as catalog_repository
from gym_backend.catalog.models import GymClass, Product

router = APIRouter(prefix="/api/v1", tags=["Catalog API"])

@router.get("/products")
def list_products() -> List[Dict[str, Any]]:
    """Produits actifs triés par id (stock inclus pour griser le bouton 'Add to Cart')."""
    products = [Product.model_validate(p) for p in catalog_repository.list_products()]
    return [dict(p.model_dump(mode="json"), in_stock=p.in_stock) for p in products]

@router.get("/classes")
def list_classes(tracker: BookingStatusTracker = Depends(get_status_tracker)) -> List[Dict[str, Any]]:
    """
    Cours actifs triés par id, chacun avec son état de réservation
    (idle / booking / booked / full).
    """
    classes = [GymClass.model_validate(c) for c in catalog_repository.list_classes()]
    return [
        dict(c.model_dump(mode="json"), booking_status=tracker.status(c.id, available_slots=c.available_slots).value)
        for c in classes
    ]
