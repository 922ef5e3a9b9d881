"""
Registre central des routers.
- API v1: catalog, cart, payments, bookings, membership, shop, tools, notifications
- Health: health_router
"""
from fastapi import FastAPI
from gym_backend.catalog import views as catalog_views
from gym_backend.cart import views as cart_views
from gym_backend.payments import views as payments_views
from gym_backend.bookings import views as bookings_views
from gym_backend.membership import views as membership_views
from gym_backend.shop import views as shop_views
from gym_backend.tools import views as tools_views
from gym_backend.notifications import views as notifications_views
from gym_backend.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    # API v1
    app.include_router(catalog_views.router)
    app.include_router(cart_views.router)
    app.include_router(payments_views.router)
    app.include_router(bookings_views.router)
    app.include_router(membership_views.router)
    app.include_router(shop_views.router)
    app.include_router(tools_views.router)
    app.include_router(notifications_views.router)
    # Health & monitoring
    app.include_router(health_router)
