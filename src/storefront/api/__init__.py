"""Storefront API package."""

from storefront.api.errors import register_error_handlers
from storefront.api.routes import (
    auth_router,
    cart_router,
    category_router,
    inventory_router,
    misc_router,
    order_router,
    product_router,
)

routers = [
    auth_router,
    category_router,
    product_router,
    inventory_router,
    cart_router,
    order_router,
    misc_router,
]

__all__ = [
    "auth_router",
    "cart_router",
    "category_router",
    "inventory_router",
    "misc_router",
    "order_router",
    "product_router",
    "register_error_handlers",
    "routers",
]
