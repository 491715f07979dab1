"""API routers for the catalog service."""

from stackshop.api.categories import router as categories_router
from stackshop.api.health import router as health_router
from stackshop.api.products import router as products_router

__all__ = [
    "categories_router",
    "health_router",
    "products_router",
]
