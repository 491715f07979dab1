"""Product Catalog Service.

Loads the static product dataset and answers search, filter and
pagination queries over it.
"""

from stackshop.catalog.exceptions import CatalogDataError, CatalogError
from stackshop.catalog.models import Product
from stackshop.catalog.repository import ProductRepository
from stackshop.catalog.service import (
    PaginatedResult,
    PaginationParams,
    ProductFilter,
    ProductService,
    get_product_service,
)

__all__ = [
    # Errors
    "CatalogError",
    "CatalogDataError",
    # Models
    "Product",
    # Repository
    "ProductRepository",
    # Service
    "PaginatedResult",
    "PaginationParams",
    "ProductFilter",
    "ProductService",
    "get_product_service",
]
