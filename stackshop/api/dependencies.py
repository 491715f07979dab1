"""FastAPI dependencies."""

from stackshop.catalog import ProductService, get_product_service
from stackshop.infrastructure.config import settings


def get_products() -> ProductService:
    """Get product service dependency."""
    return get_product_service(settings.catalog_data_path)
