"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from stackshop.api.dependencies import get_products
from stackshop.catalog import ProductService
from stackshop.infrastructure.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str
    product_count: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    products: Annotated[ProductService, Depends(get_products)],
) -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name, version and catalog size.
    """
    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        version=settings.api_version,
        product_count=products.product_count,
    )
