"""Product endpoints.

Lists products with search, category filters and offset pagination,
and looks up single products by SKU.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from stackshop.api.dependencies import get_products
from stackshop.api.schemas import ErrorResponse, ProductListResponse
from stackshop.catalog import PaginationParams, Product, ProductFilter, ProductService
from stackshop.infrastructure.config import settings

logger = structlog.get_logger()

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=ProductListResponse)
async def list_products(
    products: Annotated[ProductService, Depends(get_products)],
    search: Annotated[str | None, Query()] = None,
    category: Annotated[str | None, Query()] = None,
    sub_category: Annotated[str | None, Query(alias="subCategory")] = None,
    limit: Annotated[int, Query(ge=1, le=settings.max_page_size)] = settings.default_page_size,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> ProductListResponse:
    """List products with filtering and pagination.

    Args:
        search: Case-insensitive substring of the title.
        category: Exact category name.
        sub_category: Exact subcategory name.
        limit: Page size.
        offset: Number of matching products to skip.

    Returns:
        Page of products and the filtered total.
    """
    result = products.list_products(
        ProductFilter(search=search, category=category, sub_category=sub_category),
        PaginationParams(limit=limit, offset=offset),
    )

    logger.debug(
        "Products listed",
        search=search,
        category=category,
        sub_category=sub_category,
        limit=limit,
        offset=offset,
        total=result.total,
        has_more=result.has_more,
    )

    return ProductListResponse(products=result.products, total=result.total)


@router.get(
    "/{sku}",
    response_model=Product,
    responses={404: {"model": ErrorResponse}},
)
async def get_product(
    sku: str,
    products: Annotated[ProductService, Depends(get_products)],
) -> Product:
    """Get product details by SKU.

    Args:
        sku: Product SKU.

    Returns:
        Product details.

    Raises:
        HTTPException: If product not found.
    """
    product = products.get_by_id(sku)
    if product is None:
        logger.info("Product not found", sku=sku)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error_code": "PRODUCT_NOT_FOUND",
                "message": "Product not found",
                "details": [{"sku": sku}],
            },
        )
    return product
