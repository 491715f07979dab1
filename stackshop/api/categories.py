"""Category endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from stackshop.api.dependencies import get_products
from stackshop.api.schemas import CategoryListResponse, SubCategoryListResponse
from stackshop.catalog import ProductService

router = APIRouter(prefix="/api", tags=["Categories"])


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories(
    products: Annotated[ProductService, Depends(get_products)],
) -> CategoryListResponse:
    """List distinct category names."""
    return CategoryListResponse(categories=products.list_categories())


@router.get("/subcategories", response_model=SubCategoryListResponse)
async def list_subcategories(
    products: Annotated[ProductService, Depends(get_products)],
    category: Annotated[str | None, Query()] = None,
) -> SubCategoryListResponse:
    """List distinct subcategory names.

    Args:
        category: Category to scope to. All subcategories when omitted.

    Returns:
        Subcategory names.
    """
    return SubCategoryListResponse(
        sub_categories=products.list_subcategories(category),
    )
