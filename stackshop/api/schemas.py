"""Pydantic schemas for the catalog API.

Response bodies use camelCase keys to match the browsing client.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from stackshop.catalog.models import Product


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductListResponse(CamelModel):
    """Page of products plus the filtered total."""

    products: list[Product] = Field(default_factory=list, description="Products in the page")
    total: int = Field(..., ge=0, description="Number of products matching the filters")


class CategoryListResponse(CamelModel):
    """Distinct category names."""

    categories: list[str] = Field(default_factory=list)


class SubCategoryListResponse(CamelModel):
    """Distinct subcategory names within a category."""

    sub_categories: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error response body."""

    error: str = Field(..., description="Human-readable error message")
    error_code: str = Field(..., description="Machine-readable error code")
    details: list = Field(default_factory=list, description="Additional error details")
    request_id: str | None = Field(None, description="Request correlation ID")
