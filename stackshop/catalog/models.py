"""Product model for the catalog.

Products are read-only from the API's point of view. The wire format uses
camelCase keys (``stacklineSku``, ``categoryName``, ...) while Python code
uses snake_case attributes.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Product(BaseModel):
    """A catalog product.

    Attributes:
        stackline_sku: Unique product identifier.
        title: Product title.
        category_name: Top-level category.
        sub_category_name: Subcategory within the category.
        image_urls: Ordered image URLs.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    stackline_sku: str = Field(..., min_length=1, description="Unique product SKU")
    title: str = Field(..., description="Product title")
    category_name: str = Field(..., description="Category name")
    sub_category_name: str = Field(..., description="Subcategory name")
    image_urls: list[str] = Field(default_factory=list, description="Product image URLs")
