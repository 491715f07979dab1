"""Catalog service for product queries.

High-level service that combines repository lookups with filter and
pagination parameters. This is the ``productService`` the HTTP layer
talks to.
"""

from dataclasses import dataclass, field

from stackshop.catalog.models import Product
from stackshop.catalog.repository import ProductRepository


@dataclass
class ProductFilter:
    """Filter parameters for product search.

    Empty strings are normalized to None so that an absent query parameter
    and an empty one mean the same thing.

    Attributes:
        search: Case-insensitive substring of the title.
        category: Exact category name.
        sub_category: Exact subcategory name.
    """

    search: str | None = None
    category: str | None = None
    sub_category: str | None = None

    def __post_init__(self) -> None:
        self.search = self.search or None
        self.category = self.category or None
        self.sub_category = self.sub_category or None


@dataclass
class PaginationParams:
    """Offset-based pagination parameters.

    Attributes:
        limit: Items per page.
        offset: Number of items to skip.
    """

    limit: int = 20
    offset: int = 0


@dataclass
class PaginatedResult:
    """Paginated result container.

    Attributes:
        products: Products in the requested window.
        total: Size of the filtered set, independent of the window.
        limit: Applied page size.
        offset: Applied offset.
    """

    products: list[Product] = field(default_factory=list)
    total: int = 0
    limit: int = 20
    offset: int = 0

    @property
    def has_more(self) -> bool:
        """Check if there are products after this window."""
        return self.offset + self.limit < self.total


class ProductService:
    """Service for catalog read operations.

    Example usage:
        service = ProductService(ProductRepository.from_file())
        result = service.list_products(
            ProductFilter(search="chair"),
            PaginationParams(limit=20, offset=0),
        )
    """

    def __init__(self, repository: ProductRepository) -> None:
        """Initialize service with a repository.

        Args:
            repository: Product repository.
        """
        self.repository = repository

    def get_by_id(self, sku: str) -> Product | None:
        """Get product by SKU.

        Args:
            sku: Product SKU.

        Returns:
            Product if found, None otherwise.
        """
        return self.repository.get_by_sku(sku)

    def list_products(
        self,
        filters: ProductFilter,
        pagination: PaginationParams,
    ) -> PaginatedResult:
        """List products matching filters within a pagination window.

        Args:
            filters: Filter parameters.
            pagination: Pagination parameters.

        Returns:
            Page of products plus the filtered total.
        """
        products, total = self.repository.find_page(
            search=filters.search,
            category=filters.category,
            sub_category=filters.sub_category,
            limit=pagination.limit,
            offset=pagination.offset,
        )

        return PaginatedResult(
            products=products,
            total=total,
            limit=pagination.limit,
            offset=pagination.offset,
        )

    def list_categories(self) -> list[str]:
        """Get distinct category names."""
        return self.repository.get_categories()

    def list_subcategories(self, category: str | None = None) -> list[str]:
        """Get distinct subcategory names within a category.

        Args:
            category: Category name. All subcategories when empty.

        Returns:
            List of subcategory names.
        """
        return self.repository.get_subcategories(category or None)

    @property
    def product_count(self) -> int:
        """Get number of products in the catalog."""
        return len(self.repository)


# Global service instance
_product_service: ProductService | None = None


def get_product_service(data_path: str | None = None) -> ProductService:
    """Get or create the product service instance.

    Args:
        data_path: Dataset path used on first creation. Defaults to the
            bundled sample dataset.

    Returns:
        ProductService instance.
    """
    global _product_service
    if _product_service is None:
        _product_service = ProductService(ProductRepository.from_file(data_path))
    return _product_service
