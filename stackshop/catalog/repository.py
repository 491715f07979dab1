"""In-memory product repository.

Loads the static product dataset from JSON once and answers filtered,
windowed queries over it.
"""

import json
from collections.abc import Iterable
from pathlib import Path

import structlog
from pydantic import ValidationError

from stackshop.catalog.exceptions import CatalogDataError
from stackshop.catalog.models import Product

logger = structlog.get_logger()

DEFAULT_DATA_PATH = Path(__file__).parent / "data" / "sample-products.json"


class ProductRepository:
    """Repository over an in-memory list of products.

    Keeps products in dataset order and indexes them by SKU.

    Example usage:
        repo = ProductRepository.from_file()
        products, total = repo.find_page(category="Electronics", limit=20)
    """

    def __init__(self, products: Iterable[Product]) -> None:
        """Initialize repository with products.

        Args:
            products: Products in display order.

        Raises:
            CatalogDataError: If two products share a SKU.
        """
        self._products: list[Product] = []
        self._by_sku: dict[str, Product] = {}

        for product in products:
            if product.stackline_sku in self._by_sku:
                raise CatalogDataError(
                    "<memory>",
                    "duplicate SKU",
                    sku=product.stackline_sku,
                )
            self._products.append(product)
            self._by_sku[product.stackline_sku] = product

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> "ProductRepository":
        """Load a repository from a JSON array of product records.

        Args:
            path: Dataset path. Defaults to the bundled sample dataset.

        Returns:
            Loaded repository.

        Raises:
            CatalogDataError: If the file is missing or malformed.
        """
        source = Path(path) if path else DEFAULT_DATA_PATH

        try:
            raw = json.loads(source.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise CatalogDataError(str(source), "file not found")
        except json.JSONDecodeError as e:
            raise CatalogDataError(str(source), f"invalid JSON: {e.msg}", line=e.lineno)

        if not isinstance(raw, list):
            raise CatalogDataError(str(source), "expected a JSON array of products")

        products = []
        for index, record in enumerate(raw):
            try:
                products.append(Product.model_validate(record))
            except ValidationError as e:
                raise CatalogDataError(
                    str(source),
                    "invalid product record",
                    index=index,
                    errors=e.errors(include_url=False),
                )

        try:
            repository = cls(products)
        except CatalogDataError as e:
            raise CatalogDataError(str(source), "duplicate SKU", sku=e.details.get("sku"))

        logger.info(
            "Catalog loaded",
            source=str(source),
            product_count=len(repository),
        )
        return repository

    def __len__(self) -> int:
        return len(self._products)

    def get_by_sku(self, sku: str) -> Product | None:
        """Get product by SKU.

        Args:
            sku: Product SKU.

        Returns:
            Product if found, None otherwise.
        """
        return self._by_sku.get(sku)

    def find_page(
        self,
        search: str | None = None,
        category: str | None = None,
        sub_category: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Product], int]:
        """Find a window of products matching filters.

        Args:
            search: Case-insensitive substring of the title.
            category: Exact category name.
            sub_category: Exact subcategory name.
            limit: Maximum results, None for all.
            offset: Number of matching products to skip.

        Returns:
            Tuple of (products in dataset order, total matching count).
        """
        matches = self._filter(search, category, sub_category)
        end = None if limit is None else offset + limit
        return matches[offset:end], len(matches)

    def get_categories(self) -> list[str]:
        """Get sorted distinct category names."""
        return sorted({p.category_name for p in self._products})

    def get_subcategories(self, category: str | None = None) -> list[str]:
        """Get sorted distinct subcategory names.

        Args:
            category: Restrict to this category. All subcategories when None.

        Returns:
            List of subcategory names.
        """
        return sorted(
            {
                p.sub_category_name
                for p in self._products
                if category is None or p.category_name == category
            }
        )

    def _filter(
        self,
        search: str | None,
        category: str | None,
        sub_category: str | None,
    ) -> list[Product]:
        filtered = self._products

        if category:
            filtered = [p for p in filtered if p.category_name == category]

        if sub_category:
            filtered = [p for p in filtered if p.sub_category_name == sub_category]

        if search:
            search_lower = search.lower()
            filtered = [p for p in filtered if search_lower in p.title.lower()]

        return list(filtered)
