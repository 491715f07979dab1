"""Tests for the product service."""

from unittest.mock import patch

from stackshop.catalog import (
    PaginationParams,
    ProductFilter,
    ProductService,
    get_product_service,
)


class TestProductFilter:
    """Tests for ProductFilter normalization."""

    def test_empty_strings_become_none(self):
        """Test blank filter values are absent."""
        filters = ProductFilter(search="", category="", sub_category="")

        assert filters.search is None
        assert filters.category is None
        assert filters.sub_category is None


class TestProductService:
    """Tests for ProductService operations."""

    def test_get_by_id(self, product_service: ProductService):
        """Test single product lookup."""
        product = product_service.get_by_id("SKU-4")

        assert product is not None
        assert product.title == "Wireless Headphones"

    def test_get_by_id_not_found(self, product_service: ProductService):
        """Test unknown SKU returns None."""
        assert product_service.get_by_id("missing") is None

    def test_list_products_total_independent_of_page(self, product_service: ProductService):
        """Test total reflects the filtered set, not the page."""
        result = product_service.list_products(
            ProductFilter(search="chair"),
            PaginationParams(limit=2, offset=0),
        )

        assert len(result.products) == 2
        assert result.total == 3
        assert result.has_more is True

    def test_list_products_last_page(self, product_service: ProductService):
        """Test the last page has no more products."""
        result = product_service.list_products(
            ProductFilter(search="chair"),
            PaginationParams(limit=2, offset=2),
        )

        assert [p.stackline_sku for p in result.products] == ["SKU-5"]
        assert result.total == 3
        assert result.has_more is False

    def test_list_products_filters_once(self, product_service: ProductService):
        """Test the page and its total come from a single filtering pass."""
        repository = product_service.repository

        with patch.object(repository, "_filter", wraps=repository._filter) as filter_mock:
            result = product_service.list_products(
                ProductFilter(category="Furniture"),
                PaginationParams(limit=1, offset=0),
            )

        filter_mock.assert_called_once()
        assert result.total == 3
        assert len(result.products) == 1

    def test_list_products_category_and_subcategory(self, product_service: ProductService):
        """Test filtering by category and subcategory."""
        result = product_service.list_products(
            ProductFilter(category="Furniture", sub_category="Desks"),
            PaginationParams(),
        )

        assert [p.stackline_sku for p in result.products] == ["SKU-2"]
        assert result.total == 1

    def test_list_categories(self, product_service: ProductService):
        """Test distinct categories."""
        assert product_service.list_categories() == ["Electronics", "Furniture", "Outdoors"]

    def test_list_subcategories(self, product_service: ProductService):
        """Test subcategories within a category."""
        assert product_service.list_subcategories("Furniture") == ["Desks", "Office Chairs"]

    def test_list_subcategories_blank_category_lists_all(self, product_service: ProductService):
        """Test blank category lists every subcategory."""
        assert len(product_service.list_subcategories("")) == 4

    def test_product_count(self, product_service: ProductService):
        """Test catalog size."""
        assert product_service.product_count == 5


class TestGetProductService:
    """Tests for the global service accessor."""

    def test_returns_singleton(self):
        """Test the service is created once."""
        assert get_product_service() is get_product_service()

    def test_uses_bundled_dataset_by_default(self):
        """Test default dataset."""
        assert get_product_service().product_count == 36
