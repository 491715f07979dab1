"""Tests for product API endpoints."""

from fastapi.testclient import TestClient


class TestListProducts:
    """Tests for GET /api/products."""

    def test_list_products(self, client: TestClient):
        """Test listing products with default pagination."""
        response = client.get("/api/products")

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"products", "total"}
        assert data["total"] == 36
        assert len(data["products"]) == 20

    def test_products_use_camel_case_keys(self, client: TestClient):
        """Test product JSON keys."""
        response = client.get("/api/products?limit=1")

        product = response.json()["products"][0]
        assert set(product) == {
            "stacklineSku",
            "title",
            "categoryName",
            "subCategoryName",
            "imageUrls",
        }

    def test_list_products_pagination(self, client: TestClient):
        """Test limit and offset."""
        first = client.get("/api/products?limit=20&offset=0").json()
        second = client.get("/api/products?limit=20&offset=20").json()

        assert len(first["products"]) == 20
        assert len(second["products"]) == 16
        assert first["total"] == second["total"] == 36

        first_skus = {p["stacklineSku"] for p in first["products"]}
        second_skus = {p["stacklineSku"] for p in second["products"]}
        assert not first_skus & second_skus

    def test_list_products_search(self, client: TestClient):
        """Test case-insensitive title search."""
        response = client.get("/api/products?search=CHAIR")

        data = response.json()
        assert data["total"] == 6
        for item in data["products"]:
            assert "chair" in item["title"].lower()

    def test_list_products_filter_by_category(self, client: TestClient):
        """Test filtering by category."""
        response = client.get("/api/products", params={"category": "Furniture"})

        data = response.json()
        assert data["total"] == 9
        for item in data["products"]:
            assert item["categoryName"] == "Furniture"

    def test_list_products_filter_by_subcategory(self, client: TestClient):
        """Test filtering by category and subcategory."""
        response = client.get(
            "/api/products",
            params={"category": "Furniture", "subCategory": "Office Chairs"},
        )

        data = response.json()
        assert data["total"] == 4
        for item in data["products"]:
            assert item["subCategoryName"] == "Office Chairs"

    def test_search_within_category(self, client: TestClient):
        """Test search and category combine."""
        response = client.get(
            "/api/products",
            params={"search": "chair", "category": "Sports & Outdoors"},
        )

        data = response.json()
        assert data["total"] == 1
        assert data["products"][0]["stacklineSku"] == "R1L7X3EW8"

    def test_empty_params_mean_no_filter(self, client: TestClient):
        """Test empty query parameters do not filter."""
        response = client.get("/api/products?search=&category=&subCategory=")

        assert response.json()["total"] == 36

    def test_no_matches(self, client: TestClient):
        """Test a search with no matches."""
        response = client.get("/api/products?search=zzzz-no-such-product")

        assert response.status_code == 200
        assert response.json() == {"products": [], "total": 0}

    def test_invalid_limit_rejected(self, client: TestClient):
        """Test out-of-range limit is a validation error."""
        response = client.get("/api/products?limit=0")

        assert response.status_code == 422
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["error"] == "Invalid request parameters"

    def test_negative_offset_rejected(self, client: TestClient):
        """Test negative offset is a validation error."""
        response = client.get("/api/products?offset=-20")

        assert response.status_code == 422


class TestGetProduct:
    """Tests for GET /api/products/{sku}."""

    def test_get_product(self, client: TestClient):
        """Test getting a single product."""
        response = client.get("/api/products/Z9W5L3TC8")

        assert response.status_code == 200
        data = response.json()
        assert data["stacklineSku"] == "Z9W5L3TC8"
        assert data["categoryName"] == "Furniture"
        assert data["subCategoryName"] == "Office Chairs"
        assert len(data["imageUrls"]) == 3

    def test_get_product_not_found(self, client: TestClient):
        """Test unknown SKU returns 404."""
        response = client.get("/api/products/NOPE")

        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "Product not found"
        assert data["error_code"] == "PRODUCT_NOT_FOUND"
        assert data["details"] == [{"sku": "NOPE"}]
        assert data["request_id"] == response.headers["X-Request-ID"]
